"""Task Query Route — filtered, sorted task listing over a validated tasks document.

Invariants:
    - The document is validated first; an invalid document yields 422 with issues
    - Unknown tag names in the filter yield 404
    - counts cover the filtered result, per status
"""

from fastapi import APIRouter

from taskview.core.domain_types import DocumentSlot
from taskview.core.errors import ResourceNotFoundError
from taskview.core.task_queries import (
    TaskFilter,
    TaskSort,
    filter_tasks,
    iter_tasks,
    sort_tasks,
    status_counts,
)
from taskview.schemas.api import TaskQueryItem, TaskQueryRequest, TaskQueryResponse
from taskview.services.validate_documents import parse_document

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


def _as_set(values):
    return frozenset(values) if values is not None else None


@router.post("/query", response_model=TaskQueryResponse)
async def query_tasks(body: TaskQueryRequest):
    """List tasks matching the criteria, sorted."""
    tasks_file = parse_document(DocumentSlot.TASKS, body.document)
    for tag_name in body.tags or []:
        if tag_name not in tasks_file.tags:
            raise ResourceNotFoundError("Tag", tag_name)

    criteria = TaskFilter(
        statuses=_as_set(body.statuses),
        priorities=_as_set(body.priorities),
        has_subtasks=body.has_subtasks,
        depends_on=_as_set(body.depends_on),
        search=body.search,
    )
    entries = sort_tasks(
        filter_tasks(iter_tasks(tasks_file, body.tags), criteria),
        TaskSort(field=body.sort_by, order=body.sort_order),
    )
    return TaskQueryResponse(
        items=[
            TaskQueryItem(tag=tag_name, task=task.to_document())
            for tag_name, task in entries
        ],
        counts=status_counts(task for _, task in entries),
    )
