"""Task Queries — read-model helpers the viewer applies to a validated tasks file.

Invariants:
    - All functions are PURE and never mutate the tasks file
    - Sorting is stable; ties keep document order
    - Only validated data reaches these helpers (ids unique per tag, enums valid)
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from taskview.core.domain_types import Priority, SortField, SortOrder, Status
from taskview.core.graph_protocols import QueryableTaskLike, SubtaskLike, TasksFileLike
from taskview.core.primitives import is_subtask_reference, referenced_task_id

TaskEntry = tuple[str, QueryableTaskLike]

_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}
_STATUS_RANK = {status: rank for rank, status in enumerate(Status)}


@dataclass(frozen=True)
class TaskFilter:
    """Criteria combined with AND; None means 'any'."""
    statuses: frozenset[Status] | None = None
    priorities: frozenset[Priority] | None = None
    has_subtasks: bool | None = None
    depends_on: frozenset[str] | None = None
    search: str | None = None


@dataclass(frozen=True)
class TaskSort:
    field: SortField = SortField.ID
    order: SortOrder = SortOrder.ASC


def iter_tasks(
    tasks_file: TasksFileLike, tags: Sequence[str] | None = None,
) -> Iterator[TaskEntry]:
    """Yield (tag name, task) pairs, tag by tag in document order."""
    for tag_name, tag in tasks_file.tags.items():
        if tags is not None and tag_name not in tags:
            continue
        for task in tag.tasks:
            yield tag_name, task


def _matches(task: QueryableTaskLike, criteria: TaskFilter) -> bool:
    if criteria.statuses is not None and task.status not in criteria.statuses:
        return False
    if criteria.priorities is not None and task.priority not in criteria.priorities:
        return False
    if criteria.has_subtasks is not None and bool(task.subtasks) != criteria.has_subtasks:
        return False
    if criteria.depends_on is not None and not criteria.depends_on.intersection(task.dependencies):
        return False
    if criteria.search:
        needle = criteria.search.casefold()
        haystack = f"{task.title}\n{task.description}".casefold()
        if needle not in haystack:
            return False
    return True


def filter_tasks(entries: Iterable[TaskEntry], criteria: TaskFilter) -> list[TaskEntry]:
    return [entry for entry in entries if _matches(entry[1], criteria)]


def _sort_key(field: SortField):
    if field is SortField.ID:
        return lambda entry: entry[1].id
    if field is SortField.TITLE:
        return lambda entry: entry[1].title.casefold()
    if field is SortField.STATUS:
        return lambda entry: _STATUS_RANK[entry[1].status]
    if field is SortField.PRIORITY:
        return lambda entry: _PRIORITY_RANK.get(entry[1].priority, len(_PRIORITY_RANK))
    # Tasks carry no creation timestamp; document order stands in for it.
    return lambda entry: 0


def sort_tasks(entries: Iterable[TaskEntry], sort: TaskSort) -> list[TaskEntry]:
    return sorted(
        entries, key=_sort_key(sort.field), reverse=sort.order is SortOrder.DESC,
    )


def status_counts(tasks: Iterable[QueryableTaskLike]) -> dict[str, int]:
    """Per-status totals, every status present (zero when unused)."""
    counts = {status.value: 0 for status in Status}
    for task in tasks:
        counts[task.status.value] += 1
    return counts


def resolve_dependency(
    tasks_file: TasksFileLike, dependency: str, prefer_tag: str | None = None,
) -> QueryableTaskLike | SubtaskLike | None:
    """Find the task or subtask a dependency points at.

    Task ids repeat across tags, so `prefer_tag` (usually the referrer's tag)
    is searched first, then the rest in document order.
    """
    task_id = referenced_task_id(dependency)
    tag_names = list(tasks_file.tags)
    if prefer_tag in tasks_file.tags:
        tag_names.remove(prefer_tag)
        tag_names.insert(0, prefer_tag)

    for tag_name in tag_names:
        for task in tasks_file.tags[tag_name].tasks:
            if str(task.id) != task_id:
                continue
            if not is_subtask_reference(dependency):
                return task
            subtask_id = dependency.split(".")[1]
            for subtask in task.subtasks:
                if str(subtask.id) == subtask_id:
                    return subtask
    return None
