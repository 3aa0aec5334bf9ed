"""Task Structure Enforcement — intra-task rules between a task and its subtasks.

Invariants:
    - check_task_structure is PURE and collect-all: one Issue per violation
    - Paths are relative to the task (callers rebase with prefix_issues)
    - Subtask dependencies are classified by the presence of '.'
    - Ids and dependencies that did not parse (None) are skipped

Design Decisions:
    - Subtask ids are stored unqualified; ownership is checked on the
      qualified form "{task}.{subtask}" seen by dependencies
"""

from taskview.core.errors import FormatError
from taskview.core.graph_protocols import TaskLike
from taskview.core.issues import Issue
from taskview.core.primitives import (
    is_subtask_reference,
    validate_subtask_id,
    validate_task_id,
)


def qualified_subtask_id(task_id: int, subtask_id: int) -> str:
    """Externally visible id of a subtask: '{parent}.{sub}'."""
    return f"{task_id}.{subtask_id}"


def check_subtask_ownership(task: TaskLike) -> list[Issue]:
    """Every subtask's qualified id must be prefixed by its parent's id."""
    issues: list[Issue] = []
    if task.id is None:
        return issues
    expected_prefix = f"{task.id}."
    for index, subtask in enumerate(task.subtasks):
        if subtask.id is None:
            continue
        if not qualified_subtask_id(task.id, subtask.id).startswith(expected_prefix):
            issues.append(FormatError(
                f"Subtask ID {subtask.id} should belong to task {task.id}",
                value=subtask.id,
            ).to_issue(("subtasks", index, "id")))
    return issues


def check_subtask_dependency_kinds(task: TaskLike) -> list[Issue]:
    """Dotted dependencies must be Subtask Ids, the rest Task Ids."""
    issues: list[Issue] = []
    for index, subtask in enumerate(task.subtasks):
        for dep_index, dep in enumerate(subtask.dependencies):
            if dep is None:
                continue
            path = ("subtasks", index, "dependencies", dep_index)
            if is_subtask_reference(dep):
                try:
                    validate_subtask_id(dep)
                except FormatError:
                    issues.append(FormatError(
                        f"Invalid subtask dependency format: {dep}", value=dep,
                    ).to_issue(path))
            else:
                try:
                    validate_task_id(dep)
                except FormatError:
                    issues.append(FormatError(
                        f"Invalid task dependency format: {dep}", value=dep,
                    ).to_issue(path))
    return issues


def check_task_structure(task: TaskLike) -> list[Issue]:
    return check_subtask_ownership(task) + check_subtask_dependency_kinds(task)
