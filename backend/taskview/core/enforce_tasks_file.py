"""Tasks-File Enforcement — whole-graph consistency rules over the tag map.

Invariants:
    - All functions are PURE: no IO, no mutation, collect-all (never fail-fast)
    - currentTag must be a key of tags
    - Exactly one tag is active; zero and many are reported with different messages
    - Task ids are unique WITHIN a tag; the same id in two tags is legal
    - Every dependency's leading id must match a task in ANY tag (active or not)
    - Values that did not parse (None) are skipped; a rule whose inputs are
      incomplete (an unreadable isActive, an unreadable task id) is not run

Design Decisions:
    - Task-id index built once per pass instead of rescanning per dependency
    - Cross-tag references allowed: a feature tag may depend on master tasks
    - Cycles are not detected; dependency links are plain id lookups
"""

from typing import Mapping

from taskview.core.errors import (
    ExclusivityError,
    ReferentialIntegrityError,
    UniquenessError,
)
from taskview.core.graph_protocols import TagLike, TasksFileLike
from taskview.core.issues import Issue
from taskview.core.primitives import referenced_task_id

AT_LEAST_ONE_ACTIVE = "At least one tag must be active"
ONLY_ONE_ACTIVE = "Only one tag can be active at a time"


def build_task_id_index(tags: Mapping[str, TagLike]) -> dict[str, list[str]]:
    """Map task id (as string) -> names of tags containing it."""
    index: dict[str, list[str]] = {}
    for tag_name, tag in tags.items():
        for task in tag.tasks or ():
            if task.id is not None:
                index.setdefault(str(task.id), []).append(tag_name)
    return index


def task_ids_readable(tags: Mapping[str, TagLike]) -> bool:
    """True when every task id in every tag parsed, i.e. the index is complete."""
    return all(
        tag.tasks is not None and all(task.id is not None for task in tag.tasks)
        for tag in tags.values()
    )


def check_current_tag(tasks_file: TasksFileLike) -> list[Issue]:
    current_tag = tasks_file.current_tag
    if current_tag is None or tasks_file.tags is None or current_tag in tasks_file.tags:
        return []
    return [ReferentialIntegrityError(
        f"Current tag '{current_tag}' must exist in tags", value=current_tag,
    ).to_issue(("currentTag",))]


def check_active_tag_exclusivity(tags: Mapping[str, TagLike]) -> list[Issue]:
    """Both bounds checked independently; a count of exactly 1 is required."""
    if any(tag.is_active is None for tag in tags.values()):
        return []
    active = [name for name, tag in tags.items() if tag.is_active]
    issues: list[Issue] = []
    if len(active) == 0:
        issues.append(ExclusivityError(AT_LEAST_ONE_ACTIVE, value=active).to_issue(("tags",)))
    if len(active) > 1:
        issues.append(ExclusivityError(ONLY_ONE_ACTIVE, value=active).to_issue(("tags",)))
    return issues


def check_unique_task_ids(tag_name: str, tag: TagLike) -> list[Issue]:
    """Flag every occurrence of an id after its first one within the tag."""
    issues: list[Issue] = []
    seen: set[int] = set()
    for task_index, task in enumerate(tag.tasks or ()):
        if task.id is None:
            continue
        if task.id in seen:
            issues.append(UniquenessError(
                f"Duplicate task ID {task.id} found in tag '{tag_name}'",
                value=task.id,
            ).to_issue(("tags", tag_name, "tasks", task_index, "id")))
        seen.add(task.id)
    return issues


def check_dependencies_resolve(
    tag_name: str, tag: TagLike, task_index_by_id: Mapping[str, list[str]],
) -> list[Issue]:
    """Task and subtask dependencies must name a task existing in some tag."""
    issues: list[Issue] = []
    for task_index, task in enumerate(tag.tasks or ()):
        task_path = ("tags", tag_name, "tasks", task_index)
        for dep_index, dep in enumerate(task.dependencies):
            if dep is not None and referenced_task_id(dep) not in task_index_by_id:
                issues.append(ReferentialIntegrityError(
                    f"Task dependency '{dep}' not found in any tag", value=dep,
                ).to_issue((*task_path, "dependencies", dep_index)))
        for subtask_index, subtask in enumerate(task.subtasks):
            for dep_index, dep in enumerate(subtask.dependencies):
                if dep is not None and referenced_task_id(dep) not in task_index_by_id:
                    issues.append(ReferentialIntegrityError(
                        f"Subtask dependency '{dep}' not found in any tag", value=dep,
                    ).to_issue((
                        *task_path, "subtasks", subtask_index,
                        "dependencies", dep_index,
                    )))
    return issues


def enforce_tasks_file_invariants(tasks_file: TasksFileLike) -> list[Issue]:
    """Run every graph-wide rule. Returns issues in discovery order."""
    issues = check_current_tag(tasks_file)
    if tasks_file.tags is None:
        return issues
    issues += check_active_tag_exclusivity(tasks_file.tags)
    task_index_by_id = build_task_id_index(tasks_file.tags)
    resolve = task_ids_readable(tasks_file.tags)
    for tag_name, tag in tasks_file.tags.items():
        issues += check_unique_task_ids(tag_name, tag)
        if resolve:
            issues += check_dependencies_resolve(tag_name, tag, task_index_by_id)
    return issues
