"""Document Validation — two-pass validation of tasks/state documents and their parts.

Invariants:
    - Pass 1 (schemas): field-level parse after an explicit default merge, collect-all
    - Pass 2 (core rules): runs on the validated value, or, when pass 1 failed,
      on a partial view of the fields that parsed; issues from both passes are
      reported together, field issues first
    - A root that is not a JSON object aborts with a single issue at path ()
    - Every public function returns a ValidationResult; only parse_document raises

Design Decisions:
    - Defaults merged BEFORE validation so "absent → defaulted" is reported
      separately from "present but invalid"
    - Entity rules are rebased onto document paths with prefix_issues so one
      rule implementation serves standalone tasks and whole documents
"""

import logging
from typing import Any, Callable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from taskview.core.domain_types import DocumentSlot, IssueKind
from taskview.core.enforce_state import enforce_state_invariants
from taskview.core.enforce_task import check_task_structure
from taskview.core.enforce_tasks_file import enforce_tasks_file_invariants
from taskview.core.errors import DocumentValidationError
from taskview.core.graph_protocols import TagLike, TasksFileLike
from taskview.core.issues import Issue, ValidationResult, prefix_issues
from taskview.schemas.base import issues_from_validation_error, merge_defaults
from taskview.schemas.partial import (
    partial_state,
    partial_tag,
    partial_task,
    partial_tasks_file,
)
from taskview.schemas.state import (
    AppConfig,
    ProjectMetadata,
    SessionState,
    State,
    UserPreferences,
)
from taskview.schemas.tasks import Subtask, Tag, Task, TasksFile

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

ROOT_NOT_OBJECT = "Expected a JSON object at the document root"


def _validate(
    model: type[M],
    payload: Any,
    rules: Callable[[Any], list[Issue]] | None = None,
    partial: Callable[[Mapping[str, Any]], Any] | None = None,
) -> ValidationResult[M]:
    name = model.__name__
    if not isinstance(payload, Mapping):
        issue = Issue(
            path=(),
            message=f"{ROOT_NOT_OBJECT}, got {type(payload).__name__}",
            kind=IssueKind.TYPE,
        )
        return _finish(name, ValidationResult.failure([issue]))

    merged, defaulted = merge_defaults(model, payload)
    try:
        value = model.model_validate(merged)
    except ValidationError as e:
        issues = issues_from_validation_error(e)
        if rules and partial:
            issues += rules(partial(merged))
        return _finish(name, ValidationResult.failure(issues))

    issues = rules(value) if rules else []
    if issues:
        return _finish(name, ValidationResult.failure(issues))
    return _finish(name, ValidationResult.success(value, defaulted))


def _finish(name: str, result: ValidationResult) -> ValidationResult:
    if result.ok:
        logger.debug(
            f"{name} valid (defaulted: {', '.join(result.defaulted) or 'none'})",
            extra={"slot": name, "issue_count": 0},
        )
    else:
        logger.info(
            f"{name} rejected with {len(result.issues)} issue(s)",
            extra={"slot": name, "issue_count": len(result.issues)},
        )
    return result


# ─── Entity rules rebased onto enclosing paths ──────────────────

def _tag_structure_issues(tag: TagLike) -> list[Issue]:
    issues: list[Issue] = []
    for index, task in enumerate(tag.tasks or ()):
        issues += prefix_issues(("tasks", index), check_task_structure(task))
    return issues


def _tasks_file_issues(tasks_file: TasksFileLike) -> list[Issue]:
    issues: list[Issue] = []
    for tag_name, tag in (tasks_file.tags or {}).items():
        issues += prefix_issues(("tags", tag_name), _tag_structure_issues(tag))
    return issues + enforce_tasks_file_invariants(tasks_file)


# ─── Tasks document family ──────────────────────────────────────

def validate_subtask(payload: Any) -> ValidationResult[Subtask]:
    return _validate(Subtask, payload)


def validate_task(payload: Any) -> ValidationResult[Task]:
    return _validate(Task, payload, check_task_structure, partial_task)


def validate_tag(payload: Any) -> ValidationResult[Tag]:
    """Single tag; exclusivity and uniqueness need sibling tags and are not checked."""
    return _validate(Tag, payload, _tag_structure_issues, partial_tag)


def validate_tasks_file(payload: Any) -> ValidationResult[TasksFile]:
    return _validate(TasksFile, payload, _tasks_file_issues, partial_tasks_file)


# ─── State document family ──────────────────────────────────────

def validate_app_config(payload: Any) -> ValidationResult[AppConfig]:
    return _validate(AppConfig, payload)


def validate_user_preferences(payload: Any) -> ValidationResult[UserPreferences]:
    return _validate(UserPreferences, payload)


def validate_session_state(payload: Any) -> ValidationResult[SessionState]:
    return _validate(SessionState, payload)


def validate_project_metadata(payload: Any) -> ValidationResult[ProjectMetadata]:
    return _validate(ProjectMetadata, payload)


def validate_state(payload: Any) -> ValidationResult[State]:
    return _validate(State, payload, enforce_state_invariants, partial_state)


# ─── Slot dispatch ──────────────────────────────────────────────

_VALIDATORS: dict[DocumentSlot, Callable[[Any], ValidationResult]] = {
    DocumentSlot.TASKS: validate_tasks_file,
    DocumentSlot.STATE: validate_state,
}


def validate_document(slot: DocumentSlot, payload: Any) -> ValidationResult:
    """Validate a decoded JSON document as the given slot."""
    return _VALIDATORS[DocumentSlot(slot)](payload)


def parse_document(slot: DocumentSlot, payload: Any) -> TasksFile | State:
    """Validated value, or DocumentValidationError carrying every issue."""
    slot = DocumentSlot(slot)
    result = validate_document(slot, payload)
    if not result.ok:
        raise DocumentValidationError(slot.value, result.issues)
    return result.value
