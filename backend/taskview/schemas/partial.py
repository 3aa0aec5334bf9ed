"""Partial Views — the parts of a document that parsed, for a failed model validation.

Invariants:
    - Each field is parsed on its own with the same annotated type the model uses,
      so a partial view never holds a value the full model would reject
    - A field that does not parse is None; core rules skip None
    - List positions are preserved: an unreadable item still occupies its index,
      so rule paths match the document
    - Absent fields take the model default (nested defaults included)

Design Decisions:
    - Only the fields read by core rules are extracted; everything else
      already produced its own field-level issue
    - Plain frozen dataclasses: they satisfy core/graph_protocols structurally
"""

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, StrictBool, TypeAdapter, ValidationError

from taskview.core.domain_types import DEFAULT_TAG
from taskview.schemas.fields import Dependency, IsoDateTime, PositiveId

_ID = TypeAdapter(PositiveId)
_DEPENDENCY = TypeAdapter(Dependency)
_FLAG = TypeAdapter(StrictBool)
_TEXT = TypeAdapter(str)
_TEXT_LIST = TypeAdapter(list[str])
_DATETIME = TypeAdapter(IsoDateTime)


@dataclass(frozen=True)
class PartialSubtask:
    id: int | None
    dependencies: tuple[str | None, ...] = ()


@dataclass(frozen=True)
class PartialTask(PartialSubtask):
    subtasks: tuple[PartialSubtask, ...] = ()


@dataclass(frozen=True)
class PartialTag:
    tasks: tuple[PartialTask, ...] | None
    is_active: bool | None


@dataclass(frozen=True)
class PartialTasksFile:
    tags: dict[str, PartialTag] | None
    current_tag: str | None


@dataclass(frozen=True)
class PartialSessionState:
    last_active_tag: str | None


@dataclass(frozen=True)
class PartialProjectMetadata:
    updated_at: str | None


@dataclass(frozen=True)
class PartialState:
    current_tag: str | None
    last_switched: str | None
    available_tags: list[str] | None
    session_state: PartialSessionState | None
    project_metadata: PartialProjectMetadata | None


# ─── Readers ────────────────────────────────────────────────────

_ABSENT = object()


def _mapping(raw: Any) -> Mapping[str, Any] | None:
    if isinstance(raw, BaseModel):
        return raw.model_dump(by_alias=True)
    return raw if isinstance(raw, Mapping) else None


def _lookup(raw: Mapping[str, Any], wire: str, attr: str) -> Any:
    if wire in raw:
        return raw[wire]
    return raw.get(attr, _ABSENT)


def _parse(adapter: TypeAdapter, value: Any) -> Any:
    try:
        return adapter.validate_python(value)
    except ValidationError:
        return None


def _read(
    raw: Mapping[str, Any], wire: str, adapter: TypeAdapter,
    attr: str | None = None, default: Any = None,
) -> Any:
    value = _lookup(raw, wire, attr or wire)
    if value is _ABSENT:
        return default
    return _parse(adapter, value)


def _list(raw: Mapping[str, Any], wire: str, attr: str | None = None) -> list | None:
    """Raw list items, [] when absent, None when present but not a list."""
    value = _lookup(raw, wire, attr or wire)
    if value is _ABSENT:
        return []
    return list(value) if isinstance(value, (list, tuple)) else None


def _dependencies(raw: Mapping[str, Any]) -> tuple[str | None, ...]:
    return tuple(_parse(_DEPENDENCY, dep) for dep in _list(raw, "dependencies") or ())


# ─── Tasks document ─────────────────────────────────────────────

def partial_subtask(payload: Any) -> PartialSubtask:
    raw = _mapping(payload)
    if raw is None:
        return PartialSubtask(id=None)
    return PartialSubtask(id=_read(raw, "id", _ID), dependencies=_dependencies(raw))


def partial_task(payload: Any) -> PartialTask:
    raw = _mapping(payload)
    if raw is None:
        return PartialTask(id=None)
    return PartialTask(
        id=_read(raw, "id", _ID),
        dependencies=_dependencies(raw),
        subtasks=tuple(partial_subtask(s) for s in _list(raw, "subtasks") or ()),
    )


def partial_tag(payload: Any) -> PartialTag:
    raw = _mapping(payload)
    if raw is None:
        return PartialTag(tasks=None, is_active=None)
    tasks = _list(raw, "tasks")
    return PartialTag(
        tasks=tuple(partial_task(t) for t in tasks) if tasks is not None else None,
        is_active=_read(raw, "isActive", _FLAG, "is_active", default=False),
    )


def partial_tasks_file(payload: Mapping[str, Any]) -> PartialTasksFile:
    """Expects the payload after merge_defaults (top-level defaults present)."""
    tags = _mapping(payload.get("tags"))
    return PartialTasksFile(
        tags={name: partial_tag(tag) for name, tag in tags.items()} if tags is not None else None,
        current_tag=_read(payload, "currentTag", _TEXT, "current_tag", default=DEFAULT_TAG),
    )


# ─── State document ─────────────────────────────────────────────

def _partial_session_state(payload: Any) -> PartialSessionState | None:
    raw = _mapping(payload)
    if raw is None:
        return None
    return PartialSessionState(last_active_tag=_read(
        raw, "lastActiveTag", _TEXT, "last_active_tag", default=DEFAULT_TAG,
    ))


def _partial_project_metadata(payload: Any) -> PartialProjectMetadata | None:
    raw = _mapping(payload)
    if raw is None:
        return None
    return PartialProjectMetadata(updated_at=_read(raw, "updatedAt", _DATETIME, "updated_at"))


def partial_state(payload: Mapping[str, Any]) -> PartialState:
    """Expects the payload after merge_defaults (top-level defaults present)."""
    return PartialState(
        current_tag=_read(payload, "currentTag", _TEXT, "current_tag", default=DEFAULT_TAG),
        last_switched=_read(payload, "lastSwitched", _DATETIME, "last_switched"),
        available_tags=_read(
            payload, "availableTags", _TEXT_LIST, "available_tags", default=[DEFAULT_TAG],
        ),
        session_state=_partial_session_state(_lookup(payload, "sessionState", "session_state")),
        project_metadata=_partial_project_metadata(
            _lookup(payload, "projectMetadata", "project_metadata"),
        ),
    )
