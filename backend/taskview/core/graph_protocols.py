"""Boundary Protocols — structural contracts between core rules and the schema layer.

Invariants:
    - Core NEVER imports from schemas/services/api — dependency arrows point inward only
    - Rules read attributes only; nothing here is mutated
    - Attributes typed `| None` may be None when the value did not parse;
      rules skip such values instead of reporting them a second time

Design Decisions:
    - Protocol over ABC: structural subtyping, pydantic models satisfy these as-is,
      and so do the partial views built from documents that failed field validation
"""

from typing import Mapping, Protocol, Sequence

from taskview.core.domain_types import Priority, Status


class SubtaskLike(Protocol):
    id: int | None
    dependencies: Sequence[str | None]


class TaskLike(Protocol):
    id: int | None
    dependencies: Sequence[str | None]
    subtasks: Sequence[SubtaskLike]


class QueryableTaskLike(TaskLike, Protocol):
    """A fully validated task, as read by the query helpers."""
    title: str
    description: str
    status: Status
    priority: Priority | None


class TagLike(Protocol):
    tasks: Sequence[TaskLike] | None
    is_active: bool | None


class TasksFileLike(Protocol):
    tags: Mapping[str, TagLike] | None
    current_tag: str | None


class ProjectMetadataLike(Protocol):
    updated_at: str | None


class SessionStateLike(Protocol):
    last_active_tag: str | None


class StateLike(Protocol):
    current_tag: str | None
    last_switched: str | None
    available_tags: Sequence[str] | None
    session_state: SessionStateLike | None
    project_metadata: ProjectMetadataLike | None
