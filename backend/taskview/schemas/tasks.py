"""Tasks Schemas — Subtask, Task, Tag and TasksFile with field-level validation.

Invariants:
    - Ids are strict positive integers (no "1", no true, no 1.5)
    - Title and description are non-empty; status required; priority optional
    - Dependencies are Task Ids or Subtask Ids (format only — resolution is a core rule)
    - Absent collections default to empty; absent tag map defaults to one active 'master' tag

Design Decisions:
    - Cross-entity rules (subtask ownership, active tag, duplicates, dependency
      resolution) are NOT model validators: they run in core/ as a second pass
      so every field-level issue is collected first
"""

from pydantic import Field, StrictBool

from taskview.core.domain_types import DEFAULT_TAG, DEFAULT_VERSION
from taskview.schemas.base import DocumentModel
from taskview.schemas.fields import (
    Dependency,
    Description,
    IsoDateTime,
    PositiveId,
    PriorityField,
    StatusField,
    TagNameField,
    Title,
)
from taskview.schemas.state import ProjectMetadata


class Subtask(DocumentModel):
    """A unit of work owned by exactly one task; id is scoped to the parent."""
    id: PositiveId
    title: Title
    description: Description
    status: StatusField
    priority: PriorityField | None = None
    dependencies: list[Dependency] = Field(default_factory=list)
    details: str = ""
    test_strategy: str = ""


class Task(Subtask):
    """A top-level task; owns its subtasks."""
    subtasks: list[Subtask] = Field(default_factory=list)


class TagMetadata(DocumentModel):
    description: str | None = None
    created_at: IsoDateTime | None = None
    updated_at: IsoDateTime | None = None
    author: str | None = None
    version: str | None = None


class Tag(DocumentModel):
    """Independent namespace of tasks; ids are unique within a tag only."""
    name: TagNameField
    tasks: list[Task] = Field(default_factory=list)
    metadata: TagMetadata | None = None
    is_active: StrictBool = False


def default_tags() -> dict[str, Tag]:
    return {DEFAULT_TAG: Tag(name=DEFAULT_TAG, tasks=[], is_active=True)}


class TasksFile(DocumentModel):
    """Root aggregate of the tasks document."""
    version: str = DEFAULT_VERSION
    project_metadata: ProjectMetadata | None = None
    tags: dict[str, Tag] = Field(default_factory=default_tags)
    current_tag: str = DEFAULT_TAG
    migration_version: str | None = None
    created_at: IsoDateTime | None = None
    updated_at: IsoDateTime | None = None
