"""State Schemas — viewer configuration, preferences, session and project metadata.

Invariants:
    - Every leaf object is fully defaulted except ProjectMetadata (name, createdAt, updatedAt required)
    - itemsPerPage in [5, 100]
    - State composes the four leaves; cross-field rules live in core/enforce_state
"""

from typing import Any

from pydantic import Field, StrictBool

from taskview.core.domain_types import (
    DEFAULT_TAG,
    DEFAULT_VERSION,
    GroupBy,
    SortField,
    SortOrder,
    Theme,
    ViewMode,
)
from taskview.schemas.base import DocumentModel
from taskview.schemas.fields import IsoDateTime, PageSize, ProjectName


class AppConfig(DocumentModel):
    theme: Theme = Theme.SYSTEM
    language: str = "en"
    auto_save: StrictBool = True
    notifications: StrictBool = True
    debug_mode: StrictBool = False


class UserPreferences(DocumentModel):
    default_view: ViewMode = ViewMode.GRID
    items_per_page: PageSize = 20
    show_completed_tasks: StrictBool = True
    sort_by: SortField = SortField.ID
    sort_order: SortOrder = SortOrder.ASC
    group_by: GroupBy = GroupBy.NONE


class SessionState(DocumentModel):
    """What the viewer had open when it was last used."""
    last_active_task: str | None = None
    last_active_tag: str = DEFAULT_TAG
    open_tasks: list[str] = Field(default_factory=list)
    collapsed_tasks: list[str] = Field(default_factory=list)
    search_query: str = ""
    active_filters: dict[str, Any] = Field(default_factory=dict)


class ProjectMetadata(DocumentModel):
    name: ProjectName
    version: str = DEFAULT_VERSION
    description: str | None = None
    author: str | None = None
    created_at: IsoDateTime
    updated_at: IsoDateTime
    tasks_path: str = ".taskmaster/tasks/tasks.json"
    config_path: str = ".taskmaster/config.json"


class State(DocumentModel):
    """Root aggregate of the state document."""
    current_tag: str = DEFAULT_TAG
    last_switched: IsoDateTime | None = None
    migration_notice_shown: StrictBool = False
    app_config: AppConfig = Field(default_factory=AppConfig)
    user_preferences: UserPreferences = Field(default_factory=UserPreferences)
    session_state: SessionState = Field(default_factory=SessionState)
    project_metadata: ProjectMetadata
    available_tags: list[str] = Field(default_factory=lambda: [DEFAULT_TAG])
    version: str = DEFAULT_VERSION
