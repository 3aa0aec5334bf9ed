"""State Schemas — leaf defaults and bounds.

Invariants:
    - Every leaf fully defaulted from {}
    - itemsPerPage bounded to [5, 100]
    - ProjectMetadata requires name and both timestamps
"""

import pytest
from pydantic import ValidationError

from taskview.core.domain_types import GroupBy, SortField, SortOrder, Theme, ViewMode
from taskview.schemas.state import (
    AppConfig,
    ProjectMetadata,
    SessionState,
    State,
    UserPreferences,
)


def test_app_config_defaults():
    config = AppConfig.model_validate({})
    assert config.theme is Theme.SYSTEM
    assert config.language == "en"
    assert config.auto_save is True
    assert config.notifications is True
    assert config.debug_mode is False


@pytest.mark.parametrize("theme", ["blue", "auto"])
def test_app_config_rejects_unknown_theme(theme):
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"theme": theme})


def test_user_preferences_defaults():
    prefs = UserPreferences.model_validate({})
    assert prefs.default_view is ViewMode.GRID
    assert prefs.items_per_page == 20
    assert prefs.show_completed_tasks is True
    assert prefs.sort_by is SortField.ID
    assert prefs.sort_order is SortOrder.ASC
    assert prefs.group_by is GroupBy.NONE


@pytest.mark.parametrize("size", [4, 101, -1, 0])
def test_items_per_page_out_of_range(size):
    with pytest.raises(ValidationError) as exc:
        UserPreferences.model_validate({"itemsPerPage": size})
    assert exc.value.errors()[0]["loc"] == ("itemsPerPage",)


@pytest.mark.parametrize("size", [5, 50, 100])
def test_items_per_page_in_range(size):
    assert UserPreferences.model_validate({"itemsPerPage": size}).items_per_page == size


@pytest.mark.parametrize("sort_by", ["name", "date"])
def test_unknown_sort_field(sort_by):
    with pytest.raises(ValidationError):
        UserPreferences.model_validate({"sortBy": sort_by})


def test_created_at_is_a_sort_field():
    assert UserPreferences.model_validate({"sortBy": "createdAt"}).sort_by is SortField.CREATED_AT


def test_session_state_defaults():
    session = SessionState.model_validate({})
    assert session.last_active_task is None
    assert session.last_active_tag == "master"
    assert session.open_tasks == []
    assert session.collapsed_tasks == []
    assert session.search_query == ""
    assert session.active_filters == {}


def test_session_state_accepts_arbitrary_filters():
    session = SessionState.model_validate({"activeFilters": {"status": ["done"], "n": 1}})
    assert session.active_filters == {"status": ["done"], "n": 1}


def test_project_metadata_defaults(project_metadata):
    meta = ProjectMetadata.model_validate(project_metadata)
    assert meta.version == "1.0.0"
    assert meta.tasks_path == ".taskmaster/tasks/tasks.json"
    assert meta.config_path == ".taskmaster/config.json"


def test_project_metadata_rejects_empty_name(project_metadata):
    with pytest.raises(ValidationError) as exc:
        ProjectMetadata.model_validate({**project_metadata, "name": ""})
    assert exc.value.errors()[0]["msg"] == "Project name cannot be empty"


@pytest.mark.parametrize("field, value", [
    ("createdAt", "invalid-date"),
    ("updatedAt", "2024-01-01"),
])
def test_project_metadata_rejects_bad_datetimes(project_metadata, field, value):
    with pytest.raises(ValidationError):
        ProjectMetadata.model_validate({**project_metadata, field: value})


def test_state_nested_defaults(project_metadata):
    state = State.model_validate({"projectMetadata": project_metadata})
    assert state.current_tag == "master"
    assert state.available_tags == ["master"]
    assert state.app_config.theme is Theme.SYSTEM
    assert state.user_preferences.items_per_page == 20
    assert state.session_state.last_active_tag == "master"
    assert state.migration_notice_shown is False


def test_state_requires_project_metadata():
    with pytest.raises(ValidationError) as exc:
        State.model_validate({})
    assert [e["loc"] for e in exc.value.errors()] == [("projectMetadata",)]
