"""Root conftest — document builders shared by every test layer.

Design Decisions:
    - Factories return plain dicts (decoded JSON), the same input the engine receives
"""

import pytest


@pytest.fixture
def make_subtask():
    def build(id=1, **overrides):
        subtask = {
            "id": id,
            "title": f"Subtask {id}",
            "description": f"Description of subtask {id}",
            "status": "pending",
        }
        subtask.update(overrides)
        return subtask
    return build


@pytest.fixture
def make_task():
    def build(id=1, **overrides):
        task = {
            "id": id,
            "title": f"Task {id}",
            "description": f"Description of task {id}",
            "status": "pending",
        }
        task.update(overrides)
        return task
    return build


@pytest.fixture
def make_tasks_document():
    """Build a tasks document from {tag name: [tasks]}; first tag is active."""
    def build(tags=None, current_tag="master", active=None):
        tags = tags if tags is not None else {"master": []}
        active = active if active is not None else [next(iter(tags), None)]
        return {
            "version": "1.0.0",
            "currentTag": current_tag,
            "tags": {
                name: {"name": name, "tasks": tasks, "isActive": name in active}
                for name, tasks in tags.items()
            },
        }
    return build


@pytest.fixture
def project_metadata():
    return {
        "name": "Test Project",
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-01T00:00:00.000Z",
    }


@pytest.fixture
def state_document(project_metadata):
    return {
        "currentTag": "master",
        "lastSwitched": "2024-01-01T00:00:00.000Z",
        "migrationNoticeShown": True,
        "appConfig": {"theme": "dark"},
        "userPreferences": {"itemsPerPage": 20},
        "sessionState": {"lastActiveTag": "master"},
        "projectMetadata": project_metadata,
        "availableTags": ["master", "feature-branch"],
    }
