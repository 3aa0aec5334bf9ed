"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskIdText, SubtaskIdText, DependencyRef wrap str — ids on the wire are strings
    - Every closed vocabulary (status, priority, theme, view...) is an Enum — no raw string matching
    - IssueKind mirrors the error taxonomy one-to-one

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (documents round-trip as JSON)
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskIdText = NewType("TaskIdText", str)          # "1", "25"
SubtaskIdText = NewType("SubtaskIdText", str)    # "1.1", "10.25"
DependencyRef = NewType("DependencyRef", str)    # either of the above
TagName = NewType("TagName", str)

IssuePath = tuple[str | int, ...]


# ─── Lexical Patterns ────────────────────────────────────────────

TASK_ID_PATTERN = re.compile(r"[0-9]+")
SUBTASK_ID_PATTERN = re.compile(r"[0-9]+\.[0-9]+")
TAG_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
ISO_DATETIME_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]+)?Z"
)

DEFAULT_TAG = TagName("master")
DEFAULT_VERSION = "1.0.0"
MIN_ITEMS_PER_PAGE = 5
MAX_ITEMS_PER_PAGE = 100


# ─── Enums ───────────────────────────────────────────────────────

class Status(str, Enum):
    """Task/subtask lifecycle status."""
    DONE = "done"
    IN_PROGRESS = "in-progress"
    PENDING = "pending"
    BLOCKED = "blocked"


class Priority(str, Enum):
    """Optional task/subtask priority."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"
    KANBAN = "kanban"


class SortField(str, Enum):
    """Fields the viewer can sort task lists by."""
    ID = "id"
    PRIORITY = "priority"
    STATUS = "status"
    TITLE = "title"
    CREATED_AT = "createdAt"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class GroupBy(str, Enum):
    NONE = "none"
    STATUS = "status"
    PRIORITY = "priority"
    TAG = "tag"


class DocumentSlot(str, Enum):
    """Which document a payload is validated as."""
    TASKS = "tasks"
    STATE = "state"


class IssueKind(str, Enum):
    """Category of a reported validation issue."""
    FORMAT = "format"
    RANGE = "range"
    REQUIRED_FIELD = "required_field"
    REFERENTIAL_INTEGRITY = "referential_integrity"
    EXCLUSIVITY = "exclusivity"
    UNIQUENESS = "uniqueness"
    TEMPORAL_ORDER = "temporal_order"
    TYPE = "type"
