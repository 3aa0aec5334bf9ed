"""Primitive Validators — lexical/semantic checks for ids, enums and timestamps.

Invariants:
    - All functions are PURE: return the input unchanged when valid, raise otherwise
    - Id/tag/datetime mismatches raise FormatError; enum mismatches raise EnumError
    - Numeric bounds raise RangeError (the integer type itself is checked by the schema)
    - Patterns are matched with fullmatch over ASCII digits only

Design Decisions:
    - Raise (not collect) at this level: a primitive has exactly one verdict,
      the schema layer turns the exception into an Issue at the right path
"""

from datetime import datetime
from typing import Any

from taskview.core.domain_types import (
    ISO_DATETIME_PATTERN,
    MAX_ITEMS_PER_PAGE,
    MIN_ITEMS_PER_PAGE,
    SUBTASK_ID_PATTERN,
    TAG_NAME_PATTERN,
    TASK_ID_PATTERN,
    Priority,
    Status,
)
from taskview.core.errors import EnumError, FormatError, RangeError, RequiredFieldError

TASK_ID_MESSAGE = "Task ID must be a simple number (e.g., '1', '2', '3')"
SUBTASK_ID_MESSAGE = "Subtask ID must be in format 'number.number' (e.g., '1.1', '2.3')"
DEPENDENCY_MESSAGE = (
    "Dependency must be a task ID (e.g., '1') or a subtask ID (e.g., '1.1')"
)
TAG_NAME_MESSAGE = (
    "Tag name must contain only alphanumeric characters, hyphens, and underscores"
)

_STATUS_VALUES = tuple(s.value for s in Status)
_PRIORITY_VALUES = tuple(p.value for p in Priority)


def _matches(pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_task_id(value: Any) -> str:
    if not _matches(TASK_ID_PATTERN, value):
        raise FormatError(TASK_ID_MESSAGE, value=value)
    return value


def validate_subtask_id(value: Any) -> str:
    if not _matches(SUBTASK_ID_PATTERN, value):
        raise FormatError(SUBTASK_ID_MESSAGE, value=value)
    return value


def validate_positive_id(value: int) -> int:
    if value <= 0:
        raise RangeError(f"ID must be a positive integer, got {value}", value=value)
    return value


def validate_items_per_page(value: int) -> int:
    if not MIN_ITEMS_PER_PAGE <= value <= MAX_ITEMS_PER_PAGE:
        raise RangeError(
            f"Items per page must be between {MIN_ITEMS_PER_PAGE} and {MAX_ITEMS_PER_PAGE}, got {value}",
            value=value,
        )
    return value


def validate_dependency(value: Any) -> str:
    """Accept a Task Id or a Subtask Id. The two patterns are disjoint."""
    if _matches(TASK_ID_PATTERN, value) or _matches(SUBTASK_ID_PATTERN, value):
        return value
    raise FormatError(f"{DEPENDENCY_MESSAGE}, got '{value}'", value=value)


def validate_status(value: Any) -> str:
    if value not in _STATUS_VALUES:
        raise EnumError(
            f"Invalid status '{value}'. Expected one of: {', '.join(_STATUS_VALUES)}",
            value=value,
        )
    return value


def validate_priority(value: Any) -> str | None:
    """Priority is optional: None passes through."""
    if value is None:
        return None
    if value not in _PRIORITY_VALUES:
        raise EnumError(
            f"Invalid priority '{value}'. Expected one of: {', '.join(_PRIORITY_VALUES)}",
            value=value,
        )
    return value


def validate_tag_name(value: Any) -> str:
    if value == "":
        raise RequiredFieldError("Tag name cannot be empty", value=value)
    if not _matches(TAG_NAME_PATTERN, value):
        raise FormatError(TAG_NAME_MESSAGE, value=value)
    return value


def validate_iso_datetime(value: Any) -> str:
    """ISO-8601 UTC timestamp, e.g. 2024-01-01T00:00:00.000Z."""
    if not _matches(ISO_DATETIME_PATTERN, value):
        raise FormatError(f"Invalid datetime '{value}'. Expected ISO-8601 UTC", value=value)
    try:
        parse_iso_datetime(value)
    except ValueError as e:
        raise FormatError(f"Invalid datetime '{value}': {e}", value=value) from e
    return value


def parse_iso_datetime(value: str) -> datetime:
    """Parse a validated timestamp into an aware datetime."""
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    head, sep, rest = text.partition(".")
    if sep:
        # fromisoformat accepts 3 or 6 fraction digits only on older interpreters
        digits, offset = rest[:-6], rest[-6:]
        text = f"{head}.{(digits + '000000')[:6]}{offset}"
    return datetime.fromisoformat(text)


def is_subtask_reference(dependency: str) -> bool:
    return "." in dependency


def referenced_task_id(dependency: str) -> str:
    """Leading numeric component: '2.1' -> '2', '7' -> '7'."""
    return dependency.split(".")[0]
