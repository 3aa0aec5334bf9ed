"""Primitive Validators — lexical checks for ids, enums and timestamps.

Tests cover:
    - Task/Subtask ids accept digits only, reject everything else
    - Dependencies accept either id form, reject '2.1.3'
    - Status/priority raise EnumError (a FormatError)
    - Datetimes require ISO-8601 UTC and a real calendar date
    - Numeric bounds (positive ids, page size) raise RangeError
"""

from datetime import datetime, timezone

import pytest

from taskview.core.domain_types import IssueKind
from taskview.core.errors import EnumError, FormatError, RangeError, RequiredFieldError
from taskview.core.primitives import (
    parse_iso_datetime,
    referenced_task_id,
    validate_dependency,
    validate_iso_datetime,
    validate_items_per_page,
    validate_positive_id,
    validate_priority,
    validate_status,
    validate_subtask_id,
    validate_tag_name,
    validate_task_id,
)


# ─── ids ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["1", "2", "25", "100"])
def test_task_id_accepts_plain_numbers(value):
    assert validate_task_id(value) == value


@pytest.mark.parametrize("value", ["1.1", "a", "1a", "", "1\n", "١", 1, None])
def test_task_id_rejects_everything_else(value):
    with pytest.raises(FormatError) as exc:
        validate_task_id(value)
    assert exc.value.value == value
    assert exc.value.kind is IssueKind.FORMAT


@pytest.mark.parametrize("value", ["1.1", "2.3", "10.25"])
def test_subtask_id_accepts_dotted_pairs(value):
    assert validate_subtask_id(value) == value


@pytest.mark.parametrize("value", ["1", "1.1.1", "a.1", "1.a", ""])
def test_subtask_id_rejects_other_forms(value):
    with pytest.raises(FormatError):
        validate_subtask_id(value)


@pytest.mark.parametrize("value", ["1", "1.1", "42.7"])
def test_dependency_accepts_both_forms(value):
    assert validate_dependency(value) == value


@pytest.mark.parametrize("value", ["a", "1.1.1", "2.1.3", ""])
def test_dependency_rejects_invalid_forms(value):
    with pytest.raises(FormatError) as exc:
        validate_dependency(value)
    assert f"'{value}'" in exc.value.message


# ─── enums ───────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["done", "in-progress", "pending", "blocked"])
def test_status_accepts_known_values(value):
    assert validate_status(value) == value


@pytest.mark.parametrize("value", ["invalid", "complete", ""])
def test_status_rejects_unknown_values(value):
    with pytest.raises(EnumError):
        validate_status(value)


def test_enum_error_is_a_format_error():
    with pytest.raises(FormatError):
        validate_priority("critical")


def test_priority_is_optional():
    assert validate_priority(None) is None
    assert validate_priority("high") == "high"


@pytest.mark.parametrize("value", ["critical", "urgent", ""])
def test_priority_rejects_unknown_values(value):
    with pytest.raises(EnumError):
        validate_priority(value)


# ─── tag names ───────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["master", "feature-branch", "v1_2", "ABC"])
def test_tag_name_accepts_identifier_characters(value):
    assert validate_tag_name(value) == value


@pytest.mark.parametrize("value", ["tag with spaces", "tag@special", "tag.dot"])
def test_tag_name_rejects_other_characters(value):
    with pytest.raises(FormatError):
        validate_tag_name(value)


def test_empty_tag_name_is_a_required_field_error():
    with pytest.raises(RequiredFieldError):
        validate_tag_name("")


# ─── datetimes ───────────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "2024-01-01T00:00:00.000Z",
    "2024-01-01T00:00:00Z",
    "2024-02-29T23:59:59.123456Z",
])
def test_iso_datetime_accepts_utc_timestamps(value):
    assert validate_iso_datetime(value) == value


@pytest.mark.parametrize("value", [
    "invalid-date",
    "2024-01-01",
    "2024-01-01T00:00:00",
    "2024-13-01T00:00:00.000Z",
    "2023-02-29T00:00:00Z",
])
def test_iso_datetime_rejects_other_forms(value):
    with pytest.raises(FormatError):
        validate_iso_datetime(value)


def test_parse_iso_datetime_returns_aware_utc():
    parsed = parse_iso_datetime("2024-01-02T03:04:05.5Z")
    assert parsed == datetime(2024, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc)


def test_referenced_task_id_takes_leading_component():
    assert referenced_task_id("2.1") == "2"
    assert referenced_task_id("7") == "7"


# ─── numeric bounds ──────────────────────────────────────────────

def test_positive_id():
    assert validate_positive_id(1) == 1
    with pytest.raises(RangeError) as exc:
        validate_positive_id(0)
    assert exc.value.kind is IssueKind.RANGE


@pytest.mark.parametrize("size, ok", [(4, False), (5, True), (100, True), (101, False)])
def test_items_per_page_bounds(size, ok):
    if ok:
        assert validate_items_per_page(size) == size
    else:
        with pytest.raises(RangeError):
            validate_items_per_page(size)
