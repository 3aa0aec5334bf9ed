"""Error Hierarchy — codes, kinds, and REST envelopes.

Tests:
    - Each validation failure binds its IssueKind into to_issue()
    - DocumentValidationError is 422 and lists issue details
    - RequestInvalidError shares the details envelope at 400
    - ResourceNotFoundError is 404; InternalError hides its cause
"""

import pytest

from taskview.core.domain_types import IssueKind
from taskview.core.errors import (
    DocumentValidationError,
    EnumError,
    ExclusivityError,
    FormatError,
    InternalError,
    RangeError,
    ReferentialIntegrityError,
    RequestInvalidError,
    RequiredFieldError,
    ResourceNotFoundError,
    TemporalOrderError,
    UniquenessError,
)
from taskview.core.issues import Issue


@pytest.mark.parametrize("error_cls, kind", [
    (FormatError, IssueKind.FORMAT),
    (EnumError, IssueKind.FORMAT),
    (RangeError, IssueKind.RANGE),
    (RequiredFieldError, IssueKind.REQUIRED_FIELD),
    (ReferentialIntegrityError, IssueKind.REFERENTIAL_INTEGRITY),
    (ExclusivityError, IssueKind.EXCLUSIVITY),
    (UniquenessError, IssueKind.UNIQUENESS),
    (TemporalOrderError, IssueKind.TEMPORAL_ORDER),
])
def test_failures_bind_their_kind(error_cls, kind):
    issue = error_cls("boom", value=3).to_issue(("tags", "master"))
    assert issue == Issue(path=("tags", "master"), message="boom", kind=kind)


def test_failures_are_400_level():
    err = UniquenessError("dup", value=1)
    assert err.http_status == 400
    assert err.code == "UNIQUENESS_ERROR"
    assert err.value == 1


def test_document_validation_error_carries_issues():
    issues = [Issue(("currentTag",), "missing", IssueKind.REFERENTIAL_INTEGRITY)]
    err = DocumentValidationError("tasks", issues)
    body = err.to_response()
    assert err.http_status == 422
    assert body["error"]["code"] == "DOCUMENT_INVALID"
    assert body["error"]["context"]["slot"] == "tasks"
    assert body["error"]["details"] == [{
        "path": ["currentTag"],
        "message": "missing",
        "kind": "referential_integrity",
    }]


def test_resource_not_found_is_404():
    err = ResourceNotFoundError("Tag", "nope")
    assert err.http_status == 404
    assert err.message == "Tag 'nope' not found"


def test_request_invalid_error_uses_same_details():
    issues = [Issue(("body", "statuses", 0), "bad", IssueKind.FORMAT)]
    body = RequestInvalidError(issues).to_response()["error"]
    assert body["code"] == "REQUEST_INVALID"
    assert body["category"] == "validation"
    assert body["details"] == [{"path": ["body", "statuses", 0], "message": "bad", "kind": "format"}]


def test_internal_error_is_critical_500():
    err = InternalError()
    assert err.http_status == 500
    assert err.to_response()["error"]["severity"] == "critical"
    assert err.message == "An unexpected error occurred"
