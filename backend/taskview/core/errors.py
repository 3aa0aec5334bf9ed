"""Error Hierarchy — typed, categorized exceptions for all taskview failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation failures carry an IssueKind and the offending value; to_issue() binds a path
    - Domain errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with TaskViewError base: FastAPI global handler catches all (uniform error shape)
    - Primitive validators RAISE these; entity/aggregate validators COLLECT them as Issues
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Sequence

from taskview.core.domain_types import IssueKind, IssuePath
from taskview.core.issues import Issue


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    slot: str | None = None


class TaskViewError(Exception):
    """Base exception for all taskview errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {"slot": self.context.slot},
            }
        }


# ─── Validation Failures (one per issue kind) ───────────────────

class ValidationFailure(TaskViewError):
    """A single value failed a rule. Subclasses fix the IssueKind."""
    kind: IssueKind = IssueKind.FORMAT
    error_code: str = "VALIDATION_ERROR"

    def __init__(self, message: str, value: Any = None, context: ErrorContext | None = None):
        super().__init__(
            message, self.error_code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value

    def to_issue(self, path: IssuePath = ()) -> Issue:
        return Issue(path=tuple(path), message=self.message, kind=self.kind)


class FormatError(ValidationFailure):
    """Textual form of a scalar does not match its pattern (ids, tag names, datetimes)."""
    kind = IssueKind.FORMAT
    error_code = "FORMAT_ERROR"


class EnumError(FormatError):
    """Value is not a member of a closed vocabulary (status, priority)."""
    error_code = "ENUM_ERROR"


class RangeError(ValidationFailure):
    """Numeric field outside its bounds."""
    kind = IssueKind.RANGE
    error_code = "RANGE_ERROR"


class RequiredFieldError(ValidationFailure):
    """Required field is missing or empty."""
    kind = IssueKind.REQUIRED_FIELD
    error_code = "REQUIRED_FIELD"


class ReferentialIntegrityError(ValidationFailure):
    """Reference (dependency, current tag) points at nothing."""
    kind = IssueKind.REFERENTIAL_INTEGRITY
    error_code = "REFERENTIAL_INTEGRITY"


class ExclusivityError(ValidationFailure):
    """Zero or more than one active tag."""
    kind = IssueKind.EXCLUSIVITY
    error_code = "EXCLUSIVITY_ERROR"


class UniquenessError(ValidationFailure):
    """Duplicate task id within one tag."""
    kind = IssueKind.UNIQUENESS
    error_code = "UNIQUENESS_ERROR"


class TemporalOrderError(ValidationFailure):
    """Timestamps in the wrong order."""
    kind = IssueKind.TEMPORAL_ORDER
    error_code = "TEMPORAL_ORDER_ERROR"


# ─── Issue-carrying Errors ──────────────────────────────────────

class IssueListError(TaskViewError):
    """Base for errors that report a list of Issues under error.details."""
    def __init__(
        self, message: str, code: str, issues: Sequence[Issue],
        context: ErrorContext | None = None, http_status: int = 400,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, http_status,
        )
        self.issues = tuple(issues)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [issue.to_dict() for issue in self.issues]
        return response


class DocumentValidationError(IssueListError):
    """A whole document failed validation. Carries every collected issue."""
    def __init__(
        self, slot: str, issues: Sequence[Issue], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.slot = slot
        super().__init__(
            f"{slot} document has {len(issues)} validation issue(s)",
            "DOCUMENT_INVALID", issues, ctx, 422,
        )


class RequestInvalidError(IssueListError):
    """Path, query or body of an API request is malformed."""
    def __init__(self, issues: Sequence[Issue], context: ErrorContext | None = None):
        super().__init__(
            f"Request has {len(issues)} invalid field(s)",
            "REQUEST_INVALID", issues, context, 400,
        )


# ─── Other Errors ───────────────────────────────────────────────

class ResourceNotFoundError(TaskViewError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class InternalError(TaskViewError):
    """Unexpected failure; the message never carries internal details."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, context, 500,
        )
