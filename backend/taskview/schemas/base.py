"""Schema Base — shared model config, primitive adapters and issue mapping.

Invariants:
    - Wire names are camelCase, attributes snake_case; both accepted on input
    - Validated documents are frozen (a change means validating a new payload)
    - Every pydantic error maps to exactly one Issue with the same loc as path
    - merge_defaults only fills ABSENT keys; present-but-invalid values are left for validation

Design Decisions:
    - Primitive validators raise core errors; as_pydantic() re-raises them as
      PydanticCustomError so pydantic keeps collecting instead of aborting
    - Custom error type == IssueKind value: no lookup table needed for our own errors
"""

from typing import Any, Callable, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from taskview.core.domain_types import IssueKind
from taskview.core.errors import ValidationFailure
from taskview.core.issues import Issue

_BUILTIN_KINDS: dict[str, IssueKind] = {
    "missing": IssueKind.REQUIRED_FIELD,
    "string_too_short": IssueKind.REQUIRED_FIELD,
    "greater_than": IssueKind.RANGE,
    "greater_than_equal": IssueKind.RANGE,
    "less_than": IssueKind.RANGE,
    "less_than_equal": IssueKind.RANGE,
    "enum": IssueKind.FORMAT,
    "literal_error": IssueKind.FORMAT,
    "string_pattern_mismatch": IssueKind.FORMAT,
}
_CUSTOM_KINDS = {kind.value: kind for kind in IssueKind}


class DocumentModel(BaseModel):
    """Base for every document schema."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """JSON-ready dict with wire names; absent optionals stay absent."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def as_pydantic(check: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Wrap a core primitive so its failure becomes a pydantic line error."""
    def validator(value: Any) -> Any:
        try:
            return check(value)
        except ValidationFailure as e:
            raise PydanticCustomError(e.kind.value, e.message) from e
    validator.__name__ = check.__name__
    return validator


def integral_to_int(value: Any) -> Any:
    """JSON numbers like 1.0 are integers; anything else passes through to the strict check."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def non_empty(message: str) -> Callable[[str], str]:
    """Validator rejecting the empty string with a field-specific message."""
    def validator(value: str) -> str:
        if value == "":
            raise PydanticCustomError(IssueKind.REQUIRED_FIELD.value, message)
        return value
    return validator


def issue_kind_for(error_type: str) -> IssueKind:
    if error_type in _CUSTOM_KINDS:
        return _CUSTOM_KINDS[error_type]
    return _BUILTIN_KINDS.get(error_type, IssueKind.TYPE)


def issues_from_validation_error(exc: ValidationError) -> list[Issue]:
    return issues_from_errors(exc.errors())


def issues_from_errors(errors: Iterable[Mapping[str, Any]]) -> list[Issue]:
    """Map pydantic-style error dicts (also FastAPI request errors) to Issues."""
    return [
        Issue(
            path=tuple(error["loc"]),
            message=error["msg"],
            kind=issue_kind_for(error["type"]),
        )
        for error in errors
    ]


def merge_defaults(
    model: type[BaseModel], payload: Mapping[str, Any],
) -> tuple[dict[str, Any], list[str]]:
    """Fill absent top-level fields with their defaults.

    Returns the merged payload and the wire names of the fields that were
    filled. Optional fields without a real default (None) are not reported.
    """
    merged = dict(payload)
    defaulted: list[str] = []
    for name, field in model.model_fields.items():
        wire_name = field.alias or name
        if wire_name in payload or name in payload or field.is_required():
            continue
        default = field.get_default(call_default_factory=True)
        if default is None:
            continue
        merged[wire_name] = default
        defaulted.append(wire_name)
    return merged, defaulted
