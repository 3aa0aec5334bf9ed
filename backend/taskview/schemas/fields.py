"""Field Types — annotated scalar types shared by the document schemas.

Invariants:
    - Each annotated type runs exactly one core primitive (or one bound check)
    - Failures surface as pydantic line errors whose type is an IssueKind value
    - Integer fields take JSON numbers with no fractional part (1.0 -> 1); 1.5, "1" and true are rejected
"""

from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, StrictInt

from taskview.core.domain_types import Priority, Status
from taskview.core.primitives import (
    validate_dependency,
    validate_iso_datetime,
    validate_items_per_page,
    validate_positive_id,
    validate_priority,
    validate_status,
    validate_tag_name,
)
from taskview.schemas.base import as_pydantic, integral_to_int, non_empty

PositiveId = Annotated[
    StrictInt,
    BeforeValidator(integral_to_int),
    AfterValidator(as_pydantic(validate_positive_id)),
]
PageSize = Annotated[
    StrictInt,
    BeforeValidator(integral_to_int),
    AfterValidator(as_pydantic(validate_items_per_page)),
]
Title = Annotated[str, AfterValidator(non_empty("Title cannot be empty"))]
Description = Annotated[str, AfterValidator(non_empty("Description cannot be empty"))]
ProjectName = Annotated[str, AfterValidator(non_empty("Project name cannot be empty"))]
StatusField = Annotated[Status, BeforeValidator(as_pydantic(validate_status))]
PriorityField = Annotated[Priority, BeforeValidator(as_pydantic(validate_priority))]
Dependency = Annotated[str, AfterValidator(as_pydantic(validate_dependency))]
IsoDateTime = Annotated[str, AfterValidator(as_pydantic(validate_iso_datetime))]
TagNameField = Annotated[str, AfterValidator(as_pydantic(validate_tag_name))]
