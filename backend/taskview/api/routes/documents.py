"""Document Validation Route — validates a decoded tasks/state document.

Invariants:
    - Body is any JSON value; the engine (not FastAPI) decides what is malformed
    - 200 → normalized document; 422 → every issue with its document path

Design Decisions:
    - Issues travel through DocumentValidationError + the global handler so the
      error envelope matches every other domain error
"""

from typing import Any

from fastapi import APIRouter, Body

from taskview.core.domain_types import DocumentSlot
from taskview.core.errors import DocumentValidationError
from taskview.schemas.api import ValidatedDocumentResponse
from taskview.services.validate_documents import validate_document

router = APIRouter(prefix="/api/v1/documents", tags=["documents"])


@router.post("/{slot}/validate", response_model=ValidatedDocumentResponse)
async def validate_document_route(slot: DocumentSlot, payload: Any = Body(...)):
    """Validate and normalize one document."""
    result = validate_document(slot, payload)
    if not result.ok:
        raise DocumentValidationError(slot.value, result.issues)
    return ValidatedDocumentResponse(
        slot=slot,
        document=result.value.to_document(),
        defaulted=list(result.defaulted),
    )
