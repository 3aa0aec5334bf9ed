"""API Schemas — request/response bodies for the HTTP shell.

Invariants:
    - Document payloads arrive as raw JSON objects and are validated by services,
      never by FastAPI body parsing (issues must come back with document paths)
    - Query criteria use the same enums as the documents

Design Decisions:
    - Separate from document schemas: these are API contracts, documents are domain data
"""

from typing import Any

from pydantic import BaseModel, Field

from taskview.core.domain_types import DocumentSlot, Priority, SortField, SortOrder, Status


class ValidatedDocumentResponse(BaseModel):
    """Normalized document returned when a payload validates cleanly."""
    slot: DocumentSlot
    document: dict[str, Any]
    defaulted: list[str] = []


class TaskQueryRequest(BaseModel):
    """Filter/sort criteria applied to the tasks of a tasks document."""
    document: dict[str, Any]
    tags: list[str] | None = None
    statuses: list[Status] | None = None
    priorities: list[Priority] | None = None
    has_subtasks: bool | None = None
    depends_on: list[str] | None = None
    search: str | None = Field(None, max_length=500)
    sort_by: SortField = SortField.ID
    sort_order: SortOrder = SortOrder.ASC


class TaskQueryItem(BaseModel):
    tag: str
    task: dict[str, Any]


class TaskQueryResponse(BaseModel):
    items: list[TaskQueryItem] = []
    counts: dict[str, int] = {}
