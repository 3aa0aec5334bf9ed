"""Pydantic Schemas — field-level validation and defaults for documents and API bodies.

Invariants:
    - Schemas validate at the system boundary (decoded JSON documents, request bodies)
    - Domain types and primitive validators come from core/

Design Decisions:
    - Field-level rules live here; rules spanning entities live in core/ (two distinct passes)
"""
