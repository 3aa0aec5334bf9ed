"""Core Layer — pure validation rules, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from schemas/, services/, api/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: rules see Protocols, not models
"""
