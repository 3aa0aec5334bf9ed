"""Services Layer — orchestrates schema parsing and core rule passes.

Invariants:
    - Services own the two-pass order: field-level parse, then cross-entity rules
    - Services log; core never does

Design Decisions:
    - One module per document family keeps the pass ordering in a single place
"""
