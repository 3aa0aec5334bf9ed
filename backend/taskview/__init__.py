"""taskview — consistency validation engine for task files and viewer state.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""

__version__ = "1.0.0"
