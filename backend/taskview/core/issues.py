"""Issues & Results — the engine's public output shape.

Invariants:
    - An Issue is (path, message, kind); path is the field-access path from the document root
    - ValidationResult holds EITHER a value (no issues) OR issues (value is None)
    - Issues keep discovery order — callers display them as-is

Design Decisions:
    - Frozen dataclasses over dicts: hashable, comparable in tests, no accidental mutation
    - Generic result over exceptions for expected failures: the UI wants every problem at once
"""

from dataclasses import dataclass, field
from typing import Generic, Iterable, TypeVar

from taskview.core.domain_types import IssueKind, IssuePath

T = TypeVar("T")


@dataclass(frozen=True)
class Issue:
    """One reported validation failure."""
    path: IssuePath
    message: str
    kind: IssueKind

    @property
    def dotted_path(self) -> str:
        return ".".join(str(part) for part in self.path)

    def to_dict(self) -> dict:
        return {
            "path": list(self.path),
            "message": self.message,
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Normalized value on success, full issue list on failure."""
    value: T | None = None
    issues: tuple[Issue, ...] = ()
    defaulted: tuple[str, ...] = field(default=())

    @property
    def ok(self) -> bool:
        return not self.issues

    @classmethod
    def success(cls, value: T, defaulted: Iterable[str] = ()) -> "ValidationResult[T]":
        return cls(value=value, issues=(), defaulted=tuple(defaulted))

    @classmethod
    def failure(cls, issues: Iterable[Issue]) -> "ValidationResult[T]":
        issues = tuple(issues)
        if not issues:
            raise ValueError("failure() requires at least one issue")
        return cls(value=None, issues=issues)


def prefix_issues(prefix: IssuePath, issues: Iterable[Issue]) -> list[Issue]:
    """Rebase issues found on a nested value onto the enclosing document."""
    return [
        Issue(path=(*prefix, *issue.path), message=issue.message, kind=issue.kind)
        for issue in issues
    ]
