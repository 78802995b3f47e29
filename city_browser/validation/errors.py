from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    column: Optional[str] = None

    def __str__(self) -> str:
        where = f" [{self.column}]" if self.column else ""
        return f"{self.code}{where}: {self.message}"


class ValidationError(Exception):
    """Raised with every issue found in the cities table, not just the first."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(str(i) for i in issues))

    @property
    def codes(self) -> set[str]:
        return {i.code for i in self.issues}
