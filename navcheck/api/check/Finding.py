"""Finding model (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .Category import Category
from .Severity import Severity


@dataclass(frozen=True)
class Finding:
    """A single validation result.

    ``line`` is 0 for findings about a file as a whole.
    """

    path: str
    line: int
    category: Category
    message: str
    span: str = ""

    @property
    def severity(self) -> Severity:
        return self.category.severity

    @property
    def sort_key(self) -> tuple[str, int, str, str]:
        return (self.path, self.line, self.category.value, self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "line": self.line,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "span": self.span,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Finding":
        return cls(
            path=data["path"],
            line=data["line"],
            category=Category(data["category"]),
            message=data["message"],
            span=data.get("span", ""),
        )
