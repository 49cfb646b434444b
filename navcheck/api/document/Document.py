"""Document model (UNO: single model)."""

from dataclasses import dataclass, field
from pathlib import Path

from .Heading import Heading
from .Link import Link


@dataclass(frozen=True)
class Document:
    """A parsed markdown file."""

    path: Path
    rel_path: str
    text: str
    headings: tuple[Heading, ...] = ()
    links: tuple[Link, ...] = ()
    html_anchors: frozenset[str] = field(default_factory=frozenset)

    @property
    def slugs(self) -> list[str]:
        """Heading slugs in document order."""
        return [heading.slug for heading in self.headings if heading.slug]

    @property
    def anchors(self) -> frozenset[str]:
        """Every fragment a link into this document may use."""
        return frozenset(self.slugs) | self.html_anchors
