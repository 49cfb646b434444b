"""Heading model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    """A heading of a markdown document and the anchor slug it renders to."""

    level: int
    text: str
    line_number: int
    slug: str
