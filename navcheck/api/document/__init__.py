"""Markdown document domain: model and extraction."""

from .Document import Document
from .extract_headings import extract_headings, extract_html_anchors
from .extract_links import extract_links
from .Heading import Heading
from .iter_prose_lines import iter_prose_lines
from .Link import Link
from .parse_document import parse_document, relative_to_root
from .ParseError import ParseError
from .split_target import split_target

__all__ = [
    "Document",
    "Heading",
    "Link",
    "ParseError",
    "extract_headings",
    "extract_html_anchors",
    "extract_links",
    "iter_prose_lines",
    "parse_document",
    "relative_to_root",
    "split_target",
]
