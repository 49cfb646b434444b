"""Validation domain: graph checker, navigation checks and the check command."""

from .Category import Category
from .check_contents import check_contents, check_document_contents
from .check_index import check_index
from .discover_markdown_files import discover_markdown_files
from .DocumentIndex import DocumentIndex
from .FatalIOError import FatalIOError
from .Finding import Finding
from .GraphChecker import GraphChecker
from .Severity import Severity

__all__ = [
    "Category",
    "DocumentIndex",
    "FatalIOError",
    "Finding",
    "GraphChecker",
    "Severity",
    "check_contents",
    "check_document_contents",
    "check_index",
    "discover_markdown_files",
]
