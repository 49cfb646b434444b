"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

from pathlib import Path

import pytest

from navcheck.api.check.discover_markdown_files import discover_markdown_files
from navcheck.api.check.DocumentIndex import DocumentIndex
from navcheck.api.config.NavConfig import NavConfig
from tests.conftest import run_cmd, write_corpus

__all__ = ["build_index", "run_cmd", "write_corpus"]


def build_index(root: Path, config: NavConfig | None = None, jobs: int = 1) -> DocumentIndex:
    """Discover and parse every markdown file under root."""
    config = config or NavConfig()
    index = DocumentIndex(root.resolve(), config)
    index.load(discover_markdown_files(root.resolve(), config), jobs=jobs)
    return index


@pytest.fixture
def indexed(corpus):
    """Factory fixture: write a corpus and return its DocumentIndex."""

    def _make(files: dict[str, str | bytes], config: NavConfig | None = None) -> DocumentIndex:
        return build_index(corpus(files), config)

    return _make
