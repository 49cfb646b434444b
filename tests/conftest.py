"""Shared pytest configuration and fixtures for all tests."""

import os
import tempfile
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register markers and keep the navcheck log out of the real home directory."""
    for marker in ("unit", "smoke", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests (applied by location)")
    os.environ.setdefault("NAVCHECK_HOME", tempfile.mkdtemp(prefix="navcheck-home-"))


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Test Helpers
# =============================================================================


def write_corpus(root: Path, files: dict[str, str | bytes]) -> Path:
    """Write a markdown corpus under root and return root.

    Keys are root-relative paths; bytes values are written verbatim.
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def corpus(tmp_path: Path):
    """Factory fixture: ``corpus({"a.md": "..."})`` writes files under a fresh root."""

    def _make(files: dict[str, str | bytes]) -> Path:
        return write_corpus(tmp_path / "corpus", files)

    return _make
