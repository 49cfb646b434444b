"""Build a Document from a markdown file (UNO: single function)."""

import os
from pathlib import Path

from ...utils.get_logger import get_logger
from .Document import Document
from .extract_headings import extract_headings, extract_html_anchors
from .extract_links import extract_links
from .ParseError import ParseError

logger = get_logger("document")


def relative_to_root(path: Path, root: Path) -> str:
    """Posix path of ``path`` relative to ``root`` (may climb with ``..``)."""
    return Path(os.path.relpath(path, root)).as_posix()


def parse_document(path: Path, root: Path) -> Document:
    """Read and parse a markdown file.

    Args:
        path: Absolute path of the markdown file
        root: Corpus root used to compute the document's relative path

    Returns:
        The parsed Document

    Raises:
        ParseError: If the file holds binary content or is not valid UTF-8
        OSError: If the file cannot be read
    """
    data = path.read_bytes()
    if b"\x00" in data:
        raise ParseError(path, "file contains NUL bytes; not a text document")
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc

    rel_path = relative_to_root(path, root)
    headings = extract_headings(text)
    links = tuple(extract_links(text, source=rel_path))
    logger.debug("Parsed %s: %d headings, %d links", rel_path, len(headings), len(links))

    return Document(
        path=path,
        rel_path=rel_path,
        text=text,
        headings=tuple(headings),
        links=links,
        html_anchors=extract_html_anchors(text),
    )
