"""Split a raw link destination into path and anchor (UNO: single function)."""

from urllib.parse import unquote


def split_target(raw: str) -> tuple[str, str, str | None]:
    """Split a link destination into ``(target, path, anchor)``.

    ``<...>`` brackets are removed and a trailing link title is dropped. The
    path loses any ``?query`` and is percent-decoded; an empty fragment
    (``"page.md#"``) counts as no anchor.

    Args:
        raw: Destination text between the parentheses of ``[text](...)``

    Returns:
        The bare target, its decoded path (possibly empty) and its anchor or None
    """
    raw = raw.strip()
    if raw.startswith("<"):
        end = raw.find(">")
        target = raw[1:end] if end != -1 else raw[1:]
    else:
        parts = raw.split()
        target = parts[0] if parts else ""

    path, _, anchor = target.partition("#")
    path = path.partition("?")[0]
    return target, unquote(path), unquote(anchor) or None
