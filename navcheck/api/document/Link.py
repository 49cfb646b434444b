"""Link model (UNO: single model)."""

import re
from dataclasses import dataclass

from ._constants import FILE_SCHEME

# RFC 3986 scheme; single letters are left alone so "C:/x.md" is not a URL
SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]+):")


@dataclass(frozen=True)
class Link:
    """A link occurrence in a markdown document.

    ``path`` is empty for same-file links; ``anchor`` is None when the target
    carries no fragment.
    """

    source: str
    line_number: int
    column_number: int
    kind: str
    text: str
    raw_target: str
    path: str
    anchor: str | None
    span: str

    @property
    def scheme(self) -> str | None:
        match = SCHEME_PATTERN.match(self.raw_target)
        return match.group(1).lower() if match else None

    @property
    def is_file_url(self) -> bool:
        return self.scheme == FILE_SCHEME

    @property
    def is_external(self) -> bool:
        """True for targets outside the corpus (web URLs, mailto:, //host)."""
        if self.raw_target.startswith("//"):
            return True
        scheme = self.scheme
        return scheme is not None and scheme != FILE_SCHEME

    @property
    def is_same_file(self) -> bool:
        return not self.path and self.scheme is None
