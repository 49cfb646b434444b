"""In-memory index of parsed markdown documents."""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.NavConfig import NavConfig
from ..document.Document import Document
from ..document.parse_document import parse_document, relative_to_root
from ..document.ParseError import ParseError
from .Category import Category
from .Finding import Finding

logger = get_logger("index")


class DocumentIndex:
    """Parsed documents keyed by normalized absolute path.

    Files that fail to parse are recorded once as ``parse-error`` findings and
    are absent from the index. Markdown files outside the scanned set (for
    example in an excluded directory) are parsed the first time a link points
    at them.
    """

    def __init__(self, root: Path, config: NavConfig):
        self.root = root
        self.config = config
        self.documents: dict[Path, Document] = {}
        self.findings: list[Finding] = []
        self._failed: set[Path] = set()

    @staticmethod
    def normalize(path: Path) -> Path:
        return Path(os.path.normpath(path))

    def is_markdown(self, path: Path) -> bool:
        return path.suffix.lower() in self.config.markdown_extensions

    def load(self, paths: list[Path], jobs: int = 1) -> None:
        """Parse ``paths`` into the index, optionally with a thread pool."""
        normalized = [self.normalize(path) for path in paths]
        if jobs > 1 and len(normalized) > 1:
            with ThreadPoolExecutor(max_workers=jobs) as pool:
                results = list(pool.map(self._parse, normalized))
        else:
            results = [self._parse(path) for path in normalized]

        for path, outcome in zip(normalized, results):
            self._store(path, outcome)

    def get(self, path: Path) -> Document | None:
        """Return the Document at ``path``, parsing it on first use."""
        path = self.normalize(path)
        if path in self.documents:
            return self.documents[path]
        if path in self._failed or not path.is_file() or not self.is_markdown(path):
            return None
        self._store(path, self._parse(path))
        return self.documents.get(path)

    def __iter__(self):
        return iter(sorted(self.documents.values(), key=lambda doc: doc.rel_path))

    def __len__(self) -> int:
        return len(self.documents)

    def _parse(self, path: Path) -> Document | Finding:
        rel_path = relative_to_root(path, self.root)
        try:
            return parse_document(path, self.root)
        except ParseError as exc:
            logger.warning("Parse error in %s: %s", rel_path, exc.reason)
            return Finding(path=rel_path, line=0, category=Category.PARSE_ERROR, message=exc.reason)
        except OSError as exc:
            logger.warning("Cannot read %s: %s", rel_path, exc)
            return Finding(
                path=rel_path,
                line=0,
                category=Category.PARSE_ERROR,
                message=f"cannot read file: {exc.strerror or exc}",
            )

    def _store(self, path: Path, outcome: Document | Finding) -> None:
        if isinstance(outcome, Document):
            self.documents[path] = outcome
        else:
            self._failed.add(path)
            self.findings.append(outcome)
