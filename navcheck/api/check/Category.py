"""Finding categories."""

from enum import Enum

from .Severity import Severity


class Category(str, Enum):
    BROKEN_FILE = "broken-file"
    BROKEN_ANCHOR = "broken-anchor"
    NON_PORTABLE = "non-portable-file-url"
    PARSE_ERROR = "parse-error"
    UNINDEXED_GUIDE = "unindexed-guide"
    MISSING_INDEX = "missing-index"
    MISSING_CONTENTS = "missing-contents"
    STALE_CONTENTS = "stale-contents"

    @property
    def severity(self) -> Severity:
        if self in (Category.MISSING_CONTENTS, Category.STALE_CONTENTS):
            return Severity.WARNING
        return Severity.ERROR
