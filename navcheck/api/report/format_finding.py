"""Plain-text rendering of findings."""

from ..check.Finding import Finding
from ..check.Severity import Severity


def format_finding(finding: Finding) -> str:
    """Render one finding as ``<file>:<line>: <category> — <message>``.

    The line number is omitted for whole-file findings and warnings carry a
    ``warning:`` prefix before the category.
    """
    location = f"{finding.path}:{finding.line}" if finding.line > 0 else finding.path
    prefix = "warning: " if finding.severity is Severity.WARNING else ""
    return f"{location}: {prefix}{finding.category.value} — {finding.message}"


def format_summary(findings: list[Finding]) -> str:
    if not findings:
        return "No findings"
    errors = sum(1 for finding in findings if finding.severity is Severity.ERROR)
    return f"{len(findings)} finding(s): {errors} error(s), {len(findings) - errors} warning(s)"
