"""Reporting domain."""

from .format_finding import format_finding, format_summary
from .print_report import print_report

__all__ = ["format_finding", "format_summary", "print_report"]
