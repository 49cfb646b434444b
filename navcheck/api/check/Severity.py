"""Severity enum for findings."""

from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
