"""navcheck - navigation and link-integrity validation for markdown corpora."""

__version__ = "0.1.0"
