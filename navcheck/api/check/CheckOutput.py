"""Output schema for the check command."""

from pydantic import BaseModel, Field


class FindingOutput(BaseModel):
    path: str
    line: int
    category: str
    severity: str
    message: str
    span: str = ""


class CheckOutput(BaseModel):
    """Structured result of a validation run.

    ``errors`` and ``warnings`` hold run-level messages (fatal problems and
    notices); per-file problems are in ``findings``.
    """

    errors: list[str] = Field(default_factory=list, description="Run-level error messages")
    warnings: list[str] = Field(default_factory=list, description="Run-level warning messages")
    root: str
    strict: bool = False
    documents_checked: int = 0
    links_checked: int = 0
    error_count: int = 0
    warning_count: int = 0
    findings: list[FindingOutput] = Field(default_factory=list)
    is_valid: bool = False
