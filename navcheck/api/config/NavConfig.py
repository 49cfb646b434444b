"""Top-level navcheck configuration."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .ConfigError import ConfigError

CONFIG_FILENAME = ".navcheck.json"


class NavConfig(BaseModel):
    """Settings for a validation run.

    Every field has a default so a corpus without a config file validates
    with the stock rules.
    """

    model_config = ConfigDict(extra="forbid")

    markdown_extensions: list[str] = Field(
        default_factory=lambda: [".md", ".markdown"], description="File suffixes treated as markdown documents"
    )
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: [".git", "node_modules", ".venv", "venv", "__pycache__"],
        description="Directory names never descended into",
    )
    exclude_globs: list[str] = Field(default_factory=list, description="Root-relative globs of files to skip")
    index_files: list[str] = Field(
        default_factory=lambda: ["AGENTS.md", "README.md"], description="Files that must link to every guide"
    )
    guide_dirs: list[str] = Field(
        default_factory=lambda: ["guides", "adoption"], description="Root-relative directories holding guides"
    )
    check_index: bool = Field(True, description="Require every guide to be linked from each index file")
    check_contents: bool = Field(True, description="Check guide Contents tables against their H2 sections")
    contents_heading: str = Field("Contents", description="Heading text of a guide's Contents section")
    strict: bool = Field(False, description="Treat warnings as failures")
    jobs: int = Field(1, ge=1, description="Worker threads used to parse documents")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")

    @field_validator("markdown_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("extension must not be empty")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @classmethod
    def get_config_path(cls, root: Path) -> Path:
        """Get the default config file location for a corpus root."""
        return root / CONFIG_FILENAME

    @classmethod
    def load(cls, root: Path, config_path: Path | None = None) -> "NavConfig":
        """Load and validate config for a corpus.

        An explicit ``config_path`` must exist. Without one, ``<root>/.navcheck.json``
        is used when present and defaults otherwise.

        Raises:
            ConfigError: If the file is missing (explicit path only), invalid JSON, or fails validation
        """
        path = config_path if config_path is not None else cls.get_config_path(root)

        try:
            exists = path.is_file()
        except OSError:
            exists = False

        if not exists:
            if config_path is not None:
                raise ConfigError(f"Configuration file not found at {path}")
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Configuration validation error: expected an object in {path}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def with_overrides(self, **overrides) -> "NavConfig":
        """Return a copy with the non-None overrides applied and re-validated."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return NavConfig(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            raise ConfigError(f"Configuration validation error: {field}: {first.get('msg', str(e))}") from e
