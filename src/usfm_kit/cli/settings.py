import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator, model_validator

from usfm_kit.formatters import default_registry
from usfm_kit.usfm.config import ParseOptions

logger = logging.getLogger(__name__)


class CliSettings(BaseModel):
    format: str = "json"
    output: str | None = None
    verbose: bool = False
    quiet: bool = False
    strict: bool = False
    include_footnotes: bool = True
    include_references: bool = True

    class Config:
        extra = "forbid"

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        registry = default_registry()
        if value not in registry:
            valid = ", ".join(registry.names())
            raise ValueError(f"invalid output format: {value} (valid: {valid})")
        return value

    @model_validator(mode="after")
    def _check_verbosity(self) -> "CliSettings":
        if self.verbose and self.quiet:
            raise ValueError("cannot use both --quiet and --verbose flags")
        return self

    def to_parse_options(self) -> ParseOptions:
        return ParseOptions(
            strict_mode=self.strict,
            include_footnotes=self.include_footnotes,
            include_references=self.include_references,
        )

    def log_level(self) -> int:
        if self.verbose:
            return logging.DEBUG
        if self.quiet:
            return logging.WARNING
        return logging.INFO


def load_settings_file(file_path: str | Path) -> dict[str, Any]:
    """Read raw settings from a YAML file. An empty file yields ``{}``."""
    with open(file_path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {file_path} must contain a mapping")
    logger.debug("Loaded settings from %s: %s", file_path, sorted(data))
    return data


def load_settings(
    file_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> CliSettings:
    """Merge a settings file with explicit overrides. Overrides win.

    ``None`` override values mean "not given" and are ignored.
    """
    data = load_settings_file(file_path) if file_path is not None else {}
    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value
    return CliSettings(**data)
