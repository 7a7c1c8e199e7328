"""Settings model for the converter."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config_models import CsvFormat, RenderOptions
from .error_codes import ErrorCode
from .exceptions import ConfigurationError

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL")


class Config(BaseSettings):
    """Converter configuration using pydantic-settings.

    Values come from keyword arguments, ``ANKI_TABLE_*`` environment
    variables and a ``.env`` file, in that order of precedence. Nested
    models use ``__`` as separator, e.g. ``ANKI_TABLE_CSV_FORMAT__DELIMITER``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANKI_TABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    csv_format: CsvFormat = Field(default_factory=CsvFormat)
    render: RenderOptions = Field(default_factory=RenderOptions)

    input_encoding: str = Field(
        default="utf-8-sig",
        description="Encoding of input CSV files (BOM tolerant by default)",
    )
    output_encoding: str = "utf-8"

    log_level: str = "INFO"
    log_file: Path | None = None

    @field_validator("input_encoding", "output_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Encodings must be known to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            msg = f"Unknown encoding: {v}"
            raise ValueError(msg) from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in _VALID_LOG_LEVELS:
            msg = f"log_level must be one of {list(_VALID_LOG_LEVELS)}, got '{v}'"
            raise ValueError(msg)
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def parse_log_file(cls, v: Any) -> Path | None:
        """Convert string to Path, treating empty strings as unset."""
        if v is None or v == "":
            return None
        if isinstance(v, (str, Path)):
            return Path(v).expanduser()
        msg = f"log_file must be string or Path, got {type(v).__name__}"
        raise ValueError(msg)

    def validate_config(self) -> Config:
        """Check cross-field constraints that pydantic cannot express."""
        if self.render.literal_sentinel in (
            self.csv_format.quote_char,
            self.csv_format.delimiter,
        ):
            msg = (
                f"literal_sentinel {self.render.literal_sentinel!r} collides "
                "with a CSV special character"
            )
            raise ConfigurationError(
                msg,
                suggestion="Pick a sentinel that never starts a regular cell",
                error_code=ErrorCode.CFG_INVALID.value,
            )
        return self
