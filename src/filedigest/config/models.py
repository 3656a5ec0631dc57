"""Pydantic models describing filedigest configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filedigest.digest import Algorithm


class HashingConfig(BaseModel):
    """Digest defaults applied when the caller does not choose explicitly."""

    model_config = ConfigDict(extra="forbid")

    algorithm: Algorithm = Algorithm.SHA256
    mode: Literal["sync", "async"] = "sync"

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: object) -> Algorithm:
        """Accept spellings such as ``SHA-512``."""

        if isinstance(value, (str, Algorithm)):
            return Algorithm.parse(value)
        raise ValueError(f"algorithm must be a string, got {type(value).__name__}")


class LoggingConfig(BaseModel):
    """Logger level and optional log file."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class FileDigestConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "FileDigestConfig",
    "HashingConfig",
    "LoggingConfig",
]
