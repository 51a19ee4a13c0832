"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from PEM_CODEC_* environment variables
  - Fall back to a .env file in the working directory
  - Validate types and constraints before any file is read

Only CodecSettings is a BaseSettings instance. EncodeSettings is a plain
BaseModel populated through env_nested_delimiter="__", so the env var
PEM_CODEC_ENCODE__LINE_WRAP maps to encode.line_wrap.

The codec functions never read settings themselves; the CLI does and
passes the resulting EncodeConfig down.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pem_codec.domain.models import EncodeConfig, LineEnding

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class EncodeSettings(BaseModel):
    """Layout of encoded output. Defaults produce the canonical CRLF / 64-column form."""

    line_wrap: int = Field(default=64, ge=4, description="Base64 characters per line")
    line_ending: Literal["crlf", "lf"] = Field(default="crlf")

    @field_validator("line_wrap")
    @classmethod
    def validate_line_wrap(cls, value: int) -> int:
        """Lines must hold whole base64 quanta."""
        if value % 4:
            raise ValueError(f"line_wrap must be a multiple of 4, got {value}")
        return value

    def to_encode_config(self) -> EncodeConfig:
        ending = LineEnding.CRLF if self.line_ending == "crlf" else LineEnding.LF
        return EncodeConfig(line_ending=ending, line_wrap=self.line_wrap)


class CodecSettings(BaseSettings):
    """
    Root settings for the pem-codec command line.

    Load order (highest priority first):
      1. Environment variables (PEM_CODEC_*)
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="PEM_CODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING")
    max_input_bytes: int = Field(default=16 * 1024 * 1024, ge=1)
    encode: EncodeSettings = Field(default_factory=lambda: EncodeSettings())

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level
