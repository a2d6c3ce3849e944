from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bundle_stats_metrics.domain.models.console_mode import ConsoleMode
from bundle_stats_metrics.domain.models.output_format import OutputFormat


class PluginOptions(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    output_file: Path | None = Field(default=None)
    format: OutputFormat = Field(default=OutputFormat.JSON)
    log_to_console: ConsoleMode = Field(default=ConsoleMode.OFF)
    warn_threshold: float | None = Field(default=None, gt=0)
    log_level: str | None = Field(default=None)

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, value: object) -> object:
        if value is None:
            return OutputFormat.JSON
        if isinstance(value, str):
            normalized = value.strip().lower()
            if not normalized:
                return OutputFormat.JSON
            if normalized not in {item.value for item in OutputFormat}:
                raise ValueError("FORMAT must be one of: json, txt, csv")
            return normalized
        return value

    @field_validator("log_to_console", mode="before")
    @classmethod
    def _normalize_log_to_console(cls, value: object) -> object:
        if value is None or value is False:
            return ConsoleMode.OFF
        if value is True:
            return ConsoleMode.SUMMARY
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in {"", "0", "false", "no", "off"}:
                return ConsoleMode.OFF
            if normalized in {"1", "true", "yes", "on"}:
                return ConsoleMode.SUMMARY
            if normalized not in {item.value for item in ConsoleMode}:
                raise ValueError("LOG_TO_CONSOLE must be one of: false, summary, detailed")
            return normalized
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = str(value or "").strip().lower()
        if not normalized:
            return None
        if normalized not in {"debug", "info", "warn", "warning", "error"}:
            raise ValueError("LOG_LEVEL must be one of: debug, info, warn, error")
        return "warning" if normalized == "warn" else normalized
