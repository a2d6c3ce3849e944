from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar, final

from bundle_stats_metrics.config.settings_models import PluginOptions
from bundle_stats_metrics.domain.models.app_config import AppConfig


@final
class SettingsLoader:
    _KEY_MAP: ClassVar[dict[str, str]] = {
        "OUTPUT_FILE": "output_file",
        "FORMAT": "format",
        "LOG_TO_CONSOLE": "log_to_console",
        "WARN_THRESHOLD": "warn_threshold",
        "LOG_LEVEL": "log_level",
    }
    _MODE_ENV_KEYS: ClassVar[tuple[str, ...]] = ("BUILD_ENV", "NODE_ENV")
    _SETTINGS_FILE_ENV_KEY: ClassVar[str] = "BUNDLE_STATS_SETTINGS_FILE"
    PROD_OUTPUT_NAME: ClassVar[str] = "bundle-stats-prod.json"
    DEV_OUTPUT_NAME: ClassVar[str] = "bundle-stats-dev.json"

    @staticmethod
    def _parse_key_value_file(path: Path) -> dict[str, str]:
        data: dict[str, str] = {}
        if not path.exists():
            return data

        for raw_line in path.read_text("utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[7:].strip()
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            data[key.strip()] = value.strip().strip('"').strip("'")
        return data

    @classmethod
    def _map_file_values(cls, raw: Mapping[str, str]) -> dict[str, object]:
        mapped: dict[str, object] = {}
        for key, value in raw.items():
            target = cls._KEY_MAP.get(key)
            if not target:
                continue
            text = str(value or "").strip()
            if not text:
                mapped[target] = None
                continue
            if target == "warn_threshold":
                try:
                    mapped[target] = float(text)
                except ValueError:
                    mapped[target] = None
                continue
            mapped[target] = text
        return mapped

    @classmethod
    def is_production(cls, environ: Mapping[str, str]) -> bool:
        for key in cls._MODE_ENV_KEYS:
            value = str(environ.get(key) or "").strip().lower()
            if value:
                return value == "production"
        return False

    @classmethod
    def _resolve_settings_path(
        cls, settings_path: Path | None, environ: Mapping[str, str], cwd: Path
    ) -> Path:
        if settings_path is not None:
            return settings_path
        from_env = str(environ.get(cls._SETTINGS_FILE_ENV_KEY) or "").strip()
        if from_env:
            return Path(from_env)
        return cwd / "configs" / "bundle-stats.ini"

    @classmethod
    def default_output_path(cls, cwd: Path, is_production: bool) -> Path:
        return cwd / (cls.PROD_OUTPUT_NAME if is_production else cls.DEV_OUTPUT_NAME)

    @classmethod
    def load(
        cls,
        settings_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
        **options: object,
    ) -> AppConfig:
        env = os.environ if environ is None else environ
        root = cwd or Path.cwd()
        resolved_settings = cls._resolve_settings_path(settings_path, env, root)

        merged = cls._map_file_values(cls._parse_key_value_file(resolved_settings))
        merged.update({key: value for key, value in options.items() if value is not None})
        plugin_options = PluginOptions.model_validate(merged)

        production = cls.is_production(env)
        output_path = plugin_options.output_file or cls.default_output_path(root, production)
        if not output_path.is_absolute():
            output_path = root / output_path
        return AppConfig(
            options=plugin_options,
            output_path=output_path,
            is_production=production,
            settings_path=resolved_settings if resolved_settings.exists() else None,
        )
