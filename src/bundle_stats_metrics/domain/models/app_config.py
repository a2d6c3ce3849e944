from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bundle_stats_metrics.config.settings_models import PluginOptions


@dataclass(frozen=True)
class AppConfig:
    options: PluginOptions
    output_path: Path
    is_production: bool
    settings_path: Path | None = None
