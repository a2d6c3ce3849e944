from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import ClassVar, TextIO, final

from bundle_stats_metrics.application.reporters.console_reporter import ConsoleReporter
from bundle_stats_metrics.application.reporters.file_reporter import FileReporter
from bundle_stats_metrics.config.logging_setup import LOGGER_NAME, configure_logging
from bundle_stats_metrics.config.settings_loader import SettingsLoader
from bundle_stats_metrics.domain.models.app_config import AppConfig
from bundle_stats_metrics.domain.models.asset import Asset
from bundle_stats_metrics.domain.models.build_context import BuildContext
from bundle_stats_metrics.domain.models.size_report import SizeReport
from bundle_stats_metrics.domain.protocols.output_writer_protocol import OutputWriterProtocol
from bundle_stats_metrics.domain.workflows.report_bundle import ReportBundle


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@final
class BundleStatsPlugin:
    """Build-host plugin measuring bundle size and build duration.

    The host calls ``build_start`` when a build begins, passes the returned
    context to ``build_end`` once compilation finishes, and then hands the
    finished context and the emitted assets to ``generate_bundle``.
    """

    name: ClassVar[str] = "bundle-stats-metrics"
    apply: ClassVar[str] = "build"

    def __init__(
        self,
        config: AppConfig,
        writer: OutputWriterProtocol | None = None,
        stream: TextIO | None = None,
        logger: logging.Logger | None = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._config = config
        self._clock = clock
        self._log = logger or logging.getLogger(f"{LOGGER_NAME}.plugin")
        self._report_bundle = ReportBundle(
            options=config.options,
            output_path=config.output_path,
            writer=writer or FileReporter(),
            console=ConsoleReporter(logger=self._log, stream=stream),
            logger=self._log,
        )

    @classmethod
    def from_env(cls, settings_path: Path | None = None, **options: object) -> BundleStatsPlugin:
        config = SettingsLoader.load(settings_path, **options)
        if config.options.log_level:
            _ = configure_logging(config.options.log_level)
        return cls(config)

    @property
    def config(self) -> AppConfig:
        return self._config

    def build_start(self) -> BuildContext:
        context = BuildContext.start(self._clock())
        self._log.debug("Build started at %d", context.started_at_ms)
        return context

    def build_end(self, context: BuildContext) -> BuildContext:
        finished = context.finish(self._clock())
        self._log.debug("Build finished in %.3fs", finished.duration_seconds)
        return finished

    def generate_bundle(
        self, context: BuildContext, bundle: Mapping[str, object]
    ) -> SizeReport | None:
        if not self._config.is_production:
            self._log.debug("Bundle stats skipped: not a production build")
            return None

        assets = {
            identifier: None if raw is None else Asset.from_host(identifier, raw)
            for identifier, raw in bundle.items()
        }
        return self._report_bundle(context, assets)
