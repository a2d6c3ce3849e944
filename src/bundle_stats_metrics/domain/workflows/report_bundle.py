from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import final

from bundle_stats_metrics.application.formatters.report_formatter import format_report
from bundle_stats_metrics.application.reporters.console_reporter import ConsoleReporter
from bundle_stats_metrics.config.settings_models import PluginOptions
from bundle_stats_metrics.domain.models.asset import Asset
from bundle_stats_metrics.domain.models.build_context import BuildContext
from bundle_stats_metrics.domain.models.size_report import SizeReport
from bundle_stats_metrics.domain.protocols.output_writer_protocol import OutputWriterProtocol
from bundle_stats_metrics.domain.workflows.aggregate_sizes import aggregate


@final
class ReportBundle:
    def __init__(
        self,
        options: PluginOptions,
        output_path: Path,
        writer: OutputWriterProtocol,
        console: ConsoleReporter,
        logger: logging.Logger,
    ) -> None:
        self._options = options
        self._output_path = output_path
        self._writer = writer
        self._console = console
        self._logger = logger

    def __call__(
        self, context: BuildContext, assets: Mapping[str, Asset | None]
    ) -> SizeReport:
        report = aggregate(assets, context.duration_seconds)

        content = format_report(report, self._options.format)
        written = self._writer.write(content, self._output_path)
        self._logger.debug(
            "Bundle stats written: %s (%s, %d assets)",
            written,
            self._options.format.value,
            len(assets),
        )

        self._console.report(report, self._options.log_to_console)
        _ = self._console.check_threshold(report, self._options.warn_threshold)
        return report
