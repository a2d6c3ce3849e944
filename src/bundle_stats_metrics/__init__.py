from bundle_stats_metrics.application.formatters.report_formatter import format_report
from bundle_stats_metrics.application.plugin import BundleStatsPlugin
from bundle_stats_metrics.config.settings_models import PluginOptions
from bundle_stats_metrics.domain.models import (
    Asset,
    BuildContext,
    ConsoleMode,
    OutputFormat,
    SizeMetric,
    SizeReport,
)
from bundle_stats_metrics.domain.workflows.aggregate_sizes import aggregate

__all__ = [
    "Asset",
    "BuildContext",
    "BundleStatsPlugin",
    "ConsoleMode",
    "OutputFormat",
    "PluginOptions",
    "SizeMetric",
    "SizeReport",
    "aggregate",
    "format_report",
]
