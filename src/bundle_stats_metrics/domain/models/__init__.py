from bundle_stats_metrics.domain.models.asset import (
    Asset,
    AssetSource,
    BinarySource,
    CodeSource,
    TextSource,
)
from bundle_stats_metrics.domain.models.build_context import BuildContext
from bundle_stats_metrics.domain.models.console_mode import ConsoleMode
from bundle_stats_metrics.domain.models.output_format import OutputFormat
from bundle_stats_metrics.domain.models.size_metric import SizeMetric, SizeUnit
from bundle_stats_metrics.domain.models.size_report import SizeReport

__all__ = [
    "Asset",
    "AssetSource",
    "BinarySource",
    "BuildContext",
    "CodeSource",
    "ConsoleMode",
    "OutputFormat",
    "SizeMetric",
    "SizeReport",
    "SizeUnit",
    "TextSource",
]
