from __future__ import annotations

import json
from collections.abc import Callable

from bundle_stats_metrics.domain.models.output_format import OutputFormat
from bundle_stats_metrics.domain.models.size_report import SizeReport

CSV_HEADER = "Metric,Value"


def _compact(value: object) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _render_json(data: dict[str, object]) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def _render_txt(data: dict[str, object]) -> str:
    return "\n".join(f"{key}: {_compact(value)}" for key, value in data.items())


def _render_csv(data: dict[str, object]) -> str:
    rows = [f"{key},{_compact(value)}" for key, value in data.items()]
    return "\n".join([CSV_HEADER, *rows])


_RENDERERS: dict[OutputFormat, Callable[[dict[str, object]], str]] = {
    OutputFormat.JSON: _render_json,
    OutputFormat.TXT: _render_txt,
    OutputFormat.CSV: _render_csv,
}


def format_report(report: SizeReport, mode: OutputFormat | str) -> str:
    """Render a report as json, txt or csv. Unknown modes render as ``""``."""
    try:
        output_format = OutputFormat(mode)
    except ValueError:
        return ""
    return _RENDERERS[output_format](report.to_dict())
