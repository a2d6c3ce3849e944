from __future__ import annotations

import json
import logging
import sys
from typing import TextIO, final

from bundle_stats_metrics.domain.models.console_mode import ConsoleMode
from bundle_stats_metrics.domain.models.size_report import SizeReport


def _plain_number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


@final
class ConsoleReporter:
    def __init__(self, logger: logging.Logger, stream: TextIO | None = None) -> None:
        self._logger = logger
        self._stream = stream

    def _print(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        _ = stream.write(text + "\n")
        stream.flush()

    def report(self, report: SizeReport, mode: ConsoleMode) -> None:
        if mode is ConsoleMode.SUMMARY:
            self._print(f"\n📊 Bundle Size: {report.bundle.value:.2f} KiB")
        elif mode is ConsoleMode.DETAILED:
            details = json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
            self._print(f"\n📊 Bundle Stats:\n{details}")

    def check_threshold(self, report: SizeReport, threshold_kib: float | None) -> bool:
        if threshold_kib is None:
            return False
        if report.bundle.value <= threshold_kib:
            return False
        self._logger.warning(
            "Bundle size (%.2f KiB) exceeds the threshold of %s KiB",
            report.bundle.value,
            _plain_number(threshold_kib),
        )
        return True
