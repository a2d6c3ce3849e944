from __future__ import annotations

from enum import StrEnum


class OutputFormat(StrEnum):
    JSON = "json"
    TXT = "txt"
    CSV = "csv"
