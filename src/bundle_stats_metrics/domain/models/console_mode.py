from __future__ import annotations

from enum import StrEnum


class ConsoleMode(StrEnum):
    OFF = "off"
    SUMMARY = "summary"
    DETAILED = "detailed"
