from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class SizeUnit(StrEnum):
    KIB = "KiB"
    SECONDS = "seconds"


class SizeMetric(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    name: str
    extension: str = ""
    value: float = 0.0
    unit: SizeUnit = SizeUnit.KIB
