from __future__ import annotations

from pathlib import Path
from typing import Protocol


class OutputWriterProtocol(Protocol):
    def write(self, content: str, destination: Path) -> Path: ...
