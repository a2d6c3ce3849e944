from __future__ import annotations

from pathlib import Path
from typing import final, override

from bundle_stats_metrics.domain.protocols.output_writer_protocol import OutputWriterProtocol


@final
class FileReporter(OutputWriterProtocol):
    @override
    def write(self, content: str, destination: Path) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)
        tmp = destination.with_suffix(destination.suffix + ".tmp")
        try:
            _ = tmp.write_text(content, encoding="utf-8")
            _ = tmp.replace(destination)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        return destination
