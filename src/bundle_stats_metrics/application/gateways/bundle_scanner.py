from __future__ import annotations

from pathlib import Path
from typing import final

from bundle_stats_metrics.domain.models.asset import Asset


@final
class BundleScanner:
    """Reads a build output directory into the asset mapping the aggregator expects."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def scan_files(self) -> list[Path]:
        if not self._root.exists():
            return []

        files: list[Path] = []
        for path in self._root.rglob("*"):
            if not path.is_file():
                continue
            if path.is_symlink():
                continue
            files.append(path)
        return sorted(files)

    def scan(self) -> dict[str, Asset]:
        assets: dict[str, Asset] = {}
        for path in self.scan_files():
            identifier = path.relative_to(self._root).as_posix()
            assets[identifier] = Asset.binary(identifier, path.read_bytes())
        return assets
