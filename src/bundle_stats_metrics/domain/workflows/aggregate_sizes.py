from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from bundle_stats_metrics.domain.models.asset import (
    Asset,
    BinarySource,
    CodeSource,
    TextSource,
)
from bundle_stats_metrics.domain.models.size_metric import SizeMetric, SizeUnit
from bundle_stats_metrics.domain.models.size_report import SizeReport

_KIB = 1024
_CENT = Decimal("0.01")

LARGEST_FILE_NAME = "Largest file size"
ASSETS_NAME = "Assets size"
BUNDLE_NAME = "Bundle size including assets"
BUILD_TIME_NAME = "Build time"
NO_EXTENSION_NAME = "Files without extension size"


def round_kib(value: float) -> float:
    # Half-up on the exact binary value, matching stats files written by
    # earlier releases.
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


def to_kib(size_bytes: int) -> float:
    return round_kib(size_bytes / _KIB)


def extension_of(identifier: str) -> str:
    _, dot, extension = identifier.rpartition(".")
    return extension if dot else ""


def extension_metric_name(extension: str) -> str:
    if not extension:
        return NO_EXTENSION_NAME
    return f".{extension} files size"


def asset_size_bytes(asset: object) -> int:
    if asset is None:
        return 0
    if not isinstance(asset, Asset):
        asset = Asset.from_host("", asset)
    source = asset.source
    if isinstance(source, TextSource):
        return len(source.text.encode("utf-8"))
    if isinstance(source, BinarySource):
        return len(source.data)
    if isinstance(source, CodeSource):
        return len(source.code.encode("utf-8"))
    return 0


def aggregate(
    assets: Mapping[str, object], build_duration_seconds: float
) -> SizeReport:
    """Aggregate emitted assets into a size report.

    Per-asset sizes are rounded to two decimals before they are added to
    their extension bucket, and each bucket is re-rounded after every
    addition. Bucket totals can therefore drift from the bundle total by a
    few hundredths of a KiB.

    Values that are not ``Asset`` instances are read the way host objects
    are, and anything unrecognised counts as zero bytes.
    """
    extension_values: dict[str, float] = {}
    total_bytes = 0
    largest_value = 0.0
    largest_extension = ""

    for identifier, raw in assets.items():
        extension = extension_of(identifier)
        current = extension_values.setdefault(extension, 0.0)
        if raw is None:
            continue

        size_bytes = asset_size_bytes(Asset.from_host(identifier, raw))
        total_bytes += size_bytes

        size_kib = to_kib(size_bytes)
        if size_kib > largest_value:
            largest_value = size_kib
            largest_extension = extension
        extension_values[extension] = round_kib(current + size_kib)

    total_kib = to_kib(total_bytes)
    return SizeReport(
        largest_chunk=SizeMetric(
            name=LARGEST_FILE_NAME, extension=largest_extension, value=largest_value
        ),
        assets=SizeMetric(name=ASSETS_NAME, value=total_kib),
        extensions={
            extension: SizeMetric(
                name=extension_metric_name(extension), extension=extension, value=value
            )
            for extension, value in extension_values.items()
        },
        bundle=SizeMetric(name=BUNDLE_NAME, value=total_kib),
        build_time=SizeMetric(
            name=BUILD_TIME_NAME,
            value=max(0.0, float(build_duration_seconds)),
            unit=SizeUnit.SECONDS,
        ),
    )
