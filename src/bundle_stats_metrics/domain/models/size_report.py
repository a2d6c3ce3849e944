from __future__ import annotations

from typing import ClassVar, cast

from pydantic import BaseModel, ConfigDict, Field

from bundle_stats_metrics.domain.models.size_metric import SizeMetric


class SizeReport(BaseModel):
    """Sizes of one bundle.

    Serialised with the camelCase keys used by the stats file so that
    existing consumers keep parsing it.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="forbid", populate_by_name=True
    )

    largest_chunk: SizeMetric = Field(alias="largestChunk")
    assets: SizeMetric
    extensions: dict[str, SizeMetric] = Field(default_factory=dict)
    bundle: SizeMetric
    build_time: SizeMetric = Field(alias="buildTime")

    def to_dict(self) -> dict[str, object]:
        return cast(dict[str, object], self.model_dump(mode="json", by_alias=True))
