from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Timing of a single build, handed from one lifecycle hook to the next."""

    started_at_ms: int
    ended_at_ms: int | None = None

    @classmethod
    def start(cls, now_ms: int) -> BuildContext:
        return cls(started_at_ms=now_ms)

    def finish(self, now_ms: int) -> BuildContext:
        return replace(self, ended_at_ms=now_ms)

    @property
    def finished(self) -> bool:
        return self.ended_at_ms is not None

    @property
    def duration_seconds(self) -> float:
        if self.ended_at_ms is None:
            return 0.0
        return max(0, self.ended_at_ms - self.started_at_ms) / 1000
