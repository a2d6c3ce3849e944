from __future__ import annotations

from bundle_stats_metrics.domain.models.build_context import BuildContext


def test_build_context_given_start_and_end_then_duration_in_seconds():
    context = BuildContext.start(1_000).finish(3_500)

    assert context.finished is True
    assert context.duration_seconds == 2.5


def test_build_context_given_unfinished_build_then_duration_is_zero():
    context = BuildContext.start(1_000)

    assert context.finished is False
    assert context.duration_seconds == 0.0


def test_build_context_given_clock_going_backwards_then_duration_is_zero():
    context = BuildContext.start(5_000).finish(4_000)

    assert context.duration_seconds == 0.0


def test_build_context_finish_returns_new_context():
    started = BuildContext.start(0)
    finished = started.finish(10)

    assert started.ended_at_ms is None
    assert finished.ended_at_ms == 10
