"""Tests for summary reporting."""

import pytest

from suite_adapter.rendering import GREEN, RED, RESET, Palette
from suite_adapter.summary import AggregateTestFailure, Summary, summarize


def test_counts_failed_and_successful() -> None:
    """Counts two failures and three successes."""
    summary = summarize([False, True, False, True, True])

    assert summary == Summary(failed=2, successful=3)


def test_signals_overall_failure() -> None:
    """Raises AggregateTestFailure when any task failed."""
    summary = summarize([False, True, False, True, True])

    with pytest.raises(AggregateTestFailure, match="2 tests failed"):
        summary.raise_for_failures()


def test_no_failures_does_not_raise() -> None:
    """Passes silently when every task succeeded."""
    summarize([True, True]).raise_for_failures()


@pytest.mark.parametrize(
    ("summary", "expected"),
    [
        (Summary(failed=0, successful=0), "Summary: failed: 0, successful: 0"),
        (
            Summary(failed=2, successful=3),
            f"Summary: {RED}failed: 2{RESET}, {GREEN}successful: 3{RESET}",
        ),
        (
            Summary(failed=0, successful=1),
            f"Summary: failed: 0, {GREEN}successful: 1{RESET}",
        ),
    ],
)
def test_render_colors_nonzero_counts(summary: Summary, expected: str) -> None:
    """Colors only the segments with nonzero counts."""
    assert summary.render() == expected


def test_render_without_colors() -> None:
    """Renders plain text with a disabled palette."""
    rendered = Summary(failed=1, successful=1).render(Palette(enabled=False))

    assert rendered == "Summary: failed: 1, successful: 1"
