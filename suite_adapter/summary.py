"""Aggregation of task outcomes into a terminal summary."""

from collections.abc import Iterable
from dataclasses import dataclass

from suite_adapter.rendering import Palette


class AggregateTestFailure(Exception):
    """Raised after all tasks complete when any of them failed."""


@dataclass(frozen=True, kw_only=True)
class Summary:
    """Counts of failed and successful tasks."""

    failed: int
    successful: int

    def render(self, palette: Palette | None = None) -> str:
        palette = palette or Palette()
        failed = f"failed: {self.failed}"
        successful = f"successful: {self.successful}"
        if self.failed > 0:
            failed = palette.red(failed)
        if self.successful > 0:
            successful = palette.green(successful)
        return f"Summary: {failed}, {successful}"

    def raise_for_failures(self) -> None:
        """Raise AggregateTestFailure if any task failed."""
        if self.failed > 0:
            raise AggregateTestFailure(f"{self.failed} tests failed")


def summarize(outcomes: Iterable[bool]) -> Summary:
    """Count outcomes, where True means the task had no failing test."""
    results = list(outcomes)
    successful = sum(1 for ok in results if ok)
    return Summary(failed=len(results) - successful, successful=successful)
