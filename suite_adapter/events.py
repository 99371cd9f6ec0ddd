"""Projection of result trees into per-test host events."""

from collections.abc import Iterator
from enum import StrEnum

from pydantic import Field

from suite_adapter.fingerprint import Fingerprint
from suite_adapter.models.base import Model
from suite_adapter.models.result import (
    Failed,
    FailureDetail,
    Ignored,
    Passed,
    ResultNode,
    TestResult,
    iter_leaves,
)


class Status(StrEnum):
    SUCCESS = "Success"
    FAILURE = "Failure"
    IGNORED = "Ignored"
    ERROR = "Error"


class Event(Model):
    """Outcome of one test leaf, as reported to the host."""

    fully_qualified_name: str = Field(..., description="Id of the suite")
    selector: str = Field(..., description="Name of the test leaf")
    status: Status
    throwable: FailureDetail | None = Field(
        default=None, description="Failure detail, present only on Failure"
    )
    duration: int = Field(default=0, description="Duration in milliseconds")
    fingerprint: Fingerprint

    @property
    def key(self) -> tuple[str, str]:
        return self.fully_qualified_name, self.selector


def _to_event(fqn: str, leaf: TestResult, fingerprint: Fingerprint) -> Event:
    match leaf.outcome:
        case Passed():
            status, throwable = Status.SUCCESS, None
        case Failed(detail=detail):
            status, throwable = Status.FAILURE, detail
        case Ignored():
            status, throwable = Status.IGNORED, None

    return Event(
        fully_qualified_name=fqn,
        selector=leaf.name,
        status=status,
        throwable=throwable,
        duration=leaf.duration_ms,
        fingerprint=fingerprint,
    )


def project_events(
    fqn: str, tree: ResultNode, fingerprint: Fingerprint
) -> Iterator[Event]:
    """Yield one event per test leaf; groups produce none."""
    for leaf in iter_leaves(tree):
        yield _to_event(fqn, leaf, fingerprint)
