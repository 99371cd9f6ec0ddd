"""Value predicates and assertions used inside test bodies."""

from collections.abc import Callable, Container
from dataclasses import dataclass
from typing import Any

from suite_adapter.models.result import FailureDetail


class AssertionFailure(Exception):
    """Raised by ``require`` when a value does not satisfy a predicate."""

    def __init__(self, detail: FailureDetail) -> None:
        super().__init__(detail.description)
        self.detail = detail


@dataclass(frozen=True)
class Predicate:
    """Named check over a single value."""

    label: str
    check: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return self.check(value)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, kw_only=True)
class AssertResult:
    """Outcome of ``assert_that``: passing when ``failure`` is None.

    Results combine with ``&``; the first failure wins.
    """

    failure: FailureDetail | None = None

    @property
    def passed(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.passed

    def __and__(self, other: "AssertResult") -> "AssertResult":
        return self if self.failure is not None else other


def equals(expected: Any) -> Predicate:
    return Predicate(f"equals({expected!r})", lambda value: value == expected)


def not_equals(expected: Any) -> Predicate:
    return Predicate(f"not_equals({expected!r})", lambda value: value != expected)


def greater_than(bound: Any) -> Predicate:
    return Predicate(f"greater_than({bound!r})", lambda value: value > bound)


def less_than(bound: Any) -> Predicate:
    return Predicate(f"less_than({bound!r})", lambda value: value < bound)


def contains(element: Any) -> Predicate:
    def check(value: Container[Any]) -> bool:
        return element in value

    return Predicate(f"contains({element!r})", check)


def is_none() -> Predicate:
    return Predicate("is_none", lambda value: value is None)


def is_true() -> Predicate:
    return Predicate("is_true", lambda value: value is True)


def anything() -> Predicate:
    return Predicate("anything", lambda _: True)


def assert_that(value: Any, predicate: Predicate) -> AssertResult:
    """Check ``value`` against ``predicate`` without raising."""
    if predicate(value):
        return AssertResult()

    actual = repr(value)
    expected = str(predicate)
    return AssertResult(
        failure=FailureDetail(
            description=f"{actual} did not satisfy {expected}",
            actual=actual,
            expected=expected,
        )
    )


def require(value: Any, predicate: Predicate) -> None:
    """Check ``value`` against ``predicate``, raising on failure.

    Raises:
        AssertionFailure: If the predicate does not hold

    """
    if (failure := assert_that(value, predicate).failure) is not None:
        raise AssertionFailure(failure)
