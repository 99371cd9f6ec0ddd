"""Models for test execution results."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, kw_only=True)
class FailureDetail:
    """Renderable description of why a test failed.

    ``actual`` and ``expected`` are set only for value mismatches.
    """

    description: str
    actual: str | None = None
    expected: str | None = None

    @property
    def is_value_mismatch(self) -> bool:
        return self.actual is not None and self.expected is not None

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class Passed:
    """Test body completed and its checks held."""


@dataclass(frozen=True)
class Failed:
    """Test body failed a check or raised."""

    detail: FailureDetail


@dataclass(frozen=True)
class Ignored:
    """Test was tagged ignore; its body never ran."""


Outcome: TypeAlias = Passed | Failed | Ignored


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Result of a single test leaf.

    Contains only execution outcome - the enclosing groups carry the path.
    """

    __test__ = False

    name: str
    outcome: Outcome
    duration_ms: int = 0

    @property
    def failed(self) -> bool:
        return isinstance(self.outcome, Failed)


@dataclass(frozen=True, kw_only=True)
class GroupResult:
    """Result node mirroring a suite group."""

    name: str
    children: Sequence["ResultNode"] = ()

    @property
    def failed(self) -> bool:
        """Whether any descendant test failed."""
        return any(child.failed for child in self.children)


ResultNode: TypeAlias = GroupResult | TestResult


def iter_leaves(node: ResultNode) -> Iterator[TestResult]:
    """Yield test results depth-first, in declaration order."""
    if isinstance(node, TestResult):
        yield node
        return
    for child in node.children:
        yield from iter_leaves(child)
