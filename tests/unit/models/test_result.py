"""Tests for result tree models."""

from suite_adapter.models.result import (
    Failed,
    FailureDetail,
    GroupResult,
    Ignored,
    Passed,
    TestResult,
    iter_leaves,
)


def test_iter_leaves_walks_depth_first() -> None:
    """Leaves are yielded depth-first in declaration order."""
    tree = GroupResult(
        name="root",
        children=(
            TestResult(name="a", outcome=Passed()),
            GroupResult(
                name="inner",
                children=(
                    TestResult(name="b", outcome=Ignored()),
                    TestResult(name="c", outcome=Passed()),
                ),
            ),
            TestResult(name="d", outcome=Passed()),
        ),
    )

    assert [leaf.name for leaf in iter_leaves(tree)] == ["a", "b", "c", "d"]


def test_group_failed_when_any_descendant_failed() -> None:
    """Failure propagates up through nested groups."""
    failing = GroupResult(
        name="root",
        children=(
            GroupResult(
                name="inner",
                children=(
                    TestResult(
                        name="t", outcome=Failed(FailureDetail(description="nope"))
                    ),
                ),
            ),
        ),
    )
    passing = GroupResult(
        name="root", children=(TestResult(name="t", outcome=Ignored()),)
    )

    assert failing.failed
    assert not passing.failed
    assert not GroupResult(name="empty").failed


def test_value_mismatch_requires_actual_and_expected() -> None:
    """Only details with both renderings are value mismatches."""
    mismatch = FailureDetail(description="d", actual="1", expected="equals(2)")

    assert mismatch.is_value_mismatch
    assert not FailureDetail(description="d", actual="1").is_value_mismatch
    assert str(FailureDetail(description="d")) == "d"
