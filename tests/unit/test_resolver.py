"""Tests for suite resolution."""

from importlib.metadata import EntryPoint

import pytest

from suite_adapter import resolver
from suite_adapter.fingerprint import RUNNABLE_SUITE_FINGERPRINT, Fingerprint
from suite_adapter.resolver import (
    ENTRY_POINT_GROUP,
    ResolutionError,
    SuiteRegistry,
    load_suite_registry,
    resolve_suite,
)
from suite_adapter.testing.suites import SIMPLE_FAILING_SUITE_FQN, simple_failing_suite


@pytest.fixture
def registry() -> SuiteRegistry:
    """Create registry holding the sample suite."""
    return SuiteRegistry.of(simple_failing_suite)


def test_resolves_registered_suite(registry: SuiteRegistry) -> None:
    """Returns the suite registered under the id."""
    resolved = resolve_suite(
        SIMPLE_FAILING_SUITE_FQN, RUNNABLE_SUITE_FINGERPRINT, registry
    )

    assert resolved is simple_failing_suite


def test_raises_for_unknown_suite(registry: SuiteRegistry) -> None:
    """Raises ResolutionError listing the available ids."""
    with pytest.raises(ResolutionError) as exc_info:
        resolve_suite("missing.Suite", RUNNABLE_SUITE_FINGERPRINT, registry)

    assert "missing.Suite" in str(exc_info.value)
    assert SIMPLE_FAILING_SUITE_FQN in str(exc_info.value)


def test_raises_for_wrong_shape() -> None:
    """Raises ResolutionError when the value is not a runnable suite."""
    registry = SuiteRegistry({"not.a.Suite": object()})

    with pytest.raises(ResolutionError, match="expected a RunnableSuite"):
        resolve_suite("not.a.Suite", RUNNABLE_SUITE_FINGERPRINT, registry)


def test_raises_for_unsupported_fingerprint(registry: SuiteRegistry) -> None:
    """Raises ResolutionError for fingerprints this adapter does not know."""
    other = Fingerprint(is_module=False, superclass_name="Other")

    with pytest.raises(ResolutionError, match="Unsupported fingerprint"):
        resolve_suite(SIMPLE_FAILING_SUITE_FQN, other, registry)


def test_registry_is_read_only(registry: SuiteRegistry) -> None:
    """The registry mapping cannot be mutated after construction."""
    with pytest.raises(TypeError):
        registry.suites["x"] = simple_failing_suite  # type: ignore[index]


def test_load_suite_registry_reads_entry_points(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Loads suites registered under the entry point group."""
    entry = EntryPoint(
        name=SIMPLE_FAILING_SUITE_FQN,
        value="suite_adapter.testing.suites:simple_failing_suite",
        group=ENTRY_POINT_GROUP,
    )

    def fake_entry_points(group: str) -> list[EntryPoint]:
        return [entry] if group == ENTRY_POINT_GROUP else []

    monkeypatch.setattr(resolver, "entry_points", fake_entry_points)

    registry = load_suite_registry()

    assert registry.ids() == [SIMPLE_FAILING_SUITE_FQN]
    resolved = resolve_suite(
        SIMPLE_FAILING_SUITE_FQN, RUNNABLE_SUITE_FINGERPRINT, registry
    )
    assert resolved is simple_failing_suite


def test_broken_entry_point_fails_only_its_own_suite(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A suite whose entry point cannot load raises ResolutionError on resolve."""
    good = EntryPoint(
        name=SIMPLE_FAILING_SUITE_FQN,
        value="suite_adapter.testing.suites:simple_failing_suite",
        group=ENTRY_POINT_GROUP,
    )
    broken = EntryPoint(
        name="broken.Suite", value="no_such_module:suite", group=ENTRY_POINT_GROUP
    )
    monkeypatch.setattr(resolver, "entry_points", lambda group: [good, broken])

    registry = load_suite_registry()

    assert registry.ids() == ["broken.Suite", SIMPLE_FAILING_SUITE_FQN]
    with pytest.raises(ResolutionError, match="Cannot load suite 'broken.Suite'"):
        resolve_suite("broken.Suite", RUNNABLE_SUITE_FINGERPRINT, registry)
    assert (
        resolve_suite(SIMPLE_FAILING_SUITE_FQN, RUNNABLE_SUITE_FINGERPRINT, registry)
        is simple_failing_suite
    )
