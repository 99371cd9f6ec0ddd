"""Resolution of fully-qualified suite ids to registered suite values."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import EntryPoint, entry_points
from types import MappingProxyType

from suite_adapter.fingerprint import Fingerprint, fingerprints
from suite_adapter.models.suite import RunnableSuite

ENTRY_POINT_GROUP = "suite_adapter.suites"


class ResolutionError(Exception):
    """Raised when a suite id does not resolve to a runnable suite."""


@dataclass(frozen=True)
class SuiteRegistry:
    """Read-only lookup table of suite values keyed by fully-qualified id.

    Values may be entry points, which are loaded only when resolved.
    """

    suites: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "suites", MappingProxyType(dict(self.suites)))

    @classmethod
    def of(cls, *suites: RunnableSuite) -> "SuiteRegistry":
        """Build a registry keyed by each suite's own id."""
        return cls({runnable.fqn: runnable for runnable in suites})

    def __contains__(self, fqn: object) -> bool:
        return fqn in self.suites

    def ids(self) -> list[str]:
        return sorted(self.suites)


def load_suite_registry() -> SuiteRegistry:
    """Build a registry from the suites registered as entry points.

    Entry point names are the fully-qualified suite ids, e.g. in
    pyproject.toml::

        [project.entry-points."suite_adapter.suites"]
        "myproject.MathSuite" = "myproject.suites:math_suite"

    """
    return SuiteRegistry(
        {entry.name: entry for entry in entry_points(group=ENTRY_POINT_GROUP)}
    )


def resolve_suite(
    fqn: str, fingerprint: Fingerprint, registry: SuiteRegistry
) -> RunnableSuite:
    """Resolve a suite id to its registered value.

    Args:
        fqn: Fully-qualified suite id
        fingerprint: Fingerprint the host matched the suite with
        registry: Lookup table to resolve against

    Returns:
        The runnable suite registered under ``fqn``

    Raises:
        ResolutionError: If the fingerprint is unsupported, the id is
            unknown, its entry point fails to load, or the registered value
            is not a runnable suite

    """
    if fingerprint not in fingerprints():
        raise ResolutionError(f"Unsupported fingerprint for '{fqn}': {fingerprint}")

    if fqn not in registry:
        raise ResolutionError(
            f"Suite '{fqn}' not found. Available suites: {registry.ids()}"
        )

    value = registry.suites[fqn]
    if isinstance(value, EntryPoint):
        try:
            value = value.load()
        except Exception as e:
            raise ResolutionError(f"Cannot load suite '{fqn}': {e}") from e

    if not isinstance(value, RunnableSuite):
        raise ResolutionError(
            f"'{fqn}' is a {type(value).__name__}, "
            f"expected a {fingerprint.superclass_name}"
        )
    return value
