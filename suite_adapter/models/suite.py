"""Models for suite definitions: immutable named trees of tests and groups."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any, TypeAlias

TestBody: TypeAlias = Callable[[], Any]


@dataclass(frozen=True, kw_only=True)
class Test:
    """Leaf node holding a zero-argument test body.

    The body may return None, a bool, an assertion result, or an awaitable
    of any of these.
    """

    __test__ = False

    name: str
    body: TestBody
    ignored: bool = False

    def ignore(self) -> "Test":
        """Return a copy of this test tagged so that its body never runs."""
        return replace(self, ignored=True)


@dataclass(frozen=True, kw_only=True)
class Group:
    """Named, ordered collection of child nodes."""

    name: str
    children: Sequence["Spec"] = ()


Spec: TypeAlias = Group | Test


@dataclass(frozen=True, kw_only=True)
class RunnableSuite:
    """Registered suite value recognized by the runnable-suite fingerprint.

    Subclass or instantiate this to expose a suite under a stable
    fully-qualified id.
    """

    fqn: str
    spec: Spec


def suite(name: str, *children: Spec) -> Group:
    """Build a group from its children, keeping declaration order."""
    return Group(name=name, children=tuple(children))


def test(name: str, body: TestBody) -> Test:
    """Build a test leaf."""
    return Test(name=name, body=body)


test.__test__ = False  # type: ignore[attr-defined]
