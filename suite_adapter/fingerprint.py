"""Fingerprints describing which suite values this adapter can run."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Fingerprint:
    """Static descriptor letting a host recognize runnable suite values."""

    is_module: bool
    superclass_name: str


RUNNABLE_SUITE_FINGERPRINT = Fingerprint(
    is_module=True,
    superclass_name="RunnableSuite",
)

_FINGERPRINTS: tuple[Fingerprint, ...] = (RUNNABLE_SUITE_FINGERPRINT,)


def fingerprints() -> tuple[Fingerprint, ...]:
    """Return the fingerprints supported by this adapter."""
    return _FINGERPRINTS
