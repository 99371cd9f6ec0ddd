"""Execution engine walking a suite tree and isolating each test body."""

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import Any, TypeAlias

from suite_adapter.models.result import (
    Failed,
    FailureDetail,
    GroupResult,
    Ignored,
    Passed,
    ResultNode,
    TestResult,
)
from suite_adapter.models.suite import Group, Spec, Test, TestBody
from suite_adapter.predicates import AssertionFailure, AssertResult

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BodyOk:
    """Body completed and its checks held."""


@dataclass(frozen=True)
class BodyFailed:
    """Body reported a failed check."""

    detail: FailureDetail


@dataclass(frozen=True)
class BodyErrored:
    """Body raised something other than an assertion failure."""

    detail: FailureDetail


BodyResult: TypeAlias = BodyOk | BodyFailed | BodyErrored


def _interpret(value: Any) -> BodyResult:
    match value:
        case AssertResult(failure=None):
            return BodyOk()
        case AssertResult(failure=detail):
            return BodyFailed(detail)
        case False:
            return BodyFailed(FailureDetail(description="test body returned False"))
        case _:
            return BodyOk()


def _cancelled_from_outside() -> bool:
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0


async def _call(body: TestBody) -> Any:
    if inspect.iscoroutinefunction(body):
        return await body()
    # Sync bodies run off the loop so they may block or start their own loop
    value = await asyncio.to_thread(body)
    if inspect.isawaitable(value):
        value = await value
    return value


async def invoke_body(body: TestBody) -> BodyResult:
    """Run a test body to completion and tag its outcome.

    Awaitable return values are awaited. Only KeyboardInterrupt, and
    cancellation of the running task itself, escape.
    """
    try:
        value = await _call(body)
    except AssertionFailure as e:
        return BodyFailed(e.detail)
    except KeyboardInterrupt:
        raise
    except asyncio.CancelledError as e:
        if _cancelled_from_outside():
            raise
        return _errored(e)
    except BaseException as e:
        return _errored(e)

    return _interpret(value)


def _errored(error: BaseException) -> BodyErrored:
    log.debug("Test body raised %s", type(error).__name__, exc_info=error)
    return BodyErrored(FailureDetail(description=f"{type(error).__name__}: {error}"))


@dataclass(frozen=True, kw_only=True)
class ExecutionEngine:
    """Runs every test of a suite sequentially, in declaration order."""

    measure_durations: bool = False

    async def run(self, spec: Spec) -> ResultNode:
        """Build the complete result tree for ``spec``."""
        match spec:
            case Group(name=name, children=children):
                results = [await self.run(child) for child in children]
                return GroupResult(name=name, children=tuple(results))
            case Test():
                return await self._run_test(spec)
            case _:
                raise TypeError(f"Not a suite node: {spec!r}")

    async def _run_test(self, test: Test) -> TestResult:
        if test.ignored:
            log.debug("Skipping ignored test %r", test.name)
            return TestResult(name=test.name, outcome=Ignored())

        started = time.perf_counter()
        body_result = await invoke_body(test.body)
        elapsed = time.perf_counter() - started

        match body_result:
            case BodyOk():
                outcome: Passed | Failed = Passed()
            case BodyFailed(detail=detail) | BodyErrored(detail=detail):
                outcome = Failed(detail)

        log.debug("Test %r finished: %s", test.name, type(outcome).__name__)
        return TestResult(
            name=test.name,
            outcome=outcome,
            duration_ms=round(elapsed * 1000) if self.measure_durations else 0,
        )
