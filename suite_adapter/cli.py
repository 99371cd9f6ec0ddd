"""CLI entry point for running registered suites."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from suite_adapter.config import AdapterConfig
from suite_adapter.events import Event, Status
from suite_adapter.fingerprint import RUNNABLE_SUITE_FINGERPRINT
from suite_adapter.framework import SuiteFramework
from suite_adapter.logs import StdlibLogger
from suite_adapter.rendering import Palette
from suite_adapter.resolver import ResolutionError, load_suite_registry
from suite_adapter.summary import AggregateTestFailure, summarize
from suite_adapter.task import SuiteTask, TaskDef


def format_output(events: Sequence[Event]) -> dict[str, Any]:
    """Format events for JSON output."""
    all_results: list[dict[str, Any]] = [
        {
            "suite": event.fully_qualified_name,
            "test": event.selector,
            "status": event.status.value,
            "duration": event.duration,
            "message": str(event.throwable) if event.throwable else None,
        }
        for event in events
    ]

    return {
        "total": len(all_results),
        "passed": sum(1 for e in events if e.status is Status.SUCCESS),
        "failed": sum(1 for e in events if e.status is Status.FAILURE),
        "ignored": sum(1 for e in events if e.status is Status.IGNORED),
        "results": all_results,
    }


def task_succeeded(events: Sequence[Event]) -> bool:
    """Whether none of a task's events reports a failure."""
    return not any(event.status in {Status.FAILURE, Status.ERROR} for event in events)


async def run(
    suite_ids: Sequence[str],
    selectors: Sequence[str] = (),
    config_json: str = "{}",
) -> int:
    """Run the given suites and return exit code."""
    log = logging.getLogger("suite_adapter")

    config = AdapterConfig(**json.loads(config_json))
    runner = SuiteFramework().runner(registry=load_suite_registry(), config=config)

    outcomes: list[bool] = []
    tasks: list[SuiteTask] = []
    for fqn in suite_ids:
        task_def = TaskDef(
            fully_qualified_name=fqn,
            fingerprint=RUNNABLE_SUITE_FINGERPRINT,
            explicitly_specified=True,
            selectors=tuple(selectors),
        )
        try:
            tasks.append(runner.task(task_def))
        except ResolutionError as e:
            log.error("Cannot run suite: %s", e)
            outcomes.append(False)

    log.info("Running %d suite(s)...", len(tasks))
    events_by_task: list[list[Event]] = [[] for _ in tasks]
    sink = StdlibLogger(log)
    results = await asyncio.gather(
        *(
            task.execute_async(task_events.append, [sink])
            for task, task_events in zip(tasks, events_by_task, strict=True)
        ),
        return_exceptions=True,
    )

    for task, task_events, result in zip(tasks, events_by_task, results, strict=True):
        if isinstance(result, BaseException):
            log.error(
                "Suite %s failed to execute: %s",
                task.fully_qualified_name,
                result,
                exc_info=result,
            )
            outcomes.append(False)
        else:
            outcomes.append(task_succeeded(task_events))

    events = [event for task_events in events_by_task for event in task_events]
    print(json.dumps(format_output(events), indent=2))

    summary = summarize(outcomes)
    log.info("%s", summary.render(Palette(enabled=config.colors)))
    try:
        summary.raise_for_failures()
    except AggregateTestFailure as e:
        log.error("%s", e)
        return 1
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Run registered test suites")
    parser.add_argument(
        "--suite",
        dest="suites",
        action="append",
        required=True,
        help="Fully-qualified suite id (repeatable)",
    )
    parser.add_argument(
        "--selector",
        dest="selectors",
        action="append",
        default=[],
        help="Only run tests with this name (repeatable)",
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for the adapter",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            suite_ids=args.suites,
            selectors=args.selectors,
            config_json=args.config,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
