"""Tasks wrapping one resolved suite for execution by the host."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from suite_adapter.config import AdapterConfig
from suite_adapter.engine import ExecutionEngine
from suite_adapter.events import Event, project_events
from suite_adapter.fingerprint import Fingerprint
from suite_adapter.logs import Logger, broadcast
from suite_adapter.models.result import ResultNode
from suite_adapter.models.suite import Group, RunnableSuite, Spec, Test
from suite_adapter.rendering import Palette, render_lines

log = logging.getLogger(__name__)

EventHandler: TypeAlias = Callable[[Event], None]


@dataclass(frozen=True, kw_only=True)
class TaskDef:
    """Host request to run one suite."""

    fully_qualified_name: str
    fingerprint: Fingerprint
    explicitly_specified: bool = False
    selectors: Sequence[str] = ()


def select(spec: Spec, selectors: Sequence[str]) -> Spec | None:
    """Keep only the tests named in ``selectors``.

    Groups left without children are dropped. No selectors keeps everything.
    """
    if not selectors:
        return spec

    if isinstance(spec, Test):
        return spec if spec.name in selectors else None

    children = [
        kept
        for child in spec.children
        if (kept := select(child, selectors)) is not None
    ]
    if not children:
        return None
    return Group(name=spec.name, children=tuple(children))


@dataclass(frozen=True, kw_only=True)
class SuiteTask:
    """Executable unit for one resolved suite.

    Each call to ``execute`` re-runs the test bodies.
    """

    task_def: TaskDef
    suite: RunnableSuite
    config: AdapterConfig = field(default_factory=AdapterConfig)

    @property
    def fully_qualified_name(self) -> str:
        return self.task_def.fully_qualified_name

    def subtasks(self) -> Sequence["SuiteTask"]:
        """Nested tasks; a suite always runs as one atomic task."""
        return []

    def execute(
        self, event_handler: EventHandler, loggers: Sequence[Logger]
    ) -> Sequence["SuiteTask"]:
        """Run the suite to completion, then report events and log lines."""
        return asyncio.run(self.execute_async(event_handler, loggers))

    async def execute_async(
        self, event_handler: EventHandler, loggers: Sequence[Logger]
    ) -> Sequence["SuiteTask"]:
        """Async variant of ``execute`` for hosts running an event loop."""
        tree = await self.run()
        if tree is not None:
            self.report(tree, event_handler, loggers)
        return self.subtasks()

    async def run(self) -> ResultNode | None:
        """Build the result tree, or None when selectors match no test."""
        spec = select(self.suite.spec, self.task_def.selectors)
        if spec is None:
            log.info("No tests selected in %s", self.fully_qualified_name)
            return None

        log.debug("Running suite %s", self.fully_qualified_name)
        engine = ExecutionEngine(measure_durations=self.config.measure_durations)
        return await engine.run(spec)

    def report(
        self,
        tree: ResultNode,
        event_handler: EventHandler,
        loggers: Sequence[Logger],
    ) -> None:
        """Emit one event per test leaf and the rendered lines to each logger."""
        for event in project_events(
            self.fully_qualified_name, tree, self.task_def.fingerprint
        ):
            event_handler(event)

        lines = render_lines(
            tree, Palette(enabled=self.config.colors), self.config.indent
        )
        broadcast(lines, loggers)
