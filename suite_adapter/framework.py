"""Host-facing entry points: fingerprint discovery and task construction."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from suite_adapter.config import AdapterConfig
from suite_adapter.fingerprint import Fingerprint, fingerprints
from suite_adapter.resolver import SuiteRegistry, load_suite_registry, resolve_suite
from suite_adapter.task import SuiteTask, TaskDef

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SuiteRunner:
    """Builds tasks from host task definitions against one registry."""

    registry: SuiteRegistry
    config: AdapterConfig = field(default_factory=AdapterConfig)

    def task(self, task_def: TaskDef) -> SuiteTask:
        """Build the task for one suite.

        Raises:
            ResolutionError: If the suite id does not resolve

        """
        runnable = resolve_suite(
            task_def.fully_qualified_name, task_def.fingerprint, self.registry
        )
        return SuiteTask(task_def=task_def, suite=runnable, config=self.config)

    def tasks(self, task_defs: Sequence[TaskDef]) -> Sequence[SuiteTask]:
        """Build one task per definition, failing on the first unresolved id."""
        return [self.task(task_def) for task_def in task_defs]


class SuiteFramework:
    """Adapter entry point discovered by the host."""

    name = "suite-adapter"

    def fingerprints(self) -> tuple[Fingerprint, ...]:
        return fingerprints()

    def runner(
        self,
        registry: SuiteRegistry | None = None,
        config: AdapterConfig | None = None,
    ) -> SuiteRunner:
        """Create a runner; the registry defaults to installed entry points."""
        if registry is None:
            registry = load_suite_registry()
            log.debug("Loaded %d suite(s) from entry points", len(registry.suites))
        return SuiteRunner(registry=registry, config=config or AdapterConfig())
