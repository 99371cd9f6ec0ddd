"""Adapter running declarative test suites under a host test protocol."""

from suite_adapter.fingerprint import RUNNABLE_SUITE_FINGERPRINT, Fingerprint
from suite_adapter.framework import SuiteFramework, SuiteRunner
from suite_adapter.models.suite import RunnableSuite, suite, test
from suite_adapter.task import SuiteTask, TaskDef

__all__ = [
    "RUNNABLE_SUITE_FINGERPRINT",
    "Fingerprint",
    "RunnableSuite",
    "SuiteFramework",
    "SuiteRunner",
    "SuiteTask",
    "TaskDef",
    "suite",
    "test",
]
