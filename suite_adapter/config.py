"""Configuration for the suite adapter."""

from pydantic import Field

from suite_adapter.models.base import Model


class AdapterConfig(Model):
    """Configuration for the suite adapter."""

    colors: bool = Field(default=True, description="Apply ANSI colors to output")
    # Off by default so event sets of pure suites match across runs
    measure_durations: bool = Field(
        default=False, description="Report measured test durations in events"
    )
    indent: str = Field(default="  ", description="Indentation per tree level")
