# =============================================================================
# core/models/demo.py - Startup Demo Schemas
# =============================================================================
# These models describe the startup demonstration:
# - SamplePayload: The nested object used by the deep-copy step
# - DemoStep / StepStatus: Which step ran and how it ended
# - StepOutcome / DemoReport: The observable result of one demo run
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class Address(BaseModel):
    city: str


class SamplePayload(BaseModel):
    """
    Nested sample object for the deep-copy step.

    Example:
        {"name": "John", "address": {"city": "New York"}}
    """
    name: str
    address: Address


class DemoStep(str, Enum):
    """
    Steps of the startup demo, in the order they run.
    """
    HASH_PASSWORD = "hash_password"
    ISSUE_TOKEN = "issue_token"
    SEND_EMAIL = "send_email"
    FETCH_API = "fetch_api"
    DEEP_COPY = "deep_copy"


class StepStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class StepOutcome(BaseModel):
    """Result of a single demo step."""

    step: DemoStep
    status: StepStatus
    detail: str | None = Field(
        default=None,
        description="Short human-readable summary of what happened"
    )
    error_code: str | None = Field(
        default=None,
        description="Error code when the step failed"
    )

    @property
    def ok(self) -> bool:
        return self.status == StepStatus.SUCCEEDED


class DemoReport(BaseModel):
    """
    Outcomes of one demo run, one entry per step in execution order.
    """

    outcomes: list[StepOutcome] = Field(default_factory=list)

    @property
    def failed_steps(self) -> list[DemoStep]:
        return [o.step for o in self.outcomes if not o.ok]

    def outcome(self, step: DemoStep) -> StepOutcome | None:
        """Get the outcome for a step, or None if it did not run."""
        for o in self.outcomes:
            if o.step == step:
                return o
        return None
