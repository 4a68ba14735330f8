"""Generation result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TargetStatus(str, Enum):
    """Outcome of one binding target.

    Attributes:
        GENERATED: A candidate artifact produced the binding
        FAILED: Every candidate was missing or failed to convert
    """

    GENERATED = "generated"
    FAILED = "failed"


class CandidateOutcome(str, Enum):
    """What happened to one candidate artifact path."""

    MISSING = "missing"
    FAILED = "failed"
    CONVERTED = "converted"


class CandidateAttempt(BaseModel):
    """One artifact path tried for a target."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(..., description="Artifact path as configured")
    outcome: CandidateOutcome = Field(..., description="Attempt outcome")


class TargetResult(BaseModel):
    """Result of processing one binding target.

    Attributes:
        name: Logical contract name
        output: Binding file name
        status: Target status
        source: Artifact path that produced the binding (if any)
        output_path: Written binding path (if any)
        attempts: Candidates tried, in order
        hint: Guidance for a failed target

    Example:
        >>> result = TargetResult(
        ...     name="TokenFactory",
        ...     output="TokenFactoryAbi.ts",
        ...     status=TargetStatus.GENERATED,
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Logical contract name")
    output: str = Field(..., min_length=1, description="Binding file name")
    status: TargetStatus = Field(..., description="Target status")
    source: str | None = Field(default=None, description="Artifact used")
    output_path: str | None = Field(default=None, description="Written binding path")
    attempts: list[CandidateAttempt] = Field(default_factory=list, description="Candidates tried")
    hint: str | None = Field(default=None, description="Guidance for failures")

    @property
    def generated(self) -> bool:
        """Check if the binding was written."""
        return self.status == TargetStatus.GENERATED


class GenerationReport(BaseModel):
    """Aggregated result of a generation run.

    Attributes:
        results: Per-target results, in worklist order
        output_dir: Bindings directory used for the run
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    results: list[TargetResult] = Field(default_factory=list, description="Target results")
    output_dir: str = Field(..., description="Bindings directory")

    @property
    def generated_count(self) -> int:
        """Count of bindings written."""
        return sum(1 for r in self.results if r.generated)

    @property
    def failed_count(self) -> int:
        """Count of targets with no usable artifact."""
        return sum(1 for r in self.results if not r.generated)

    @property
    def complete(self) -> bool:
        """Check if every target produced a binding."""
        return self.failed_count == 0
