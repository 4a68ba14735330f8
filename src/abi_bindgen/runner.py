"""Binding generation runner.

Walks the configured targets in order. For each one the primary artifact
is tried first, then the fallbacks; the first candidate that converts wins.
A target whose candidates are all missing or unusable is reported with its
hint and the run moves on.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from abi_bindgen.converter import convert
from abi_bindgen.models import (
    CandidateAttempt,
    CandidateOutcome,
    GenerationReport,
    TargetResult,
    TargetStatus,
)
from abi_bindgen.targets import BindgenConfig, BindingTarget, default_config

logger = structlog.get_logger(__name__)


class BindingRunner:
    """Generates bindings for every target in a config.

    Attributes:
        config: Targets and output directory
        root: Project root that relative paths resolve against

    Example:
        >>> runner = BindingRunner(root=Path("."))
        >>> report = runner.run()
        >>> report.generated_count
        2
    """

    def __init__(self, config: BindgenConfig | None = None, root: Path | str = ".") -> None:
        self.config = config if config is not None else default_config()
        self.root = Path(root)
        self._log = logger.bind(component="binding_runner")

    @property
    def output_dir(self) -> Path:
        """Resolved bindings directory."""
        return self.root / self.config.output_dir

    def run(self) -> GenerationReport:
        """Process every target.

        Returns:
            GenerationReport with one result per target.
        """
        self._log.info(
            "generation_started",
            root=str(self.root),
            targets=len(self.config.targets),
            output_dir=str(self.output_dir),
        )

        results = [self.run_target(target) for target in self.config.targets]
        report = GenerationReport(results=results, output_dir=str(self.output_dir))

        self._log.info(
            "generation_completed",
            generated=report.generated_count,
            failed=report.failed_count,
        )
        return report

    def run_target(self, target: BindingTarget) -> TargetResult:
        """Try a target's candidates in order until one converts.

        Args:
            target: Target to generate.

        Returns:
            TargetResult describing every attempt.
        """
        log = self._log.bind(target=target.name, output=target.output)
        attempts: list[CandidateAttempt] = []

        for index, candidate in enumerate(target.candidates):
            path = self.root / candidate

            if not path.exists():
                log.warning(
                    "candidate_missing",
                    path=str(path),
                    primary=index == 0,
                )
                attempts.append(CandidateAttempt(path=candidate, outcome=CandidateOutcome.MISSING))
                continue

            if index > 0:
                log.info("candidate_found", path=str(path))

            if convert(path, target.output, self.output_dir):
                attempts.append(
                    CandidateAttempt(path=candidate, outcome=CandidateOutcome.CONVERTED)
                )
                return TargetResult(
                    name=target.name,
                    output=target.output,
                    status=TargetStatus.GENERATED,
                    source=str(path),
                    output_path=str(self.output_dir / target.output),
                    attempts=attempts,
                )

            attempts.append(CandidateAttempt(path=candidate, outcome=CandidateOutcome.FAILED))

        log.error(
            "target_exhausted",
            tried=[a.path for a in attempts],
            hint=target.hint,
        )
        return TargetResult(
            name=target.name,
            output=target.output,
            status=TargetStatus.FAILED,
            attempts=attempts,
            hint=target.hint,
        )
