"""
Assessment Service.

Simulates a halting assessor applied to every computation in a registry over
a small range of natural numbers. The assessor halts when it can show that a
computation never halts; otherwise it loops. The loop is escaped after one
report so that the demonstration terminates.

The diagonal case Assessor(n, n) takes a single argument and so is itself a
computation over a natural number. When the registry binds that computation
at slot n, the assessor is assessing itself.
"""

import logging
from typing import Any, Dict, List, Optional

from halting.core.registry import ComputationRegistry
from halting.core.sink import OutputSink
from halting.models.assessment import (
    AssessmentRequest,
    AssessmentResult,
    OutputStyle,
    Verdict,
)

logger = logging.getLogger(__name__)


def known_never_halts_message(label: str, computation_index: int, natural_number: int) -> str:
    return (
        f"{label} halts, therefore the program knows that "
        f"Computation_{computation_index}({natural_number}) does not halt."
    )


def not_known_message(label: str, computation_index: int, natural_number: int) -> str:
    return (
        f"{label} does not halt, therefore the program does not know if "
        f"Computation_{computation_index}({natural_number}) halts."
    )


class AssessmentService:
    """Service for assessing computations in a registry."""

    def __init__(
        self,
        registry: ComputationRegistry,
        sink: OutputSink,
        assessor_test: bool = False
    ):
        """
        Initialize Assessment service.

        Args:
            registry: Computations to assess
            sink: Where result lines are written
            assessor_test: Enable the specialised test for the cell where the
                assessor assesses itself
        """
        self.registry = registry
        self.sink = sink
        self.assessor_test = assessor_test

    def assess(self, computation_index: int, natural_number: int) -> AssessmentResult:
        """
        Apply the assessor to ``(computation_index, natural_number)``.

        Assessor(n, n) logically takes a single argument, so the diagonal
        case is dispatched to ``assess_unary``.

        Raises:
            ValueError: If either argument lies outside the registry's range
        """
        self._check_in_range("computation_index", computation_index)
        self._check_in_range("natural_number", natural_number)

        if computation_index == natural_number:
            return self.assess_unary(natural_number)

        label = f"Assessor({computation_index}, {natural_number})"
        logger.debug(f"Dispatching {label}")
        return self._run_assessment_test(label, computation_index, natural_number)

    def assess_unary(self, natural_number: int) -> AssessmentResult:
        """
        Apply the single-argument assessor to ``natural_number``.

        If the registry binds the assessor itself at this index, the label
        names it as the computation it is.
        """
        self._check_in_range("natural_number", natural_number)

        self_referential = self.registry.is_assessor(natural_number)
        if self_referential:
            label = f"Computation_{natural_number}({natural_number})"
        else:
            label = f"Assessor({natural_number}, {natural_number})"

        logger.debug(f"Dispatching {label} (self-referential: {self_referential})")
        return self._run_assessment_test(
            label,
            natural_number,
            natural_number,
            self_referential=self_referential
        )

    def is_known_never_halt(
        self,
        label: str,
        computation_index: int,
        natural_number: int
    ) -> bool:
        """
        Test whether a computation is known never to halt.

        Returns True when the default test shows the computation never halts.
        Otherwise the assessor does not halt: it enters a loop, reports once,
        and the loop is broken so that False can be returned.
        """
        def loop_forever() -> None:
            in_loop = False
            while True:
                if in_loop:
                    logger.debug(f"Breaking out of loop for {label}")
                    return

                in_loop = True
                self.sink.write(
                    not_known_message(label, computation_index, natural_number),
                    OutputStyle.UNCERTAIN
                )

        def default_test(n: int) -> bool:
            if n % 3 != 0:
                loop_forever()
                return False
            return True

        if self._is_specialised_cell(computation_index, natural_number):
            loop_forever()
            return False

        return default_test(natural_number)

    def run_grid(self, size: Optional[int] = None) -> List[AssessmentResult]:
        """
        Assess every (computation_index, natural_number) pair in 1..size.

        Pairs are visited in row-major order, computation index outer.
        """
        size = self.registry.size if size is None else size
        logger.info(f"Assessing {size}x{size} grid")

        results: List[AssessmentResult] = []
        for computation_index in range(1, size + 1):
            for natural_number in range(1, size + 1):
                results.append(self.assess(computation_index, natural_number))
        return results

    def _run_assessment_test(
        self,
        label: str,
        computation_index: int,
        natural_number: int,
        self_referential: bool = False
    ) -> AssessmentResult:
        request = AssessmentRequest(computation_index, natural_number)

        if self.is_known_never_halt(label, computation_index, natural_number):
            message = known_never_halts_message(label, computation_index, natural_number)
            self.sink.write(message, OutputStyle.AFFIRMATIVE)
            verdict = Verdict.KNOWN_NEVER_HALTS
        else:
            message = not_known_message(label, computation_index, natural_number)
            verdict = Verdict.NOT_KNOWN

        return AssessmentResult(
            request=request,
            label=label,
            verdict=verdict,
            message=message,
            self_referential=self_referential
        )

    def _is_specialised_cell(self, computation_index: int, natural_number: int) -> bool:
        if not self.assessor_test:
            return False
        distinguished = self.registry.distinguished_index
        return computation_index == distinguished and natural_number == distinguished

    def _check_in_range(self, name: str, value: int) -> None:
        if not 1 <= value <= self.registry.size:
            raise ValueError(f"{name} must lie within 1..{self.registry.size}, got {value}")


def summarize_results(results: List[AssessmentResult]) -> Dict[str, Any]:
    """
    Summarize a grid of assessment results.

    Returns:
        dict with:
            - grid_size: largest index assessed (N for a full grid)
            - total: number of assessments
            - known_never_halts: count of assessments where the assessor halted
            - not_known: count of assessments where the assessor looped
            - self_referential: labels of cells where the assessor assessed itself
    """
    known = sum(1 for result in results if result.known_never_halts)
    grid_size = max(
        (max(r.request.computation_index, r.request.natural_number) for r in results),
        default=0
    )
    return {
        "grid_size": grid_size,
        "total": len(results),
        "known_never_halts": known,
        "not_known": len(results) - known,
        "self_referential": [result.label for result in results if result.self_referential],
    }
