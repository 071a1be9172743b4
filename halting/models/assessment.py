"""
Assessment data structures.

These dataclasses and enums describe the computations held in the registry,
the requests handed to the assessor, and the results it reports.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
import enum
from typing import Any, Dict


class OutputStyle(str, enum.Enum):
    """Presentation style of a line written to an output sink."""

    AFFIRMATIVE = "affirmative"
    UNCERTAIN = "uncertain"
    PLAIN = "plain"


class Verdict(str, enum.Enum):
    """Outcome of the simulated halting test."""

    KNOWN_NEVER_HALTS = "known_never_halts"
    NOT_KNOWN = "not_known"


@dataclass(frozen=True)
class Computation:
    """
    A computation over a single natural number.

    Computations are never executed. They exist so that the assessor can be
    applied to them. Exactly one entry in a registry is tagged as the
    assessor itself.
    """

    index: int
    is_assessor: bool = False

    @property
    def name(self) -> str:
        return f"Computation_{self.index}"


@dataclass(frozen=True)
class AssessmentRequest:
    """Does computation ``computation_index``, applied to ``natural_number``, halt?"""

    computation_index: int
    natural_number: int

    @property
    def is_diagonal(self) -> bool:
        return self.computation_index == self.natural_number


@dataclass(frozen=True)
class AssessmentResult:
    """Result of one assessment, as reported through the output sink."""

    request: AssessmentRequest
    label: str
    verdict: Verdict
    message: str
    self_referential: bool = False

    @property
    def known_never_halts(self) -> bool:
        return self.verdict == Verdict.KNOWN_NEVER_HALTS

    @property
    def style(self) -> OutputStyle:
        if self.known_never_halts:
            return OutputStyle.AFFIRMATIVE
        return OutputStyle.UNCERTAIN

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["verdict"] = self.verdict.value
        data["style"] = self.style.value
        return data
