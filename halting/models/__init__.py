"""
Halting data structures.
"""

from halting.models.assessment import (
    AssessmentRequest,
    AssessmentResult,
    Computation,
    OutputStyle,
    Verdict,
)

__all__ = [
    "AssessmentRequest",
    "AssessmentResult",
    "Computation",
    "OutputStyle",
    "Verdict",
]
