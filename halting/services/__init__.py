"""
Halting services.

Service layer that applies the assessor to the computation registry.
"""

from halting.services.assessment_service import AssessmentService, summarize_results

__all__ = [
    "AssessmentService",
    "summarize_results",
]
