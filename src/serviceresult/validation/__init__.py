"""Validation report adapters.

- to_failure_outcome: protocol-shaped report -> INVALID_DATA Outcome
- from_validation_error: pydantic ValidationError -> INVALID_DATA Outcome
- Report/Issue: concrete report models
"""

from .adapter import (
    INVALID_VALIDATION_RESULT_MESSAGE,
    ValidationIssue,
    ValidationReport,
    from_validation_error,
    to_failure_outcome,
)
from .models import Issue, Report

__all__ = [
    "ValidationIssue", "ValidationReport", "Issue", "Report",
    "to_failure_outcome", "from_validation_error", "INVALID_VALIDATION_RESULT_MESSAGE",
]
