"""
Validation Package - Input and Data Validation.

This package provides validation for:
    - OptionParser: Filter options set by the presentation layer
    - FilingValidator: Filing sets loaded from a provider

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from filings_dashboard.validation.filing_validator import FilingValidator, ValidationResult
from filings_dashboard.validation.option_parser import (
    OPTION_ALIASES,
    OptionParser,
    ValidationError,
)

__all__ = [
    "FilingValidator",
    "OPTION_ALIASES",
    "OptionParser",
    "ValidationError",
    "ValidationResult",
]
