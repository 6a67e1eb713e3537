"""
Check implementations for the form validation pipeline.
"""

from admin_forms.validation.checks import (
    TRANSFORMERS,
    VALIDATORS,
    check_items,
    error_message,
    run_check,
    run_checks,
    transform,
)

__all__ = [
    "TRANSFORMERS",
    "VALIDATORS",
    "check_items",
    "error_message",
    "run_check",
    "run_checks",
    "transform",
]
