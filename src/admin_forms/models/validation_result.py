"""
Validation result models for form input validation.

These models describe the outcome of ``FormData.validate_form()``.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Specific reason a check failed."""

    REQUIRED = "required"
    INVALID_URL = "invalid_url"
    INVALID_SOCKET_ADDR = "invalid_socket_addr"
    INVALID_EMAIL = "invalid_email"
    INVALID_HOST = "invalid_host"
    INVALID_IP_OR_MASK = "invalid_ip_or_mask"
    INVALID_PORT = "invalid_port"
    INVALID_NUMBER = "invalid_number"
    INVALID_DURATION = "invalid_duration"
    INVALID_SIZE = "invalid_size"
    INVALID_BOOLEAN = "invalid_boolean"
    INVALID_SELECTION = "invalid_selection"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    TOO_FEW_ITEMS = "too_few_items"
    TOO_MANY_ITEMS = "too_many_items"


class FieldState(str, Enum):
    """Per-field validation state inside a form store."""

    UNVALIDATED = "unvalidated"
    VALID = "valid"
    INVALID = "invalid"


class FieldError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Id of the field with error")
    error_type: ErrorKind = Field(..., description="Type of validation error")
    message: str = Field(..., description="Human-readable error message")
    index: int | None = Field(
        default=None, description="Position of the first failing element for list fields"
    )
    expected: Any | None = Field(default=None, description="Expected value/format")


class ValidationResult(BaseModel):
    """Result of form validation."""

    schema_name: str = Field(..., description="Schema the form is bound to")
    is_valid: bool = Field(..., description="Whether the form data is valid")
    errors: list[FieldError] = Field(
        default_factory=list, description="List of validation errors"
    )
    validated_data: dict[str, Any] | None = Field(
        default=None, description="Normalised data if valid"
    )
    pending: list[str] = Field(
        default_factory=list,
        description="Fields whose selection check waits for a dynamic source",
    )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.errors)

    def get_field_errors(self, field_name: str) -> list[FieldError]:
        """Get all errors for a specific field."""
        return [e for e in self.errors if e.field_name == field_name]

    def to_error_dict(self) -> dict[str, list[str]]:
        """Convert errors to a dict mapping field names to error messages."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            if error.field_name not in result:
                result[error.field_name] = []
            result[error.field_name].append(error.message)
        return result
