"""
Data models for admin-forms.

This module contains Pydantic models for:
- Field types, transformers and validators
- Schema definitions (fields, form sections, list view)
- Validation results
"""

from admin_forms.models.definitions import (
    ID_FIELD,
    FieldDefinition,
    FormSection,
    ListView,
    Schema,
)
from admin_forms.models.types import (
    ArrayType,
    BooleanType,
    Check,
    DynamicSource,
    FieldType,
    InputType,
    Limit,
    LimitKind,
    SecretType,
    SelectType,
    StaticSource,
    Transformer,
    Type,
    Validator,
)
from admin_forms.models.validation_result import (
    ErrorKind,
    FieldError,
    FieldState,
    ValidationResult,
)

__all__ = [
    # Types
    "ArrayType",
    "BooleanType",
    "DynamicSource",
    "FieldType",
    "InputType",
    "SecretType",
    "SelectType",
    "StaticSource",
    "Type",
    # Checks
    "Check",
    "Limit",
    "LimitKind",
    "Transformer",
    "Validator",
    # Definitions
    "ID_FIELD",
    "FieldDefinition",
    "FormSection",
    "ListView",
    "Schema",
    # Validation
    "ErrorKind",
    "FieldError",
    "FieldState",
    "ValidationResult",
]
