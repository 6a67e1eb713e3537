"""
admin-forms: declarative schemas, validation and form binding for the
mail-server administration console.

Every configuration entity is described once, and that description drives
input normalisation, validation, defaults and rendering metadata.

Simple Usage:
    from admin_forms import get_schemas

    form = get_schemas().build_form("login")
    form.set("login", " John.Doe@EXAMPLE.org ")
    form.set("password", "secret")

    if form.validate_form():
        login = form.value("login")   # "john.doe@example.org"
    else:
        errors = form.errors          # per-field FieldError

Defining Schemas:
    from admin_forms import SchemaSetBuilder, Transformer, Type, Validator

    schemas = (
        SchemaSetBuilder()
        .new_schema("domain")
        .new_id_field()
        .label("Domain name")
        .input_check([Transformer.TRIM, Transformer.LOWERCASE], [Validator.IS_HOST])
        .build()
        .list_fields(["_id"])
        .build()
        .build()
    )

Logging:
    from admin_forms.logs import setup_logging

    setup_logging(verbose=True, file_path="admin-forms.jsonl")
"""

from admin_forms.builder import (
    FieldBuilder,
    Schemas,
    SchemaBuilder,
    SchemaSetBuilder,
    SectionBuilder,
)
from admin_forms.errors import (
    BuilderStateError,
    DuplicateFieldError,
    DuplicateSchemaError,
    InvalidDefaultError,
    ReadOnlyFieldError,
    SchemaDefinitionError,
    UnknownFieldError,
    UnknownSchemaError,
)
from admin_forms.forms import FieldBinding, FieldChanged, FormData
from admin_forms.models import (
    DynamicSource,
    ErrorKind,
    FieldDefinition,
    FieldError,
    FieldState,
    FormSection,
    Limit,
    ListView,
    Schema,
    StaticSource,
    Transformer,
    Type,
    ValidationResult,
    Validator,
)
from admin_forms.schemas import build_schemas, get_schemas
from admin_forms.logs import setup_logging, disable_logging, enable_logging

__all__ = [
    # Registry
    "SchemaSetBuilder",
    "SchemaBuilder",
    "FieldBuilder",
    "SectionBuilder",
    "Schemas",
    "build_schemas",
    "get_schemas",
    # Forms
    "FormData",
    "FieldBinding",
    "FieldChanged",
    # Models
    "DynamicSource",
    "ErrorKind",
    "FieldDefinition",
    "FieldError",
    "FieldState",
    "FormSection",
    "Limit",
    "ListView",
    "Schema",
    "StaticSource",
    "Transformer",
    "Type",
    "ValidationResult",
    "Validator",
    # Errors
    "SchemaDefinitionError",
    "DuplicateSchemaError",
    "DuplicateFieldError",
    "UnknownFieldError",
    "UnknownSchemaError",
    "InvalidDefaultError",
    "BuilderStateError",
    "ReadOnlyFieldError",
    # Logging
    "setup_logging",
    "disable_logging",
    "enable_logging",
]

__version__ = "0.1.0"
