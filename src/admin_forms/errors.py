"""
Authoring-time errors for schema definitions.

These indicate a defect in the static schema definitions assembled at
start-up. They are raised, never caught by the library. Validation-time
failures are not exceptions; see ``admin_forms.models.validation_result``.
"""


class SchemaDefinitionError(Exception):
    """Base class for malformed schema definitions."""


class DuplicateSchemaError(SchemaDefinitionError):
    """A schema name was registered twice."""

    def __init__(self, name: str):
        super().__init__(f"Schema '{name}' is already registered")
        self.name = name


class DuplicateFieldError(SchemaDefinitionError):
    """A field id was declared twice in the same schema."""

    def __init__(self, schema: str, field_id: str):
        super().__init__(f"Field '{field_id}' is declared twice in schema '{schema}'")
        self.schema = schema
        self.field_id = field_id


class UnknownFieldError(SchemaDefinitionError, KeyError):
    """A field id is referenced but not declared."""

    def __init__(self, schema: str, field_id: str):
        super().__init__(f"Field '{field_id}' is not declared in schema '{schema}'")
        self.schema = schema
        self.field_id = field_id

    def __str__(self) -> str:
        return self.args[0]


class InvalidDefaultError(SchemaDefinitionError):
    """A default value does not fit the field type."""


class BuilderStateError(SchemaDefinitionError):
    """A builder was used out of sequence (reused after ``build()``)."""


class UnknownSchemaError(KeyError):
    """Lookup of a schema name that was never registered."""

    def __init__(self, name: str):
        super().__init__(f"Schema '{name}' is not registered")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class ReadOnlyFieldError(Exception):
    """User input was sent to a field that cannot change in this form."""

    def __init__(self, field_id: str):
        super().__init__(f"Field '{field_id}' is read-only while editing")
        self.field_id = field_id
