"""
Schema definition models.

A ``Schema`` is the single description of a configuration entity: its
fields, how they are grouped in the edit form and which of them appear as
columns in the list view. Schemas are assembled once by
``admin_forms.builder`` and never mutated afterwards.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from admin_forms.errors import UnknownFieldError
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
    Validator,
    is_multi_valued,
)

ID_FIELD = "_id"

_LIMIT_KEYWORDS = {
    LimitKind.MIN_LENGTH: "minLength",
    LimitKind.MAX_LENGTH: "maxLength",
    LimitKind.MIN_VALUE: "minimum",
    LimitKind.MAX_VALUE: "maximum",
    LimitKind.MIN_ITEMS: "minItems",
    LimitKind.MAX_ITEMS: "maxItems",
}

_FORMATS = {
    Validator.IS_URL: "uri",
    Validator.IS_EMAIL: "email",
    Validator.IS_HOST: "hostname",
}


class FieldDefinition(BaseModel):
    """One named, typed, validated attribute of a schema."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Field identifier, unique within the schema")
    type: FieldType = Field(default_factory=InputType)
    label: str = Field(default="", description="Human-readable label")
    help: str | None = Field(default=None, description="Help text")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    default: str | tuple[str, ...] | None = Field(default=None, description="Default value")
    transformers: tuple[Transformer, ...] = Field(default=())
    validators: tuple[Check, ...] = Field(default=())
    is_id: bool = Field(default=False, description="Whether this is the schema's identity field")

    @property
    def is_multi(self) -> bool:
        return is_multi_valued(self.type)

    @property
    def is_required(self) -> bool:
        return Validator.REQUIRED in self.validators

    @property
    def is_secret(self) -> bool:
        return isinstance(self.type, SecretType)

    def default_value(self) -> str | list[str] | None:
        """Return a fresh copy of the default in its stored shape."""
        if self.default is None:
            return [] if self.is_multi else None
        if isinstance(self.default, tuple):
            return list(self.default)
        return [self.default] if self.is_multi else self.default

    def json_schema_property(self) -> dict[str, Any]:
        typ = self.type
        prop: dict[str, Any]
        if isinstance(typ, BooleanType):
            prop = {"type": "boolean"}
        elif isinstance(typ, SelectType):
            item: dict[str, Any] = {"type": "string"}
            if isinstance(typ.source, StaticSource):
                item["enum"] = list(typ.source.values())
            else:
                item["x-source"] = typ.source.name
            prop = {"type": "array", "items": item} if typ.multi else item
        elif isinstance(typ, ArrayType):
            prop = {"type": "array", "items": {"type": "string"}}
        else:
            prop = {"type": "string"}
            if isinstance(typ, SecretType):
                prop["format"] = "password"

        prop["title"] = self.label or self.id
        if self.help:
            prop["description"] = self.help
        if self.default is not None:
            if isinstance(typ, BooleanType):
                prop["default"] = self.default == "true"
            else:
                prop["default"] = self.default_value()

        for check in self.validators:
            if isinstance(check, Limit):
                prop[_LIMIT_KEYWORDS[check.kind]] = check.value
            elif check in _FORMATS and prop["type"] == "string":
                prop["format"] = _FORMATS[check]
        return prop

    def ui_widget(self) -> str:
        typ = self.type
        if isinstance(typ, SecretType):
            return "password"
        if isinstance(typ, BooleanType):
            return "checkbox"
        if isinstance(typ, ArrayType):
            return "list"
        if isinstance(typ, SelectType):
            return "multiselect" if typ.multi else "select"
        return "text"


class FormSection(BaseModel):
    """Group of fields shown together in the edit form."""

    model_config = ConfigDict(frozen=True)

    title: str | None = Field(default=None)
    fields: tuple[str, ...] = Field(default=())


class ListView(BaseModel):
    """Fields surfaced as table columns in the list view."""

    model_config = ConfigDict(frozen=True)

    title: str | None = Field(default=None)
    subtitle: str | None = Field(default=None)
    fields: tuple[str, ...] = Field(default=())


class Schema(BaseModel):
    """Immutable description of a configuration entity."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Registry key")
    singular: str = Field(default="", description="Singular display name")
    plural: str = Field(default="", description="Plural display name")
    prefix: str | None = Field(default=None, description="Key prefix on the wire")
    suffix: str | None = Field(default=None, description="Field that marks an entry's existence")
    fields: tuple[FieldDefinition, ...] = Field(default=())
    sections: tuple[FormSection, ...] = Field(default=())
    list_view: ListView = Field(default_factory=ListView)

    def has_field(self, field_id: str) -> bool:
        return any(f.id == field_id for f in self.fields)

    def field(self, field_id: str) -> FieldDefinition:
        for definition in self.fields:
            if definition.id == field_id:
                return definition
        raise UnknownFieldError(self.name, field_id)

    @property
    def id_field(self) -> FieldDefinition | None:
        for definition in self.fields:
            if definition.is_id:
                return definition
        return None

    def list_columns(self) -> list[FieldDefinition]:
        return [self.field(field_id) for field_id in self.list_view.fields]

    def section_fields(self, section: FormSection) -> list[FieldDefinition]:
        return [self.field(field_id) for field_id in section.fields]

    def dynamic_sources(self) -> set[str]:
        return {
            f.type.source.name
            for f in self.fields
            if isinstance(f.type, SelectType) and isinstance(f.type.source, DynamicSource)
        }

    def key_for(self, entry_id: str, field_id: str) -> str:
        """Build the wire-level key of one field of one entry."""
        if self.prefix:
            return f"{self.prefix}.{entry_id}.{field_id}"
        return f"{entry_id}.{field_id}"

    def entry_id_from_key(self, key: str) -> str | None:
        """Extract the entry id from a ``{prefix}.{id}.{suffix}`` key."""
        if not self.prefix or not self.suffix:
            return None
        head = f"{self.prefix}."
        tail = f".{self.suffix}"
        if key.startswith(head) and key.endswith(tail) and len(key) > len(head) + len(tail):
            return key[len(head):-len(tail)]
        return None

    def to_json_schema(self) -> dict[str, Any]:
        """Export as JSON Schema dict."""
        properties = {}
        required = []

        for definition in self.fields:
            properties[definition.id] = definition.json_schema_property()
            if definition.is_required:
                required.append(definition.id)

        return {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "title": self.singular or self.name,
            "properties": properties,
            "required": required,
        }

    def to_ui_schema(self) -> dict[str, Any]:
        """Export as UI Schema dict."""
        ui_schema: dict[str, Any] = {}

        for definition in self.fields:
            field_ui: dict[str, Any] = {"ui:widget": definition.ui_widget()}
            if definition.placeholder:
                field_ui["ui:placeholder"] = definition.placeholder
            if definition.help:
                field_ui["ui:help"] = definition.help
            if definition.is_id:
                field_ui["ui:readonlyOnEdit"] = True
            ui_schema[definition.id] = field_ui

        order = [field_id for section in self.sections for field_id in section.fields]
        if order:
            ui_schema["ui:order"] = order + ["*"]
        return ui_schema

    def to_form_config(self) -> dict[str, Any]:
        """Export complete form configuration for client libraries."""
        return {
            "formId": self.name,
            "schema": self.to_json_schema(),
            "uiSchema": self.to_ui_schema(),
            "sections": [section.model_dump(mode="json") for section in self.sections],
            "list": self.list_view.model_dump(mode="json"),
        }
