"""
Fluent construction of the schema registry.

Usage:
    schemas = (
        SchemaSetBuilder()
        .new_schema("login")
        .new_field("login")
        .input_check([Transformer.TRIM], [Validator.REQUIRED])
        .build()
        .build()
        .build()
    )

``SchemaSetBuilder.new_schema`` opens a ``SchemaBuilder``; its
``new_field`` / ``new_form_section`` open an inner builder that is handed
back to the schema on ``build()``. An inner builder cannot be reused after
``build()``, and a schema cannot be finished while one of its inner
builders is still open.
"""

import logging
from collections.abc import Iterable, Iterator

from admin_forms.common_fields import CommonFieldsMixin
from admin_forms.errors import (
    BuilderStateError,
    DuplicateFieldError,
    DuplicateSchemaError,
    InvalidDefaultError,
    SchemaDefinitionError,
    UnknownFieldError,
    UnknownSchemaError,
)
from admin_forms.forms import FormData
from admin_forms.models.definitions import (
    ID_FIELD,
    FieldDefinition,
    FormSection,
    ListView,
    Schema,
)
from admin_forms.models.types import (
    BooleanType,
    Check,
    FieldType,
    InputType,
    SelectType,
    StaticSource,
    Transformer,
    Validator,
    is_multi_valued,
)
from admin_forms.validation.patterns import BOOLEAN_VALUES, VALID_FIELD_ID

logger = logging.getLogger("admin-forms")


class _ChildBuilder:
    """Inner builder owned by a ``SchemaBuilder`` until ``build()``."""

    def __init__(self, parent: "SchemaBuilder"):
        self._parent = parent
        self._consumed = False

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderStateError(
                f"{type(self).__name__} for schema '{self._parent.name}' was already built"
            )


class FieldBuilder(_ChildBuilder):
    """Collects the metadata and rules of one field."""

    def __init__(self, parent: "SchemaBuilder", field_id: str, is_id: bool = False):
        super().__init__(parent)
        self.field_id = field_id
        self._is_id = is_id
        self._type: FieldType = InputType()
        self._label = ""
        self._help: str | None = None
        self._placeholder: str | None = None
        self._default: str | list[str] | tuple[str, ...] | None = None
        self._transformers: tuple[Transformer, ...] = ()
        self._validators: tuple[Check, ...] = ()

    def typ(self, typ: FieldType) -> "FieldBuilder":
        self._ensure_open()
        self._type = typ
        return self

    def label(self, label: str) -> "FieldBuilder":
        self._ensure_open()
        self._label = label
        return self

    def help(self, text: str) -> "FieldBuilder":
        self._ensure_open()
        self._help = text
        return self

    def placeholder(self, text: str) -> "FieldBuilder":
        self._ensure_open()
        self._placeholder = text
        return self

    def default(self, value: str | list[str] | tuple[str, ...] | None) -> "FieldBuilder":
        self._ensure_open()
        self._default = value
        return self

    def input_check(
        self,
        transformers: Iterable[Transformer],
        validators: Iterable[Check],
    ) -> "FieldBuilder":
        """Set the ordered transformer and validator lists together."""
        self._ensure_open()
        self._transformers = tuple(transformers)
        self._validators = tuple(validators)
        return self

    def _normalized_default(self) -> str | tuple[str, ...] | None:
        value = self._default
        if value is None:
            return None
        if is_multi_valued(self._type):
            values = (value,) if isinstance(value, str) else tuple(value)
        elif isinstance(value, str):
            values = (value,)
        else:
            raise InvalidDefaultError(
                f"Field '{self.field_id}' is single-valued but has a list default"
            )

        if isinstance(self._type, BooleanType) and values[0] not in BOOLEAN_VALUES:
            raise InvalidDefaultError(
                f"Boolean field '{self.field_id}' has default {values[0]!r}"
            )
        if isinstance(self._type, SelectType) and isinstance(self._type.source, StaticSource):
            allowed = self._type.source.values()
            for item in values:
                if item not in allowed:
                    raise InvalidDefaultError(
                        f"Default {item!r} of field '{self.field_id}' is not a valid option"
                    )
        return values if is_multi_valued(self._type) else values[0]

    def build(self) -> "SchemaBuilder":
        self._ensure_open()
        definition = FieldDefinition(
            id=self.field_id,
            type=self._type,
            label=self._label,
            help=self._help,
            placeholder=self._placeholder,
            default=self._normalized_default(),
            transformers=self._transformers,
            validators=self._validators,
            is_id=self._is_id,
        )
        self._consumed = True
        return self._parent._close_field(self, definition)


class SectionBuilder(_ChildBuilder):
    """Collects the title and field order of one form section."""

    def __init__(self, parent: "SchemaBuilder"):
        super().__init__(parent)
        self._title: str | None = None
        self._fields: tuple[str, ...] = ()

    def title(self, title: str) -> "SectionBuilder":
        self._ensure_open()
        self._title = title
        return self

    def fields(self, fields: Iterable[str]) -> "SectionBuilder":
        self._ensure_open()
        self._fields = tuple(fields)
        return self

    def build(self) -> "SchemaBuilder":
        self._ensure_open()
        self._consumed = True
        return self._parent._close_section(self, FormSection(title=self._title, fields=self._fields))


class SchemaBuilder(CommonFieldsMixin):
    """Assembles one schema; ``build()`` registers it with the parent set."""

    def __init__(self, parent: "SchemaSetBuilder", name: str):
        self._parent = parent
        self.name = name
        self._singular = name
        self._plural = name
        self._prefix: str | None = None
        self._suffix: str | None = None
        self._fields: list[FieldDefinition] = []
        self._sections: list[FormSection] = []
        self._list_title: str | None = None
        self._list_subtitle: str | None = None
        self._list_fields: tuple[str, ...] = ()
        self._open: _ChildBuilder | None = None
        self._consumed = False

    def _ensure_idle(self) -> None:
        if self._consumed:
            raise BuilderStateError(f"Schema '{self.name}' was already built")
        if self._open is not None:
            raise BuilderStateError(
                f"Schema '{self.name}' has an unfinished {type(self._open).__name__}; "
                "call build() on it first"
            )

    def names(self, singular: str, plural: str) -> "SchemaBuilder":
        self._ensure_idle()
        self._singular = singular
        self._plural = plural
        return self

    def prefix(self, prefix: str) -> "SchemaBuilder":
        self._ensure_idle()
        self._prefix = prefix
        return self

    def suffix(self, suffix: str) -> "SchemaBuilder":
        self._ensure_idle()
        self._suffix = suffix
        return self

    def new_field(self, field_id: str) -> FieldBuilder:
        return self._open_field(field_id, is_id=False)

    def new_id_field(self) -> FieldBuilder:
        """Open the identity field; it is trimmed and required unless overridden."""
        return self._open_field(ID_FIELD, is_id=True).input_check(
            [Transformer.TRIM], [Validator.REQUIRED]
        )

    def _open_field(self, field_id: str, is_id: bool) -> FieldBuilder:
        self._ensure_idle()
        if not field_id or not VALID_FIELD_ID.match(field_id):
            raise SchemaDefinitionError(
                f"Invalid field id {field_id!r} in schema '{self.name}'"
            )
        if any(f.id == field_id for f in self._fields):
            raise DuplicateFieldError(self.name, field_id)
        builder = FieldBuilder(self, field_id, is_id=is_id)
        self._open = builder
        return builder

    def new_form_section(self) -> SectionBuilder:
        self._ensure_idle()
        builder = SectionBuilder(self)
        self._open = builder
        return builder

    def _close_field(self, builder: FieldBuilder, definition: FieldDefinition) -> "SchemaBuilder":
        if self._open is not builder:
            raise BuilderStateError(f"Field '{builder.field_id}' is not open in schema '{self.name}'")
        self._open = None
        self._fields.append(definition)
        return self

    def _close_section(self, builder: SectionBuilder, section: FormSection) -> "SchemaBuilder":
        if self._open is not builder:
            raise BuilderStateError(f"Section is not open in schema '{self.name}'")
        self._open = None
        self._sections.append(section)
        return self

    def list_title(self, title: str) -> "SchemaBuilder":
        self._ensure_idle()
        self._list_title = title
        return self

    def list_subtitle(self, subtitle: str) -> "SchemaBuilder":
        self._ensure_idle()
        self._list_subtitle = subtitle
        return self

    def list_fields(self, fields: Iterable[str]) -> "SchemaBuilder":
        self._ensure_idle()
        self._list_fields = tuple(fields)
        return self

    def _check_references(self) -> None:
        declared = {f.id for f in self._fields}
        referenced = [field_id for section in self._sections for field_id in section.fields]
        referenced.extend(self._list_fields)
        if self._suffix is not None:
            referenced.append(self._suffix)
        for field_id in referenced:
            if field_id not in declared:
                raise UnknownFieldError(self.name, field_id)

    def build(self) -> "SchemaSetBuilder":
        self._ensure_idle()
        self._check_references()
        schema = Schema(
            name=self.name,
            singular=self._singular,
            plural=self._plural,
            prefix=self._prefix,
            suffix=self._suffix,
            fields=tuple(self._fields),
            sections=tuple(self._sections),
            list_view=ListView(
                title=self._list_title,
                subtitle=self._list_subtitle,
                fields=self._list_fields,
            ),
        )
        self._consumed = True
        return self._parent._insert(schema)


class Schemas:
    """Read-only registry of schemas keyed by name."""

    def __init__(self, schemas: dict[str, Schema]):
        self._schemas = dict(schemas)

    def __getitem__(self, name: str) -> Schema:
        try:
            return self._schemas[name]
        except KeyError:
            raise UnknownSchemaError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def names(self) -> list[str]:
        return list(self._schemas)

    def build_form(self, name: str, edit: bool = False) -> FormData:
        """Create a form store bound to ``name`` with every field at its default."""
        return FormData(self[name], edit=edit)


class SchemaSetBuilder:
    """Outer builder producing the immutable ``Schemas`` registry."""

    def __init__(self):
        self._schemas: dict[str, Schema] = {}
        self._consumed = False

    def new_schema(self, name: str) -> SchemaBuilder:
        if self._consumed:
            raise BuilderStateError("Schema set was already built")
        if name in self._schemas:
            raise DuplicateSchemaError(name)
        return SchemaBuilder(self, name)

    def _insert(self, schema: Schema) -> "SchemaSetBuilder":
        if self._consumed:
            raise BuilderStateError("Schema set was already built")
        if schema.name in self._schemas:
            raise DuplicateSchemaError(schema.name)
        self._schemas[schema.name] = schema
        logger.debug(f"Registered schema '{schema.name}' with {len(schema.fields)} fields")
        return self

    def build(self) -> Schemas:
        if self._consumed:
            raise BuilderStateError("Schema set was already built")
        self._consumed = True
        return Schemas(self._schemas)
