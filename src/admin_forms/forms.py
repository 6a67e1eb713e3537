"""
Form data store bound to one schema.

A ``FormData`` is created per editing session. It holds the raw field
values, the per-field validation state and error, and runs the whole-form
validation pipeline:

    form = schemas.build_form("login").with_value("login", remembered)
    form.set("password", typed_password)      # from an input widget
    if form.validate_form():
        submit(form.value("login"), form.value("password"))
    else:
        show(form.errors)

Widgets observe the store through ``subscribe`` and ``binding`` rather than
sharing mutable cells.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from admin_forms.errors import ReadOnlyFieldError
from admin_forms.models.definitions import FieldDefinition, Schema
from admin_forms.models.types import (
    BooleanType,
    DynamicSource,
    Limit,
    SelectType,
    StaticSource,
    Validator,
)
from admin_forms.models.validation_result import (
    ErrorKind,
    FieldError,
    FieldState,
    ValidationResult,
)
from admin_forms.validation.checks import check_items, error_message, run_checks, transform
from admin_forms.validation.patterns import BOOLEAN_VALUES

logger = logging.getLogger("admin-forms")

RawValue = str | list[str] | None


@dataclass(frozen=True)
class FieldChanged:
    """Event emitted when user input changes a field."""

    field_id: str
    value: RawValue


class FieldBinding:
    """Per-field view of a store handed to an input widget."""

    def __init__(self, form: "FormData", field_id: str):
        self._form = form
        self.definition = form.schema.field(field_id)

    @property
    def field_id(self) -> str:
        return self.definition.id

    @property
    def value(self) -> RawValue:
        return self._form.raw(self.field_id)

    @property
    def error(self) -> FieldError | None:
        return self._form.error(self.field_id)

    @property
    def state(self) -> FieldState:
        return self._form.state(self.field_id)

    @property
    def read_only(self) -> bool:
        return self._form.edit and self.definition.is_id

    def options(self) -> list[tuple[str, str]]:
        return self._form.options(self.field_id)

    def set(self, value: Any) -> None:
        self._form.set(self.field_id, value)


class FormData:
    """Mutable values and validation state for one schema."""

    def __init__(self, schema: Schema, edit: bool = False):
        self.schema = schema
        self.edit = edit
        self._values: dict[str, RawValue] = {f.id: f.default_value() for f in schema.fields}
        self._errors: dict[str, FieldError] = {}
        self._states: dict[str, FieldState] = {f.id: FieldState.UNVALIDATED for f in schema.fields}
        self._dirty: set[str] = set(self._values)
        self._resolved: dict[str, tuple[tuple[str, str], ...]] = {}
        self._pending: set[str] = set()
        self._validated = False
        self._listeners: list[Callable[[FieldChanged], None]] = []

    def __repr__(self) -> str:
        return f"FormData(schema={self.schema.name!r}, errors={len(self._errors)})"

    # Values

    def _coerce(self, definition: FieldDefinition, value: Any) -> RawValue:
        if definition.is_multi:
            if value is None:
                return []
            if isinstance(value, str) or not isinstance(value, Iterable):
                return [str(value)]
            return [str(item) for item in value]
        if value is None:
            return None
        if isinstance(definition.type, BooleanType) and isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _store(self, field_id: str, value: Any) -> RawValue:
        definition = self.schema.field(field_id)
        raw = self._coerce(definition, value)
        self._values[field_id] = raw
        self._dirty.add(field_id)
        self._states[field_id] = FieldState.UNVALIDATED
        self._errors.pop(field_id, None)
        return raw

    def with_value(self, field_id: str, value: Any) -> "FormData":
        """Seed a field, replacing its default. No validation is run."""
        self._store(field_id, value)
        return self

    def with_values(self, values: dict[str, Any]) -> "FormData":
        for field_id, value in values.items():
            self._store(field_id, value)
        return self

    def set(self, field_id: str, value: Any) -> None:
        """Store raw user input and notify subscribers."""
        definition = self.schema.field(field_id)
        if self.edit and definition.is_id:
            raise ReadOnlyFieldError(field_id)
        raw = self._store(field_id, value)
        event = FieldChanged(field_id=field_id, value=raw)
        for listener in list(self._listeners):
            listener(event)

    def raw(self, field_id: str) -> RawValue:
        self.schema.field(field_id)
        value = self._values[field_id]
        return list(value) if isinstance(value, list) else value

    def value(self, field_id: str, as_type: type = str) -> Any:
        """
        Typed read of the current value.

        Returns None when the field was never set and has no default, or
        when the value cannot be read as ``as_type``.
        """
        raw = self.raw(field_id)
        if raw is None:
            return None
        if as_type is list:
            return raw if isinstance(raw, list) else [raw]
        if isinstance(raw, list):
            if as_type is str:
                return ",".join(raw)
            return None
        if as_type is str:
            return raw
        if as_type is bool:
            return {"true": True, "false": False}.get(raw)
        try:
            return as_type(raw)
        except (TypeError, ValueError):
            return None

    def export(self, include_secrets: bool = True) -> dict[str, RawValue]:
        """Current values keyed by field id, for the transport layer."""
        return {
            f.id: self.raw(f.id)
            for f in self.schema.fields
            if include_secrets or not f.is_secret
        }

    @property
    def entry_id(self) -> str | None:
        id_field = self.schema.id_field
        return self.value(id_field.id) if id_field else None

    def is_dirty(self, field_id: str) -> bool:
        self.schema.field(field_id)
        return field_id in self._dirty

    # Observation

    def subscribe(self, listener: Callable[[FieldChanged], None]) -> Callable[[], None]:
        """Register a listener for user input; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def binding(self, field_id: str) -> FieldBinding:
        return FieldBinding(self, field_id)

    # Validation state

    @property
    def errors(self) -> dict[str, FieldError]:
        return dict(self._errors)

    def error(self, field_id: str) -> FieldError | None:
        self.schema.field(field_id)
        return self._errors.get(field_id)

    def state(self, field_id: str) -> FieldState:
        self.schema.field(field_id)
        return self._states[field_id]

    @property
    def pending(self) -> list[str]:
        """Fields whose selection check waits for a dynamic source."""
        return [f.id for f in self.schema.fields if f.id in self._pending]

    # Select sources

    def options(self, field_id: str) -> list[tuple[str, str]]:
        typ = self.schema.field(field_id).type
        if not isinstance(typ, SelectType):
            return []
        if isinstance(typ.source, StaticSource):
            return list(typ.source.options)
        return list(self._resolved.get(typ.source.name, ()))

    def resolve_source(
        self,
        name: str,
        options: Iterable[tuple[str, str] | str],
    ) -> bool | None:
        """
        Record the options of a dynamic source.

        If the form was already validated, validation is re-run so that
        deferred selection checks take effect; the new outcome is returned.
        """
        self._resolved[name] = tuple(
            (item, item) if isinstance(item, str) else (item[0], item[1]) for item in options
        )
        logger.debug(f"Resolved source '{name}' with {len(self._resolved[name])} options")
        if self._validated:
            return self.validate_form()
        return None

    def _allowed_values(self, definition: FieldDefinition) -> tuple[str, ...] | None:
        """Allowed values for a select field, or None while the source is unresolved."""
        source = definition.type.source
        if isinstance(source, StaticSource):
            return source.values()
        if isinstance(source, DynamicSource) and source.name in self._resolved:
            return tuple(value for value, _ in self._resolved[source.name])
        return None

    # Pipeline

    def _error(
        self,
        definition: FieldDefinition,
        kind: ErrorKind,
        check: Any = None,
        index: int | None = None,
        expected: Any = None,
    ) -> FieldError:
        return FieldError(
            field_name=definition.id,
            error_type=kind,
            message=error_message(kind, check),
            index=index,
            expected=expected,
        )

    def _normalize(self, definition: FieldDefinition) -> RawValue:
        raw = self._values[definition.id]
        if definition.id in self._dirty and definition.transformers:
            if isinstance(raw, list):
                raw = [transform(item, definition.transformers) for item in raw]
            elif raw is not None:
                raw = transform(raw, definition.transformers)
            self._values[definition.id] = raw
        self._dirty.discard(definition.id)
        return raw

    def _check_element(
        self,
        definition: FieldDefinition,
        value: str,
        allowed: tuple[str, ...] | None,
        index: int | None,
    ) -> FieldError | None:
        failure = run_checks(value, definition.validators)
        if failure is not None:
            kind, check = failure
            return self._error(definition, kind, check, index=index)
        if allowed is not None and value and value not in allowed:
            return self._error(
                definition, ErrorKind.INVALID_SELECTION, index=index, expected=list(allowed)
            )
        return None

    def _validate_field(self, definition: FieldDefinition) -> FieldError | None:
        raw = self._normalize(definition)
        typ = definition.type

        allowed = None
        self._pending.discard(definition.id)
        if isinstance(typ, SelectType):
            allowed = self._allowed_values(definition)
            if allowed is None:
                self._pending.add(definition.id)

        if isinstance(raw, list):
            if not raw:
                if definition.is_required:
                    return self._error(definition, ErrorKind.REQUIRED, Validator.REQUIRED)
                return None
            for index, item in enumerate(raw):
                error = self._check_element(definition, item, allowed, index)
                if error is not None:
                    return error
            for check in definition.validators:
                if isinstance(check, Limit) and check.applies_to_list:
                    kind = check_items(len(raw), check)
                    if kind is not None:
                        return self._error(definition, kind, check)
            return None

        value = raw or ""
        if isinstance(typ, BooleanType) and value and value not in BOOLEAN_VALUES:
            return self._error(definition, ErrorKind.INVALID_BOOLEAN, expected=list(BOOLEAN_VALUES))
        return self._check_element(definition, value, allowed, None)

    def validate_form(self) -> bool:
        """
        Normalise and validate every field in declared order.

        Each field keeps the first failing check as its error; passing
        fields have any previous error cleared. Returns True when no field
        has an error. Never raises for invalid input.
        """
        for definition in self.schema.fields:
            error = self._validate_field(definition)
            if error is None:
                self._errors.pop(definition.id, None)
                self._states[definition.id] = FieldState.VALID
            else:
                self._errors[definition.id] = error
                self._states[definition.id] = FieldState.INVALID

        self._validated = True
        logger.debug(
            f"Validated form '{self.schema.name}': {len(self._errors)} errors, "
            f"{len(self._pending)} pending"
        )
        return not self._errors

    def result(self) -> ValidationResult:
        """
        Snapshot of the last validation pass.

        The form is only reported valid while every field is still in the
        state that pass left it in; any later edit makes it not valid until
        ``validate_form()`` runs again.
        """
        is_valid = self._validated and all(
            state == FieldState.VALID for state in self._states.values()
        )
        return ValidationResult(
            schema_name=self.schema.name,
            is_valid=is_valid,
            errors=[self._errors[f.id] for f in self.schema.fields if f.id in self._errors],
            validated_data=self.export(include_secrets=False) if is_valid else None,
            pending=self.pending,
        )
