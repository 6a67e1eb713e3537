"""
Field types, transformers and validators.

Each of these is a closed set. The validation pipeline in
``admin_forms.validation.checks`` dispatches over every member, so adding a
kind here means adding its implementation there.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class StaticSource(BaseModel):
    """Fixed set of (value, label) pairs for a select field."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    options: tuple[tuple[str, str], ...] = Field(
        ..., description="Allowed (value, display label) pairs"
    )

    def values(self) -> tuple[str, ...]:
        return tuple(value for value, _ in self.options)

    def label_for(self, value: str) -> str | None:
        for option, label in self.options:
            if option == value:
                return label
        return None


class DynamicSource(BaseModel):
    """Select options resolved at runtime by an external directory lookup."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["dynamic"] = "dynamic"
    name: str = Field(..., description="Handle used to resolve the options")


Source = Annotated[Union[StaticSource, DynamicSource], Field(discriminator="kind")]


class InputType(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["input"] = "input"


class SecretType(BaseModel):
    """Masked value, never echoed back or logged."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["secret"] = "secret"


class BooleanType(BaseModel):
    """Stored as the strings ``"true"`` / ``"false"``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"


class ArrayType(BaseModel):
    """Ordered list of scalar string values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"


class SelectType(BaseModel):
    """Single or multiple choice from a static or dynamic source."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["select"] = "select"
    multi: bool = False
    source: Source


FieldType = Annotated[
    Union[InputType, SecretType, BooleanType, ArrayType, SelectType],
    Field(discriminator="kind"),
]


class Type:
    """Shorthand constructors used by schema definitions."""

    INPUT = InputType()
    SECRET = SecretType()
    BOOLEAN = BooleanType()
    ARRAY = ArrayType()

    @staticmethod
    def select(
        source: StaticSource | DynamicSource | list[tuple[str, str]] | tuple[tuple[str, str], ...],
        multi: bool = False,
    ) -> SelectType:
        if not isinstance(source, (StaticSource, DynamicSource)):
            source = StaticSource(options=tuple(tuple(pair) for pair in source))
        return SelectType(multi=multi, source=source)

    @staticmethod
    def dynamic(name: str, multi: bool = False) -> SelectType:
        return SelectType(multi=multi, source=DynamicSource(name=name))


def is_multi_valued(typ: FieldType) -> bool:
    """Whether the field stores a list of values rather than a single string."""
    return isinstance(typ, ArrayType) or (isinstance(typ, SelectType) and typ.multi)


class Transformer(str, Enum):
    """Input normalisation applied before validation, in declared order."""

    TRIM = "trim"
    TRIM_END = "trim_end"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    REMOVE_SPACES = "remove_spaces"


class Validator(str, Enum):
    """Parameterless checks over an already transformed value."""

    REQUIRED = "required"
    IS_URL = "is_url"
    IS_SOCKET_ADDR = "is_socket_addr"
    IS_EMAIL = "is_email"
    IS_HOST = "is_host"
    IS_IP_OR_MASK = "is_ip_or_mask"
    IS_PORT = "is_port"
    IS_NUMBER = "is_number"
    IS_DURATION = "is_duration"
    IS_SIZE = "is_size"


class LimitKind(str, Enum):
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    MIN_VALUE = "min_value"
    MAX_VALUE = "max_value"
    MIN_ITEMS = "min_items"
    MAX_ITEMS = "max_items"


class Limit(BaseModel):
    """Range or length check carrying its bound."""

    model_config = ConfigDict(frozen=True)

    kind: LimitKind
    value: int

    @property
    def applies_to_list(self) -> bool:
        """Item-count limits check the whole list, not each element."""
        return self.kind in (LimitKind.MIN_ITEMS, LimitKind.MAX_ITEMS)

    @classmethod
    def min_length(cls, value: int) -> "Limit":
        return cls(kind=LimitKind.MIN_LENGTH, value=value)

    @classmethod
    def max_length(cls, value: int) -> "Limit":
        return cls(kind=LimitKind.MAX_LENGTH, value=value)

    @classmethod
    def min_value(cls, value: int) -> "Limit":
        return cls(kind=LimitKind.MIN_VALUE, value=value)

    @classmethod
    def max_value(cls, value: int) -> "Limit":
        return cls(kind=LimitKind.MAX_VALUE, value=value)

    @classmethod
    def min_items(cls, value: int) -> "Limit":
        return cls(kind=LimitKind.MIN_ITEMS, value=value)

    @classmethod
    def max_items(cls, value: int) -> "Limit":
        return cls(kind=LimitKind.MAX_ITEMS, value=value)


Check = Union[Validator, Limit]
