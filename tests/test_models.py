"""Tests for admin-forms data models."""

import pytest
from pydantic import ValidationError

from admin_forms.models.definitions import FieldDefinition, FormSection, ListView, Schema
from admin_forms.models.types import (
    ArrayType,
    DynamicSource,
    Limit,
    LimitKind,
    StaticSource,
    Transformer,
    Type,
    Validator,
)
from admin_forms.models.validation_result import (
    ErrorKind,
    FieldError,
    ValidationResult,
)
from admin_forms.schemas import build_schemas


class TestTypes:
    """Tests for field type variants."""

    def test_select_from_pairs(self):
        """Test building a static select from (value, label) pairs."""
        typ = Type.select([("smtp", "SMTP"), ("imap", "IMAP4")])
        assert isinstance(typ.source, StaticSource)
        assert typ.multi is False
        assert typ.source.values() == ("smtp", "imap")
        assert typ.source.label_for("imap") == "IMAP4"
        assert typ.source.label_for("pop3") is None

    def test_dynamic_select(self):
        """Test building a select resolved from a named source."""
        typ = Type.dynamic("domains", multi=True)
        assert isinstance(typ.source, DynamicSource)
        assert typ.source.name == "domains"
        assert typ.multi is True

    def test_limits(self):
        """Test range and length checks carry their bound."""
        assert Limit.min_length(3) == Limit(kind=LimitKind.MIN_LENGTH, value=3)
        assert Limit.max_items(2).applies_to_list
        assert not Limit.max_value(255).applies_to_list


class TestFieldDefinition:
    """Tests for FieldDefinition model."""

    def test_basic_field(self):
        """Test creating a basic field."""
        field = FieldDefinition(id="login")
        assert field.id == "login"
        assert field.label == ""
        assert field.default is None
        assert field.default_value() is None
        assert field.is_required is False
        assert field.ui_widget() == "text"

    def test_array_default(self):
        """Test list fields default to an empty list."""
        field = FieldDefinition(id="bind", type=Type.ARRAY)
        assert isinstance(field.type, ArrayType)
        assert field.is_multi
        assert field.default_value() == []

    def test_multi_select_default_is_copied(self):
        """Test the default of a multi select is returned as a fresh list."""
        field = FieldDefinition(
            id="tls.disable-protocols",
            type=Type.select([("TLSv1.2", "TLS 1.2"), ("TLSv1.3", "TLS 1.3")], multi=True),
            default=("TLSv1.2",),
        )
        first = field.default_value()
        first.append("TLSv1.3")
        assert field.default_value() == ["TLSv1.2"]

    def test_field_with_checks(self):
        """Test transformer and validator order is kept."""
        field = FieldDefinition(
            id="login",
            transformers=(Transformer.REMOVE_SPACES, Transformer.LOWERCASE),
            validators=(Validator.REQUIRED, Limit.max_length(64)),
        )
        assert field.transformers == (Transformer.REMOVE_SPACES, Transformer.LOWERCASE)
        assert field.validators[1] == Limit.max_length(64)
        assert field.is_required

    def test_field_is_frozen(self):
        """Test definitions cannot be changed after creation."""
        field = FieldDefinition(id="login")
        with pytest.raises(ValidationError):
            field.label = "Login"

    def test_json_schema_property(self):
        """Test exporting a field as a JSON Schema property."""
        field = FieldDefinition(
            id="protocol",
            type=Type.select([("smtp", "SMTP"), ("lmtp", "LMTP")]),
            label="Protocol",
            default="smtp",
        )
        prop = field.json_schema_property()
        assert prop["type"] == "string"
        assert prop["enum"] == ["smtp", "lmtp"]
        assert prop["default"] == "smtp"
        assert prop["title"] == "Protocol"


class TestSchema:
    """Tests for Schema model."""

    @pytest.fixture
    def schemas(self):
        return build_schemas()

    def test_field_lookup(self, schemas):
        """Test looking up fields by id."""
        listener = schemas["listener"]
        assert listener.field("bind").label == "Bind addresses"
        assert listener.has_field("tls.timeout")
        assert not listener.has_field("nope")
        assert listener.id_field.id == "_id"

    def test_list_columns(self, schemas):
        """Test list view columns resolve to field definitions."""
        columns = schemas["listener"].list_columns()
        assert [c.id for c in columns] == ["_id", "protocol", "bind", "tls.implicit"]

    def test_wire_keys(self, schemas):
        """Test building and parsing prefixed keys."""
        listener = schemas["listener"]
        assert listener.key_for("smtp-in", "bind") == "server.listener.smtp-in.bind"
        assert listener.entry_id_from_key("server.listener.smtp-in.protocol") == "smtp-in"
        assert listener.entry_id_from_key("server.listener.smtp-in.bind") is None
        assert schemas["login"].key_for("x", "login") == "x.login"

    def test_json_schema_export(self, schemas):
        """Test exporting a schema as JSON Schema."""
        json_schema = schemas["login"].to_json_schema()
        assert json_schema["type"] == "object"
        assert json_schema["required"] == ["login", "password"]
        assert json_schema["properties"]["password"]["format"] == "password"
        assert json_schema["properties"]["base-url"]["format"] == "uri"

    def test_ui_schema_export(self, schemas):
        """Test exporting a UI schema with section order."""
        ui_schema = schemas["listener"].to_ui_schema()
        assert ui_schema["bind"]["ui:widget"] == "list"
        assert ui_schema["tls.implicit"]["ui:widget"] == "checkbox"
        assert ui_schema["tls.disable-ciphers"]["ui:widget"] == "multiselect"
        assert ui_schema["_id"]["ui:readonlyOnEdit"] is True
        assert ui_schema["ui:order"][:3] == ["_id", "protocol", "bind"]

    def test_form_config_export(self, schemas):
        """Test exporting form configuration."""
        config = schemas["listener"].to_form_config()
        assert config["formId"] == "listener"
        assert config["sections"][0]["title"] == "Listener settings"
        assert config["list"]["title"] == "Listeners"

    def test_unknown_field(self):
        """Test looking up an undeclared field fails loudly."""
        schema = Schema(name="empty", sections=(FormSection(title="x"),), list_view=ListView())
        with pytest.raises(KeyError):
            schema.field("missing")


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_valid_result(self):
        """Test valid validation result."""
        result = ValidationResult(
            schema_name="login",
            is_valid=True,
            validated_data={"login": "john@example.org"},
        )
        assert result.is_valid
        assert result.error_count == 0
        assert result.pending == []

    def test_invalid_result(self):
        """Test invalid validation result with errors."""
        result = ValidationResult(
            schema_name="listener",
            is_valid=False,
            errors=[
                FieldError(
                    field_name="bind",
                    error_type=ErrorKind.INVALID_SOCKET_ADDR,
                    message="Invalid socket address, expected ip:port",
                    index=1,
                ),
            ],
        )
        assert not result.is_valid
        assert result.error_count == 1
        assert result.get_field_errors("bind")[0].index == 1

    def test_error_dict_conversion(self):
        """Test converting errors to dict format."""
        result = ValidationResult(
            schema_name="login",
            is_valid=False,
            errors=[
                FieldError(field_name="login", error_type=ErrorKind.REQUIRED, message="This field is required"),
                FieldError(field_name="password", error_type=ErrorKind.REQUIRED, message="This field is required"),
            ],
        )
        error_dict = result.to_error_dict()
        assert error_dict == {
            "login": ["This field is required"],
            "password": ["This field is required"],
        }
