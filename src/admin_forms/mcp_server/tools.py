"""
MCP Tool definitions for admin-forms.

Exposes the schema registry and the validation pipeline as MCP tools.
"""

import logging
from typing import Any

from admin_forms.models.types import Limit
from admin_forms.schemas import get_schemas

logger = logging.getLogger("admin-forms-mcp")


def mcp_list_schemas() -> dict[str, Any]:
    """List registered schemas with their display names."""
    schemas = get_schemas()
    return {
        "schemas": [
            {
                "name": name,
                "singular": schemas[name].singular,
                "plural": schemas[name].plural,
            }
            for name in schemas
        ]
    }


def mcp_describe_schema(name: str) -> dict[str, Any]:
    """
    Describe a schema's fields, form sections and list view.

    Raises:
        UnknownSchemaError: If no schema is registered under ``name``.
    """
    schema = get_schemas()[name]
    return {
        "name": schema.name,
        "singular": schema.singular,
        "plural": schema.plural,
        "fields": [
            {
                "id": f.id,
                "label": f.label,
                "help": f.help,
                "widget": f.ui_widget(),
                "required": f.is_required,
                "default": f.default_value(),
                "transformers": [t.value for t in f.transformers],
                "validators": [
                    v.model_dump(mode="json") if isinstance(v, Limit) else v.value
                    for v in f.validators
                ],
            }
            for f in schema.fields
        ],
        "form": schema.to_form_config(),
    }


def mcp_validate_form(
    name: str,
    values: dict[str, Any],
    edit: bool = False,
) -> dict[str, Any]:
    """
    Validate form values against a schema.

    Args:
        name: Registered schema name, e.g. "listener".
        values: Raw field values keyed by field id. Missing fields keep
            their defaults.
        edit: Whether the values describe an existing entry.

    Returns:
        ``ValidationResult`` as a JSON-compatible dict. Secret fields are
        never included in ``validated_data``.

    Raises:
        UnknownSchemaError: If no schema is registered under ``name``.
        UnknownFieldError: If ``values`` contains an undeclared field id.
        ValueError: If ``values`` is not a mapping.
    """
    if not isinstance(values, dict):
        raise ValueError("values must be an object keyed by field id")
    form = get_schemas().build_form(name, edit=edit).with_values(values)
    is_valid = form.validate_form()
    logger.info(f"Validated '{name}' form: valid={is_valid}, errors={len(form.errors)}")
    return form.result().model_dump(mode="json")


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "list_schemas",
            "description": "List the configuration schemas known to the administration console.",
            "inputSchema": {
                "type": "object",
                "properties": {},
            },
        },
        {
            "name": "describe_schema",
            "description": """
Describe one configuration schema.

Returns its fields (label, widget, defaults, checks), the edit form
sections, the list view columns, and JSON Schema / UI Schema exports.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Schema name, e.g. 'listener' or 'login'",
                    },
                },
                "required": ["name"],
            },
        },
        {
            "name": "validate_form",
            "description": """
Normalise and validate configuration values against a schema.

The result holds is_valid, per-field errors (with the failing element
index for list fields), the normalised data when valid, and the fields
whose selection check waits for a dynamic source.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Schema name, e.g. 'listener'",
                    },
                    "values": {
                        "type": "object",
                        "description": "Field values keyed by field id",
                    },
                    "edit": {
                        "type": "boolean",
                        "description": "Whether the values describe an existing entry",
                        "default": False,
                    },
                },
                "required": ["name", "values"],
            },
        },
    ]
