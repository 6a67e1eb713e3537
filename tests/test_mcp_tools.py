"""Tests for the MCP tools and server wiring."""

import json

from starlette.testclient import TestClient

from admin_forms.mcp_server import create_mcp_server, get_mcp_tools
from admin_forms.mcp_server.server import TOOL_HANDLERS, call_tool_json, create_sse_app
from admin_forms.mcp_server.tools import (
    mcp_describe_schema,
    mcp_list_schemas,
    mcp_validate_form,
)


class TestTools:
    """Tests for the tool functions."""

    def test_definitions_match_handlers(self):
        assert [t["name"] for t in get_mcp_tools()] == list(TOOL_HANDLERS)

    def test_list_schemas(self):
        names = [s["name"] for s in mcp_list_schemas()["schemas"]]
        assert names == ["login", "listener"]

    def test_describe_schema(self):
        description = mcp_describe_schema("listener")
        fields = {f["id"]: f for f in description["fields"]}
        assert fields["bind"]["widget"] == "list"
        assert fields["bind"]["validators"] == ["required", "is_socket_addr"]
        assert fields["socket.ttl"]["validators"][1] == {"kind": "min_value", "value": 1}
        assert description["form"]["list"]["fields"] == ["_id", "protocol", "bind", "tls.implicit"]

    def test_validate_form(self):
        result = mcp_validate_form(
            "listener",
            {"_id": "smtp-in", "bind": [" 0.0.0.0:25 ", "bad-address"]},
        )
        assert result["is_valid"] is False
        assert result["errors"][0]["field_name"] == "bind"
        assert result["errors"][0]["index"] == 1
        assert result["errors"][0]["error_type"] == "invalid_socket_addr"

    def test_validate_form_hides_secrets(self):
        result = mcp_validate_form("login", {"login": "Admin", "password": "secret"})
        assert result["is_valid"] is True
        assert result["validated_data"] == {"login": "admin", "base-url": None}


class TestCallTool:
    """Tests for request handling errors."""

    def test_success(self):
        result = json.loads(call_tool_json("list_schemas", {}))
        assert len(result["schemas"]) == 2

    def test_unknown_tool(self):
        assert json.loads(call_tool_json("drop_schemas", {})) == {"error": "Unknown tool: drop_schemas"}

    def test_unknown_schema(self):
        result = json.loads(call_tool_json("describe_schema", {"name": "domain"}))
        assert result == {"error": "Schema 'domain' is not registered"}

    def test_unknown_field(self):
        result = json.loads(call_tool_json("validate_form", {"name": "login", "values": {"user": "x"}}))
        assert result == {"error": "Field 'user' is not declared in schema 'login'"}

    def test_scalar_for_list_field(self):
        result = json.loads(call_tool_json("validate_form", {"name": "listener", "values": {"bind": 5}}))
        assert result["is_valid"] is False
        assert {e["field_name"] for e in result["errors"]} == {"_id", "bind"}

    def test_values_not_an_object(self):
        result = json.loads(call_tool_json("validate_form", {"name": "listener", "values": ["bind"]}))
        assert result == {"error": "values must be an object keyed by field id"}

    def test_missing_argument(self):
        result = json.loads(call_tool_json("describe_schema", {}))
        assert result["error"].startswith("Missing argument")


class TestServer:
    """Tests for server construction."""

    def test_create_server(self):
        assert create_mcp_server().name == "admin-forms-mcp"

    def test_health(self):
        client = TestClient(create_sse_app(create_mcp_server()))
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["schemas"] == ["login", "listener"]
