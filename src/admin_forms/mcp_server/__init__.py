"""
MCP Server module for admin-forms.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from admin_forms.mcp_server.server import create_mcp_server, run_mcp_server
from admin_forms.mcp_server.tools import get_mcp_tools

__all__ = [
    "create_mcp_server",
    "run_mcp_server",
    "get_mcp_tools",
]
