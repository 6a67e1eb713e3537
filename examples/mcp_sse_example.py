#!/usr/bin/env python3
"""
MCP Server SSE Example - validate a listener through the MCP server

Connects to an admin-forms MCP server over SSE, lists its tools and
validates a listener definition with the validate_form tool.

Prerequisites:
    python run_mcp_server.py --transport sse --port 8080
    curl http://localhost:8080/health

Usage:
    python examples/mcp_sse_example.py
"""

import asyncio
import json
import os

from mcp import ClientSession
from mcp.client.sse import sse_client

MCP_URL = os.getenv("MCP_URL", "http://localhost:8080/sse")


async def main():
    async with sse_client(MCP_URL) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            tools = await session.list_tools()
            print("Tools:", ", ".join(tool.name for tool in tools.tools))

            result = await session.call_tool(
                "validate_form",
                {
                    "name": "listener",
                    "values": {
                        "_id": "smtp-submission",
                        "protocol": "smtp",
                        "bind": [" 0.0.0.0:587 ", "bad-address"],
                    },
                },
            )
            outcome = json.loads(result.content[0].text)

            print("=" * 60)
            print(f"Valid: {outcome['is_valid']}")
            for error in outcome["errors"]:
                position = f" [item {error['index']}]" if error["index"] is not None else ""
                print(f"  {error['field_name']}{position}: {error['message']}")
            print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
