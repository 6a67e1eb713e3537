"""
admin-forms MCP Server Entry Point.

Run the MCP server with either stdio or SSE transport.

Usage:
    # stdio mode (for desktop clients)
    python run_mcp_server.py --transport stdio

    # SSE mode (for Docker/remote)
    python run_mcp_server.py --transport sse --port 8080

    # Use environment variables
    MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from admin_forms.config import get_config
from admin_forms.logs import setup_logging
from admin_forms.mcp_server import run_mcp_server


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="admin-forms MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Desktop client (stdio)
  python run_mcp_server.py --transport stdio

  # Docker/Remote (SSE)
  python run_mcp_server.py --transport sse --port 8080

  # Using environment variables
  MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py

Environment Variables:
  MCP_TRANSPORT           Transport type: stdio or sse (default: stdio)
  MCP_PORT                Port for SSE transport (default: 8080)
  ADMIN_FORMS_LOG_LEVEL   Log level (default: INFO)
  ADMIN_FORMS_LOG_FILE    Optional JSON Lines log file
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )

    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host for SSE transport (default: 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    args = parser.parse_args()

    setup_logging(
        level=config.log_level,
        verbose=config.verbose_output,
        file_path=config.log_file,
    )

    # stdout carries the stdio transport, so the banner goes to stderr
    print("=" * 60, file=sys.stderr)
    print("admin-forms MCP Server", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Transport: {args.transport}", file=sys.stderr)
    if args.transport == "sse":
        print(f"Host: {args.host}", file=sys.stderr)
        print(f"Port: {args.port}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        print("\nServer stopped.", file=sys.stderr)


if __name__ == "__main__":
    main()
