#!/usr/bin/env python3
"""
MCP server exposing Rapid7 log search tools over stdio or SSE transport
"""

import argparse
import asyncio
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
import uvicorn
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.routing import Mount, Route

from .config import Config, ConfigurationError, get_config
from .logging_config import configure_logging
from .tools.dispatch import ToolDispatcher

logger = structlog.get_logger(__name__)

DEFAULT_PORT = 8756


def create_server(config: Config, dispatcher: Optional[ToolDispatcher] = None) -> Server:
    """Build the MCP server with every Rapid7 tool registered."""
    dispatcher = dispatcher or ToolDispatcher(config)
    server = Server(config.mcp.server_name, version=config.mcp.version)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return dispatcher.list_tools()

    # Arguments are validated by the tools themselves so that bad input
    # comes back as an "Error: ..." text result
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        envelope = await dispatcher.invoke(name, arguments)
        return envelope.to_text_content()

    return server


def create_starlette_app(mcp_server: Server, *, debug: bool = False) -> Starlette:
    sse = SseServerTransport("/messages/")

    async def handle_sse(request):
        async with sse.connect_sse(
            request.scope, request.receive, request._send
        ) as streams:
            await mcp_server.run(
                streams[0], streams[1], mcp_server.create_initialization_options()
            )
        # Return empty response to avoid NoneType error
        return Response()

    return Starlette(
        debug=debug,
        routes=[
            Route("/sse", endpoint=handle_sse),
            Mount("/messages/", app=sse.handle_post_message),
        ]
    )


async def run_stdio(mcp_server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await mcp_server.run(
            read_stream, write_stream, mcp_server.create_initialization_options()
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rapid7-mcp-server",
        description="MCP server for querying Rapid7 InsightOps logs",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="MCP transport to serve (default: stdio)",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind address for SSE transport")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port for SSE transport")
    parser.add_argument(
        "--log-level",
        default=os.getenv("MCP_LOG_LEVEL", "INFO"),
        help="Log level (default: $MCP_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = get_config()
    except ConfigurationError as e:
        logger.error("Cannot start Rapid7 MCP server", error=str(e))
        sys.exit(1)

    dispatcher = ToolDispatcher(config)
    mcp_server = create_server(config, dispatcher)
    logger.info("Rapid7 MCP server starting",
                transport=args.transport,
                tools=dispatcher.tool_names)

    try:
        if args.transport == "sse":
            starlette_app = create_starlette_app(mcp_server)
            print(f"Rapid7 MCP Server running on http://{args.host}:{args.port}")
            print("Endpoints:")
            print(f"  SSE: http://{args.host}:{args.port}/sse")
            print(f"  Messages: http://{args.host}:{args.port}/messages/")
            uvicorn.run(starlette_app, host=args.host, port=args.port)
        else:
            asyncio.run(run_stdio(mcp_server))
    finally:
        dispatcher.close()


if __name__ == "__main__":
    main()
