"""
Entry point for running the Rapid7 MCP server as a module.

This allows running the server with: python -m rapid7_mcp
"""

from .server import main

if __name__ == "__main__":
    main()
