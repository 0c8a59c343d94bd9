"""Rapid7 MCP Server: Rapid7 InsightOps log search exposed as MCP tools."""

__version__ = "1.0.0"
