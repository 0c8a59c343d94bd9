"""MCP tools for Rapid7 log search."""

from .base import Rapid7Tool
from .dispatch import ToolDispatcher, UnknownToolError
from .envelope import ResultEnvelope
from .logsets import ListLogsetsTool
from .poll import PollQueryTool
from .query import QueryLogsetByNameTool, QueryLogsetTool

__all__ = [
    "Rapid7Tool",
    "ToolDispatcher",
    "UnknownToolError",
    "ResultEnvelope",
    "ListLogsetsTool",
    "PollQueryTool",
    "QueryLogsetTool",
    "QueryLogsetByNameTool",
]
