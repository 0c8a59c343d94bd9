"""Name-based dispatch of Rapid7 tool invocations."""

from typing import Any, Dict, List, Optional

import structlog
from mcp.types import Tool

from ..config import Config
from ..rapid7.client import Rapid7Client
from .base import Rapid7Tool
from .envelope import ResultEnvelope
from .logsets import ListLogsetsTool
from .poll import PollQueryTool
from .query import QueryLogsetByNameTool, QueryLogsetTool

logger = structlog.get_logger(__name__)

TOOL_CLASSES = (
    QueryLogsetTool,
    PollQueryTool,
    ListLogsetsTool,
    QueryLogsetByNameTool,
)


class UnknownToolError(KeyError):
    """Raised when a tool name is not registered."""

    def __str__(self) -> str:
        return f"Unknown tool: {self.args[0]}"


class ToolDispatcher:
    """Binds each tool name to its pipeline; built once from the startup config."""

    def __init__(self, config: Config, client: Optional[Rapid7Client] = None):
        self.config = config
        self.client = client or Rapid7Client(config.rapid7)
        self._tools: Dict[str, Rapid7Tool] = {
            tool_class.name: tool_class(config.rapid7, self.client)
            for tool_class in TOOL_CLASSES
        }

    @property
    def tool_names(self) -> List[str]:
        return list(self._tools)

    def get_tool(self, name: str) -> Rapid7Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name)

    def list_tools(self) -> List[Tool]:
        return [tool.get_tool_definition() for tool in self._tools.values()]

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ResultEnvelope:
        """Look up a tool by name and run it.

        Raises:
            UnknownToolError: If no tool is registered under ``name``
        """
        tool = self.get_tool(name)
        logger.info("Dispatching tool call", tool=name)
        return await tool.execute(arguments)

    def close(self) -> None:
        self.client.close()
