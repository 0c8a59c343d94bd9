"""Shared pipeline for Rapid7 MCP tools."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import structlog
from mcp.types import Tool

from ..config import Rapid7Config
from ..rapid7.builder import OperationRequest, build_request
from ..rapid7.client import Rapid7Client
from ..rapid7.outcomes import fetch_outcome
from ..rapid7.validation import ValidationError
from .envelope import ResultEnvelope, package_error, package_outcome

logger = structlog.get_logger(__name__)


class Rapid7Tool(ABC):
    """
    Base class for the Rapid7 tools.

    Subclasses declare ``name``, ``description`` and ``input_schema`` and
    implement ``validate``; validation, request building, the HTTP call,
    classification and packaging are otherwise identical for every tool.
    """

    name: str = ""
    description: str = ""
    input_schema: Dict[str, Any] = {"type": "object", "properties": {}, "required": []}

    def __init__(self, config: Rapid7Config, client: Optional[Rapid7Client] = None):
        self.config = config
        self._client = client

    def get_client(self) -> Rapid7Client:
        if self._client is None:
            self._client = Rapid7Client(self.config)
        return self._client

    def get_tool_definition(self) -> Tool:
        """Get the MCP tool definition."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

    @abstractmethod
    def validate(self, arguments: Dict[str, Any]) -> OperationRequest:
        """Turn raw tool arguments into a validated operation request."""

    async def execute(self, arguments: Optional[Dict[str, Any]] = None) -> ResultEnvelope:
        """Run the tool. Always returns an envelope, never raises."""
        try:
            request = self.validate(arguments or {})
            outbound = build_request(request, self.config)

            logger.info("Executing Rapid7 tool", tool=self.name, url=outbound.url)

            outcome = await asyncio.to_thread(fetch_outcome, self.get_client(), outbound)
            return package_outcome(outcome)

        except ValidationError as e:
            logger.warning("Invalid tool arguments", tool=self.name, error=str(e))
            return package_error(e)
        except Exception as e:
            logger.error("Unexpected error in Rapid7 tool", tool=self.name, error=str(e))
            return package_error(e)
