"""Logset listing tool implementation for MCP."""

from typing import Any, Dict

from ..rapid7.validation import ListLogsetsRequest, validate_list_logsets
from .base import Rapid7Tool


class ListLogsetsTool(Rapid7Tool):
    """MCP tool listing every logset visible to the configured API key."""

    name = "listRapid7Logsets"
    description = "List all available Rapid7 logs sets"
    input_schema = {
        "type": "object",
        "properties": {},
        "required": []
    }

    def validate(self, arguments: Dict[str, Any]) -> ListLogsetsRequest:
        return validate_list_logsets(arguments)
