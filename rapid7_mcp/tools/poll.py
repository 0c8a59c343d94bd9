"""Query polling tool implementation for MCP."""

from typing import Any, Dict

from ..rapid7.validation import DEFAULT_TIME_RANGE, PollQueryRequest, validate_poll_query
from .base import Rapid7Tool


class PollQueryTool(Rapid7Tool):
    """
    MCP tool polling a running Rapid7 query.

    Searches started by queryRapid7Logset or queryRapid7LogsetByName may
    return a query ID before results are ready; this tool fetches the
    current status and any results gathered so far.
    """

    name = "pollRapid7Query"
    description = "Poll the status of a running Rapid7 log query using its query ID"
    input_schema = {
        "type": "object",
        "properties": {
            "queryId": {
                "type": "string",
                "description": (
                    "The unique ID of the query to poll "
                    "(as returned by the queryRapid7Logset tool)"
                )
            },
            "timeRange": {
                "type": "string",
                "description": (
                    "Optional time range (e.g., 'last 1 day', 'last 7 days'). "
                    f"If omitted, defaults to '{DEFAULT_TIME_RANGE}'."
                ),
                "default": DEFAULT_TIME_RANGE
            }
        },
        "required": ["queryId"]
    }

    def validate(self, arguments: Dict[str, Any]) -> PollQueryRequest:
        return validate_poll_query(arguments)
