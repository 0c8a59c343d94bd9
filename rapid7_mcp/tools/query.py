"""Logset search tool implementations for MCP."""

from typing import Any, Dict

from ..rapid7.validation import (
    DEFAULT_PER_PAGE,
    QueryLogsetByNameRequest,
    QueryLogsetRequest,
    validate_query_logset,
    validate_query_logset_by_name,
)
from .base import Rapid7Tool

SEARCH_PROPERTIES: Dict[str, Any] = {
    "from": {
        "type": "string",
        "description": "Start datetime in ISO8601 format (YYYY-MM-DDTHH:MM:SSZ)"
    },
    "to": {
        "type": "string",
        "description": "End datetime in ISO8601 format (YYYY-MM-DDTHH:MM:SSZ)"
    },
    "perPage": {
        "type": "integer",
        "minimum": 1,
        "description": f"Number of results per page (default: {DEFAULT_PER_PAGE})",
        "default": DEFAULT_PER_PAGE
    },
    "query": {
        "type": "string",
        "description": (
            "Optional log query (can be omitted). "
            "Typical syntax: where(\"search term\", loose)"
        )
    }
}


class QueryLogsetTool(Rapid7Tool):
    """MCP tool searching an entire logset addressed by ID."""

    name = "queryRapid7Logset"
    description = "Query Rapid7 logs with specified parameters for an entire log set"
    input_schema = {
        "type": "object",
        "properties": {
            "from": SEARCH_PROPERTIES["from"],
            "to": SEARCH_PROPERTIES["to"],
            "perPage": SEARCH_PROPERTIES["perPage"],
            "logsetId": {
                "type": "string",
                "description": "Logset ID"
            },
            "query": SEARCH_PROPERTIES["query"]
        },
        "required": ["from", "to", "logsetId"]
    }

    def validate(self, arguments: Dict[str, Any]) -> QueryLogsetRequest:
        return validate_query_logset(arguments)


class QueryLogsetByNameTool(Rapid7Tool):
    """MCP tool searching a logset addressed by its display name."""

    name = "queryRapid7LogsetByName"
    description = "Query Rapid7 logs with specified parameters for a logset identified by name"
    input_schema = {
        "type": "object",
        "properties": {
            "logsetName": {
                "type": "string",
                "description": "Name of the logset to query"
            },
            "from": SEARCH_PROPERTIES["from"],
            "to": SEARCH_PROPERTIES["to"],
            "perPage": SEARCH_PROPERTIES["perPage"],
            "query": SEARCH_PROPERTIES["query"]
        },
        "required": ["logsetName", "from", "to"]
    }

    def validate(self, arguments: Dict[str, Any]) -> QueryLogsetByNameRequest:
        return validate_query_logset_by_name(arguments)
