"""Event-driven entry point (e.g. AWS Lambda) for the Rapid7 tools.

Events look like ``{"action": "queryLogset", "input": {...}}`` and the
response is ``{"statusCode": ..., "body": "<json>"}``. The runtime-facing
``handler`` lives in :mod:`rapid7_mcp.lambda_function`, which builds the
dispatcher when the module is imported.
"""

import json
import os
from typing import Any, Dict, Optional

import structlog

from .config import get_config
from .logging_config import configure_logging
from .tools.dispatch import ToolDispatcher

logger = structlog.get_logger(__name__)

ACTIONS = {
    "listLogsets": "listRapid7Logsets",
    "queryLogset": "queryRapid7Logset",
    "pollQuery": "pollRapid7Query",
    "queryLogsetByName": "queryRapid7LogsetByName",
}

_dispatcher: Optional[ToolDispatcher] = None


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body, ensure_ascii=False)}


async def handle_event(dispatcher: ToolDispatcher, event: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Map an event's action to a tool and wrap the result in an HTTP-style response."""
    event = event or {}
    action = event.get("action")
    tool_name = ACTIONS.get(action) if isinstance(action, str) else None

    if tool_name is None:
        logger.warning("Unknown action", action=action)
        return _response(400, {"error": f"Unknown action: {action}"})

    try:
        envelope = await dispatcher.invoke(tool_name, event.get("input") or {})
    except Exception as e:
        logger.error("Action failed", action=action, error=str(e))
        return _response(500, {"error": str(e)})

    return _response(200, envelope.to_dict())


def get_dispatcher() -> ToolDispatcher:
    """Build the process-wide dispatcher once.

    Raises:
        ConfigurationError: If RAPID7_API_KEY is not set
    """
    global _dispatcher
    if _dispatcher is None:
        configure_logging(os.getenv("MCP_LOG_LEVEL", "INFO"), json_logs=True)
        _dispatcher = ToolDispatcher(get_config())
    return _dispatcher
