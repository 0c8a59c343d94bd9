"""AWS Lambda module: configure ``rapid7_mcp.lambda_function.handler``.

The dispatcher is built at import time, so a missing RAPID7_API_KEY fails
the cold start instead of an invocation.
"""

import asyncio
from typing import Any, Dict, Optional

from .handler import get_dispatcher, handle_event

dispatcher = get_dispatcher()


def handler(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """Lambda handler."""
    return asyncio.run(handle_event(dispatcher, event))
