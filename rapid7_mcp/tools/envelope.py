"""Uniform result envelope returned by every Rapid7 tool."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from mcp.types import TextContent

from ..rapid7.outcomes import Success, UpstreamOutcome

JSON_MIME_TYPE = "application/json"


@dataclass(frozen=True)
class ResultEnvelope:
    """A single text content item, JSON on success or 'Error: ...' otherwise."""
    text: str
    mime_type: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.mime_type is None

    def to_dict(self) -> Dict[str, Any]:
        item: Dict[str, Any] = {"type": "text", "text": self.text}
        if self.mime_type is not None:
            item["mimeType"] = self.mime_type
        return {"content": [item]}

    def to_text_content(self) -> List[TextContent]:
        if self.mime_type is not None:
            return [TextContent(type="text", text=self.text, mimeType=self.mime_type)]
        return [TextContent(type="text", text=self.text)]


def package_success(body: Any) -> ResultEnvelope:
    return ResultEnvelope(
        text=json.dumps(body, ensure_ascii=False, indent=2),
        mime_type=JSON_MIME_TYPE,
    )


def package_error(error: Union[str, BaseException]) -> ResultEnvelope:
    return ResultEnvelope(text=f"Error: {error}")


def package_outcome(outcome: UpstreamOutcome) -> ResultEnvelope:
    """Map a classified outcome to an envelope. Never raises."""
    if isinstance(outcome, Success):
        try:
            return package_success(outcome.body)
        except (TypeError, ValueError) as e:
            return package_error(e)
    return package_error(outcome.message)
