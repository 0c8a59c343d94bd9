"""Classification of Rapid7 API responses into normalized outcomes.

Exactly one outcome is produced per request, decided in this order:

1. the request never completed          -> TransportError
2. status outside 200-299               -> HttpError (body is not read)
3. content-type missing or not JSON     -> FormatError (raw body kept)
4. JSON content-type                    -> Success (parsed body, relayed as-is)
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

import requests
import structlog

from .builder import OutboundRequest
from .client import Rapid7Client, Rapid7ConnectionError

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class Success:
    body: Any

    @property
    def message(self) -> str:
        return "OK"


@dataclass(frozen=True)
class HttpError:
    status: int
    status_text: str

    @property
    def message(self) -> str:
        return f"API request failed: {self.status} {self.status_text}"


@dataclass(frozen=True)
class FormatError:
    body_text: str
    content_type: Optional[str] = None

    @property
    def message(self) -> str:
        return f"Unexpected response format: {self.body_text}"


@dataclass(frozen=True)
class TransportError:
    description: str

    @property
    def message(self) -> str:
        return self.description


UpstreamOutcome = Union[Success, HttpError, FormatError, TransportError]


def classify_response(response: requests.Response) -> UpstreamOutcome:
    """Classify a completed HTTP response."""
    status = response.status_code
    if not 200 <= status <= 299:
        return HttpError(status=status, status_text=response.reason or "")

    content_type = response.headers.get("content-type")
    if not content_type or JSON_CONTENT_TYPE not in content_type:
        return FormatError(body_text=response.text, content_type=content_type)

    try:
        body = response.json()
    except ValueError:
        # Labelled as JSON but the body does not parse
        return FormatError(body_text=response.text, content_type=content_type)

    return Success(body=body)


def fetch_outcome(client: Rapid7Client, outbound: OutboundRequest) -> UpstreamOutcome:
    """Send one request and classify whatever comes back."""
    try:
        response = client.send(outbound)
    except Rapid7ConnectionError as e:
        outcome: UpstreamOutcome = TransportError(description=str(e))
    else:
        outcome = classify_response(response)

    logger.info("Rapid7 request classified",
                url=outbound.url,
                outcome=type(outcome).__name__,
                status=getattr(outcome, "status", None))
    return outcome
