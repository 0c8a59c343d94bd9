"""Rapid7 log search API access: validation, request building, transport, classification."""

from .validation import ValidationError
from .builder import OutboundRequest, build_request
from .client import Rapid7Client, Rapid7ConnectionError
from .outcomes import (
    FormatError,
    HttpError,
    Success,
    TransportError,
    UpstreamOutcome,
    classify_response,
    fetch_outcome,
)

__all__ = [
    "ValidationError",
    "OutboundRequest",
    "build_request",
    "Rapid7Client",
    "Rapid7ConnectionError",
    "Success",
    "HttpError",
    "FormatError",
    "TransportError",
    "UpstreamOutcome",
    "classify_response",
    "fetch_outcome",
]
