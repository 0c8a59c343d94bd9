"""Outbound request construction for the Rapid7 log search API.

Every builder is a pure function of the validated request and the
configured origin/API key: identical input produces a byte-identical URL.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union
from urllib.parse import quote, urlencode

from ..config import Rapid7Config
from .validation import (
    ListLogsetsRequest,
    PollQueryRequest,
    QueryLogsetByNameRequest,
    QueryLogsetRequest,
)

API_KEY_HEADER = "x-api-key"

# Characters encodeURIComponent leaves alone
_COMPONENT_SAFE = "-_.!~*'()"

OperationRequest = Union[
    ListLogsetsRequest,
    QueryLogsetRequest,
    QueryLogsetByNameRequest,
    PollQueryRequest,
]


@dataclass(frozen=True)
class OutboundRequest:
    """A fully built GET request against the Rapid7 API."""
    url: str
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    method: str = "GET"

    def __repr__(self) -> str:
        # Keep the API key out of logs and tracebacks
        return f"OutboundRequest(method={self.method!r}, url={self.url!r})"


def _headers(config: Rapid7Config) -> Mapping[str, str]:
    return MappingProxyType({API_KEY_HEADER: config.api_key})


def _search_params(request: Union[QueryLogsetRequest, QueryLogsetByNameRequest]) -> list:
    params = [
        ("from", str(request.from_millis)),
        ("to", str(request.to_millis)),
        ("per_page", str(request.per_page)),
        ("kvp_info", "false"),
    ]
    if request.query:
        params.append(("query", request.query))
    return params


def build_list_logsets(request: ListLogsetsRequest, config: Rapid7Config) -> OutboundRequest:
    return OutboundRequest(
        url=f"{config.base_url}/management/logsets",
        headers=_headers(config),
    )


def build_query_logset(request: QueryLogsetRequest, config: Rapid7Config) -> OutboundRequest:
    logset_id = quote(request.logset_id, safe="")
    query_string = urlencode(_search_params(request))
    return OutboundRequest(
        url=f"{config.base_url}/query/logsets/{logset_id}?{query_string}",
        headers=_headers(config),
    )


def build_query_logset_by_name(request: QueryLogsetByNameRequest,
                               config: Rapid7Config) -> OutboundRequest:
    params = [("logset_name", request.logset_name)] + _search_params(request)
    return OutboundRequest(
        url=f"{config.base_url}/query/logsets?{urlencode(params)}",
        headers=_headers(config),
    )


def build_poll_query(request: PollQueryRequest, config: Rapid7Config) -> OutboundRequest:
    query_id = quote(request.query_id, safe="")
    time_range = quote(request.time_range, safe=_COMPONENT_SAFE)
    return OutboundRequest(
        url=f"{config.base_url}/query/{query_id}?time_range={time_range}",
        headers=_headers(config),
    )


def build_request(request: OperationRequest, config: Rapid7Config) -> OutboundRequest:
    """Build the outbound request for any validated operation request."""
    if isinstance(request, ListLogsetsRequest):
        return build_list_logsets(request, config)
    if isinstance(request, QueryLogsetRequest):
        return build_query_logset(request, config)
    if isinstance(request, QueryLogsetByNameRequest):
        return build_query_logset_by_name(request, config)
    if isinstance(request, PollQueryRequest):
        return build_poll_query(request, config)
    raise TypeError(f"Unsupported operation request: {type(request).__name__}")
