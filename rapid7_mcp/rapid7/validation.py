"""Parameter validation for Rapid7 log search operations."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

DEFAULT_PER_PAGE = 100
DEFAULT_TIME_RANGE = "last 1 day"

INVALID_DATETIME_MESSAGE = (
    "Invalid datetime format. Please use ISO8601 format (YYYY-MM-DDTHH:MM:SSZ)"
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ValidationError(Exception):
    """Exception raised when tool arguments are malformed."""
    pass


@dataclass(frozen=True)
class ListLogsetsRequest:
    """Validated input for listing logsets (carries no fields)."""
    pass


@dataclass(frozen=True)
class QueryLogsetRequest:
    """Validated input for a time-bounded search over a logset ID."""
    logset_id: str
    from_millis: int
    to_millis: int
    per_page: int = DEFAULT_PER_PAGE
    query: Optional[str] = None


@dataclass(frozen=True)
class QueryLogsetByNameRequest:
    """Validated input for a time-bounded search over a logset name."""
    logset_name: str
    from_millis: int
    to_millis: int
    per_page: int = DEFAULT_PER_PAGE
    query: Optional[str] = None


@dataclass(frozen=True)
class PollQueryRequest:
    """Validated input for polling a running query."""
    query_id: str
    time_range: str = DEFAULT_TIME_RANGE


def parse_iso8601_millis(value: Any) -> int:
    """Parse an ISO8601 timestamp into epoch milliseconds.

    A trailing 'Z' means UTC and a timestamp without an offset is taken
    as UTC.

    Raises:
        ValidationError: If the value is not a parseable ISO8601 string
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(INVALID_DATETIME_MESSAGE)

    text = value.strip()
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(INVALID_DATETIME_MESSAGE)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    # Integer arithmetic on timedeltas keeps the millisecond value exact
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


def normalize_query(value: Any) -> Optional[str]:
    """Trim a log query, collapsing empty or blank queries to None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("'query' must be a string")
    value = value.strip()
    return value or None


def _require_string(arguments: Dict[str, Any], name: str) -> str:
    value = arguments.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{name}' must be a non-empty string")
    return value


def _per_page(arguments: Dict[str, Any]) -> int:
    value = arguments.get("perPage")
    if value is None:
        return DEFAULT_PER_PAGE

    # bool is an int subclass
    if isinstance(value, bool):
        raise ValidationError("'perPage' must be a positive integer")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value < 1:
        raise ValidationError("'perPage' must be a positive integer")
    return value


def _time_bounds(arguments: Dict[str, Any]) -> tuple[int, int]:
    return (
        parse_iso8601_millis(arguments.get("from")),
        parse_iso8601_millis(arguments.get("to")),
    )


def validate_list_logsets(arguments: Optional[Dict[str, Any]] = None) -> ListLogsetsRequest:
    return ListLogsetsRequest()


def validate_query_logset(arguments: Dict[str, Any]) -> QueryLogsetRequest:
    """Validate arguments for queryRapid7Logset."""
    from_millis, to_millis = _time_bounds(arguments)
    return QueryLogsetRequest(
        logset_id=_require_string(arguments, "logsetId"),
        from_millis=from_millis,
        to_millis=to_millis,
        per_page=_per_page(arguments),
        query=normalize_query(arguments.get("query")),
    )


def validate_query_logset_by_name(arguments: Dict[str, Any]) -> QueryLogsetByNameRequest:
    """Validate arguments for queryRapid7LogsetByName."""
    from_millis, to_millis = _time_bounds(arguments)
    return QueryLogsetByNameRequest(
        logset_name=_require_string(arguments, "logsetName"),
        from_millis=from_millis,
        to_millis=to_millis,
        per_page=_per_page(arguments),
        query=normalize_query(arguments.get("query")),
    )


def validate_poll_query(arguments: Dict[str, Any]) -> PollQueryRequest:
    """Validate arguments for pollRapid7Query."""
    time_range = arguments.get("timeRange")
    if time_range is not None and not isinstance(time_range, str):
        raise ValidationError("'timeRange' must be a string")

    return PollQueryRequest(
        query_id=_require_string(arguments, "queryId"),
        time_range=time_range or DEFAULT_TIME_RANGE,
    )
