"""Unit tests for tool argument validation."""

from datetime import datetime, timezone

import pytest

from rapid7_mcp.rapid7.validation import (
    DEFAULT_PER_PAGE,
    DEFAULT_TIME_RANGE,
    ListLogsetsRequest,
    ValidationError,
    normalize_query,
    parse_iso8601_millis,
    validate_list_logsets,
    validate_poll_query,
    validate_query_logset,
    validate_query_logset_by_name,
)


def _millis(dt: datetime) -> int:
    return int(dt.timestamp()) * 1000 + dt.microsecond // 1000


class TestParseIso8601:
    """Test ISO8601 to epoch millisecond conversion."""

    def test_utc_z_suffix(self):
        assert parse_iso8601_millis("2023-01-01T00:00:00Z") == 1672531200000

    def test_end_of_day(self):
        expected = _millis(datetime(2023, 1, 1, 23, 59, 59, tzinfo=timezone.utc))
        assert parse_iso8601_millis("2023-01-01T23:59:59Z") == expected

    def test_fractional_seconds_keep_milliseconds(self):
        assert parse_iso8601_millis("2023-01-01T00:00:00.123Z") == 1672531200123

    def test_explicit_offset(self):
        # 02:00 at +02:00 is midnight UTC
        assert parse_iso8601_millis("2023-01-01T02:00:00+02:00") == 1672531200000

    def test_naive_timestamp_is_utc(self):
        assert parse_iso8601_millis("2023-01-01T00:00:00") == 1672531200000

    def test_date_only(self):
        assert parse_iso8601_millis("2023-01-01") == 1672531200000

    def test_pre_epoch(self):
        assert parse_iso8601_millis("1969-12-31T23:59:59Z") == -1000

    @pytest.mark.parametrize("value", [
        "not-a-date",
        "invalid-date",
        "",
        "   ",
        "2023-13-01T00:00:00Z",
        "2023-01-01T25:00:00Z",
        None,
        1672531200000,
    ])
    def test_invalid_values(self, value):
        with pytest.raises(ValidationError, match="Invalid datetime format"):
            parse_iso8601_millis(value)


class TestNormalizeQuery:
    """Test query trimming."""

    def test_none_stays_absent(self):
        assert normalize_query(None) is None

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_becomes_absent(self, value):
        assert normalize_query(value) is None

    def test_trimmed(self):
        assert normalize_query('  where("error", loose)  ') == 'where("error", loose)'

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            normalize_query(42)


class TestValidateQueryLogset:
    """Test validation of queryRapid7Logset arguments."""

    def setup_method(self):
        self.arguments = {
            "from": "2023-01-01T00:00:00Z",
            "to": "2023-01-01T23:59:59Z",
            "logsetId": "logset-123",
        }

    def test_defaults_applied(self):
        request = validate_query_logset(self.arguments)

        assert request.logset_id == "logset-123"
        assert request.per_page == DEFAULT_PER_PAGE
        assert request.query is None
        assert request.from_millis == 1672531200000
        assert request.to_millis == 1672617599000

    def test_explicit_values(self):
        request = validate_query_logset({**self.arguments, "perPage": 50, "query": " where(error) "})

        assert request.per_page == 50
        assert request.query == "where(error)"

    def test_null_per_page_uses_default(self):
        request = validate_query_logset({**self.arguments, "perPage": None})
        assert request.per_page == DEFAULT_PER_PAGE

    def test_integral_float_per_page(self):
        request = validate_query_logset({**self.arguments, "perPage": 25.0})
        assert request.per_page == 25

    @pytest.mark.parametrize("per_page", [0, -5, 2.5, "100", True])
    def test_invalid_per_page(self, per_page):
        with pytest.raises(ValidationError, match="perPage"):
            validate_query_logset({**self.arguments, "perPage": per_page})

    def test_invalid_from(self):
        with pytest.raises(ValidationError, match="Invalid datetime format"):
            validate_query_logset({**self.arguments, "from": "not-a-date"})

    def test_invalid_to(self):
        with pytest.raises(ValidationError, match="Invalid datetime format"):
            validate_query_logset({**self.arguments, "to": ""})

    def test_missing_from(self):
        arguments = dict(self.arguments)
        del arguments["from"]
        with pytest.raises(ValidationError, match="Invalid datetime format"):
            validate_query_logset(arguments)

    @pytest.mark.parametrize("logset_id", [None, "", "  ", 123])
    def test_invalid_logset_id(self, logset_id):
        with pytest.raises(ValidationError, match="logsetId"):
            validate_query_logset({**self.arguments, "logsetId": logset_id})

    def test_blank_query_is_absent(self):
        request = validate_query_logset({**self.arguments, "query": "   "})
        assert request.query is None


class TestValidateQueryLogsetByName:
    """Test validation of queryRapid7LogsetByName arguments."""

    def test_valid(self):
        request = validate_query_logset_by_name({
            "logsetName": "Web Server Logs & Analytics",
            "from": "2023-01-01T00:00:00Z",
            "to": "2023-01-02T00:00:00Z",
        })

        assert request.logset_name == "Web Server Logs & Analytics"
        assert request.per_page == DEFAULT_PER_PAGE
        assert request.to_millis - request.from_millis == 86400000

    def test_missing_name(self):
        with pytest.raises(ValidationError, match="logsetName"):
            validate_query_logset_by_name({
                "from": "2023-01-01T00:00:00Z",
                "to": "2023-01-02T00:00:00Z",
            })

    def test_dates_checked_before_name(self):
        with pytest.raises(ValidationError, match="Invalid datetime format"):
            validate_query_logset_by_name({"logsetName": "", "from": "x", "to": "y"})


class TestValidatePollQuery:
    """Test validation of pollRapid7Query arguments."""

    def test_default_time_range(self):
        request = validate_poll_query({"queryId": "query-123"})

        assert request.query_id == "query-123"
        assert request.time_range == DEFAULT_TIME_RANGE

    def test_empty_time_range_uses_default(self):
        request = validate_poll_query({"queryId": "query-123", "timeRange": ""})
        assert request.time_range == "last 1 day"

    def test_custom_time_range(self):
        request = validate_poll_query({"queryId": "query-123", "timeRange": "last 7 days"})
        assert request.time_range == "last 7 days"

    def test_missing_query_id(self):
        with pytest.raises(ValidationError, match="queryId"):
            validate_poll_query({})

    def test_non_string_time_range(self):
        with pytest.raises(ValidationError, match="timeRange"):
            validate_poll_query({"queryId": "query-123", "timeRange": 7})


def test_list_logsets_takes_no_arguments():
    assert validate_list_logsets({}) == ListLogsetsRequest()
    assert validate_list_logsets(None) == ListLogsetsRequest()
