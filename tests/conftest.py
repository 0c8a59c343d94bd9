"""Shared fixtures for the Rapid7 MCP server tests."""

import json
from typing import Any, Optional
from unittest.mock import Mock

import pytest
import requests

from rapid7_mcp.config import Config, MCPConfig, Rapid7Config
from rapid7_mcp.rapid7.client import Rapid7Client
from rapid7_mcp.tools.dispatch import ToolDispatcher

TEST_API_KEY = "testKey"
TEST_BASE_URL = "https://eu.rest.logs.insight.rapid7.com"


def make_response(status: int = 200,
                  body: Any = None,
                  text: Optional[str] = None,
                  content_type: Optional[str] = "application/json",
                  reason: str = "OK") -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    if content_type is not None:
        response.headers["Content-Type"] = content_type
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def rapid7_config():
    return Rapid7Config(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def config(rapid7_config):
    return Config(rapid7=rapid7_config, mcp=MCPConfig())


@pytest.fixture
def session():
    """A requests session whose request() returns an empty JSON object."""
    mock_session = Mock(spec=requests.Session)
    mock_session.request.return_value = make_response(body={})
    return mock_session


@pytest.fixture
def client(rapid7_config, session):
    return Rapid7Client(rapid7_config, session=session)


@pytest.fixture
def dispatcher(config, client):
    return ToolDispatcher(config, client=client)
