"""Pytest configuration and fixtures."""

from typing import Callable, List

import httpx
import pytest
from unittest.mock import AsyncMock, Mock

from jira_cloud import config
from jira_cloud.client import JiraClient
from jira_cloud.models.status_category import StatusCategory
from jira_cloud.services.transport import Transport


BASE_URL = "https://example.atlassian.net"


@pytest.fixture
def jira_config():
    """Jira configuration."""
    return {
        "base_url": BASE_URL,
        "username": "dev@example.com",
        "api_token": "test_token"
    }


@pytest.fixture
def status_categories_json():
    """Status category list as returned by GET /rest/api/3/statuscategory."""
    return [
        {
            "self": f"{BASE_URL}/rest/api/3/statuscategory/1",
            "id": 1,
            "name": "No Category",
            "key": "undefined",
            "colorName": "medium-gray"
        },
        {
            "self": f"{BASE_URL}/rest/api/3/statuscategory/2",
            "id": 2,
            "name": "To Do",
            "key": "new",
            "colorName": "blue-gray"
        },
        {
            "self": f"{BASE_URL}/rest/api/3/statuscategory/4",
            "id": 4,
            "name": "In Progress",
            "key": "indeterminate",
            "colorName": "yellow"
        },
        {
            "self": f"{BASE_URL}/rest/api/3/statuscategory/3",
            "id": 3,
            "name": "Done",
            "key": "done",
            "colorName": "green"
        }
    ]


@pytest.fixture
def done_category_json():
    """Single status category as returned by GET /rest/api/3/statuscategory/{idOrKey}."""
    return {
        "self": "http://x/3",
        "id": 3,
        "name": "Done",
        "key": "done",
        "colorName": "green"
    }


@pytest.fixture
def mock_transport():
    """Stand-in transport that never touches the network."""
    transport = Mock(spec=Transport)
    transport.new_request.side_effect = lambda method, path, body=None: httpx.Request(
        method, f"{BASE_URL}{path}"
    )
    transport.do = AsyncMock()
    return transport


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by clients built with make_client."""
    return []


@pytest.fixture
def make_client(jira_config, recorded_requests) -> Callable[..., JiraClient]:
    """Factory for JiraClient instances backed by httpx.MockTransport."""
    def _make(handler: Callable[[httpx.Request], httpx.Response], **overrides) -> JiraClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        kwargs = dict(jira_config)
        kwargs.update(overrides)
        client = JiraClient(transport=httpx.MockTransport(_record), **kwargs)
        return client

    return _make


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Drop the cached settings singleton around every test."""
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def done_category(done_category_json):
    return StatusCategory.model_validate(done_category_json)
