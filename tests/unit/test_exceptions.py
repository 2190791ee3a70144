"""Unit tests for Jira API exceptions."""

import httpx
import pytest

from jira_cloud.utils.exceptions import (
    ConfigurationException,
    JiraAPIException,
    JiraException,
    TransportError,
    ValidationException,
)


def _response(status_code, **kwargs):
    return httpx.Response(
        status_code,
        request=httpx.Request("GET", "https://example.atlassian.net/rest/api/3/statuscategory"),
        **kwargs
    )


@pytest.fixture
def cause():
    return TransportError("Status code: 400")


def test_hierarchy():
    """Test that package exceptions share a base class."""
    assert issubclass(ValidationException, JiraException)
    assert issubclass(ValidationException, ValueError)
    assert issubclass(ConfigurationException, JiraException)
    assert issubclass(JiraAPIException, JiraException)


def test_error_messages_body(cause):
    """Test parsing errorMessages from the error body."""
    response = _response(400, json={"errorMessages": ["First", "Second"], "errors": {}})
    exc = JiraAPIException.from_response(response, cause)

    assert str(exc) == "First: Status code: 400"
    assert exc.error_messages == ["First", "Second"]
    assert exc.errors == {}
    assert exc.status_code == 400
    assert exc.response is response
    assert exc.cause is cause


def test_field_errors_body(cause):
    """Test parsing field errors when there are no error messages."""
    response = _response(400, json={"errorMessages": [], "errors": {"statusCategory": "is invalid"}})
    exc = JiraAPIException.from_response(response, cause)

    assert str(exc) == "statusCategory - is invalid: Status code: 400"
    assert exc.errors == {"statusCategory": "is invalid"}


def test_empty_json_body(cause):
    """Test that an empty JSON envelope falls back to the cause."""
    response = _response(400, json={})
    exc = JiraAPIException.from_response(response, cause)

    assert str(exc) == "Status code: 400"


def test_invalid_json_body(cause):
    """Test a body declared as JSON that does not parse."""
    response = _response(400, content=b"{not json", headers={"Content-Type": "application/json"})
    exc = JiraAPIException.from_response(response, cause)

    assert "could not parse JSON" in str(exc)
    assert exc.status_code == 400


def test_non_json_body(cause):
    """Test that a non-JSON body is included verbatim."""
    response = _response(502, text="<html>Bad Gateway</html>")
    exc = JiraAPIException.from_response(response, cause)

    assert str(exc) == "502 Bad Gateway: <html>Bad Gateway</html>: Status code: 400"


def test_no_response():
    """Test an error without a response."""
    exc = JiraAPIException.from_response(None, TransportError("request failed: timed out"))

    assert str(exc) == "no response returned: request failed: timed out"
    assert exc.response is None
    assert exc.status_code is None


def test_long_message(cause):
    """Test the multi-line rendering of every reported error."""
    response = _response(400, json={
        "errorMessages": ["First", "Second"],
        "errors": {"name": "required"}
    })
    exc = JiraAPIException.from_response(response, cause)

    assert exc.long_message() == (
        "Original:\n"
        "Status code: 400\n"
        "Messages:\n"
        " - First\n"
        " - Second\n"
        "Errors:\n"
        " - name: required"
    )


@pytest.mark.parametrize("body", [
    {"errorMessages": [], "errors": ["bad"]},
    {"errorMessages": [], "errors": {"name": 42}},
    {"errorMessages": "Oops"},
    {"errorMessages": [1, 2]},
    ["not", "an", "object"],
])
def test_malformed_error_envelope(cause, body):
    """Test that a JSON body not shaped like Jira's error envelope is reported as unparsable."""
    response = _response(400, json=body)
    exc = JiraAPIException.from_response(response, cause)

    assert "could not parse JSON" in str(exc)
    assert str(exc).startswith("Status code: 400")
    assert exc.response is response
    assert exc.status_code == 400
    assert exc.error_messages == []
    assert exc.errors == {}


def test_null_error_body(cause):
    """Test that a JSON null body falls back to the cause."""
    response = _response(400, content=b"null", headers={"Content-Type": "application/json"})
    exc = JiraAPIException.from_response(response, cause)

    assert str(exc) == "Status code: 400"
