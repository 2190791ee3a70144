"""
Custom exception classes for the Jira Cloud client.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx


class JiraException(Exception):
    """Base exception for all Jira client errors."""
    pass


class ValidationException(JiraException, ValueError):
    """Exception raised when caller input is rejected before any request is made."""
    pass


class ConfigurationException(JiraException):
    """Exception raised for configuration errors."""
    pass


class TransportError(Exception):
    """Exception raised by a transport when a call failed.

    ``response`` is None when no response was received (connection error,
    timeout).
    """

    def __init__(self, message: str, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response


def _parse_error_envelope(data: Any) -> Optional[Tuple[List[str], Dict[str, str]]]:
    """Extract ``errorMessages`` and ``errors`` from a decoded error body.

    Returns None when the body does not have the shape of Jira's error
    envelope (list of strings, object of strings).
    """
    if data is None:
        return [], {}
    if not isinstance(data, dict):
        return None

    error_messages = data.get("errorMessages")
    errors = data.get("errors")
    if error_messages is None:
        error_messages = []
    if errors is None:
        errors = {}

    if not isinstance(error_messages, list) or not all(isinstance(m, str) for m in error_messages):
        return None
    if not isinstance(errors, dict) or not all(isinstance(v, str) for v in errors.values()):
        return None

    return error_messages, errors


class JiraAPIException(JiraException):
    """Exception raised when a Jira API call failed."""

    def __init__(
        self,
        message: str,
        response: Optional[httpx.Response] = None,
        cause: Optional[BaseException] = None,
        error_messages: Optional[List[str]] = None,
        errors: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize API exception.

        Args:
            message: Error message
            response: HTTP response returned by the API, if any
            cause: Underlying transport error
            error_messages: ``errorMessages`` from the Jira error body
            errors: ``errors`` (field -> message) from the Jira error body
        """
        super().__init__(message)
        self.response = response
        self.cause = cause
        self.error_messages = error_messages or []
        self.errors = errors or {}

    @property
    def status_code(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status_code

    @classmethod
    def from_response(
        cls,
        response: Optional[httpx.Response],
        cause: BaseException,
    ) -> "JiraAPIException":
        """
        Build an API exception from a failed response.

        JSON bodies are parsed as Jira's error envelope
        (``{"errorMessages": [...], "errors": {...}}``); any other body is
        included verbatim in the message.

        Args:
            response: Failed HTTP response, or None if none was received
            cause: Error reported by the transport

        Returns:
            JiraAPIException describing the failure
        """
        if response is None:
            return cls(f"no response returned: {cause}", cause=cause)

        body = response.text
        content_type = response.headers.get("Content-Type", "")

        if not content_type.startswith("application/json"):
            return cls(
                f"{response.status_code} {response.reason_phrase}: {body}: {cause}",
                response=response,
                cause=cause,
            )

        try:
            data = json.loads(body) if body else {}
        except ValueError as e:
            return cls(f"{cause}: could not parse JSON: {e}", response=response, cause=cause)

        envelope = _parse_error_envelope(data)
        if envelope is None:
            return cls(
                f"{cause}: could not parse JSON: unexpected error body {body}",
                response=response,
                cause=cause,
            )
        error_messages, errors = envelope

        if error_messages:
            message = f"{error_messages[0]}: {cause}"
        elif errors:
            key, value = next(iter(errors.items()))
            message = f"{key} - {value}: {cause}"
        else:
            message = str(cause)

        return cls(
            message,
            response=response,
            cause=cause,
            error_messages=error_messages,
            errors=errors,
        )

    def long_message(self) -> str:
        """Return a multi-line message listing every error reported by Jira."""
        lines = ["Original:", str(self.cause if self.cause is not None else self)]
        if self.error_messages:
            lines.append("Messages:")
            lines.extend(f" - {m}" for m in self.error_messages)
        if self.errors:
            lines.append("Errors:")
            lines.extend(f" - {k}: {v}" for k, v in self.errors.items())
        return "\n".join(lines)
