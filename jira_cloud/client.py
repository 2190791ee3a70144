"""
Jira Cloud API client.

Builds and executes requests against a Jira instance and exposes the
resource services (``client.status_category``).
"""

import base64
import logging
from functools import lru_cache
from typing import Any, Optional, Tuple

import httpx
from httpx import AsyncClient, Response
from pydantic import TypeAdapter, ValidationError

from jira_cloud import __version__
from jira_cloud.services.status_category import StatusCategoryService
from jira_cloud.services.transport import Transport
from jira_cloud.utils.exceptions import ConfigurationException, TransportError

logger = logging.getLogger(__name__)

USER_AGENT = f"jira-statuscategory/{__version__}"


@lru_cache(maxsize=None)
def _type_adapter(result_type: Any) -> TypeAdapter:
    """Return a cached adapter for decoding response bodies into result_type."""
    return TypeAdapter(result_type)


class JiraClient(Transport):
    """HTTP transport for the Jira Cloud REST API."""

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Jira API client.

        Args:
            base_url: Base URL of the Jira instance (e.g., https://your-domain.atlassian.net)
            username: Account email for Basic auth
            api_token: API token for Basic auth
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationException(f"Invalid Jira base URL: {base_url!r}")

        # Trailing slash so relative paths resolve beneath a context path
        if not base_url.endswith('/'):
            base_url += '/'
        self.base_url = httpx.URL(base_url)
        self.username = username

        self.headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'User-Agent': USER_AGENT,
        }

        if username and api_token:
            auth_string = f"{username}:{api_token}"
            auth_token = base64.b64encode(auth_string.encode('utf-8')).decode('utf-8')
            self.headers['Authorization'] = f'Basic {auth_token}'

        self._http = AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=self.headers,
            transport=transport,
        )

        self.status_category = StatusCategoryService(self)

        logger.info(f"Jira API client initialized for {self.base_url}")

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "JiraClient":
        """Create a client from application settings."""
        return cls(
            settings.jira_base_url,
            username=settings.jira_username,
            api_token=settings.jira_api_token,
            timeout=settings.jira_timeout,
            transport=transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close HTTP client."""
        if not self._http.is_closed:
            await self._http.aclose()
            logger.info("Jira API client closed")

    def new_request(self, method: str, path: str, body: Optional[Any] = None) -> httpx.Request:
        """
        Build a request relative to the base URL.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path; a leading slash is ignored
            body: Optional JSON-serializable request body

        Returns:
            Prepared request

        Raises:
            RuntimeError: If the client has been closed
        """
        if self._http.is_closed:
            raise RuntimeError("jira: client is closed")

        url = self.base_url.join(path.lstrip('/'))

        if body is None:
            return self._http.build_request(method, url)
        return self._http.build_request(method, url, json=body)

    async def do(
        self,
        request: httpx.Request,
        result_type: Optional[Any] = None,
    ) -> Tuple[Any, Response]:
        """
        Send a request and decode the JSON response body.

        Args:
            request: Request built by new_request
            result_type: Type to decode the body into (None skips decoding)

        Returns:
            Tuple of (decoded value or None, response)

        Raises:
            TransportError: On network failure, non-2xx status or undecodable body
        """
        try:
            response = await self._http.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"request failed: {e}") from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if not response.is_success:
            raise TransportError(
                "request failed. Please analyze the request body for more details. "
                f"Status code: {response.status_code}",
                response=response
            )

        if result_type is None:
            return None, response

        try:
            value = _type_adapter(result_type).validate_json(response.content)
        except ValidationError as e:
            raise TransportError(f"could not decode response body: {e}", response=response) from e

        return value, response
