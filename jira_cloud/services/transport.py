"""
Transport interface used by the Jira API services.

Services build and execute requests only through this interface, so they can
run against ``JiraClient`` or against any stand-in implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

import httpx


class Transport(ABC):
    """Every Jira HTTP transport must implement this interface."""

    @abstractmethod
    def new_request(self, method: str, path: str, body: Optional[Any] = None) -> httpx.Request:
        """Build a request for ``path`` relative to the instance base URL.

        Raises whatever error prevents the request from being built.
        """

    @abstractmethod
    async def do(
        self,
        request: httpx.Request,
        result_type: Optional[Any] = None,
    ) -> Tuple[Any, httpx.Response]:
        """Send ``request`` and decode the success body into ``result_type``.

        Raises:
            TransportError: On network failure, non-2xx status or an
                undecodable body. Carries the response when there was one.
        """
