"""
Status category service.

Lists all status categories of a Jira instance and fetches a single category.
Status categories provide a mechanism for categorizing workflow statuses.

Jira API docs: https://developer.atlassian.com/cloud/jira/platform/rest/v3/api-group-workflow-status-categories/
"""

import logging
from typing import List, Tuple

import httpx

from jira_cloud.models.status_category import StatusCategory
from jira_cloud.services.transport import Transport
from jira_cloud.utils.exceptions import JiraAPIException, TransportError, ValidationException

logger = logging.getLogger(__name__)

STATUS_CATEGORY_ENDPOINT = "/rest/api/3/statuscategory"


class StatusCategoryService:
    """Read operations on the status category resource group."""

    def __init__(self, client: Transport):
        """Initialize service with a transport.

        Args:
            client: Transport implementation (usually JiraClient)
        """
        self.client = client

    async def get_list(self) -> Tuple[List[StatusCategory], httpx.Response]:
        """
        Get all status categories.

        Categories are returned in the order the server sends them.

        Returns:
            Tuple of (categories, response)

        Raises:
            JiraAPIException: If the request failed or returned a non-2xx status
        """
        request = self.client.new_request("GET", STATUS_CATEGORY_ENDPOINT)

        logger.info("Getting status categories")
        try:
            categories, response = await self.client.do(request, List[StatusCategory])
        except TransportError as e:
            raise JiraAPIException.from_response(e.response, e) from e

        return categories, response

    async def get(self, status_category_id: str) -> Tuple[StatusCategory, httpx.Response]:
        """
        Get a status category.

        Args:
            status_category_id: ID or key of the status category

        Returns:
            Tuple of (category, response)

        Raises:
            ValidationException: If no identifier was given
            JiraAPIException: If the request failed or returned a non-2xx status
        """
        if not status_category_id:
            raise ValidationException("jira: no status category identifier set")

        endpoint = f"{STATUS_CATEGORY_ENDPOINT}/{status_category_id}"
        request = self.client.new_request("GET", endpoint)

        logger.info(f"Getting status category {status_category_id}")
        try:
            category, response = await self.client.do(request, StatusCategory)
        except TransportError as e:
            raise JiraAPIException.from_response(e.response, e) from e

        return category, response
