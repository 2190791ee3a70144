"""Jira API services."""

from .status_category import StatusCategoryService
from .transport import Transport

__all__ = ["StatusCategoryService", "Transport"]
