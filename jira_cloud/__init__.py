"""Typed async client for the Jira Cloud status category API."""

__version__ = "0.1.0"

from .client import JiraClient  # noqa: E402
from .models import (  # noqa: E402
    STATUS_CATEGORY_COMPLETE,
    STATUS_CATEGORY_IN_PROGRESS,
    STATUS_CATEGORY_TO_DO,
    STATUS_CATEGORY_UNDEFINED,
    StatusCategory,
    StatusCategoryKey,
)
from .services import StatusCategoryService, Transport  # noqa: E402
from .utils.exceptions import (  # noqa: E402
    ConfigurationException,
    JiraAPIException,
    JiraException,
    TransportError,
    ValidationException,
)

__all__ = [
    "__version__",
    "JiraClient",
    "STATUS_CATEGORY_COMPLETE",
    "STATUS_CATEGORY_IN_PROGRESS",
    "STATUS_CATEGORY_TO_DO",
    "STATUS_CATEGORY_UNDEFINED",
    "StatusCategory",
    "StatusCategoryKey",
    "StatusCategoryService",
    "Transport",
    "ConfigurationException",
    "JiraAPIException",
    "JiraException",
    "TransportError",
    "ValidationException",
]
