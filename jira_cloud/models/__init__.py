"""Data models for Jira API resources."""

from .status_category import (
    STATUS_CATEGORY_COMPLETE,
    STATUS_CATEGORY_IN_PROGRESS,
    STATUS_CATEGORY_TO_DO,
    STATUS_CATEGORY_UNDEFINED,
    StatusCategory,
    StatusCategoryKey,
)

__all__ = [
    "STATUS_CATEGORY_COMPLETE",
    "STATUS_CATEGORY_IN_PROGRESS",
    "STATUS_CATEGORY_TO_DO",
    "STATUS_CATEGORY_UNDEFINED",
    "StatusCategory",
    "StatusCategoryKey",
]
