"""Shared utilities: exceptions and logging."""

from .exceptions import (
    ConfigurationException,
    JiraAPIException,
    JiraException,
    TransportError,
    ValidationException,
)
from .logger import setup_logger

__all__ = [
    "ConfigurationException",
    "JiraAPIException",
    "JiraException",
    "TransportError",
    "ValidationException",
    "setup_logger",
]
