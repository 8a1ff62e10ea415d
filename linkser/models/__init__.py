"""Data models for the link manager."""

from .link import Link
from .registry import LinkRegistry
from .app_state import AppState
from .storage import APP_KEY, Storage, get_storage, reset_storage
from .errors import (
    LinkError,
    EmptyInputError,
    LinkExistsError,
    DuplicateLabelError,
    LinkNotFoundError,
)

__all__ = [
    "Link",
    "LinkRegistry",
    "AppState",
    "APP_KEY",
    "Storage",
    "get_storage",
    "reset_storage",
    "LinkError",
    "EmptyInputError",
    "LinkExistsError",
    "DuplicateLabelError",
    "LinkNotFoundError",
]
