from .base import BaseRepository, IRepository, BaseService, IService
from .exceptions import (
    BaseError,
    ValidationError,
    InvalidReferenceError,
    NotFoundError,
    StorageError
)
from .config import Settings, get_settings
from .logging_config import configure_logging

__all__ = [
    # Base classes
    "BaseRepository",
    "IRepository",
    "BaseService",
    "IService",

    # Exceptions
    "BaseError",
    "ValidationError",
    "InvalidReferenceError",
    "NotFoundError",
    "StorageError",

    # Config
    "Settings",
    "get_settings",
    "configure_logging"
]
