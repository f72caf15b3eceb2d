from .database import Database, get_session, storage_errors

__all__ = [
    "Database",
    "get_session",
    "storage_errors",
]
