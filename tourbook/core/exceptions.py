from typing import Any, Optional, Dict


class BaseError(Exception):
    """Base exception class for the application"""

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseError):
    """Exception raised when a request is incomplete or malformed"""

    def __init__(self, message: str = "Missing fields", fields: Optional[list] = None):
        details = {"fields": fields} if fields else {}
        super().__init__(
            message=message,
            status_code=400,
            details=details
        )


class InvalidReferenceError(BaseError):
    """Exception raised when a request references an entity that does not exist"""

    def __init__(self, field: str, value: Any):
        super().__init__(
            message=f"Invalid {field}",
            status_code=400,
            details={"field": field, "value": value}
        )


class NotFoundError(BaseError):
    """Exception raised when an entity is not found"""

    def __init__(self, entity: str, id: Any):
        super().__init__(
            message="Not found",
            status_code=404,
            details={"entity": entity, "id": id}
        )


class StorageError(BaseError):
    """Exception raised when the database cannot complete an operation"""

    def __init__(self, operation: str):
        super().__init__(
            message="Internal server error",
            status_code=500,
            details={"operation": operation}
        )
