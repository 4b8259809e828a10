from typing import Optional, Any


class AppError(Exception):
    """
    Base exception for the user service.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ResourceNotFoundError(AppError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)


class UserNotFoundError(ResourceNotFoundError):
    """
    Raised when no user document matches the given identifier.
    """
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found", details={"id": user_id})
