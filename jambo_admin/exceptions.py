"""Typed application errors.

Every domain failure is raised as an :class:`AppError` subclass carrying its
HTTP status code. The handlers registered in ``jambo_admin.main`` turn them
into the ``{"success": false, "error": {...}}`` envelope.
"""


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid input received"


class AuthenticationError(AppError):
    status_code = 401
    default_message = "Authentication failed"


class AuthorizationError(AppError):
    status_code = 403
    default_message = "You do not have permission to perform this action"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Resource already exists"


class TooManyRequestsError(AppError):
    status_code = 429
    default_message = "Too many requests"


class InternalServerError(AppError):
    status_code = 500
