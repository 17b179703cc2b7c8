"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class StoreFailure(AppError):
    """Raised when the persistence layer fails.

    The message shown to clients is always generic; the underlying
    exception is kept on ``__cause__`` for logging.
    """

    status_code = 500

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__("Operation failed", code="STORE_FAILURE")
