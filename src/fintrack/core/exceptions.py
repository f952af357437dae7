"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AuthorizationError(AppError):
    """Raised when the caller lacks membership or the required role."""

    def __init__(self, message: str, code: str = "FORBIDDEN"):
        super().__init__(message, code=code)


class AuthenticationError(AuthorizationError):
    """Raised when there is no authenticated caller."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="UNAUTHENTICATED")


class PersistenceError(AppError):
    """Raised when a primary write to the database fails."""

    def __init__(self, message: str):
        super().__init__(message, code="PERSISTENCE_ERROR")


class ConflictError(AppError):
    """Raised when a row changed between reading it and writing it back."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")
