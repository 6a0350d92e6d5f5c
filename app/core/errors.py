class StorefrontError(Exception):
    """Base class for errors the HTTP layer turns into a structured response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StorefrontError):
    status_code = 400


class AuthError(StorefrontError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFound(StorefrontError):
    status_code = 404


class StorageError(StorefrontError):
    status_code = 500
