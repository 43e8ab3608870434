class CatalogException(Exception):
    """Base for errors that map onto an HTTP status and a fixed message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogException):
    status_code = 400


class AuthError(CatalogException):
    status_code = 401


class NotFoundError(CatalogException):
    status_code = 404


class ConflictError(CatalogException):
    status_code = 409


class PersistenceError(CatalogException):
    """Database failure. The message is what the client sees; the cause is only logged."""

    status_code = 500
