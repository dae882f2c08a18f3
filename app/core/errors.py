"""Service-level errors mapped to HTTP responses by the handlers in app.main."""


class ServiceError(Exception):
    """Base class for errors raised by account and order services."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BadRequestError(ServiceError):
    """A required field is missing or empty."""

    status_code = 400


class ConflictError(ServiceError):
    """The username is already taken."""

    status_code = 409


class UnauthenticatedError(ServiceError):
    """No bearer token was presented."""

    status_code = 401


class ForbiddenError(ServiceError):
    """A bearer token was presented but could not be verified."""

    status_code = 403


class InvalidCredentialsError(ServiceError):
    """Login failed. Used for both unknown usernames and wrong passwords."""

    status_code = 401
