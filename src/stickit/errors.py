"""Exceptions raised by the service layer and rendered by the app."""


class StickItError(Exception):
    """Base error carrying the HTTP status used to render it."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(StickItError):
    status_code = 400


class DuplicateError(InvalidInputError):
    pass


class NotFoundError(StickItError):
    status_code = 400


class AuthenticationError(StickItError):
    status_code = 401


class PermissionDeniedError(StickItError):
    status_code = 403


class DatabaseError(StickItError):
    status_code = 500
