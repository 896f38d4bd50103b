"""Core exception classes for the application."""

import pydantic


class AppError(Exception):
    """User-facing failure carrying an HTTP status code."""

    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.message = message
        self.status = status


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message: str):
        super().__init__(message, 404)


class ValidationError(Exception):
    """Raised by the data store when a record fails schema rules."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def describe_validation_errors(exc: pydantic.ValidationError) -> str:
    """Flatten pydantic errors into ``field: msg, field: msg``."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])
    return ", ".join(problems)
