"""Domain errors raised by services and mapped to HTTP responses."""


class DietTrackerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConflictError(DietTrackerError):
    """A unique value is already taken."""

    status_code = 403


class NotFoundError(DietTrackerError):
    """The requested entity does not exist."""

    status_code = 404
