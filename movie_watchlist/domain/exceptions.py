from typing import Optional


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class TransportError(DomainError):
    """The backend could not be reached; no HTTP response was received."""


class RequestError(DomainError):
    """The backend answered with a non-2xx status."""

    default_message: Optional[str] = None

    def __init__(self, detail: str, status_code: int, reason_phrase: str = ""):
        self.detail = detail
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(self.default_message or detail)

    @property
    def message(self) -> str:
        return str(self)


class NotFoundError(RequestError):
    default_message = "Resource not found"


class UnauthorizedError(RequestError):
    default_message = "Unauthorized - Please log in"


class ForbiddenError(RequestError):
    default_message = "Forbidden - You do not have permission"


class ServerError(RequestError):
    default_message = "Server error - Please try again later"
