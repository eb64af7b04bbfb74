"""Domain error codes for the museum module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MUSEUM_NOT_FOUND = "MUSEUM_NOT_FOUND"
    PATRON_NOT_FOUND = "PATRON_NOT_FOUND"
    INVALID_MUSEUM_ID = "INVALID_MUSEUM_ID"
    INVALID_PATRON_ID = "INVALID_PATRON_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MuseumNotFoundError(DomainError):
    """Raised when a museum is not found."""

    def __init__(self, museum_id: str) -> None:
        super().__init__(
            code=ErrorCode.MUSEUM_NOT_FOUND,
            message="Museum not found",
        )
        self.museum_id = museum_id


class PatronNotFoundError(DomainError):
    """Raised when a patron has not been admitted to the museum."""

    def __init__(self, patron_id: str) -> None:
        super().__init__(
            code=ErrorCode.PATRON_NOT_FOUND,
            message="Patron not found in museum",
        )
        self.patron_id = patron_id


class InvalidMuseumIdError(DomainError):
    """Raised when a museum ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MUSEUM_ID,
            message="Invalid museum ID format",
        )


class InvalidPatronIdError(DomainError):
    """Raised when a patron ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PATRON_ID,
            message="Invalid patron ID format",
        )
