"""Custom exception classes for consistent error handling across the application."""

from dataclasses import dataclass, field

# Shared type alias for error detail values
type ErrorDetails = dict[
    str, str | int | float | bool | list[str] | list[dict[str, str | int]] | None
]


@dataclass
class AppError(Exception):
    """Base exception for all application errors."""

    code: str = "app_error"
    message: str = "An application error occurred"
    details: ErrorDetails = field(default_factory=dict)

    def __str__(self) -> str:  # pyright: ignore[reportImplicitOverride]
        return self.message


@dataclass
class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    code: str = "not_found"
    message: str = "Resource not found"


@dataclass
class ValidationError(AppError):
    """Raised when domain validation fails."""

    code: str = "validation_error"
    message: str = "Validation failed"


@dataclass
class InvalidParameterError(ValidationError):
    """Raised for an out-of-range or non-integer year, round or season."""

    code: str = "invalid_parameter"
    message: str = "Invalid parameter"


@dataclass
class InvalidInputError(ValidationError):
    """Raised when the season aggregator is called with malformed input."""

    code: str = "invalid_input"
    message: str = "Invalid input"


@dataclass
class ConflictError(AppError):
    """Raised when an operation conflicts with existing state."""

    code: str = "conflict"
    message: str = "Resource conflict"


@dataclass
class FetchFailure(AppError):
    """Raised when a round page cannot be fetched (network error or non-2xx)."""

    code: str = "fetch_failure"
    message: str = "Failed to fetch page"
