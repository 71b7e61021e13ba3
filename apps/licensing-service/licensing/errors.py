"""
Domain exceptions raised by the service layer.

The API layer maps each class to an HTTP status in `licensing.api.errors`;
services never build HTTP responses themselves.
"""


class LicensingError(Exception):
    """Base class for expected, client-facing failures."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])


class ValidationError(LicensingError):
    """Input failed a field-level rule (blank name, non-positive id, ...)."""


class NotFoundError(LicensingError):
    """The requested row does not exist."""


class InvalidOperationError(LicensingError):
    """The request is well-formed but breaks a state rule."""


class AuthenticationError(LicensingError):
    """Credentials or token were missing or invalid."""


def require_positive_id(value: int, entity: str) -> None:
    if value is None or value <= 0:
        raise ValidationError(f"Invalid {entity} ID. Must be greater than 0.")


def require_text(value: str | None, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()


def require_max_length(value: str | None, limit: int, field: str) -> str | None:
    if value is not None and len(value) > limit:
        raise ValidationError(f"{field} must be at most {limit} characters")
    return value
