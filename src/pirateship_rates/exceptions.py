"""Error kinds raised by the rates client and their HTTP mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pydantic
from litestar import Request, Response

if TYPE_CHECKING:
    from pirateship_rates.schemas import RateError


def _inches(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class PirateShipError(Exception):
    """Base class for every error raised by the rates client."""


class ValidationError(PirateShipError):
    """A package dimension is below the minimum for its package type."""

    def __init__(
        self,
        package_type: str,
        field: str,
        label: str,
        minimum: float,
        actual: float,
    ) -> None:
        self.package_type = package_type
        self.field = field
        self.label = label
        self.minimum = minimum
        self.actual = actual
        super().__init__(
            f"{package_type} {label} ({field}) must be at least "
            f"{_inches(minimum)} inches, got {_inches(actual)}"
        )


class TransportError(PirateShipError):
    """The HTTP exchange failed or returned a non-success status.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, status_code: int | None, message: str = "") -> None:
        self.status_code = status_code
        if not message:
            message = f"PirateShip API returned {status_code}"
        super().__init__(message)


class ApplicationError(PirateShipError):
    """The service answered at the HTTP layer but reported a failure."""

    def __init__(
        self, message: str, errors: list[RateError] | None = None
    ) -> None:
        self.message = message
        self.errors = list(errors or [])
        super().__init__(message)


def _error_response(
    request: Request, detail: str, code: str, status_code: int
) -> Response:
    return Response(
        content={"detail": detail, "code": code},
        status_code=status_code,
    )


def handle_validation_error(
    request: Request, exc: ValidationError
) -> Response:
    """Map ValidationError to 400."""
    return _error_response(request, str(exc), "invalid_dimensions", 400)


def handle_invalid_options(
    request: Request, exc: pydantic.ValidationError
) -> Response:
    """Map malformed shipping options to 400."""
    return _error_response(request, str(exc), "invalid_options", 400)


def handle_transport_error(
    request: Request, exc: TransportError
) -> Response:
    """Map TransportError to 502."""
    return _error_response(request, str(exc), "transport_error", 502)


def handle_application_error(
    request: Request, exc: ApplicationError
) -> Response:
    """Map ApplicationError to 422."""
    return _error_response(request, str(exc), "application_error", 422)


def handle_pirateship_error(
    request: Request, exc: PirateShipError
) -> Response:
    """Map generic PirateShipError to 400."""
    return _error_response(request, str(exc), "pirateship_error", 400)


EXCEPTION_HANDLERS = {
    ValidationError: handle_validation_error,
    pydantic.ValidationError: handle_invalid_options,
    TransportError: handle_transport_error,
    ApplicationError: handle_application_error,
    PirateShipError: handle_pirateship_error,
}
