"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class ParcelError(Exception):
    """Base exception for parcel-client."""

    exit_code: int = 1


class GatewayConnectionError(ParcelError):
    """Cannot reach the gateway (connect failure, timeout, bad URL)."""

    exit_code = 2


class RequestError(ParcelError):
    """The gateway answered with a non-2xx status."""

    exit_code = 3

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Gateway returned {status_code}: {detail}")


class AuthenticationError(RequestError):
    """Authentication or authorization failed (401/403)."""

    exit_code = 4


class NotFoundError(RequestError):
    """Resource not found (404)."""

    exit_code = 5


class ConflictError(RequestError):
    """Resource conflict (409)."""

    exit_code = 6


class ValidationError(RequestError):
    """The gateway rejected the request body or query (400/422)."""

    exit_code = 7


class ContractViolationError(ParcelError):
    """A success-shaped response that does not match the REST contract.

    Raised for an unexpected 2xx status (e.g. ``200`` with a body where
    ``204 No Content`` is mandated) or an unparsable JSON body.
    """

    exit_code = 8

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(ParcelError):
    """Missing or invalid client configuration."""

    exit_code = 9


_STATUS_ERRORS: dict[int, type[RequestError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
}


def error_for_status(status_code: int, detail: str = "") -> RequestError:
    """Build the most specific RequestError for an HTTP status."""
    return _STATUS_ERRORS.get(status_code, RequestError)(status_code, detail)


def error_handler(func: F) -> F:
    """Decorator that catches ParcelError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ParcelError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
