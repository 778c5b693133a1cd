"""Custom exception hierarchy for iecbib."""

from typing import Any


class IecbibError(Exception):
    """Base exception for all iecbib errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RequestError(IecbibError):
    """A request to the remote catalog failed."""

    pass


class CatalogUnavailable(RequestError):
    """The IEC webstore could not be reached (DNS, socket, TLS, HTTP status)."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class FetchError(IecbibError):
    """Fetching a candidate's detail record failed."""

    def __init__(
        self,
        message: str,
        codes: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.codes = codes or []


class WorkerPoolError(IecbibError):
    """One or more units of work failed inside a worker pool."""

    def __init__(
        self,
        message: str,
        failures: list[tuple[int, BaseException]],
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.failures = failures
