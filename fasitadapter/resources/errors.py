"""
Errors raised by resource resolution and reconciliation.

``AppError`` is internal: it keeps the status of a failed lookup so that
"not found" can be told apart from "registry broken". Callers of the
resolver, reconciler and registrar only ever see ``FasitAdapterError``
subclasses, chained to the underlying cause.
"""

from __future__ import annotations

NOT_FOUND = 404


class FasitAdapterError(Exception):
    """Base exception for failures surfaced to the orchestrator."""


class ResourceResolutionError(FasitAdapterError):
    """A used resource could not be resolved."""


class ReconciliationError(FasitAdapterError):
    """An exposed resource could not be created or updated."""


class RegistrationError(FasitAdapterError):
    """The application instance could not be registered."""


class MappingError(Exception):
    """A registry record could not be mapped to a NaisResource."""


class AppError(Exception):
    """Failure of a single lookup, tagged with an HTTP-like status."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        *,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    @property
    def not_found(self) -> bool:
        return self.status_code == NOT_FOUND

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} ({self.cause})"
        return self.message
