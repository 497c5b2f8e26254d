"""
Base classes for registry integrations.

This module defines the HTTP seam shared by registry clients: the error
hierarchy raised by every call, the client configuration, and a client base
class that executes requests against an injected ``httpx.Client``.

Design Principles:
1. Synchronous: every call blocks until the registry answers
2. Injected transport: the orchestrator owns the HTTP connection pool
3. Observable: logging and metrics hooks on every request
4. No retries: a failure propagates to the caller, which owns the pass

Status Mapping:
    - 2xx: success
    - 401/403: AuthenticationError
    - 404: NotFoundError
    - 400/422: ValidationError
    - anything else: IntegrationError (carries status and body)
    - connection/timeout failures: TransportError
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from fasitadapter.observability import MetricsRecorder, NoOpMetrics

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class IntegrationError(Exception):
    """Base exception for integration errors."""

    def __init__(
        self,
        message: str,
        integration: str,
        *,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.integration = integration
        self.status_code = status_code
        self.response_body = response_body

    @property
    def message(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        parts = [f"[{self.integration}] {self.args[0]}"]
        if self.status_code:
            parts.append(f"(status={self.status_code})")
        return " ".join(parts)


class TransportError(IntegrationError):
    """Raised when the registry could not be reached (connect, timeout, read)."""


class AuthenticationError(IntegrationError):
    """Raised when authentication fails (401/403)."""


class NotFoundError(IntegrationError):
    """Raised when a resource is not found (404)."""


class ValidationError(IntegrationError):
    """Raised when request validation fails (400/422)."""


class DecodeError(IntegrationError):
    """Raised when a response body is not the JSON shape we expect."""


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class IntegrationConfig:
    """Configuration for an integration client."""

    # Connection
    base_url: str = ""
    timeout: float = 30.0

    # Observability
    log_requests: bool = False
    log_responses: bool = False


# =============================================================================
# Base Client
# =============================================================================


class IntegrationClient(ABC):
    """
    Abstract base class for integration clients.

    Provides common functionality:
    - HTTP client management (injected or lazily owned)
    - Error handling and mapping
    - Request/response logging
    - Request metrics

    Subclasses must implement:
    - name: Integration identifier
    """

    def __init__(
        self,
        config: IntegrationConfig,
        *,
        http_client: httpx.Client | None = None,
        metrics: MetricsRecorder | None = None,
    ):
        """
        Initialize the integration client.

        Args:
            config: Integration configuration
            http_client: Shared HTTP client owned by the caller. When omitted
                a client is created on first use and closed by ``close()``.
            metrics: Metrics recorder; defaults to a no-op recorder
        """
        self.config = config
        self.metrics: MetricsRecorder = metrics or NoOpMetrics()
        self._client = http_client
        self._owns_client = http_client is None

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this integration."""
        ...

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers={"Accept": "application/json"},
            )
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def _absolute_url(self, url: str) -> httpx.URL:
        """Resolve a path against the configured base URL; absolute URLs pass through."""
        target = httpx.URL(url)
        if not target.is_relative_url:
            return target
        return httpx.URL(f"{self.config.base_url.rstrip('/')}/{url.lstrip('/')}")

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        auth: httpx.Auth | None = None,
    ) -> httpx.Response:
        """
        Execute a single HTTP request and map failures to IntegrationError.

        Args:
            method: HTTP method (GET, POST, PUT)
            url: Path relative to config.base_url, or an absolute URL
            params: Query parameters
            json: JSON body
            auth: Per-call authentication

        Returns:
            httpx.Response with a 2xx status

        Raises:
            IntegrationError: On transport failure or non-2xx status
        """
        client = self._get_client()
        self.metrics.record_request()

        if self.config.log_requests:
            logger.debug(f"[{self.name}] {method} {url} params={params} body={json}")

        try:
            response = client.request(
                method=method,
                url=self._absolute_url(url),
                params=params,
                json=json,
                auth=auth,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError) as e:
            self.metrics.record_error("create_request")
            raise TransportError(
                f"Could not create request to {self.name}: {e}",
                self.name,
            ) from e
        except httpx.DecodingError as e:
            self.metrics.record_error("read_body")
            raise DecodeError(
                f"Could not read response body from {self.name}: {e}",
                self.name,
            ) from e
        except httpx.HTTPError as e:
            self.metrics.record_error("contact_fasit")
            raise TransportError(
                f"Error contacting {self.name}: {e}",
                self.name,
            ) from e

        self.metrics.record_http(response.status_code, method)

        if self.config.log_responses:
            logger.debug(
                f"[{self.name}] Response: status={response.status_code} "
                f"body={response.text[:500] if response.text else 'empty'}"
            )

        self._check_response(response)
        return response

    def _check_response(self, response: httpx.Response) -> None:
        """
        Check response for errors and raise appropriate exceptions.

        Raises:
            AuthenticationError: For 401/403
            NotFoundError: For 404
            ValidationError: For 400/422
            IntegrationError: For other errors
        """
        if response.is_success:
            return

        self.metrics.record_error("error_fasit")
        status = response.status_code
        body = response.text

        if status == 401 or status == 403:
            raise AuthenticationError(
                f"Authentication failed: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        if status == 404:
            raise NotFoundError(
                f"Resource not found: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        if status == 400 or status == 422:
            raise ValidationError(
                f"Validation error: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        raise IntegrationError(
            f"Request failed: {body}",
            self.name,
            status_code=status,
            response_body=body,
        )

    def __enter__(self) -> "IntegrationClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
