"""
Fasit API Client.

This client provides synchronous access to the Fasit resource registry:
scoped resource lookups, resource creation and update, environment and
application presence checks, secret and file downloads, and application
instance registration.

Usage:
    with httpx.Client(base_url=config.base_url) as http:
        client = FasitClient(config, http_client=http)

        resource = client.get_scoped_resource(
            alias="mydb",
            resource_type="DataSource",
            environment="t1",
            application="myapp",
            zone="fss",
        )

        resource_id = client.create_resource(payload)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from fasitadapter.integrations.base import (
    DecodeError,
    IntegrationClient,
    IntegrationConfig,
    IntegrationError,
)
from fasitadapter.integrations.fasit.schemas import (
    ApplicationInstancePayload,
    CreatedResource,
    FasitResource,
    ResourcePayload,
)
from fasitadapter.observability import MetricsRecorder

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

API_PREFIX = "/api/v2"


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class FasitConfig(IntegrationConfig):
    """Configuration for Fasit client."""

    # Credentials of the deploying user, sent as HTTP Basic auth
    username: str = ""
    password: str = ""

    def __post_init__(self):
        """Validate configuration."""
        if not self.base_url:
            raise ValueError("Fasit base URL is required")


# =============================================================================
# Client
# =============================================================================


class FasitClient(IntegrationClient):
    """
    Client for the Fasit REST API.

    Provides methods for:
    - Scoped resource lookup
    - Resource create and update
    - Environment and application presence checks
    - Secret and certificate file downloads
    - Application instance registration

    Lookups and file downloads are anonymous; secret downloads and every
    mutating call carry the configured credentials.
    """

    def __init__(
        self,
        config: FasitConfig,
        *,
        http_client: httpx.Client | None = None,
        metrics: MetricsRecorder | None = None,
    ):
        """
        Initialize Fasit client.

        Args:
            config: Fasit configuration with base URL and credentials
            http_client: Shared HTTP client owned by the caller
            metrics: Metrics recorder
        """
        super().__init__(config, http_client=http_client, metrics=metrics)
        self._config: FasitConfig = config

    @property
    def name(self) -> str:
        """Integration name."""
        return "fasit"

    @property
    def username(self) -> str:
        return self._config.username

    def _basic_auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self._config.username, self._config.password)

    def _decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Parse a JSON response body into ``model``."""
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            # pydantic.ValidationError subclasses ValueError, as does JSONDecodeError
            self.metrics.record_error("unmarshal_body")
            raise DecodeError(
                f"Could not decode {model.__name__}: {e}",
                self.name,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

    # =========================================================================
    # Resources
    # =========================================================================

    def get_scoped_resource(
        self,
        alias: str,
        resource_type: str,
        environment: str,
        application: str,
        zone: str | None = None,
    ) -> FasitResource:
        """
        Look up the resource visible to an application in a scope.

        Args:
            alias: Resource alias
            resource_type: Registry resource type
            environment: Environment name
            application: Application name
            zone: Network zone; omitted from the query when None

        Returns:
            The raw registry record

        Raises:
            NotFoundError: No resource matches the scope
            IntegrationError: Any other registry or transport failure
        """
        params: dict[str, Any] = {
            "alias": alias,
            "type": resource_type,
            "environment": environment,
            "application": application,
        }
        if zone is not None:
            params["zone"] = zone

        response = self._request("GET", f"{API_PREFIX}/scopedresource", params=params)
        return self._decode(response, FasitResource)

    def create_resource(self, payload: ResourcePayload) -> int:
        """
        Create a resource.

        Returns:
            Id assigned by the registry
        """
        logger.info(f"[fasit] Creating {payload.type} resource: {payload.alias}")

        response = self._request(
            "POST",
            f"{API_PREFIX}/resources/",
            json=payload.to_api_dict(),
            auth=self._basic_auth(),
        )

        created = self._decode(response, CreatedResource)
        logger.info(f"[fasit] Created resource {payload.alias}: {created.id}")
        return created.id

    def update_resource(self, resource_id: int, payload: ResourcePayload) -> int:
        """
        Replace an existing resource.

        Args:
            resource_id: Id of the resource to update
            payload: New resource definition

        Returns:
            Id reported by the registry
        """
        logger.info(f"[fasit] Updating resource {payload.alias}: {resource_id}")

        response = self._request(
            "PUT",
            f"{API_PREFIX}/resources/{resource_id}",
            json=payload.to_api_dict(),
            auth=self._basic_auth(),
        )

        return self._decode(response, CreatedResource).id

    # =========================================================================
    # Environments and applications
    # =========================================================================

    def get_environment(self, name: str) -> None:
        """Raise unless the registry knows the environment."""
        self._check_presence(f"{API_PREFIX}/environments/{name}", "environment", name)

    def get_application(self, name: str) -> None:
        """Raise unless the registry knows the application."""
        self._check_presence(f"{API_PREFIX}/applications/{name}", "application", name)

    def environment_exists(self, name: str) -> bool:
        try:
            self.get_environment(name)
            return True
        except IntegrationError as e:
            logger.warning(f"[fasit] {e}")
            return False

    def application_exists(self, name: str) -> bool:
        try:
            self.get_application(name)
            return True
        except IntegrationError as e:
            logger.warning(f"[fasit] {e}")
            return False

    def _check_presence(self, path: str, kind: str, name: str) -> None:
        response = self._request("GET", path)
        if response.status_code != 200:
            raise IntegrationError(
                f"Could not find {kind} {name} in Fasit",
                self.name,
                status_code=response.status_code,
                response_body=response.text,
            )

    # =========================================================================
    # Secrets and files
    # =========================================================================

    def fetch_secret(self, ref: str) -> str:
        """
        Download a secret value.

        Args:
            ref: Absolute secret URL from the resource record

        Returns:
            Response body, verbatim
        """
        response = self._request("GET", ref, auth=self._basic_auth())
        return response.text

    def fetch_file(self, ref: str) -> bytes:
        """Download a resource file (anonymous)."""
        response = self._request("GET", ref)
        return response.content

    # =========================================================================
    # Application instances
    # =========================================================================

    def create_application_instance(self, payload: ApplicationInstancePayload) -> None:
        """
        Register an application instance.

        Raises:
            IntegrationError: On any response other than 200, carrying the
                response body verbatim
        """
        logger.info(
            f"[fasit] Registering {payload.application}:{payload.version} "
            f"in {payload.environment}"
        )

        response = self._request(
            "POST",
            f"{API_PREFIX}/applicationinstances/",
            json=payload.to_api_dict(),
            auth=self._basic_auth(),
        )

        if response.status_code != 200:
            self.metrics.record_error("error_fasit")
            raise IntegrationError(
                f"Fasit returned: {response.text}",
                self.name,
                status_code=response.status_code,
                response_body=response.text,
            )
