"""
Resolution of used resources.

Every requested dependency must exist: a missing resource is as fatal as a
broken registry, and the first failure discards the whole batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from fasitadapter.integrations.base import (
    DecodeError,
    IntegrationError,
    NotFoundError,
    TransportError,
)
from fasitadapter.integrations.fasit.client import FasitClient
from fasitadapter.observability import MetricsRecorder, NoOpMetrics
from fasitadapter.resources.errors import (
    NOT_FOUND,
    AppError,
    MappingError,
    ResourceResolutionError,
)
from fasitadapter.resources.mapper import ResourceMapper
from fasitadapter.resources.models import NaisResource, ResourceRequest

logger = logging.getLogger(__name__)


def to_app_error(error: IntegrationError) -> AppError:
    """Classify a client failure of a scoped lookup."""
    if isinstance(error, NotFoundError):
        return AppError("Resource not found in Fasit", NOT_FOUND, cause=error)
    if isinstance(error, TransportError):
        return AppError("Error contacting Fasit", cause=error)
    if isinstance(error, DecodeError):
        return AppError("Could not unmarshal Fasit response", cause=error)
    return AppError(
        "Unexpected error returned from Fasit",
        error.status_code or 500,
        cause=error,
    )


class ResourceResolver:
    """Resolves resource requests to NaisResource values."""

    def __init__(
        self,
        client: FasitClient,
        mapper: ResourceMapper | None = None,
        metrics: MetricsRecorder | None = None,
    ):
        self._client = client
        self.metrics: MetricsRecorder = metrics or NoOpMetrics()
        self._mapper = mapper or ResourceMapper(client, self.metrics)

    def get_resource(
        self,
        request: ResourceRequest,
        environment: str,
        application: str,
        zone: str | None,
    ) -> NaisResource:
        """
        Look up and map a single resource.

        Raises:
            AppError: Tagged 404 when the registry has no such resource
        """
        try:
            record = self._client.get_scoped_resource(
                alias=request.alias,
                resource_type=request.resource_type,
                environment=environment,
                application=application,
                zone=zone,
            )
        except IntegrationError as e:
            raise to_app_error(e) from e

        try:
            return self._mapper.map(record)
        except MappingError as e:
            self.metrics.record_error("map_resource")
            raise AppError("Could not map response to Nais resource", cause=e) from e

    def resolve(
        self,
        requests: Iterable[ResourceRequest],
        environment: str,
        application: str,
        zone: str | None,
    ) -> list[NaisResource]:
        """
        Resolve every request, in order.

        Raises:
            ResourceResolutionError: On the first failing request; resources
                resolved before it are discarded
        """
        resources: list[NaisResource] = []
        for request in requests:
            try:
                resources.append(
                    self.get_resource(request, environment, application, zone)
                )
            except AppError as e:
                logger.error(f"[fasit] Failed to get resource {request.alias}: {e}")
                raise ResourceResolutionError(
                    f"Failed to get resource {request.alias}: {e}"
                ) from e

        logger.info(f"[fasit] Resolved {len(resources)} resources for {application}")
        return resources


def get_resource_ids(resources: Sequence[NaisResource]) -> list[int]:
    """Registry ids of resolved resources, in order; unidentified ones are skipped."""
    return [resource.id for resource in resources if resource.id is not None]
