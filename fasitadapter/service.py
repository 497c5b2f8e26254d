"""
Fasit service facade.

Wires the client, resolver, reconciler and registrar for one deployment and
exposes the calls an orchestrator makes:

    with httpx.Client(base_url=settings.base_url) as http:
        service = FasitService.from_settings(settings, http_client=http)

        if not service.environment_exists(deployment.environment):
            ...
        used = service.fetch_resources(requests, deployment)
        # ... deploy ...
        service.update_fasit(deployment, used, exposed, hostname)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from fasitadapter.config import FasitSettings
from fasitadapter.integrations.fasit.client import FasitClient
from fasitadapter.observability import MetricsRecorder, NoOpMetrics
from fasitadapter.resources.mapper import ResourceMapper
from fasitadapter.resources.models import (
    DeploymentRequest,
    ExposedResource,
    NaisResource,
    ResourceRequest,
)
from fasitadapter.resources.payloads import DEFAULT_WSDL_URL_TEMPLATE
from fasitadapter.resources.reconciler import ResourceReconciler
from fasitadapter.resources.registrar import InstanceRegistrar
from fasitadapter.resources.resolver import ResourceResolver, get_resource_ids

logger = logging.getLogger(__name__)


class FasitService:
    """Entry point for resolving and registering one deployment's resources."""

    def __init__(
        self,
        client: FasitClient,
        *,
        metrics: MetricsRecorder | None = None,
        wsdl_url_template: str = DEFAULT_WSDL_URL_TEMPLATE,
    ):
        self.client = client
        self.metrics: MetricsRecorder = metrics or NoOpMetrics()
        self.resolver = ResourceResolver(
            client, ResourceMapper(client, self.metrics), self.metrics
        )
        self.reconciler = ResourceReconciler(
            client, self.metrics, wsdl_url_template=wsdl_url_template
        )
        self.registrar = InstanceRegistrar(client)

    @classmethod
    def from_settings(
        cls,
        settings: FasitSettings,
        *,
        http_client: httpx.Client | None = None,
        metrics: MetricsRecorder | None = None,
    ) -> "FasitService":
        client = FasitClient(
            settings.to_client_config(),
            http_client=http_client,
            metrics=metrics,
        )
        return cls(
            client,
            metrics=metrics,
            wsdl_url_template=settings.wsdl_url_template,
        )

    def environment_exists(self, environment: str) -> bool:
        return self.client.environment_exists(environment)

    def application_exists(self, application: str) -> bool:
        return self.client.application_exists(application)

    def fetch_resources(
        self,
        requests: Sequence[ResourceRequest],
        deployment: DeploymentRequest,
    ) -> list[NaisResource]:
        """Resolve the deployment's used resources."""
        return self.resolver.resolve(
            requests,
            deployment.environment,
            deployment.application,
            deployment.zone,
        )

    def update_fasit(
        self,
        deployment: DeploymentRequest,
        used_resources: Sequence[NaisResource],
        exposed_resources: Sequence[ExposedResource],
        hostname: str,
    ) -> None:
        """
        Reconcile exposed resources and register the application instance.

        Raises:
            ReconciliationError: If an exposed resource could not be written
            RegistrationError: If the instance could not be registered
        """
        used_resource_ids = get_resource_ids(used_resources)

        exposed_resource_ids = self.reconciler.reconcile(
            exposed_resources,
            hostname,
            deployment.environment,
            deployment.application,
            deployment.zone,
        )

        logger.info(f"[fasit] exposed: {exposed_resource_ids} used: {used_resource_ids}")

        self.registrar.register(deployment, exposed_resource_ids, used_resource_ids)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "FasitService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
