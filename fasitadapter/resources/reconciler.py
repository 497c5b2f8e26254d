"""
Reconciliation of exposed resources.

For each exposed resource, in declaration order, a scoped lookup decides
what happens:

    Found(id)     -> update that resource
    NotFound      -> create it (no follow-up update)
    LookupFailed  -> abort the batch

Unlike the resolver, a missing resource here is a signal to create it, not a
failure. The lookup only needs the registry id, so the record is not mapped
and no secrets or files are fetched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fasitadapter.integrations.base import IntegrationError, NotFoundError
from fasitadapter.integrations.fasit.client import FasitClient
from fasitadapter.observability import MetricsRecorder, NoOpMetrics
from fasitadapter.resources.errors import AppError, ReconciliationError
from fasitadapter.resources.models import ExposedResource
from fasitadapter.resources.payloads import (
    DEFAULT_WSDL_URL_TEMPLATE,
    build_resource_payload,
)
from fasitadapter.resources.resolver import to_app_error

logger = logging.getLogger(__name__)


# =============================================================================
# Lookup outcome
# =============================================================================


@dataclass(frozen=True, slots=True)
class Found:
    resource_id: int


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


@dataclass(frozen=True, slots=True)
class LookupFailed:
    error: AppError


LookupOutcome = Found | NotFound | LookupFailed


# =============================================================================
# Reconciler
# =============================================================================


class ResourceReconciler:
    """Creates or updates exposed resources in Fasit."""

    def __init__(
        self,
        client: FasitClient,
        metrics: MetricsRecorder | None = None,
        *,
        wsdl_url_template: str = DEFAULT_WSDL_URL_TEMPLATE,
    ):
        self._client = client
        self.metrics: MetricsRecorder = metrics or NoOpMetrics()
        self._wsdl_url_template = wsdl_url_template

    def lookup(
        self,
        resource: ExposedResource,
        environment: str,
        application: str,
        zone: str | None,
    ) -> LookupOutcome:
        """Classify the registry state of an exposed resource."""
        try:
            record = self._client.get_scoped_resource(
                alias=resource.alias,
                resource_type=resource.resource_type,
                environment=environment,
                application=application,
                zone=zone,
            )
        except NotFoundError:
            return NotFound()
        except IntegrationError as e:
            return LookupFailed(to_app_error(e))

        if record.id is None:
            return LookupFailed(AppError(f"Fasit returned {resource.alias} without an id"))
        return Found(record.id)

    def reconcile(
        self,
        resources: Iterable[ExposedResource],
        hostname: str,
        environment: str,
        application: str,
        zone: str | None,
    ) -> list[int]:
        """
        Create or update every exposed resource.

        Returns:
            Registry ids, in the order of ``resources``

        Raises:
            ReconciliationError: On the first failure; later resources are
                not attempted
        """
        exposed_resource_ids: list[int] = []

        for resource in resources:
            outcome = self.lookup(resource, environment, application, zone)

            if isinstance(outcome, LookupFailed):
                raise ReconciliationError(
                    f"Encountered a problem while contacting Fasit for "
                    f"{resource.alias}: {outcome.error}"
                ) from outcome.error

            payload = build_resource_payload(
                resource,
                environment,
                zone,
                hostname,
                wsdl_url_template=self._wsdl_url_template,
            )

            try:
                if isinstance(outcome, Found):
                    resource_id = self._client.update_resource(outcome.resource_id, payload)
                else:
                    resource_id = self._client.create_resource(payload)
            except IntegrationError as e:
                action = "updating" if isinstance(outcome, Found) else "creating"
                raise ReconciliationError(
                    f"Failed {action} resource: {resource.alias} of type "
                    f"{resource.resource_type} with path {resource.path}. ({e})"
                ) from e

            logger.info(
                f"[fasit] {'Updated' if isinstance(outcome, Found) else 'Created'} "
                f"{resource.resource_type} {resource.alias} (id={resource_id})"
            )
            exposed_resource_ids.append(resource_id)

        return exposed_resource_ids
