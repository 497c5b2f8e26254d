"""Application instance registration."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fasitadapter.integrations.base import IntegrationError
from fasitadapter.integrations.fasit.client import FasitClient
from fasitadapter.resources.errors import RegistrationError
from fasitadapter.resources.models import DeploymentRequest
from fasitadapter.resources.payloads import build_application_instance_payload

logger = logging.getLogger(__name__)


class InstanceRegistrar:
    """Posts the application instance that ties used and exposed resources together."""

    def __init__(self, client: FasitClient):
        self._client = client

    def register(
        self,
        deployment: DeploymentRequest,
        exposed_resource_ids: Sequence[int],
        used_resource_ids: Sequence[int],
    ) -> None:
        """
        Register the deployed instance.

        Raises:
            RegistrationError: On any response other than 200; the message
                carries the registry's response body
        """
        payload = build_application_instance_payload(
            deployment, exposed_resource_ids, used_resource_ids
        )

        try:
            self._client.create_application_instance(payload)
        except IntegrationError as e:
            body = e.response_body if e.response_body is not None else e.message
            status = f" ({e.status_code})" if e.status_code is not None else ""
            raise RegistrationError(f"Fasit returned: {body}{status}") from e

        logger.info(
            f"[fasit] Registered {deployment.application}:{deployment.version} "
            f"in {deployment.environment}"
        )
