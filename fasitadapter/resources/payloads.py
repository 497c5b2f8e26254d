"""
Outbound payload construction.

Pure functions from domain models to the wire models posted to Fasit.
"""

from __future__ import annotations

from collections.abc import Sequence

from fasitadapter.integrations.fasit.schemas import (
    ApplicationInstancePayload,
    ResourcePayload,
    ResourceProperties,
    ResourceType,
    Scope,
)
from fasitadapter.resources.models import DeploymentRequest, ExposedResource

DEFAULT_WSDL_URL_TEMPLATE = (
    "http://maven.adeo.no/nexus/service/local/artifact/maven/redirect"
    "?r=m2internal&g={group_id}&a={artifact_id}&v={version}&e=zip"
)


def generate_scope(resource: ExposedResource, environment: str, zone: str | None) -> Scope:
    """Scope of an exposed resource; zone is left out for all-zones resources."""
    if resource.all_zones:
        return Scope(environment=environment)
    return Scope(environment=environment, zone=zone)


def service_url(hostname: str, path: str) -> str:
    if path and not path.startswith("/"):
        path = f"/{path}"
    return f"https://{hostname}{path}"


def build_resource_payload(
    resource: ExposedResource,
    environment: str,
    zone: str | None,
    hostname: str,
    *,
    wsdl_url_template: str = DEFAULT_WSDL_URL_TEMPLATE,
) -> ResourcePayload:
    """
    Build the create/update body for an exposed resource.

    RestService and WebserviceEndpoint get type-specific properties. Any other
    type yields empty properties.
    """
    resource_type = ResourceType.from_string(resource.resource_type)

    if resource_type is ResourceType.REST_SERVICE:
        properties = ResourceProperties(
            url=service_url(hostname, resource.path),
            description=resource.description,
        )
    elif resource_type is ResourceType.WEBSERVICE_ENDPOINT:
        properties = ResourceProperties(
            endpoint_url=service_url(hostname, resource.path),
            wsdl_url=wsdl_url_template.format(
                group_id=resource.wsdl_group_id,
                artifact_id=resource.wsdl_artifact_id,
                version=resource.wsdl_version,
            ),
            description=resource.description,
        )
    else:
        properties = ResourceProperties()

    return ResourcePayload(
        type=resource_type.value if resource_type else resource.resource_type,
        alias=resource.alias,
        properties=properties,
        scope=generate_scope(resource, environment, zone),
    )


def build_application_instance_payload(
    deployment: DeploymentRequest,
    exposed_resource_ids: Sequence[int],
    used_resource_ids: Sequence[int],
) -> ApplicationInstancePayload:
    return ApplicationInstancePayload(
        application=deployment.application,
        environment=deployment.environment,
        version=deployment.version,
        exposed_resources=list(exposed_resource_ids),
        used_resources=list(used_resource_ids),
    )
