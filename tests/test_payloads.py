"""
Tests for outbound payload builders.
"""

import pytest

from fasitadapter.integrations.fasit import ResourceType, Scope
from fasitadapter.resources import (
    DeploymentRequest,
    ExposedResource,
    build_application_instance_payload,
    build_resource_payload,
    generate_scope,
)
from fasitadapter.resources.payloads import DEFAULT_WSDL_URL_TEMPLATE, service_url

# =============================================================================
# Scope
# =============================================================================


class TestGenerateScope:
    """Tests for scope generation."""

    def test_zone_is_kept(self):
        resource = ExposedResource(alias="a", resource_type="RestService")
        assert generate_scope(resource, "t1", "fss") == Scope(environment="t1", zone="fss")

    def test_all_zones_drops_zone(self):
        resource = ExposedResource(alias="a", resource_type="RestService", all_zones=True)

        scope = generate_scope(resource, "t1", "fss")

        assert scope.zone is None
        assert scope.to_api_dict() == {"environment": "t1"}


# =============================================================================
# Resource payloads
# =============================================================================


class TestBuildResourcePayload:
    """Tests for build_resource_payload."""

    def test_rest_service(self):
        resource = ExposedResource(alias="a", resource_type="RestService", path="/p", description="d")

        payload = build_resource_payload(resource, "t1", "fss", "h")

        assert payload.type == "RestService"
        assert payload.alias == "a"
        assert payload.properties.url == "https://h/p"
        assert payload.properties.description == "d"
        assert payload.properties.endpoint_url is None
        assert payload.scope == Scope(environment="t1", zone="fss")

    def test_rest_service_type_is_canonicalised(self):
        resource = ExposedResource(alias="myservice", resource_type="restservice", path="/api")

        payload = build_resource_payload(resource, "t1", "fss", "app.local")

        assert payload.type == "RestService"
        assert payload.properties.url == "https://app.local/api"

    def test_webservice_endpoint(self):
        resource = ExposedResource(
            alias="ws",
            resource_type="WebserviceEndpoint",
            path="/ws/Service",
            description="soap",
            wsdl_group_id="no.nav.tjenester",
            wsdl_artifact_id="service-tjenestespesifikasjon",
            wsdl_version="1.2.3",
        )

        payload = build_resource_payload(resource, "t1", "fss", "app.local")

        assert payload.properties.endpoint_url == "https://app.local/ws/Service"
        assert payload.properties.wsdl_url == DEFAULT_WSDL_URL_TEMPLATE.format(
            group_id="no.nav.tjenester",
            artifact_id="service-tjenestespesifikasjon",
            version="1.2.3",
        )
        assert "g=no.nav.tjenester&a=service-tjenestespesifikasjon&v=1.2.3" in payload.properties.wsdl_url
        assert payload.properties.description == "soap"
        assert payload.properties.url is None

    def test_unsupported_type_has_empty_properties(self):
        resource = ExposedResource(alias="q", resource_type="Queue", path="/q", description="d")

        payload = build_resource_payload(resource, "t1", "fss", "h")

        assert payload.type == "Queue"
        assert payload.to_api_dict()["properties"] == {}

    def test_unknown_type_is_passed_through(self):
        resource = ExposedResource(alias="x", resource_type="SomethingNew")

        payload = build_resource_payload(resource, "t1", None, "h")

        assert payload.type == "SomethingNew"
        assert payload.to_api_dict() == {
            "type": "SomethingNew",
            "alias": "x",
            "properties": {},
            "scope": {"environment": "t1"},
        }

    def test_all_zones_ignores_zone_argument(self):
        resource = ExposedResource(alias="a", resource_type="RestService", path="/p", all_zones=True)

        payload = build_resource_payload(resource, "t1", "sbs", "h")

        assert payload.scope.zone is None


class TestServiceUrl:
    """Tests for service_url."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/api", "https://h/api"),
            ("api", "https://h/api"),
            ("", "https://h"),
        ],
    )
    def test_joins_hostname_and_path(self, path, expected):
        assert service_url("h", path) == expected


class TestResourceType:
    """Tests for ResourceType.from_string."""

    def test_case_insensitive(self):
        assert ResourceType.from_string("webserviceendpoint") is ResourceType.WEBSERVICE_ENDPOINT
        assert ResourceType.from_string("LDAP") is ResourceType.LDAP

    def test_unknown(self):
        assert ResourceType.from_string("nope") is None


# =============================================================================
# Application instance payload
# =============================================================================


class TestBuildApplicationInstancePayload:
    """Tests for build_application_instance_payload."""

    def test_copies_deployment_and_ids(self):
        deployment = DeploymentRequest(application="appName", environment="t1000", version="2.1")

        payload = build_application_instance_payload(deployment, (1, 2, 3), [4, 5, 6])

        assert payload.application == "appName"
        assert payload.environment == "t1000"
        assert payload.version == "2.1"
        assert payload.exposed_resources == [1, 2, 3]
        assert payload.used_resources == [4, 5, 6]
