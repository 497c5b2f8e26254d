"""
Pydantic schemas for the Fasit REST API.

Outbound models serialise with camelCase keys and drop unset fields;
inbound models ignore fields we do not use.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Enums
# =============================================================================


class ResourceType(str, Enum):
    """Resource types accepted by the registry."""

    DATA_SOURCE = "DataSource"
    MSSQL_DATA_SOURCE = "MSSQLDataSource"
    DB2_DATA_SOURCE = "DB2DataSource"
    LDAP = "LDAP"
    BASE_URL = "BaseUrl"
    CREDENTIAL = "Credential"
    CERTIFICATE = "Certificate"
    OPEN_AM = "OpenAm"
    CICS = "Cics"
    ROLE_MAPPING = "RoleMapping"
    QUEUE_MANAGER = "QueueManager"
    WEBSERVICE_ENDPOINT = "WebserviceEndpoint"
    REST_SERVICE = "RestService"
    WEBSERVICE_GATEWAY = "WebserviceGateway"
    EJB = "EJB"
    DATAPOWER = "Datapower"
    EMAIL_ADDRESS = "EmailAddress"
    SMTP_SERVER = "SMTPServer"
    QUEUE = "Queue"
    TOPIC = "Topic"
    DEPLOYMENT_MANAGER = "DeploymentManager"
    APPLICATION_PROPERTIES = "ApplicationProperties"
    MEMORY_PARAMETERS = "MemoryParameters"
    LOAD_BALANCER = "LoadBalancer"
    LOAD_BALANCER_CONFIG = "LoadBalancerConfig"
    FILE_LIBRARY = "FileLibrary"
    CHANNEL = "Channel"

    @classmethod
    def from_string(cls, value: str) -> ResourceType | None:
        """Case-insensitive lookup; None for types the registry does not know."""
        lowered = value.lower()
        for member in cls:
            if member.value.lower() == lowered:
                return member
        return None


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_api_dict(self) -> dict[str, Any]:
        """Convert to API request format, excluding None values."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# =============================================================================
# Request Schemas
# =============================================================================


class Scope(_WireModel):
    """Visibility of a registered resource."""

    environment: str
    zone: str | None = None


class ResourceProperties(_WireModel):
    """Type-specific properties of an exposed resource."""

    url: str | None = None
    endpoint_url: str | None = None
    wsdl_url: str | None = None
    description: str | None = None


class ResourcePayload(_WireModel):
    """Body of a create or update resource call."""

    type: str
    alias: str
    properties: ResourceProperties = Field(default_factory=ResourceProperties)
    scope: Scope


class ApplicationInstancePayload(_WireModel):
    """Body of the application instance registration call."""

    application: str
    environment: str
    version: str
    exposed_resources: list[int] = Field(default_factory=list)
    used_resources: list[int] = Field(default_factory=list)


# =============================================================================
# Response Schemas
# =============================================================================


def _property_text(value: Any) -> str:
    """Render a property value as the registry wrote it; null becomes empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


class FasitResource(BaseModel):
    """Resource record as returned by a scoped lookup."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | None = None
    alias: str
    resource_type: str = Field(..., alias="type")
    properties: dict[str, str] = Field(default_factory=dict)
    secrets: dict[str, dict[str, Any]] = Field(default_factory=dict)
    files: dict[str, Any] | None = None

    @field_validator("properties", mode="before")
    @classmethod
    def _stringify_properties(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {k: _property_text(v) for k, v in value.items()}
        return value

    @field_validator("secrets", mode="before")
    @classmethod
    def _default_secrets(cls, value: Any) -> Any:
        return {} if value is None else value


class CreatedResource(BaseModel):
    """Response of a create or update resource call."""

    model_config = ConfigDict(extra="ignore")

    id: int
