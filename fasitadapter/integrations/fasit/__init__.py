"""
Fasit Integration.

Fasit is the environment-scoped registry of application resources
(datasources, REST endpoints, credentials, certificates, load balancer
rules) and of the application instances that use and expose them.

Usage:
    from fasitadapter.integrations.fasit import FasitClient, FasitConfig

    client = FasitClient(FasitConfig(
        base_url="https://fasit.example.com",
        username="deployer",
        password="...",
    ))

    record = client.get_scoped_resource(
        alias="mydb",
        resource_type="DataSource",
        environment="t1",
        application="myapp",
        zone="fss",
    )
"""

from fasitadapter.integrations.fasit.client import FasitClient, FasitConfig
from fasitadapter.integrations.fasit.schemas import (
    ApplicationInstancePayload,
    CreatedResource,
    FasitResource,
    ResourcePayload,
    ResourceProperties,
    ResourceType,
    Scope,
)

__all__ = [
    "ApplicationInstancePayload",
    "CreatedResource",
    "FasitClient",
    "FasitConfig",
    "FasitResource",
    "ResourcePayload",
    "ResourceProperties",
    "ResourceType",
    "Scope",
]
