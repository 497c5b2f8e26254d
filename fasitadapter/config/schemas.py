"""
Configuration Schemas for the Fasit adapter.

Security:
    The registry password uses SecretStr to prevent accidental logging
    of credentials. Access the value with `.get_secret_value()`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr

from fasitadapter.integrations.fasit.client import FasitConfig
from fasitadapter.resources.payloads import DEFAULT_WSDL_URL_TEMPLATE


class FasitSettings(BaseModel):
    """
    Registry connection settings.

    Used for type-safe settings access.
    """

    base_url: str = Field(..., min_length=1, description="Fasit base URL")
    username: str = Field("", description="Deploying user")
    password: SecretStr = Field(default=SecretStr(""), description="Deploying user's password")
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")

    # Observability
    log_requests: bool = False
    log_responses: bool = False

    wsdl_url_template: str = Field(
        DEFAULT_WSDL_URL_TEMPLATE,
        description="WSDL URL with {group_id}, {artifact_id} and {version} placeholders",
    )

    def to_client_config(self) -> FasitConfig:
        """Client configuration for these settings."""
        return FasitConfig(
            base_url=self.base_url,
            timeout=self.timeout,
            log_requests=self.log_requests,
            log_responses=self.log_responses,
            username=self.username,
            password=self.password.get_secret_value(),
        )
