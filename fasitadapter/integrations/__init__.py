"""
Registry integrations.

Each integration follows a consistent pattern:

1. Client: Handles authentication and API communication
2. Schemas: Pydantic models for request/response validation

Directory Structure:
    integrations/
    ├── base.py           # Base client and error hierarchy
    └── fasit/            # Fasit resource registry
        ├── client.py     # FasitClient
        └── schemas.py    # Pydantic models
"""

from fasitadapter.integrations.base import (
    AuthenticationError,
    DecodeError,
    IntegrationClient,
    IntegrationConfig,
    IntegrationError,
    NotFoundError,
    TransportError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "DecodeError",
    "IntegrationClient",
    "IntegrationConfig",
    "IntegrationError",
    "NotFoundError",
    "TransportError",
    "ValidationError",
]
