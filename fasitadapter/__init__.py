"""
fasitadapter - resolve and register application resources in Fasit.

Fasit is the environment-scoped registry of application dependencies
(databases, REST endpoints, secrets, certificates, load balancer rules).
This package:

- **Resolves** the resources an application uses into a uniform model,
  downloading secrets and certificate files
- **Reconciles** the resources an application exposes, creating or updating
  them in the registry
- **Registers** the application instance with its used and exposed resources

Quick Start:
    >>> from fasitadapter import FasitService, ResourceRequest, DeploymentRequest
    >>> from fasitadapter.config import get_settings
    >>>
    >>> service = FasitService.from_settings(get_settings())
    >>> deployment = DeploymentRequest(application="app", environment="t1", version="1.0")
    >>> used = service.fetch_resources([ResourceRequest("mydb", "DataSource")], deployment)
"""

__version__ = "0.1.0"

from fasitadapter.observability import MetricsRecorder, NoOpMetrics, RegistryMetrics
from fasitadapter.resources import (
    DeploymentRequest,
    ExposedResource,
    FasitAdapterError,
    NaisResource,
    ReconciliationError,
    RegistrationError,
    ResourceRequest,
    ResourceResolutionError,
)
from fasitadapter.service import FasitService

__all__ = [
    # Version info
    "__version__",
    # Facade
    "FasitService",
    # Models
    "DeploymentRequest",
    "ExposedResource",
    "NaisResource",
    "ResourceRequest",
    # Errors
    "FasitAdapterError",
    "ReconciliationError",
    "RegistrationError",
    "ResourceResolutionError",
    # Metrics
    "MetricsRecorder",
    "NoOpMetrics",
    "RegistryMetrics",
]
