"""
Resource resolution and reconciliation.

- ResourceResolver: used resources -> NaisResource values (fail fast)
- ResourceReconciler: exposed resources -> created/updated registry ids
- InstanceRegistrar: registers the application instance
- payloads: wire payload builders
"""

from fasitadapter.resources.errors import (
    AppError,
    FasitAdapterError,
    MappingError,
    ReconciliationError,
    RegistrationError,
    ResourceResolutionError,
)
from fasitadapter.resources.mapper import ResourceMapper
from fasitadapter.resources.models import (
    DeploymentRequest,
    ExposedResource,
    NaisResource,
    ResourceRequest,
)
from fasitadapter.resources.payloads import (
    build_application_instance_payload,
    build_resource_payload,
    generate_scope,
)
from fasitadapter.resources.reconciler import (
    Found,
    LookupFailed,
    LookupOutcome,
    NotFound,
    ResourceReconciler,
)
from fasitadapter.resources.registrar import InstanceRegistrar
from fasitadapter.resources.resolver import ResourceResolver, get_resource_ids

__all__ = [
    # Models
    "DeploymentRequest",
    "ExposedResource",
    "NaisResource",
    "ResourceRequest",
    # Components
    "InstanceRegistrar",
    "ResourceMapper",
    "ResourceReconciler",
    "ResourceResolver",
    "get_resource_ids",
    # Lookup outcomes
    "Found",
    "LookupFailed",
    "LookupOutcome",
    "NotFound",
    # Payloads
    "build_application_instance_payload",
    "build_resource_payload",
    "generate_scope",
    # Errors
    "AppError",
    "FasitAdapterError",
    "MappingError",
    "ReconciliationError",
    "RegistrationError",
    "ResourceResolutionError",
]
