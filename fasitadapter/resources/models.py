"""
Domain models for resource resolution and reconciliation.

Inputs (requests, exposed resources, deployment metadata) are immutable and
built by the caller. ``NaisResource`` is built by the mapper and owned by the
caller for the duration of one deployment pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ResourceRequest:
    """A dependency the application wants resolved."""

    alias: str
    resource_type: str


@dataclass(frozen=True, kw_only=True, slots=True)
class ExposedResource:
    """A capability the application offers to others."""

    alias: str
    resource_type: str
    path: str = ""
    description: str = ""
    wsdl_group_id: str = ""
    wsdl_artifact_id: str = ""
    wsdl_version: str = ""
    # Register the resource for every zone of the environment
    all_zones: bool = False


@dataclass(frozen=True, kw_only=True, slots=True)
class DeploymentRequest:
    """Metadata of the deployment being registered."""

    application: str
    environment: str
    version: str
    zone: str | None = None


@dataclass(slots=True)
class NaisResource:
    """A resolved resource, ready to be injected into the application."""

    name: str
    resource_type: str
    id: int | None = None
    properties: dict[str, str] = field(default_factory=dict)
    # At most one entry, keyed "password"
    secret: dict[str, str] = field(default_factory=dict)
    # Keyed "<alias>_<filename>"
    certificates: dict[str, bytes] = field(default_factory=dict)
