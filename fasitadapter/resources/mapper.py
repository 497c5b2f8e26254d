"""
Mapping of registry records to NaisResource.

The mapper turns one ``FasitResource`` into a ``NaisResource``:

- a secret reference is downloaded (authenticated) into ``secret["password"]``
- certificate files are downloaded (anonymous) into ``certificates``, keyed
  ``"<alias>_<filename>"``; only for records of type certificate
- the composite ``applicationProperties`` value of an applicationproperties
  record is exploded into discrete properties
"""

from __future__ import annotations

import logging
from typing import Any

from fasitadapter.integrations.base import IntegrationError
from fasitadapter.integrations.fasit.client import FasitClient
from fasitadapter.integrations.fasit.schemas import FasitResource
from fasitadapter.observability import MetricsRecorder, NoOpMetrics
from fasitadapter.resources.errors import MappingError
from fasitadapter.resources.models import NaisResource

logger = logging.getLogger(__name__)

CERTIFICATE_TYPE = "certificate"
APPLICATION_PROPERTIES_TYPE = "applicationproperties"
APPLICATION_PROPERTIES_KEY = "applicationProperties"
APPLICATION_PROPERTIES_SEPARATOR = "\r\n"
SECRET_KEY = "password"


class ResourceMapper:
    """Builds NaisResource values from raw registry records."""

    def __init__(self, client: FasitClient, metrics: MetricsRecorder | None = None):
        self._client = client
        self.metrics: MetricsRecorder = metrics or NoOpMetrics()

    def map(self, record: FasitResource) -> NaisResource:
        """
        Map a registry record, fetching its secret and files.

        Raises:
            MappingError: With a reason naming the step that failed
        """
        resource = NaisResource(
            id=record.id,
            name=record.alias,
            resource_type=record.resource_type,
            properties=dict(record.properties),
        )

        if record.secrets:
            resource.secret = self._resolve_secret(record)

        resource_type = record.resource_type.lower()
        if resource_type == CERTIFICATE_TYPE and record.files:
            resource.certificates = self._resolve_certificates(record)
        elif resource_type == APPLICATION_PROPERTIES_TYPE:
            resource.properties = explode_application_properties(resource.properties)

        return resource

    def _resolve_secret(self, record: FasitResource) -> dict[str, str]:
        if len(record.secrets) > 1:
            self.metrics.record_error("resolve_secret")
            raise MappingError(
                f"Unable to resolve secret: {record.alias} has "
                f"{len(record.secrets)} secrets ({', '.join(sorted(record.secrets))}), "
                "only one is supported"
            )

        (secret_name, secret), = record.secrets.items()
        ref = secret.get("ref")
        if not isinstance(ref, str):
            self.metrics.record_error("resolve_secret")
            raise MappingError(
                f"Unable to resolve secret: ref not found for secret {secret_name}"
            )

        try:
            value = self._client.fetch_secret(ref)
        except IntegrationError as e:
            self.metrics.record_error("resolve_secret")
            raise MappingError(f"Unable to resolve secret: {e}") from e

        logger.debug(f"[fasit] Resolved secret {secret_name} for {record.alias}")
        return {SECRET_KEY: value}

    def _resolve_certificates(self, record: FasitResource) -> dict[str, bytes]:
        try:
            files = parse_files_object(record.files or {})
        except MappingError:
            self.metrics.record_error("resolve_file")
            raise

        certificates: dict[str, bytes] = {}
        for filename, ref in files:
            try:
                content = self._client.fetch_file(ref)
            except IntegrationError as e:
                self.metrics.record_error("resolve_file")
                raise MappingError(f"Unable to resolve certificates: {e}") from e
            certificates[f"{record.alias}_{filename}"] = content
        return certificates


def parse_files_object(files: dict[str, Any]) -> list[tuple[str, str]]:
    """
    Read ``(filename, ref)`` pairs from a files object.

    The files object is keyed by file role::

        {"keystore": {"filename": "keystore", "ref": "https://..."}}

    Raises:
        MappingError: If a role lacks a string filename or ref
    """
    parsed = []
    for role, entry in files.items():
        if not isinstance(entry, dict):
            raise MappingError(
                f"Unable to resolve certificates: file entry {role} is not an object: {files}"
            )
        filename = entry.get("filename")
        if not isinstance(filename, str):
            raise MappingError(
                f"Unable to resolve certificates: filename not found for {role}: {files}"
            )
        ref = entry.get("ref")
        if not isinstance(ref, str):
            raise MappingError(
                f"Unable to resolve certificates: file url not found for {role}: {files}"
            )
        parsed.append((filename, ref))
    return parsed


def explode_application_properties(properties: dict[str, str]) -> dict[str, str]:
    """
    Split the composite applicationProperties value into discrete entries.

    ``"key1=value1\\r\\nkey2=dc=preprod,dc=local"`` becomes
    ``{"key1": "value1", "key2": "dc=preprod,dc=local"}``; the composite key
    is dropped.
    """
    if APPLICATION_PROPERTIES_KEY not in properties:
        return properties

    exploded = {k: v for k, v in properties.items() if k != APPLICATION_PROPERTIES_KEY}
    for line in properties[APPLICATION_PROPERTIES_KEY].split(APPLICATION_PROPERTIES_SEPARATOR):
        if not line.strip():
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise MappingError(f"Malformed applicationProperties entry: {line!r}")
        exploded[key] = value
    return exploded
