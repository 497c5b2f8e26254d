"""
Pytest configuration and fixtures for fasitadapter tests.
"""

import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

# Add the repository root to path for imports
# This allows `from fasitadapter.resources import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from fasitadapter.integrations.fasit import FasitClient, FasitConfig  # noqa: E402
from fasitadapter.observability import RegistryMetrics  # noqa: E402

BASE_URL = "https://fasit.local"
SCOPED_RESOURCE_URL = f"{BASE_URL}/api/v2/scopedresource"
RESOURCES_URL = f"{BASE_URL}/api/v2/resources/"
APPLICATION_INSTANCES_URL = f"{BASE_URL}/api/v2/applicationinstances/"


class FakeFasit:
    """
    In-process stand-in for the Fasit REST API.

    Routes are matched on method, URL without query string and, optionally,
    a subset of query parameters. Every request is recorded.
    """

    def __init__(self):
        self.routes: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        url: str,
        *,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
        content: bytes | None = None,
        params: dict[str, str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.routes.append(
            {
                "method": method,
                "url": url,
                "params": params or {},
                "status_code": status_code,
                "json": json,
                "text": text,
                "content": content,
                "error": error,
            }
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"

        for route in self.routes:
            if route["method"] != request.method or route["url"] != url:
                continue
            if any(request.url.params.get(k) != v for k, v in route["params"].items()):
                continue
            if route["error"] is not None:
                raise route["error"]
            if route["json"] is not None:
                return httpx.Response(route["status_code"], json=route["json"])
            if route["content"] is not None:
                return httpx.Response(route["status_code"], content=route["content"])
            return httpx.Response(route["status_code"], text=route["text"] or "")

        raise AssertionError(f"Unexpected request: {request.method} {request.url}")

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


def resource_record(
    alias: str,
    resource_type: str = "DataSource",
    *,
    id: int = 1,
    properties: dict[str, str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Scoped lookup response body."""
    return {
        "id": id,
        "alias": alias,
        "type": resource_type,
        "properties": properties or {},
        **extra,
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fasit():
    """Fake Fasit server."""
    return FakeFasit()


@pytest.fixture
def metrics():
    """Fresh metrics recorder."""
    return RegistryMetrics()


@pytest.fixture
def fasit_config():
    """Create test Fasit configuration."""
    return FasitConfig(base_url=BASE_URL, username="deployer", password="hunter2")


@pytest.fixture
def http_client(fasit):
    """HTTP client routed to the fake server."""
    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(fasit.handler))
    yield client
    client.close()


@pytest.fixture
def fasit_client(fasit_config, http_client, metrics):
    """Fasit client talking to the fake server."""
    return FasitClient(fasit_config, http_client=http_client, metrics=metrics)
