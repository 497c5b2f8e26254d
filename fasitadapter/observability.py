"""
Metrics for the Fasit adapter.

Counters are carried by a recorder object that the orchestrator creates and
passes into every component, so two deployment passes never share state
unless the caller wants them to.

Recorded series:
- requests: outgoing registry requests
- http: responses partitioned by status code and HTTP method
- errors: failures partitioned by kind (contact_fasit, error_fasit, ...)
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Protocol


class MetricsRecorder(Protocol):
    """Protocol for metrics sinks used by the registry components."""

    def record_request(self) -> None:
        """Record an outgoing registry request."""
        ...

    def record_http(self, status_code: int, method: str) -> None:
        """Record a response status for an HTTP method."""
        ...

    def record_error(self, kind: str) -> None:
        """Record a failure of the given kind."""
        ...


@dataclass
class NoOpMetrics:
    """Recorder that drops everything."""

    def record_request(self) -> None:
        pass

    def record_http(self, status_code: int, method: str) -> None:
        pass

    def record_error(self, kind: str) -> None:
        pass


@dataclass
class RegistryMetrics:
    """
    In-memory counters for registry traffic.

    Can be exported to Prometheus, StatsD, or other systems by reading
    ``get_stats()``.
    """

    requests_total: int = 0
    http_requests: Counter = field(default_factory=Counter)
    errors: Counter = field(default_factory=Counter)

    def record_request(self) -> None:
        self.requests_total += 1

    def record_http(self, status_code: int, method: str) -> None:
        self.http_requests[(str(status_code), method.upper())] += 1

    def record_error(self, kind: str) -> None:
        self.errors[kind] += 1

    @property
    def errors_total(self) -> int:
        return sum(self.errors.values())

    def get_stats(self) -> dict[str, Any]:
        """Get summary statistics."""
        return {
            "requests_total": self.requests_total,
            "http_requests": {
                f"{method} {code}": count
                for (code, method), count in sorted(self.http_requests.items())
            },
            "errors": dict(self.errors),
            "errors_total": self.errors_total,
        }

    def reset(self) -> None:
        """Reset all counters."""
        self.requests_total = 0
        self.http_requests.clear()
        self.errors.clear()


__all__ = [
    "MetricsRecorder",
    "NoOpMetrics",
    "RegistryMetrics",
]
