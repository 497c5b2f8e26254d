"""
Tests for metrics recorders.
"""

from fasitadapter.observability import MetricsRecorder, NoOpMetrics, RegistryMetrics


class TestRegistryMetrics:
    """Tests for RegistryMetrics."""

    def test_counts_requests_and_statuses(self):
        metrics = RegistryMetrics()

        metrics.record_request()
        metrics.record_request()
        metrics.record_http(200, "get")
        metrics.record_http(404, "GET")

        stats = metrics.get_stats()
        assert stats["requests_total"] == 2
        assert stats["http_requests"] == {"GET 200": 1, "GET 404": 1}

    def test_counts_errors_by_kind(self):
        metrics = RegistryMetrics()

        metrics.record_error("contact_fasit")
        metrics.record_error("contact_fasit")
        metrics.record_error("resolve_secret")

        assert metrics.errors_total == 3
        assert metrics.get_stats()["errors"] == {"contact_fasit": 2, "resolve_secret": 1}

    def test_reset(self):
        metrics = RegistryMetrics()
        metrics.record_request()
        metrics.record_http(500, "POST")
        metrics.record_error("error_fasit")

        metrics.reset()

        assert metrics.get_stats() == {
            "requests_total": 0,
            "http_requests": {},
            "errors": {},
            "errors_total": 0,
        }

    def test_instances_are_independent(self):
        first, second = RegistryMetrics(), RegistryMetrics()

        first.record_error("read_body")

        assert second.errors_total == 0


class TestNoOpMetrics:
    """Tests for NoOpMetrics."""

    def test_accepts_all_calls(self):
        metrics: MetricsRecorder = NoOpMetrics()

        metrics.record_request()
        metrics.record_http(200, "GET")
        metrics.record_error("map_resource")
