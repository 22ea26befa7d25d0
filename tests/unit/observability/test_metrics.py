"""Tests for Prometheus metrics."""

from unittest.mock import Mock

import httpx
import pytest
from prometheus_client import REGISTRY

from callsdk.clients import RestClient
from callsdk.exceptions import ApiConnectionError
from callsdk.http import HttpMethod, Request
from callsdk.observability.metrics import API_ERRORS, API_REQUEST_COUNT, API_REQUEST_LATENCY
from callsdk.updaters import CallUpdater


def sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricDefinitions:
    """Metrics are registered and accept their labels."""

    def test_request_count(self) -> None:
        """API_REQUEST_COUNT takes method and status."""
        API_REQUEST_COUNT.labels(method="GET", status="200").inc()

    def test_request_latency(self) -> None:
        """API_REQUEST_LATENCY takes method."""
        API_REQUEST_LATENCY.labels(method="GET").observe(0.1)

    def test_errors(self) -> None:
        """API_ERRORS takes error_type."""
        API_ERRORS.labels(error_type="test").inc()


class TestRecording:
    """Metrics are recorded by the client and updater."""

    def test_client_counts_responses(self) -> None:
        """Each response increments the counter for its status."""
        labels = {"method": "POST", "status": "418"}
        before = sample("callsdk_api_request_count_total", labels)

        client = RestClient(
            account_sid="AC1",
            auth_token="token",
            transport=httpx.MockTransport(lambda request: httpx.Response(418)),
        )
        with client:
            client.request(Request(method=HttpMethod.POST, path_template="/x"))

        assert sample("callsdk_api_request_count_total", labels) == before + 1

    def test_connection_errors_counted(self, mock_client: Mock) -> None:
        """Missing responses count as connection errors."""
        labels = {"error_type": "connection"}
        before = sample("callsdk_api_errors_total", labels)

        with pytest.raises(ApiConnectionError):
            CallUpdater("CA1").execute(mock_client)

        assert sample("callsdk_api_errors_total", labels) == before + 1
