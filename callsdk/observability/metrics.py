"""Prometheus metrics for API calls."""

from prometheus_client import Counter, Histogram

API_REQUEST_COUNT = Counter(
    "callsdk_api_request_count_total",
    "Total number of API requests that produced a response",
    labelnames=["method", "status"],
)

API_REQUEST_LATENCY = Histogram(
    "callsdk_api_request_latency_seconds",
    "API request latency in seconds",
    labelnames=["method"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

API_ERRORS = Counter(
    "callsdk_api_errors_total",
    "Total number of failed API operations",
    labelnames=["error_type"],
)
