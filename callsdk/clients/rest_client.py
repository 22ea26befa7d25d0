"""Synchronous REST client.

Owns the HTTP connection pool, credentials and account scope. Updaters
build a Request and hand it to `RestClient.request`, which performs a
single network attempt.

Usage:
    from callsdk.clients import RestClient

    with RestClient(account_sid="AC...", auth_token="...") as client:
        response = client.request(request)

    # Or from configuration (CALLSDK_CLIENT__ACCOUNT_SID, ...)
    client = RestClient.from_settings()
"""

import time
from typing import Any

import httpx

from callsdk.config import get_settings
from callsdk.config.settings import Settings
from callsdk.exceptions import ConfigurationError
from callsdk.http import Request, Response
from callsdk.observability.logging import get_logger
from callsdk.observability.metrics import API_REQUEST_COUNT, API_REQUEST_LATENCY

logger = get_logger(__name__)

HTTP_STATUS_CODE_OK = 200

DEFAULT_BASE_URL = "https://api.twilio.com"
USER_AGENT = "callsdk-python/0.1.0"


class RestClient:
    """Client for the REST API.

    Attributes:
        base_url: Base URL of the API
    """

    HTTP_STATUS_CODE_OK = HTTP_STATUS_CODE_OK

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            account_sid: Account SID, used for basic auth and request paths
            auth_token: Auth token for basic auth
            base_url: Base URL of the API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        if not account_sid:
            raise ConfigurationError("account_sid is required")
        if not auth_token:
            raise ConfigurationError("auth_token is required")

        self.base_url = base_url.rstrip("/")
        self._account_sid = account_sid
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=(account_sid, auth_token),
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RestClient":
        """Create a client from the configuration layer.

        Args:
            settings: Settings to use (defaults to get_settings())

        Returns:
            Configured RestClient

        Raises:
            ConfigurationError: If credentials are not configured
        """
        config = (settings or get_settings()).client
        if not config.account_sid or config.auth_token is None:
            raise ConfigurationError(
                "Client credentials not configured. Set CALLSDK_CLIENT__ACCOUNT_SID "
                "and CALLSDK_CLIENT__AUTH_TOKEN."
            )

        return cls(
            account_sid=config.account_sid,
            auth_token=config.auth_token.get_secret_value(),
            base_url=config.base_url,
            timeout=config.timeout,
        )

    @property
    def account_sid(self) -> str:
        """Account that owns the resources this client addresses."""
        return self._account_sid

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def request(self, request: Request) -> Response | None:
        """Send a request and return the raw response.

        Non-success statuses are returned, not raised; mapping them to
        errors is the caller's job.

        Returns:
            The response, or None if the transport could not produce one
        """
        method = request.method.value
        path = request.path

        logger.debug(
            "api_request_attempt",
            method=method,
            path=path,
            params=sorted(request.post_params),
        )

        start_time = time.perf_counter()
        try:
            response = self._client.request(
                method,
                path,
                data=request.post_params or None,
            )
        except httpx.TransportError as e:
            logger.warning(
                "api_request_transport_error",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        elapsed = time.perf_counter() - start_time
        API_REQUEST_LATENCY.labels(method=method).observe(elapsed)
        API_REQUEST_COUNT.labels(method=method, status=str(response.status_code)).inc()

        logger.info(
            "api_request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            response_time_ms=int(elapsed * 1000),
        )

        return Response(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )
