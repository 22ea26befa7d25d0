"""Updater for in-flight calls.

Redirects a live call to new TwiML, hangs it up, or changes where the
API reports call progress.

Usage:
    from callsdk import CallStatus, CallUpdater, HttpMethod

    call = (
        CallUpdater("CA...")
        .set_url("https://example.com/hold.xml")
        .set_method(HttpMethod.GET)
        .execute(client)
    )

    CallUpdater(call).set_status(CallStatus.COMPLETED).execute(client)
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from callsdk.clients.rest_client import HTTP_STATUS_CODE_OK, RestClient
from callsdk.exceptions import ApiConnectionError, ApiError
from callsdk.http import HttpMethod, Request
from callsdk.observability.logging import get_logger
from callsdk.observability.metrics import API_ERRORS
from callsdk.resources.call import Call, CallStatus
from callsdk.resources.rest_exception import RestException
from callsdk.updaters.base import Updater

logger = get_logger(__name__)

CALL_PATH = "/2010-04-01/Accounts/{AccountSid}/Calls/{CallSid}.json"


def _as_str(value: object) -> str | None:
    # httpx.URL and similar are sent in their string form; None stays unset
    return None if value is None else str(value)


class CallUpdateParams(BaseModel):
    """Optional fields of a call update, keyed by their form names.

    None means the field was never set and is left out of the request.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    url: str | None = Field(default=None, alias="Url")
    """URL returning TwiML; the call is redirected to it immediately."""

    method: HttpMethod | None = Field(default=None, alias="Method")
    """HTTP method used to fetch `url`. The API defaults to POST."""

    status: CallStatus | None = Field(default=None, alias="Status")
    """CANCELED or COMPLETED to end the call."""

    fallback_url: str | None = Field(default=None, alias="FallbackUrl")
    """URL requested if fetching or executing `url` fails."""

    fallback_method: HttpMethod | None = Field(default=None, alias="FallbackMethod")
    """GET or POST. The API defaults to POST."""

    status_callback: str | None = Field(default=None, alias="StatusCallback")
    """URL notified when the call ends."""

    status_callback_method: HttpMethod | None = Field(
        default=None, alias="StatusCallbackMethod"
    )
    """HTTP method used for `status_callback`. The API defaults to POST."""

    def to_post_params(self) -> dict[str, str]:
        """Form body containing only the fields that are set."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CallUpdater(Updater[Call]):
    """Builds and sends an update for a single call."""

    def __init__(self, call: str | Call) -> None:
        """Initialize the updater.

        Args:
            call: Call sid, or a Call whose sid is used
        """
        sid = call.sid if isinstance(call, Call) else call
        if not sid:
            raise ValueError("Call sid is required")

        self.sid = sid
        self._params = CallUpdateParams()

    def set_url(self, url: str | None) -> "CallUpdater":
        """Redirect the call to TwiML served from `url`."""
        self._params.url = _as_str(url)
        return self

    def set_method(self, method: HttpMethod | None) -> "CallUpdater":
        """HTTP method used to request `url`."""
        self._params.method = method
        return self

    def set_status(self, status: CallStatus | None) -> "CallUpdater":
        """End the call.

        CANCELED hangs up calls that are queued or ringing without touching
        calls in progress. COMPLETED hangs up the call even if in progress.
        """
        self._params.status = status
        return self

    def set_fallback_url(self, fallback_url: str | None) -> "CallUpdater":
        """URL requested if an error occurs fetching or executing `url`."""
        self._params.fallback_url = _as_str(fallback_url)
        return self

    def set_fallback_method(self, fallback_method: HttpMethod | None) -> "CallUpdater":
        """HTTP method used to request the fallback URL."""
        self._params.fallback_method = fallback_method
        return self

    def set_status_callback(self, status_callback: str | None) -> "CallUpdater":
        """URL notified when the call ends."""
        self._params.status_callback = _as_str(status_callback)
        return self

    def set_status_callback_method(
        self, status_callback_method: HttpMethod | None
    ) -> "CallUpdater":
        """HTTP method used to request the status callback."""
        self._params.status_callback_method = status_callback_method
        return self

    def post_params(self) -> dict[str, str]:
        """Form parameters that `execute` will send."""
        return self._params.to_post_params()

    def execute(self, client: RestClient) -> Call:
        """Send the update.

        Args:
            client: Client providing the account scope and transport

        Returns:
            The call as returned by the API after the update

        Raises:
            ApiConnectionError: If no response was received
            ApiError: If the API returned a non-success status
            pydantic.ValidationError: If a success body is not a valid call
        """
        request = Request(
            method=HttpMethod.POST,
            path_template=CALL_PATH,
            path_params={"AccountSid": client.account_sid, "CallSid": self.sid},
        )
        self._add_post_params(request)

        response = client.request(request)

        if response is None:
            API_ERRORS.labels(error_type="connection").inc()
            logger.error("call_update_connection_failed", call_sid=self.sid)
            raise ApiConnectionError("Call update failed: Unable to connect to server")

        if response.status_code != HTTP_STATUS_CODE_OK:
            API_ERRORS.labels(error_type="api").inc()
            error = self._parse_error(response.content, response.status_code)
            logger.warning(
                "call_update_rejected",
                call_sid=self.sid,
                status_code=error.status,
                error_code=error.code,
                error_message=error.message,
            )
            raise error

        call = Call.from_json(response.content)
        logger.info(
            "call_updated",
            call_sid=call.sid,
            status=call.status.value if call.status else None,
        )
        return call

    def _add_post_params(self, request: Request) -> None:
        for name, value in self.post_params().items():
            request.add_post_param(name, value)

    @staticmethod
    def _parse_error(content: bytes, status_code: int) -> ApiError:
        try:
            rest_exception = RestException.from_json(content)
        except ValidationError as e:
            return ApiError(
                f"Call update failed: Unable to parse error response ({e.error_count()} errors)",
                status=status_code,
            )

        return ApiError(
            rest_exception.message,
            code=rest_exception.code,
            more_info=rest_exception.more_info,
            status=rest_exception.status if rest_exception.status is not None else status_code,
        )
