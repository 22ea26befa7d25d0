"""Call resource model."""

from datetime import datetime
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CallStatus(str, Enum):
    """Call lifecycle states.

    Only CANCELED and COMPLETED are accepted when updating a call.
    CANCELED hangs up calls that are queued or ringing; COMPLETED also
    hangs up calls already in progress.
    """

    QUEUED = "queued"
    RINGING = "ringing"
    IN_PROGRESS = "in-progress"
    CANCELED = "canceled"
    COMPLETED = "completed"
    FAILED = "failed"
    BUSY = "busy"
    NO_ANSWER = "no-answer"

    def __str__(self) -> str:
        return self.value


class CallDirection(str, Enum):
    """How the call was initiated."""

    INBOUND = "inbound"
    OUTBOUND_API = "outbound-api"
    OUTBOUND_DIAL = "outbound-dial"
    TRUNKING_ORIGINATING = "trunking-originating"
    TRUNKING_TERMINATING = "trunking-terminating"

    def __str__(self) -> str:
        return self.value


class Call(BaseModel):
    """Representation of a call as returned by the Calls endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sid: str
    account_sid: str | None = None
    parent_call_sid: str | None = None

    # Parties
    to: str | None = None
    to_formatted: str | None = None
    from_: str | None = Field(default=None, alias="from")
    from_formatted: str | None = None
    phone_number_sid: str | None = None
    forwarded_from: str | None = None
    caller_name: str | None = None

    # Lifecycle
    status: CallStatus | None = None
    direction: CallDirection | None = None
    answered_by: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    duration: str | None = None

    # Billing
    price: str | None = None
    price_unit: str | None = None

    annotation: str | None = None
    group_sid: str | None = None
    api_version: str | None = None
    uri: str | None = None
    subresource_uris: dict[str, str] | None = None

    date_created: datetime | None = None
    date_updated: datetime | None = None

    @field_validator(
        "date_created", "date_updated", "start_time", "end_time", mode="before"
    )
    @classmethod
    def _parse_rfc2822(cls, value: Any) -> Any:
        # The API formats timestamps as RFC 2822 ("Tue, 31 Aug 2010 20:36:28 +0000")
        if value == "":
            return None
        if isinstance(value, str):
            try:
                return parsedate_to_datetime(value)
            except (TypeError, ValueError):
                return value
        return value

    @classmethod
    def from_json(cls, content: bytes | str) -> "Call":
        """Deserialize a call from a response body.

        Raises:
            pydantic.ValidationError: If the body is not a valid call document
        """
        return cls.model_validate_json(content)
