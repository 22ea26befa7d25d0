"""Call resource updates over the 2010-04-01 REST API.

Usage:
    from callsdk import CallStatus, CallUpdater, RestClient

    with RestClient(account_sid="AC...", auth_token="...") as client:
        call = (
            CallUpdater("CA...")
            .set_status(CallStatus.COMPLETED)
            .execute(client)
        )
        print(call.status)
"""

from callsdk.clients import RestClient
from callsdk.exceptions import (
    ApiConnectionError,
    ApiError,
    CallSDKError,
    ConfigurationError,
)
from callsdk.http import HttpMethod
from callsdk.resources import Call, CallDirection, CallStatus, RestException
from callsdk.updaters import CallUpdater, Updater

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "Call",
    "CallDirection",
    "CallSDKError",
    "CallStatus",
    "CallUpdater",
    "ConfigurationError",
    "HttpMethod",
    "RestClient",
    "RestException",
    "Updater",
]
