"""API resource representations."""

from callsdk.resources.call import Call, CallDirection, CallStatus
from callsdk.resources.rest_exception import RestException

__all__ = ["Call", "CallDirection", "CallStatus", "RestException"]
