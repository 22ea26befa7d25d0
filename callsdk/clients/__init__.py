"""REST clients."""

from callsdk.clients.rest_client import HTTP_STATUS_CODE_OK, RestClient

__all__ = ["HTTP_STATUS_CODE_OK", "RestClient"]
