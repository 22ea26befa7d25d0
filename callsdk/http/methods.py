"""HTTP method enumeration."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods accepted by the API.

    Values are the literals sent on the wire, both as the request verb and
    when a method is itself a form parameter (e.g. ``StatusCallbackMethod``).
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value
