"""HTTP primitives shared by clients and updaters."""

from callsdk.http.methods import HttpMethod
from callsdk.http.request import Request
from callsdk.http.response import Response

__all__ = ["HttpMethod", "Request", "Response"]
