from ._base_service import ApiClient, resolve_response, validate_and_decode
from ._request_builder import build_request
from ._stream import ResponseStream, Subscription
from ._transport import HttpxTransport, Transport

__all__ = [
    "ApiClient",
    "HttpxTransport",
    "ResponseStream",
    "Subscription",
    "Transport",
    "build_request",
    "resolve_response",
    "validate_and_decode",
]
