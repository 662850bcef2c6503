"""Declarative HTTP endpoints with callback, stream and awaitable call shapes."""

from ._config import ClientConfig
from ._services import (
    ApiClient,
    HttpxTransport,
    ResponseStream,
    Subscription,
    Transport,
    build_request,
    validate_and_decode,
)
from ._utils import (
    Body,
    Codec,
    EmptyBody,
    Endpoint,
    EndpointSpec,
    FormBody,
    HTTPMethod,
    JsonBody,
    JsonCodec,
    RawBody,
)
from .models import (
    ApiKitError,
    DecodingError,
    EncodingError,
    ErrorKind,
    Failure,
    InvalidHeaderError,
    InvalidPathError,
    InvalidURLError,
    NoDataError,
    Outcome,
    RequestEncodingError,
    RequestError,
    StatusCodeError,
    Success,
    TransportError,
    TransportResponse,
    WireRequest,
)

__all__ = [
    "ApiClient",
    "ApiKitError",
    "Body",
    "ClientConfig",
    "Codec",
    "DecodingError",
    "EmptyBody",
    "EncodingError",
    "Endpoint",
    "EndpointSpec",
    "ErrorKind",
    "Failure",
    "FormBody",
    "HTTPMethod",
    "HttpxTransport",
    "InvalidHeaderError",
    "InvalidPathError",
    "InvalidURLError",
    "JsonBody",
    "JsonCodec",
    "NoDataError",
    "Outcome",
    "RawBody",
    "RequestEncodingError",
    "RequestError",
    "ResponseStream",
    "StatusCodeError",
    "Subscription",
    "Success",
    "Transport",
    "TransportError",
    "TransportResponse",
    "WireRequest",
    "build_request",
    "validate_and_decode",
]
