from ._body import Body, EmptyBody, FormBody, JsonBody, RawBody
from ._codec import Codec, JsonCodec, default_codec
from ._request_spec import Endpoint, EndpointSpec, HTTPMethod
from ._ssl_context import create_ssl_context, get_httpx_client_kwargs

__all__ = [
    "Body",
    "Codec",
    "EmptyBody",
    "Endpoint",
    "EndpointSpec",
    "FormBody",
    "HTTPMethod",
    "JsonBody",
    "JsonCodec",
    "RawBody",
    "create_ssl_context",
    "default_codec",
    "get_httpx_client_kwargs",
]
