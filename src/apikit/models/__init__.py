from .errors import (
    ApiKitError,
    DecodingError,
    EncodingError,
    ErrorKind,
    InvalidHeaderError,
    InvalidPathError,
    InvalidURLError,
    NoDataError,
    RequestEncodingError,
    RequestError,
    StatusCodeError,
    TransportError,
)
from .outcome import Failure, Outcome, Success
from .requests import TransportResponse, WireRequest

__all__ = [
    "ApiKitError",
    "DecodingError",
    "EncodingError",
    "ErrorKind",
    "Failure",
    "InvalidHeaderError",
    "InvalidPathError",
    "InvalidURLError",
    "NoDataError",
    "Outcome",
    "RequestEncodingError",
    "RequestError",
    "StatusCodeError",
    "Success",
    "TransportError",
    "TransportResponse",
    "WireRequest",
]
