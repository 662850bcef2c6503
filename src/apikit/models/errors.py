from enum import Enum


class ErrorKind(str, Enum):
    """Classification shared by every call shape."""

    REQUEST = "request"
    TRANSPORT = "transport"
    STATUS = "status"
    NO_DATA = "no_data"
    DECODING = "decoding"


class ApiKitError(Exception):
    kind: ErrorKind

    def __init__(self, message: str, error: BaseException | None = None):
        self.message = message
        self.error = error
        super().__init__(self.message)


class EncodingError(Exception):
    """Raised by a body when it cannot produce its bytes."""


class RequestError(ApiKitError):
    """The wire request could not be built. Nothing was dispatched."""

    kind = ErrorKind.REQUEST


class InvalidPathError(RequestError):
    def __init__(self, url: str, error: BaseException | None = None):
        self.url = url
        super().__init__(f"Invalid endpoint path: {url!r}", error)


class InvalidURLError(RequestError):
    def __init__(self, url: str, error: BaseException | None = None):
        self.url = url
        super().__init__(f"Could not compose URL from {url!r}", error)


class InvalidHeaderError(RequestError):
    def __init__(self, name: str, error: BaseException | None = None):
        self.name = name
        super().__init__(f"Header {name!r} cannot be sent as ASCII text", error)


class RequestEncodingError(RequestError):
    def __init__(self, error: BaseException):
        super().__init__(f"Failed to encode request body: {error}", error)


class TransportError(ApiKitError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, error: BaseException):
        super().__init__(f"Transport failure: {error!r}", error)


class StatusCodeError(ApiKitError):
    """The response status was missing or outside the 2xx range.

    Attributes:
        status_code: The received status, or ``None`` if the transport reported none.
        body: Response body text, kept for diagnostics.
    """

    kind = ErrorKind.STATUS

    def __init__(self, status_code: int | None, body: str | None = None):
        self.status_code = status_code
        self.body = body
        message = f"Unacceptable status code: {status_code}"
        if body:
            message = f"{message}\nResponse content:\n{body}"
        super().__init__(message)


class NoDataError(ApiKitError):
    kind = ErrorKind.NO_DATA

    def __init__(self, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(f"Response with status {status_code} carried no data")


class DecodingError(ApiKitError):
    kind = ErrorKind.DECODING

    def __init__(self, target: object, error: BaseException | None = None):
        self.target = target
        super().__init__(f"Failed to decode response into {target!r}", error)
