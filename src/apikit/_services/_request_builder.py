from urllib.parse import urlencode

from httpx import URL, InvalidURL

from .._utils import Endpoint, HTTPMethod
from ..models.errors import (
    EncodingError,
    InvalidHeaderError,
    InvalidPathError,
    InvalidURLError,
    RequestEncodingError,
)
from ..models.requests import WireRequest


def _set_header(headers: list[tuple[str, str]], name: str, value: str) -> None:
    lowered = name.lower()
    headers[:] = [(key, val) for key, val in headers if key.lower() != lowered]
    headers.append((name, value))


def _check_header(name: object, value: object) -> None:
    if not isinstance(name, str) or not isinstance(value, str):
        raise InvalidHeaderError(str(name))
    try:
        name.encode("ascii")
        value.encode("ascii")
    except UnicodeEncodeError as e:
        raise InvalidHeaderError(name, e) from e


def _method_name(method: HTTPMethod | str) -> str:
    if isinstance(method, HTTPMethod):
        return method.value
    return method.upper()


def build_request(endpoint: Endpoint) -> WireRequest:
    """Turn an endpoint description into a wire request.

    The function is pure: nothing is dispatched and no shared state is
    touched, so it may run concurrently on any thread.

    Args:
        endpoint: The endpoint to build a request for.

    Returns:
        WireRequest: The assembled request.

    Raises:
        InvalidPathError: ``base_url + path`` is not an absolute URL.
        InvalidURLError: The URL could not be re-serialized with its query.
        InvalidHeaderError: A header name or value is not an ASCII string.
        RequestEncodingError: The body failed to encode.
    """
    raw_url = f"{endpoint.base_url}{endpoint.path}"
    try:
        url = URL(raw_url)
    except InvalidURL as e:
        raise InvalidPathError(raw_url, e) from e
    if not url.is_absolute_url:
        raise InvalidPathError(raw_url)

    queries = endpoint.queries
    try:
        if queries is not None:
            query = urlencode([(name, value) for name, value in queries])
            url = url.copy_with(query=query.encode("ascii") if query else None)
        resolved_url = str(url)
    except InvalidURL as e:
        raise InvalidURLError(raw_url, e) from e

    # descriptor headers replace, body headers accumulate
    headers: list[tuple[str, str]] = []
    for name, value in (endpoint.headers or {}).items():
        _check_header(name, value)
        _set_header(headers, name, value)

    content: bytes | None = None
    body = endpoint.body
    if not body.is_empty:
        for name, value in body.additional_headers:
            _check_header(name, value)
            headers.append((name, value))
        try:
            content = body.encode()
        except (EncodingError, ValueError, TypeError) as e:
            raise RequestEncodingError(e) from e

    return WireRequest(
        url=resolved_url,
        method=_method_name(endpoint.method),
        headers=tuple(headers),
        content=content,
    )
