from concurrent.futures import Future
from contextlib import aclosing
from logging import getLogger
from typing import AsyncGenerator, Callable, TypeVar

from .._config import ClientConfig
from .._utils import Codec, Endpoint, default_codec
from .._utils.constants import LOGGER_NAME
from ..models.errors import (
    ApiKitError,
    DecodingError,
    NoDataError,
    RequestError,
    StatusCodeError,
    TransportError,
)
from ..models.outcome import Failure, Outcome, Success
from ..models.requests import TransportResponse
from ._request_builder import build_request
from ._stream import ResponseStream
from ._transport import HttpxTransport, Transport

D = TypeVar("D")

logger = getLogger(LOGGER_NAME)


def _body_text(data: bytes | None) -> str | None:
    if not data:
        return None
    return data.decode("utf-8", errors="replace")


def resolve_response(
    response: TransportResponse, type_: type[D], codec: Codec = default_codec
) -> D:
    """Validate a transport response and decode its body.

    Checks run in a fixed order: transport error, status, data presence,
    decoding.

    Raises:
        TransportError: The transport reported a failure.
        StatusCodeError: The status is missing or outside [200, 299].
        NoDataError: The status is acceptable but no bytes were received.
        DecodingError: The bytes do not decode into ``type_``.
    """
    if response.error is not None:
        raise TransportError(response.error) from response.error

    status_code = response.status_code
    if status_code is None or not 200 <= status_code <= 299:
        logger.warning(f"Unacceptable status code: {status_code}")
        raise StatusCodeError(status_code, _body_text(response.data))

    if not response.data:
        raise NoDataError(status_code)

    try:
        return codec.decode(response.data, type_)
    except ValueError as e:
        logger.debug(f"Failed to decode response into {type_!r}: {e}")
        raise DecodingError(type_, e) from e


def validate_and_decode(
    data: bytes | None,
    status_code: int | None,
    error: BaseException | None,
    type_: type[D],
    codec: Codec = default_codec,
) -> Outcome[D]:
    """Outcome-returning form of ``resolve_response``."""
    response = TransportResponse(data=data, status_code=status_code, error=error)
    try:
        return Success(resolve_response(response, type_, codec))
    except ApiKitError as e:
        return Failure(e)


class ApiClient:
    """Builds, sends and decodes requests described by ``Endpoint`` values.

    The same pipeline is offered as a callback API, a cold single-value
    stream and blocking / awaitable calls. All of them classify failures
    identically.

    Examples:
        ```python
        from apikit import ApiClient, EndpointSpec

        with ApiClient() as client:
            user = client.fetch(
                EndpointSpec(base_url="https://api.x.com/", path="users/7"),
                User,
            )
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
        codec: Codec | None = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(self._config)
        self._codec: Codec = codec or default_codec

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _outcome(self, response: TransportResponse, type_: type[D]) -> Outcome[D]:
        return validate_and_decode(
            response.data, response.status_code, response.error, type_, self._codec
        )

    def data_with_completion(
        self,
        endpoint: Endpoint,
        type_: type[D],
        completion: Callable[[Outcome[D]], None],
    ) -> "Future[None]":
        """Send the request and report the outcome through ``completion``.

        ``completion`` is called exactly once. When the request cannot be
        built it is called synchronously, before this method returns;
        otherwise it runs on a transport worker thread.

        Args:
            endpoint: The endpoint to call.
            type_: Type the response body is decoded into.
            completion: Receives the ``Success`` or ``Failure`` outcome.

        Returns:
            Future[None]: Resolves once ``completion`` has returned.
        """
        try:
            request = build_request(endpoint)
        except RequestError as e:
            self._logger.warning(f"Could not build request: {e}")
            completion(Failure(e))
            future: Future[None] = Future()
            future.set_result(None)
            return future

        def on_response(response: TransportResponse) -> None:
            completion(self._outcome(response, type_))

        return self._transport.send_with_callback(request, on_response)

    def publisher(self, endpoint: Endpoint, type_: type[D]) -> ResponseStream[D]:
        """Return a cold stream that emits the decoded response once.

        Building and sending are deferred until the stream is iterated or
        subscribed to. Cancelling the subscription (or the iterating task)
        cancels the in-flight request.
        """

        async def source() -> AsyncGenerator[D, None]:
            request = build_request(endpoint)
            async with aclosing(self._transport.stream(request)) as responses:
                response = await anext(responses, TransportResponse())
            yield self._outcome(response, type_).unwrap()

        return ResponseStream(source)

    def fetch(self, endpoint: Endpoint, type_: type[D]) -> D:
        """Send the request, blocking the calling thread until it is decoded.

        Raises:
            ApiKitError: The classified failure, see ``apikit.ErrorKind``.
        """
        request = build_request(endpoint)
        response = self._transport.send(request)
        return self._outcome(response, type_).unwrap()

    async def fetch_async(self, endpoint: Endpoint, type_: type[D]) -> D:
        """Awaitable form of ``fetch``.

        Only the awaiting task is suspended. Cancelling it cancels the
        underlying request.
        """
        request = build_request(endpoint)
        response = await self._transport.send_async(request)
        return self._outcome(response, type_).unwrap()

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
