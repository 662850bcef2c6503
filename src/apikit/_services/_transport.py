import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from logging import getLogger
from typing import AsyncGenerator, Callable, Protocol

from httpx import AsyncClient, Client, HTTPError, Response

from .._config import ClientConfig
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import LOGGER_NAME
from ..models.requests import TransportResponse, WireRequest

TransportCallback = Callable[[TransportResponse], None]


class Transport(Protocol):
    """Sends wire requests.

    Failures of the exchange itself (DNS, TLS, timeouts, resets) are reported
    through ``TransportResponse.error`` and never as an HTTP status.
    """

    def send(self, request: WireRequest) -> TransportResponse: ...

    def send_with_callback(
        self, request: WireRequest, callback: TransportCallback
    ) -> "Future[None]": ...

    def stream(self, request: WireRequest) -> AsyncGenerator[TransportResponse, None]: ...

    async def send_async(self, request: WireRequest) -> TransportResponse: ...


def _to_transport_response(response: Response) -> TransportResponse:
    return TransportResponse(
        data=response.content,
        status_code=response.status_code,
        headers=tuple(response.headers.multi_items()),
    )


class HttpxTransport:
    """Transport backed by one shared ``httpx.Client`` and ``httpx.AsyncClient``.

    Callback sends run on a private thread pool sized by
    ``ClientConfig.max_workers``.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        client: Client | None = None,
        async_client: AsyncClient | None = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or ClientConfig()

        client_kwargs = get_httpx_client_kwargs(self._config)

        self._client = client or Client(**client_kwargs)
        self._client_async = async_client or AsyncClient(**client_kwargs)
        self._executor = ThreadPoolExecutor(
            max_workers=self._config.max_workers, thread_name_prefix="apikit"
        )

        self.closing: "asyncio.Task[None] | None" = None

        self._logger.debug(f"HEADERS: {self._config.default_headers}")

    def send(self, request: WireRequest) -> TransportResponse:
        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {request.headers}")

        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=request.httpx_headers(),
                content=request.content,
            )
        except Exception as e:
            return self._failed(request, e)

        return _to_transport_response(response)

    def send_with_callback(
        self, request: WireRequest, callback: TransportCallback
    ) -> "Future[None]":
        def run() -> None:
            callback(self.send(request))

        return self._executor.submit(run)

    async def stream(
        self, request: WireRequest
    ) -> AsyncGenerator[TransportResponse, None]:
        yield await self.send_async(request)

    async def send_async(self, request: WireRequest) -> TransportResponse:
        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {request.headers}")

        try:
            response = await self._client_async.request(
                request.method,
                request.url,
                headers=request.httpx_headers(),
                content=request.content,
            )
        except Exception as e:
            return self._failed(request, e)

        return _to_transport_response(response)

    def _failed(self, request: WireRequest, error: Exception) -> TransportResponse:
        if isinstance(error, HTTPError):
            self._logger.warning(
                f"Transport failure for {request.method} {request.url}: {error!r}"
            )
        else:
            self._logger.exception(
                f"Unexpected failure for {request.method} {request.url}"
            )
        return TransportResponse(error=error)

    def _close_sync(self, *, wait: bool) -> None:
        self._executor.shutdown(wait=wait)
        self._client.close()

    def close(self) -> None:
        """Release the thread pool and both clients.

        Inside a running event loop the async client is closed on a task kept
        in ``closing``; otherwise it is closed before returning.
        """
        self._close_sync(wait=True)
        if self._client_async.is_closed:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._client_async.aclose())
        else:
            self.closing = loop.create_task(self._client_async.aclose())

    async def aclose(self) -> None:
        self._close_sync(wait=False)
        await self._client_async.aclose()
