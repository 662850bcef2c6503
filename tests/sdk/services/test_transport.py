import json
import threading

import httpx
import pytest
from pytest_httpx import HTTPXMock

from apikit import ClientConfig, HttpxTransport, TransportResponse, WireRequest


@pytest.fixture
def transport(config: ClientConfig):
    http_transport = HttpxTransport(config)
    yield http_transport
    http_transport.close()


@pytest.fixture
def request_() -> WireRequest:
    return WireRequest(
        url="https://api.x.com/users?id=7",
        method="POST",
        headers=(("X-A", "1"), ("X-A", "2"), ("Content-Type", "application/json")),
        content=b'{"name":"Ada"}',
    )


class TestHttpxTransport:
    class TestSend:
        def test_send_returns_raw_response(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport, request_: WireRequest
        ) -> None:
            httpx_mock.add_response(
                url="https://api.x.com/users?id=7",
                method="POST",
                status_code=201,
                json={"id": 7},
                headers={"X-Request-Id": "abc"},
            )

            response = transport.send(request_)

            assert response.error is None
            assert response.status_code == 201
            assert json.loads(response.data) == {"id": 7}
            assert ("x-request-id", "abc") in response.headers

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "POST"
            assert sent_request.headers.get_list("X-A") == ["1", "2"]
            assert sent_request.headers["Accept"] == "application/json"
            assert sent_request.headers["User-Agent"] == "apikit-python/0.1.0"
            assert sent_request.content == b'{"name":"Ada"}'

        def test_error_status_is_not_a_transport_error(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport, request_: WireRequest
        ) -> None:
            httpx_mock.add_response(status_code=503, text="unavailable")

            response = transport.send(request_)

            assert response.error is None
            assert response.status_code == 503
            assert response.data == b"unavailable"

        def test_connection_failure_is_reported(
            self,
            httpx_mock: HTTPXMock,
            transport: HttpxTransport,
            request_: WireRequest,
            caplog,
        ) -> None:
            httpx_mock.add_exception(httpx.ConnectError("connection refused"))

            response = transport.send(request_)

            assert isinstance(response.error, httpx.ConnectError)
            assert response.status_code is None
            assert response.data is None
            assert any(
                "Transport failure" in record.message for record in caplog.records
            )

        def test_unexpected_exception_is_reported(
            self,
            httpx_mock: HTTPXMock,
            transport: HttpxTransport,
            request_: WireRequest,
            caplog,
        ) -> None:
            httpx_mock.add_exception(ValueError("boom"))

            response = transport.send(request_)

            assert isinstance(response.error, ValueError)
            assert response.status_code is None
            assert any(
                "Unexpected failure" in record.message for record in caplog.records
            )

        def test_unencodable_header_is_reported(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport
        ) -> None:
            request = WireRequest(
                url="https://api.x.com/users",
                method="GET",
                headers=(("X-Name", "José"),),
            )

            response = transport.send(request)

            assert isinstance(response.error, UnicodeEncodeError)
            assert httpx_mock.get_requests() == []

    class TestSendWithCallback:
        def test_callback_runs_on_worker_thread(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport, request_: WireRequest
        ) -> None:
            httpx_mock.add_response(status_code=200, json=[1])
            received: list[tuple[TransportResponse, str]] = []

            future = transport.send_with_callback(
                request_,
                lambda response: received.append(
                    (response, threading.current_thread().name)
                ),
            )
            future.result(timeout=5)

            assert len(received) == 1
            response, thread_name = received[0]
            assert response.status_code == 200
            assert thread_name.startswith("apikit")

        def test_unexpected_exception_reaches_callback_once(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport, request_: WireRequest
        ) -> None:
            httpx_mock.add_exception(ValueError("boom"))
            received: list[TransportResponse] = []

            transport.send_with_callback(request_, received.append).result(timeout=5)

            assert len(received) == 1
            assert isinstance(received[0].error, ValueError)

    class TestAsync:
        @pytest.mark.anyio
        async def test_send_async(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport, request_: WireRequest
        ) -> None:
            httpx_mock.add_response(status_code=200, json={"ok": True})

            response = await transport.send_async(request_)

            assert response.status_code == 200
            assert json.loads(response.data) == {"ok": True}

        @pytest.mark.anyio
        async def test_send_async_timeout_is_reported(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport, request_: WireRequest
        ) -> None:
            httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

            response = await transport.send_async(request_)

            assert isinstance(response.error, httpx.ReadTimeout)

        @pytest.mark.anyio
        async def test_stream_yields_single_response(
            self, httpx_mock: HTTPXMock, transport: HttpxTransport, request_: WireRequest
        ) -> None:
            httpx_mock.add_response(status_code=204)

            responses = [response async for response in transport.stream(request_)]

            assert [r.status_code for r in responses] == [204]

    class TestClose:
        def test_close_releases_both_clients(self, config: ClientConfig) -> None:
            transport = HttpxTransport(config)

            transport.close()

            assert transport._client.is_closed
            assert transport._client_async.is_closed
            assert transport.closing is None

        @pytest.mark.anyio
        async def test_close_inside_running_loop(self, config: ClientConfig) -> None:
            transport = HttpxTransport(config)

            transport.close()

            assert transport._client.is_closed
            assert transport.closing is not None
            await transport.closing
            assert transport._client_async.is_closed

        @pytest.mark.anyio
        async def test_aclose_releases_both_clients(self, config: ClientConfig) -> None:
            transport = HttpxTransport(config)

            await transport.aclose()

            assert transport._client.is_closed
            assert transport._client_async.is_closed
