"""Testes para HttpxTransport com httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from fbgraph.connectors.graph.http_base import USER_AGENT, HttpError, HttpxTransport
from fbgraph.protocols.transport import RequestOptions, TransportResponse


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpxTransport:
    """Envio e decodificação via httpx."""

    @pytest.mark.asyncio
    async def test_get_request(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200, text='{"id":"1"}', headers={"Content-Type": "application/json"}
            )

        async with _client(handler) as client:
            response = await HttpxTransport(client).send(
                RequestOptions(method="GET", uri="https://graph.facebook.com/v2.9/me")
            )

        assert response.status_code == 200
        assert response.body == '{"id":"1"}'
        assert "application/json" in response.content_type
        assert captured[0].headers["User-Agent"] == USER_AGENT

    @pytest.mark.asyncio
    async def test_post_sends_form_body(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text="true")

        async with _client(handler) as client:
            await HttpxTransport(client).send(
                RequestOptions(method="POST", uri="https://graph.facebook.com/v2.9/me/feed", body="a=1")
            )

        assert captured[0].method == "POST"
        assert captured[0].content == b"a=1"
        assert captured[0].headers["Content-Type"] == "application/x-www-form-urlencoded"

    @pytest.mark.asyncio
    async def test_redirect_is_not_followed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                302,
                headers={"Location": "https://cdn.example/p.jpg", "Content-Type": "image/jpeg"},
            )

        async with _client(handler) as client:
            response = await HttpxTransport(client).send(
                RequestOptions(method="GET", uri="https://graph.facebook.com/v2.9/zuck/picture")
            )

        assert response.status_code == 302
        assert response.location == "https://cdn.example/p.jpg"

    @pytest.mark.asyncio
    async def test_connection_error_becomes_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(HttpError) as exc_info:
                await HttpxTransport(client).send(
                    RequestOptions(method="GET", uri="https://graph.facebook.com/v2.9/me")
                )

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_url_becomes_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="true")

        async with _client(handler) as client:
            with pytest.raises(HttpError) as exc_info:
                await HttpxTransport(client).send(
                    RequestOptions(method="GET", uri="https://graph.facebook.com/v2.9/me\x01")
                )

        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    @pytest.mark.asyncio
    async def test_unknown_encoding_becomes_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="true")

        async with _client(handler) as client:
            with pytest.raises(HttpError) as exc_info:
                await HttpxTransport(client).send(
                    RequestOptions(method="GET", uri="https://x/me", encoding="no-such-codec")
                )

        assert isinstance(exc_info.value.__cause__, LookupError)

    @pytest.mark.asyncio
    async def test_body_decoded_with_encoding(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content="olá".encode("latin-1"))

        async with _client(handler) as client:
            response = await HttpxTransport(client).send(
                RequestOptions(method="GET", uri="https://x/me", encoding="latin-1")
            )

        assert response.body == "olá"


class TestTransportResponse:
    """Acesso a headers sem diferenciar maiúsculas."""

    def test_header_lookup_is_case_insensitive(self) -> None:
        response = TransportResponse(
            status_code=200, headers={"content-type": "text/plain", "LOCATION": "https://x"}
        )
        assert response.content_type == "text/plain"
        assert response.location == "https://x"
        assert response.header("missing") is None
