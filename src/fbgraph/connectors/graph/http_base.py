"""Transporte HTTP padrão sobre httpx.

Sem retries: uma falha de transporte é terminal para a chamada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from fbgraph.protocols.transport import TransportResponse

if TYPE_CHECKING:
    from fbgraph.protocols.transport import RequestOptions

USER_AGENT = "fbgraph-python"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Chaves de RequestOptions.extra consumidas pelo próprio transporte
_TIMEOUT_KEY = "timeout"
_VERIFY_KEY = "verify"


class HttpError(Exception):
    """Erro de transporte sem dados sensíveis."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class HttpxTransport:
    """Transporte assíncrono baseado em httpx.AsyncClient.

    Args:
        client: AsyncClient opcional; quando ausente, um cliente novo é
            aberto e fechado a cada requisição. Com cliente injetado,
            ``verify`` em RequestOptions.extra é ignorado: vale a
            configuração do próprio cliente.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def send(self, options: RequestOptions) -> TransportResponse:
        headers = {"User-Agent": USER_AGENT, **options.headers}
        if options.body is not None:
            headers.setdefault("Content-Type", "application/x-www-form-urlencoded")
        timeout = options.extra.get(_TIMEOUT_KEY, DEFAULT_TIMEOUT_SECONDS)

        try:
            if self._client is not None:
                response = await self._request(self._client, options, headers, timeout)
            else:
                verify = options.extra.get(_VERIFY_KEY, True)
                async with httpx.AsyncClient(verify=verify) as client:
                    response = await self._request(client, options, headers, timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise HttpError("http_connection_error") from exc

        try:
            body = response.content.decode(options.encoding, errors="replace")
        except LookupError as exc:
            raise HttpError("http_decode_error") from exc

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=body,
        )

    @staticmethod
    async def _request(
        client: httpx.AsyncClient,
        options: RequestOptions,
        headers: dict[str, str],
        timeout: Any,
    ) -> httpx.Response:
        return await client.request(
            options.method,
            options.uri,
            content=options.body,
            headers=headers,
            timeout=timeout,
            follow_redirects=options.follow_redirects,
        )
