"""Pipeline de uma chamada à Graph API.

Estados: BUILDING -> SENT -> COMPLETED. O único ponto de suspensão é o
envio ao transporte. A conclusão é entregue exatamente uma vez, com
resultado normalizado OU erro.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from fbgraph.connectors.graph.http_base import HttpError, HttpxTransport
from fbgraph.connectors.graph.meta_logging import (
    log_request_sent,
    log_success,
    log_transport_error,
)
from fbgraph.connectors.graph.models import CallRequest, CallState, GraphOutcome, HttpMethod
from fbgraph.connectors.graph.normalizer import image_result, is_image_content, normalize
from fbgraph.connectors.graph.url_builder import build_url, encode_params
from fbgraph.observability.correlation import reset_correlation_id, set_correlation_id
from fbgraph.protocols.transport import RequestOptions
from fbgraph.utils.errors import CallError, TransportError

if TYPE_CHECKING:
    from fbgraph.config.settings.client import ClientConfig
    from fbgraph.protocols.transport import GraphTransport, TransportResponse

TRANSPORT_ERROR_MESSAGE = "Error processing https request"
DEFAULT_ENCODING = "utf-8"

Completion = Callable[[CallError | None, Any], None]

# Opções que o pipeline define sozinho; valores do chamador são ignorados
_FIXED_OPTION_KEYS = frozenset(
    {"method", "uri", "url", "body", "follow_redirects", "followRedirect"}
)


class GraphCall:
    """Uma chamada em andamento e sua máquina de estados."""

    def __init__(self, request: CallRequest, callback: Completion | None = None) -> None:
        self.request = request
        self.state = CallState.BUILDING
        self.outcome: GraphOutcome | None = None
        self._callback = callback

    def mark_sent(self) -> None:
        if self.state is not CallState.BUILDING:
            raise RuntimeError(f"transição inválida: {self.state.value} -> sent")
        self.state = CallState.SENT

    def complete(self, outcome: GraphOutcome) -> GraphOutcome:
        """Conclui a chamada e invoca o callback, uma única vez."""
        if self.state is CallState.COMPLETED:
            raise RuntimeError("chamada já concluída")
        self.state = CallState.COMPLETED
        self.outcome = outcome
        if self._callback is not None:
            self._callback(outcome.error, outcome.value)
        return outcome


def build_request_options(
    method: HttpMethod,
    url: str,
    body_params: Mapping[str, Any] | None,
    request_options: Mapping[str, Any],
) -> RequestOptions:
    """Mescla opções do chamador com os campos fixos da chamada.

    ``method``, ``uri`` e redirect desligado sempre prevalecem.
    """
    headers = dict(request_options.get("headers") or {})
    encoding = request_options.get("encoding") or DEFAULT_ENCODING
    extra = {
        key: value
        for key, value in request_options.items()
        if key not in _FIXED_OPTION_KEYS and key not in ("headers", "encoding")
    }
    body = encode_params(body_params) if method is HttpMethod.POST else None

    return RequestOptions(
        method=method.value,
        uri=url,
        headers=headers,
        body=body,
        encoding=encoding,
        follow_redirects=False,
        extra=extra,
    )


class RequestPipeline:
    """Executa chamadas: monta URL, envia pelo transporte e normaliza.

    Args:
        transport: Transporte HTTP; padrão HttpxTransport.
    """

    def __init__(self, transport: GraphTransport | None = None) -> None:
        self._transport = transport or HttpxTransport()

    @property
    def transport(self) -> GraphTransport:
        return self._transport

    async def execute(
        self,
        method: HttpMethod,
        path: str,
        body_params: Mapping[str, Any] | None,
        config: ClientConfig,
        callback: Completion | None = None,
    ) -> GraphOutcome:
        """Executa uma chamada e entrega o desfecho ao callback.

        Args:
            method: GET ou POST
            path: Path relativo ou URL completa
            body_params: Parâmetros do corpo (somente POST)
            config: Configuração do cliente; um snapshot é lido aqui
            callback: Contrato de conclusão ``callback(error, result)``

        Returns:
            O mesmo GraphOutcome entregue ao callback
        """
        token = set_correlation_id()
        try:
            snapshot = config.snapshot()
            url = build_url(path, snapshot)
            call = GraphCall(
                CallRequest(method=method, path=path, resolved_url=url, body_params=body_params),
                callback,
            )
            options = build_request_options(method, url, body_params, snapshot.request_options)
            outcome = await self._send(call, options)
            return call.complete(outcome)
        finally:
            reset_correlation_id(token)

    async def _send(self, call: GraphCall, options: RequestOptions) -> GraphOutcome:
        call.mark_sent()
        log_request_sent(options.method, options.uri)

        try:
            response = await self._transport.send(options)
        except HttpError as exc:
            log_transport_error(options.method, options.uri, exc)
            return GraphOutcome.failure(TransportError(TRANSPORT_ERROR_MESSAGE, cause=exc))

        log_success(options.method, options.uri, response.status_code)
        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: TransportResponse) -> GraphOutcome:
        if is_image_content(response.content_type):
            return image_result(response.location)
        return normalize(response.body, response.content_type, response.location)
