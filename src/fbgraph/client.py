"""Fachada pública da Graph API com contrato de callback.

Cada operação aceita um ``callback(error, result)`` opcional, invocado
exatamente uma vez, e retorna o mesmo desfecho como GraphOutcome.
Erros de chamada nunca são levantados por esta fachada.

Exemplo:

    client = GraphClient().set_access_token(token)

    outcome = await client.get("zuck", {"fields": "picture"})
    if outcome.ok:
        print(outcome.value)

    await client.post("me/feed", {"message": "Olá"}, callback=on_done)
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from fbgraph.config.settings import ClientConfig, get_graph_settings
from fbgraph.connectors.graph.models import GraphOutcome, HttpMethod
from fbgraph.connectors.graph.pipeline import RequestPipeline
from fbgraph.connectors.graph.url_builder import append_query, encode_params
from fbgraph.oauth import EXCHANGE_GRANT_TYPE, OAUTH_TOKEN_PATH, build_oauth_dialog_url
from fbgraph.utils.errors import InvalidInputError

if TYPE_CHECKING:
    from fbgraph.config.settings import GraphSettings
    from fbgraph.connectors.graph.pipeline import Completion
    from fbgraph.protocols.transport import GraphTransport

URL_TYPE_ERROR = "Graph api url must be a string"
BATCH_TYPE_ERROR = "Graph api batch requests must be an array"
BATCH_ENCODING_ERROR = "Graph api batch requests must be JSON serializable"
PARAMS_TYPE_ERROR = "Graph api params must be an object"
PARAMS_ENCODING_ERROR = "Graph api params could not be encoded"

# DELETE é emulado via POST com method=delete na query
_METHOD_DELETE_RE = re.compile(r"[?&]method=delete", re.IGNORECASE)


def _deliver(outcome: GraphOutcome, callback: Completion | None) -> GraphOutcome:
    if callback is not None:
        callback(outcome.error, outcome.value)
    return outcome


def _encode_checked(params: Any) -> str:
    if params is not None and not isinstance(params, Mapping):
        raise InvalidInputError(PARAMS_TYPE_ERROR)
    try:
        return encode_params(params)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(PARAMS_ENCODING_ERROR, cause=exc) from exc


def _token_from(outcome: GraphOutcome) -> str | None:
    value = outcome.value
    if isinstance(value, Mapping):
        return value.get("access_token") or None
    return None


class GraphClient:
    """Cliente da Graph API.

    Args:
        config: Configuração própria do cliente; padrão ClientConfig().
        transport: Transporte HTTP; padrão HttpxTransport.
        pipeline: Pipeline pronto (ignora ``transport`` se informado).
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: GraphTransport | None = None,
        pipeline: RequestPipeline | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._pipeline = pipeline or RequestPipeline(transport)

    # Configuração

    @property
    def config(self) -> ClientConfig:
        return self._config

    def set_access_token(self, token: str | None) -> GraphClient:
        self._config.access_token = token
        return self

    def get_access_token(self) -> str | None:
        return self._config.access_token

    def set_app_secret(self, secret: str | None) -> GraphClient:
        """Define o app secret; todas as chamadas passam a levar appsecret_proof."""
        self._config.app_secret = secret
        return self

    def get_app_secret(self) -> str | None:
        return self._config.app_secret

    def set_graph_url(self, url: str) -> GraphClient:
        self._config.graph_url = url
        return self

    def get_graph_url(self) -> str:
        return self._config.graph_url

    def set_version(self, version: str) -> GraphClient:
        """Define a versão da API sem o "v" (ex: "2.9"); atualiza o diálogo OAuth."""
        self._config.set_version(version)
        return self

    def get_version(self) -> str:
        return self._config.version

    def set_options(self, options: Mapping[str, Any]) -> GraphClient:
        """Define opções do transporte (timeout, headers, verify...)."""
        self._config.set_request_options(options)
        return self

    def get_options(self) -> dict[str, Any]:
        return self._config.request_options

    def get_oauth_url(self, params: Mapping[str, Any], mobile: bool = False) -> str:
        base = self._config.oauth_dialog_url_mobile if mobile else self._config.oauth_dialog_url
        return build_oauth_dialog_url(base, params)

    # Operações

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        callback: Completion | None = None,
    ) -> GraphOutcome:
        """Lê um objeto ou conexão.

        Parâmetros podem vir no path (``"zuck?fields=picture"``) ou em
        ``params``. Redirects para imagem (ex: ``"zuck/picture"``) retornam
        ``{"image": True, "location": ...}``.
        """
        return await self._get_outcome(path, params, callback)

    async def post(
        self,
        path: str,
        body_params: Mapping[str, Any] | None = None,
        callback: Completion | None = None,
    ) -> GraphOutcome:
        """Publica no grafo. Sem ``body_params``, envia apenas o access_token."""
        return await self._post_outcome(path, body_params, callback)

    async def delete(
        self,
        path: str,
        body_params: Mapping[str, Any] | None = None,
        callback: Completion | None = None,
    ) -> GraphOutcome:
        """Remove um objeto: POST com ``method=delete`` na query."""
        if not isinstance(path, str):
            return _deliver(GraphOutcome.failure(InvalidInputError(URL_TYPE_ERROR)), callback)
        if not _METHOD_DELETE_RE.search(path):
            path = append_query(path, "method=delete")
        return await self._post_outcome(path, body_params, callback)

    async def batch(
        self,
        requests: Sequence[Mapping[str, Any]],
        extra: Mapping[str, Any] | None = None,
        callback: Completion | None = None,
    ) -> GraphOutcome:
        """Executa várias requisições em uma só chamada.

        Args:
            requests: Lista de requisições (``method``, ``relative_url``...)
            extra: Campos adicionais, ex: anexos ou ``include_headers``
        """
        if isinstance(requests, (str, bytes)) or not isinstance(requests, Sequence):
            return _deliver(GraphOutcome.failure(InvalidInputError(BATCH_TYPE_ERROR)), callback)

        try:
            encoded = json.dumps(list(requests), separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            error = InvalidInputError(BATCH_ENCODING_ERROR, cause=exc)
            return _deliver(GraphOutcome.failure(error), callback)
        if extra is not None and not isinstance(extra, Mapping):
            return _deliver(GraphOutcome.failure(InvalidInputError(PARAMS_TYPE_ERROR)), callback)

        body = {
            "access_token": self._config.access_token,
            "batch": encoded,
            **(extra or {}),
        }
        return await self._post_outcome("", body, callback)

    async def authorize(
        self,
        params: Mapping[str, Any],
        callback: Completion | None = None,
    ) -> GraphOutcome:
        """Troca o ``code`` OAuth por um token e o guarda no cliente.

        Args:
            params: client_id, redirect_uri, client_secret e code
        """
        outcome = await self._get_outcome(OAUTH_TOKEN_PATH, params)
        token = _token_from(outcome)
        if outcome.ok and token:
            self.set_access_token(token)
        return _deliver(outcome, callback)

    async def extend_access_token(
        self,
        params: Mapping[str, Any],
        callback: Completion | None = None,
    ) -> GraphOutcome:
        """Estende a validade de um token.

        Sem ``access_token`` em ``params``, estende o token do próprio
        cliente e o substitui pelo novo.

        Args:
            params: client_id, client_secret e access_token (opcional)
        """
        if not isinstance(params, Mapping):
            return _deliver(GraphOutcome.failure(InvalidInputError(PARAMS_TYPE_ERROR)), callback)

        own_token = params.get("access_token")
        query = {
            **params,
            "grant_type": EXCHANGE_GRANT_TYPE,
            "fb_exchange_token": own_token or self._config.access_token,
        }
        outcome = await self._get_outcome(OAUTH_TOKEN_PATH, query)
        token = _token_from(outcome)
        if outcome.ok and not own_token and token:
            self.set_access_token(token)
        return _deliver(outcome, callback)

    # Internos: sempre retornam GraphOutcome, mesmo em subclasses

    async def _get_outcome(
        self,
        path: str,
        params: Mapping[str, Any] | None,
        callback: Completion | None = None,
    ) -> GraphOutcome:
        if not isinstance(path, str):
            return _deliver(GraphOutcome.failure(InvalidInputError(URL_TYPE_ERROR)), callback)

        try:
            query = _encode_checked(params)
        except InvalidInputError as exc:
            return _deliver(GraphOutcome.failure(exc), callback)

        if query:
            path = append_query(path, query)
        return await self._pipeline.execute(HttpMethod.GET, path, None, self._config, callback)

    async def _post_outcome(
        self,
        path: str,
        body_params: Mapping[str, Any] | None,
        callback: Completion | None = None,
    ) -> GraphOutcome:
        if not isinstance(path, str):
            return _deliver(GraphOutcome.failure(InvalidInputError(URL_TYPE_ERROR)), callback)

        if body_params is None:
            body_params = {} if "access_token" in path else {"access_token": self._config.access_token}

        try:
            _encode_checked(body_params)
        except InvalidInputError as exc:
            return _deliver(GraphOutcome.failure(exc), callback)

        return await self._pipeline.execute(
            HttpMethod.POST, path, body_params, self._config, callback
        )


def create_graph_client(
    settings: GraphSettings | None = None,
    transport: GraphTransport | None = None,
) -> GraphClient:
    """Factory para criar cliente com config do ambiente.

    Args:
        settings: GraphSettings opcional. Se None, carrega do ambiente.
        transport: Transporte opcional (padrão HttpxTransport).
    """
    graph_settings = settings or get_graph_settings()
    return GraphClient(config=graph_settings.to_client_config(), transport=transport)
