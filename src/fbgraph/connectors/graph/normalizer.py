"""Normalização de respostas da Graph API.

A API responde em três formatos: JSON, valor solto (ex: ``true``) e texto
no estilo query string (ex: respostas de token). Redirects para imagens
viram o marcador ``{"image": True, "location": ...}``.

Regras, sempre nesta ordem (um mesmo corpo pode parecer mais de um formato):

1. corpo já estruturado (não-string) é usado como está;
2. string com ``{`` e ``}`` é lida como JSON; falha vira "Error parsing json";
3. outras strings são lidas como query string; sem ``=``, o corpo inteiro vira
   o valor de ``data``;
4. content-type contendo "image" substitui o resultado pelo marcador de imagem;
5. valor estruturado com ``error`` vira RemoteApiError.

Nenhuma exceção de parsing escapa: o retorno é sempre um GraphOutcome.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlsplit

from fbgraph.connectors.graph.meta_errors import parse_graph_error, remote_error_message
from fbgraph.connectors.graph.meta_logging import log_parse_error, log_remote_error
from fbgraph.connectors.graph.models import GraphOutcome, ResponseShape
from fbgraph.utils.errors import RemoteApiError, ResponseParseError

PARSE_ERROR_MESSAGE = "Error parsing json"

# Chave sintética para respostas que são um valor solto
SCALAR_KEY = "data"


def is_image_content(content_type: str | None) -> bool:
    """True se o content-type contém "image" (casamento por substring)."""
    return content_type is not None and "image" in content_type


def image_marker(location: str | None) -> dict[str, Any]:
    return {"image": True, "location": location}


def image_result(location: str | None) -> GraphOutcome:
    return GraphOutcome.success(ResponseShape.IMAGE, image_marker(location))


def _from_structured(body: Any) -> GraphOutcome:
    return GraphOutcome.success(ResponseShape.STRUCTURED, body)


def _from_json_text(body: str) -> GraphOutcome:
    try:
        value = json.loads(body)
    except (ValueError, RecursionError) as exc:
        return GraphOutcome.failure(ResponseParseError(PARSE_ERROR_MESSAGE, cause=exc))
    return GraphOutcome.success(ResponseShape.STRUCTURED, value)


def _from_query_text(body: str) -> GraphOutcome:
    shape = ResponseShape.QUERY_STRING
    if "=" not in body:
        body = f"{SCALAR_KEY}={body}"
        shape = ResponseShape.SCALAR
    if not body.startswith("?"):
        body = "?" + body

    try:
        parsed = parse_qs(urlsplit(body).query, keep_blank_values=True)
    except ValueError as exc:
        return GraphOutcome.failure(ResponseParseError(PARSE_ERROR_MESSAGE, cause=exc))

    # Chaves repetidas viram lista; as demais ficam como string
    value = {key: items[0] if len(items) == 1 else items for key, items in parsed.items()}
    return GraphOutcome.success(shape, value)


def _parse_body(body: Any) -> GraphOutcome:
    if body is None:
        body = ""
    elif isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    if not isinstance(body, str):
        return _from_structured(body)
    if "{" in body and "}" in body:
        return _from_json_text(body)
    return _from_query_text(body)


def _remote_error(value: Any) -> RemoteApiError | None:
    if not isinstance(value, Mapping) or not value.get("error"):
        return None
    error_obj = value["error"]
    info = parse_graph_error(error_obj)
    log_remote_error(info)
    return RemoteApiError(remote_error_message(error_obj), remote_error=error_obj, info=info)


def normalize(
    body: Any,
    content_type: str | None = None,
    location: str | None = None,
) -> GraphOutcome:
    """Converte um corpo de resposta em resultado normalizado ou erro.

    Args:
        body: Corpo bruto (string) ou já estruturado
        content_type: Header content-type da resposta, se conhecido
        location: Header location (usado no marcador de imagem)

    Returns:
        GraphOutcome com exatamente um de result ou error
    """
    outcome = _parse_body(body)

    if is_image_content(content_type):
        return image_result(location)

    if outcome.error is not None:
        log_parse_error(outcome.error.cause or outcome.error)
        return outcome

    remote = _remote_error(outcome.value)
    if remote is not None:
        return GraphOutcome.failure(remote)
    return outcome
