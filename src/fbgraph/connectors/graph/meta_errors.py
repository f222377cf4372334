"""Erros e helpers de parsing para objetos ``error`` da Graph API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_REMOTE_ERROR_MESSAGE = "Graph API error"


@dataclass(frozen=True)
class GraphApiErrorInfo:
    """Erro retornado pela Graph API dentro de um corpo de resposta."""

    error_type: str
    error_code: int
    error_message: str
    error_subcode: int | None
    fbtrace_id: str | None
    is_permanent: bool  # True se erro não é retentável


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413
    Erros transitórios: 429 (rate limit), 500+ (server errors)
    """
    permanent_codes = {400, 401, 403, 404, 413}
    if error_code in permanent_codes:
        return True

    permanent_types = {"OAuthException", "InvalidRequest"}
    return error_type in permanent_types


def _as_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_graph_error(error_obj: Any) -> GraphApiErrorInfo | None:
    """Extrai informações do objeto ``error`` da Graph API.

    Args:
        error_obj: Valor da chave ``error`` do payload normalizado

    Returns:
        GraphApiErrorInfo se o objeto tiver forma de mapping, None caso contrário
    """
    if not isinstance(error_obj, dict):
        return None

    error_type = str(error_obj.get("type", "unknown"))
    error_code = _as_int(error_obj.get("code")) or 0
    error_message = str(error_obj.get("message", DEFAULT_REMOTE_ERROR_MESSAGE))

    return GraphApiErrorInfo(
        error_type=error_type,
        error_code=error_code,
        error_message=error_message,
        error_subcode=_as_int(error_obj.get("error_subcode")),
        fbtrace_id=error_obj.get("fbtrace_id"),
        is_permanent=is_permanent_error(error_code, error_type),
    )


def remote_error_message(error_obj: Any) -> str:
    """Mensagem legível para um erro remoto de qualquer forma."""
    if isinstance(error_obj, dict) and error_obj.get("message"):
        return str(error_obj["message"])
    if isinstance(error_obj, str) and error_obj:
        return error_obj
    return DEFAULT_REMOTE_ERROR_MESSAGE
