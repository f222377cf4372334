"""Helpers de logging para a Graph API (sem tokens nem segredos)."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import GraphApiErrorInfo

logger = logging.getLogger(__name__)

# Parâmetros de query cujo valor nunca pode aparecer em logs
SENSITIVE_PARAMS = ("access_token", "appsecret_proof", "client_secret", "fb_exchange_token")

_SENSITIVE_RE = re.compile(r"(?P<key>(?:%s))=[^&#]*" % "|".join(SENSITIVE_PARAMS))


def redact_url(url: str) -> str:
    """Mascara valores de parâmetros sensíveis em uma URL."""
    return _SENSITIVE_RE.sub(r"\g<key>=***", url)


def log_request_sent(method: str, url: str) -> None:
    logger.debug(
        "graph_request_sent",
        extra={"method": method, "url": redact_url(url)},
    )


def log_success(method: str, url: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "graph_request_completed",
        extra={
            "method": method,
            "url": redact_url(url),
            "status_code": status_code,
        },
    )


def log_transport_error(method: str, url: str, exc: BaseException) -> None:
    logger.warning(
        "graph_transport_error",
        extra={
            "method": method,
            "url": redact_url(url),
            "error_class": type(exc).__name__,
        },
    )


def log_parse_error(exc: BaseException) -> None:
    logger.warning("graph_parse_error", extra={"error_class": type(exc).__name__})


def log_remote_error(info: GraphApiErrorInfo | None) -> None:
    """Loga erro da Graph API sem expor dados sensíveis."""
    if info is None:
        logger.warning("graph_remote_error")
        return
    logger.warning(
        "graph_remote_error",
        extra={
            "error_type": info.error_type,
            "error_code": info.error_code,
            "error_subcode": info.error_subcode,
            "fbtrace_id": info.fbtrace_id,
            "is_permanent": info.is_permanent,
        },
    )
