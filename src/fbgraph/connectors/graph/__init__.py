"""Conector Graph API - núcleo de requisição e normalização.

Responsabilidades:
- Montagem de URL (host, versão, access_token, appsecret_proof)
- Transporte HTTP (httpx)
- Normalização dos três formatos de resposta e do marcador de imagem
- Pipeline com conclusão única por chamada
- Parsing e logging de erros da Graph API (sem tokens)
"""

from .http_base import HttpError, HttpxTransport
from .meta_errors import GraphApiErrorInfo, is_permanent_error, parse_graph_error
from .meta_logging import redact_url
from .models import (
    CallRequest,
    CallState,
    GraphOutcome,
    HttpMethod,
    NormalizedResult,
    ResponseShape,
)
from .normalizer import normalize
from .pipeline import Completion, GraphCall, RequestPipeline
from .url_builder import append_query, build_url, compute_appsecret_proof, encode_params

__all__ = [
    "CallRequest",
    "CallState",
    "Completion",
    "GraphApiErrorInfo",
    "GraphCall",
    "GraphOutcome",
    "HttpError",
    "HttpMethod",
    "HttpxTransport",
    "NormalizedResult",
    "RequestPipeline",
    "ResponseShape",
    "append_query",
    "build_url",
    "compute_appsecret_proof",
    "encode_params",
    "is_permanent_error",
    "normalize",
    "parse_graph_error",
    "redact_url",
]
