"""Modelos de chamada e de resultado da Graph API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fbgraph.utils.errors import CallError


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class CallState(str, Enum):
    """Estados de uma chamada: BUILDING -> SENT -> COMPLETED."""

    BUILDING = "building"
    SENT = "sent"
    COMPLETED = "completed"


class ResponseShape(str, Enum):
    """Formato em que a API respondeu."""

    STRUCTURED = "structured"  # JSON
    SCALAR = "scalar"  # valor solto, ex: "true"
    QUERY_STRING = "query_string"  # ex: "access_token=...&expires=..."
    IMAGE = "image"  # redirect para imagem


@dataclass(frozen=True)
class CallRequest:
    """Requisição de uma chamada, imutável após a URL ser resolvida."""

    method: HttpMethod
    path: str
    resolved_url: str
    body_params: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class NormalizedResult:
    """Valor de sucesso reconciliado, com o formato de origem."""

    shape: ResponseShape
    value: Any


@dataclass(frozen=True)
class GraphOutcome:
    """Desfecho de uma chamada: exatamente um de ``result`` ou ``error``."""

    result: NormalizedResult | None = None
    error: CallError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("GraphOutcome exige exatamente um de result ou error")

    @classmethod
    def success(cls, shape: ResponseShape, value: Any) -> GraphOutcome:
        return cls(result=NormalizedResult(shape=shape, value=value))

    @classmethod
    def failure(cls, error: CallError) -> GraphOutcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def value(self) -> Any:
        """Valor normalizado, ou None em caso de erro."""
        return self.result.value if self.result is not None else None
