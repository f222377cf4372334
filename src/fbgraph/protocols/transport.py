"""Contrato do transporte HTTP usado pelo pipeline.

O transporte é uma capacidade externa: conecta, envia bytes e recebe bytes.
Falhas de conexão, timeout ou rede devem ser levantadas como ``HttpError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class RequestOptions:
    """Opções de uma requisição já montada pelo pipeline."""

    method: str
    uri: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    encoding: str = "utf-8"
    follow_redirects: bool = False
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TransportResponse:
    """Metadados e corpo decodificado de uma resposta HTTP."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    def header(self, name: str) -> str | None:
        """Busca de header sem diferenciar maiúsculas/minúsculas."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def content_type(self) -> str | None:
        return self.header("content-type")

    @property
    def location(self) -> str | None:
        return self.header("location")


class GraphTransport(Protocol):
    """Contrato mínimo para o transporte HTTP."""

    async def send(self, options: RequestOptions) -> TransportResponse: ...
