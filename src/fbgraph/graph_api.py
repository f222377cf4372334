"""Fachada que retorna o valor ou levanta o erro.

Adaptador fino sobre GraphClient: o mesmo pipeline, o mesmo desfecho
único, entregue como ``return`` ou ``raise``.

    api = GraphAPI().set_access_token(token)
    profile = await api.get("me")
    await api.post("me/feed", {"message": "Olá"})
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from fbgraph.client import GraphClient
from fbgraph.connectors.graph.models import GraphOutcome


def _unwrap(outcome: GraphOutcome) -> Any:
    if outcome.error is not None:
        raise outcome.error
    return outcome.value


class GraphAPI(GraphClient):
    """Cliente da Graph API que levanta CallError em caso de falha."""

    async def get(  # type: ignore[override]
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return _unwrap(await super().get(path, params))

    async def post(  # type: ignore[override]
        self,
        path: str,
        body_params: Mapping[str, Any] | None = None,
    ) -> Any:
        return _unwrap(await super().post(path, body_params))

    async def delete(  # type: ignore[override]
        self,
        path: str,
        body_params: Mapping[str, Any] | None = None,
    ) -> Any:
        return _unwrap(await super().delete(path, body_params))

    async def batch(  # type: ignore[override]
        self,
        requests: Sequence[Mapping[str, Any]],
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        return _unwrap(await super().batch(requests, extra))

    async def authorize(self, params: Mapping[str, Any]) -> Any:  # type: ignore[override]
        return _unwrap(await super().authorize(params))

    async def extend_access_token(self, params: Mapping[str, Any]) -> Any:  # type: ignore[override]
        return _unwrap(await super().extend_access_token(params))
