"""Cliente Python para a Graph API do Facebook.

Uso:
    from fbgraph import GraphClient, GraphAPI, graph

    graph.set_access_token(token).set_app_secret(app_secret)
    outcome = await graph.get("me", {"fields": "id,name"})

    api = GraphAPI().set_access_token(token)
    friends = await api.get("me/friends")
"""

from fbgraph.client import GraphClient, create_graph_client
from fbgraph.config.settings import ClientConfig, GraphSettings, get_graph_settings
from fbgraph.connectors.graph import (
    GraphOutcome,
    HttpxTransport,
    NormalizedResult,
    RequestPipeline,
    ResponseShape,
)
from fbgraph.graph_api import GraphAPI
from fbgraph.utils.errors import (
    CallError,
    GraphError,
    InvalidInputError,
    RemoteApiError,
    ResponseParseError,
    TransportError,
)

__version__ = "1.3.0"

# Instância padrão para chamadas de conveniência
graph = GraphClient()

__all__ = [
    "CallError",
    "ClientConfig",
    "GraphAPI",
    "GraphClient",
    "GraphError",
    "GraphOutcome",
    "GraphSettings",
    "HttpxTransport",
    "InvalidInputError",
    "NormalizedResult",
    "RemoteApiError",
    "RequestPipeline",
    "ResponseParseError",
    "ResponseShape",
    "TransportError",
    "create_graph_client",
    "get_graph_settings",
    "graph",
]
