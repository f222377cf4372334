"""Protocolos consumidos pelo pipeline da Graph API."""

from fbgraph.protocols.transport import GraphTransport, RequestOptions, TransportResponse

__all__ = [
    "GraphTransport",
    "RequestOptions",
    "TransportResponse",
]
