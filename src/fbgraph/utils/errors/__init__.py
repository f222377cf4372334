"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CallError,
    GraphError,
    InvalidInputError,
    RemoteApiError,
    ResponseParseError,
    TransportError,
)

__all__ = [
    "CallError",
    "GraphError",
    "InvalidInputError",
    "RemoteApiError",
    "ResponseParseError",
    "TransportError",
]
