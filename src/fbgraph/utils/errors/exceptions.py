"""Erros de chamada à Graph API.

Um CallError é um VALOR entregue ao contrato de conclusão (callback).
Somente a fachada GraphAPI o levanta com ``raise``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fbgraph.connectors.graph.meta_errors import GraphApiErrorInfo


class GraphError(Exception):
    """Base para todos os erros do cliente."""


class CallError(GraphError):
    """Falha de uma chamada à Graph API.

    Attributes:
        message: Mensagem legível (sem tokens)
        cause: Exceção subjacente, quando houver
        remote_error: Objeto ``error`` reportado pela própria API
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        remote_error: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.remote_error = remote_error
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidInputError(CallError):
    """Argumento inválido; nenhuma chamada de transporte é feita."""


class TransportError(CallError):
    """Falha de conexão, timeout ou rede."""


class ResponseParseError(CallError):
    """Corpo da resposta não corresponde a nenhum formato tolerado."""


class RemoteApiError(CallError):
    """A API respondeu, mas o payload contém um objeto ``error``."""

    def __init__(
        self,
        message: str,
        remote_error: Any,
        info: GraphApiErrorInfo | None = None,
    ) -> None:
        super().__init__(message, remote_error=remote_error)
        self.info = info
