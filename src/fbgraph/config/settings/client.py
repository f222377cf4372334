"""Estado de configuração de um cliente da Graph API.

Um ClientConfig pertence a exatamente um cliente e só é alterado pelos
setters. O pipeline lê um ``snapshot()`` no momento de montar a URL, então
mudanças feitas com chamadas em andamento não afetam essas chamadas.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from fbgraph.config.settings.graph import GRAPH_API_BASE_URL, GRAPH_API_VERSION

# Versão mais antiga aceita pelo diálogo OAuth
OAUTH_DIALOG_VERSION: str = "2.0"


def oauth_dialog_url(version: str, mobile: bool = False) -> str:
    host = "m.facebook.com" if mobile else "www.facebook.com"
    return f"https://{host}/v{version}/dialog/oauth?"


@dataclass
class ClientConfig:
    """Configuração por cliente.

    Attributes:
        access_token: Token anexado a cada requisição (opcional)
        app_secret: Secret usado no HMAC do ``appsecret_proof`` (opcional)
        graph_url: Host base da Graph API
        version: Versão da API, sem o prefixo "v"
        request_options: Opções repassadas ao transporte (timeout, headers...)
        oauth_dialog_url: URL do diálogo OAuth (desktop)
        oauth_dialog_url_mobile: URL do diálogo OAuth (mobile)
    """

    access_token: str | None = None
    app_secret: str | None = None
    graph_url: str = GRAPH_API_BASE_URL
    version: str = GRAPH_API_VERSION
    request_options: dict[str, Any] = field(default_factory=dict)
    oauth_dialog_url: str = field(default_factory=lambda: oauth_dialog_url(OAUTH_DIALOG_VERSION))
    oauth_dialog_url_mobile: str = field(
        default_factory=lambda: oauth_dialog_url(OAUTH_DIALOG_VERSION, mobile=True)
    )

    def set_version(self, version: str) -> None:
        """Define a versão da API e atualiza as URLs do diálogo OAuth."""
        self.version = version
        self.oauth_dialog_url = oauth_dialog_url(version)
        self.oauth_dialog_url_mobile = oauth_dialog_url(version, mobile=True)

    def set_request_options(self, options: Any) -> None:
        """Substitui as opções de transporte; entradas que não são mapping são ignoradas."""
        if isinstance(options, Mapping):
            self.request_options = dict(options)

    def snapshot(self) -> ClientConfig:
        """Cópia independente usada por uma única chamada."""
        return replace(self, request_options=dict(self.request_options))
