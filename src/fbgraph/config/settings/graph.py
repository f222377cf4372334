"""Settings da Graph API carregadas do ambiente.

Cada cliente possui seu próprio ClientConfig; estas settings apenas
fornecem os valores iniciais para ``create_graph_client``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fbgraph.config.settings.client import ClientConfig

# Constantes da Graph API
GRAPH_API_VERSION: str = "2.9"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class GraphSettings:
    """Configurações da Graph API.

    Attributes:
        access_token: Token de acesso inicial (opcional)
        app_secret: Secret do app para ``appsecret_proof`` (opcional)
        api_base_url: URL base da Graph API
        api_version: Versão da Graph API, sem o prefixo "v" (ex: 2.9)
        request_timeout_seconds: Timeout repassado ao transporte
    """

    # Credenciais
    access_token: str = ""
    app_secret: str = ""

    # API
    api_base_url: str = GRAPH_API_BASE_URL
    api_version: str = GRAPH_API_VERSION

    # Transporte
    request_timeout_seconds: float = 30.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/v{self.api_version}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith("http"):
            errors.append("GRAPH_API_BASE_URL deve começar com http")

        if not self.api_version or self.api_version.startswith("v"):
            errors.append("GRAPH_API_VERSION deve ser informada sem o prefixo 'v'")

        if self.request_timeout_seconds <= 0:
            errors.append("GRAPH_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.app_secret and not self.access_token:
            errors.append("GRAPH_APP_SECRET configurado sem GRAPH_ACCESS_TOKEN")

        return errors

    def to_client_config(self) -> ClientConfig:
        """Cria um ClientConfig independente a partir destas settings."""
        from fbgraph.config.settings.client import ClientConfig

        config = ClientConfig(
            access_token=self.access_token or None,
            app_secret=self.app_secret or None,
            graph_url=self.api_base_url,
            request_options={"timeout": self.request_timeout_seconds},
        )
        config.set_version(self.api_version)
        return config


def _load_from_env() -> GraphSettings:
    """Carrega GraphSettings a partir de variáveis de ambiente."""
    return GraphSettings(
        access_token=os.getenv("GRAPH_ACCESS_TOKEN", ""),
        app_secret=os.getenv("GRAPH_APP_SECRET", ""),
        api_base_url=os.getenv("GRAPH_API_BASE_URL", GRAPH_API_BASE_URL),
        api_version=os.getenv("GRAPH_API_VERSION", GRAPH_API_VERSION),
        request_timeout_seconds=float(
            os.getenv("GRAPH_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_graph_settings() -> GraphSettings:
    """Retorna instância cacheada de GraphSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
