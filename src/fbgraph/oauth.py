"""URL do diálogo OAuth do Facebook.

Apenas templating de string; o fluxo de redirect fica com a aplicação.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fbgraph.connectors.graph.url_builder import encode_params

# Endpoint de troca de code/token na Graph API
OAUTH_TOKEN_PATH = "/oauth/access_token"

# grant_type usado para estender a validade de um token
EXCHANGE_GRANT_TYPE = "fb_exchange_token"


def build_oauth_dialog_url(base_url: str, params: Mapping[str, Any] | None) -> str:
    """Anexa os parâmetros (client_id, redirect_uri, scope...) à URL do diálogo.

    ``base_url`` já termina em ``?``, como em ClientConfig.oauth_dialog_url.
    """
    return base_url + encode_params(params)
