"""Agregador de settings do fbgraph.

Re-exporta settings de ambiente e o estado de configuração por cliente.
"""

from __future__ import annotations

from fbgraph.config.settings.client import (
    OAUTH_DIALOG_VERSION,
    ClientConfig,
    oauth_dialog_url,
)
from fbgraph.config.settings.graph import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    GraphSettings,
    get_graph_settings,
)

__all__ = [
    # Constants
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "OAUTH_DIALOG_VERSION",
    # Client state
    "ClientConfig",
    # Environment
    "GraphSettings",
    "get_graph_settings",
    "oauth_dialog_url",
]
