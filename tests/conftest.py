"""Configuração do pytest para o projeto fbgraph."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fbgraph.config.settings import get_graph_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas; cada teste lê o ambiente do zero."""
    get_graph_settings.cache_clear()
    yield
    get_graph_settings.cache_clear()
