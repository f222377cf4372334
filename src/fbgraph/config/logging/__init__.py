"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from fbgraph.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação que usa o cliente
    configure_logging(level="INFO", service_name="fbgraph")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("graph_request_completed", extra={"status_code": 200})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Tokens e segredos nunca entram nos logs (ver connectors.graph.meta_logging).
"""

from fbgraph.config.logging.config import configure_logging, get_logger
from fbgraph.config.logging.filters import CorrelationIdFilter
from fbgraph.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]
