"""Montagem de URLs da Graph API.

A ordem dos passos é fixa, pois cada um enxerga o resultado do anterior:

1. remove espaços das pontas;
2. define o token de assinatura: o ``access_token`` já presente no path ou,
   na falta dele, o token do cliente;
3. garante a barra inicial em paths relativos;
4. prefixa ``graph_url + "/v" + version`` em paths relativos;
5. anexa ``access_token`` do cliente se o path ainda não tiver um;
6. anexa ``appsecret_proof`` (HMAC-SHA256 do token de assinatura com o
   app secret) se houver token de assinatura e app secret.

Nenhum IO; mesmo resultado para as mesmas entradas.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING
from urllib.parse import urlencode

if TYPE_CHECKING:
    from fbgraph.config.settings.client import ClientConfig

# Qualquer path começando assim já é uma URL completa (http:// ou https://)
URL_SCHEME_PREFIX = "http"

_ACCESS_TOKEN_RE = re.compile(r"access_token=([^&]*)")


def append_query(url: str, fragment: str) -> str:
    """Anexa ``fragment`` à query string usando ``?`` ou ``&``."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{fragment}"


def compute_appsecret_proof(access_token: str, app_secret: str) -> str:
    """HMAC-SHA256 do token com o app secret como chave, em hex."""
    return hmac.new(
        app_secret.encode("utf-8"),
        access_token.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def is_absolute(url: str) -> bool:
    return url.startswith(URL_SCHEME_PREFIX)


def signing_token(url: str, config: ClientConfig) -> str | None:
    """Token usado como entrada do HMAC.

    O token embutido no path tem precedência sobre o token do cliente.
    Um ``access_token=`` vazio no path resulta em nenhum token de assinatura.
    """
    match = _ACCESS_TOKEN_RE.search(url)
    if match:
        return match.group(1)
    return config.access_token


def build_url(raw_path: str, config: ClientConfig) -> str:
    """Monta a URL completa de uma chamada.

    Args:
        raw_path: Path relativo (``me/feed``, ``/me?fields=id``) ou URL completa
        config: Snapshot da configuração do cliente

    Returns:
        URL absoluta com ``access_token`` e ``appsecret_proof`` quando aplicável
    """
    url = raw_path.strip()
    token = signing_token(url, config)

    if not is_absolute(url) and not url.startswith("/"):
        url = "/" + url

    if not is_absolute(url):
        url = f"{config.graph_url}/v{config.version}{url}"

    if config.access_token and "access_token=" not in url:
        url = append_query(url, f"access_token={config.access_token}")

    if token and config.app_secret and "appsecret_proof" not in url:
        proof = compute_appsecret_proof(token, config.app_secret)
        url = append_query(url, f"appsecret_proof={proof}")

    return url


def _encode_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode_params(params: Mapping[str, object] | None) -> str:
    """Codifica parâmetros como ``application/x-www-form-urlencoded``.

    Valores None são omitidos; bool vira ``true``/``false``; listas e dicts
    vão como JSON compacto (formato aceito pela Graph API).
    """
    if not params:
        return ""
    pairs = [(key, _encode_value(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs)
