"""
Download de páginas, feeds e endpoints JSON com o User-Agent do projeto.
"""

import requests

from config import FETCH_TIMEOUT, USER_AGENT


def _get(url: str) -> requests.Response:
    r = requests.get(
        url,
        headers={"User-Agent": USER_AGENT},
        timeout=FETCH_TIMEOUT,
    )
    r.raise_for_status()
    return r


def fetch_text(url: str) -> str:
    """Baixa o HTML/XML de uma URL."""
    r = _get(url)
    r.encoding = r.apparent_encoding or "utf-8"
    return r.text


def fetch_json(url: str):
    """Baixa e decodifica um endpoint JSON."""
    return _get(url).json()
