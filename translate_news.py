"""
Tradução de título e conteúdo para português (EN -> PT).

Usa a API gratuita do MyMemory (ou deep-translator/Google, se configurado), em
trechos de até TRANSLATION_CHUNK_SIZE caracteres, com cache e intervalo mínimo
entre requests para evitar rate limit. Qualquer falha num trecho cai para o
dicionário local: a tradução nunca levanta exceção para quem chama.
"""

from __future__ import annotations

import html
import logging
import re

import requests
from deep_translator import GoogleTranslator

from config import (
    DICTIONARY_ENRICHMENT,
    PLACEHOLDER_CONTENT,
    SOURCE_LANG,
    TARGET_LANG,
    TRANSLATION_CACHE_MAX,
    TRANSLATION_CHUNK_SIZE,
    TRANSLATION_DELAY,
    TRANSLATION_PROVIDER,
    TRANSLATION_TIMEOUT,
    TRANSLATION_URL,
    USER_AGENT,
)
from dictionary_pt import translate_with_dictionary
from models import Article
from pacing import RequestPacer

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"
_SENTENCE_END_RE = re.compile(r"[.!?][\"')\]]?\s")
_QUOTA_MARKERS = ("MYMEMORY WARNING", "QUERY LENGTH LIMIT EXCEEDED")

# Cache: trecho original -> trecho traduzido (só traduções bem-sucedidas)
_cache: dict[str, str] = {}

translation_pacer = RequestPacer(TRANSLATION_DELAY)


def clear_cache() -> None:
    _cache.clear()


def _split_long_paragraph(paragraph: str, max_chars: int) -> list[tuple[str, str]]:
    """
    Quebra um parágrafo maior que max_chars em (separador, trecho).
    Prefere fim de frase, depois espaço; sem espaço, corta no limite.
    """
    pieces: list[tuple[str, str]] = []
    sep = ""
    rest = paragraph
    while len(rest) > max_chars:
        window = rest[: max_chars + 1]
        cut = -1
        for m in _SENTENCE_END_RE.finditer(window):
            cut = m.end() - 1
        if cut <= 0:
            cut = max(window.rfind(" "), window.rfind("\n"))
        if cut <= 0:
            pieces.append((sep, rest[:max_chars]))
            sep, rest = "", rest[max_chars:]
        else:
            pieces.append((sep, rest[:cut]))
            sep, rest = rest[cut], rest[cut + 1 :]
    if rest or not pieces:
        pieces.append((sep, rest))
    return pieces


def chunk_text(text: str, max_chars: int = TRANSLATION_CHUNK_SIZE) -> list[tuple[str, str]]:
    """
    Divide o texto em trechos de no máximo max_chars.

    Retorna pares (separador que precede o trecho, trecho); juntar
    separador + trecho na ordem reconstrói o texto original.
    """
    chunks: list[tuple[str, str]] = []
    for i, paragraph in enumerate(text.split(PARAGRAPH_SEPARATOR)):
        lead = PARAGRAPH_SEPARATOR if i else ""
        if len(paragraph) <= max_chars:
            chunks.append((lead, paragraph))
            continue
        pieces = _split_long_paragraph(paragraph, max_chars)
        chunks.append((lead + pieces[0][0], pieces[0][1]))
        chunks.extend(pieces[1:])
    return chunks


def extract_translation(data) -> str | None:
    """Lê {responseStatus, responseData: {translatedText}}; None se o envelope não for válido."""
    if not isinstance(data, dict):
        return None
    try:
        status = int(data.get("responseStatus"))
    except (TypeError, ValueError):
        return None
    if status != 200:
        return None
    payload = data.get("responseData")
    if not isinstance(payload, dict):
        return None
    out = payload.get("translatedText")
    if not isinstance(out, str) or not out.strip():
        return None
    if any(marker in out.upper() for marker in _QUOTA_MARKERS):
        return None
    return html.unescape(out).strip()


def _request_mymemory(text: str) -> str | None:
    r = requests.get(
        TRANSLATION_URL,
        params={"q": text, "langpair": f"{SOURCE_LANG}|{TARGET_LANG}"},
        headers={"User-Agent": USER_AGENT},
        timeout=TRANSLATION_TIMEOUT,
    )
    r.raise_for_status()
    return extract_translation(r.json())


def _request_google(text: str) -> str | None:
    out = GoogleTranslator(source=SOURCE_LANG, target=TARGET_LANG).translate(text)
    if out and out.strip():
        return out.strip()
    return None


def _request_translation(text: str) -> str | None:
    if TRANSLATION_PROVIDER == "google":
        return _request_google(text)
    return _request_mymemory(text)


def _remember(original: str, translated: str) -> None:
    if len(_cache) >= TRANSLATION_CACHE_MAX:
        _cache.clear()
    _cache[original] = translated


def _translate_chunk(chunk: str) -> str:
    core = chunk.strip()
    if not core:
        return chunk
    # preserva espaços nas bordas do trecho
    head = chunk[: len(chunk) - len(chunk.lstrip())]
    tail = chunk[len(chunk.rstrip()) :]
    if core in _cache:
        return head + _cache[core] + tail

    out = None
    try:
        translation_pacer.wait()
        out = _request_translation(core)
        if out is None:
            logger.warning("Resposta de tradução inválida; usando dicionário")
    except Exception as e:
        logger.warning("Falha na tradução (%s): %s", TRANSLATION_PROVIDER, e)
    if out is None:
        return head + translate_with_dictionary(core) + tail

    # html.unescape da resposta pode trazer "<" e ">" de volta
    out = out.replace("<", "").replace(">", "")
    if DICTIONARY_ENRICHMENT:
        out = translate_with_dictionary(out)
    _remember(core, out)
    return head + out + tail


def translate_to_portuguese(text: str | None) -> str | None:
    """Traduz um texto para português. Vazio/None volta sem alteração e sem request."""
    if not text or not text.strip():
        return text
    return "".join(sep + _translate_chunk(chunk) for sep, chunk in chunk_text(text))


def translate_article(article: Article) -> Article:
    """Traduz título e conteúdo; o conteúdo placeholder (já em PT) não é enviado."""
    title = translate_to_portuguese(article.title) or article.title
    content = article.content
    if content and content != PLACEHOLDER_CONTENT:
        content = translate_to_portuguese(content)
    return article.with_changes(title=title, content=content, translated=True)


def translate_articles(articles: list[Article]) -> list[Article]:
    """Traduz cada notícia em sequência (o pacer controla o intervalo entre requests)."""
    return [translate_article(a) for a in articles]
