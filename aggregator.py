"""
Agregador: coleta todas as fontes em sequência, junta, deduplica por URL,
ordena por data (mais recente primeiro), limita e traduz para português.

Se nenhuma fonte retornar artigos, devolve as notícias estáticas: o cliente
sempre recebe uma lista válida e não vazia.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable
from urllib.parse import urlparse

from config import (
    MAX_NEWS,
    NEWS_JSON_NAME,
    NEWS_JSON_URL,
    PLACEHOLDER_CONTENT,
    PLACEHOLDER_IMAGE,
    RSS_FEEDS,
)
from models import Article, NewsResult, is_valid_image_url
from sources.invenglobal import SOURCE_NAME as INVENGLOBAL_NAME, collect_invenglobal_lol
from sources.json_feed import collect_json
from sources.rss import collect_rss
from static_news import get_static_news
from translate_news import translate_articles

logger = logging.getLogger(__name__)

# (source_id, display_name, collect_function)
Source = tuple[str, str, Callable[[], list[Article]]]


def build_sources() -> list[Source]:
    """Inven Global (scraping), feeds RSS de RSS_FEEDS ("Nome|url") e a API JSON opcional."""
    sources: list[Source] = [("invenglobal", INVENGLOBAL_NAME, collect_invenglobal_lol)]
    for entry in RSS_FEEDS:
        name, _, url = entry.partition("|")
        if not url:
            url, name = name, urlparse(name).netloc
        name, url = name.strip(), url.strip()
        sources.append((f"rss:{urlparse(url).netloc}", name, partial(collect_rss, url, name)))
    if NEWS_JSON_URL:
        sources.append(("json", NEWS_JSON_NAME, partial(collect_json, NEWS_JSON_URL, NEWS_JSON_NAME)))
    return sources


SOURCES = build_sources()


def fetch_drafts(sources: list[Source]) -> list[Article]:
    """Roda cada coletor; erro numa fonte não interrompe as demais."""
    drafts: list[Article] = []
    for source_id, display_name, collect_fn in sources:
        try:
            logger.info("Coletando: %s", display_name)
            articles = collect_fn()
            if not articles:
                logger.warning("  Nenhum artigo: %s", display_name)
                continue
            drafts.extend(articles)
            logger.info("  %d artigos (%s)", len(articles), source_id)
        except Exception as e:
            logger.exception("  Erro ao coletar %s: %s", display_name, e)
    return drafts


def _completeness(article: Article) -> int:
    if not article.content or article.content == PLACEHOLDER_CONTENT:
        return 0
    return len(article.content)


def dedupe_by_url(articles: list[Article]) -> list[Article]:
    """Uma notícia por URL: fica a de conteúdo mais completo (empate: a última)."""
    by_url: dict[str, Article] = {}
    for a in articles:
        current = by_url.get(a.url)
        if current is None or _completeness(a) >= _completeness(current):
            by_url[a.url] = a
    return list(by_url.values())


def merge_articles(drafts: list[Article], limit: int = MAX_NEWS) -> list[Article]:
    """Deduplica, ordena por data decrescente e corta em `limit`."""
    valid = [a for a in drafts if a.title and a.url]
    unique = dedupe_by_url(valid)
    unique.sort(key=lambda a: a.date, reverse=True)
    return unique[: max(1, limit)]


def _with_valid_image(article: Article) -> Article:
    if is_valid_image_url(article.image):
        return article
    return article.with_changes(image=PLACEHOLDER_IMAGE)


def collect_news(
    sources: list[Source] | None = None,
    *,
    translate: bool = True,
    limit: int = MAX_NEWS,
) -> NewsResult:
    """
    Executa a coleta completa.

    A tradução roda depois do corte em `limit`, para não gastar requests da
    API com notícias que seriam descartadas.
    """
    sources = SOURCES if sources is None else sources
    drafts = fetch_drafts(sources)
    merged = [_with_valid_image(a) for a in merge_articles(drafts, limit)]

    if not merged:
        logger.warning("Nenhuma notícia coletada; usando notícias estáticas")
        return NewsResult(articles=get_static_news()[: max(1, limit)], fallback=True)

    if translate:
        logger.info("Traduzindo %d notícias para português...", len(merged))
        merged = translate_articles(merged)
    logger.info("Agregação concluída: %d notícias", len(merged))
    return NewsResult(articles=merged)
