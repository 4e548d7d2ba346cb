"""
Coletor genérico de APIs JSON de notícias ({"articles": [...]} ou lista).

Cada atributo lógico tem uma lista de nomes de campo aceitos, em ordem de
prioridade (FIELD_PRIORITY).
"""

import logging

from config import MAX_ITEMS_PER_SOURCE, PLACEHOLDER_IMAGE
from models import Article, is_valid_image_url
from sources.dates import parse_date_or_now
from sources.fetch import fetch_json
from text_clean import normalize_text

logger = logging.getLogger(__name__)

FIELD_PRIORITY: dict[str, tuple[str, ...]] = {
    "title": ("title", "headline"),
    "url": ("url", "link"),
    "content": ("content", "description", "summary"),
    "date": ("publishedAt", "date", "published_at", "pubDate"),
    "image": ("urlToImage", "image", "thumbnail"),
}


def pick_field(item: dict, attribute: str):
    """Primeiro valor não vazio entre os nomes aceitos para o atributo."""
    for name in FIELD_PRIORITY[attribute]:
        value = item.get(name)
        if value not in (None, ""):
            return value
    return None


def _article_list(payload) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("articles", "news", "items", "data"):
            if isinstance(payload.get(key), list):
                return payload[key]
    return []


def normalize_item(item: dict, source_name: str) -> Article | None:
    """Mapeia um objeto da API no formato Article; None se faltar título ou link."""
    title = normalize_text(str(pick_field(item, "title") or ""))
    url = str(pick_field(item, "url") or "").strip()
    if not title or not url:
        return None
    image = pick_field(item, "image")
    return Article(
        title=title,
        url=url,
        content=normalize_text(str(pick_field(item, "content") or "")),
        source=source_name,
        date=parse_date_or_now(pick_field(item, "date")),
        image=image if is_valid_image_url(image) else PLACEHOLDER_IMAGE,
    )


def parse_json_articles(payload, source_name: str, limit: int = MAX_ITEMS_PER_SOURCE) -> list[Article]:
    articles: list[Article] = []
    for item in _article_list(payload):
        if len(articles) >= limit:
            break
        if not isinstance(item, dict):
            continue
        try:
            article = normalize_item(item, source_name)
        except Exception as e:
            logger.warning("%s: falha ao ler item JSON: %s", source_name, e)
            continue
        if article is not None:
            articles.append(article)

    logger.info("%s: parsed %d articles (JSON)", source_name, len(articles))
    return articles


def collect_json(api_url: str, source_name: str, limit: int = MAX_ITEMS_PER_SOURCE) -> list[Article]:
    try:
        payload = fetch_json(api_url)
    except Exception as e:
        logger.warning("%s: falha ao baixar %s: %s", source_name, api_url, e)
        return []
    return parse_json_articles(payload, source_name, limit=limit)
