"""
Coletor genérico de feeds RSS/Atom.

Extrai por item: título, link, data de publicação, conteúdo (content:encoded
quando existir, senão description) e imagem (media:content, media:thumbnail
ou enclosure de imagem).
"""

import logging

import feedparser

from config import MAX_ITEMS_PER_SOURCE, PLACEHOLDER_IMAGE
from models import Article, is_valid_image_url
from sources.dates import parse_date, parse_date_or_now
from sources.fetch import fetch_text
from text_clean import normalize_text

logger = logging.getLogger(__name__)


def _entry_content(entry) -> str:
    """Prefere o conteúdo completo (content:encoded) à descrição curta."""
    for block in entry.get("content") or []:
        value = block.get("value") if hasattr(block, "get") else None
        if value and value.strip():
            return value
    return entry.get("summary") or entry.get("description") or ""


def _entry_image(entry) -> str:
    for key in ("media_content", "media_thumbnail"):
        for media in entry.get(key) or []:
            url = media.get("url")
            if is_valid_image_url(url):
                return url
    for link in entry.get("links") or []:
        if link.get("rel") == "enclosure" and (link.get("type") or "").startswith("image/"):
            if is_valid_image_url(link.get("href")):
                return link["href"]
    return PLACEHOLDER_IMAGE


def _entry_date(entry):
    for key in ("published_parsed", "updated_parsed"):
        dt = parse_date(entry.get(key))
        if dt is not None:
            return dt
    return parse_date_or_now(entry.get("published") or entry.get("updated"))


def parse_rss(xml_text: str, source_name: str, limit: int = MAX_ITEMS_PER_SOURCE) -> list[Article]:
    """Converte o XML do feed em rascunhos de Article (no máximo `limit`)."""
    feed = feedparser.parse(xml_text)
    if feed.bozo and not feed.entries:
        logger.warning("%s: feed inválido (%s)", source_name, feed.get("bozo_exception"))
        return []

    articles: list[Article] = []
    for entry in feed.entries:
        if len(articles) >= limit:
            break
        try:
            title = normalize_text(entry.get("title"))
            url = (entry.get("link") or "").strip()
            if not title or not url:
                logger.debug("%s: item sem título ou link ignorado", source_name)
                continue
            articles.append(
                Article(
                    title=title,
                    url=url,
                    content=normalize_text(_entry_content(entry)),
                    source=source_name,
                    date=_entry_date(entry),
                    image=_entry_image(entry),
                )
            )
        except Exception as e:
            logger.warning("%s: falha ao ler item do feed: %s", source_name, e)

    logger.info("%s: parsed %d articles (RSS)", source_name, len(articles))
    return articles


def collect_rss(feed_url: str, source_name: str, limit: int = MAX_ITEMS_PER_SOURCE) -> list[Article]:
    """Baixa o feed e retorna os rascunhos; falha total vira lista vazia."""
    try:
        xml_text = fetch_text(feed_url)
    except Exception as e:
        logger.warning("%s: falha ao baixar feed %s: %s", source_name, feed_url, e)
        return []
    return parse_rss(xml_text, source_name, limit=limit)
