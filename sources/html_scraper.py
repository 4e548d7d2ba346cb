"""
Scraper genérico de sites de notícias sem feed.

Fluxo: baixa a página de listagem, descobre links de artigos (padrões de href
e seletores de container), depois entra em cada artigo e extrai corpo, imagem
e data por listas ordenadas de heurísticas. As listas ficam no ScrapeProfile
de cada site (ver sources/invenglobal.py), não no código.

Artigo cujo corpo extraído fica abaixo de min_content_length recebe o texto
placeholder, mas continua na lista (o usuário sempre tem o link da fonte).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from config import (
    MAX_ITEMS_PER_SOURCE,
    MIN_CONTENT_LENGTH,
    PAGE_FETCH_DELAY,
    PLACEHOLDER_CONTENT,
    PLACEHOLDER_IMAGE,
)
from models import Article, is_valid_image_url, now_utc
from pacing import RequestPacer
from sources.dates import parse_date
from sources.fetch import fetch_text
from text_clean import normalize_text

logger = logging.getLogger(__name__)

BOILERPLATE_LINK_TEXT = frozenset({
    "read more",
    "more",
    "see more",
    "view more",
    "continue reading",
    "load more",
    "leia mais",
    "ver mais",
    "saiba mais",
    "comments",
    "share",
})

DEFAULT_CONTENT_SELECTORS = (
    "article .article-content",
    ".article-content",
    ".article-body",
    ".entry-content",
    ".post-content",
    "[itemprop=articleBody]",
    "article",
    "main",
)
DEFAULT_IMAGE_META = (
    ("property", "og:image"),
    ("name", "twitter:image"),
    ("itemprop", "image"),
)
DEFAULT_IMAGE_SELECTORS = (
    "article img",
    ".article-content img",
    "main img",
)
DEFAULT_DATE_META = (
    ("property", "article:published_time"),
    ("property", "og:published_time"),
    ("itemprop", "datePublished"),
    ("name", "pubdate"),
    ("name", "publish-date"),
    ("name", "date"),
)
DEFAULT_DATE_SELECTORS = (
    "time[datetime]",
    "time",
    ".article-date",
    ".publish-date",
    ".date",
)

# Tags removidas antes da extração de texto
NOISE_TAGS = ("script", "style", "noscript", "nav", "footer", "aside", "form", "iframe")

MIN_PARAGRAPH_LENGTH = 40
MAX_FALLBACK_SENTENCES = 12
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]")

page_pacer = RequestPacer(PAGE_FETCH_DELAY)


@dataclass(frozen=True)
class ScrapeProfile:
    """Configuração de scraping de um site."""

    source_name: str
    list_url: str
    link_patterns: tuple[str, ...] = ()
    link_selectors: tuple[str, ...] = ()
    content_selectors: tuple[str, ...] = DEFAULT_CONTENT_SELECTORS
    image_meta: tuple[tuple[str, str], ...] = DEFAULT_IMAGE_META
    image_selectors: tuple[str, ...] = DEFAULT_IMAGE_SELECTORS
    date_meta: tuple[tuple[str, str], ...] = DEFAULT_DATE_META
    date_selectors: tuple[str, ...] = DEFAULT_DATE_SELECTORS
    boilerplate_text: frozenset = BOILERPLATE_LINK_TEXT
    min_title_length: int = 12
    max_items: int = MAX_ITEMS_PER_SOURCE
    min_content_length: int = MIN_CONTENT_LENGTH
    same_host_only: bool = True


def _normalize_url(base: str, href: str) -> str:
    if not href:
        return ""
    return urljoin(base, href.strip()).split("?")[0].split("#")[0]


def _link_text(a) -> str:
    text = " ".join(a.get_text(" ", strip=True).split())
    if not text:
        text = " ".join((a.get("title") or a.get("aria-label") or "").split())
    return text


def _is_boilerplate(text: str, profile: ScrapeProfile) -> bool:
    return text.lower().strip(" .…>»›→") in profile.boilerplate_text


def discover_links(html: str, profile: ScrapeProfile) -> list[tuple[str, str]]:
    """
    Retorna [(url, título do link)] na ordem da página, sem duplicatas.
    Título vazio quando o link não tem texto útil (o título vem da página do artigo).
    """
    soup = BeautifulSoup(html, "html.parser")
    candidates = []
    for pattern in profile.link_patterns:
        candidates.extend(soup.find_all("a", href=re.compile(pattern)))
    for selector in profile.link_selectors:
        candidates.extend(a for a in soup.select(selector) if a.name == "a")

    base_host = urlparse(profile.list_url).netloc
    links: dict[str, str] = {}
    for a in candidates:
        href = (a.get("href") or "").strip()
        if not href or href.startswith(("#", "javascript:", "mailto:")):
            continue
        url = _normalize_url(profile.list_url, href)
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            continue
        if profile.same_host_only and parsed.netloc != base_host:
            continue
        if url.rstrip("/") == profile.list_url.rstrip("/"):
            continue
        text = _link_text(a)
        if text and _is_boilerplate(text, profile):
            continue
        title = text if len(text) >= profile.min_title_length else ""
        if url in links:
            if not links[url] and title:
                links[url] = title
            continue
        if len(links) >= profile.max_items:
            continue
        links[url] = title

    logger.info("%s: %d links de artigos encontrados", profile.source_name, len(links))
    return list(links.items())


def _text_from_container(node) -> str:
    paragraphs = [p.get_text(" ", strip=True) for p in node.find_all("p")]
    paragraphs = [p for p in paragraphs if p]
    if paragraphs:
        return normalize_text("\n\n".join(paragraphs))
    return normalize_text(node.get_text("\n", strip=True))


def extract_body(soup: BeautifulSoup, profile: ScrapeProfile) -> str:
    """Corpo do artigo: seletores em ordem, depois parágrafos longos, depois frases."""
    for selector in profile.content_selectors:
        node = soup.select_one(selector)
        if node is None:
            continue
        text = _text_from_container(node)
        if len(text) >= profile.min_content_length:
            return text

    paragraphs = [normalize_text(p.get_text(" ", strip=True)) for p in soup.find_all("p")]
    long_paragraphs = [p for p in paragraphs if len(p) >= MIN_PARAGRAPH_LENGTH]
    text = "\n\n".join(long_paragraphs)
    if len(text) >= profile.min_content_length:
        return text

    page = soup.body or soup
    flat = " ".join(normalize_text(page.get_text(" ", strip=True)).split())
    sentences = [s.strip() for s in _SENTENCE_RE.findall(flat)]
    sentences = [s for s in sentences if len(s) >= MIN_PARAGRAPH_LENGTH]
    return " ".join(sentences[:MAX_FALLBACK_SENTENCES])


def extract_image(soup: BeautifulSoup, page_url: str, profile: ScrapeProfile) -> str:
    """Imagem representativa: meta tags antes de imagens no corpo."""
    for attr, value in profile.image_meta:
        tag = soup.find("meta", attrs={attr: value})
        if tag and tag.get("content"):
            candidate = urljoin(page_url, tag["content"].strip())
            if is_valid_image_url(candidate):
                return candidate
    for selector in profile.image_selectors:
        for img in soup.select(selector):
            src = img.get("src") or img.get("data-src") or img.get("data-original")
            if not src or src.startswith("data:"):
                continue
            candidate = urljoin(page_url, src.strip())
            if is_valid_image_url(candidate):
                return candidate
    return PLACEHOLDER_IMAGE


def extract_date(soup: BeautifulSoup, profile: ScrapeProfile) -> datetime | None:
    """Data de publicação: meta tags, depois elementos <time>/classes de data."""
    for attr, value in profile.date_meta:
        tag = soup.find("meta", attrs={attr: value})
        if tag:
            dt = parse_date(tag.get("content"))
            if dt is not None:
                return dt
    for selector in profile.date_selectors:
        for el in soup.select(selector):
            dt = parse_date(el.get("datetime")) or parse_date(el.get_text(" ", strip=True))
            if dt is not None:
                return dt
    return None


def _page_title(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"property": "og:title"})
    if tag and tag.get("content"):
        return normalize_text(tag["content"])
    h1 = soup.find("h1")
    if h1:
        return normalize_text(h1.get_text(" ", strip=True))
    if soup.title and soup.title.string:
        return normalize_text(soup.title.string)
    return ""


def extract_article(html: str, url: str, profile: ScrapeProfile, fallback_title: str = "") -> Article:
    """Monta o Article de uma página; corpo curto demais vira PLACEHOLDER_CONTENT."""
    soup = BeautifulSoup(html, "html.parser")
    title = fallback_title or _page_title(soup) or url
    image = extract_image(soup, url, profile)
    date = extract_date(soup, profile)

    for tag in soup(list(NOISE_TAGS)):
        tag.decompose()
    content = extract_body(soup, profile)
    if len(content) < profile.min_content_length:
        logger.info("%s: conteúdo insuficiente em %s, usando placeholder", profile.source_name, url[:80])
        content = PLACEHOLDER_CONTENT

    return Article(
        title=title,
        url=url,
        content=content,
        source=profile.source_name,
        date=date or now_utc(),
        image=image,
    )


def scrape_listing(profile: ScrapeProfile) -> list[Article]:
    """Baixa a listagem e cada artigo em sequência. Falha total retorna lista vazia."""
    try:
        listing_html = fetch_text(profile.list_url)
    except Exception as e:
        logger.warning("%s: falha ao baixar listagem %s: %s", profile.source_name, profile.list_url, e)
        return []

    articles: list[Article] = []
    for url, title in discover_links(listing_html, profile):
        try:
            page_pacer.wait()
            page_html = fetch_text(url)
            articles.append(extract_article(page_html, url, profile, fallback_title=title))
        except Exception as e:
            logger.warning("%s: falha ao extrair %s: %s", profile.source_name, url[:80], e)
            if title:
                articles.append(
                    Article(
                        title=title,
                        url=url,
                        content=PLACEHOLDER_CONTENT,
                        source=profile.source_name,
                    )
                )

    logger.info("%s: scraped %d articles", profile.source_name, len(articles))
    return articles
