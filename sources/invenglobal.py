"""
Coletor Inven Global - League of Legends.
URL: https://www.invenglobal.com/lol

A listagem não tem feed: os links de artigos seguem o padrão /lol/articles/<id>/<slug>.
Para cada artigo entra na página e extrai corpo, imagem (og:image) e data.
"""

from config import INVENGLOBAL_LIST_URL, MAX_ITEMS_PER_SOURCE
from models import Article
from sources.html_scraper import DEFAULT_CONTENT_SELECTORS, ScrapeProfile, scrape_listing

SOURCE_NAME = "Inven Global"

PROFILE = ScrapeProfile(
    source_name=SOURCE_NAME,
    list_url=INVENGLOBAL_LIST_URL,
    link_patterns=(
        r"/lol/articles/\d+",
        r"/articles/\d+",
    ),
    link_selectors=(
        ".article-list a",
        ".list-article a",
        ".news-list a",
        ".title a",
    ),
    content_selectors=(
        "#article-content",
        "#articleContent",
        ".article-content",
        ".articleContent",
        ".view-content",
        ".article-view",
    ) + DEFAULT_CONTENT_SELECTORS,
    max_items=MAX_ITEMS_PER_SOURCE,
)


def collect_invenglobal_lol() -> list[Article]:
    """Baixa a listagem LoL do Inven Global e retorna rascunhos de artigos."""
    return scrape_listing(PROFILE)
