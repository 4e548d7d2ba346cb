# Configuração do projeto
import os


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# User-Agent para requests (evitar bloqueio)
USER_AGENT = os.getenv("NEWS_USER_AGENT", "Mozilla/5.0 (compatible; NewsBot/1.0)")
FETCH_TIMEOUT = _env_float("NEWS_FETCH_TIMEOUT", 15)

# Limites do conjunto de notícias
MAX_NEWS = _env_int("NEWS_MAX_NEWS", 10)
MAX_ITEMS_PER_SOURCE = _env_int("NEWS_MAX_ITEMS_PER_SOURCE", 8)

# Cache em memória (segundos)
CACHE_TTL = _env_int("NEWS_CACHE_TTL", 30 * 60)

# Tradução (MyMemory por padrão; "google" usa deep-translator)
TRANSLATION_PROVIDER = os.getenv("TRANSLATION_PROVIDER", "mymemory").lower()
TRANSLATION_URL = os.getenv("TRANSLATION_URL", "https://api.mymemory.translated.net/get")
SOURCE_LANG = "en"
TARGET_LANG = "pt"
TRANSLATION_TIMEOUT = _env_float("TRANSLATION_TIMEOUT", 5)
TRANSLATION_CHUNK_SIZE = _env_int("TRANSLATION_CHUNK_SIZE", 400)
TRANSLATION_DELAY = _env_float("TRANSLATION_DELAY", 0.3)  # segundos entre requests de tradução
TRANSLATION_CACHE_MAX = 2000
DICTIONARY_ENRICHMENT = os.getenv("DICTIONARY_ENRICHMENT", "1") not in ("0", "false", "no")

# Scraping de páginas de artigo
PAGE_FETCH_DELAY = _env_float("PAGE_FETCH_DELAY", 0.4)
MIN_CONTENT_LENGTH = _env_int("MIN_CONTENT_LENGTH", 150)

PLACEHOLDER_CONTENT = (
    "Conteúdo não disponível no momento. "
    "Clique no link para ler a notícia completa na fonte original."
)
PLACEHOLDER_IMAGE = os.getenv("PLACEHOLDER_IMAGE", "https://www.invenglobal.com/img/ig-logo-light.png")

# Fontes
INVENGLOBAL_LIST_URL = os.getenv("INVENGLOBAL_LIST_URL", "https://www.invenglobal.com/lol")
RSS_FEEDS = _env_list(
    "NEWS_RSS_FEEDS",
    ["Dot Esports|https://dotesports.com/league-of-legends/feed"],
)
# Endpoint JSON opcional no formato {"articles": [...]} (ex.: NewsAPI)
NEWS_JSON_URL = os.getenv("NEWS_JSON_URL", "")
NEWS_JSON_NAME = os.getenv("NEWS_JSON_NAME", "NewsAPI")
