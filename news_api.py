"""
Endpoint HTTP de leitura das notícias (FastAPI).

GET /api/news[?refresh=true] -> {success, news, timestamp, total, cached, note?}
OPTIONS (inclusive pre-flight CORS) responde 200 sem corpo; outros métodos recebem 405.

Uso: uvicorn news_api:app  (ou python run_news.py --serve)
"""

import logging
import sys

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from aggregator import collect_news
from config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL
from models import NewsResult, now_utc
from news_cache import ResultCache
from static_news import STATIC_NOTE

logger = logging.getLogger(__name__)

NEWS_CACHE_KEY = "news"
STALE_NOTE = "Fontes indisponíveis: exibindo a última atualização em cache"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


def _setup_logging() -> None:
    """Sob `uvicorn news_api:app` ninguém mais configura o logging raiz; basicConfig não mexe se já houver handler."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
    )


_setup_logging()

app = FastAPI(title="LoL Newsflow API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Registrado depois do CORSMiddleware, então roda antes dele (pre-flight sem corpo)
@app.middleware("http")
async def answer_options(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    return await call_next(request)


news_cache = ResultCache()


@app.get("/api/news")
def get_news(refresh: bool = Query(False, description="Ignora o cache e coleta de novo")):
    """
    Notícias traduzidas, do cache enquanto estiver dentro do TTL.

    Roda como função síncrona (FastAPI usa o threadpool), pois a coleta faz
    requests bloqueantes em sequência.
    """
    try:
        read = news_cache.get_or_refresh(NEWS_CACHE_KEY, collect_news, force=refresh)
    except Exception as e:
        logger.exception("Erro na API: %s", e)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e), "timestamp": now_utc().isoformat()},
        )

    result: NewsResult = read.data
    body = {
        "success": True,
        "news": [a.to_dict() for a in result.articles],
        "timestamp": result.generated_at.isoformat(),
        "total": len(result.articles),
        "cached": read.cached,
    }
    if result.fallback:
        body["note"] = STATIC_NOTE
    elif read.stale:
        body["note"] = STALE_NOTE
    logger.info("Retornando %d notícias (cached=%s)", body["total"], read.cached)
    return body


@app.api_route("/api/news", methods=["POST", "PUT", "PATCH", "DELETE"])
def news_method_not_allowed():
    return JSONResponse(status_code=405, content={"success": False, "error": "Método não permitido"})


@app.get("/health")
def health():
    return {"status": "ok"}
