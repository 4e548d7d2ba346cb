"""
LoL Newsflow: coleta as fontes, traduz e mostra as notícias (ou sobe a API).

Uso:
  python run_news.py                      # uma coleta, lista no terminal
  python run_news.py --json -o news.json  # salva no formato da API
  python run_news.py --no-translate --limit 5
  python run_news.py --serve --port 8000  # sobe a API (uvicorn)
"""

import argparse
import json
import logging
import sys

from aggregator import collect_news
from config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL, MAX_NEWS


def _setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
    )


def _safe_print(s: str) -> None:
    """Imprime string evitando erro de encoding no Windows."""
    if s is None:
        return
    out = (s.replace("\u200b", "").replace("\ufffd", "") if isinstance(s, str) else str(s))
    enc = sys.stdout.encoding or "utf-8"
    try:
        sys.stdout.buffer.write((out + "\n").encode(enc, errors="replace"))
        sys.stdout.flush()
    except (AttributeError, UnicodeEncodeError):
        print(out.encode(enc, errors="replace").decode(enc))


def _print_articles(result) -> None:
    for i, a in enumerate(result.articles, 1):
        title = a.title[:80] + ("..." if len(a.title) > 80 else "")
        _safe_print(f"\n--- {i} ---")
        _safe_print("source: " + a.source)
        _safe_print("title: " + title)
        _safe_print("url: " + a.url)
        _safe_print("preview: " + a.preview())
        _safe_print("date: " + a.date.isoformat())
        _safe_print("translated: " + str(a.translated))
    note = " (notícias estáticas)" if result.fallback else ""
    print(f"\nTotal: {len(result.articles)}{note}")


def _serve(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("news_api:app", host=host, port=port, log_config=None)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Notícias de League of Legends em português")
    ap.add_argument("--json", action="store_true", help="Saída no formato JSON da API")
    ap.add_argument("-o", "--output", default=None, help="Arquivo de saída (JSON)")
    ap.add_argument("--no-translate", action="store_true", help="Não traduzir título/conteúdo")
    ap.add_argument("--limit", type=int, default=MAX_NEWS, help="Máximo de notícias")
    ap.add_argument("--serve", action="store_true", help="Sobe a API HTTP")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("-v", "--verbose", action="store_true", help="Log em nível DEBUG")
    args = ap.parse_args(argv)

    _setup_logging(args.verbose)
    logger = logging.getLogger("run_news")

    if args.serve:
        logger.info("Subindo API em http://%s:%d/api/news", args.host, args.port)
        _serve(args.host, args.port)
        return 0

    logger.info("LoL Newsflow: iniciando coleta de todas as fontes")
    result = collect_news(translate=not args.no_translate, limit=args.limit)

    if args.json or args.output:
        payload = {
            "success": True,
            "news": [a.to_dict() for a in result.articles],
            "timestamp": result.generated_at.isoformat(),
            "total": len(result.articles),
        }
        text = json.dumps(payload, ensure_ascii=False, indent=2)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text)
            logger.info("Salvo em %s", args.output)
        else:
            _safe_print(text)
    else:
        _print_articles(result)

    logger.info("LoL Newsflow: concluído")
    return 0


if __name__ == "__main__":
    sys.exit(main())
