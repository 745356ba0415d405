"""Composition root da CLI que apresenta as notícias do Público."""

from __future__ import annotations

import argparse
import asyncio
import json
from collections.abc import Sequence
from dataclasses import dataclass
from logging import Logger

import httpx

from config.settings import Settings, load_settings
from publico_core.application.detail_usecase import ArticleDetailUseCase
from publico_core.application.enrichment import DetailEnricher
from publico_core.application.listing_usecase import ListArticlesUseCase, SearchSession
from publico_core.domain.contracts import ArticlePayload, Clock
from publico_core.domain.errors import ArticleUnavailableError, PublicoError
from publico_core.infrastructure.http.httpx_gateway import PublicoApiClient
from publico_core.infrastructure.logging.logger import configure_logger
from publico_core.infrastructure.normalizers.date_normalizer import PublishedDateNormalizer
from publico_core.infrastructure.normalizers.identifier import RegexIdExtractor
from publico_core.infrastructure.normalizers.url_normalizer import build_url_normalizer
from publico_core.infrastructure.parsing.normalizer import ArticleNormalizer
from publico_core.infrastructure.time.system_clock import SystemClock
from publico_core.interfaces import render


def _build_parser() -> argparse.ArgumentParser:
    json_help = "Imprime o resultado em JSON em vez de markdown."
    parser = argparse.ArgumentParser(description="Notícias do Público no terminal")
    parser.add_argument("--json", action="store_true", help=json_help)

    # também aceite depois do subcomando; SUPPRESS preserva o valor dado antes
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--json", action="store_true", default=argparse.SUPPRESS, help=json_help
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("latest", parents=[output], help="Últimas notícias.")
    commands.add_parser("top", parents=[output], help="Notícias em destaque.")

    search = commands.add_parser(
        "search", parents=[output], help="Pesquisa notícias por palavra-chave."
    )
    search.add_argument("query", nargs="?", default="", help="Texto a pesquisar.")
    search.add_argument(
        "--details",
        action="store_true",
        help="Carrega o detalhe de cada resultado para completar autoria e etiquetas.",
    )

    article = commands.add_parser(
        "article", parents=[output], help="Mostra um artigo a partir da URL."
    )
    article.add_argument("url", help="URL ou identificador numérico do artigo.")
    article.add_argument("--title", help="Título usado enquanto o detalhe não existe.")
    return parser


def _build_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.api.timeout,
        headers={"Accept": "application/json"},
        follow_redirects=True,
    )


@dataclass(slots=True)
class _Components:
    listing: ListArticlesUseCase
    enricher: DetailEnricher
    detail: ArticleDetailUseCase
    date_normalizer: PublishedDateNormalizer


def _build_components(
    client: httpx.AsyncClient, *, settings: Settings, clock: Clock, logger: Logger
) -> _Components:
    app = settings.application
    gateway = PublicoApiClient(
        client,
        base_url=settings.api.base_url,
        timeout=settings.api.timeout,
        logger=configure_logger("publico.gateway"),
    )
    id_extractor = RegexIdExtractor()
    date_normalizer = PublishedDateNormalizer(placeholder=app.placeholder)
    normalizer = ArticleNormalizer(
        url_normalizer=build_url_normalizer(settings.api.site_url),
        date_normalizer=date_normalizer,
        id_extractor=id_extractor,
        max_tags=app.max_tags,
        placeholder=app.placeholder,
        fallback_title=app.fallback_title,
    )
    return _Components(
        listing=ListArticlesUseCase(gateway, normalizer=normalizer, clock=clock, logger=logger),
        enricher=DetailEnricher(
            gateway,
            normalizer=normalizer,
            logger=logger,
            debounce=settings.enrichment.debounce_seconds,
        ),
        detail=ArticleDetailUseCase(gateway, id_extractor=id_extractor, logger=logger),
        date_normalizer=date_normalizer,
    )


def _render_views(
    components: _Components,
    articles: Sequence[ArticlePayload],
    *,
    as_json: bool,
    settings: Settings,
    empty_title: str,
    empty_description: str,
) -> str:
    views = components.listing.to_views(articles, components.enricher.enrichments)
    if as_json:
        return json.dumps(
            [render.view_to_dict(view) for view in views], ensure_ascii=False, indent=2
        )
    return render.render_list(
        views,
        empty_title=empty_title,
        empty_description=empty_description,
        placeholder=settings.application.placeholder,
    )


async def _run_command(
    args: argparse.Namespace, components: _Components, settings: Settings
) -> str:
    if args.command in {"latest", "top"}:
        loader = components.listing.latest if args.command == "latest" else components.listing.top
        articles = await loader()
        return _render_views(
            components,
            articles,
            as_json=args.json,
            settings=settings,
            empty_title="Sem artigos",
            empty_description="Volte mais tarde para ver as notícias mais populares do Público.",
        )

    if args.command == "search":
        query = args.query or ""
        if not query.strip() and not args.json:
            return render.render_empty(
                "Pesquisar notícias do Público",
                "Escreva uma palavra-chave para encontrar artigos.",
            )
        articles = await SearchSession(components.listing).search(query)
        if args.details:
            for article in articles:
                components.enricher.select(article)
                await components.enricher.settle()
        return _render_views(
            components,
            articles,
            as_json=args.json,
            settings=settings,
            empty_title="Nenhum artigo encontrado",
            empty_description=f"Sem resultados para '{query}'. Tente outra pesquisa.",
        )

    detail = await components.detail.load(args.url)
    if args.json:
        return json.dumps(render.payload_to_dict(detail), ensure_ascii=False, indent=2)
    return render.render_article(
        detail,
        article_title=args.title or settings.application.fallback_title,
        date_normalizer=components.date_normalizer,
        placeholder=settings.application.placeholder,
    )


async def _execute(
    args: argparse.Namespace, *, settings: Settings, clock: Clock, logger: Logger
) -> tuple[str, int]:
    async with _build_client(settings) as client:
        components = _build_components(client, settings=settings, clock=clock, logger=logger)
        try:
            return await _run_command(args, components, settings), 0
        except ArticleUnavailableError as exc:
            logger.error("cli.article_unavailable", extra={"extra": {"error": str(exc)}})
            message = str(exc)
        except PublicoError as exc:
            logger.error(
                "cli.error",
                extra={"extra": {"error": exc.__class__.__name__, "message": str(exc)}},
            )
            message = f"Não foi possível obter notícias do Público: {exc}"
        finally:
            components.enricher.cancel()

    if args.json:
        return json.dumps({"error": message}, ensure_ascii=False, indent=2), 1
    return render.render_error(message), 1


def main(argv: Sequence[str] | None = None) -> int:
    arg_parser = _build_parser()
    args = arg_parser.parse_args(argv)

    logger = configure_logger()
    clock = SystemClock()

    try:
        settings = load_settings()
    except RuntimeError as exc:
        logger.exception("cli.config_error", extra={"extra": {"error": str(exc)}})
        return 1

    logger.info(
        "cli.start",
        extra={"extra": {"at": clock.now().isoformat(), "command": args.command}},
    )

    output, exit_code = asyncio.run(
        _execute(args, settings=settings, clock=clock, logger=logger)
    )
    print(output.rstrip("\n"))

    logger.info(
        "cli.finish",
        extra={
            "extra": {
                "at": clock.now().isoformat(),
                "command": args.command,
                "exit_code": exit_code,
            }
        },
    )
    return exit_code


if __name__ == "__main__":  # pragma: no cover - entrypoint manual
    raise SystemExit(main())
