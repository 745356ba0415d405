"""Casos de uso das listagens: últimas, destaques e pesquisa."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from logging import Logger

from publico_core.domain.contracts import ArticlePayload, ArticleView, Clock, NewsGateway
from publico_core.domain.errors import PublicoError
from publico_core.infrastructure.parsing.normalizer import ArticleNormalizer


class ListArticlesUseCase:
    """Obtém listagens no gateway e mede cada pedido."""

    def __init__(
        self,
        gateway: NewsGateway,
        *,
        normalizer: ArticleNormalizer,
        clock: Clock,
        logger: Logger,
    ) -> None:
        self._gateway = gateway
        self._normalizer = normalizer
        self._clock = clock
        self._logger = logger

    async def latest(self) -> list[ArticlePayload]:
        return await self._run("latest", self._gateway.fetch_latest)

    async def top(self) -> list[ArticlePayload]:
        return await self._run("top", self._gateway.fetch_top)

    async def search(self, query: str) -> list[ArticlePayload]:
        return await self._run("search", lambda: self._gateway.search(query))

    def to_views(
        self,
        articles: Sequence[ArticlePayload],
        enrichments: Mapping[str, ArticlePayload] | None = None,
    ) -> list[ArticleView]:
        """Normaliza a listagem sobrepondo os detalhes já carregados por id."""

        enrichments = enrichments or {}
        views: list[ArticleView] = []
        for article in articles:
            article_id = self._normalizer.article_id(article)
            enrichment = enrichments.get(article_id) if article_id else None
            views.append(self._normalizer.normalize(article, enrichment))
        return views

    async def _run(
        self,
        kind: str,
        loader: Callable[[], Awaitable[list[ArticlePayload]]],
    ) -> list[ArticlePayload]:
        started = self._clock.monotonic()
        self._logger.info(
            "listing.start",
            extra={"extra": {"kind": kind, "at": self._clock.now().isoformat()}},
        )
        try:
            articles = await loader()
        except PublicoError as exc:
            self._logger.error(
                "listing.failed",
                extra={"extra": {"kind": kind, "error": str(exc)}},
            )
            raise

        self._logger.info(
            "listing.finish",
            extra={
                "extra": {
                    "kind": kind,
                    "count": len(articles),
                    "duration_ms": round((self._clock.monotonic() - started) * 1000),
                }
            },
        )
        return articles


class SearchSession:
    """Pesquisa com cache por texto e resultado anterior visível durante o carregamento."""

    def __init__(self, use_case: ListArticlesUseCase) -> None:
        self._use_case = use_case
        self._cache: dict[str, list[ArticlePayload]] = {}
        self._previous: list[ArticlePayload] = []
        self._loading_query: str | None = None

    @property
    def is_loading(self) -> bool:
        return self._loading_query is not None

    @property
    def visible(self) -> list[ArticlePayload]:
        """Último resultado obtido com sucesso."""

        return list(self._previous)

    async def search(self, query: str) -> list[ArticlePayload]:
        if not query.strip():
            self._previous = []
            return []

        cached = self._cache.get(query)
        if cached is not None:
            self._previous = cached
            return list(cached)

        self._loading_query = query
        try:
            articles = await self._use_case.search(query)
        finally:
            self._loading_query = None

        self._cache[query] = articles
        self._previous = articles
        return list(articles)

    async def revalidate(self, query: str) -> list[ArticlePayload]:
        self._cache.pop(query, None)
        return await self.search(query)
