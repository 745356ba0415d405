"""Carregamento adiado e cancelável dos detalhes do artigo selecionado."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from logging import Logger
from types import MappingProxyType

from publico_core.domain.contracts import ArticlePayload, NewsGateway
from publico_core.infrastructure.parsing.normalizer import ArticleNormalizer

DEFAULT_DEBOUNCE_SECONDS = 0.15


class DetailEnricher:
    """Supervisor de posição única para o pedido de detalhe mais recente.

    Cada seleção substitui a anterior: a tarefa pendente é cancelada e uma
    nova é agendada após ``debounce`` segundos. Só a tarefa que ainda ocupa
    a posição grava o resultado, e cada id é gravado no máximo uma vez.
    """

    def __init__(
        self,
        gateway: NewsGateway,
        *,
        normalizer: ArticleNormalizer,
        logger: Logger,
        debounce: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._gateway = gateway
        self._normalizer = normalizer
        self._logger = logger
        self._debounce = debounce
        self._cache: dict[str, ArticlePayload] = {}
        self._task: asyncio.Task[None] | None = None
        self._loading_id: str | None = None

    @property
    def enrichments(self) -> Mapping[str, ArticlePayload]:
        return MappingProxyType(self._cache)

    @property
    def loading_id(self) -> str | None:
        return self._loading_id

    def get(self, article: ArticlePayload) -> ArticlePayload | None:
        article_id = self._normalizer.article_id(article)
        return self._cache.get(article_id) if article_id else None

    def select(self, article: ArticlePayload) -> asyncio.Task[None] | None:
        """Agenda o carregamento do detalhe; deve correr dentro de um event loop."""

        article_id = self._normalizer.article_id(article)
        if not article_id or article_id in self._cache:
            return None

        self.cancel()
        task = asyncio.get_running_loop().create_task(self._load(article_id))
        self._task = task
        self._logger.info(
            "enrich.scheduled",
            extra={"extra": {"article_id": article_id, "debounce": self._debounce}},
        )
        return task

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._loading_id = None

    async def settle(self) -> None:
        """Aguarda a tarefa corrente sem propagar o seu cancelamento."""

        if self._task is not None:
            await asyncio.wait({self._task})

    def _owns_slot(self) -> bool:
        return asyncio.current_task() is self._task

    async def _load(self, article_id: str) -> None:
        await asyncio.sleep(self._debounce)
        if not self._owns_slot():
            return

        self._loading_id = article_id
        try:
            detail = await self._gateway.fetch_article_detail(article_id)
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001 - enriquecimento é opcional
            self._logger.warning(
                "enrich.failed",
                extra={"extra": {"article_id": article_id, "error": str(exc)}},
            )
            return
        finally:
            if self._owns_slot():
                self._loading_id = None

        if detail is None:
            self._logger.info(
                "enrich.unavailable", extra={"extra": {"article_id": article_id}}
            )
            return
        if not self._owns_slot() or article_id in self._cache:
            return

        self._cache[article_id] = detail
        self._logger.info("enrich.stored", extra={"extra": {"article_id": article_id}})
