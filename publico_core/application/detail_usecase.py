"""Caso de uso da vista de um artigo individual."""

from __future__ import annotations

from logging import Logger

from publico_core.domain.contracts import ArticlePayload, IdExtractor, NewsGateway
from publico_core.domain.errors import ArticleUnavailableError, FetchError


class ArticleDetailUseCase:
    """Carrega o detalhe a partir da URL; falhas viram um estado de erro explícito."""

    def __init__(self, gateway: NewsGateway, *, id_extractor: IdExtractor, logger: Logger) -> None:
        self._gateway = gateway
        self._id_extractor = id_extractor
        self._logger = logger

    async def load(self, article_url: str) -> ArticlePayload:
        article_id = self._id_extractor.extract(article_url)
        if not article_id:
            raise ArticleUnavailableError(
                "Não foi possível extrair o identificador do artigo a partir da URL"
            )

        try:
            detail = await self._gateway.fetch_article_detail(article_id)
        except FetchError as exc:
            self._logger.error(
                "detail.failed",
                extra={"extra": {"article_id": article_id, "status": exc.status_code}},
            )
            raise ArticleUnavailableError(
                f"Erro ao carregar o artigo: {exc}", cause=exc
            ) from exc

        if detail is None:
            raise ArticleUnavailableError(
                "Os detalhes do artigo não estão disponíveis de momento"
            )

        self._logger.info("detail.loaded", extra={"extra": {"article_id": article_id}})
        return detail
