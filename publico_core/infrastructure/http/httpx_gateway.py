"""Adapter da API de leitura do Público baseado em httpx."""

from __future__ import annotations

import json
from logging import Logger
from urllib.parse import quote

import httpx

from publico_core.domain.contracts import ArticlePayload, NewsGateway
from publico_core.domain.errors import FetchError
from publico_core.infrastructure.logging.logger import configure_logger
from publico_core.infrastructure.parsing.payload_decoder import (
    decode_article,
    decode_articles,
)

BASE_URL = "https://www.publico.pt/api"
_PREVIEW_LENGTH = 200


class PublicoApiClient(NewsGateway):
    """Implementação de ``NewsGateway`` sobre um ``httpx.AsyncClient``.

    Sem autenticação, tentativas repetidas ou paginação: um GET por chamada.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        base_url: str = BASE_URL,
        timeout: float | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = logger or configure_logger("publico.gateway")

    async def fetch_latest(self) -> list[ArticlePayload]:
        return await self._fetch_list("/list/ultimas", what="últimas notícias")

    async def fetch_top(self) -> list[ArticlePayload]:
        return await self._fetch_list("/list/destaque", what="notícias em destaque")

    async def search(self, query: str) -> list[ArticlePayload]:
        encoded = quote(query, safe="!*'()")
        return await self._fetch_list(f"/list/search?query={encoded}", what="pesquisa")

    async def fetch_article_detail(self, article_id: str) -> ArticlePayload | None:
        if not article_id:
            raise ValueError("Identificador do artigo é obrigatório")

        response = await self._get(f"/content/news/{article_id}", what="detalhe do artigo")
        text = response.text
        if not text or not text.strip():
            self._logger.info(
                "gateway.empty_body", extra={"extra": {"article_id": article_id}}
            )
            return None

        try:
            data = json.loads(text)
        except ValueError:
            self._logger.error(
                "gateway.invalid_json",
                extra={
                    "extra": {
                        "article_id": article_id,
                        "preview": text[:_PREVIEW_LENGTH],
                    }
                },
            )
            return None

        return decode_article(data)

    async def _fetch_list(self, path: str, *, what: str) -> list[ArticlePayload]:
        response = await self._get(path, what=what)
        try:
            payload = response.json()
        except ValueError as exc:
            self._logger.error(
                "gateway.invalid_json",
                extra={"extra": {"path": path, "preview": response.text[:_PREVIEW_LENGTH]}},
            )
            raise FetchError(f"Resposta inválida ao obter {what}", cause=exc) from exc

        articles = decode_articles(payload)
        self._logger.info(
            "gateway.list_fetched",
            extra={"extra": {"path": path, "count": len(articles)}},
        )
        return articles

    async def _get(self, path: str, *, what: str) -> httpx.Response:
        url = f"{self._base_url}{path}"
        options: dict[str, float] = (
            {"timeout": self._timeout} if self._timeout is not None else {}
        )
        try:
            response = await self._client.get(url, **options)
        except httpx.HTTPError as exc:
            self._logger.error(
                "gateway.request_failed",
                extra={"extra": {"url": url, "error": exc.__class__.__name__}},
            )
            raise FetchError(f"Falha ao obter {what}", cause=exc) from exc

        if not response.is_success:
            self._logger.error(
                "gateway.http_error",
                extra={"extra": {"url": url, "status": response.status_code}},
            )
            raise FetchError(
                f"Falha ao obter {what}: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
        return response
