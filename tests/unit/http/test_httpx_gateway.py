from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import httpx
import pytest

from publico_core.domain.errors import FetchError
from publico_core.infrastructure.http.httpx_gateway import PublicoApiClient

Handler = Callable[[httpx.Request], httpx.Response]


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[tuple[str, str, dict[str, object]]] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - trivial
        extra_value = getattr(record, "extra", {})
        if not isinstance(extra_value, dict):
            extra_value = {"value": extra_value}
        self.records.append((record.levelname, record.getMessage(), extra_value))


def _logger(name: str) -> tuple[logging.Logger, list[tuple[str, str, dict[str, object]]]]:
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    handler = _ListHandler()
    logger.addHandler(handler)
    return logger, handler.records


def _run(handler: Handler, call: Callable[[PublicoApiClient], object], *, logger_name: str):
    logger, records = _logger(logger_name)

    async def scenario():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            gateway = PublicoApiClient(client, logger=logger)
            return await call(gateway)

    return asyncio.run(scenario()), records


def test_fetch_latest_hits_ultimas_endpoint() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=[{"id": 1, "titulo": "Um"}, "lixo"])

    articles, _ = _run(handler, lambda gateway: gateway.fetch_latest(), logger_name="test.gw.latest")

    assert seen == ["https://www.publico.pt/api/list/ultimas"]
    assert [article.title for article in articles] == ["Um"]


def test_fetch_top_degrades_non_list_to_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/list/destaque"
        return httpx.Response(200, json={"erro": "inesperado"})

    articles, _ = _run(handler, lambda gateway: gateway.fetch_top(), logger_name="test.gw.top")

    assert articles == []


def test_search_encodes_query() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    _run(handler, lambda gateway: gateway.search("saúde & ensino"), logger_name="test.gw.search")

    assert seen == [
        "https://www.publico.pt/api/list/search?query=sa%C3%BAde%20%26%20ensino"
    ]


def test_list_http_error_raises_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    with pytest.raises(FetchError) as excinfo:
        _run(handler, lambda gateway: gateway.fetch_latest(), logger_name="test.gw.503")

    assert excinfo.value.status_code == 503
    assert "503 Service Unavailable" in str(excinfo.value)


def test_transport_error_raises_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("sem rede", request=request)

    with pytest.raises(FetchError) as excinfo:
        _run(handler, lambda gateway: gateway.fetch_top(), logger_name="test.gw.connect")

    assert isinstance(excinfo.value.cause, httpx.ConnectError)
    assert excinfo.value.status_code is None


def test_list_invalid_json_raises_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="[{")

    with pytest.raises(FetchError):
        _run(handler, lambda gateway: gateway.fetch_latest(), logger_name="test.gw.listjson")


def test_detail_returns_decoded_article() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/content/news/2077001"
        return httpx.Response(200, json={"id": 2077001, "autores": {"nome": "Ana"}})

    article, _ = _run(
        handler,
        lambda gateway: gateway.fetch_article_detail("2077001"),
        logger_name="test.gw.detail",
    )

    assert article is not None
    assert article.id == 2077001


def test_detail_empty_body_is_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="  ")

    article, records = _run(
        handler,
        lambda gateway: gateway.fetch_article_detail("1"),
        logger_name="test.gw.empty",
    )

    assert article is None
    assert ("INFO", "gateway.empty_body", {"article_id": "1"}) in records


def test_detail_truncated_json_is_logged_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text='{"id": 1, "titulo": "Cort')

    article, records = _run(
        handler,
        lambda gateway: gateway.fetch_article_detail("1"),
        logger_name="test.gw.truncated",
    )

    assert article is None
    errors = [(message, extra) for level, message, extra in records if level == "ERROR"]
    assert errors == [
        ("gateway.invalid_json", {"article_id": "1", "preview": '{"id": 1, "titulo": "Cort'})
    ]


def test_detail_non_object_is_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[1, 2])

    article, _ = _run(
        handler,
        lambda gateway: gateway.fetch_article_detail("1"),
        logger_name="test.gw.array",
    )

    assert article is None


def test_detail_http_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    with pytest.raises(FetchError) as excinfo:
        _run(handler, lambda gateway: gateway.fetch_article_detail("1"), logger_name="test.gw.404")

    assert excinfo.value.status_code == 404


def test_detail_requires_identifier() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - não chamado
        raise AssertionError("pedido inesperado")

    with pytest.raises(ValueError):
        _run(handler, lambda gateway: gateway.fetch_article_detail(""), logger_name="test.gw.noid")


def test_cancellation_propagates_without_error_logs() -> None:
    logger, records = _logger("test.gw.cancel")

    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(10)
        return httpx.Response(200, json={})  # pragma: no cover - cancelado antes

    async def scenario() -> None:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            gateway = PublicoApiClient(client, logger=logger)
            task = asyncio.create_task(gateway.fetch_article_detail("1"))
            await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

    asyncio.run(scenario())

    assert [level for level, _, _ in records if level == "ERROR"] == []
