"""Validação campo a campo do JSON bruto devolvido pela API do Público."""

from __future__ import annotations

from collections.abc import Mapping

from publico_core.domain.contracts import ArticlePayload, ImageRef
from publico_core.infrastructure.normalizers.metadata_normalizer import (
    decode_authors,
    extract_tags,
)


def _optional_str(value: object) -> str | None:
    if isinstance(value, str):
        return value
    return None


def _optional_id(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _decode_image(value: object) -> ImageRef | None:
    if not isinstance(value, Mapping):
        return None
    return ImageRef(
        src=_optional_str(value.get("src")),
        title=_optional_str(value.get("titulo")),
        credit=_optional_str(value.get("credito")),
    )


def _decode_main_media(value: object) -> str | ImageRef | None:
    if isinstance(value, str):
        return value
    return _decode_image(value)


def decode_article(data: object) -> ArticlePayload | None:
    """Converte um objeto JSON em ``ArticlePayload`` ou ``None`` se não for objeto."""

    if not isinstance(data, Mapping):
        return None

    return ArticlePayload(
        id=_optional_id(data.get("id")),
        title=_optional_str(data.get("titulo")),
        url=_optional_str(data.get("url")),
        full_url=_optional_str(data.get("fullUrl")),
        description=_optional_str(data.get("descricao")),
        lead=_optional_str(data.get("lead")),
        body=_optional_str(data.get("body")),
        text=_optional_str(data.get("texto")),
        section=_optional_str(data.get("secao")),
        data=_optional_str(data.get("data")),
        time=_optional_str(data.get("time")),
        authors=decode_authors(data.get("autores")),
        tags=tuple(extract_tags(data.get("tags"))),
        image=_decode_image(data.get("imagem")),
        main_media=_decode_main_media(data.get("multimediaPrincipal")),
        raw=dict(data),
    )


def decode_articles(data: object) -> list[ArticlePayload]:
    """Listas inesperadas degradam para lista vazia; entradas inválidas são ignoradas."""

    if not isinstance(data, list):
        return []

    articles: list[ArticlePayload] = []
    for entry in data:
        article = decode_article(entry)
        if article is not None:
            articles.append(article)
    return articles
