"""Normalizador de ``ArticlePayload`` para a visão canônica ``ArticleView``."""

from __future__ import annotations

from publico_core.domain.contracts import (
    ArticlePayload,
    ArticleView,
    IdExtractor,
    MissingAuthors,
)
from publico_core.infrastructure.normalizers.date_normalizer import PublishedDateNormalizer
from publico_core.infrastructure.normalizers.identifier import RegexIdExtractor
from publico_core.infrastructure.normalizers.metadata_normalizer import (
    DEFAULT_PLACEHOLDER,
    render_authors,
    resolve_icon,
)
from publico_core.infrastructure.normalizers.text_cleaner import (
    FALLBACK_TITLE,
    clean_summary,
    clean_title,
)
from publico_core.infrastructure.normalizers.url_normalizer import PublicoUrlNormalizer

DEFAULT_MAX_TAGS = 6


class ArticleNormalizer:
    """Transforma ``ArticlePayload`` em ``ArticleView`` aplicando marcadores.

    Quando existe um detalhe já carregado (``enrichment``), autoria, etiquetas,
    resumo e data vêm dele; título, URL e ícone vêm sempre da listagem.
    """

    def __init__(
        self,
        *,
        url_normalizer: PublicoUrlNormalizer | None = None,
        date_normalizer: PublishedDateNormalizer | None = None,
        id_extractor: IdExtractor | None = None,
        max_tags: int = DEFAULT_MAX_TAGS,
        placeholder: str = DEFAULT_PLACEHOLDER,
        fallback_title: str = FALLBACK_TITLE,
    ) -> None:
        self._url_normalizer = url_normalizer or PublicoUrlNormalizer()
        self._date_normalizer = date_normalizer or PublishedDateNormalizer(
            placeholder=placeholder
        )
        self._id_extractor = id_extractor or RegexIdExtractor()
        self._max_tags = max_tags
        self._placeholder = placeholder
        self._fallback_title = fallback_title

    @property
    def url_normalizer(self) -> PublicoUrlNormalizer:
        return self._url_normalizer

    @property
    def id_extractor(self) -> IdExtractor:
        return self._id_extractor

    def article_id(self, article: ArticlePayload) -> str | None:
        return self._id_extractor.extract(self._url_normalizer.resolve(article))

    def normalize(
        self,
        article: ArticlePayload,
        enrichment: ArticlePayload | None = None,
    ) -> ArticleView:
        url = self._url_normalizer.resolve(article)

        authors = article.authors
        tags = article.tags
        description = article.description
        if enrichment is not None:
            if not isinstance(enrichment.authors, MissingAuthors):
                authors = enrichment.authors
            if enrichment.tags:
                tags = enrichment.tags
            if enrichment.description is not None:
                description = enrichment.description

        return ArticleView(
            title=clean_title(article.title, fallback=self._fallback_title),
            url=url,
            article_id=self._id_extractor.extract(url),
            authors=render_authors(authors, placeholder=self._placeholder),
            tags=tuple(tags[: self._max_tags]),
            summary=clean_summary(description),
            published=self._date_normalizer.resolve(enrichment or article),
            icon=resolve_icon(article),
        )
