"""Renderização em markdown das listagens e da vista de artigo."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict

from publico_core.domain.contracts import ArticlePayload, ArticleView
from publico_core.infrastructure.normalizers.date_normalizer import PublishedDateNormalizer
from publico_core.infrastructure.normalizers.metadata_normalizer import (
    DEFAULT_PLACEHOLDER,
    render_authors,
    tag_color,
)
from publico_core.infrastructure.normalizers.text_cleaner import strip_markup

SUMMARY_PLACEHOLDER = "Sem resumo disponível."
FULL_ARTICLE_NOTICE = (
    "Para ler o artigo completo, abra-o no browser.\n\n"
    "O conteúdo completo deste artigo só está disponível no site do Público."
)


def render_list_item(view: ArticleView, *, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    keywords = ", ".join(view.tags) if view.tags else placeholder
    return (
        f"# {view.title}\n\n---\n\n{view.summary or SUMMARY_PLACEHOLDER}\n\n"
        f"- Autor: {view.authors}\n"
        f"- Publicado: {view.published}\n"
        f"- Palavras-chave: {keywords}\n"
        f"- URL: {view.url}\n"
    )


def render_empty(title: str, description: str) -> str:
    return f"# {title}\n\n{description}\n"


def render_error(message: str) -> str:
    return f"# Erro\n\n{message}\n"


def render_list(
    views: Sequence[ArticleView],
    *,
    empty_title: str,
    empty_description: str,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    if not views:
        return render_empty(empty_title, empty_description)
    return "\n".join(render_list_item(view, placeholder=placeholder) for view in views)


def render_article(
    detail: ArticlePayload,
    *,
    article_title: str,
    date_normalizer: PublishedDateNormalizer | None = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """Vista completa de um artigo: título, autoria, lead e corpo sem marcação."""

    date_normalizer = date_normalizer or PublishedDateNormalizer(placeholder=placeholder)
    title = strip_markup(detail.title) or article_title
    authors = render_authors(detail.authors, placeholder=placeholder)
    published = date_normalizer.resolve(detail)
    lead = strip_markup(detail.lead)
    body = strip_markup(detail.body)

    parts = [f"# {title}", f"*{authors} • {published}*"]
    if lead:
        parts.append(f"**{lead}**")
    parts.append(body if body.strip() else FULL_ARTICLE_NOTICE)
    return "\n\n".join(parts) + "\n"


def view_to_dict(view: ArticleView) -> dict[str, object]:
    data = asdict(view)
    data["tags"] = list(view.tags)
    data["tag_colors"] = [tag_color(index) for index in range(len(view.tags))]
    return data


def payload_to_dict(detail: ArticlePayload) -> dict[str, object]:
    """Representação JSON do detalhe: o objeto original recebido da API."""

    return dict(detail.raw)
