"""Normalização de autores, etiquetas e ícones de artigos.

A API do Público devolve estes campos em vários formatos (string, objeto,
lista de objetos). As funções deste módulo são totais: qualquer formato
inesperado resulta num marcador ou numa lista vazia, nunca numa exceção.
"""

from __future__ import annotations

from collections.abc import Mapping

from publico_core.domain.contracts import (
    ArticleIcon,
    ArticlePayload,
    AuthorField,
    ImageRef,
    ManyAuthors,
    MissingAuthors,
    SingleAuthor,
)

DEFAULT_PLACEHOLDER = "Não disponível"
FALLBACK_ICON = ArticleIcon(source="globe", tint_color="#1E90FF")
TAG_COLORS: tuple[str, ...] = (
    "#B22222",
    "#4B0082",
    "#006400",
    "#8B4513",
    "#4682B4",
    "#800080",
    "#FF8C00",
    "#2F4F4F",
)

_TAG_KEYS: tuple[str, ...] = ("nome", "name", "value", "titulo", "title")
_JUNK_TAGS = frozenset({"undefined", "null", "[object Object]"})


def _author_name(entry: object) -> str | None:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        for key in ("nome", "name"):
            value = entry.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def decode_authors(value: object) -> AuthorField:
    """Converte o campo bruto ``autores`` numa variante explícita."""

    if value is None:
        return MissingAuthors()
    if isinstance(value, (str, Mapping)):
        return SingleAuthor(_author_name(value))
    if isinstance(value, (list, tuple)):
        return ManyAuthors(tuple(_author_name(entry) for entry in value))
    return MissingAuthors()


def render_authors(authors: AuthorField, *, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    if isinstance(authors, SingleAuthor):
        return authors.name or placeholder
    if isinstance(authors, ManyAuthors):
        names = [name for name in authors.names if name]
        return ", ".join(names) if names else placeholder
    return placeholder


def format_authors(value: object, *, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Texto de autoria: nomes separados por vírgula ou o marcador."""

    if isinstance(value, (MissingAuthors, SingleAuthor, ManyAuthors)):
        return render_authors(value, placeholder=placeholder)
    return render_authors(decode_authors(value), placeholder=placeholder)


def normalize_tag(tag: object) -> str:
    if isinstance(tag, str):
        return tag
    if isinstance(tag, Mapping):
        for key in _TAG_KEYS:
            candidate = tag.get(key)
            if isinstance(candidate, str) and candidate:
                return candidate
        return ""
    if tag is None or isinstance(tag, (bool, int, float, list, tuple)):
        return ""
    # objetos com __str__ próprio; a representação genérica não serve
    if type(tag).__str__ is object.__str__:
        return ""
    text = str(tag)
    return "" if text == "[object Object]" else text


def _is_meaningful(tag: str) -> bool:
    return bool(tag) and tag not in _JUNK_TAGS


def extract_tags(value: object) -> list[str]:
    """Lista de etiquetas sem vazios nem artefactos de serialização."""

    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [tag for tag in map(normalize_tag, value) if _is_meaningful(tag)]
    normalized = normalize_tag(value)
    return [normalized] if _is_meaningful(normalized) else []


def resolve_icon(article: ArticlePayload) -> ArticleIcon:
    """Prioridade: ``multimediaPrincipal`` (string, depois objeto) e ``imagem``."""

    media = article.main_media
    if isinstance(media, str) and media:
        return ArticleIcon(source=media)
    if isinstance(media, ImageRef) and media.src:
        return ArticleIcon(source=media.src)
    if article.image is not None and article.image.src:
        return ArticleIcon(source=article.image.src)
    return FALLBACK_ICON


def tag_color(index: int) -> str:
    return TAG_COLORS[index % len(TAG_COLORS)]
