"""Contratos e estruturas de dados compartilhadas no domínio do cliente Público."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, Union


@dataclass(frozen=True, slots=True)
class ImageRef:
    """Referência de imagem recebida da API (``imagem`` ou ``multimediaPrincipal``)."""

    src: str | None
    title: str | None = None
    credit: str | None = None


@dataclass(frozen=True, slots=True)
class MissingAuthors:
    """Campo ``autores`` ausente ou num formato não reconhecido."""


@dataclass(frozen=True, slots=True)
class SingleAuthor:
    """Campo ``autores`` recebido como string ou objeto único."""

    name: str | None


@dataclass(frozen=True, slots=True)
class ManyAuthors:
    """Campo ``autores`` recebido como lista."""

    names: tuple[str | None, ...]


AuthorField = Union[MissingAuthors, SingleAuthor, ManyAuthors]


@dataclass(slots=True)
class ArticlePayload:
    """Artigo validado campo a campo a partir do JSON bruto da API.

    Todos os campos são opcionais: a API não garante o formato declarado.
    """

    id: int | None = None
    title: str | None = None
    url: str | None = None
    full_url: str | None = None
    description: str | None = None
    lead: str | None = None
    body: str | None = None
    text: str | None = None
    section: str | None = None
    data: str | None = None
    time: str | None = None
    authors: AuthorField = field(default_factory=MissingAuthors)
    tags: tuple[str, ...] = ()
    image: ImageRef | None = None
    main_media: str | ImageRef | None = None
    raw: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ArticleIcon:
    """Ícone a exibir junto do artigo."""

    source: str
    tint_color: str | None = None


@dataclass(frozen=True, slots=True)
class ArticleView:
    """Visão canônica de um artigo, pronta para apresentação."""

    title: str
    url: str
    article_id: str | None
    authors: str
    tags: Sequence[str]
    summary: str
    published: str
    icon: ArticleIcon


class NewsGateway(Protocol):
    """Interface para os endpoints de leitura da API do Público."""

    async def fetch_latest(self) -> list[ArticlePayload]:
        """Últimas notícias."""

    async def fetch_top(self) -> list[ArticlePayload]:
        """Notícias em destaque."""

    async def search(self, query: str) -> list[ArticlePayload]:
        """Pesquisa textual."""

    async def fetch_article_detail(self, article_id: str) -> ArticlePayload | None:
        """Detalhe de um artigo ou ``None`` quando indisponível."""


class IdExtractor(Protocol):
    """Interface para extrair o identificador de um artigo a partir da URL."""

    def extract(self, url: object) -> str | None:
        """Retorna o identificador ou ``None``."""


class Clock(Protocol):
    """Interface para abstrair o acesso ao relógio do sistema."""

    def now(self) -> datetime:
        """Retorna o instante atual."""

    def monotonic(self) -> float:
        """Contador em segundos adequado para medir durações."""


__all__ = (
    "ArticleIcon",
    "ArticlePayload",
    "ArticleView",
    "AuthorField",
    "Clock",
    "IdExtractor",
    "ImageRef",
    "ManyAuthors",
    "MissingAuthors",
    "NewsGateway",
    "SingleAuthor",
)
