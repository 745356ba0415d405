"""Extração do identificador numérico de artigos a partir de URLs."""

from __future__ import annotations

import re
from collections.abc import Iterable

from publico_core.domain.contracts import IdExtractor

_RE_NUMERIC = re.compile(r"\d+", re.ASCII)

# Ordem importa: do formato mais específico para o mais genérico.
DEFAULT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # slugs contêm hífens; o identificador é o número após o último hífen
    re.compile(r"editorial/[^?#]+-(\d+)(?:\?|\Z|#)", re.ASCII),
    re.compile(r"noticia/[^?#]+-(\d+)(?:\?|\Z|#)", re.ASCII),
    re.compile(r"/([0-9]+)(?:\?|\Z|#)", re.ASCII),
    # mínimo de 6 dígitos para não confundir contadores curtos nos slugs
    re.compile(r"-(\d{6,})(?:\?|\Z|#)", re.ASCII),
)


class RegexIdExtractor(IdExtractor):
    """Avalia uma cascata ordenada de expressões regulares, a primeira vence."""

    def __init__(self, patterns: Iterable[re.Pattern[str] | str] | None = None) -> None:
        if patterns is None:
            self._patterns = DEFAULT_PATTERNS
        else:
            self._patterns = tuple(
                pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
                for pattern in patterns
            )

    @property
    def patterns(self) -> tuple[re.Pattern[str], ...]:
        return self._patterns

    def extract(self, url: object) -> str | None:
        if not isinstance(url, str) or not url:
            return None

        try:
            if _RE_NUMERIC.fullmatch(url):
                return url
            for pattern in self._patterns:
                match = pattern.search(url)
                if match and match.group(1):
                    return match.group(1)
        except (re.error, IndexError):
            return None
        return None


_DEFAULT_EXTRACTOR = RegexIdExtractor()


def extract_article_id(url: object) -> str | None:
    """Atalho para o extrator com os padrões do Público."""

    return _DEFAULT_EXTRACTOR.extract(url)
