"""Conversão das datas de publicação em texto de apresentação."""

from __future__ import annotations

from datetime import datetime

from publico_core.domain.contracts import ArticlePayload
from publico_core.infrastructure.normalizers.metadata_normalizer import DEFAULT_PLACEHOLDER

INVALID_DATE_PREFIX = "0001-01-01"

_SUPPORTED_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%d/%m/%Y",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y %H:%M:%S",
)

_DISPLAY_FORMAT = "%d/%m/%Y %H:%M"
_DISPLAY_DATE_ONLY = "%d/%m/%Y"


class PublishedDateNormalizer:
    """Interpreta o carimbo temporal da API e produz a data a exibir."""

    def __init__(self, *, placeholder: str = DEFAULT_PLACEHOLDER) -> None:
        self._placeholder = placeholder

    def parse(self, value: str) -> datetime | None:
        text = (value or "").strip()
        if not text:
            return None

        text = text.replace("Z", "+00:00")
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass

        for pattern in _SUPPORTED_FORMATS:
            try:
                return datetime.strptime(text, pattern)
            except ValueError:
                continue
        return None

    def format(self, value: str) -> str:
        parsed = self.parse(value)
        if parsed is None:
            # texto não reconhecido é exibido tal como chegou
            return value.strip()
        if (parsed.hour, parsed.minute) == (0, 0):
            return parsed.strftime(_DISPLAY_DATE_ONLY)
        return parsed.strftime(_DISPLAY_FORMAT)

    def resolve(self, article: ArticlePayload) -> str:
        timestamp = article.data if article.data is not None else (article.time or "")
        if not timestamp.strip() or INVALID_DATE_PREFIX in timestamp:
            return self._placeholder
        return self.format(timestamp)


_DEFAULT_NORMALIZER = PublishedDateNormalizer()


def resolve_date(article: ArticlePayload) -> str:
    """Resolve a data de publicação com o marcador padrão."""

    return _DEFAULT_NORMALIZER.resolve(article)
