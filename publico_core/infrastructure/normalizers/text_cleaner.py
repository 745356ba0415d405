"""Rotinas utilitárias para limpar títulos e resumos vindos da API."""

from __future__ import annotations

import re

_RE_MARKUP = re.compile(r"<[^>]*>")

# "há 3 horas ..." no início das descrições; a primeira variante aceita o
# acento corrompido por dupla codificação ("hÃ¡").
_RELATIVE_TIME_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^(há|hÃ¡)\s+\d+\s+(horas?|dias?|semanas?|meses?)(?:\s*\.{3}|\s+\.\.\.|…)\s*",
        re.IGNORECASE,
    ),
    re.compile(
        r"^h[aá]\s+\d+\s+(?:horas?|dias?|semanas?|meses?)(?:\s*\.{3}|\s+\.\.\.|…)\s*",
        re.IGNORECASE,
    ),
)

FALLBACK_TITLE = "Sem título"


def strip_markup(text: str | None) -> str:
    """Remove qualquer marcação ``<...>`` do texto."""

    if not text:
        return ""
    return _RE_MARKUP.sub("", text)


def clean_title(title: str | None, *, fallback: str = FALLBACK_TITLE) -> str:
    return strip_markup(title) or fallback


def clean_summary(text: str | None) -> str:
    """Remove a expressão de tempo relativo que abre algumas descrições."""

    if not text:
        return ""

    for pattern in _RELATIVE_TIME_PATTERNS:
        match = pattern.match(text)
        if match:
            return text[match.end():]
    return text
