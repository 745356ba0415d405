"""Carregamento de configurações para o cliente Público."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class ApiSettings:
    base_url: str = "https://www.publico.pt/api"
    site_url: str = "https://www.publico.pt"
    timeout: float = 10.0


@dataclass(slots=True)
class EnrichmentSettings:
    debounce_ms: int = 150

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


@dataclass(slots=True)
class ApplicationSettings:
    max_tags: int = 6
    placeholder: str = "Não disponível"
    fallback_title: str = "Sem título"


@dataclass(slots=True)
class Settings:
    api: ApiSettings
    enrichment: EnrichmentSettings
    application: ApplicationSettings


def _load_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise RuntimeError(f"Variável de ambiente '{name}' inválida") from exc
    if parsed <= 0:
        raise RuntimeError(f"Variável de ambiente '{name}' deve ser positiva")
    return parsed


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise RuntimeError(f"Variável de ambiente '{name}' inválida") from exc
    if parsed < 0:
        raise RuntimeError(f"Variável de ambiente '{name}' não pode ser negativa")
    return parsed


def load_settings() -> Settings:
    """Carrega configurações a partir de variáveis de ambiente."""

    api = ApiSettings(
        base_url=os.environ.get("PUBLICO_API_BASE_URL", "https://www.publico.pt/api"),
        site_url=os.environ.get("PUBLICO_SITE_URL", "https://www.publico.pt"),
        timeout=_load_float("PUBLICO_HTTP_TIMEOUT", 10.0),
    )

    enrichment = EnrichmentSettings(
        debounce_ms=_load_int("PUBLICO_DETAIL_DEBOUNCE_MS", 150),
    )

    application = ApplicationSettings(
        max_tags=_load_int("PUBLICO_MAX_TAGS", 6),
        placeholder=os.environ.get("PUBLICO_PLACEHOLDER", "Não disponível"),
        fallback_title=os.environ.get("PUBLICO_FALLBACK_TITLE", "Sem título"),
    )

    return Settings(api=api, enrichment=enrichment, application=application)
