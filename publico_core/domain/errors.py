"""Definições de exceções para o cliente do Público."""

from __future__ import annotations


class PublicoError(Exception):
    """Exceção base para erros conhecidos da aplicação."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(PublicoError):
    """Erro de transporte ou resposta HTTP fora da faixa 2xx."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.reason = reason


class ArticleUnavailableError(PublicoError):
    """O detalhe do artigo não pode ser apresentado."""
