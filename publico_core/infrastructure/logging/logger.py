"""Configuração de logging estruturado para o cliente Público."""

from __future__ import annotations

import json
import logging
import os
from logging import Logger, LogRecord

_LEVEL_ENV = "PUBLICO_LOG_LEVEL"


class StructuredFormatter(logging.Formatter):
    """Formatter que serializa o atributo ``extra`` caso exista."""

    def format(self, record: LogRecord) -> str:  # noqa: D401
        extra_value = getattr(record, "extra", {})
        if isinstance(extra_value, str):
            # registo já formatado por outro handler
            return super().format(record)
        if not isinstance(extra_value, dict):
            extra_value = {"value": extra_value}
        record.__dict__["extra"] = json.dumps(extra_value, ensure_ascii=False, default=str)
        return super().format(record)


def _resolve_level(level: int | str | None) -> int:
    candidate = level if level is not None else os.environ.get(_LEVEL_ENV, "INFO")
    if isinstance(candidate, int):
        return candidate
    resolved = logging.getLevelName(candidate.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logger(name: str = "publico", *, level: int | str | None = None) -> Logger:
    """Cria um logger em ``stderr`` com o ``extra`` serializado em JSON.

    A saída padrão fica reservada para o conteúdo apresentado pela CLI.
    """

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()
    handler.setFormatter(
        StructuredFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s | extra=%(extra)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
