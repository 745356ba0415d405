"""Reparação de URLs de artigos devolvidas pela API do Público."""

from __future__ import annotations

from urllib.parse import urlsplit

from publico_core.domain.contracts import ArticlePayload

SITE_URL = "https://www.publico.pt"


class PublicoUrlNormalizer:
    """Garante uma URL absoluta e não vazia para cada artigo."""

    def __init__(self, *, site_url: str = SITE_URL) -> None:
        self._site_url = site_url.strip().rstrip("/") or SITE_URL
        host = urlsplit(self._site_url).netloc or self._site_url
        self._domain = host[4:] if host.startswith("www.") else host
        # malformações conhecidas, aplicadas nesta ordem
        self._repairs: tuple[tuple[str, str], ...] = (
            (f"{self._site_url}https//", "https://"),
            (f"{self._site_url}https/", "https://"),
            ("https//", "https://"),
        )

    @property
    def site_url(self) -> str:
        return self._site_url

    def resolve(self, article: ArticlePayload) -> str:
        if article.full_url:
            return article.full_url
        return self.repair(article.url)

    def repair(self, url: str | None) -> str:
        if not url:
            return self._site_url

        fixed = url
        for broken, replacement in self._repairs:
            fixed = fixed.replace(broken, replacement, 1)

        if self._domain not in fixed and not fixed.startswith("http"):
            prefix = "" if fixed.startswith("/") else "/"
            fixed = f"{self._site_url}{prefix}{fixed}"
        return fixed


_DEFAULT_NORMALIZER = PublicoUrlNormalizer()


def resolve_url(article: ArticlePayload) -> str:
    """Resolve a URL canônica com o domínio padrão do Público."""

    return _DEFAULT_NORMALIZER.resolve(article)


def build_url_normalizer(site_url: str | None = None) -> PublicoUrlNormalizer:
    """Factory auxiliar a partir das configurações."""

    if site_url:
        return PublicoUrlNormalizer(site_url=site_url)
    return PublicoUrlNormalizer()
