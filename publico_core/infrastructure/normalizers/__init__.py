"""Normalizadores dos campos de artigos e extração de identificadores."""

from .date_normalizer import PublishedDateNormalizer, resolve_date
from .identifier import RegexIdExtractor, extract_article_id
from .metadata_normalizer import (
    decode_authors,
    extract_tags,
    format_authors,
    render_authors,
    resolve_icon,
    tag_color,
)
from .text_cleaner import clean_summary, clean_title, strip_markup
from .url_normalizer import PublicoUrlNormalizer, build_url_normalizer, resolve_url

__all__ = [
    "PublicoUrlNormalizer",
    "PublishedDateNormalizer",
    "RegexIdExtractor",
    "build_url_normalizer",
    "clean_summary",
    "clean_title",
    "decode_authors",
    "extract_article_id",
    "extract_tags",
    "format_authors",
    "render_authors",
    "resolve_date",
    "resolve_icon",
    "resolve_url",
    "strip_markup",
    "tag_color",
]
