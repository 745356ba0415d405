import re

import pytest

from publico_core.infrastructure.normalizers.identifier import (
    RegexIdExtractor,
    extract_article_id,
)


def test_numeric_input_is_returned_unchanged() -> None:
    assert extract_article_id("12345") == "12345"


def test_editorial_url_uses_number_after_last_dash() -> None:
    url = "https://www.publico.pt/2024/01/10/opiniao/editorial/some-slug-987654"

    assert extract_article_id(url) == "987654"


def test_noticia_url_accepts_short_identifiers() -> None:
    url = "https://www.publico.pt/2024/01/10/politica/noticia/other-slug-42"

    assert extract_article_id(url) == "42"


def test_noticia_url_ignores_query_and_fragment() -> None:
    assert extract_article_id("https://www.publico.pt/noticia/slug-2077001?ref=home") == "2077001"
    assert extract_article_id("https://www.publico.pt/noticia/slug-2077001#comentarios") == "2077001"


def test_numeric_path_segment_before_query() -> None:
    assert extract_article_id("https://www.publico.pt/content/999?x=1") == "999"


def test_long_hyphenated_number_before_fragment() -> None:
    assert extract_article_id("https://www.publico.pt/desporto/jogo-123456#topo") == "123456"


def test_short_hyphenated_number_is_rejected() -> None:
    assert extract_article_id("https://www.publico.pt/desporto/jogo-123#topo") is None


@pytest.mark.parametrize("value", ["", None, 42, ["1"], "https://www.publico.pt/"])
def test_extraction_is_total(value: object) -> None:
    assert extract_article_id(value) is None


def test_extraction_is_deterministic() -> None:
    url = "https://www.publico.pt/noticia/slug-2077001"

    assert extract_article_id(url) == extract_article_id(url)


def test_custom_patterns_keep_declared_order() -> None:
    extractor = RegexIdExtractor([r"artigo=(\d+)", re.compile(r"/(\d+)\Z")])

    assert extractor.extract("https://example.com/ver/77?artigo=10") == "10"
    assert extractor.extract("https://example.com/ver/77") == "77"
    assert extractor.extract("https://example.com/ver") is None
