from publico_core.domain.contracts import ArticleIcon, ArticlePayload, ArticleView, SingleAuthor
from publico_core.interfaces.render import (
    FULL_ARTICLE_NOTICE,
    render_article,
    render_error,
    render_list,
    view_to_dict,
)


def _view(**overrides: object) -> ArticleView:
    data = {
        "title": "Governo anuncia medidas",
        "url": "https://www.publico.pt/politica/noticia/governo-anuncia-2077001",
        "article_id": "2077001",
        "authors": "Ana, Rui",
        "tags": ("Política", "Governo"),
        "summary": "Governo anuncia",
        "published": "10/01/2024 10:30",
        "icon": ArticleIcon(source="globe", tint_color="#1E90FF"),
    }
    data.update(overrides)
    return ArticleView(**data)  # type: ignore[arg-type]


def test_render_list_item_lists_metadata() -> None:
    output = render_list([_view()], empty_title="Vazio", empty_description="-")

    assert output.startswith("# Governo anuncia medidas\n\n---\n\nGoverno anuncia\n")
    assert "- Autor: Ana, Rui" in output
    assert "- Publicado: 10/01/2024 10:30" in output
    assert "- Palavras-chave: Política, Governo" in output


def test_render_list_item_placeholders() -> None:
    output = render_list([_view(summary="", tags=())], empty_title="Vazio", empty_description="-")

    assert "Sem resumo disponível." in output
    assert "- Palavras-chave: Não disponível" in output


def test_render_empty_list() -> None:
    output = render_list([], empty_title="Nenhum artigo encontrado", empty_description="Tente outra.")

    assert output == "# Nenhum artigo encontrado\n\nTente outra.\n"


def test_render_error() -> None:
    assert render_error("Falhou") == "# Erro\n\nFalhou\n"


def test_render_article_with_body() -> None:
    detail = ArticlePayload(
        title="<i>Governo</i> anuncia",
        lead="Medidas para a habitação",
        body="<p>Texto <b>completo</b></p>",
        data="2024-01-10T10:30:00",
        authors=SingleAuthor("Ana"),
    )

    output = render_article(detail, article_title="Fallback")

    assert output == (
        "# Governo anuncia\n\n"
        "*Ana • 10/01/2024 10:30*\n\n"
        "**Medidas para a habitação**\n\n"
        "Texto completo\n"
    )


def test_render_article_without_body_points_to_site() -> None:
    output = render_article(ArticlePayload(), article_title="Título da listagem")

    assert output.startswith("# Título da listagem\n\n*Não disponível • Não disponível*\n\n")
    assert FULL_ARTICLE_NOTICE in output


def test_view_to_dict_is_json_friendly() -> None:
    data = view_to_dict(_view())

    assert data["tags"] == ["Política", "Governo"]
    assert data["tag_colors"] == ["#B22222", "#4B0082"]
    assert data["icon"] == {"source": "globe", "tint_color": "#1E90FF"}
