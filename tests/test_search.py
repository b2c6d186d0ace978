"""Tests for article and annex search."""

import pytest
from lc214.search import (
    find_article,
    run_search,
    search_annexes,
    search_text,
    to_roman,
)
from lc214.types import Annex, Article


@pytest.fixture
def articles():
    return [
        Article(number=1, label="Art. 1º", body="Art. 1º Fica instituído o Imposto sobre Bens e Serviços."),
        Article(number=2, label="Art. 2º", body="Art. 2º A Contribuição Social sobre Bens e Serviços."),
        Article(number=42, label="Art. 42º", body="Art. 42º O cashback será devolvido."),
    ]


@pytest.fixture
def annexes():
    def make(numeral, subtitle, text):
        label = f"ANEXO {numeral}"
        return Annex(
            id=f"anexo-{numeral.lower()}",
            label=label,
            subtitle=subtitle,
            body_html=f"<p>{subtitle}</p><p>{text}</p>",
            body_text=f"{subtitle} {text}",
        )

    return [
        make("I", "Cesta básica nacional", "Arroz, feijão e leite"),
        make("III", "Dispositivos médicos", "Cadeiras de rodas"),
        make("XI", "Produtos hortícolas", "Batata e cebola"),
    ]


class TestToRoman:
    @pytest.mark.parametrize("number,expected", [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (25, "XXV"), (40, "XL")])
    def test_values(self, number, expected):
        assert to_roman(number) == expected

    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            to_roman(0)

    def test_upper_bound(self):
        assert to_roman(3999) == "MMMCMXCIX"
        with pytest.raises(ValueError):
            to_roman(4000)


class TestFindArticle:
    def test_exact_number(self, articles):
        hits = find_article(articles, " 42 ")
        assert [h.number for h in hits] == [42]
        assert hits[0].kind == "artigo"
        assert hits[0].is_annex is False

    def test_unknown_number(self, articles):
        assert find_article(articles, "7") == []

    def test_not_a_number(self, articles):
        assert find_article(articles, "quarenta") == []


class TestSearchAnnexes:
    def test_by_roman_numeral(self, annexes):
        hits = search_annexes(annexes, "anexo iii")
        assert [h.annex_id for h in hits] == ["anexo-iii"]

    def test_by_arabic_number(self, annexes):
        assert [h.annex_id for h in search_annexes(annexes, "3")] == ["anexo-iii"]
        assert [h.annex_id for h in search_annexes(annexes, "Anexo 11")] == ["anexo-xi"]

    def test_arabic_one_does_not_match_eleven(self, annexes):
        assert [h.annex_id for h in search_annexes(annexes, "1")] == ["anexo-i"]

    def test_by_subtitle(self, annexes):
        hits = search_annexes(annexes, "DISPOSITIVOS")
        assert [h.title for h in hits] == ["ANEXO III"]

    def test_hit_shape(self, annexes):
        hit = search_annexes(annexes, "anexo i")[0]
        assert hit.number == -1
        assert hit.is_annex
        assert hit.body == "<p>Cesta básica nacional</p><p>Arroz, feijão e leite</p>"
        assert hit.excerpt == "Cesta básica nacional Cesta básica nacional Arroz, feijão e leite"

    def test_blank_query(self, annexes):
        assert search_annexes(annexes, "  ") == []

    def test_superscript_digit_is_not_a_number(self, annexes):
        assert search_annexes(annexes, "anexo ²") == []

    def test_huge_number_finds_nothing(self, annexes):
        assert search_annexes(annexes, "anexo 99999999999999") == []
        assert search_annexes(annexes, "4000") == []


class TestSearchText:
    def test_articles_then_annexes(self, articles, annexes):
        hits = search_text(articles, annexes, "bens")
        assert [h.kind for h in hits] == ["artigo", "artigo"]

        hits = search_text(articles, annexes, "FEIJÃO")
        assert [h.annex_id for h in hits] == ["anexo-i"]

    def test_mixed_results_keep_order(self, articles, annexes):
        hits = search_text(articles, annexes, "a")
        assert [h.kind for h in hits] == ["artigo"] * 3 + ["anexo"] * 3
        assert [h.annex_id for h in hits[3:]] == ["anexo-i", "anexo-iii", "anexo-xi"]

    def test_blank_term_lists_articles(self, articles, annexes):
        assert len(search_text(articles, annexes, "")) == 3

    def test_no_results(self, articles, annexes):
        assert search_text(articles, annexes, "inexistente") == []


class TestRunSearch:
    def test_dispatch(self, articles, annexes):
        assert [h.number for h in run_search("artigo", "2", articles, annexes)] == [2]
        assert [h.annex_id for h in run_search("anexo", "XI", articles, annexes)] == ["anexo-xi"]
        assert len(run_search("texto", "cashback", articles, annexes)) == 1

    def test_blank_query_lists_articles(self, articles, annexes):
        assert [h.number for h in run_search("anexo", "", articles, annexes)] == [1, 2, 42]

    def test_annex_mode_out_of_range_number(self, articles, annexes):
        assert run_search("anexo", "anexo 99999999999999", articles, annexes) == []

    def test_unknown_mode(self, articles, annexes):
        with pytest.raises(ValueError):
            run_search("capitulo", "1", articles, annexes)
