"""Tests for the article segmenter."""

import dataclasses

import pytest
from lc214.parser import (
    build_bundle,
    compute_spans,
    extract_preamble,
    find_article_candidates,
    format_label,
    is_reference_context,
    segment_articles,
    split_structure,
)


# --- Unit tests for helper functions ---


class TestReferenceContext:
    def test_preposition_followed_by_space(self):
        assert is_reference_context("isposto no ") is True

    def test_preposition_without_trailing_space(self):
        assert is_reference_context("nforme o  do") is True

    def test_case_insensitive(self):
        assert is_reference_context("CONFORME ") is True

    def test_plain_sentence_end(self):
        assert is_reference_context("ribuinte. ") is False

    def test_token_must_be_a_whole_word(self):
        # "mundo" ends with "do" but is not the preposition
        assert is_reference_context(" no mundo ") is False

    def test_empty_context(self):
        assert is_reference_context("") is False

    def test_custom_tokens(self):
        assert is_reference_context("vide ", reference_tokens=("vide",)) is True
        assert is_reference_context("isposto no ", reference_tokens=("vide",)) is False


class TestFindArticleCandidates:
    def test_ordinal_variants(self):
        text = "Art. 1º Primeiro. Art. 2° Segundo. Art. 3. Terceiro. Art.4 Quarto."
        numbers = [c.number for c in find_article_candidates(text)]
        assert numbers == [1, 2, 3, 4]

    def test_candidates_keep_source_offsets(self):
        text = "Preâmbulo\nArt. 1º Texto."
        candidates = find_article_candidates(text)
        assert len(candidates) == 1
        assert candidates[0].start == text.index("Art. 1º")
        assert candidates[0].marker.startswith("Art. 1º")

    @pytest.mark.parametrize("number,accepted", [(0, False), (1, True), (600, True), (601, False), (9999, False)])
    def test_number_bounds(self, number, accepted):
        text = f"Art. {number}. Texto."
        assert bool(find_article_candidates(text)) is accepted

    def test_custom_bounds(self):
        text = "Art. 5. A. Art. 50. B."
        numbers = [c.number for c in find_article_candidates(text, min_number=10, max_number=60)]
        assert numbers == [50]

    def test_cross_reference_discarded(self):
        text = (
            "Art. 156. O imposto incide conforme disposto no Art. 156-A estabelece regras. "
            "Art. 157. O contribuinte recolhe."
        )
        numbers = [c.number for c in find_article_candidates(text)]
        assert numbers == [156, 157]
        # The surviving 156 starts at the heading, not at the reference
        assert find_article_candidates(text)[0].start == 0

    def test_marker_at_start_of_text_is_not_a_reference(self):
        candidates = find_article_candidates("Art. 9º Texto.")
        assert [c.number for c in candidates] == [9]

    def test_lowercase_art_is_not_a_heading(self):
        assert find_article_candidates("ver art. 10 da lei") == []

    def test_wider_lookbehind(self):
        text = "Art. 4. conforme\n\n\n\n\n\n\n\n\nArt. 5. Texto."
        # the token is outside a 10-char window but inside a 20-char one
        assert [c.number for c in find_article_candidates(text, lookbehind_chars=10)] == [4, 5]
        assert [c.number for c in find_article_candidates(text, lookbehind_chars=20)] == [4]


class TestSpans:
    def test_last_span_runs_to_end(self):
        text = "Art. 1º. Texto A. Art. 2º. Texto B."
        spans = list(compute_spans(text, find_article_candidates(text)))
        assert [(s, e) for _, s, e in spans] == [(0, text.index("Art. 2º")), (text.index("Art. 2º"), len(text))]

    def test_no_candidates(self):
        assert list(compute_spans("sem artigos", [])) == []


class TestSegmentArticles:
    def test_two_articles(self):
        text = "Art. 1º. Texto A. Art. 2º. Texto B."
        articles = segment_articles(text)
        assert [a.number for a in articles] == [1, 2]
        assert articles[0].body == "Art. 1º. Texto A."
        assert text.index(articles[0].body) + len(articles[0].body) + 1 == text.index("Art. 2º")
        assert articles[1].body == "Art. 2º. Texto B."
        assert articles[0].label == "Art. 1º"

    def test_duplicate_number_keeps_longest_span(self):
        text = "Art. 5º Curto.\nArt. 6º Seis.\nArt. 5º Versão mais completa do artigo cinco."
        articles = segment_articles(text)
        assert [a.number for a in articles] == [5, 6]
        assert articles[0].body == "Art. 5º Versão mais completa do artigo cinco."

    def test_duplicate_tie_keeps_first_seen(self):
        text = "Art. 5º AAAA\nArt. 5º BBBB"
        articles = segment_articles(text)
        assert len(articles) == 1
        assert articles[0].body == "Art. 5º AAAA"

    def test_sorted_by_number(self):
        text = "Art. 3º C.\nArt. 1º A.\nArt. 2º B."
        assert [a.number for a in segment_articles(text)] == [1, 2, 3]

    def test_no_matches(self):
        assert segment_articles("Texto sem artigos.") == []

    def test_structure_disabled_by_default(self):
        article = segment_articles("Art. 1º Texto.")[0]
        assert article.paragraphs is None
        assert article.items is None
        assert "paragrafos" not in article.to_dict()

    def test_structure_enabled(self):
        text = (
            "Art. 1º Ficam instituídos:\n"
            "I - o IBS;\n"
            "II – a CBS;\n"
            "§ 1º O IBS é de competência compartilhada.\n"
            "Parágrafo único. Disposição final."
        )
        article = segment_articles(text, include_structure=True)[0]
        assert article.items == ("I - o IBS;", "II – a CBS;")
        assert len(article.paragraphs) == 2
        assert article.paragraphs[0].startswith("§ 1º O IBS")
        assert article.paragraphs[1].startswith("Parágrafo único.")


def test_split_structure_empty_body():
    assert split_structure("") == ((), ())


def test_format_label():
    assert format_label(7) == "Art. 7º"


class TestPreamble:
    def test_text_before_article_one(self):
        text = "LEI COMPLEMENTAR Nº 214\nInstitui o IBS.\nArt. 1º Texto."
        candidates = find_article_candidates(text)
        assert extract_preamble(text, candidates) == "LEI COMPLEMENTAR Nº 214\nInstitui o IBS."

    def test_no_article_one(self):
        text = "Preâmbulo. Art. 2º Texto."
        assert extract_preamble(text, find_article_candidates(text)) == ""

    def test_truncated_to_max_chars(self):
        text = "x" * 1500 + "\nArt. 1º Texto."
        preamble = extract_preamble(text, find_article_candidates(text))
        assert len(preamble) == 1000

    def test_custom_max_chars(self):
        text = "abcdef Art. 1º Texto."
        assert extract_preamble(text, find_article_candidates(text), max_chars=3) == "abc"


class TestBuildBundle:
    def test_bundle_fields(self):
        text = "Ementa da lei.\nArt. 1º. Texto A. Art. 2º. Texto B."
        bundle = build_bundle(text, title="Lei X")
        data = bundle.to_dict()
        assert data["titulo"] == "Lei X"
        assert data["ementa"] == "Ementa da lei."
        assert data["totalArtigos"] == 2
        assert data["textoCompleto"] == text
        assert data["artigos"][0] == {
            "numero": 1,
            "titulo": "Art. 1º",
            "conteudo": "Art. 1º. Texto A.",
            "textoCompleto": "Art. 1º. Texto A.",
        }

    def test_empty_document_is_not_an_error(self):
        bundle = build_bundle("Nenhum artigo aqui.")
        assert bundle.total == 0
        assert bundle.to_dict()["artigos"] == []
        assert bundle.preamble == ""

    def test_each_number_appears_once(self):
        text = (
            "Art. 1º Objeto.\n"
            "Art. 2º Aplica-se o disposto no Art. 1º desta lei.\n"
            "Art. 2º Repetição do artigo dois com mais texto.\n"
            "Art. 3º Fim, nos termos do Art. 2º."
        )
        numbers = [a.number for a in build_bundle(text).articles]
        assert numbers == [1, 2, 3]

    def test_bundle_is_immutable(self):
        bundle = build_bundle("Art. 1º Texto A. Art. 2º Texto B.")
        assert isinstance(bundle.articles, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            bundle.title = "Outro título"
        with pytest.raises(AttributeError):
            bundle.articles.append(bundle.articles[0])
