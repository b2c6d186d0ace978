"""Search over the extracted articles and annexes: pure functions.

These back the three search modes of the browser: free text, article
number and annex lookup. All matching is a linear, case-insensitive
substring scan; the data set is a few hundred entries.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from .types import Annex, Article, SearchHit

ANNEX_EXCERPT_CHARS = 300
ROMAN_MAX = 3999

_WHITESPACE_RE = re.compile(r"\s+")
_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def to_roman(number: int) -> str:
    """Convert an integer in [1, 3999] to a roman numeral (3 -> "III", 14 -> "XIV")."""
    if number < 1 or number > ROMAN_MAX:
        raise ValueError(f"Roman numerals need an integer between 1 and {ROMAN_MAX}, got {number}")
    parts: list[str] = []
    for value, symbol in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def normalize_query(query: str) -> str:
    return _WHITESPACE_RE.sub(" ", (query or "").strip().lower())


def article_hit(article: Article) -> SearchHit:
    return SearchHit(
        kind="artigo",
        number=article.number,
        title=article.label,
        excerpt=article.body,
        body=article.body,
    )


def annex_hit(annex: Annex) -> SearchHit:
    excerpt = f"{annex.subtitle} {annex.body_text[:ANNEX_EXCERPT_CHARS]}"
    return SearchHit(
        kind="anexo",
        number=-1,
        title=annex.label,
        excerpt=excerpt,
        body=annex.body_html,
        annex_id=annex.id,
    )


def find_article(articles: Iterable[Article], query: str) -> list[SearchHit]:
    """Return the article whose number equals the query ("7", " 42 "); [] for non-numbers."""
    try:
        number = int((query or "").strip())
    except ValueError:
        return []
    return [article_hit(a) for a in articles if a.number == number]


def _annex_slug_candidates(term: str) -> list[str]:
    """Slug fragments for an annex query; arabic numbers are also tried as roman numerals."""
    slugs = [term.replace(" ", "-")]
    number_part = term.replace("anexo", "").strip()
    if not number_part.isdecimal():
        return slugs
    try:
        number = int(number_part)
    except ValueError:
        return slugs
    if 1 <= number <= ROMAN_MAX:
        slugs.append(f"anexo-{to_roman(number).lower()}")
    return slugs


def search_annexes(annexes: Iterable[Annex], query: str) -> list[SearchHit]:
    """
    Find annexes by id, heading or subtitle.

    "anexo iii", "III", "anexo 3" and "3" all find ANEXO III; a subtitle
    fragment such as "bens de capital" works too. Arabic numbers match the
    slug exactly, so "1" does not also return ANEXO XI.
    """
    term = normalize_query(query)
    if not term:
        return []

    slugs = _annex_slug_candidates(term)
    hits: list[SearchHit] = []
    for annex in annexes:
        annex_id = annex.id.lower()
        if (
            slugs[0] in annex_id
            or any(annex_id == slug for slug in slugs[1:])
            or term in annex.label.lower()
            or term in annex.subtitle.lower()
        ):
            hits.append(annex_hit(annex))
    return hits


def search_text(
    articles: Sequence[Article],
    annexes: Sequence[Annex],
    term: str,
) -> list[SearchHit]:
    """
    Free-text search: article bodies first, then annex heading/subtitle/text.

    A blank term returns every article and no annexes.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return [article_hit(a) for a in articles]

    hits = [article_hit(a) for a in articles if needle in a.body.lower()]
    for annex in annexes:
        haystack = f"{annex.label} {annex.subtitle} {annex.body_text}".lower()
        if needle in haystack:
            hits.append(annex_hit(annex))
    return hits


SEARCH_MODES = ("texto", "artigo", "anexo")


def run_search(
    mode: str,
    query: str,
    articles: Sequence[Article],
    annexes: Sequence[Annex],
) -> list[SearchHit]:
    """Dispatch a query to the search function for ``mode``; a blank query lists all articles."""
    if mode not in SEARCH_MODES:
        raise ValueError(f"Unknown search mode: {mode!r} (expected one of {', '.join(SEARCH_MODES)})")
    if not (query or "").strip():
        return [article_hit(a) for a in articles]
    if mode == "artigo":
        return find_article(articles, query)
    if mode == "anexo":
        return search_annexes(annexes, query)
    return search_text(articles, annexes, query)
