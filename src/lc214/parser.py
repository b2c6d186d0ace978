"""Article segmentation for the plain-text rendering of LC 214/2025.

The statute text is split on "Art. N" headings. Because the same pattern also
appears in cross-references ("conforme disposto no art. 156-A"), a match is
only accepted when its number is within bounds and the few characters
before it do not end with a reference preposition.
"""

import functools
import logging
import re
from typing import Iterable, Iterator, Sequence

from .config import DEFAULT_REFERENCE_TOKENS
from .types import Article, ArticleCandidate, DocumentBundle

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Lei Complementar nº 214, de 16 de janeiro de 2025"
DEFAULT_MIN_NUMBER = 1
DEFAULT_MAX_NUMBER = 600
DEFAULT_LOOKBEHIND_CHARS = 10
DEFAULT_PREAMBLE_MAX_CHARS = 1000
REFERENCE_TOKENS = tuple(DEFAULT_REFERENCE_TOKENS)

_ARTICLE_MARKER_RE = re.compile(r"\bArt\.\s*(\d+)[º°]?\.?\s*")
# A clause runs until the next "§" or "Parágrafo único"
_PARAGRAPH_RE = re.compile(
    r"(§\s*\d+[º°]?\.?|Parágrafo único\.?)\s*(?:(?!Parágrafo único)[^§])*",
    flags=re.IGNORECASE,
)
_ITEM_RE = re.compile(r"^[IVXLCDM]+[ \t]*[-–—][ \t]*.+$", flags=re.MULTILINE)


@functools.lru_cache(maxsize=16)
def _reference_suffix_re(tokens: tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(re.escape(token.lower()) for token in tokens)
    return re.compile(rf"\b(?:{alternatives})\s*$")


def is_reference_context(
    preceding: str,
    reference_tokens: Sequence[str] = REFERENCE_TOKENS,
) -> bool:
    """
    Return True when the text before a marker ends with a reference preposition.

    Examples:
        "disposto no " -> True   (cross-reference: "... no Art. 156")
        "contribuinte. " -> False
        "" -> False
    """
    if not preceding:
        return False
    return bool(_reference_suffix_re(tuple(reference_tokens)).search(preceding.lower()))


def find_article_candidates(
    text: str,
    min_number: int = DEFAULT_MIN_NUMBER,
    max_number: int = DEFAULT_MAX_NUMBER,
    reference_tokens: Sequence[str] = REFERENCE_TOKENS,
    lookbehind_chars: int = DEFAULT_LOOKBEHIND_CHARS,
) -> list[ArticleCandidate]:
    """
    Scan text for article headings, dropping out-of-range numbers and cross-references.

    Args:
        text: Plain statute text
        min_number: Lowest accepted article number
        max_number: Highest accepted article number
        reference_tokens: Prepositions that mark a match as a cross-reference
        lookbehind_chars: How many characters before a match are inspected

    Returns:
        Accepted candidates in source order
    """
    candidates: list[ArticleCandidate] = []
    out_of_range = 0
    references = 0

    for match in _ARTICLE_MARKER_RE.finditer(text):
        number = int(match.group(1))
        if number < min_number or number > max_number:
            out_of_range += 1
            continue

        start = match.start()
        preceding = text[max(0, start - lookbehind_chars):start]
        if is_reference_context(preceding, reference_tokens):
            references += 1
            continue

        candidates.append(ArticleCandidate(start=start, number=number, marker=match.group(0)))

    logger.debug(
        "Article markers: %s accepted, %s out of range, %s cross-references",
        len(candidates),
        out_of_range,
        references,
    )
    return candidates


def compute_spans(
    text: str,
    candidates: Sequence[ArticleCandidate],
) -> Iterator[tuple[ArticleCandidate, int, int]]:
    """Yield (candidate, start, end) where end is the next candidate's start or end of text."""
    for idx, candidate in enumerate(candidates):
        end = candidates[idx + 1].start if idx + 1 < len(candidates) else len(text)
        yield candidate, candidate.start, end


def format_label(number: int) -> str:
    return f"Art. {number}º"


def split_structure(body: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """
    Split an article body into its paragraph clauses and inciso lines.

    Returns:
        (paragraphs, items), e.g. (("§ 1º O imposto ...",), ("I - bens;", "II - serviços;"))
    """
    paragraphs = tuple(m.group(0).strip() for m in _PARAGRAPH_RE.finditer(body))
    items = tuple(m.group(0).strip() for m in _ITEM_RE.finditer(body))
    return paragraphs, items


def _dedupe_longest(
    spans: Iterable[tuple[ArticleCandidate, int, int]],
    text: str,
) -> dict[int, str]:
    """Keep the longest trimmed span per article number (first seen wins ties)."""
    bodies: dict[int, str] = {}
    for candidate, start, end in spans:
        body = text[start:end].strip()
        existing = bodies.get(candidate.number)
        if existing is None or len(body) > len(existing):
            if existing is not None:
                logger.debug(
                    "Article %s repeated; keeping longer span (%s > %s chars)",
                    candidate.number,
                    len(body),
                    len(existing),
                )
            bodies[candidate.number] = body
    return bodies


def segment_articles(
    text: str,
    candidates: Sequence[ArticleCandidate] | None = None,
    include_structure: bool = False,
    **candidate_options,
) -> list[Article]:
    """
    Split statute text into one Article per article number, sorted by number.

    Args:
        text: Plain statute text
        candidates: Pre-computed candidates; found with ``candidate_options`` when omitted
        include_structure: Populate ``paragraphs`` and ``items`` on every article

    Returns:
        Articles sorted by ascending number, unique per number
    """
    if candidates is None:
        candidates = find_article_candidates(text, **candidate_options)

    bodies = _dedupe_longest(compute_spans(text, candidates), text)

    articles: list[Article] = []
    for number in sorted(bodies):
        body = bodies[number]
        paragraphs = items = None
        if include_structure:
            paragraphs, items = split_structure(body)
        articles.append(
            Article(
                number=number,
                label=format_label(number),
                body=body,
                paragraphs=paragraphs,
                items=items,
            )
        )
    return articles


def extract_preamble(
    text: str,
    candidates: Sequence[ArticleCandidate],
    max_chars: int = DEFAULT_PREAMBLE_MAX_CHARS,
) -> str:
    """Return the text before Art. 1 (trimmed, truncated), or "" if there is no Art. 1."""
    first = next((c for c in candidates if c.number == 1), None)
    if first is None:
        return ""
    return text[:first.start].strip()[:max_chars]


def build_bundle(
    text: str,
    title: str = DEFAULT_TITLE,
    min_number: int = DEFAULT_MIN_NUMBER,
    max_number: int = DEFAULT_MAX_NUMBER,
    reference_tokens: Sequence[str] = REFERENCE_TOKENS,
    lookbehind_chars: int = DEFAULT_LOOKBEHIND_CHARS,
    preamble_max_chars: int = DEFAULT_PREAMBLE_MAX_CHARS,
    include_structure: bool = False,
) -> DocumentBundle:
    """
    Build the article bundle for a statute text.

    A text without any article heading yields an empty bundle, not an error.
    """
    candidates = find_article_candidates(
        text,
        min_number=min_number,
        max_number=max_number,
        reference_tokens=reference_tokens,
        lookbehind_chars=lookbehind_chars,
    )
    articles = segment_articles(text, candidates=candidates, include_structure=include_structure)
    preamble = extract_preamble(text, candidates, max_chars=preamble_max_chars)

    if not articles:
        logger.warning("No article headings found in text (%s characters)", len(text))
    else:
        logger.info(
            f"Segmented {len(articles)} unique articles from {len(candidates)} headings "
            f"(Art. {articles[0].number} to Art. {articles[-1].number})"
        )

    return DocumentBundle(
        title=title,
        preamble=preamble,
        articles=tuple(articles),
        full_text=text,
    )
