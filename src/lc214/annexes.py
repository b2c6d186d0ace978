"""Annex segmentation for the HTML rendering of the LC 214/2025 annex document."""

import html
import logging
import re

from bs4 import BeautifulSoup

from .types import Annex

logger = logging.getLogger(__name__)

# Paragraph content may not contain another <p> opening, so an unclosed <p>
# does not swallow the paragraph that follows it.
_PARAGRAPH_RE = re.compile(r"<p(?:\s[^>]*)?>((?:(?!<p[\s>]).)*?)</p>", flags=re.DOTALL)
_ANNEX_HEADING_RE = re.compile(r"ANEXO\s+[IVXLC]+")
# Unclosed trailing tags ("<td") are stripped too.
_TAG_RE = re.compile(r"<[^>]*>?")
_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_tags(fragment: str) -> str:
    """Replace every tag with a space, decode entities and collapse whitespace."""
    return collapse_whitespace(html.unescape(_TAG_RE.sub(" ", fragment)))


def slugify_label(label: str) -> str:
    """
    Build an annex id from its heading.

    Examples:
        "ANEXO XV" -> "anexo-xv"
    """
    return _WHITESPACE_RE.sub("-", label.strip()).lower()


def find_annex_headings(document_html: str) -> list[tuple[str, int, int]]:
    """
    Locate annex heading paragraphs.

    A paragraph is a heading when its whole text content (inline markup
    ignored) is "ANEXO" followed by a roman numeral.

    Returns:
        (label, start, end) per heading in document order, where start/end
        delimit the whole <p>...</p> element
    """
    headings: list[tuple[str, int, int]] = []
    for match in _PARAGRAPH_RE.finditer(document_html):
        text = strip_tags(match.group(1))
        if _ANNEX_HEADING_RE.fullmatch(text):
            headings.append((text, match.start(), match.end()))
    return headings


def extract_subtitle(fragment: str) -> str:
    """Return the text of the first paragraph in an HTML fragment, or ""."""
    if not fragment:
        return ""
    soup = BeautifulSoup(fragment, "html.parser")
    first_paragraph = soup.find("p")
    if first_paragraph is None:
        return ""
    return collapse_whitespace(first_paragraph.get_text())


def segment_annexes(document_html: str) -> list[Annex]:
    """
    Slice annex HTML into one Annex per "ANEXO <roman>" heading.

    Each annex body runs from the end of its heading paragraph to the start
    of the next heading paragraph, or to the end of the document.

    Args:
        document_html: HTML rendering of the annex document

    Returns:
        Annexes in document order (empty when no heading is found)
    """
    if not document_html or not document_html.strip():
        logger.warning("Empty HTML document; no annexes extracted")
        return []

    headings = find_annex_headings(document_html)
    annexes: list[Annex] = []

    for idx, (label, _, heading_end) in enumerate(headings):
        next_start = headings[idx + 1][1] if idx + 1 < len(headings) else len(document_html)
        body_html = document_html[heading_end:next_start].strip()

        annexes.append(
            Annex(
                id=slugify_label(label),
                label=label,
                subtitle=extract_subtitle(body_html),
                body_html=body_html,
                body_text=strip_tags(body_html),
            )
        )

    if annexes:
        logger.info(f"Segmented {len(annexes)} annexes ({annexes[0].label} to {annexes[-1].label})")
    else:
        logger.warning("No annex headings found in HTML (%s characters)", len(document_html))
    return annexes
