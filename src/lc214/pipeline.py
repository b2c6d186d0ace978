"""Extraction pipelines: load a source document, segment it, write JSON.

Each run either writes a complete artifact or raises; nothing is written
when loading or segmentation fails.
"""

import logging
from pathlib import Path

from .annexes import segment_annexes
from .config import Settings, get_settings
from .export import write_annexes, write_bundle
from .loader import load_html, load_text
from .parser import build_bundle
from .types import Annex, DocumentBundle

logger = logging.getLogger(__name__)

# Characters of each article logged as a sample after extraction
_SAMPLE_CHARS = 300
_SAMPLE_COUNT = 5


def _write_dump(content: str, dump_path: Path) -> None:
    dump_path = Path(dump_path)
    dump_path.parent.mkdir(parents=True, exist_ok=True)
    with open(dump_path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Converted document saved to {dump_path}")


def extract_articles(
    source: Path | None = None,
    output: Path | None = None,
    settings: Settings | None = None,
    dump_raw: Path | None = None,
) -> DocumentBundle:
    """
    Run the article pipeline: document -> text -> bundle -> JSON.

    Args:
        source: Statute document (default: ``settings.articles_source_path``)
        output: Target JSON file (default: ``settings.articles_output_path``)
        settings: Explicit settings; the shared settings are used when omitted
        dump_raw: Optional path receiving the converted plain text

    Returns:
        The bundle that was written

    Raises:
        FileNotFoundError: If the source document doesn't exist
        ConversionError: If the document cannot be converted
        OSError: If the output cannot be written
    """
    settings = settings or get_settings()
    source = Path(source or settings.articles_source_path)
    output = Path(output or settings.articles_output_path)

    logger.info(f"Reading statute text from {source}")
    text = load_text(source)

    if dump_raw:
        _write_dump(text, dump_raw)

    bundle = build_bundle(
        text,
        title=settings.document_title,
        min_number=settings.article_min_number,
        max_number=settings.article_max_number,
        reference_tokens=settings.reference_tokens,
        lookbehind_chars=settings.reference_lookbehind_chars,
        preamble_max_chars=settings.preamble_max_chars,
        include_structure=settings.include_article_structure,
    )

    for article in bundle.articles[:_SAMPLE_COUNT]:
        logger.debug("%s: %s...", article.label, article.body[:_SAMPLE_CHARS])

    write_bundle(bundle, output)
    return bundle


def extract_annexes(
    source: Path | None = None,
    output: Path | None = None,
    settings: Settings | None = None,
    dump_html: Path | None = None,
) -> list[Annex]:
    """
    Run the annex pipeline: document -> HTML -> annexes -> JSON.

    Same arguments and errors as ``extract_articles``; ``dump_html`` receives
    the converted HTML.
    """
    settings = settings or get_settings()
    source = Path(source or settings.annexes_source_path)
    output = Path(output or settings.annexes_output_path)

    logger.info(f"Converting {source} to HTML to extract annexes")
    document_html = load_html(source)

    if dump_html:
        _write_dump(document_html, dump_html)

    annexes = segment_annexes(document_html)
    write_annexes(annexes, output)
    return annexes
