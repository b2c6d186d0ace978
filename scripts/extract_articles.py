#!/usr/bin/env python3
"""
CLI script for extracting LC 214/2025 articles into a JSON bundle.

Usage:
    # Default source and output (LC 214-2025.docx -> Dados/lc214-data.json)
    python scripts/extract_articles.py

    # Explicit source document
    python scripts/extract_articles.py "docs/LC 214-2025.docx"

    # Keep the converted text for inspection
    python scripts/extract_articles.py --dump-raw Dados/lc214-raw.txt

    # Re-segment a saved text dump, with paragraph/inciso breakdown
    python scripts/extract_articles.py Dados/lc214-raw.txt --structure
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))

from dotenv import load_dotenv
load_dotenv(root_dir / ".env")

from lc214.config import get_settings
from lc214.pipeline import extract_articles

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Extract LC 214/2025 articles from a .docx into a JSON bundle."
    )
    parser.add_argument(
        "source",
        type=Path,
        nargs="?",
        default=settings.articles_source_path,
        help=f"Statute .docx (or .txt dump) (default: {settings.articles_source_path})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.articles_output_path,
        help=f"Output path for the bundle JSON (default: {settings.articles_output_path})",
    )
    parser.add_argument(
        "--dump-raw",
        type=Path,
        default=None,
        help="Also save the converted plain text to this path",
    )
    parser.add_argument(
        "--structure",
        action="store_true",
        help="Add paragraph (§) and inciso lists to every article",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log rejected markers and article samples",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger("lc214").setLevel(logging.DEBUG)
    if args.structure:
        settings = settings.model_copy(update={"include_article_structure": True})

    start_time = time.time()
    try:
        bundle = extract_articles(
            source=args.source,
            output=args.output,
            settings=settings,
            dump_raw=args.dump_raw,
        )
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Article extraction failed: {e}")
        sys.exit(1)

    elapsed = time.time() - start_time

    # Summary
    logger.info("")
    logger.info("=" * 60)
    logger.info("Article extraction complete!")
    logger.info("=" * 60)
    logger.info(f"  Source: {args.source}")
    logger.info(f"  Text length: {len(bundle.full_text)} characters")
    logger.info(f"  Articles: {bundle.total}")
    if bundle.articles:
        logger.info(f"  First article: {bundle.articles[0].number}")
        logger.info(f"  Last article: {bundle.articles[-1].number}")
    logger.info(f"  Ementa: {len(bundle.preamble)} characters")
    logger.info(f"  Output: {args.output}")
    logger.info(f"  Time: {elapsed:.1f}s")
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
