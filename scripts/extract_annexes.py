#!/usr/bin/env python3
"""
CLI script for extracting LC 214/2025 annexes (with their tables) into JSON.

Usage:
    # Default source and output (LC 214-2025 - ANEXOS.docx -> Dados/lc214-anexos.json)
    python scripts/extract_annexes.py

    # Save the HTML conversion to check how headings were rendered
    python scripts/extract_annexes.py --dump-html test-anexos.html

    # Re-segment a saved HTML dump
    python scripts/extract_annexes.py test-anexos.html --output /tmp/anexos.json
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
from lc214.pipeline import extract_annexes

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Extract LC 214/2025 annexes from a .docx into JSON."
    )
    parser.add_argument(
        "source",
        type=Path,
        nargs="?",
        default=settings.annexes_source_path,
        help=f"Annex .docx (or .html dump) (default: {settings.annexes_source_path})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.annexes_output_path,
        help=f"Output path for the annex JSON (default: {settings.annexes_output_path})",
    )
    parser.add_argument(
        "--dump-html",
        type=Path,
        default=None,
        help="Also save the converted HTML to this path",
    )
    args = parser.parse_args()

    start_time = time.time()
    try:
        annexes = extract_annexes(
            source=args.source,
            output=args.output,
            settings=settings,
            dump_html=args.dump_html,
        )
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Annex extraction failed: {e}")
        sys.exit(1)

    elapsed = time.time() - start_time

    # Summary
    logger.info("")
    logger.info("=" * 60)
    logger.info("Annex extraction complete!")
    logger.info("=" * 60)
    logger.info(f"  Source: {args.source}")
    logger.info(f"  Annexes: {len(annexes)}")
    for annex in annexes:
        logger.info(f"    {annex.label}: {annex.subtitle[:80]}")
    logger.info(f"  Output: {args.output}")
    logger.info(f"  Time: {elapsed:.1f}s")
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
