"""lc214 - Article and annex extraction for Lei Complementar nº 214/2025."""

__version__ = "0.1.0"

# Types
from .types import Annex, Article, ArticleCandidate, DocumentBundle, SearchHit

# Loading
from .loader import ConversionError, load_html, load_text

# Segmentation
from .parser import (
    build_bundle,
    extract_preamble,
    find_article_candidates,
    segment_articles,
    split_structure,
)
from .annexes import segment_annexes, slugify_label

# Export
from .export import load_annexes, load_bundle, write_annexes, write_bundle

# Pipelines
from .pipeline import extract_annexes, extract_articles

# Search
from .search import find_article, run_search, search_annexes, search_text, to_roman

__all__ = [
    # types
    "Annex",
    "Article",
    "ArticleCandidate",
    "DocumentBundle",
    "SearchHit",
    # loader
    "ConversionError",
    "load_html",
    "load_text",
    # segmentation
    "build_bundle",
    "extract_preamble",
    "find_article_candidates",
    "segment_articles",
    "split_structure",
    "segment_annexes",
    "slugify_label",
    # export
    "load_annexes",
    "load_bundle",
    "write_annexes",
    "write_bundle",
    # pipelines
    "extract_annexes",
    "extract_articles",
    # search
    "find_article",
    "run_search",
    "search_annexes",
    "search_text",
    "to_roman",
]
