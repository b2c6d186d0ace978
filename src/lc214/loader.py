"""Document loading: office documents to plain text or HTML via mammoth."""

import logging
from pathlib import Path

import mammoth

logger = logging.getLogger(__name__)

_DOCX_SUFFIXES = {".docx"}
_TEXT_SUFFIXES = {".txt"}
_HTML_SUFFIXES = {".html", ".htm"}


class ConversionError(ValueError):
    """Raised when a source document cannot be converted to text or HTML."""


def normalize_line_endings(text: str) -> str:
    """Collapse CRLF and lone CR line endings into a single newline."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _check_source(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")


def _read_dump(path: Path) -> str:
    """Read a previously converted text/HTML dump."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode {path}: {e}")
        raise ConversionError(f"Cannot decode file as UTF-8: {path}") from e


def _convert_docx(path: Path, converter, kind: str) -> str:
    """Run a mammoth converter over a .docx file and log its warnings."""
    try:
        with open(path, "rb") as docx_file:
            result = converter(docx_file)
    except OSError:
        raise
    except Exception as e:
        logger.error(f"Failed to convert {path} to {kind}: {e}")
        raise ConversionError(f"Cannot convert {path} to {kind}: {e}") from e

    for message in result.messages:
        logger.warning("mammoth %s for %s: %s", message.type, path.name, message.message)
    return result.value


def load_text(path: Path) -> str:
    """
    Convert a document to plain text with normalized line endings.

    Args:
        path: .docx file, or a .txt dump of an earlier conversion

    Returns:
        The document text using "\\n" line endings

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConversionError: If the file cannot be converted
    """
    path = Path(path)
    _check_source(path)

    suffix = path.suffix.lower()
    if suffix in _DOCX_SUFFIXES:
        text = _convert_docx(path, mammoth.extract_raw_text, "text")
    elif suffix in _TEXT_SUFFIXES:
        text = _read_dump(path)
    else:
        raise ConversionError(f"Unsupported document type for text conversion: {path}")

    text = normalize_line_endings(text)
    logger.info(f"Loaded {len(text)} characters of text from {path.name}")
    return text


def load_html(path: Path) -> str:
    """
    Convert a document to HTML.

    Args:
        path: .docx file, or an .html/.htm dump of an earlier conversion

    Returns:
        HTML rendering of the document body

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConversionError: If the file cannot be converted
    """
    path = Path(path)
    _check_source(path)

    suffix = path.suffix.lower()
    if suffix in _DOCX_SUFFIXES:
        html = _convert_docx(path, mammoth.convert_to_html, "HTML")
    elif suffix in _HTML_SUFFIXES:
        html = _read_dump(path)
    else:
        raise ConversionError(f"Unsupported document type for HTML conversion: {path}")

    logger.info(f"Loaded {len(html)} characters of HTML from {path.name}")
    return html
