"""JSON export and load-back of the generated LC 214 artifacts."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable

from .types import Annex, DocumentBundle

logger = logging.getLogger(__name__)

JSON_INDENT = 2


def _current_umask() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _write_json(payload: Any, output_path: Path) -> None:
    """
    Write JSON to output_path, replacing any existing file.

    The payload goes to a temporary sibling first and is moved into place
    only once fully written, so a failed run leaves the previous file as it was.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_path.name}.",
        suffix=".tmp",
        dir=output_path.parent,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=JSON_INDENT)
        # mkstemp creates 0600 files; use the mode a plain open() would give
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, output_path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def write_bundle(bundle: DocumentBundle, output_path: Path) -> Path:
    """
    Write the article bundle to JSON.

    Args:
        bundle: Bundle produced by ``parser.build_bundle``
        output_path: Target file (parent directories are created)

    Returns:
        The path written

    Raises:
        OSError: If the directory cannot be created or the file cannot be written
    """
    try:
        _write_json(bundle.to_dict(), output_path)
    except OSError as e:
        logger.error(f"Failed to write article bundle to {output_path}: {e}")
        raise
    logger.info(f"Article bundle written to {output_path} ({bundle.total} articles)")
    return Path(output_path)


def write_annexes(annexes: Iterable[Annex], output_path: Path) -> Path:
    """Write the annex collection to JSON. Raises OSError on write failure."""
    payload = [annex.to_dict() for annex in annexes]
    try:
        _write_json(payload, output_path)
    except OSError as e:
        logger.error(f"Failed to write annexes to {output_path}: {e}")
        raise
    logger.info(f"Annexes written to {output_path} ({len(payload)} entries)")
    return Path(output_path)


def _read_json(path: Path) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e


def load_bundle(path: Path) -> DocumentBundle:
    """
    Load a previously written article bundle.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a valid article bundle
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    try:
        return DocumentBundle.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed article bundle in {path}: {e}") from e


def load_annexes(path: Path) -> list[Annex]:
    """Load a previously written annex collection (same errors as ``load_bundle``)."""
    data = _read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {path}")
    try:
        return [Annex.from_dict(item) for item in data]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed annex collection in {path}: {e}") from e
