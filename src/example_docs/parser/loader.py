"""Read documentation files into plain JSON values."""

import json
import logging
from pathlib import Path
from typing import Any

from example_docs.errors import DocumentParseError, DocumentReadError

logger = logging.getLogger(__name__)


def load_document(file_path: Path | str) -> Any:
    """Read a whole file and parse it as JSON.

    Raises DocumentReadError when the file cannot be read and
    DocumentParseError when its content is not valid JSON.
    """
    file_path = Path(file_path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(file_path, getattr(e, "strerror", None) or str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(file_path, e.msg, lineno=e.lineno, colno=e.colno) from e

    logger.debug("Loaded %s (%d bytes)", file_path, len(text))
    return data


def require_object(data: Any, file_path: Path | str) -> dict:
    """Return ``data`` if it is a JSON object, else raise DocumentParseError."""
    if not isinstance(data, dict):
        raise DocumentParseError(file_path, f"expected a JSON object, got {type(data).__name__}")
    return data
