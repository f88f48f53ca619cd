"""Auto-detect which kind of documentation file a JSON value is."""

from pathlib import Path
from typing import Any

from example_docs.errors import DocumentParseError


def detect_kind(data: Any, file_path: Path | str = "<data>") -> str:
    """Detect the kind of a parsed documentation file.

    Returns: 'index' or 'example'.
    """
    if isinstance(data, dict):
        if "resources" in data:
            return "index"
        if "requests" in data:
            return "example"
    raise DocumentParseError(file_path, "neither an index nor an example document")
