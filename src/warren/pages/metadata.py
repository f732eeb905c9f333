"""Per-page metadata (title, description) from ``metadata.json``.

The file lives in the app root and maps URIs (without the leading
slash, ``""`` for the home page) to metadata dicts.  A ``"default"``
entry covers every URI without its own.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger("warren.pages")

_BASE = {"title": "", "description": ""}


def load_metadata(path: Path, uri: str) -> dict[str, Any]:
    """Metadata for *uri*, always carrying ``title`` and ``description``."""
    if not path.is_file():
        return dict(_BASE)
    try:
        table = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable metadata file %s: %s", path, exc)
        return dict(_BASE)
    if not isinstance(table, dict):
        return dict(_BASE)
    found = table.get(uri.strip("/"))
    if not isinstance(found, dict):
        found = table.get("default")
    return {**_BASE, **(found if isinstance(found, dict) else {})}
