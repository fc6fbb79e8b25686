"""
JSON document storage.

Both persisted stores of the service, the configuration document and
the registration ledger, are plain JSON files that operators may edit
by hand.  This module resolves their locations and reads and writes
them as whole documents.  Reads never fail: a missing or unreadable
document yields the caller's fallback.  Writes replace the document in
one step (temporary file plus ``os.replace``) so a reader never sees a
half‑written file; write errors propagate as ``OSError``.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Directory that contains the ``slot_booking_api`` package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def resolve_path(path: str) -> Path:
    """Return ``path`` as is if absolute, else relative to the project root."""
    if os.path.isabs(path):
        return Path(path)
    return (PROJECT_ROOT / path).resolve()


def load_json(path: str, fallback: Any) -> Any:
    """Load a JSON document, returning ``fallback`` when it cannot be read."""
    file_path = resolve_path(path)
    if not file_path.exists():
        return fallback
    try:
        with open(file_path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s, using defaults: %s", file_path, e)
        return fallback


def save_json(path: str, data: Any) -> None:
    """Overwrite a JSON document.

    Raises
    ------
    OSError
        If the directory is not writable or the rename fails.
    """
    file_path = resolve_path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{file_path.name}.", dir=file_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
        os.replace(tmp_name, file_path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
