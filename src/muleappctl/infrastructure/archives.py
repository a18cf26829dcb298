"""Read-only access to packaged application archives."""

from __future__ import annotations

import zipfile
from pathlib import Path


def list_entries(path: Path) -> list[str]:
    """Return the entry names of the zip archive at *path*, in archive order.

    Raises:
        FileNotFoundError: If *path* does not exist.
        zipfile.BadZipFile: If *path* is not a zip archive.
    """
    with zipfile.ZipFile(path) as archive:
        return archive.namelist()
