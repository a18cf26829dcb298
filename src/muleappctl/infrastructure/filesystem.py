"""File operations for installing archives into the runtime home.

Layout under the runtime home::

    domains/<artifact file name>.temp (transient staging file)
    domains/<artifact file name>
    apps/<final name>.temp        (transient staging file)
    apps/<final name>.zip

INVARIANT: Final-named archives and domains are only ever produced by a
rename of a fully written staging file in the same directory.  Nothing
writes to a final name directly.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

APPS_DIR = "apps"
DOMAINS_DIR = "domains"
ARCHIVE_SUFFIX = ".zip"
STAGING_SUFFIX = ".temp"

# Copy buffer; archives are streamed, never loaded whole.
DEFAULT_CHUNK_SIZE = 64 * 1024


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def apps_directory(home: Path) -> Path:
    return home / APPS_DIR


def domains_directory(home: Path) -> Path:
    return home / DOMAINS_DIR


def staging_path(home: Path, final_name: str) -> Path:
    """``<home>/apps/<final_name>.temp``."""
    return apps_directory(home) / f"{final_name}{STAGING_SUFFIX}"


def published_path(home: Path, final_name: str) -> Path:
    """``<home>/apps/<final_name>.zip``."""
    return apps_directory(home) / f"{final_name}{ARCHIVE_SUFFIX}"


def domain_path(home: Path, artifact_file: Path) -> Path:
    """``<home>/domains/<artifact file name>`` (file name preserved)."""
    return domains_directory(home) / artifact_file.name


def domain_staging_path(home: Path, artifact_file: Path) -> Path:
    """``<home>/domains/<artifact file name>.temp``."""
    return domains_directory(home) / f"{artifact_file.name}{STAGING_SUFFIX}"


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def copy_file(source: Path, destination: Path, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Stream *source* into *destination*, truncating any existing file.

    Creates the destination's parent directory if needed.  Both handles
    are closed on every exit path.  Returns the number of bytes copied.

    Raises:
        shutil.SameFileError: If *destination* is *source*.
        OSError: If the source cannot be read or the destination written.
    """
    if same_file(source, destination):
        msg = f"{source} and {destination} are the same file"
        raise shutil.SameFileError(msg)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with source.open("rb") as src, destination.open("wb") as dst:
        shutil.copyfileobj(src, dst, chunk_size)
        dst.flush()
        os.fsync(dst.fileno())
        return dst.tell()


def publish(staging: Path, final: Path) -> None:
    """Atomically rename *staging* to *final* within the same directory.

    An existing *final* file is replaced in one step.  There is no
    copy-and-delete fallback.

    Raises:
        OSError: If the rename fails.
    """
    os.replace(staging, final)


def same_file(a: Path, b: Path) -> bool:
    """True if *a* and *b* both exist and are the same file (links included)."""
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False
