"""ArchiveService — check a packaged application's contents.

Used to verify what went into an archive: entries that must be present
(e.g. an archived ``classes`` jar) and entries that must have been left
out (e.g. an excluded transitive library under ``lib/``).
"""

from __future__ import annotations

import zipfile
from collections.abc import Iterable
from pathlib import Path

from muleappctl.infrastructure.archives import list_entries
from muleappctl.services.base import BaseService
from muleappctl.services.result import ServiceResult


class ArchiveService(BaseService):
    """Read-only checks over application archives."""

    def inspect(
        self,
        path: Path,
        *,
        expect: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> ServiceResult:
        """List *path*'s entries and verify *expect* / *exclude*."""
        op = "inspect"

        if not path.is_file():
            return ServiceResult.fail(
                op, "ARCHIVE_NOT_FOUND", f"Archive {path} does not exist", path=str(path)
            )

        try:
            entries = list_entries(path)
        except (OSError, zipfile.BadZipFile) as exc:
            return ServiceResult.fail(
                op,
                "ARCHIVE_UNREADABLE",
                f"Cannot read {path} as a zip archive: {exc}",
                path=str(path),
            )

        names = set(entries)
        missing = [e for e in expect if e not in names]
        present = [e for e in exclude if e in names]

        if missing or present:
            parts = []
            if missing:
                parts.append(f"missing {', '.join(missing)}")
            if present:
                parts.append(f"unexpectedly contains {', '.join(present)}")
            return ServiceResult.fail(
                op,
                "ARCHIVE_ASSERTION_FAILED",
                f"Archive {path.name} " + "; ".join(parts),
                path=str(path),
                missing=missing,
                present=present,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "count": len(entries), "entries": entries},
        )
