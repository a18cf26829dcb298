"""Typed install failures.

Every failure of an install run is an :class:`InstallError`.  The service
boundary converts it into a failed ``ServiceResult`` carrying ``code``,
the message, and ``detail`` (which always includes the failing ``stage``).
"""

from __future__ import annotations

from typing import Any


class InstallError(Exception):
    """Base class for failures that abort an install run."""

    default_code = "INSTALL_FAILED"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        stage: str = "",
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.stage = stage
        self.detail: dict[str, Any] = dict(detail or {})
        if stage:
            self.detail.setdefault("stage", stage)


class ConfigurationError(InstallError):
    """Missing or malformed ``domain_dependency`` when a domain install is requested."""

    default_code = "DOMAIN_NOT_CONFIGURED"


class UnresolvedDependencyError(InstallError):
    """The domain coordinates are not among the resolved dependencies."""

    default_code = "DOMAIN_NOT_DECLARED"


class HomeValidationError(InstallError):
    """The configured runtime home is missing, not a directory, or not writable."""

    default_code = "HOME_INVALID"


class InstallIOError(InstallError):
    """A copy or rename failed after file-system mutation began."""

    default_code = "IO_FAILED"
