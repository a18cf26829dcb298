"""BaseService — shared foundation for muleappctl services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from muleappctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from muleappctl.config.settings import MuleSettings
    from muleappctl.domain.errors import InstallError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Services receive the frozen settings at construction time and turn
    typed domain errors into failed results at their public boundary.
    """

    def __init__(self, settings: MuleSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(
        op: str,
        exc: InstallError,
        *,
        warnings: list[str] | None = None,
        extra: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Convert *exc* into a failed ServiceResult."""
        detail = {**exc.detail, **(extra or {})}
        logger.debug("%s failed: %s (%s)", op, exc.message, exc.code)
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=exc.code, message=exc.message, detail=detail),
        )
