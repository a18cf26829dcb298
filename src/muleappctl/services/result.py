"""Outcome types shared by the install, inspect and capability services.

Every public service method hands back a :class:`ServiceResult`.  Typed
``InstallError`` exceptions stop at the service boundary and arrive here
as a :class:`ServiceError` carrying the same code and detail, so a
calling build tool can branch on ``error.code`` without catching.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable code, a message for humans, context."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Result of ``install``, ``inspect`` or ``capability``.

    Attributes:
        ok: False exactly when ``error`` is set.
        op: Operation name, used to pick a renderer.
        data: Payload on success.  Install runs put ``status``
            (``installed`` or ``skipped``) and the visited ``states`` here.
        warnings: Non-fatal notes, e.g. an unset runtime home.
        error: Code, message and detail of a failed run.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def fail(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result for *op*; keyword arguments become ``error.detail``."""
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @property
    def status(self) -> str:
        """``installed``/``skipped`` for install runs, ``failed`` on error, else ``ok``."""
        if not self.ok:
            return "failed"
        return str(self.data.get("status", "ok"))
