"""Tests for the typed install errors."""

from muleappctl.domain.errors import (
    ConfigurationError,
    HomeValidationError,
    InstallError,
    InstallIOError,
    UnresolvedDependencyError,
)


class TestInstallError:
    def test_default_codes(self) -> None:
        assert ConfigurationError("x").code == "DOMAIN_NOT_CONFIGURED"
        assert UnresolvedDependencyError("x").code == "DOMAIN_NOT_DECLARED"
        assert HomeValidationError("x").code == "HOME_INVALID"
        assert InstallIOError("x").code == "IO_FAILED"

    def test_all_subclass_install_error(self) -> None:
        for cls in (
            ConfigurationError,
            UnresolvedDependencyError,
            HomeValidationError,
            InstallIOError,
        ):
            assert issubclass(cls, InstallError)

    def test_stage_recorded_in_detail(self) -> None:
        exc = InstallIOError("boom", code="ARCHIVE_COPY_FAILED", stage="archive", detail={"a": 1})
        assert exc.code == "ARCHIVE_COPY_FAILED"
        assert exc.detail == {"a": 1, "stage": "archive"}
        assert str(exc) == "boom"

    def test_detail_not_shared(self) -> None:
        detail = {"a": 1}
        exc = InstallError("x", stage="target", detail=detail)
        assert detail == {"a": 1}
        assert exc.detail["stage"] == "target"
