"""InstallService — publish a Mule application into a runtime home.

Pipeline: RESOLVE TARGET → INSTALL DOMAIN (optional) → INSTALL ARCHIVE

The runtime home comes from an injected home resolver.  An unset home is
a skip with a warning, never a failure.  A domain install failure aborts
the run before the application is touched: an application that needs
its domain is never installed without it.

The domain and the archive are each written to a ``.temp`` file beside
their final name and then renamed, so the runtime's scanners never see a
partial file under a final name.  A source that already is the staging
file is refused before anything is opened for writing.

No locking is done against other processes installing into the same
home concurrently.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from muleappctl.domain.coordinates import (
    DOMAIN_TYPE,
    index_dependencies,
    parse_domain_reference,
)
from muleappctl.domain.errors import (
    HomeValidationError,
    InstallError,
    InstallIOError,
    UnresolvedDependencyError,
)
from muleappctl.domain.lifecycle import InstallState, can_transition
from muleappctl.infrastructure import filesystem
from muleappctl.infrastructure.home import home_problem
from muleappctl.services.base import BaseService
from muleappctl.services.result import ServiceResult

if TYPE_CHECKING:
    from muleappctl.config.settings import MuleSettings
    from muleappctl.domain.request import InstallRequest
    from muleappctl.infrastructure.home import HomeResolver

logger = logging.getLogger(__name__)

_HOME_PROBLEMS: dict[str, tuple[str, str]] = {
    "exists": ("HOME_NOT_FOUND", "{var} is set to {path} but this directory does not exist."),
    "directory": ("HOME_NOT_DIRECTORY", "{var} is set to {path} but it is not a directory."),
    "writable": ("HOME_NOT_WRITABLE", "{var} is set to {path} but the directory is not writeable."),
}


class _Run:
    """Tracks the lifecycle states one install run passes through."""

    def __init__(self) -> None:
        self.state = InstallState.START
        self.states: list[str] = [InstallState.START.value]

    def advance(self, target: InstallState) -> None:
        if not can_transition(self.state, target):
            msg = f"Illegal install transition {self.state} -> {target}"
            raise RuntimeError(msg)
        self.state = target
        self.states.append(target.value)


class InstallService(BaseService):
    """Installs the domain dependency and application archive of a build."""

    def __init__(
        self,
        settings: MuleSettings,
        *,
        home_resolver: HomeResolver | None = None,
    ) -> None:
        super().__init__(settings)
        self._resolve_home = home_resolver or settings.home_resolver()
        self._chunk_size = settings.install.chunk_size

    @property
    def _home_var(self) -> str:
        return self._settings.home.env_var

    def install(self, request: InstallRequest) -> ServiceResult:
        """RESOLVE TARGET → INSTALL DOMAIN → INSTALL ARCHIVE."""
        op = "install"
        warnings: list[str] = []
        run = _Run()
        final_name = request.effective_final_name

        if not (request.install_domain or request.copy_to_apps_directory):
            run.advance(InstallState.DONE)
            return ServiceResult(
                ok=True,
                op=op,
                data={"status": "skipped", "reason": "nothing requested", "states": run.states},
            )

        try:
            home = self.resolve_target()
            if home is None:
                msg = f"{self._home_var} is not set, not copying {final_name}.zip"
                logger.warning(msg, extra={"stage": "target"})
                warnings.append(msg)
                run.advance(InstallState.DONE)
                return ServiceResult(
                    ok=True,
                    op=op,
                    data={"status": "skipped", "reason": "home not set", "states": run.states},
                    warnings=warnings,
                )
            run.advance(InstallState.TARGET_RESOLVED)

            if request.copy_to_apps_directory and not request.archive.is_file():
                msg = f"Application archive {request.archive} does not exist"
                raise InstallIOError(
                    msg,
                    code="ARCHIVE_NOT_FOUND",
                    stage="archive",
                    detail={"source": str(request.archive)},
                )

            domain_path: Path | None = None
            if request.install_domain:
                domain_path = self.install_domain(request, home, warnings)
                run.advance(InstallState.DOMAIN_INSTALLED)
            else:
                run.advance(InstallState.DOMAIN_SKIPPED)

            app_path: Path | None = None
            if request.copy_to_apps_directory:
                app_path = self.install_archive(request.archive, home, final_name, warnings)
                run.advance(InstallState.ARCHIVE_INSTALLED)
            else:
                run.advance(InstallState.ARCHIVE_SKIPPED)
        except InstallError as exc:
            run.advance(InstallState.FAILED)
            return self._failure(op, exc, warnings=warnings, extra={"states": run.states})

        run.advance(InstallState.DONE)
        data: dict[str, Any] = {
            "status": "installed",
            "home": str(home),
            "domain_path": str(domain_path) if domain_path else None,
            "app_path": str(app_path) if app_path else None,
            "states": run.states,
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def resolve_target(self) -> Path | None:
        """Return the validated runtime home, or None when none is configured.

        Raises:
            HomeValidationError: If the configured path is missing, not a
                directory, or not writable.
        """
        raw = self._resolve_home()
        if not raw:
            return None

        home = Path(raw)
        problem = home_problem(home)
        if problem is not None:
            code, template = _HOME_PROBLEMS[problem]
            raise HomeValidationError(
                template.format(var=self._home_var, path=raw),
                code=code,
                stage="target",
                detail={"home": raw, "check": problem},
            )
        return home

    def install_domain(
        self,
        request: InstallRequest,
        home: Path,
        warnings: list[str],
    ) -> Path:
        """Stage the declared domain as ``domains/<file>.temp`` then rename it.

        A domain artifact that already is ``domains/<file>`` is left as is.

        Raises:
            ConfigurationError: ``domain_dependency`` unset or malformed.
            UnresolvedDependencyError: Domain not among resolved dependencies.
            InstallIOError: The copy or the rename failed.
        """
        ref = parse_domain_reference(request.domain_dependency)
        index, duplicates = index_dependencies(request.dependencies)
        if ref.key in duplicates:
            warnings.append(f"Domain {ref} is declared more than once; using the first match")

        artifact = index.get(ref.key)
        if artifact is None:
            msg = (
                f"install_domain was configured but domain dependency {ref} is not "
                "available in the project. Did you forget to add the domain as a "
                f"dependency with type {DOMAIN_TYPE}?"
            )
            raise UnresolvedDependencyError(
                msg,
                code="DOMAIN_NOT_DECLARED",
                stage="domain",
                detail={"domain_dependency": str(ref)},
            )
        if artifact.type != DOMAIN_TYPE:
            msg = f"Domain {ref} is declared with type {artifact.type}, expected {DOMAIN_TYPE}"
            logger.warning(msg, extra={"stage": "domain"})
            warnings.append(msg)

        target = filesystem.domain_path(home, artifact.file)
        if filesystem.same_file(artifact.file, target):
            logger.info(
                "Domain %s is already installed at %s", ref, target, extra={"stage": "domain"}
            )
            warnings.append(f"Domain {ref} is already installed at {target}")
            return target

        staging = filesystem.domain_staging_path(home, artifact.file)
        self._copy_to_staging(artifact.file, staging, stage="domain", warnings=warnings)
        self._publish(staging, target, stage="domain")
        return target

    def install_archive(
        self,
        archive: Path,
        home: Path,
        final_name: str,
        warnings: list[str],
    ) -> Path:
        """Stage the archive as ``<final>.temp`` then rename it to ``<final>.zip``.

        A leftover staging file from an earlier failed run is overwritten.

        Raises:
            InstallIOError: The copy or the rename failed.
        """
        staging = filesystem.staging_path(home, final_name)
        final = filesystem.published_path(home, final_name)
        self._copy_to_staging(archive, staging, stage="archive", warnings=warnings)
        self._publish(staging, final, stage="archive")
        return final

    # ------------------------------------------------------------------
    # Copy and rename
    # ------------------------------------------------------------------

    def _copy_to_staging(
        self,
        source: Path,
        staging: Path,
        *,
        stage: str,
        warnings: list[str],
    ) -> None:
        prefix = stage.upper()
        detail = {"source": str(source), "destination": str(staging)}
        if filesystem.same_file(source, staging):
            msg = f"Refusing to copy {source} onto itself; move it out of {staging.parent}"
            raise InstallIOError(msg, code=f"{prefix}_SAME_FILE", stage=stage, detail=detail)
        if staging.exists():
            warnings.append(f"Overwriting stale staging file {staging}")

        logger.info(
            "Copying %s to %s", source.absolute(), staging.absolute(), extra={"stage": stage}
        )
        try:
            filesystem.copy_file(source, staging, chunk_size=self._chunk_size)
        except OSError as exc:
            msg = f"Exception while copying {source} to {staging.parent.name} directory: {exc}"
            raise InstallIOError(
                msg, code=f"{prefix}_COPY_FAILED", stage=stage, detail=detail
            ) from exc

    def _publish(self, staging: Path, final: Path, *, stage: str) -> None:
        logger.info(
            "Renaming %s to %s", staging.absolute(), final.absolute(), extra={"stage": stage}
        )
        try:
            filesystem.publish(staging, final)
        except OSError as exc:
            msg = f"Could not rename {staging.absolute()} to {final.absolute()}: {exc}"
            raise InstallIOError(
                msg,
                code=f"{stage.upper()}_RENAME_FAILED",
                stage=stage,
                detail={"source": str(staging), "destination": str(final)},
            ) from exc
