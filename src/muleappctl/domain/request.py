"""The immutable description of one install run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from muleappctl.domain.coordinates import ResolvedDependency


class InstallRequest(BaseModel):
    """Configuration for a single install run.

    Attributes:
        archive: Path of the already built application archive.
        final_name: Name the archive is published under in ``apps/``
            (without ``.zip``).  Defaults to the archive's stem.
        install_domain: Copy the domain dependency to ``domains/`` first.
        copy_to_apps_directory: Publish the archive to ``apps/``.
        domain_dependency: ``groupId:artifactId:version`` of the domain,
            or None when unset.
        dependencies: Dependencies already resolved by the build.
    """

    model_config = {"frozen": True}

    archive: Path
    final_name: str | None = None
    install_domain: bool = False
    copy_to_apps_directory: bool = False
    domain_dependency: str | None = None
    dependencies: tuple[ResolvedDependency, ...] = Field(default_factory=tuple)

    @property
    def effective_final_name(self) -> str:
        if self.final_name:
            return self.final_name
        return self.archive.stem
