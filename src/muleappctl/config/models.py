"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, muleappctl.toml only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from muleappctl.infrastructure.filesystem import DEFAULT_CHUNK_SIZE
from muleappctl.infrastructure.home import HOME_ENV_VAR


class InstallConfig(BaseModel):
    """[install] section."""

    model_config = {"frozen": True}

    install_domain: bool = False
    copy_to_apps_directory: bool = False
    domain_dependency: str | None = None
    final_name: str | None = None
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)


class HomeConfig(BaseModel):
    """[home] section.

    ``fallback`` is consulted only when the ``env_var`` environment
    variable is unset.
    """

    model_config = {"frozen": True}

    env_var: str = HOME_ENV_VAR
    fallback: str | None = None
