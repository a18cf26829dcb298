"""Runtime home lookup.

The runtime home comes from an environment variable, falling back to a
configured path.  The fallback lets test harnesses that drive installs
point at a scratch directory without touching the real environment.

A home resolver is any zero-argument callable returning the configured
path or None.  Services take one as a constructor argument so nothing
reads process state directly.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path

HOME_ENV_VAR = "MULE_HOME"

HomeResolver = Callable[[], str | None]


def env_home_resolver(
    env_var: str = HOME_ENV_VAR,
    fallback: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> HomeResolver:
    """Build a resolver reading *env_var*, then *fallback*.

    An empty environment value counts as unset.
    """

    def resolve() -> str | None:
        env = os.environ if environ is None else environ
        value = env.get(env_var)
        if value:
            return value
        if fallback is not None and str(fallback):
            return str(fallback)
        return None

    return resolve


def fixed_home_resolver(path: str | Path | None) -> HomeResolver:
    """Resolver that always returns *path*."""
    value = None if path is None else str(path)
    return lambda: value


def home_problem(path: Path) -> str | None:
    """Return the name of the first failed check for *path*, or None.

    Checks run in order: ``exists``, ``directory``, ``writable``.
    """
    if not path.exists():
        return "exists"
    if not path.is_dir():
        return "directory"
    if not os.access(path, os.W_OK):
        return "writable"
    return None
