"""Install run lifecycle.

start -> target_resolved -> (domain_installed | domain_skipped)
      -> (archive_installed | archive_skipped) -> done

Any stage may move to ``failed``.  ``failed`` is absorbing: once entered,
no further stage runs.
"""

from __future__ import annotations

from enum import StrEnum


class InstallState(StrEnum):
    """States an install run passes through."""

    START = "start"
    TARGET_RESOLVED = "target_resolved"
    DOMAIN_INSTALLED = "domain_installed"
    DOMAIN_SKIPPED = "domain_skipped"
    ARCHIVE_INSTALLED = "archive_installed"
    ARCHIVE_SKIPPED = "archive_skipped"
    DONE = "done"
    FAILED = "failed"


TRANSITIONS: dict[InstallState, frozenset[InstallState]] = {
    InstallState.START: frozenset({InstallState.TARGET_RESOLVED, InstallState.DONE}),
    InstallState.TARGET_RESOLVED: frozenset(
        {InstallState.DOMAIN_INSTALLED, InstallState.DOMAIN_SKIPPED}
    ),
    InstallState.DOMAIN_INSTALLED: frozenset(
        {InstallState.ARCHIVE_INSTALLED, InstallState.ARCHIVE_SKIPPED}
    ),
    InstallState.DOMAIN_SKIPPED: frozenset(
        {InstallState.ARCHIVE_INSTALLED, InstallState.ARCHIVE_SKIPPED}
    ),
    InstallState.ARCHIVE_INSTALLED: frozenset({InstallState.DONE}),
    InstallState.ARCHIVE_SKIPPED: frozenset({InstallState.DONE}),
    InstallState.DONE: frozenset(),
    InstallState.FAILED: frozenset(),
}


def can_transition(current: InstallState, target: InstallState) -> bool:
    """Whether *current* may move to *target*.

    Every non-terminal state may fail; terminal states go nowhere.
    """
    if target is InstallState.FAILED:
        return current not in (InstallState.DONE, InstallState.FAILED)
    return target in TRANSITIONS[current]
