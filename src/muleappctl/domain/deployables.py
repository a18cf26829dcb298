"""Deployable types and the Mule container capability.

A deployment container advertises which deployable types it accepts.
The Mule runtime only accepts Mule application archives.
"""

from __future__ import annotations

from enum import StrEnum


class DeployableType(StrEnum):
    """Deployable types a container may be asked to accept."""

    MULE = "mule"
    WAR = "war"
    EAR = "ear"
    JAR = "jar"
    FILE = "file"


class MuleContainerCapability:
    """Container capability supporting Mule application deployables."""

    def supports_deployable_type(self, deployable_type: DeployableType) -> bool:
        return deployable_type is DeployableType.MULE
