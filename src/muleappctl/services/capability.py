"""CapabilityService — which deployables the Mule container accepts."""

from __future__ import annotations

from muleappctl.domain.deployables import DeployableType, MuleContainerCapability
from muleappctl.services.base import BaseService
from muleappctl.services.result import ServiceResult


class CapabilityService(BaseService):
    def check(self, type_name: str) -> ServiceResult:
        op = "capability"
        try:
            deployable_type = DeployableType(type_name.strip().lower())
        except ValueError:
            known = ", ".join(t.value for t in DeployableType)
            return ServiceResult.fail(
                op,
                "UNKNOWN_DEPLOYABLE_TYPE",
                f"Unknown deployable type {type_name!r} (known: {known})",
                type=type_name,
            )

        supported = MuleContainerCapability().supports_deployable_type(deployable_type)
        return ServiceResult(
            ok=True,
            op=op,
            data={"type": deployable_type.value, "supported": supported},
        )
