from __future__ import annotations

import sys
from typing import Optional, Protocol

from salat.domain.compass import OrientationCapability, OrientationPermission, heading_from_alpha

PERMISSION_DENIED_NOTE = "Permission denied"
SENSOR_ERROR_NOTE = "Unable to access sensors"


class OrientationSensor(Protocol):
    async def request_permission(self) -> OrientationPermission:
        raise NotImplementedError

    def heading(self) -> Optional[float]:
        raise NotImplementedError


class NoOrientationSensor(OrientationSensor):
    async def request_permission(self) -> OrientationPermission:
        return OrientationPermission.UNSUPPORTED

    def heading(self) -> Optional[float]:
        return None


class FixedHeadingSensor(OrientationSensor):
    """Sensor reporting a configured compass heading (degrees from north)."""

    def __init__(self, heading: float, permission: OrientationPermission = OrientationPermission.GRANTED):
        self._heading = heading % 360.0
        self._permission = permission

    @classmethod
    def from_alpha(cls, alpha: float) -> "FixedHeadingSensor":
        return cls(heading_from_alpha(alpha))

    async def request_permission(self) -> OrientationPermission:
        return self._permission

    def heading(self) -> Optional[float]:
        return self._heading


async def detect_orientation(sensor: Optional[OrientationSensor]) -> OrientationCapability:
    if sensor is None:
        return OrientationCapability(OrientationPermission.UNSUPPORTED)
    try:
        permission = await sensor.request_permission()
    except PermissionError:
        return OrientationCapability(OrientationPermission.DENIED, PERMISSION_DENIED_NOTE)
    except NotImplementedError:
        return OrientationCapability(OrientationPermission.UNSUPPORTED)
    except (OSError, RuntimeError) as exc:
        print(f"[orientation] WARNING: permission request failed ({exc})", file=sys.stderr)
        return OrientationCapability(OrientationPermission.UNSUPPORTED, SENSOR_ERROR_NOTE)
    if permission is OrientationPermission.DENIED:
        return OrientationCapability(permission, PERMISSION_DENIED_NOTE)
    return OrientationCapability(permission)
