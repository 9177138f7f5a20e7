from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OrientationPermission(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class OrientationCapability:
    """Outcome of asking for the orientation sensor, with an optional note for the user."""

    permission: OrientationPermission
    note: Optional[str] = None

    @property
    def granted(self) -> bool:
        return self.permission is OrientationPermission.GRANTED


def heading_from_alpha(alpha: float) -> float:
    """Convert a sensor alpha angle (counter-clockwise) into a compass heading."""
    return (360.0 - alpha) % 360.0


def arrow_rotation(qibla: float, heading: float) -> float:
    """Rotation to apply to the arrow so it points at the qibla, in (-180, 180]."""
    diff = (qibla - heading) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff
