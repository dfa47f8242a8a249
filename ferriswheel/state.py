"""
Value types shared across the wheel model
"""

from dataclasses import dataclass
from enum import Enum


class WheelState(Enum):
    """Motion state of the wheel"""

    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class Coordinate:
    """Point in the wheel frame (m), origin at the rotational axis"""

    x: float  # Ground distance from the axis (m)
    y: float  # Height relative to the axis (m)


@dataclass(frozen=True)
class GeoCoordinate:
    """Real-world coordinate of the wheel base. Only altitude is used."""

    latitude: float
    longitude: float
    altitude: float = 0.0  # m
