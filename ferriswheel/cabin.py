"""
Cabins mounted on the wheel rim and their actuation hooks
"""

import logging
from typing import Optional, Protocol

from ferriswheel.geometry import hypotenuse, position_on_circle
from ferriswheel.state import Coordinate

logger = logging.getLogger(__name__)


class Actuator(Protocol):
    """Hardware collaborator that drives a single cabin"""

    def start(self) -> bool:
        ...

    def stop(self) -> bool:
        ...


class FixedActuator:
    """Actuator with preset outcomes, for simulation and testing"""

    def __init__(self, start_ok: bool = True, stop_ok: bool = True) -> None:
        self.start_ok = start_ok
        self.stop_ok = stop_ok
        self.start_calls = 0
        self.stop_calls = 0

    def start(self) -> bool:
        self.start_calls += 1
        return self.start_ok

    def stop(self) -> bool:
        self.stop_calls += 1
        return self.stop_ok


class Cabin:
    """Passenger carrier fixed to the rim at an angle"""

    def __init__(
        self,
        id: int,
        angle: float = 0.0,
        location: Optional[Coordinate] = None,
        actuator: Optional[Actuator] = None
    ) -> None:
        """
        Initialize cabin

        Args:
            id: Identifier, stable for the cabin's lifetime
            angle: Accumulated angle from the x-axis (rad), not wrapped
            location: Position in the wheel frame, None until placed
            actuator: Hardware collaborator; None means nothing to drive
        """
        self.id = id
        self.angle = angle
        self.location = location
        self.actuator = actuator

    def __repr__(self) -> str:
        return f"Cabin(id={self.id}, angle={self.angle:.4f}, location={self.location})"

    @property
    def height(self) -> Optional[float]:
        """Height relative to the wheel axis (m), None if not placed"""
        return None if self.location is None else self.location.y

    def place(self, radius: float, angle: float) -> None:
        """
        Set the angle and recompute the location from it

        Args:
            radius: Wheel radius (m)
            angle: New accumulated angle (rad)
        """
        x, y = position_on_circle(radius, angle)
        self.angle = angle
        self.location = Coordinate(float(x), float(y))

    def start(self) -> bool:
        if self.actuator is None:
            return True
        ok = bool(self.actuator.start())
        if not ok:
            logger.warning(f"Cabin {self.id} refused to start")
        return ok

    def stop(self) -> bool:
        if self.actuator is None:
            return True
        ok = bool(self.actuator.stop())
        if not ok:
            logger.warning(f"Cabin {self.id} refused to stop")
        return ok

    def distance_to(self, other: "Cabin") -> Optional[float]:
        """
        Straight-line distance to another cabin

        Args:
            other: Cabin to measure to

        Returns:
            Distance (m), or None if either cabin has no location
        """
        if self.location is None or other.location is None:
            return None
        return float(hypotenuse(
            self.location.x - other.location.x, self.location.y - other.location.y
        ))
