"""
Wheel state machine and kinematic queries
"""

import dataclasses
from datetime import datetime, timezone
import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional

import numpy as np
from scipy.spatial.distance import pdist, squareform

from ferriswheel.cabin import Actuator, Cabin
from ferriswheel.geometry import CoordinateFrame, arc_length, hypotenuse, position_on_circle
from ferriswheel.params import WheelParams
from ferriswheel.state import Coordinate, GeoCoordinate, WheelState

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Wheel:
    """
    Ferris wheel with evenly spaced cabins.

    Locations are expressed in a Cartesian plane whose origin is the wheel
    axis: x is ground distance and y is height. Cabin positions only change
    through advance(); every other query is read-only and may be called in
    either state.
    """

    def __init__(
        self,
        params: Optional[WheelParams] = None,
        actuator_factory: Optional[Callable[[int], Actuator]] = None,
        clock: Callable[[], datetime] = utc_now
    ) -> None:
        """
        Initialize wheel

        Args:
            params: Wheel physical parameters
            actuator_factory: Builds the actuator for a cabin id; None leaves cabins undriven
            clock: Source of the current time
        """
        # Owned copy of the caller's params
        self.params = dataclasses.replace(params) if params is not None else WheelParams()
        self.clock = clock
        self.frame = CoordinateFrame(
            self.params.radius, self.params.base_height, self.params.base_geo_coordinate
        )

        self.state = WheelState.STOPPED
        self.start_time: Optional[datetime] = None
        self.stop_time: Optional[datetime] = None

        # First cabin at angle 0, the rest evenly spaced counter-clockwise
        self._cabins = {}
        for i in range(self.params.cabin_count):
            actuator = actuator_factory(i) if actuator_factory is not None else None
            cabin = Cabin(i, actuator=actuator)
            cabin.place(self.params.radius, i * self.params.cabin_spacing)
            self._cabins[i] = cabin

        logger.debug(
            f"Wheel initialized: radius={self.radius}m, base_height={self.base_height}m, "
            f"{self.cabin_count} cabins"
        )

    @classmethod
    def from_dimensions(
        cls,
        radius: float,
        base_height: float,
        base_geo_coordinate: GeoCoordinate,
        cabin_count: int,
        seconds_per_revolution: float = 0.0,
        **kwargs
    ) -> "Wheel":
        """Build a wheel from raw dimensions instead of a WheelParams"""
        params = WheelParams(
            radius=radius,
            base_height=base_height,
            cabin_count=cabin_count,
            seconds_per_revolution=seconds_per_revolution,
            base_geo_coordinate=base_geo_coordinate,
        )
        return cls(params, **kwargs)

    @property
    def radius(self) -> float:
        return self.params.radius

    @property
    def base_height(self) -> float:
        return self.params.base_height

    @property
    def cabin_count(self) -> int:
        return self.params.cabin_count

    @property
    def base_geo_coordinate(self) -> GeoCoordinate:
        return self.params.base_geo_coordinate

    @property
    def normalized_base_coordinate(self) -> Coordinate:
        return self.frame.normalized_base_coordinate

    @property
    def cabins(self) -> Mapping[int, Cabin]:
        """Read-only view of cabins by id"""
        return MappingProxyType(self._cabins)

    @property
    def seconds_per_revolution(self) -> float:
        """Time for one full revolution (s); 0 means not moving"""
        return self.params.seconds_per_revolution

    @seconds_per_revolution.setter
    def seconds_per_revolution(self, value: float) -> None:
        # replace() re-runs validation and the derived angular speed
        self.params = dataclasses.replace(self.params, seconds_per_revolution=value)

    @property
    def is_moving(self) -> bool:
        """True if the configured period gives a usable angular speed"""
        return self.params.angular_speed > 0

    def start(self) -> bool:
        """
        Start every cabin and record the start time

        Cabins are actuated in id order and the first refusal aborts the
        operation. Cabins started before the refusal are not stopped again,
        and the wheel's state and timestamps are left unchanged.

        Returns:
            True if every cabin started
        """
        started = []
        for cabin in self._cabins.values():
            if not cabin.start():
                logger.warning(
                    f"Start aborted at cabin {cabin.id}; cabins left started: {started}"
                )
                return False
            started.append(cabin.id)

        self.start_time = self.clock()
        self.state = WheelState.RUNNING
        logger.info(f"Wheel running since {self.start_time.isoformat()}")
        return True

    def stop(self) -> bool:
        """
        Stop every cabin and record the stop time

        Returns:
            True if every cabin stopped
        """
        stopped = []
        for cabin in self._cabins.values():
            if not cabin.stop():
                logger.warning(
                    f"Stop aborted at cabin {cabin.id}; cabins left stopped: {stopped}"
                )
                return False
            stopped.append(cabin.id)

        self.stop_time = self.clock()
        self.state = WheelState.STOPPED
        logger.info(f"Wheel stopped at {self.stop_time.isoformat()}")
        return True

    def find_cabin(self, cabin_id: int) -> Optional[Cabin]:
        """Locate a cabin by id, None if there is no such cabin"""
        return self._cabins.get(cabin_id)

    def distance_to_point(
        self,
        cabin: Cabin,
        ground_distance: float,
        altitude: Optional[float] = None
    ) -> Optional[float]:
        """
        Distance from a target point to a cabin

        Args:
            cabin: Cabin to measure to
            ground_distance: Horizontal distance from the target to the cabin (m)
            altitude: Real-world altitude of the target (m); None assumes the
                target is level with the wheel base

        Returns:
            Distance (m), or None if the cabin has no location
        """
        if cabin.location is None:
            return None
        if altitude is None:
            target_y = self.normalized_base_coordinate.y
        else:
            target_y = self.frame.altitude_to_frame_y(altitude)
        return float(hypotenuse(ground_distance, cabin.location.y - target_y))

    def distance_between(self, cabin_a: Cabin, cabin_b: Cabin) -> Optional[float]:
        """Straight-line distance between two cabins (m)"""
        return cabin_a.distance_to(cabin_b)

    def distance_matrix(self) -> np.ndarray:
        """
        Pairwise straight-line distances between all cabins

        Returns:
            Symmetric [n x n] array indexed by cabin id
        """
        points = np.array([[c.location.x, c.location.y] for c in self._cabins.values()])
        if len(points) < 2:
            return np.zeros((len(points), len(points)))
        return squareform(pdist(points))

    def elapsed_seconds(self) -> float:
        """
        Seconds of motion for the latest start/stop pair

        Returns:
            The start-to-stop interval if the wheel stopped after its last
            start, the time since start if still running, otherwise 0
        """
        if (
            self.start_time is not None
            and self.stop_time is not None
            and self.stop_time > self.start_time
        ):
            return (self.stop_time - self.start_time).total_seconds()
        if self.state == WheelState.RUNNING and self.start_time is not None:
            return (self.clock() - self.start_time).total_seconds()
        return 0.0

    def distance_traveled(self, seconds: Optional[float] = None) -> float:
        """
        Distance a cabin covers along the rim

        Args:
            seconds: Time of motion (s); None uses elapsed_seconds(). A value
                beyond the wheel's actual running time gives the projected
                distance for that much motion.

        Returns:
            Arc length (m), 0 if the time or the period is not positive
        """
        if seconds is None:
            seconds = self.elapsed_seconds()
        if seconds > 0 and self.is_moving:
            return float(arc_length(self.radius, self.params.angular_speed * seconds))
        return 0.0

    def time_for_distance(self, distance: float) -> float:
        """
        Seconds needed to cover a distance along the rim

        Args:
            distance: Arc length (m)

        Returns:
            Time (s); inf for a non-zero distance when the wheel is not moving
        """
        radians = distance / self.radius
        # A stationary wheel never covers a non-zero distance
        if not self.is_moving:
            return 0.0 if radians == 0 else float("inf")
        return radians / self.params.angular_speed

    def revolutions(self) -> float:
        """Revolutions turned over elapsed_seconds(), fractional"""
        if not self.is_moving:
            return 0.0
        return self.elapsed_seconds() * self.params.angular_speed / (2 * np.pi)

    def cabin_positions(self, seconds: Optional[float] = None) -> np.ndarray:
        """
        Project cabin positions forward without moving the cabins

        Args:
            seconds: Time ahead of the stored angles (s); None uses elapsed_seconds()

        Returns:
            [n x 2] array of (x, y) indexed by cabin id
        """
        if seconds is None:
            seconds = self.elapsed_seconds()
        angles = np.array([c.angle for c in self._cabins.values()])
        angles = angles + self.params.angular_speed * seconds
        x, y = position_on_circle(self.radius, angles)
        return np.column_stack([x, y])

    def advance(self, seconds: float) -> None:
        """
        Rotate every cabin by the angle covered in `seconds`

        Args:
            seconds: Simulated time step (s)
        """
        if not np.isfinite(seconds):
            raise ValueError(f"seconds must be finite, got {seconds}")
        if not self.is_moving:
            logger.debug("advance() ignored, wheel has no revolution period")
            return

        theta = self.params.angular_speed * seconds
        for cabin in self._cabins.values():
            cabin.place(self.radius, cabin.angle + theta)
        logger.debug(f"Advanced cabins by {seconds}s ({theta:.4f} rad)")
