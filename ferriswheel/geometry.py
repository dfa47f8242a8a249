"""
Circular motion helpers and the wheel-centered coordinate frame
"""

from typing import Tuple, Union
import numpy as np

from ferriswheel.state import Coordinate, GeoCoordinate

ArrayLike = Union[float, np.ndarray]


def angular_speed(seconds_per_revolution: float) -> float:
    """
    Convert a revolution period to angular speed

    Args:
        seconds_per_revolution: Time for one full revolution (s)

    Returns:
        Angular speed (rad/s)
    """
    if seconds_per_revolution <= 0:
        raise ValueError(
            f"seconds_per_revolution must be positive, got {seconds_per_revolution}"
        )
    return 2 * np.pi / seconds_per_revolution


def arc_length(radius: float, radians: ArrayLike) -> ArrayLike:
    """
    Distance along the rim for an angular displacement

    Args:
        radius: Wheel radius (m)
        radians: Angle swept (rad), sign gives direction

    Returns:
        Arc length (m)
    """
    return radius * radians


def hypotenuse(a: ArrayLike, b: ArrayLike) -> ArrayLike:
    """Straight-line distance from two orthogonal legs"""
    return np.hypot(a, b)


def position_on_circle(radius: float, angle: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
    """
    Cartesian position on the rim for an angle measured from the x-axis

    Args:
        radius: Wheel radius (m)
        angle: Angle (rad), scalar or array

    Returns:
        Tuple of (x, y) in meters
    """
    return radius * np.cos(angle), radius * np.sin(angle)


class CoordinateFrame:
    """Cartesian plane centered on the wheel axis; x is ground distance, y is height"""

    def __init__(
        self,
        radius: float,
        base_height: float,
        base_geo_coordinate: GeoCoordinate
    ) -> None:
        """
        Initialize coordinate frame

        Args:
            radius: Wheel radius (m)
            base_height: Height of the base structure below the rim (m)
            base_geo_coordinate: Geocoordinate of the ground base center
        """
        self.radius = radius
        self.base_height = base_height
        self.base_geo_coordinate = base_geo_coordinate

        # Ground base sits directly below the axis
        self.normalized_base_coordinate = Coordinate(0.0, -(radius + base_height))

    @property
    def origin_altitude(self) -> float:
        """Real-world altitude of the wheel axis (m)"""
        return self.base_geo_coordinate.altitude + self.base_height + self.radius

    def altitude_to_frame_y(self, altitude: float) -> float:
        """
        Place a real-world altitude in the wheel frame

        Args:
            altitude: Altitude of a point (m)

        Returns:
            y-coordinate, positive above the axis
        """
        return -(self.origin_altitude - altitude)

    def frame_y_to_altitude(self, y: float) -> float:
        return self.origin_altitude + y

    def height_above_base(self, y: ArrayLike) -> ArrayLike:
        """Height of a frame y-coordinate above the ground base (m)"""
        return y - self.normalized_base_coordinate.y
