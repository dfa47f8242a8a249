"""
Wheel physical parameters
"""

from dataclasses import dataclass, field
import numpy as np

from ferriswheel import geometry
from ferriswheel.state import GeoCoordinate


@dataclass
class WheelParams:
    """Physical parameters of the wheel"""

    radius: float = 10.0  # m, axis to cabin mount
    base_height: float = 5.0  # m, ground to bottom of the rim
    cabin_count: int = 4
    seconds_per_revolution: float = 60.0  # s, 0 means not moving
    base_geo_coordinate: GeoCoordinate = field(
        default_factory=lambda: GeoCoordinate(0.0, 0.0, 0.0)
    )
    # Derived
    cabin_spacing: float = field(init=False, default=0.0)  # rad between neighbours
    angular_speed: float = field(init=False, default=0.0)  # rad/s

    def __post_init__(self) -> None:
        """Validate inputs and calculate derived parameters"""
        if not (np.isfinite(self.radius) and self.radius > 0):
            raise ValueError(f"radius must be positive and finite, got {self.radius}")
        if not (np.isfinite(self.base_height) and self.base_height >= 0):
            raise ValueError(f"base_height must be non-negative and finite, got {self.base_height}")
        if isinstance(self.cabin_count, bool) or int(self.cabin_count) != self.cabin_count:
            raise ValueError(f"cabin_count must be an integer, got {self.cabin_count!r}")
        if self.cabin_count <= 0:
            raise ValueError(f"cabin_count must be positive, got {self.cabin_count}")
        if not (np.isfinite(self.seconds_per_revolution) and self.seconds_per_revolution >= 0):
            raise ValueError(
                f"seconds_per_revolution must be non-negative and finite, got {self.seconds_per_revolution}"
            )
        self.cabin_count = int(self.cabin_count)
        self.cabin_spacing = 2 * np.pi / self.cabin_count
        self.angular_speed = (
            geometry.angular_speed(self.seconds_per_revolution)
            if self.seconds_per_revolution > 0 else 0.0
        )
