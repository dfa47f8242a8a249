"""
Trajectory analysis functions
"""

from typing import Any, Dict, Optional
import numpy as np

from ferriswheel.geometry import CoordinateFrame, arc_length, hypotenuse
from ferriswheel.params import WheelParams


class RideAnalyzer:
    """Summarizes a sampled trajectory relative to an observer on the ground"""

    def __init__(self, params: WheelParams) -> None:
        """
        Initialize ride analyzer

        Args:
            params: Wheel physical parameters
        """
        self.params = params
        self.frame = CoordinateFrame(params.radius, params.base_height, params.base_geo_coordinate)

    def analyze(
        self,
        t: np.ndarray,
        positions: np.ndarray,
        ground_distance: float,
        altitude: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        Analyze cabin distances and heights over a trajectory

        Args:
            t: Time array [N]
            positions: Position history [N x n x 2]
            ground_distance: Horizontal distance from the observer to the cabins (m)
            altitude: Observer altitude (m); None puts the observer level with the base

        Returns:
            Dictionary with analysis results
        """
        if len(t) == 0:
            raise ValueError("cannot analyze an empty trajectory")

        y = positions[:, :, 1]
        if altitude is None:
            target_y = self.frame.normalized_base_coordinate.y
        else:
            target_y = self.frame.altitude_to_frame_y(altitude)

        distances = hypotenuse(ground_distance, y - target_y)
        step_idx, cabin_idx = np.unravel_index(np.argmin(distances), distances.shape)

        heights = self.frame.height_above_base(y)
        duration = float(t[-1] - t[0])
        if self.params.seconds_per_revolution > 0:
            revolutions = duration / self.params.seconds_per_revolution
        else:
            revolutions = 0.0

        return {
            "min_distance": float(np.min(distances)),
            "max_distance": float(np.max(distances)),
            "closest_cabin": int(cabin_idx),
            "closest_time": float(t[step_idx]),
            "max_height_above_base": float(np.max(heights)),
            "min_height_above_base": float(np.min(heights)),
            "revolutions": revolutions,
            "distance_traveled": float(
                arc_length(self.params.radius, self.params.angular_speed * duration)
            ),
        }
