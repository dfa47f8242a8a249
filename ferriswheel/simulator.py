"""
Offline trajectory sampling for a wheel turning at constant speed
"""

from typing import Optional, Tuple
import numpy as np

from ferriswheel.analysis import RideAnalyzer
from ferriswheel.geometry import position_on_circle
from ferriswheel.params import WheelParams


class WheelSimulator:
    """Samples cabin angles and positions over time"""

    def __init__(self, params: WheelParams, initial_angle: float = 0.0) -> None:
        """
        Initialize simulator

        Args:
            params: Wheel physical parameters
            initial_angle: Angle of cabin 0 at t=0 (rad)
        """
        self.params = params
        self.initial_angle = initial_angle
        self.analyzer = RideAnalyzer(params)

    def initial_angles(self) -> np.ndarray:
        """Angles of all cabins at t=0, indexed by cabin id"""
        return self.initial_angle + np.arange(self.params.cabin_count) * self.params.cabin_spacing

    def simulate(
        self, duration: float = 60.0, dt: float = 0.1
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Run simulation

        Args:
            duration: Simulated time (s)
            dt: Time step (s)

        Returns:
            Tuple of (time_array [N], angle_history [N x n], position_history [N x n x 2])
        """
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")

        # Half a step of slack so the end point is included
        t = np.arange(0.0, duration + dt / 2, dt)

        # No ramps: every cabin turns at the same constant rate
        angles = self.initial_angles()[np.newaxis, :] + self.params.angular_speed * t[:, np.newaxis]
        x, y = position_on_circle(self.params.radius, angles)
        positions = np.stack([x, y], axis=-1)

        return t, angles, positions

    def analyze(
        self, t: np.ndarray, positions: np.ndarray, ground_distance: float, altitude: Optional[float] = None
    ) -> dict:
        """Analyze a simulated trajectory against an observer point"""
        return self.analyzer.analyze(t, positions, ground_distance, altitude)
