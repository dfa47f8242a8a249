"""
Ferris Wheel Kinematics

This package models the rotation of a Ferris wheel: cabin positions over time,
distances from ground observers to cabins, and distance/time conversions
along the rim.
"""

from ferriswheel.params import WheelParams
from ferriswheel.state import Coordinate, GeoCoordinate, WheelState
from ferriswheel.geometry import CoordinateFrame, angular_speed, arc_length, hypotenuse
from ferriswheel.cabin import Actuator, Cabin, FixedActuator
from ferriswheel.wheel import Wheel
from ferriswheel.simulator import WheelSimulator
from ferriswheel.analysis import RideAnalyzer
from ferriswheel.period_analysis import run_period_analysis

__all__ = [
    "WheelParams",
    "Coordinate",
    "GeoCoordinate",
    "WheelState",
    "CoordinateFrame",
    "angular_speed",
    "arc_length",
    "hypotenuse",
    "Actuator",
    "Cabin",
    "FixedActuator",
    "Wheel",
    "WheelSimulator",
    "RideAnalyzer",
    "run_period_analysis",
]
