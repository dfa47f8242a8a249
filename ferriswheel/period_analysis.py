"""
Revolution period sweep
"""

import dataclasses
import logging
from typing import Any, Dict, Optional

from ferriswheel.params import WheelParams
from ferriswheel.simulator import WheelSimulator

logger = logging.getLogger(__name__)


def run_period_analysis(
    periods: list[float],
    duration: float = 60.0,
    ground_distance: float = 20.0,
    altitude: Optional[float] = None,
    dt: float = 0.1,
    params: Optional[WheelParams] = None
) -> Dict[float, Dict[str, Any]]:
    """
    Run simulation for multiple revolution periods

    Args:
        periods: Seconds per revolution to try
        duration: Simulated time for each run (s)
        ground_distance: Horizontal distance from the observer (m)
        altitude: Observer altitude (m); None puts the observer level with the base
        dt: Time step (s)
        params: Base wheel parameters; the period is overridden per run

    Returns:
        Dictionary with results for each period
    """
    base = params if params is not None else WheelParams()
    results: Dict[float, Dict[str, Any]] = {}

    for period in periods:
        run_params = dataclasses.replace(base, seconds_per_revolution=period)
        simulator = WheelSimulator(run_params)

        t, angles, positions = simulator.simulate(duration=duration, dt=dt)
        analysis = simulator.analyze(t, positions, ground_distance, altitude)
        logger.debug(f"Period {period}s: {analysis['revolutions']:.2f} revolutions")

        results[period] = {
            "time": t,
            "angles": angles,
            "positions": positions,
            "analysis": analysis,
            "simulator": simulator,
        }

    return results
