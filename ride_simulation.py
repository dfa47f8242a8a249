"""
Ferris wheel period sweep

Simulates the wheel at several revolution periods and prints how close the
cabins come to a ground observer.
"""

import logging

from ferriswheel import GeoCoordinate, WheelParams, run_period_analysis


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    params = WheelParams(
        radius=10.0,
        base_height=5.0,
        cabin_count=8,
        base_geo_coordinate=GeoCoordinate(51.5033, -0.1196, 10.0),
    )
    periods = [30, 60, 120, 1800]  # s
    results = run_period_analysis(periods, duration=120.0, ground_distance=20.0, params=params)

    print("Period Analysis Results:")
    print("-" * 80)
    for period, data in results.items():
        analysis = data["analysis"]
        print(f"\nPeriod: {period}s per revolution")
        print(f"  Revolutions: {analysis['revolutions']:.2f}")
        print(f"  Distance traveled: {analysis['distance_traveled']:.2f} m")
        print(f"  Closest approach: {analysis['min_distance']:.2f} m "
              f"(cabin {analysis['closest_cabin']} at t={analysis['closest_time']:.1f}s)")
        print(f"  Farthest: {analysis['max_distance']:.2f} m")
        print(f"  Max height above base: {analysis['max_height_above_base']:.2f} m")
