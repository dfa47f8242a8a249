"""
Integration tests for the full analysis workflow.

Tests the run_period_analysis function which orchestrates multiple
simulations over different revolution periods.
"""

import pytest

from ferriswheel import WheelParams, WheelSimulator, run_period_analysis


class TestIntegration:
    """Test suite for integration tests"""

    def test_run_period_analysis_returns_results(self) -> None:
        """Test that run_period_analysis returns results for all periods"""
        periods = [30.0, 60.0, 120.0]
        results = run_period_analysis(periods, duration=10.0)

        assert len(results) == len(periods)
        for period in periods:
            assert period in results

    def test_results_contain_required_keys(self) -> None:
        results = run_period_analysis([60.0], duration=10.0)

        for _, data in results.items():
            assert "time" in data
            assert "angles" in data
            assert "positions" in data
            assert "analysis" in data
            assert isinstance(data["simulator"], WheelSimulator)

    def test_period_applied_per_run(self) -> None:
        """Test that each run uses its own period on top of the base parameters"""
        base = WheelParams(radius=20.0, cabin_count=6)
        results = run_period_analysis([30.0, 90.0], duration=10.0, params=base)

        for period, data in results.items():
            sim_params = data["simulator"].params
            assert sim_params.seconds_per_revolution == period
            assert sim_params.radius == 20.0
            assert sim_params.cabin_count == 6
        assert base.seconds_per_revolution == 60.0

    def test_faster_wheel_travels_farther(self) -> None:
        results = run_period_analysis([30.0, 60.0], duration=60.0)

        assert results[30.0]["analysis"]["revolutions"] == pytest.approx(2.0)
        assert results[60.0]["analysis"]["revolutions"] == pytest.approx(1.0)
        assert (
            results[30.0]["analysis"]["distance_traveled"]
            == pytest.approx(2 * results[60.0]["analysis"]["distance_traveled"])
        )

    def test_zero_period_included(self) -> None:
        """Test that a stationary wheel can be part of the sweep"""
        results = run_period_analysis([0.0], duration=10.0)

        assert results[0.0]["analysis"]["distance_traveled"] == 0.0

    def test_observer_altitude_passed_through(self) -> None:
        params = WheelParams()
        results = run_period_analysis([60.0], duration=60.0, ground_distance=20.0, altitude=15.0, params=params)

        # Default base altitude is 0, so 15m is the axis altitude
        assert results[60.0]["analysis"]["min_distance"] == pytest.approx(20.0)
