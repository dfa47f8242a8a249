"""
Unit tests for cabins and their actuation hooks.
"""

import logging

import numpy as np
import pytest

from ferriswheel import Cabin, Coordinate, FixedActuator, hypotenuse


class TestCabin:
    """Test suite for Cabin"""

    @pytest.fixture
    def cabin(self) -> Cabin:
        """Cabin placed at the top of a 10m wheel"""
        cabin = Cabin(1)
        cabin.place(10.0, np.pi / 2)
        return cabin

    def test_unplaced_cabin_has_no_location(self) -> None:
        """Test that a new cabin has no location until placed"""
        cabin = Cabin(0)

        assert cabin.location is None
        assert cabin.height is None

    def test_place_sets_location_from_angle(self, cabin: Cabin) -> None:
        """Test that placing a cabin derives its location from the angle"""
        assert cabin.angle == pytest.approx(np.pi / 2)
        assert abs(cabin.location.x) < 1e-12
        assert cabin.location.y == pytest.approx(10.0)
        assert cabin.height == pytest.approx(10.0)

    def test_place_keeps_accumulated_angle(self) -> None:
        """Test that angles beyond one turn are kept, not wrapped"""
        cabin = Cabin(0)
        cabin.place(10.0, 5 * np.pi)

        assert cabin.angle == pytest.approx(5 * np.pi)
        assert cabin.location.x == pytest.approx(-10.0)

    def test_distance_to_self_is_zero(self, cabin: Cabin) -> None:
        """Test reflexivity of cabin distance"""
        assert cabin.distance_to(cabin) == 0.0

    def test_distance_to_opposite_cabin(self, cabin: Cabin) -> None:
        """Test that opposite cabins are a diameter apart"""
        other = Cabin(3)
        other.place(10.0, 3 * np.pi / 2)

        assert cabin.distance_to(other) == pytest.approx(20.0)

    def test_distance_is_straight_line(self) -> None:
        """Test that distance is a chord, not an arc"""
        a = Cabin(0, location=Coordinate(10.0, 0.0))
        b = Cabin(1, location=Coordinate(0.0, 10.0))

        assert a.distance_to(b) == pytest.approx(10 * np.sqrt(2))

    def test_distance_uses_hypotenuse_helper(self) -> None:
        """Test that cabin distance equals the shared hypotenuse of the coordinate deltas"""
        a = Cabin(0, location=Coordinate(3.0, -1.0))
        b = Cabin(1, location=Coordinate(-1.0, 2.0))

        distance = a.distance_to(b)
        assert isinstance(distance, float)
        assert distance == pytest.approx(hypotenuse(4.0, -3.0))
        assert distance == pytest.approx(5.0)

    def test_distance_unavailable_without_location(self, cabin: Cabin) -> None:
        """Test that an unplaced cabin gives no distance"""
        assert cabin.distance_to(Cabin(2)) is None
        assert Cabin(2).distance_to(cabin) is None


class TestCabinActuation:
    """Test suite for delegated start/stop"""

    def test_cabin_without_actuator_succeeds(self) -> None:
        """Test that a cabin with nothing to drive reports success"""
        cabin = Cabin(0)

        assert cabin.start() is True
        assert cabin.stop() is True

    def test_actuator_result_is_propagated(self) -> None:
        """Test that the actuator's boolean comes back unchanged"""
        cabin = Cabin(0, actuator=FixedActuator(start_ok=False, stop_ok=True))

        assert cabin.start() is False
        assert cabin.stop() is True

    def test_actuator_called_once_per_request(self) -> None:
        """Test that a refusal is not retried"""
        actuator = FixedActuator(start_ok=False)
        cabin = Cabin(0, actuator=actuator)

        cabin.start()

        assert actuator.start_calls == 1
        assert actuator.stop_calls == 0

    def test_refusal_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a refused stop produces a warning naming the cabin"""
        cabin = Cabin(7, actuator=FixedActuator(stop_ok=False))

        with caplog.at_level(logging.WARNING, logger="ferriswheel.cabin"):
            cabin.stop()

        assert "Cabin 7 refused to stop" in caplog.text
