"""
Test suite for Ferris Wheel Kinematics.

This package contains unit tests organized by component:
- test_wheel_params.py: Tests for WheelParams class
- test_geometry.py: Tests for circular motion helpers and the coordinate frame
- test_cabin.py: Tests for cabins and actuation
- test_wheel.py: Tests for the wheel state machine and queries
- test_simulation.py: Tests for trajectory sampling
- test_ride_analysis.py: Tests for trajectory analysis
- test_integration.py: Integration tests for the period sweep
"""
