"""
Test suite for the Braking Distance Simulation.

This package contains unit tests organized by component:
- test_brake_params.py: Tests for BrakeParams and ViewParams
- test_kinematics.py: Tests for the per-frame kinematics engine and events
- test_camera.py: Tests for the camera policies
- test_projector.py: Tests for draw instruction generation
- test_locale.py: Tests for label tables and locale routing
- test_simulator.py: Tests for the frame driver / command interface
- test_analysis.py: Tests for headless runs and the friction analysis
- test_config.py: Tests for the YAML configuration loader
- test_figure.py: Tests for the plotly canvas and charts
- test_app.py: Tests for the Dash button dispatch, styles and localization
- test_report.py: Tests for the command line report
"""
