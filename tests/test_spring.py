"""
Tests for the spring animation runtime.
"""

import pytest

from edge_sheet.models import Offset
from edge_sheet.spring import AnimationRuntime, OffsetSpring, Spring, SpringConfig


class TestSpring:
    """One-dimensional spring behaviour"""

    def test_default_config_matches_sheet_physics(self):
        config = SpringConfig()
        assert config.mass == 1.0
        assert config.tension == 185.0
        assert config.friction == 26.0

    def test_immediate_jumps_to_target(self):
        spring = Spring(0.0)
        spring.animate_to(-300.0, immediate=True)
        assert spring.value == -300.0
        assert spring.velocity == 0.0
        assert spring.settled

    def test_animation_settles_on_target(self):
        spring = Spring(0.0)
        spring.animate_to(100.0)
        assert not spring.settled

        spring.step(5000)

        assert spring.settled
        assert spring.value == 100.0

    def test_moves_toward_target_each_frame(self):
        spring = Spring(0.0)
        spring.animate_to(100.0)
        first = spring.step(16)
        second = spring.step(16)
        assert 0 < first < second <= 100.0 + 1

    def test_initial_velocity_is_oriented_toward_target(self):
        """Release speed is a magnitude; the spring points it at the target"""
        spring = Spring(0.0)
        spring.animate_to(-100.0, initial_velocity=0.5)
        assert spring.velocity == pytest.approx(-0.5)

        spring = Spring(0.0)
        spring.animate_to(100.0, initial_velocity=-0.5)
        assert spring.velocity == pytest.approx(0.5)

    def test_seeded_velocity_arrives_sooner(self):
        plain = Spring(0.0)
        plain.animate_to(-300.0)
        seeded = Spring(0.0)
        seeded.animate_to(-300.0, initial_velocity=1.5)

        assert seeded.step(50) < plain.step(50)

    def test_settled_step_is_a_no_op(self):
        spring = Spring(42.0)
        assert spring.step(16) == 42.0


class TestOffsetSpring:
    """Two-axis spring used for the panel position"""

    def test_only_moving_axis_takes_velocity(self):
        spring = OffsetSpring(Offset(x=-10, y=0))
        spring.animate_to(Offset(x=-300, y=0), initial_velocity=1.0)

        assert spring.x.velocity == pytest.approx(-1.0)
        assert spring.y.velocity == 0.0

    def test_immediate_offset(self):
        spring = OffsetSpring()
        spring.animate_to(Offset(x=0, y=400), immediate=True)
        assert spring.value == Offset(x=0, y=400)
        assert spring.settled

    def test_settles_both_axes(self):
        spring = OffsetSpring()
        spring.animate_to(Offset(x=120, y=-80))
        spring.step(5000)
        assert spring.value == Offset(x=120, y=-80)

    def test_satisfies_animation_runtime(self):
        assert isinstance(OffsetSpring(), AnimationRuntime)
        assert isinstance(Spring(), AnimationRuntime)
