"""
Tests for pointer input to paddle direction mapping
"""

import math

import pytest

from squash_pong.core.input import Direction
from squash_pong.core.input import PointerInput


class TestPointerInput:
    """Tests for PointerInput"""

    def test_default_is_none(self) -> None:
        assert PointerInput(600.0).direction is Direction.NONE

    def test_above_midpoint_is_up(self) -> None:
        pointer = PointerInput(600.0)
        assert pointer.on_input_start(900.0) is Direction.UP

    def test_below_midpoint_is_down(self) -> None:
        pointer = PointerInput(600.0)
        assert pointer.on_input_start(100.0) is Direction.DOWN

    def test_signal_is_sticky(self) -> None:
        """Direction persists until the touch ends"""
        pointer = PointerInput(600.0)
        pointer.on_input_start(900.0)
        assert pointer.direction is Direction.UP
        assert pointer.direction is Direction.UP

        pointer.on_input_end()
        assert pointer.direction is Direction.NONE

    def test_last_touch_wins(self) -> None:
        pointer = PointerInput(600.0)
        pointer.on_input_start(900.0)
        pointer.on_input_start(10.0)
        assert pointer.direction is Direction.DOWN

    def test_midpoint_keeps_direction(self) -> None:
        pointer = PointerInput(600.0)
        pointer.on_input_start(900.0)
        assert pointer.on_input_start(600.0) is Direction.UP

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None, "up"])
    def test_malformed_coordinate_is_no_signal(self, value) -> None:
        pointer = PointerInput(600.0)
        pointer.on_input_start(900.0)
        assert pointer.on_input_start(value) is Direction.NONE

    def test_direction_sign(self) -> None:
        assert Direction.UP.sign == 1
        assert Direction.DOWN.sign == -1
        assert Direction.NONE.sign == 0
