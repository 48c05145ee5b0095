"""Tests for point-to-segment perpendicular distance."""

from __future__ import annotations

import math

import pytest

from globe_optimizer.activities.simplify import perpendicular_distance


class TestPerpendicularDistance:
    """Distance is measured to the segment, not the infinite line."""

    def test_point_above_segment_middle(self) -> None:
        assert perpendicular_distance((5.0, 3.0), (0.0, 0.0), (10.0, 0.0)) == pytest.approx(3.0)

    def test_point_on_segment_is_zero(self) -> None:
        assert perpendicular_distance((4.0, 4.0), (0.0, 0.0), (10.0, 10.0)) == pytest.approx(0.0)

    def test_projection_clamped_past_end(self) -> None:
        # The infinite line y=0 is 0 away; the segment end (10, 0) is 5 away.
        assert perpendicular_distance((15.0, 0.0), (0.0, 0.0), (10.0, 0.0)) == pytest.approx(5.0)

    def test_projection_clamped_before_start(self) -> None:
        dist = perpendicular_distance((-3.0, 4.0), (0.0, 0.0), (10.0, 0.0))
        assert dist == pytest.approx(5.0)

    def test_zero_length_segment_uses_direct_distance(self) -> None:
        dist = perpendicular_distance((3.0, 4.0), (0.0, 0.0), (0.0, 0.0))
        assert dist == pytest.approx(5.0)

    def test_diagonal_segment(self) -> None:
        dist = perpendicular_distance((10.0, 0.0), (0.0, 0.0), (10.0, 10.0))
        assert dist == pytest.approx(math.sqrt(50.0))

    def test_near_collinear_noise(self) -> None:
        dist = perpendicular_distance((5.0, 0.01), (0.0, 0.0), (10.0, 0.0))
        assert dist == pytest.approx(0.01)
