"""Point-to-segment distance for Douglas-Peucker."""

from __future__ import annotations

import math

from globe_optimizer.models.geometry import Point


def perpendicular_distance(point: Point, start: Point, end: Point) -> float:
    """Return the distance from ``point`` to the segment ``start``-``end``.

    The projection is clamped to the segment, so points beyond either
    end are measured to that endpoint.  A zero-length segment measures
    straight to ``start``.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        return math.hypot(point[0] - start[0], point[1] - start[1])

    t = ((point[0] - start[0]) * dx + (point[1] - start[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(point[0] - (start[0] + t * dx), point[1] - (start[1] + t * dy))
