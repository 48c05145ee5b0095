"""Iterative Douglas-Peucker polyline simplification."""

from __future__ import annotations

from collections.abc import Sequence

from globe_optimizer.activities.simplify._distance import perpendicular_distance
from globe_optimizer.models.geometry import Point


def douglas_peucker(points: Sequence[Point], tolerance: float) -> list[Point]:
    """Reduce ``points`` to the subsequence that stays within ``tolerance``.

    The first and last points are always kept.  Index ranges are
    processed from an explicit stack rather than by recursion, so ring
    length is not bounded by the interpreter's recursion limit.

    Args:
        points: Ordered positions, e.g. one polygon ring.
        tolerance: Maximum perpendicular deviation, in coordinate units,
            of a dropped point from the chord that replaces it.

    Returns:
        The kept points in their original order, as a new list.
    """
    if len(points) <= 2:
        return list(points)

    last = len(points) - 1
    keep = [False] * len(points)
    keep[0] = keep[last] = True

    stack: list[tuple[int, int]] = [(0, last)]
    while stack:
        start, end = stack.pop()
        max_dist = 0.0
        max_index = start

        for i in range(start + 1, end):
            dist = perpendicular_distance(points[i], points[start], points[end])
            if dist > max_dist:
                max_dist = dist
                max_index = i

        if max_dist > tolerance:
            keep[max_index] = True
            if max_index - start > 1:
                stack.append((start, max_index))
            if end - max_index > 1:
                stack.append((max_index, end))

    return [p for p, kept in zip(points, keep, strict=True) if kept]
