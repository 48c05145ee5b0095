"""Ring normalization: simplify, fall back when degenerate, quantize."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

from globe_optimizer.activities.simplify._douglas_peucker import douglas_peucker
from globe_optimizer.activities.simplify._validation import is_zero_area_ring, validate_ring
from globe_optimizer.core.constants import (
    DEFAULT_PRECISION,
    DEFAULT_TOLERANCE_DEG,
    MIN_RING_VERTICES,
)
from globe_optimizer.models.geometry import Point, Ring

logger = logging.getLogger("globe_optimizer.activities.simplify")

# Enough digits for a 17-digit float integer part plus MAX_PRECISION decimals.
_QUANTIZE_DIGITS = 40


# ---------------------------------------------------------------------------
# Quantization
# ---------------------------------------------------------------------------


def quantize(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` decimal places, halves away from zero.

    Rounds the shortest decimal form of the float (``repr``), so
    ``quantize(0.25, 1) == 0.3`` and ``quantize(-0.25, 1) == -0.3``.
    Negative zero comes back as ``0.0``.
    """
    exact = Decimal(repr(value))
    if exact.as_tuple().exponent >= -precision:
        return float(value) + 0.0
    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_DIGITS
        rounded = exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0


def quantize_ring(ring: Sequence[Point], precision: int) -> Ring:
    """Quantize both components of every point in ``ring``."""
    return [(quantize(lon, precision), quantize(lat, precision)) for lon, lat in ring]


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def fallback_ring(ring: Sequence[Point]) -> Ring:
    """Sample a closed 4-point ring from ``ring`` at 0, N/3, 2N/3, 0."""
    n = len(ring)
    return [ring[0], ring[n // 3], ring[2 * n // 3], ring[0]]


def normalize_ring(
    ring: Sequence[object],
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    precision: int = DEFAULT_PRECISION,
) -> Ring:
    """Simplify and quantize one closed ring.

    Runs Douglas-Peucker on the ring.  If fewer than
    ``MIN_RING_VERTICES`` points survive, a ring that was already that
    short is returned as-is (quantized); a longer one is replaced by
    ``fallback_ring()`` sampled from the original points.

    Args:
        ring: Ordered ``(lon, lat)`` pairs, first == last by convention.
        tolerance: Douglas-Peucker tolerance in degrees.
        precision: Decimal places kept on output coordinates.

    Returns:
        A new ring; the input is not modified.  Closure is preserved
        and the vertex count never grows.

    Raises:
        InvalidCoordinateError: If any point is missing, non-numeric,
            or non-finite.
    """
    points = validate_ring(ring)
    simplified = douglas_peucker(points, tolerance)

    if len(simplified) >= MIN_RING_VERTICES:
        return quantize_ring(simplified, precision)

    if len(points) < MIN_RING_VERTICES:
        return quantize_ring(points, precision)

    result = quantize_ring(fallback_ring(points), precision)
    logger.debug(
        "Ring collapsed, using sampled fallback | original=%d | simplified=%d",
        len(points),
        len(simplified),
    )
    if is_zero_area_ring(result):
        logger.warning(
            "Fallback ring has zero area | original=%d | ring=%s",
            len(points),
            result,
        )
    return result
