"""Tests for shared constants and helper functions."""

from __future__ import annotations

from globe_optimizer.core.constants import (
    DEFAULT_PRECISION,
    DEFAULT_TOLERANCE_DEG,
    MIN_RING_VERTICES,
)
from globe_optimizer.models.report import OptimizationReport
from globe_optimizer.utils.helpers import format_kib, format_reduction


class TestConstants:
    """Verify centralised pipeline constants."""

    def test_defaults(self) -> None:
        assert DEFAULT_TOLERANCE_DEG == 0.5
        assert DEFAULT_PRECISION == 1

    def test_min_ring_vertices(self) -> None:
        assert MIN_RING_VERTICES == 4


class TestFormatting:
    """Size formatting helpers."""

    def test_format_kib(self) -> None:
        assert format_kib(0) == "0.0 KB"
        assert format_kib(1536) == "1.5 KB"
        assert format_kib(1024 * 1024) == "1024.0 KB"

    def test_format_reduction(self) -> None:
        assert format_reduction(512, 25.0) == "0.5 KB (25.0% reduction)"


class TestOptimizationReport:
    """Derived report figures."""

    def test_saved_and_percentage(self) -> None:
        report = OptimizationReport("a", "a", bytes_before=2000, bytes_after=500)
        assert report.saved_bytes == 1500
        assert report.reduction_pct == 75.0

    def test_empty_input(self) -> None:
        report = OptimizationReport("a", "a", bytes_before=0, bytes_after=0)
        assert report.reduction_pct == 0.0
