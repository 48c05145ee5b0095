"""Shared formatting helpers for size reporting."""

from __future__ import annotations

BYTES_PER_KIB = 1024


def format_kib(num_bytes: int) -> str:
    """Format a byte count as kibibytes with one decimal, e.g. ``"12.5 KB"``."""
    return f"{num_bytes / BYTES_PER_KIB:.1f} KB"


def format_reduction(saved_bytes: int, reduction_pct: float) -> str:
    """Format a saving as ``"<size> (<pct>% reduction)"``."""
    return f"{format_kib(saved_bytes)} ({reduction_pct:.1f}% reduction)"
