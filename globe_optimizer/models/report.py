"""Size report for one optimized globe file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OptimizationReport:
    """Before/after figures for a single optimization run.

    Attributes:
        source_path: File that was read.
        output_path: File that was written (same as source for in-place runs).
        bytes_before: Size of the input file.
        bytes_after: Size of the compact output file.
        feature_count: Number of features processed.
        vertices_before: Polygon positions in the input.
        vertices_after: Polygon positions in the output.
    """

    source_path: str
    output_path: str
    bytes_before: int
    bytes_after: int
    feature_count: int = 0
    vertices_before: int = 0
    vertices_after: int = 0

    @property
    def saved_bytes(self) -> int:
        return self.bytes_before - self.bytes_after

    @property
    def reduction_pct(self) -> float:
        """Saved bytes as a percentage of the input size (0 for an empty input)."""
        if self.bytes_before == 0:
            return 0.0
        return self.saved_bytes / self.bytes_before * 100

    def to_dict(self) -> dict[str, object]:
        return {
            "source_path": self.source_path,
            "output_path": self.output_path,
            "bytes_before": self.bytes_before,
            "bytes_after": self.bytes_after,
            "saved_bytes": self.saved_bytes,
            "reduction_pct": round(self.reduction_pct, 1),
            "feature_count": self.feature_count,
            "vertices_before": self.vertices_before,
            "vertices_after": self.vertices_after,
        }
