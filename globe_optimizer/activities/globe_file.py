"""Globe file activity: read, optimize, and write a GeoJSON file.

Wraps ``optimize_collection`` with file I/O: the input file is read
as UTF-8 JSON, optimized, and written back as compact JSON (no
whitespace) either in place or to a separate output path.  Before
and after sizes are logged and returned as an ``OptimizationReport``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from globe_optimizer.activities.optimize_collection import optimize_collection
from globe_optimizer.core.config import OptimizerConfig
from globe_optimizer.core.exceptions import PermanentError
from globe_optimizer.models.feature import FeatureCollection
from globe_optimizer.models.report import OptimizationReport
from globe_optimizer.utils.helpers import format_kib, format_reduction

logger = logging.getLogger("globe_optimizer.activities.globe_file")

# Compact JSON, matching the size-optimized output of the globe build step.
JSON_SEPARATORS = (",", ":")


class GlobeFileError(PermanentError):
    """Raised when the globe file cannot be read, decoded, or written."""

    default_stage = "globe_file"
    default_code = "GLOBE_FILE_FAILED"


def read_collection(path: Path | str) -> FeatureCollection:
    """Read and parse a GeoJSON FeatureCollection file.

    Raises:
        GlobeFileError: If the file cannot be read or is not valid JSON.
        GeoJSONStructureError: If the JSON is not a FeatureCollection.
        InvalidCoordinateError: If any polygon position is malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read globe file {path}: {exc}"
        raise GlobeFileError(msg) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Globe file {path} is not valid JSON: {exc}"
        raise GlobeFileError(msg) from exc

    return FeatureCollection.from_dict(data)


def write_collection(collection: FeatureCollection, path: Path | str) -> int:
    """Write ``collection`` as compact JSON and return the bytes written.

    The payload goes to a temporary file beside ``path`` which then
    replaces it, so a failed write never leaves ``path`` truncated.

    Raises:
        GlobeFileError: If the file cannot be written.
    """
    path = Path(path)
    payload = json.dumps(
        collection.to_dict(),
        separators=JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(payload)
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        msg = f"Cannot write globe file {path}: {exc}"
        raise GlobeFileError(msg) from exc
    return len(payload)


def optimize_globe_file(
    path: Path | str,
    *,
    output_path: Path | str | None = None,
    config: OptimizerConfig | None = None,
) -> OptimizationReport:
    """Optimize a globe GeoJSON file and report the size saving.

    Args:
        path: Input GeoJSON file.
        output_path: Destination file; defaults to overwriting ``path``.
        config: Simplification settings; defaults to ``OptimizerConfig()``.

    Returns:
        An ``OptimizationReport`` with before/after sizes and vertex counts.

    Raises:
        GlobeFileError: On read, decode, or write failure.
        GeoJSONStructureError: If the file is not a FeatureCollection.
        InvalidCoordinateError: If any polygon position is malformed.
            Nothing is written in that case.
    """
    config = config or OptimizerConfig()
    source = Path(path)
    destination = Path(output_path) if output_path is not None else source

    try:
        bytes_before = source.stat().st_size
    except OSError as exc:
        msg = f"Cannot read globe file {source}: {exc}"
        raise GlobeFileError(msg) from exc
    logger.info("Before: %s | path=%s", format_kib(bytes_before), source)

    collection = read_collection(source)
    optimized = optimize_collection(
        collection,
        tolerance=config.tolerance_deg,
        precision=config.precision,
        max_workers=config.max_workers,
    )
    bytes_after = write_collection(optimized, destination)

    report = OptimizationReport(
        source_path=str(source),
        output_path=str(destination),
        bytes_before=bytes_before,
        bytes_after=bytes_after,
        feature_count=len(optimized.features),
        vertices_before=collection.vertex_count,
        vertices_after=optimized.vertex_count,
    )
    logger.info("After:  %s | path=%s", format_kib(bytes_after), destination)
    logger.info("Saved:  %s", format_reduction(report.saved_bytes, report.reduction_pct))
    return report
