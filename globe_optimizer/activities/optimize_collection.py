"""Collection optimization activity.

Produces a new FeatureCollection in which every feature's properties
are emptied, every polygon ring is simplified and quantized, and the
top-level ``crs`` member is dropped.  Feature order, identifiers, and
foreign members are preserved.

Features are independent of each other, so with ``max_workers > 1``
they are mapped on a thread pool; results are collected in input
order and are identical to a sequential run.

The run is all-or-nothing: the first invalid coordinate aborts it with
an ``InvalidCoordinateError`` naming the feature, polygon, ring, and
point.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from globe_optimizer.activities.simplify import InvalidCoordinateError, simplify_geometry
from globe_optimizer.core.constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_PRECISION,
    DEFAULT_TOLERANCE_DEG,
)
from globe_optimizer.models.feature import Feature, FeatureCollection

logger = logging.getLogger("globe_optimizer.activities.optimize_collection")


def optimize_collection(
    collection: FeatureCollection,
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    precision: int = DEFAULT_PRECISION,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> FeatureCollection:
    """Strip metadata from and simplify every feature of ``collection``.

    Args:
        collection: Parsed input collection; it is not modified.
        tolerance: Douglas-Peucker tolerance in degrees.
        precision: Decimal places kept on output coordinates.
        max_workers: Threads used to process features (1 = sequential).

    Returns:
        A new ``FeatureCollection`` without ``crs`` whose features all
        have empty properties.

    Raises:
        InvalidCoordinateError: If any feature holds a malformed point.
    """

    def _optimize(indexed: tuple[int, Feature]) -> Feature:
        index, feature = indexed
        return optimize_feature(feature, index=index, tolerance=tolerance, precision=precision)

    indexed = list(enumerate(collection.features))
    if max_workers > 1 and len(indexed) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            features = list(executor.map(_optimize, indexed))
    else:
        features = [_optimize(item) for item in indexed]

    result = FeatureCollection(features=features, crs=None, extra=dict(collection.extra))

    logger.info(
        "Collection optimized | features=%d | vertices_before=%d | vertices_after=%d | "
        "tolerance=%s | precision=%d | crs_removed=%s",
        len(features),
        collection.vertex_count,
        result.vertex_count,
        tolerance,
        precision,
        collection.crs is not None,
    )
    return result


def optimize_feature(
    feature: Feature,
    *,
    index: int = 0,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    precision: int = DEFAULT_PRECISION,
) -> Feature:
    """Return ``feature`` with empty properties and a simplified geometry.

    Raises:
        InvalidCoordinateError: Carrying ``index`` as the feature index.
    """
    try:
        geometry = simplify_geometry(feature.geometry, tolerance=tolerance, precision=precision)
    except InvalidCoordinateError as exc:
        raise exc.locate(feature_index=index) from exc

    logger.debug(
        "Feature optimized | index=%d | id=%s | geometry=%s | vertices=%d->%d",
        index,
        feature.feature_id,
        geometry.type if geometry is not None else None,
        feature.vertex_count,
        geometry.vertex_count if geometry is not None else 0,
    )
    return Feature(
        geometry=geometry,
        properties={},
        feature_id=feature.feature_id,
        extra=dict(feature.extra),
    )


def optimize_geojson(
    data: dict[str, Any],
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    precision: int = DEFAULT_PRECISION,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> dict[str, object]:
    """Run ``optimize_collection`` on a GeoJSON mapping and serialise the result.

    Raises:
        GeoJSONStructureError: If ``data`` is not a FeatureCollection.
        InvalidCoordinateError: If any feature holds a malformed point.
    """
    collection = FeatureCollection.from_dict(data)
    return optimize_collection(
        collection,
        tolerance=tolerance,
        precision=precision,
        max_workers=max_workers,
    ).to_dict()
