"""Feature and FeatureCollection data models.

A ``Feature`` is one country/region outline with its properties and
identifier; a ``FeatureCollection`` is the whole globe file.  Members
the pipeline does not interpret (``name``, ``bbox``, foreign members)
are kept in ``extra`` and written back unchanged.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from globe_optimizer.core.constants import (
    CRS_KEY,
    FEATURE_COLLECTION_TYPE,
    FEATURE_TYPE,
    FEATURES_KEY,
    GEOMETRY_KEY,
    ID_KEY,
    PROPERTIES_KEY,
    TYPE_KEY,
)
from globe_optimizer.models.geometry import (
    Geometry,
    GeoJSONStructureError,
    InvalidCoordinateError,
    geometry_from_dict,
)

_FEATURE_KEYS = frozenset({TYPE_KEY, ID_KEY, GEOMETRY_KEY, PROPERTIES_KEY})
_COLLECTION_KEYS = frozenset({TYPE_KEY, FEATURES_KEY, CRS_KEY})


@dataclass(frozen=True, slots=True)
class Feature:
    """A single outline feature.

    Attributes:
        geometry: Polygon, MultiPolygon, other geometry, or ``None``.
        properties: Arbitrary key-value metadata.
        feature_id: GeoJSON ``id`` member, if any.
        extra: Foreign members, written back verbatim.
    """

    geometry: Geometry | None = None
    properties: dict[str, Any] = field(default_factory=dict)
    feature_id: str | int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: object) -> Feature:
        """Deserialise a GeoJSON Feature mapping.

        Raises:
            GeoJSONStructureError: If the mapping is not a Feature.
            InvalidCoordinateError: If any polygon position is malformed.
        """
        if not isinstance(data, dict):
            msg = f"Feature must be an object, got {type(data).__name__}"
            raise GeoJSONStructureError(msg)
        if data.get(TYPE_KEY, FEATURE_TYPE) != FEATURE_TYPE:
            msg = f"Expected type '{FEATURE_TYPE}', got {data.get(TYPE_KEY)!r}"
            raise GeoJSONStructureError(msg)

        properties = data.get(PROPERTIES_KEY)
        if properties is not None and not isinstance(properties, dict):
            msg = f"Feature properties must be an object or null, got {type(properties).__name__}"
            raise GeoJSONStructureError(msg)

        return cls(
            geometry=geometry_from_dict(data.get(GEOMETRY_KEY)),
            properties=copy.deepcopy(properties) if properties else {},
            feature_id=data.get(ID_KEY),
            extra={k: copy.deepcopy(v) for k, v in data.items() if k not in _FEATURE_KEYS},
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON Feature mapping."""
        result: dict[str, object] = {TYPE_KEY: FEATURE_TYPE}
        if self.feature_id is not None:
            result[ID_KEY] = self.feature_id
        result[PROPERTIES_KEY] = copy.deepcopy(self.properties)
        result[GEOMETRY_KEY] = self.geometry.to_dict() if self.geometry is not None else None
        result.update(copy.deepcopy(self.extra))
        return result

    @property
    def vertex_count(self) -> int:
        """Number of polygon positions in this feature's geometry."""
        return self.geometry.vertex_count if self.geometry is not None else 0


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    """An ordered set of features plus collection-level members.

    Attributes:
        features: Features in file order.
        crs: Legacy coordinate-reference member, ``None`` when absent.
        extra: Other top-level members, written back verbatim.
    """

    features: list[Feature] = field(default_factory=list)
    crs: dict[str, Any] | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: object) -> FeatureCollection:
        """Deserialise a GeoJSON FeatureCollection mapping.

        Raises:
            GeoJSONStructureError: If the mapping is not a FeatureCollection.
            InvalidCoordinateError: If any polygon position is malformed;
                the error carries the feature index.
        """
        if not isinstance(data, dict):
            msg = f"FeatureCollection must be an object, got {type(data).__name__}"
            raise GeoJSONStructureError(msg)
        if data.get(TYPE_KEY, FEATURE_COLLECTION_TYPE) != FEATURE_COLLECTION_TYPE:
            msg = f"Expected type '{FEATURE_COLLECTION_TYPE}', got {data.get(TYPE_KEY)!r}"
            raise GeoJSONStructureError(msg)

        raw_features = data.get(FEATURES_KEY)
        if not isinstance(raw_features, list):
            msg = f"'{FEATURES_KEY}' must be a list, got {type(raw_features).__name__}"
            raise GeoJSONStructureError(msg)

        features: list[Feature] = []
        for feature_index, raw in enumerate(raw_features):
            try:
                features.append(Feature.from_dict(raw))
            except InvalidCoordinateError as exc:
                raise exc.locate(feature_index=feature_index) from exc

        crs = data.get(CRS_KEY)
        return cls(
            features=features,
            crs=copy.deepcopy(crs) if isinstance(crs, dict) else None,
            extra={k: copy.deepcopy(v) for k, v in data.items() if k not in _COLLECTION_KEYS},
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON mapping; ``crs`` is omitted when ``None``."""
        result: dict[str, object] = {TYPE_KEY: FEATURE_COLLECTION_TYPE}
        if self.crs is not None:
            result[CRS_KEY] = copy.deepcopy(self.crs)
        result.update(copy.deepcopy(self.extra))
        result[FEATURES_KEY] = [feature.to_dict() for feature in self.features]
        return result

    @property
    def vertex_count(self) -> int:
        """Total number of polygon positions across all features."""
        return sum(feature.vertex_count for feature in self.features)
