"""Geometry data model for polygon outlines.

Geometry is a closed tagged union:

- ``PolygonGeometry``: ordered rings, outer boundary first, holes after.
- ``MultiPolygonGeometry``: ordered ``PolygonGeometry`` parts.
- ``OtherGeometry``: any other GeoJSON geometry, carried through untouched.

Coordinates are read from GeoJSON nested lists into ``(lon, lat)``
tuples.  Any third component (altitude) is dropped.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from globe_optimizer.core.constants import (
    COORDINATES_KEY,
    MULTIPOLYGON_TYPE,
    POLYGON_TYPE,
    TYPE_KEY,
)
from globe_optimizer.core.exceptions import ContractError, ValidationError

Point = tuple[float, float]
Ring = list[Point]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GeoJSONStructureError(ContractError):
    """Raised when the input does not have the GeoJSON shape expected."""

    default_stage = "geojson"
    default_code = "GEOJSON_STRUCTURE_INVALID"


class InvalidCoordinateError(ValidationError):
    """Raised when a coordinate is missing, non-numeric, or non-finite.

    The location fields are ``None`` until a layer that knows them
    re-raises the error through ``locate()``.

    Attributes:
        detail: Description of the problem without location.
        feature_index: Index of the feature in the collection.
        polygon_index: Index of the polygon within a MultiPolygon.
        ring_index: Index of the ring within its polygon.
        point_index: Index of the point within its ring.
    """

    default_stage = "simplify"
    default_code = "COORDINATE_INVALID"

    def __init__(
        self,
        detail: str,
        *,
        feature_index: int | None = None,
        polygon_index: int | None = None,
        ring_index: int | None = None,
        point_index: int | None = None,
    ) -> None:
        self.detail = detail
        self.feature_index = feature_index
        self.polygon_index = polygon_index
        self.ring_index = ring_index
        self.point_index = point_index
        location = ", ".join(
            f"{name} {value}"
            for name, value in (
                ("feature", feature_index),
                ("polygon", polygon_index),
                ("ring", ring_index),
                ("point", point_index),
            )
            if value is not None
        )
        super().__init__(f"{detail} ({location})" if location else detail)

    def locate(self, **indices: int) -> InvalidCoordinateError:
        """Return a copy of this error with the given location indices filled in."""
        merged = {
            "feature_index": self.feature_index,
            "polygon_index": self.polygon_index,
            "ring_index": self.ring_index,
            "point_index": self.point_index,
        }
        merged.update(indices)
        return InvalidCoordinateError(self.detail, **merged)


# ---------------------------------------------------------------------------
# Point coercion
# ---------------------------------------------------------------------------


def coerce_point(raw: object, *, point_index: int | None = None) -> Point:
    """Convert a raw coordinate pair to a ``(lon, lat)`` float tuple.

    Raises:
        InvalidCoordinateError: If the pair is not a sequence, has fewer
            than two components, or a component is not a finite number.
    """
    if not isinstance(raw, list | tuple):
        msg = f"Malformed coordinate: expected list/tuple, got {type(raw).__name__}"
        raise InvalidCoordinateError(msg, point_index=point_index)
    if len(raw) < 2:
        msg = f"Malformed coordinate: expected at least 2 components, got {len(raw)}"
        raise InvalidCoordinateError(msg, point_index=point_index)
    lon, lat = raw[0], raw[1]
    for value in (lon, lat):
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"Malformed coordinate: non-numeric component {value!r}"
            raise InvalidCoordinateError(msg, point_index=point_index)
        if not math.isfinite(value):
            msg = f"Malformed coordinate: non-finite component {value!r}"
            raise InvalidCoordinateError(msg, point_index=point_index)
    return (float(lon), float(lat))


def _ring_from_raw(raw: object, ring_index: int) -> Ring:
    if not isinstance(raw, list | tuple):
        msg = f"Ring {ring_index} must be a list of positions, got {type(raw).__name__}"
        raise GeoJSONStructureError(msg)
    ring: Ring = []
    for point_index, position in enumerate(raw):
        try:
            ring.append(coerce_point(position, point_index=point_index))
        except InvalidCoordinateError as exc:
            raise exc.locate(ring_index=ring_index) from exc
    return ring


def _position(point: Point) -> list[float | int]:
    """GeoJSON position in its shortest form: whole numbers serialise as ``10``, not ``10.0``."""
    return [int(v) if v.is_integer() else v for v in point]


# ---------------------------------------------------------------------------
# Geometry variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """A polygon: outer boundary ring followed by zero or more hole rings."""

    rings: list[Ring] = field(default_factory=list)

    type: ClassVar[str] = POLYGON_TYPE

    @classmethod
    def from_coordinates(cls, raw: object) -> PolygonGeometry:
        """Build from GeoJSON ``coordinates`` (a list of rings).

        Raises:
            GeoJSONStructureError: If ``raw`` is not a list of rings.
            InvalidCoordinateError: If any position is malformed.
        """
        if not isinstance(raw, list | tuple):
            msg = f"Polygon coordinates must be a list of rings, got {type(raw).__name__}"
            raise GeoJSONStructureError(msg)
        return cls(rings=[_ring_from_raw(ring, i) for i, ring in enumerate(raw)])

    def to_dict(self) -> dict[str, object]:
        return {
            TYPE_KEY: self.type,
            COORDINATES_KEY: [[_position(p) for p in ring] for ring in self.rings],
        }

    @property
    def vertex_count(self) -> int:
        """Total number of positions across all rings."""
        return sum(len(ring) for ring in self.rings)


@dataclass(frozen=True, slots=True)
class MultiPolygonGeometry:
    """An ordered collection of polygons."""

    polygons: list[PolygonGeometry] = field(default_factory=list)

    type: ClassVar[str] = MULTIPOLYGON_TYPE

    @classmethod
    def from_coordinates(cls, raw: object) -> MultiPolygonGeometry:
        """Build from GeoJSON ``coordinates`` (a list of polygons).

        Raises:
            GeoJSONStructureError: If ``raw`` is not a list of polygons.
            InvalidCoordinateError: If any position is malformed.
        """
        if not isinstance(raw, list | tuple):
            msg = f"MultiPolygon coordinates must be a list of polygons, got {type(raw).__name__}"
            raise GeoJSONStructureError(msg)
        polygons: list[PolygonGeometry] = []
        for polygon_index, part in enumerate(raw):
            try:
                polygons.append(PolygonGeometry.from_coordinates(part))
            except InvalidCoordinateError as exc:
                raise exc.locate(polygon_index=polygon_index) from exc
        return cls(polygons=polygons)

    def to_dict(self) -> dict[str, object]:
        return {
            TYPE_KEY: self.type,
            COORDINATES_KEY: [
                [[_position(p) for p in ring] for ring in polygon.rings] for polygon in self.polygons
            ],
        }

    @property
    def vertex_count(self) -> int:
        return sum(polygon.vertex_count for polygon in self.polygons)


@dataclass(frozen=True, slots=True)
class OtherGeometry:
    """Any geometry the pipeline does not simplify, kept as its raw mapping."""

    data: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return str(self.data.get(TYPE_KEY, ""))

    def to_dict(self) -> dict[str, object]:
        return copy.deepcopy(self.data)

    @property
    def vertex_count(self) -> int:
        return 0


Geometry = PolygonGeometry | MultiPolygonGeometry | OtherGeometry


def geometry_from_dict(data: object) -> Geometry | None:
    """Build the geometry variant for a GeoJSON geometry mapping.

    ``None`` stays ``None``.  Geometry types other than Polygon and
    MultiPolygon are wrapped in ``OtherGeometry`` without inspection.

    Raises:
        GeoJSONStructureError: If ``data`` is not a mapping, or a polygon
            geometry lacks ``coordinates``.
        InvalidCoordinateError: If any polygon position is malformed.
    """
    if data is None:
        return None
    if not isinstance(data, dict):
        msg = f"Geometry must be an object or null, got {type(data).__name__}"
        raise GeoJSONStructureError(msg)

    geom_type = data.get(TYPE_KEY)
    if geom_type not in (POLYGON_TYPE, MULTIPOLYGON_TYPE):
        return OtherGeometry(data=copy.deepcopy(data))

    if COORDINATES_KEY not in data:
        msg = f"{geom_type} geometry has no '{COORDINATES_KEY}' member"
        raise GeoJSONStructureError(msg)

    if geom_type == POLYGON_TYPE:
        return PolygonGeometry.from_coordinates(data[COORDINATES_KEY])
    return MultiPolygonGeometry.from_coordinates(data[COORDINATES_KEY])
