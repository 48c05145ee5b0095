"""Tests for the unified exception taxonomy.

Validates:
- PipelineError structured attributes
- Category classification (validation, contract, permanent)
- ``to_error_dict()`` produces stable payload keys
- All activity/model exceptions are PipelineError subclasses
"""

from __future__ import annotations

import pytest

from globe_optimizer.activities.globe_file import GlobeFileError
from globe_optimizer.core.config import ConfigValidationError
from globe_optimizer.core.exceptions import (
    ContractError,
    PermanentError,
    PipelineError,
    ValidationError,
)
from globe_optimizer.models.geometry import GeoJSONStructureError, InvalidCoordinateError


class TestPipelineErrorBase:
    """PipelineError base class behavior."""

    def test_default_attributes(self) -> None:
        err = PipelineError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""

    def test_custom_attributes(self) -> None:
        err = PipelineError("fail", stage="globe_file", code="X")
        assert err.stage == "globe_file"
        assert err.code == "X"

    def test_str_is_message(self) -> None:
        assert str(PipelineError("human-readable error")) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        d = PipelineError("x", stage="s", code="C").to_error_dict()
        assert set(d.keys()) == {"category", "code", "stage", "message"}


class TestCategories:
    """Category is derived from the concrete class."""

    @pytest.mark.parametrize(
        ("error", "category"),
        [
            (ValidationError("v"), "validation"),
            (ContractError("c"), "contract"),
            (PermanentError("p"), "permanent"),
            (InvalidCoordinateError("bad"), "validation"),
            (GeoJSONStructureError("shape"), "contract"),
            (GlobeFileError("io"), "permanent"),
            (ConfigValidationError("K", 1, "nope"), "permanent"),
        ],
    )
    def test_category(self, error: PipelineError, category: str) -> None:
        assert error.category == category


class TestDomainErrors:
    """Stage and code defaults of the concrete errors."""

    def test_invalid_coordinate_defaults(self) -> None:
        err = InvalidCoordinateError("non-finite")
        assert err.stage == "simplify"
        assert err.code == "COORDINATE_INVALID"
        assert str(err) == "non-finite"

    def test_invalid_coordinate_locate(self) -> None:
        err = InvalidCoordinateError("non-finite", point_index=4)
        located = err.locate(ring_index=0).locate(feature_index=12)
        assert (located.feature_index, located.ring_index, located.point_index) == (12, 0, 4)
        assert located.polygon_index is None
        assert located.detail == "non-finite"
        assert str(located) == "non-finite (feature 12, ring 0, point 4)"
        assert err.feature_index is None

    def test_structure_error_defaults(self) -> None:
        err = GeoJSONStructureError("bad")
        assert err.stage == "geojson"
        assert err.code == "GEOJSON_STRUCTURE_INVALID"

    def test_globe_file_error_defaults(self) -> None:
        err = GlobeFileError("gone")
        assert err.stage == "globe_file"
        assert err.code == "GLOBE_FILE_FAILED"

    @pytest.mark.parametrize(
        "cls",
        [InvalidCoordinateError, GeoJSONStructureError, GlobeFileError, ConfigValidationError],
    )
    def test_subclass_of_pipeline_error(self, cls: type) -> None:
        assert issubclass(cls, PipelineError)
