"""Shared pytest fixtures for the globe optimizer test suite."""

from pathlib import Path

import pytest

from globe_optimizer.models.geometry import Point

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def sample_globe(data_dir: Path) -> Path:
    """Path to an indented sample globe with crs, properties, and mixed geometry."""
    return data_dir / "globe_sample.geojson"


@pytest.fixture()
def globe_copy(sample_globe: Path, tmp_path: Path) -> Path:
    """A writable copy of the sample globe."""
    target = tmp_path / "globe.json"
    target.write_bytes(sample_globe.read_bytes())
    return target


# ---------------------------------------------------------------------------
# Reference rings
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_ring() -> list[Point]:
    """Closed 10x10 square with no redundant vertices."""
    return [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0), (0.0, 0.0)]


@pytest.fixture()
def noisy_rectangle_ring() -> list[Point]:
    """Closed rectangle with one near-collinear vertex on its bottom edge."""
    return [(0.0, 0.0), (5.0, 0.01), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]


@pytest.fixture()
def sliver_ring() -> list[Point]:
    """Closed 50-point ring hugging a straight line (out along y=0, back along y=0.05)."""
    outward = [(float(x), 0.0) for x in range(25)]
    back = [(float(x), 0.05) for x in range(24, 0, -1)]
    return [*outward, *back, (0.0, 0.0)]
