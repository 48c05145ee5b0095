"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from globe_optimizer.cli import build_parser, main

_ENV_KEYS = ("GLOBE_TOLERANCE_DEG", "GLOBE_PRECISION", "GLOBE_MAX_WORKERS", "GLOBE_PATH")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestParser:
    """Argument parsing."""

    def test_defaults_are_unset(self) -> None:
        args = build_parser().parse_args([])
        assert args.path is None
        assert args.tolerance is None
        assert args.precision is None
        assert args.workers is None

    def test_bad_number_exits_2(self) -> None:
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--precision", "one"])
        assert exc.value.code == 2


class TestMain:
    """End-to-end CLI runs."""

    def test_optimizes_in_place(self, globe_copy: Path) -> None:
        assert main([str(globe_copy)]) == 0
        data = json.loads(globe_copy.read_text(encoding="utf-8"))
        assert "crs" not in data

    def test_flags_override(self, globe_copy: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.json"
        code = main(
            [str(globe_copy), "--output", str(out), "--precision", "2", "--workers", "2"]
        )
        assert code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        outer = data["features"][1]["geometry"]["coordinates"][0][0]
        assert outer[0] == [20.12, 20.65]

    def test_path_from_environment(
        self, globe_copy: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GLOBE_PATH", str(globe_copy))
        assert main([]) == 0
        assert "crs" not in json.loads(globe_copy.read_text(encoding="utf-8"))

    def test_missing_file_exits_1(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_invalid_flag_value_exits_1(self, globe_copy: Path) -> None:
        original = globe_copy.read_bytes()
        assert main([str(globe_copy), "--tolerance", "-1"]) == 1
        assert globe_copy.read_bytes() == original

    def test_unparseable_env_exits_1(
        self, globe_copy: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GLOBE_PRECISION", "abc")
        assert main([str(globe_copy)]) == 1
