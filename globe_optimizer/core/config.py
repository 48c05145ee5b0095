"""Optimizer configuration loaded from environment variables.

All configuration values have defaults matching the globe build step
(0.5 degree tolerance, 1 decimal place).  Command-line flags override
the environment through ``OptimizerConfig.with_overrides``.

Fail-fast validation:
    ``from_env()`` and ``with_overrides()`` raise ``ConfigValidationError``
    if any value is out of its valid range, so bad configuration is
    caught before any geometry is touched.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, replace

from globe_optimizer.core.constants import (
    DEFAULT_GLOBE_PATH,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PRECISION,
    DEFAULT_TOLERANCE_DEG,
    MAX_PRECISION,
)
from globe_optimizer.core.exceptions import PipelineError


class ConfigValidationError(PipelineError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class OptimizerConfig:
    """Immutable optimizer configuration.

    Attributes:
        tolerance_deg: Douglas-Peucker tolerance in decimal degrees.
        precision: Decimal places kept on output coordinates.
        max_workers: Thread count for per-feature processing (1 = sequential).
        globe_path: Default GeoJSON file optimized by the CLI.
    """

    tolerance_deg: float = DEFAULT_TOLERANCE_DEG
    precision: int = DEFAULT_PRECISION
    max_workers: int = DEFAULT_MAX_WORKERS
    globe_path: str = DEFAULT_GLOBE_PATH

    @classmethod
    def from_env(cls) -> OptimizerConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GLOBE_PRECISION=abc``).
        """
        config = cls(
            tolerance_deg=float(os.getenv("GLOBE_TOLERANCE_DEG", str(DEFAULT_TOLERANCE_DEG))),
            precision=int(os.getenv("GLOBE_PRECISION", str(DEFAULT_PRECISION))),
            max_workers=int(os.getenv("GLOBE_MAX_WORKERS", str(DEFAULT_MAX_WORKERS))),
            globe_path=os.getenv("GLOBE_PATH", DEFAULT_GLOBE_PATH),
        )
        _validate(config)
        return config

    def with_overrides(
        self,
        *,
        tolerance_deg: float | None = None,
        precision: int | None = None,
        max_workers: int | None = None,
        globe_path: str | None = None,
    ) -> OptimizerConfig:
        """Return a validated copy with the non-``None`` arguments applied."""
        changes: dict[str, object] = {
            "tolerance_deg": tolerance_deg,
            "precision": precision,
            "max_workers": max_workers,
            "globe_path": globe_path,
        }
        config = replace(self, **{k: v for k, v in changes.items() if v is not None})
        _validate(config)
        return config


def _validate(config: OptimizerConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not math.isfinite(config.tolerance_deg) or config.tolerance_deg < 0:
        raise ConfigValidationError(
            "GLOBE_TOLERANCE_DEG",
            config.tolerance_deg,
            "must be a finite number >= 0 (degrees)",
        )

    if not 0 <= config.precision <= MAX_PRECISION:
        raise ConfigValidationError(
            "GLOBE_PRECISION",
            config.precision,
            f"must be between 0 and {MAX_PRECISION} (decimal places)",
        )

    if config.max_workers < 1:
        raise ConfigValidationError(
            "GLOBE_MAX_WORKERS",
            config.max_workers,
            "must be >= 1",
        )

    if not config.globe_path:
        raise ConfigValidationError(
            "GLOBE_PATH",
            config.globe_path,
            "must not be empty",
        )
