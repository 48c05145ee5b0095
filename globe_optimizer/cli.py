"""Command-line entry point: optimize a globe GeoJSON file in place.

Settings come from the environment (``GLOBE_TOLERANCE_DEG``,
``GLOBE_PRECISION``, ``GLOBE_MAX_WORKERS``, ``GLOBE_PATH``); flags
override them and are validated with the same rules.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from globe_optimizer.activities.globe_file import optimize_globe_file
from globe_optimizer.core.config import OptimizerConfig
from globe_optimizer.core.exceptions import PipelineError

logger = logging.getLogger("globe_optimizer.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="globe-optimizer",
        description="Simplify and quantize globe outline GeoJSON for decorative rendering.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="GeoJSON FeatureCollection to optimize (default: $GLOBE_PATH or src/data/globe.json)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path (defaults to overwriting the input)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Douglas-Peucker tolerance in degrees (default: 0.5)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places kept on coordinates (default: 1)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used to process features (default: 1)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-feature detail",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = OptimizerConfig.from_env().with_overrides(
            tolerance_deg=args.tolerance,
            precision=args.precision,
            max_workers=args.workers,
            globe_path=str(args.path) if args.path is not None else None,
        )
        report = optimize_globe_file(
            config.globe_path,
            output_path=args.output,
            config=config,
        )
    except PipelineError as exc:
        logger.error("Optimization failed | %s", exc.to_error_dict())
        return 1
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    logger.info(
        "Done | features=%d | vertices=%d->%d",
        report.feature_count,
        report.vertices_before,
        report.vertices_after,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
