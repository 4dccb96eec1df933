import argparse
import logging
import sys
from typing import Optional, Sequence

from curve_kit.config import DEFAULT_T, PipelineConfig
from curve_kit.curves.errors import CurveError
from curve_kit.pipeline.reduce import ReductionStrategy
from curve_kit.report import format_radius_sum, format_report
from curve_kit.runner import run_pipeline

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curve-kit",
        description="Generate random curves, evaluate them and sum the circle radii",
    )
    parser.add_argument(
        "--count",
        type=int,
        help="Number of curves to generate (default: 100, or CURVE_KIT_COUNT)",
    )
    parser.add_argument(
        "--t",
        type=float,
        default=DEFAULT_T,
        help="Parameter value used for evaluation (default: pi/4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (default: OS entropy, or CURVE_KIT_SEED)",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ReductionStrategy],
        help="Radius reduction strategy (default: sequential)",
    )
    parser.add_argument(
        "--grain-size",
        type=int,
        help="Leaf size for the parallel reduction",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Thread pool size for the parallel reduction",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        config = PipelineConfig.from_env(
            count=args.count,
            t=args.t,
            seed=args.seed,
            strategy=args.strategy,
            grain_size=args.grain_size,
            max_workers=args.workers,
        )
        result = run_pipeline(config)
    except (CurveError, ValueError) as exc:
        logger.debug("Run aborted", exc_info=True)
        parser.error(str(exc))

    print(format_report("All curves", result.curves, config.t))
    print(format_report("Sorted circles", result.circles, config.t))
    print(format_radius_sum(result.radius_sum))


if __name__ == "__main__":
    main(sys.argv[1:])
