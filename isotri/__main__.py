import argparse
import logging
import sys
from typing import Optional, Sequence

from isotri import construct, format_points, format_report, solve, SolveOptions
from isotri.numbers import PRECISIONS

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Solve the isosceles triangle construction with <BKL = 50 degrees"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--precision",
        choices=sorted(PRECISIONS),
        default="extended",
        help="Floating-point width used by the solver (default: extended)",
    )
    parser.add_argument(
        "--show-points",
        action="store_true",
        help="Also print points B, C, K, A, L at the final slope",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    result = solve(SolveOptions(precision=args.precision))
    logger.info("Solver finished: converged=%s iterations=%d", result.converged, result.iterations)

    print(format_report(result), end="")
    if args.show_points:
        print(format_points(construct(result.slope)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
