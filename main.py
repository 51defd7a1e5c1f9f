"""
Computor — Entry point.

Solve one polynomial equation given on the command line, or prompt for it.
"""

import argparse
import logging
import sys

from solver import EquationError, parse_equation, solve, solve_equation
from solver import storage

PROMPT = (
    'Please enter a polynomial equation '
    '(e.g., "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"): '
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="computor",
        description="Reduce and solve a polynomial equation of degree 2 or lower.",
    )
    parser.add_argument("equation", nargs="?",
                        help='e.g. "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"')
    parser.add_argument("--plot", metavar="FILE",
                        help="save a graph of the reduced polynomial to FILE")
    return parser


def _log_level(name) -> int:
    """Numeric level for *name*; unknown names fall back to WARNING."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    settings = storage.get_settings()
    logging.basicConfig(level=_log_level(settings["log_level"]))

    equation = args.equation if args.equation is not None else input(PROMPT)
    equation = equation.upper()

    try:
        result = solve_equation(equation)
    except EquationError as e:
        logger.debug("rejected %r: %s", equation, e.detail)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in result["lines"]:
        print(line)

    if settings["save_history"]:
        storage.add_history(equation, "\n".join(result["lines"][2:]))

    if args.plot:
        from solver.graph import save_figure

        poly = parse_equation(equation)
        save_figure(poly, solve(poly), args.plot, float(settings["plot_window"]))
        logger.info("graph saved to %s", args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
