"""Degree-dispatched solver for polynomial equations of degree 0 to 2.

Parses equations such as ``"5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"``,
reduces them to ``P(X) = 0`` and solves them in floating point.  The
functions here are pure: :func:`solve` returns a :class:`SolveOutcome`,
:func:`render` turns it into output lines and :func:`solve_equation` runs
the whole pipeline and returns a result dict for the CLI and the API.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional

from solver.errors import NumericError
from solver.formatting import _fmt_num, format_reduced_form, format_root
from solver.numerical import _fmt_residual, verify_roots
from solver.parser import parse_equation
from solver.polynomial import degree_of

logger = logging.getLogger(__name__)

MAX_DEGREE = 2

NO_SOLUTION = "no_solution"
ALL_REALS = "all_reals"
SINGLE = "single"
PAIR = "pair"
COMPLEX_PAIR = "complex_pair"
DEGREE_TOO_HIGH = "degree_too_high"

_MESSAGES = {
    NO_SOLUTION: "No solution exists.",
    ALL_REALS: "Each real number is a solution.",
    DEGREE_TOO_HIGH: "The polynomial degree is strictly greater than 2, I can't solve.",
}
_QUADRATIC_HEADERS = {
    PAIR: "Discriminant is strictly positive, the two solutions are:",
    SINGLE: "Discriminant is zero, the solution is:",
    COMPLEX_PAIR: "Discriminant is negative, the two complex solutions are:",
}


@dataclass(frozen=True)
class SolveOutcome:
    kind: str
    degree: int
    discriminant: Optional[float] = None
    roots: tuple = ()


# ── Degree-specific solvers ─────────────────────────────────────────────

def _solve_constant(constant: float, degree: int) -> SolveOutcome:
    kind = ALL_REALS if constant == 0 else NO_SOLUTION
    return SolveOutcome(kind, degree)


def _solve_linear(poly) -> SolveOutcome:
    a = poly.coefficient(1)
    b = poly.coefficient(0)
    if a == 0:
        return _solve_constant(b, 1)
    return SolveOutcome(SINGLE, 1, roots=(-b / a + 0.0,))


def _solve_quadratic(poly) -> SolveOutcome:
    a = poly.coefficient(2)
    b = poly.coefficient(1)
    c = poly.coefficient(0)
    delta = b * b - 4 * a * c
    if not math.isfinite(delta):
        raise NumericError(f"discriminant overflow: {delta}")

    if delta > 0:
        sq = math.sqrt(delta)
        roots = ((-b + sq) / (2 * a), (-b - sq) / (2 * a))
        return SolveOutcome(PAIR, 2, delta, roots)
    if delta == 0:
        return SolveOutcome(SINGLE, 2, delta, (-b / (2 * a) + 0.0,))

    real = -b / (2 * a) + 0.0
    imag = abs(math.sqrt(-delta) / (2 * a))
    return SolveOutcome(COMPLEX_PAIR, 2, delta, (complex(real, imag), complex(real, -imag)))


def solve(poly) -> SolveOutcome:
    """Dispatch on the degree of the reduced polynomial *poly*."""
    if not all(math.isfinite(coef) for coef in poly.values()):
        raise NumericError(f"coefficient overflow: {poly!r}")
    degree = degree_of(poly)
    if degree > MAX_DEGREE:
        outcome = SolveOutcome(DEGREE_TOO_HIGH, degree)
    elif degree == 2:
        outcome = _solve_quadratic(poly)
    elif degree == 1:
        outcome = _solve_linear(poly)
    else:
        outcome = _solve_constant(poly.coefficient(0), 0)
    if not all(math.isfinite(root) for root in map(abs, outcome.roots)):
        raise NumericError(f"root overflow: {outcome.roots}")
    logger.debug("degree %d solved as %s", degree, outcome.kind)
    return outcome


# ── Rendering ───────────────────────────────────────────────────────────

def render(poly, outcome: SolveOutcome) -> list:
    """Output lines for *outcome*, starting with the reduced form and degree."""
    lines = [
        f"Reduced form: {format_reduced_form(poly)} = 0",
        f"Polynomial degree: {outcome.degree}",
    ]
    if outcome.kind in _MESSAGES:
        lines.append(_MESSAGES[outcome.kind])
        return lines

    if outcome.discriminant is None:
        lines.append(f"The solution is: {format_root(outcome.roots[0])}")
        return lines

    lines.append(f"Discriminant: {_fmt_num(outcome.discriminant)}")
    lines.append(_QUADRATIC_HEADERS[outcome.kind])
    lines.extend(format_root(root) for root in outcome.roots)
    return lines


# ── Main public entry point ─────────────────────────────────────────────

def solve_equation(equation_str: str) -> dict:
    """
    Run the full pipeline on *equation_str* (expected upper-case).

    Returns a dict with:
      - equation: the input string
      - reduced_form: the canonical form, without ``= 0``
      - degree, discriminant, kind
      - solutions: formatted roots, in reporting order
      - lines: every output line, in order
      - verification: ``{root, residual}`` for each reported root
      - summary: runtime_ms, total_lines, library

    Raises :class:`~solver.errors.EquationError` on malformed input.
    """
    t_start = time.perf_counter()

    poly = parse_equation(equation_str)
    outcome = solve(poly)
    lines = render(poly, outcome)

    verification = [
        {"root": format_root(entry["root"]), "residual": _fmt_residual(entry["residual"])}
        for entry in verify_roots(poly, outcome.roots)
    ]
    runtime_ms = round((time.perf_counter() - t_start) * 1000, 3)

    return {
        "equation": equation_str,
        "reduced_form": format_reduced_form(poly),
        "degree": outcome.degree,
        "discriminant": outcome.discriminant,
        "kind": outcome.kind,
        "solutions": [format_root(root) for root in outcome.roots],
        "lines": lines,
        "verification": verification,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_lines": len(lines),
            "library": "Python float + NumPy",
        },
    }
