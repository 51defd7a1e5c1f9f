"""
Equation validation and term extraction.

A single grammar serves both purposes, so a string that validates always
parses into exactly the terms that were validated::

    side := term (op term)*
    op   := "+" | "-"
    term := [sign] [number "*"] X "^" [-]digits
    number := digits ["." digits]

Whitespace is free around every token.  The first term of a side may carry
a sign; every later term must be introduced by an operator, which may itself
be followed by a signed coefficient (``+ -5 * X^1``).  A side that is just
``0`` stands for ``0 * X^0``.
"""

import logging
import math
import re

from solver.errors import (
    EmptySideError,
    NumericError,
    SeparatorError,
    TermFormatError,
)
from solver.polynomial import Polynomial, Term, reduce_terms

logger = logging.getLogger(__name__)

_TERM_RE = re.compile(
    r"""
    \s*
    (?P<op>[+-])?\s*                        # operator, or leading sign
    (?P<sign>-)?\s*                         # sign of the coefficient itself
    (?:(?P<coef>\d+(?:\.\d+)?)\s*\*\s*)?    # optional "number *"
    [Xx]\s*\^\s*
    (?P<exp>-?\d+)
    \s*
    """,
    re.VERBOSE,
)

_ZERO_SIDE = "0"


def split_equation(equation_str: str) -> tuple:
    """Return ``(lhs, rhs)``; raises :class:`SeparatorError` unless there is exactly one '='."""
    if equation_str.count("=") != 1:
        raise SeparatorError(equation_str)
    lhs, rhs = equation_str.split("=")
    return lhs, rhs


def tokenize_side(side: str) -> list:
    """Split *side* into match objects, one per term, enforcing the grammar."""
    if not side.strip():
        raise EmptySideError(side)

    matches = []
    pos = 0
    while pos < len(side):
        m = _TERM_RE.match(side, pos)
        if m is None or m.end() == pos:
            raise TermFormatError(side[pos:].strip())
        # Only the first term may stand without an operator.
        if matches and m.group("op") is None:
            raise TermFormatError(m.group(0).strip())
        matches.append(m)
        pos = m.end()
    return matches


def _term_from_match(m) -> Term:
    negative = (m.group("op") == "-") != (m.group("sign") == "-")
    coef_text = m.group("coef")
    try:
        coefficient = float(coef_text) if coef_text is not None else 1.0
        exponent = int(m.group("exp"))
    except ValueError:
        raise NumericError(m.group(0).strip())

    if not math.isfinite(coefficient) or exponent < 0:
        raise NumericError(m.group(0).strip())
    return Term(-coefficient if negative else coefficient, exponent)


def parse_side(side: str) -> list:
    """Extract the terms of one side of the equation, in source order."""
    if side.strip() == _ZERO_SIDE:
        return [Term(0.0, 0)]
    return [_term_from_match(m) for m in tokenize_side(side)]


def validate_equation(equation_str: str) -> None:
    """Raise the matching :class:`~solver.errors.EquationError` if *equation_str* is malformed."""
    lhs, rhs = split_equation(equation_str)
    for side in (lhs, rhs):
        if side.strip() != _ZERO_SIDE:
            tokenize_side(side)


def parse_terms(equation_str: str) -> list:
    """Left-hand terms followed by the negated right-hand terms."""
    lhs, rhs = split_equation(equation_str)
    lhs_terms = parse_side(lhs)
    rhs_terms = [Term(-t.coefficient, t.exponent) for t in parse_side(rhs)]
    logger.debug("parsed %d left and %d right terms", len(lhs_terms), len(rhs_terms))
    return lhs_terms + rhs_terms


def parse_equation(equation_str: str) -> Polynomial:
    """Validate, tokenize and reduce *equation_str* to its canonical polynomial."""
    validate_equation(equation_str)
    return reduce_terms(parse_terms(equation_str))
