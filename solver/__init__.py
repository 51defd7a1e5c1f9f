"""Computor solver package — parse, reduce and solve polynomial equations."""

from solver.engine import SolveOutcome, render, solve, solve_equation
from solver.errors import (
    EmptySideError,
    EquationError,
    NumericError,
    SeparatorError,
    TermFormatError,
)
from solver.parser import parse_equation, validate_equation
from solver.polynomial import Polynomial, Term, reduce_terms

__all__ = [
    "EmptySideError",
    "EquationError",
    "NumericError",
    "Polynomial",
    "SeparatorError",
    "SolveOutcome",
    "Term",
    "TermFormatError",
    "parse_equation",
    "reduce_terms",
    "render",
    "solve",
    "solve_equation",
    "validate_equation",
]
