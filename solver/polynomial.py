"""Terms, like-term reduction and degree classification."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Term:
    """One monomial ``coefficient * X^exponent``."""

    coefficient: float
    exponent: int


class Polynomial(Mapping):
    """Read-only mapping exponent -> coefficient, iterated in ascending order.

    Lookups through :meth:`coefficient` are total: an exponent that is not
    stored reads as ``0.0``.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coefficients=None):
        items = dict(coefficients or {})
        self._coeffs = {exp: float(items[exp]) for exp in sorted(items)}

    def __getitem__(self, exponent: int) -> float:
        return self._coeffs[exponent]

    def __iter__(self):
        return iter(self._coeffs)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __eq__(self, other):
        if isinstance(other, Mapping):
            return dict(self._coeffs) == dict(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._coeffs.items()))

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs!r})"

    def coefficient(self, exponent: int) -> float:
        return self._coeffs.get(exponent, 0.0)

    @property
    def degree(self) -> int:
        """Highest stored exponent; an empty polynomial has degree 0."""
        return max(self._coeffs, default=0)

    def terms(self) -> list:
        return [Term(coef, exp) for exp, coef in self._coeffs.items()]

    def as_ascending(self, degree=None) -> list:
        """Dense coefficient list ``[c0, c1, ..., cN]`` up to *degree*."""
        top = self.degree if degree is None else degree
        return [self.coefficient(exp) for exp in range(top + 1)]


def reduce_terms(terms) -> Polynomial:
    """Merge *terms* by exponent.

    A non-constant entry whose coefficient sums to zero is dropped; the
    constant entry is kept whenever it appeared in the input.
    """
    terms = list(terms)
    sums = {}
    for term in terms:
        sums[term.exponent] = sums.get(term.exponent, 0.0) + term.coefficient

    kept = {
        exp: coef + 0.0  # folds -0.0 into 0.0
        for exp, coef in sums.items()
        if coef != 0 or exp == 0
    }
    poly = Polynomial(kept)
    logger.debug("reduced %d raw terms to %d (degree %d)", len(terms), len(poly), poly.degree)
    return poly


def degree_of(poly: Polynomial) -> int:
    return poly.degree
