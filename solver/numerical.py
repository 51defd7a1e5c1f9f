"""NumPy checks of reported roots against the reduced polynomial."""

import numpy as np


def evaluate(poly, x):
    """Evaluate *poly* at *x* (scalar, complex or array) with :func:`numpy.polyval`."""
    # polyval wants the highest power first.
    coeffs = np.array(poly.as_ascending()[::-1], dtype=float)
    return np.polyval(coeffs, x)


def residual(poly, root) -> float:
    """``|P(root)|`` as a plain float."""
    return float(np.abs(evaluate(poly, root)))


def verify_roots(poly, roots) -> list:
    """One ``{"root", "residual"}`` entry per root, in the order given."""
    return [{"root": root, "residual": residual(poly, root)} for root in roots]


def _fmt_residual(value: float) -> str:
    return f"{value:.3e}"
