"""Text rendering of reduced forms, numbers and solve outcomes."""

ROOT_DECIMALS = 6


# ── Number helpers ──────────────────────────────────────────────────────

def _fmt_num(value: float) -> str:
    """Shortest general form of *value*.

    Integral values drop the decimal point (``4`` not ``4.0``) and ``-0``
    prints as ``0``; everything else uses the shortest round-tripping repr.
    """
    value = float(value) + 0.0
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _fmt_fixed(value: float, decimals: int = ROOT_DECIMALS) -> str:
    """*value* with exactly *decimals* places, never ``-0.000000``."""
    text = f"{float(value):.{decimals}f}"
    if float(text) == 0:
        text = f"{0.0:.{decimals}f}"
    return text


def _fmt_complex(value: complex) -> str:
    sign = "-" if value.imag < 0 else "+"
    return f"{_fmt_fixed(value.real)} {sign} {_fmt_fixed(abs(value.imag))}i"


# ── Reduced form ────────────────────────────────────────────────────────

def format_term(coefficient: float, exponent: int) -> str:
    return f"{_fmt_num(coefficient)} * X^{exponent}"


def format_reduced_form(poly) -> str:
    """Render *poly* as ``a * X^0 + b * X^1 - c * X^2`` in ascending order.

    A negative coefficient after the first term is written with ``-`` and its
    magnitude; an empty polynomial renders as ``0``.
    """
    parts = []
    for exponent, coefficient in poly.items():
        if not parts:
            parts.append(format_term(coefficient, exponent))
        elif coefficient < 0:
            parts.append(f"- {format_term(-coefficient, exponent)}")
        else:
            parts.append(f"+ {format_term(coefficient, exponent)}")
    return " ".join(parts) if parts else "0"


def format_root(root) -> str:
    if isinstance(root, complex):
        return _fmt_complex(root)
    return _fmt_fixed(root)
