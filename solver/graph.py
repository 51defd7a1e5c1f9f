"""
Graph builder for reduced polynomials.

Produces a dark-themed matplotlib Figure of ``y = P(X)`` with the real
roots marked.  Used by the CLI ``--plot`` option.
"""

import numpy as np

from solver import engine
from solver.formatting import format_reduced_form, format_root
from solver.numerical import evaluate

# ── palette ────────────────────────────────────────────────────────────────
C_BG       = "#0f0f0f"
C_AX       = "#181818"
C_GRID     = "#252525"
C_TICK     = "#666666"
C_SPINE    = "#333333"
C_LINE1    = "#1a8cff"   # P(X)
C_DOT      = "#4caf50"   # real root
C_TEXT     = "#cccccc"

_TITLES = {
    engine.NO_SOLUTION: "No Solution — P(X) never reaches 0",
    engine.ALL_REALS: "Every Real Number — P(X) is identically 0",
    engine.COMPLEX_PAIR: "Complex Roots — P(X) does not cross 0",
    engine.DEGREE_TOO_HIGH: "Degree above 2 — roots not computed",
}


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def _real_roots(outcome) -> list:
    return [r for r in outcome.roots if not isinstance(r, complex)]


def _x_range(outcome, window: float):
    """Sample points covering every real root plus *window* on each side."""
    reals = _real_roots(outcome)
    if reals:
        lo, hi = min(reals) - window, max(reals) + window
    elif outcome.kind == engine.COMPLEX_PAIR:
        centre = outcome.roots[0].real
        lo, hi = centre - window, centre + window
    else:
        lo, hi = -window, window
    return np.linspace(lo, hi, 400)


def build_figure(poly, outcome, window: float = 5.0):
    """Build and return a matplotlib Figure of *poly* annotated with *outcome*."""
    from matplotlib.figure import Figure

    xs = _x_range(outcome, window)
    ys = np.asarray(evaluate(poly, xs), dtype=float)

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(xs, ys, color=C_LINE1, linewidth=2,
            label=f"P(X) = {format_reduced_form(poly)}")

    reals = _real_roots(outcome)
    if reals:
        ax.scatter(reals, [0.0] * len(reals), color=C_DOT, s=80, zorder=5,
                   label="Roots: " + ", ".join(format_root(r) for r in reals))
        for root in reals:
            ax.axvline(root, color=C_DOT, linewidth=1, linestyle=":", alpha=0.6)
        ax.set_title("Real roots of P(X)", color=C_TEXT, fontsize=10)
    else:
        ax.set_title(_TITLES.get(outcome.kind, ""), color=C_TEXT, fontsize=10)

    ax.set_xlabel("X", color=C_TEXT)
    ax.set_ylabel("P(X)", color=C_TEXT)
    ax.legend(fontsize=8, facecolor="#1e1e1e", edgecolor=C_SPINE,
              labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig


def save_figure(poly, outcome, path: str, window: float = 5.0) -> str:
    fig = build_figure(poly, outcome, window)
    fig.savefig(path, facecolor=fig.get_facecolor())
    return path
