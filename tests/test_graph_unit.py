import numpy as np
from matplotlib.figure import Figure

from solver import engine, graph
from solver.parser import parse_equation


def _figure_for(equation: str):
    poly = parse_equation(equation)
    return graph.build_figure(poly, engine.solve(poly))


def test_style_axes() -> None:
    fig = Figure(figsize=(4, 2))
    ax = fig.add_subplot(111)
    graph._style_axes(ax, fig)
    assert ax.get_xlabel() == ""


def test_x_range_covers_real_roots() -> None:
    outcome = engine.solve(parse_equation("1 * X^2 - 100 * X^0 = 0"))
    xs = graph._x_range(outcome, 5.0)
    assert xs.min() <= -10 and xs.max() >= 10
    assert len(xs) == 400


def test_x_range_defaults_without_roots() -> None:
    outcome = engine.solve(parse_equation("5 * X^0 = 0"))
    xs = graph._x_range(outcome, 2.0)
    assert np.isclose(xs.min(), -2.0) and np.isclose(xs.max(), 2.0)


def test_build_figure_marks_real_roots() -> None:
    fig = _figure_for("1 * X^2 + 0 * X^1 - 1 * X^0 = 0 * X^1")
    assert isinstance(fig, Figure)
    ax = fig.axes[0]
    assert ax.get_title() == "Real roots of P(X)"
    assert len(ax.collections) == 1


def test_build_figure_without_real_roots() -> None:
    fig = _figure_for("1 * X^2 + 1 * X^0 = 0")
    assert fig.axes[0].get_title() == graph._TITLES[engine.COMPLEX_PAIR]

    fig = _figure_for("1 * X^3 = 1 * X^0")
    assert fig.axes[0].get_title() == graph._TITLES[engine.DEGREE_TOO_HIGH]


def test_save_figure(tmp_path) -> None:
    poly = parse_equation("4 * X^1 + 5 * X^0 = 0")
    target = tmp_path / "plot.png"
    graph.save_figure(poly, engine.solve(poly), str(target))
    assert target.exists() and target.stat().st_size > 0
