from solver.polynomial import Polynomial, Term, degree_of, reduce_terms


def test_reduce_merges_like_exponents_in_ascending_order() -> None:
    poly = reduce_terms([Term(2.0, 2), Term(1.0, 0), Term(3.0, 2), Term(-1.0, 1)])
    assert list(poly.items()) == [(0, 1.0), (1, -1.0), (2, 5.0)]


def test_reduce_drops_cancelled_terms_but_keeps_constant() -> None:
    poly = reduce_terms([Term(1.0, 2), Term(-1.0, 2), Term(4.0, 0), Term(-4.0, 0)])
    assert dict(poly) == {0: 0.0}
    assert degree_of(poly) == 0


def test_reduce_folds_negative_zero() -> None:
    poly = reduce_terms([Term(-0.0, 0)])
    assert str(poly[0]) == "0.0"


def test_reduce_is_idempotent() -> None:
    once = reduce_terms([Term(1.5, 1), Term(2.0, 3), Term(-2.0, 3), Term(7.0, 0), Term(1.0, 1)])
    twice = reduce_terms(once.terms())
    assert once == twice


def test_empty_polynomial_has_degree_zero_and_zero_constant() -> None:
    poly = reduce_terms([Term(1.0, 1), Term(-1.0, 1)])
    assert len(poly) == 0
    assert poly.degree == 0
    assert poly.coefficient(0) == 0.0


def test_coefficient_lookup_is_total() -> None:
    poly = Polynomial({2: 3.0})
    assert poly.coefficient(2) == 3.0
    assert poly.coefficient(1) == 0.0
    assert poly.as_ascending() == [0.0, 0.0, 3.0]
    assert 1 not in poly


def test_degree_is_max_exponent() -> None:
    assert Polynomial({0: 1.0, 5: 2.0, 3: 1.0}).degree == 5
