"""Test polynomial interpolation through Vandermonde systems."""
import pytest
from sympy import interpolate, Symbol, Poly, Rational
from polyconst import BigFraction, solve_vandermonde, vandermonde_matrix, SingularSystem, Polynomial

F = BigFraction


def poly_values(coeffs, xs):
    """Evaluate integer coefficients (highest degree first) at xs."""
    ys = []
    for x in xs:
        y = 0
        for c in coeffs:
            y = y * x + c
        ys.append(y)
    return ys


def test_vandermonde_matrix():
    m = vandermonde_matrix([2, 3, 0])
    assert m.get_row(0) == [F(4), F(2), F(1)]
    assert m.get_row(1) == [F(9), F(3), F(1)]
    assert m.get_row(2) == [F(0), F(0), F(1)]


def test_quadratic_scenario():
    # x^2 + x + 1 at 1, 2, 3
    coeffs = solve_vandermonde([1, 2, 3], [3, 7, 13])
    assert coeffs == [F(1, 1), F(1, 1), F(1, 1)]
    assert coeffs[-1] == 1


def test_points_off_the_expected_curve():
    # (1,3), (2,6), (3,11) lie on x^2 + 2, not on x^2 + x + 1
    xs, ys = [1, 2, 3], [3, 6, 11]
    coeffs = solve_vandermonde(xs, ys)
    assert coeffs == [F(1), F(0), F(2)]
    assert [Polynomial(coeffs).evaluate(x) for x in xs] == [F(y) for y in ys]


def test_line_through_origin():
    coeffs = solve_vandermonde([1, 2], [1, 2])
    assert coeffs == [F(1), F(0)]
    assert (coeffs[-1].numerator, coeffs[-1].denominator) == (0, 1)


def test_non_integer_constant():
    coeffs = solve_vandermonde([1, 3], [2, 3])
    assert coeffs == [F(1, 2), F(3, 2)]
    assert not coeffs[-1].is_integer()


def test_single_point():
    assert solve_vandermonde([7], [42]) == [F(42)]


def test_zero_among_x_values():
    # x = 0 makes the last row [0, 0, 1], the constant term is y(0)
    assert solve_vandermonde([0, 1, -1], [5, 6, 6]) == [F(1), F(0), F(5)]


@pytest.mark.timeout(30)
def test_interpolation_exactness(rng):
    for k in range(1, 8):
        for _ in range(10):
            xs = rng.sample(range(-20, 21), k)
            coeffs = [rng.randint(-50, 50) for _ in range(k)]
            ys = poly_values(coeffs, xs)
            result = solve_vandermonde(xs, ys)
            assert result == [F(c) for c in coeffs]
            assert all(r.denominator == 1 for r in result)


@pytest.mark.timeout(30)
def test_reproduces_samples(rng):
    for k in range(1, 7):
        xs = rng.sample(range(1, 30), k)
        ys = [rng.randint(-10**20, 10**20) for _ in range(k)]
        p = Polynomial(solve_vandermonde(xs, ys))
        assert [p.evaluate(x) for x in xs] == [F(y) for y in ys]


@pytest.mark.timeout(30)
def test_matches_sympy_interpolation(rng):
    x = Symbol('x')
    for k in range(1, 6):
        xs = sorted(rng.sample(range(1, 15), k))
        ys = [rng.randint(-1000, 1000) for _ in range(k)]
        expected = Poly(interpolate(list(zip(xs, ys)), x), x).all_coeffs()
        expected = [Rational(0)] * (k - len(expected)) + expected
        result = solve_vandermonde(xs, ys)
        assert [c.to_sympy() for c in result] == expected


def test_large_values():
    secret = 2**256 + 12345
    coeffs = [3**100, -7**50, secret]
    xs = [1, 2, 3]
    assert solve_vandermonde(xs, poly_values(coeffs, xs))[-1] == secret


def test_deterministic():
    xs, ys = [4, 1, 9, 2], [10, -3, 7, 0]
    assert solve_vandermonde(xs, ys) == solve_vandermonde(list(xs), list(ys))


def test_singular_system():
    with pytest.raises(SingularSystem):
        solve_vandermonde([5, 5], [10, 20])
    with pytest.raises(SingularSystem):
        solve_vandermonde([1, 2, 1], [1, 2, 3])


def test_invalid_arguments():
    with pytest.raises(ValueError):
        solve_vandermonde([1, 2], [1])
    with pytest.raises(ValueError):
        solve_vandermonde([], [])
    with pytest.raises(TypeError):
        solve_vandermonde([1.5, 2], [1, 2])
