import math

import pytest
from scipy.integrate import quad

from calculus import integrate
from core import DivisionByZero, InvalidFormat, SymbolTable, UnknownIdentifier


def test_linear_integrand_is_exact():
    assert integrate("2*x", 'x', 0, 10) == pytest.approx(100.0, rel=1e-12)


def test_reversed_bounds_change_sign():
    assert integrate("2*x", 'x', 10, 0) == pytest.approx(-100.0, rel=1e-12)


def test_quadratic_within_trapezoid_error():
    # 误差上界 (b-a) h^2 / 12 * max|f''|
    assert integrate("x^2", 'x', 0, 3) == pytest.approx(9.0, abs=1e-5)


@pytest.mark.parametrize("expression, lower, upper", [
    ("sin(x)", 0.0, math.pi),
    ("exp(0-x)*x", 0.0, 4.0),
    ("sqrt(x)", 1.0, 9.0),
    ("1/(1+x^2)", -2.0, 2.0),
])
def test_agrees_with_adaptive_quadrature(expression, lower, upper):
    reference_functions = {
        "sin(x)": math.sin,
        "exp(0-x)*x": lambda x: math.exp(-x) * x,
        "sqrt(x)": math.sqrt,
        "1/(1+x^2)": lambda x: 1 / (1 + x ** 2),
    }
    expected, _ = quad(reference_functions[expression], lower, upper)
    assert integrate(expression, 'x', lower, upper) == pytest.approx(expected, abs=1e-5)


def test_slice_count_is_configurable():
    # 单个梯形：0.5*(f(0)+f(1))*1
    assert integrate("x^2", 'x', 0, 1, slices=1) == pytest.approx(0.5)
    coarse = abs(integrate("x^2", 'x', 0, 1, slices=10) - 1 / 3)
    fine = abs(integrate("x^2", 'x', 0, 1, slices=1000) - 1 / 3)
    assert fine < coarse


@pytest.mark.parametrize("slices", [0, -5, 2.5])
def test_invalid_slice_count(slices):
    with pytest.raises(InvalidFormat):
        integrate("x", 'x', 0, 1, slices=slices)


def test_symbols_are_constants_in_the_integrand():
    assert integrate("k*x", 'x', 0, 2, symbols=SymbolTable({'k': 3})) == pytest.approx(6.0)
    with pytest.raises(UnknownIdentifier):
        integrate("k*x", 'x', 0, 2)


def test_integration_variable_shadows_symbol_table():
    symbols = SymbolTable({'x': 100})
    assert integrate("x", 'x', 0, 2, symbols=symbols) == pytest.approx(2.0)


def test_division_by_zero_inside_interval():
    with pytest.raises(DivisionByZero):
        integrate("1/x", 'x', 0, 1)
