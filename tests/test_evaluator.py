import math

import numpy as np
import pytest

from core import (
    DivisionByZero, EngineError, InvalidAssignment, MalformedExpression, RPNEvaluator,
    SymbolTable, UnknownIdentifier, evaluate, evaluate_postfix, to_postfix, tokenize,
)


def test_precedence_is_honored():
    assert evaluate("2+3*4") == 14


def test_parentheses_override_precedence():
    assert evaluate("(2+3)*4") == 20


def test_chained_power_evaluates_left_to_right():
    assert evaluate("2^3^2") == 64


def test_power_is_floating_point():
    assert evaluate("4^0.5") == pytest.approx(2.0)
    assert evaluate("2^(0-1)") == pytest.approx(0.5)


def test_division_by_zero():
    with pytest.raises(DivisionByZero) as exc:
        evaluate("10/0")
    assert isinstance(exc.value, ZeroDivisionError)
    assert exc.value.expression == "10/0"


def test_functions_use_radians_and_natural_log():
    assert evaluate("sin(pi/2)") == pytest.approx(1.0)
    assert evaluate("cos(pi)") == pytest.approx(-1.0)
    assert evaluate("tan(0)") == 0.0
    assert evaluate("log(e)") == pytest.approx(1.0)
    assert evaluate("exp(0)") == 1.0
    assert evaluate("sqrt(16)") == 4.0


def test_domain_errors_propagate_nan():
    assert math.isnan(evaluate("sqrt(0-4)"))
    assert math.isnan(evaluate("log(0-1)"))
    assert evaluate("log(0)") == -math.inf


@pytest.mark.parametrize("expression", ["", "2 3", "2+", "*2", "-3", "sin()", "()"])
def test_malformed_expressions(expression):
    with pytest.raises(MalformedExpression):
        evaluate(expression)


def test_evaluation_is_deterministic():
    expression = "sin(1)*cos(2)+sqrt(3)/exp(0.5)"
    assert evaluate(expression) == evaluate(expression)


def test_assignment_then_use():
    symbols = SymbolTable()
    assert evaluate("x = 5", symbols) == 5
    assert evaluate("x*2", symbols) == 10


def test_assignment_updates_existing_and_uses_other_variables():
    symbols = SymbolTable()
    evaluate("x = 5", symbols)
    assert evaluate("y = x + 1", symbols) == 6
    assert evaluate("x = x * y", symbols) == 30
    assert symbols['x'] == 30
    assert symbols['y'] == 6


def test_assignment_accepts_plain_dict():
    symbols = {}
    evaluate("rate = 1/4", symbols)
    assert symbols == {'rate': 0.25}


@pytest.mark.parametrize("expression", ["a = b = 3", "2 = 3", "sin = 3", "pi = 3", "x y = 1", "x = ", " = 4"])
def test_invalid_assignment(expression):
    with pytest.raises(InvalidAssignment):
        evaluate(expression, SymbolTable())


def test_assignment_without_symbol_table():
    with pytest.raises(InvalidAssignment):
        evaluate("x = 1")


def test_failed_assignment_leaves_table_unchanged():
    symbols = SymbolTable({'x': 1})
    with pytest.raises(DivisionByZero):
        evaluate("x = 1/0", symbols)
    with pytest.raises(UnknownIdentifier):
        evaluate("z = q + 1", symbols)
    assert dict(symbols) == {'x': 1.0}


def test_errors_share_a_base_class():
    with pytest.raises(EngineError):
        evaluate("2 # 3")


def test_evaluate_postfix_with_bindings():
    postfix = to_postfix(tokenize("x^2 + 1", variables=('x',)))
    assert evaluate_postfix(postfix, {'x': 3}) == 10
    assert RPNEvaluator.evaluate(postfix, {'x': -2}) == 5
    with pytest.raises(UnknownIdentifier):
        evaluate_postfix(postfix)


def test_same_postfix_can_be_evaluated_repeatedly():
    postfix = to_postfix(tokenize("x*x", variables=('x',)))
    assert [evaluate_postfix(postfix, {'x': v}) for v in (1, 2, 3)] == [1, 4, 9]


# 参照求值器：Python 自身的算术（^ 映射为 **），只用于不含连续幂和一元负号的表达式
REFERENCE_NAMESPACE = {
    'sin': math.sin, 'cos': math.cos, 'tan': math.tan,
    'sqrt': math.sqrt, 'log': math.log, 'exp': math.exp,
    'pi': math.pi, 'e': math.e,
}


def reference_evaluate(expression):
    return eval(expression.replace('^', '**'), {'__builtins__': {}}, REFERENCE_NAMESPACE)


@pytest.mark.parametrize("expression", [
    "2+3*4",
    "(1+2)*(3-4)/5",
    "2^10-1",
    "3*(4+5)^2",
    "8/2/2",
    "2-3+4",
    "1/3+1/3+1/3",
    "((2))",
    "sin(1)*cos(2)+tan(0.5)",
    "sqrt(16)+log(10)*exp(0.5)",
    "sqrt(2)^2",
    "2*pi*e",
    "exp(log(7))",
    "(1.5+2.25)*(4-0.125)/sqrt(3)",
])
def test_matches_reference_evaluator(expression):
    expected = reference_evaluate(expression)
    assert evaluate(expression) == pytest.approx(expected, rel=1e-12)
    postfix = to_postfix(tokenize(expression))
    assert evaluate_postfix(postfix) == pytest.approx(expected, rel=1e-12)


def test_results_are_python_floats():
    assert isinstance(evaluate("sqrt(2)"), float)
    assert not isinstance(evaluate("2^3"), np.ndarray)
