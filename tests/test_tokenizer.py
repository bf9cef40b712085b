import math

import pytest

from core import (
    InvalidCharacter, MalformedExpression, SymbolTable, TokenType, UnknownIdentifier,
    evaluate, tokenize,
)


def symbols_of(tokens):
    return [t.symbol for t in tokens]


def test_numbers_operators_and_whitespace():
    tokens = tokenize(" 2 +  3.5*(10 - .5) ")
    assert symbols_of(tokens) == ['2', '+', '3.5', '*', '(', '10', '-', '.5', ')']
    assert tokens[0].type == TokenType.NUMBER
    assert tokens[0].value == 2.0
    assert tokens[2].value == 3.5
    assert tokens[7].value == 0.5
    assert tokens[1].type == TokenType.OPERATOR
    assert tokens[4].type == TokenType.LPAREN
    assert tokens[8].type == TokenType.RPAREN


def test_multiple_decimal_points_are_left_to_the_evaluator():
    tokens = tokenize("1.2.3")
    assert len(tokens) == 1
    assert tokens[0].type == TokenType.NUMBER
    assert tokens[0].value is None
    with pytest.raises(MalformedExpression):
        evaluate("1.2.3 + 1")


def test_functions_are_recognized():
    tokens = tokenize("sqrt(4) + exp(1) + log(2)")
    functions = [t.symbol for t in tokens if t.type == TokenType.FUNCTION]
    assert functions == ['sqrt', 'exp', 'log']


def test_constants_are_substituted_as_whole_words():
    tokens = tokenize("pi + e")
    assert tokens[0].value == math.pi
    assert tokens[2].value == math.e
    # 'e' inside 'exp' is not touched
    assert tokenize("exp(1)")[0].type == TokenType.FUNCTION


def test_constant_shadows_variable_of_same_name():
    symbols = SymbolTable({'e': 10})
    assert tokenize("e", symbols)[0].value == math.e


def test_identifiers_resolve_against_symbol_table():
    symbols = SymbolTable({'x': 5, 'Rate': 0.25})
    tokens = tokenize("x*Rate", symbols)
    assert tokens[0].value == 5.0
    assert tokens[2].value == 0.25


def test_symbol_lookup_is_case_sensitive():
    with pytest.raises(UnknownIdentifier):
        tokenize("X", SymbolTable({'x': 1}))


def test_unknown_identifier():
    with pytest.raises(UnknownIdentifier) as exc:
        tokenize("2*foo")
    assert exc.value.name == 'foo'


def test_invalid_character():
    with pytest.raises(InvalidCharacter) as exc:
        tokenize("2 $ 3")
    assert exc.value.char == '$'


def test_free_variables_become_variable_tokens():
    tokens = tokenize("x^2 + y", SymbolTable({'y': 1}), variables=('x',))
    assert tokens[0].type == TokenType.VARIABLE
    assert tokens[0].symbol == 'x'
    assert tokens[4].type == TokenType.NUMBER


def test_empty_input():
    assert tokenize("   ") == []


@pytest.mark.parametrize("text, char", [("2²", '²'), ("١+1", '١')])
def test_non_ascii_digits_are_invalid(text, char):
    with pytest.raises(InvalidCharacter) as exc:
        tokenize(text)
    assert exc.value.char == char
