"""表达式引擎入口 - tokenize -> to_postfix -> evaluate_postfix，以及赋值语句"""
import logging

from config.config import ENGINE_CONFIG
from core.errors import EngineError, InvalidAssignment, InvalidFormat
from core.parser import to_postfix
from core.rpn_evaluator import RPNEvaluator
from core.token_system import FUNCTION_NAMES
from core.tokenizer import tokenize

logger = logging.getLogger(__name__)


def _attach_expression(error, expression):
    if error.expression is None:
        error.expression = expression
    return error


def evaluate(expression, symbols=None):
    """
    计算表达式的值

    含一个 '=' 时视为赋值：右侧求值成功后才写入变量表，并返回写入的值。
    Args:
        expression: 表达式字符串
        symbols: 变量表（可变Mapping），由调用方持有
    Returns:
        float
    """
    if '=' in expression:
        return _evaluate_assignment(expression, symbols)

    try:
        postfix = to_postfix(tokenize(expression, symbols))
        return RPNEvaluator.evaluate(postfix)
    except EngineError as e:
        raise _attach_expression(e, expression)


def _evaluate_assignment(expression, symbols):
    parts = expression.split('=')
    if len(parts) != 2:
        raise InvalidAssignment("Invalid variable assignment format.", expression)

    name = parts[0].strip()
    if not name.isalpha() or name in FUNCTION_NAMES or name in ENGINE_CONFIG["constants"]:
        raise InvalidAssignment(f"Invalid variable name: '{name}'", expression)
    if symbols is None:
        raise InvalidAssignment("Assignment needs a symbol table", expression)

    rhs = parts[1].strip()
    if not rhs:
        raise InvalidAssignment(f"Missing value for '{name}'", expression)

    value = evaluate(rhs, symbols)
    symbols[name] = value
    logger.debug(f"Assigned {name} = {value}")
    return value


class CompiledExpression:
    """
    以单个变量为自变量的函数

    表达式只分析一次，变量以 VARIABLE Token 保留，
    每个取值点通过绑定求值，不做文本替换。
    """

    def __init__(self, expression, variable, symbols=None):
        if not variable or not variable.isalpha():
            raise InvalidFormat(f"Invalid variable name: '{variable}'", expression)
        self.expression = expression
        self.variable = variable
        try:
            self.postfix = to_postfix(tokenize(expression, symbols, variables=(variable,)))
        except EngineError as e:
            raise _attach_expression(e, expression)

    def __call__(self, x):
        try:
            return RPNEvaluator.evaluate(self.postfix, {self.variable: x})
        except EngineError as e:
            raise _attach_expression(e, self.expression)

    def __repr__(self):
        return f"CompiledExpression({self.expression!r}, {self.variable!r})"


def compile_function(expression, variable, symbols=None):
    return CompiledExpression(expression, variable, symbols)


def evaluate_at(expression, variable, x, symbols=None):
    """在 variable = x 处求值"""
    return compile_function(expression, variable, symbols)(x)
