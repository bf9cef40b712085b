"""导数 - 符号求导（规则表）与有限差分数值求导"""
import logging

import numpy as np
from scipy.special import comb

from calculus import expression_tree as et
from calculus.expression_tree import BinOp, Call, Num, Var
from config.config import DERIVATIVE_CONFIG
from core.engine import compile_function
from core.errors import InvalidFormat, MalformedExpression

logger = logging.getLogger(__name__)


def _check_order(order, expression):
    if not isinstance(order, (int, np.integer)) or order < 0:
        raise InvalidFormat(f"Derivative order must be a non-negative integer: {order}", expression)
    if order > DERIVATIVE_CONFIG["max_order"]:
        raise InvalidFormat(
            f"Derivative order {order} exceeds the maximum of {DERIVATIVE_CONFIG['max_order']}",
            expression
        )


def differentiate(node, variable):
    """对表达式树求一阶导数，返回新的表达式树"""
    if isinstance(node, Num):
        return et.ZERO
    if isinstance(node, Var):
        return et.ONE if node.name == variable else et.ZERO
    if isinstance(node, Call):
        return _differentiate_call(node, variable)

    u, v = node.left, node.right
    du = differentiate(u, variable)
    dv = differentiate(v, variable)

    if node.op == '+':
        return et.add(du, dv)
    if node.op == '-':
        return et.sub(du, dv)
    if node.op == '*':
        # (uv)' = u'v + uv'
        return et.add(et.mul(du, v), et.mul(u, dv))
    if node.op == '/':
        # (u/v)' = (u'v - uv') / v^2
        return et.div(et.sub(et.mul(du, v), et.mul(u, dv)), et.power(v, et.TWO))
    if node.op == '^':
        return _differentiate_power(node, du, dv)
    raise MalformedExpression(f"Unknown operator: {node.op}")


def _differentiate_power(node, du, dv):
    u, v = node.left, node.right
    if et.is_constant(v):
        # (u^c)' = c * u^(c-1) * u'
        return et.mul(et.mul(v, et.power(u, et.sub(v, et.ONE))), du)
    if et.is_constant(u):
        # (c^v)' = c^v * log(c) * v'
        return et.mul(et.mul(node, et.call('log', u)), dv)
    # (u^v)' = u^v * (v' * log(u) + v * u' / u)
    return et.mul(
        node,
        et.add(et.mul(dv, et.call('log', u)), et.div(et.mul(v, du), u))
    )


def _differentiate_call(node, variable):
    u = node.arg
    du = differentiate(u, variable)

    if node.func == 'sin':
        return et.mul(et.call('cos', u), du)
    if node.func == 'cos':
        return et.mul(et.neg(et.call('sin', u)), du)
    if node.func == 'tan':
        return et.div(du, et.power(et.call('cos', u), et.TWO))
    if node.func == 'sqrt':
        return et.div(du, et.mul(et.TWO, et.call('sqrt', u)))
    if node.func == 'log':
        return et.div(du, u)
    if node.func == 'exp':
        return et.mul(et.call('exp', u), du)
    raise MalformedExpression(f"Unknown function: {node.func}")


def derivative(expression, variable, order=1, symbols=None):
    """
    符号求导
    Args:
        expression: 以 variable 为自变量的表达式
        variable: 变量名
        order: 阶数，逐次应用一阶规则；0 阶返回原式
        symbols: 变量表，其中的其他变量按常数处理
    Returns:
        引擎可直接求值的导数表达式字符串
    """
    _check_order(order, expression)
    compiled = compile_function(expression, variable, symbols)
    try:
        tree = et.from_postfix(compiled.postfix)
        for _ in range(order):
            tree = differentiate(tree, variable)
        result = et.render(tree)
    except RecursionError:
        raise MalformedExpression("Expression too deeply nested to differentiate", expression)
    logger.debug(f"d^{order}/d{variable}^{order} [{expression}] = {result}")
    return result


def numeric_derivative(expression, variable, point, order=1, step=None, symbols=None):
    """
    中心差分数值导数
    f^(n)(p) ≈ Σ_k (-1)^k C(n,k) f(p + (n/2 - k)h) / h^n
    """
    _check_order(order, expression)
    h = step if step is not None else DERIVATIVE_CONFIG["step"]
    if h <= 0:
        raise InvalidFormat(f"Finite difference step must be positive: {h}", expression)

    f = compile_function(expression, variable, symbols)
    if order == 0:
        return f(point)

    k = np.arange(order + 1)
    offsets = (order / 2.0 - k) * h
    weights = (-1.0) ** k * comb(order, k)
    values = np.array([f(point + float(offset)) for offset in offsets])
    return float(np.dot(weights, values) / h ** order)
