"""表达式树 - 由后缀序列折叠而来，供符号求导使用"""
from dataclasses import dataclass
from typing import Union

import numpy as np

from core.errors import DivisionByZero, MalformedExpression
from core.operators import Operators
from core.token_system import TOKEN_DEFINITIONS, TokenType


@dataclass(frozen=True)
class Num:
    value: float


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class BinOp:
    op: str  # '+', '-', '*', '/', '^'
    left: 'Node'
    right: 'Node'


@dataclass(frozen=True)
class Call:
    func: str
    arg: 'Node'


Node = Union[Num, Var, BinOp, Call]

ZERO = Num(0.0)
ONE = Num(1.0)
TWO = Num(2.0)


def from_postfix(postfix):
    """用与 RPNEvaluator 相同的栈规则构建表达式树"""
    stack = []
    for token in postfix:
        if token.type == TokenType.NUMBER:
            if token.value is None:
                raise MalformedExpression(f"Invalid number literal: {token.symbol}")
            stack.append(Num(token.value))
        elif token.type == TokenType.VARIABLE:
            stack.append(Var(token.symbol))
        elif token.type == TokenType.OPERATOR:
            if len(stack) < 2:
                raise MalformedExpression(f"Insufficient operands for '{token.symbol}'")
            right = stack.pop()
            left = stack.pop()
            stack.append(BinOp(token.symbol, left, right))
        elif token.type == TokenType.FUNCTION:
            if not stack:
                raise MalformedExpression(f"Missing argument for '{token.symbol}'")
            stack.append(Call(token.symbol, stack.pop()))
        else:
            raise MalformedExpression(f"Unexpected token in RPN expression: {token.symbol}")

    if len(stack) != 1:
        raise MalformedExpression(f"Stack has {len(stack)} elements after evaluation, expected 1")
    return stack[0]


def is_constant(node):
    """子树中不含变量"""
    if isinstance(node, Num):
        return True
    if isinstance(node, Var):
        return False
    if isinstance(node, Call):
        return is_constant(node.arg)
    return is_constant(node.left) and is_constant(node.right)


# 化简构造器 ==========================================
# 只做常数折叠、0/1 恒等式和系数合并

def _fold(op, a, b):
    """两侧均为常数时折叠；除零或结果非有限值时不折叠"""
    method = getattr(Operators, TOKEN_DEFINITIONS[op].name)
    try:
        value = method(a.value, b.value)
    except DivisionByZero:
        return None
    if not np.isfinite(value):
        return None
    return Num(float(value))


def add(a, b):
    if a == ZERO:
        return b
    if b == ZERO:
        return a
    if isinstance(a, Num) and isinstance(b, Num):
        return _fold('+', a, b) or BinOp('+', a, b)
    return BinOp('+', a, b)


def sub(a, b):
    if b == ZERO:
        return a
    if a == b:
        return ZERO
    if isinstance(a, Num) and isinstance(b, Num):
        return _fold('-', a, b) or BinOp('-', a, b)
    return BinOp('-', a, b)


def neg(a):
    return sub(ZERO, a)


def mul(a, b):
    if a == ZERO or b == ZERO:
        return ZERO
    if a == ONE:
        return b
    if b == ONE:
        return a
    if isinstance(a, Num) and isinstance(b, Num):
        return _fold('*', a, b) or BinOp('*', a, b)
    # 系数前置并合并：c1*(c2*u) -> (c1*c2)*u
    if isinstance(b, Num):
        a, b = b, a
    if isinstance(a, Num) and isinstance(b, BinOp) and b.op == '*' and isinstance(b.left, Num):
        folded = _fold('*', a, b.left)
        if folded is not None:
            return mul(folded, b.right)
    return BinOp('*', a, b)


def div(a, b):
    if b == ONE:
        return a
    if a == ZERO and b != ZERO:
        return ZERO
    if isinstance(a, Num) and isinstance(b, Num):
        return _fold('/', a, b) or BinOp('/', a, b)
    return BinOp('/', a, b)


def power(a, b):
    if b == ZERO:
        return ONE
    if b == ONE:
        return a
    if isinstance(a, Num) and isinstance(b, Num):
        return _fold('^', a, b) or BinOp('^', a, b)
    return BinOp('^', a, b)


def call(func, arg):
    return Call(func, arg)


# 渲染 ==========================================

def format_number(value):
    """不使用科学计数法，保证输出可被 tokenize 重新读入"""
    # -0.0 + 0.0 == 0.0，避免输出 "-0"
    return np.format_float_positional(float(value) + 0.0, trim='-')


def _needs_parens(child, parent_op, is_right):
    if not isinstance(child, BinOp):
        return False
    if parent_op == '^':
        return True
    child_prec = TOKEN_DEFINITIONS[child.op].precedence
    parent_prec = TOKEN_DEFINITIONS[parent_op].precedence
    if is_right:
        return child_prec <= parent_prec
    return child_prec < parent_prec


def render(node):
    """
    将表达式树渲染为引擎可解析的字符串

    引擎没有一元负号，负数写成 (0-c)；^ 按左结合解析，
    因此 ^ 两侧的复合子式一律加括号。
    """
    if isinstance(node, Num):
        if node.value < 0:
            return f"(0-{format_number(-node.value)})"
        return format_number(node.value)
    if isinstance(node, Var):
        return node.name
    if isinstance(node, Call):
        return f"{node.func}({render(node.arg)})"

    left = render(node.left)
    if _needs_parens(node.left, node.op, is_right=False):
        left = f"({left})"
    right = render(node.right)
    if _needs_parens(node.right, node.op, is_right=True):
        right = f"({right})"
    return f"{left}{node.op}{right}"
