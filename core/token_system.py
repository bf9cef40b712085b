"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    VARIABLE = "variable"  # 自由变量（微积分编译时使用）
    OPERATOR = "operator"  # 二元操作符
    FUNCTION = "function"  # 一元函数
    LPAREN = "lparen"
    RPAREN = "rparen"


class Token:
    __slots__ = ("type", "name", "symbol", "value", "arity", "precedence")

    def __init__(self, token_type, name, symbol=None, value=None, arity=0, precedence=0):
        self.type = token_type
        self.name = name  # Operators 中对应的方法名
        self.symbol = symbol if symbol is not None else name  # 源文本中的写法
        self.value = value
        self.arity = arity
        self.precedence = precedence

    @property
    def is_operand(self):
        return self.type in (TokenType.NUMBER, TokenType.VARIABLE)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.symbol, self.value) == (other.type, other.symbol, other.value)

    def __hash__(self):
        return hash((self.type, self.symbol))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(NUMBER, {self.symbol})"
        return f"Token({self.type.name}, {self.symbol!r})"


def number_token(text, value=None):
    """构造数值Token；text 无法解析时 value 为 None，由求值器报错"""
    if value is None:
        try:
            value = float(text)
        except ValueError:
            value = None
    return Token(TokenType.NUMBER, 'number', symbol=text, value=value)


def variable_token(name):
    return Token(TokenType.VARIABLE, 'variable', symbol=name)


# Token定义字典，按源文本符号索引
TOKEN_DEFINITIONS = {
    # 二元操作符，^ 与其他操作符一样按左结合处理
    '+': Token(TokenType.OPERATOR, 'add', '+', arity=2, precedence=1),
    '-': Token(TokenType.OPERATOR, 'sub', '-', arity=2, precedence=1),
    '*': Token(TokenType.OPERATOR, 'mul', '*', arity=2, precedence=2),
    '/': Token(TokenType.OPERATOR, 'div', '/', arity=2, precedence=2),
    '^': Token(TokenType.OPERATOR, 'pow', '^', arity=2, precedence=3),

    # 一元函数（弧度制，log 为自然对数）
    'sin': Token(TokenType.FUNCTION, 'sin', arity=1),
    'cos': Token(TokenType.FUNCTION, 'cos', arity=1),
    'tan': Token(TokenType.FUNCTION, 'tan', arity=1),
    'sqrt': Token(TokenType.FUNCTION, 'sqrt', arity=1),
    'log': Token(TokenType.FUNCTION, 'log', arity=1),
    'exp': Token(TokenType.FUNCTION, 'exp', arity=1),

    # 括号
    '(': Token(TokenType.LPAREN, 'lparen', '('),
    ')': Token(TokenType.RPAREN, 'rparen', ')'),
}

FUNCTION_NAMES = frozenset(s for s, t in TOKEN_DEFINITIONS.items() if t.type == TokenType.FUNCTION)
