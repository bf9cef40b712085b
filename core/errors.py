"""core/errors.py - 引擎异常层次"""


class EngineError(Exception):
    """所有引擎错误的基类，只在单次调用内有效，不保留任何状态"""

    def __init__(self, message, expression=None):
        super().__init__(message)
        self.message = message
        self.expression = expression

    def __str__(self):
        if self.expression is not None:
            return f"{self.message} (in '{self.expression}')"
        return self.message


class InvalidCharacter(EngineError, ValueError):
    def __init__(self, char, expression=None):
        super().__init__(f"Invalid character in expression: {char}", expression)
        self.char = char


class UnknownIdentifier(EngineError, NameError):
    def __init__(self, name, expression=None):
        super().__init__(f"Unknown function or variable: {name}", expression)
        self.name = name


class UnbalancedParentheses(EngineError, ValueError):
    pass


class DivisionByZero(EngineError, ZeroDivisionError):
    pass


class MalformedExpression(EngineError, ValueError):
    pass


class InvalidAssignment(EngineError, ValueError):
    pass


class LimitDoesNotExist(EngineError, ArithmeticError):
    def __init__(self, left, right, expression=None):
        super().__init__(
            f"The limit does not exist (left={left}, right={right})", expression
        )
        self.left = left
        self.right = right


class InvalidFormat(EngineError, ValueError):
    """命令文本或参数格式错误（shell 层及微积分参数检查）"""
    pass
