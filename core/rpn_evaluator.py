"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import MalformedExpression, UnknownIdentifier
from core.operators import Operators
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, bindings=None):
        """
        评估后缀表达式，每次调用使用独立的操作数栈
        Args:
            token_sequence: 后缀顺序的Token序列
            bindings: VARIABLE Token 的取值（Mapping）
        Returns:
            float 结果；NaN 作为普通值返回
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                if token.value is None:
                    raise MalformedExpression(f"Invalid number literal: {token.symbol}")
                stack.append(token.value)

            elif token.type == TokenType.VARIABLE:
                if bindings is None or token.symbol not in bindings:
                    raise UnknownIdentifier(token.symbol)
                stack.append(float(bindings[token.symbol]))

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.symbol}")
                    raise MalformedExpression(f"Insufficient operands for '{token.symbol}'")
                operand2 = stack.pop()
                operand1 = stack.pop()
                op_method = getattr(Operators, token.name)
                stack.append(op_method(operand1, operand2))

            elif token.type == TokenType.FUNCTION:
                if not stack:
                    logger.debug(f"Insufficient operands for {token.symbol}")
                    raise MalformedExpression(f"Missing argument for '{token.symbol}'")
                op_method = getattr(Operators, token.name)
                stack.append(op_method(stack.pop()))

            else:
                raise MalformedExpression(f"Unexpected token in RPN expression: {token.symbol}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpression(
                f"Stack has {len(stack)} elements after evaluation, expected 1"
            )
        return stack[0]


def evaluate_postfix(token_sequence, bindings=None):
    return RPNEvaluator.evaluate(token_sequence, bindings)
