"""调度场算法 - 中缀Token序列转换为后缀(RPN)序列"""
import logging

from core.errors import UnbalancedParentheses
from core.token_system import TokenType

logger = logging.getLogger(__name__)


def to_postfix(tokens):
    """
    经典的算符优先分析，使用显式操作符栈

    相同优先级一律先弹出（左结合），包括 ^：2^3^2 按 (2^3)^2 计算。
    Args:
        tokens: tokenize 输出的Token列表
    Returns:
        后缀顺序的Token列表
    """
    operators = []
    output = []

    for token in tokens:
        if token.is_operand:
            output.append(token)

        elif token.type == TokenType.FUNCTION:
            operators.append(token)

        elif token.type == TokenType.LPAREN:
            operators.append(token)

        elif token.type == TokenType.RPAREN:
            while True:
                if not operators:
                    raise UnbalancedParentheses("Missing '(' for ')'")
                top = operators.pop()
                if top.type == TokenType.LPAREN:
                    break
                output.append(top)
            # 函数绑定到其括号参数
            if operators and operators[-1].type == TokenType.FUNCTION:
                output.append(operators.pop())

        elif token.type == TokenType.OPERATOR:
            while operators and operators[-1].precedence >= token.precedence:
                output.append(operators.pop())
            operators.append(token)

    while operators:
        top = operators.pop()
        if top.type == TokenType.LPAREN:
            raise UnbalancedParentheses("Missing ')'")
        output.append(top)

    logger.debug(f"RPN expression: {' '.join(t.symbol for t in output)}")
    return output
