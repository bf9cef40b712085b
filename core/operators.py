"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZero

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，方法名与 TOKEN_DEFINITIONS 中的 name 对应"""

    @staticmethod
    def _scalar(value):
        return float(value)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数恰为0时报错"""
        if operand2 == 0:
            raise DivisionByZero("Cannot divide by zero.")
        return operand1 / operand2

    @staticmethod
    def pow(operand1, operand2):
        """浮点幂：负底数配非整数指数得到NaN，溢出得到inf"""
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            return Operators._scalar(np.power(np.float64(operand1), np.float64(operand2)))

    # 一元函数====================
    # 定义域外的输入按平台语义传播 NaN / inf，不做显式检查

    @staticmethod
    def sin(operand):
        with np.errstate(invalid='ignore'):
            return Operators._scalar(np.sin(np.float64(operand)))

    @staticmethod
    def cos(operand):
        with np.errstate(invalid='ignore'):
            return Operators._scalar(np.cos(np.float64(operand)))

    @staticmethod
    def tan(operand):
        with np.errstate(invalid='ignore'):
            return Operators._scalar(np.tan(np.float64(operand)))

    @staticmethod
    def sqrt(operand):
        with np.errstate(invalid='ignore'):
            return Operators._scalar(np.sqrt(np.float64(operand)))

    @staticmethod
    def log(operand):
        """自然对数"""
        with np.errstate(invalid='ignore', divide='ignore'):
            return Operators._scalar(np.log(np.float64(operand)))

    @staticmethod
    def exp(operand):
        with np.errstate(over='ignore'):
            return Operators._scalar(np.exp(np.float64(operand)))
