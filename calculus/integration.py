"""定积分 - 复合梯形公式"""
import logging

import numpy as np
from scipy.integrate import trapezoid

from config.config import INTEGRATION_CONFIG
from core.engine import compile_function
from core.errors import InvalidFormat

logger = logging.getLogger(__name__)


def integrate(expression, variable, lower, upper, slices=None, symbols=None):
    """
    复合梯形公式，固定子区间数，无自适应细分
    h = (b-a)/n, sum = 0.5*(f(a)+f(b)) + Σ_{i=1}^{n-1} f(a+i*h), 结果 = sum*h
    Args:
        expression: 被积表达式
        variable: 积分变量
        lower, upper: 积分上下限（允许 lower > upper）
        slices: 子区间数，默认取 INTEGRATION_CONFIG
    Returns:
        float 积分近似值
    """
    n = slices if slices is not None else INTEGRATION_CONFIG["slices"]
    if int(n) != n or n < 1:
        raise InvalidFormat(f"Number of slices must be a positive integer: {n}", expression)
    n = int(n)

    f = compile_function(expression, variable, symbols)
    lower, upper = float(lower), float(upper)
    h = (upper - lower) / n

    xs = lower + np.arange(n + 1) * h
    xs[-1] = upper  # 端点直接取 b，避免累积舍入
    values = np.array([f(float(x)) for x in xs])

    result = float(trapezoid(values, dx=h))
    logger.debug(f"Integral of {expression} over [{lower}, {upper}] with {n} slices = {result}")
    return result
