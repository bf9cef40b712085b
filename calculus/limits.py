"""极限与连续性 - 有限差分逼近"""
import logging

from config.config import LIMIT_CONFIG
from core.engine import compile_function
from core.errors import DivisionByZero, InvalidFormat, LimitDoesNotExist

logger = logging.getLogger(__name__)

SIDES = ('left', 'right', 'both')


def _one_sided(f, point, direction, step, extrapolate):
    """单侧估计；extrapolate 时用 2*f(p±h) - f(p±2h) 消去一阶误差"""
    near = f(point + direction * step)
    if not extrapolate:
        return near
    try:
        far = f(point + 2 * direction * step)
    except DivisionByZero:
        logger.debug(f"Far probe undefined near {point}, using f(p±h)")
        return near
    return 2 * near - far


def _limit(f, point, side, step, tolerance, extrapolate, expression):
    if side == 'left':
        return _one_sided(f, point, -1, step, extrapolate)
    if side == 'right':
        return _one_sided(f, point, 1, step, extrapolate)

    left = _one_sided(f, point, -1, step, extrapolate)
    right = _one_sided(f, point, 1, step, extrapolate)
    if abs(left - right) < tolerance:
        return left
    logger.warning(f"Left and right limits differ at {point}: {left} vs {right}")
    raise LimitDoesNotExist(left, right, expression)


def limit(expression, variable, point, side='both', symbols=None, step=None, tolerance=None):
    """
    数值极限
    Args:
        expression: 表达式
        variable: 变量名
        point: 逼近点
        side: 'left' / 'right' / 'both'
    Returns:
        float；双侧极限不一致时抛出 LimitDoesNotExist
    """
    if side not in SIDES:
        raise InvalidFormat(f"Limit side must be one of {SIDES}: {side}", expression)
    step = step if step is not None else LIMIT_CONFIG["step"]
    tolerance = tolerance if tolerance is not None else LIMIT_CONFIG["tolerance"]

    f = compile_function(expression, variable, symbols)
    return _limit(f, float(point), side, step, tolerance, LIMIT_CONFIG["extrapolate"], expression)


def is_continuous_at(expression, variable, point, symbols=None):
    """
    连续性判定：在该点有定义、双侧极限存在、且两者之差小于阈值

    点上无定义或极限不存在时返回 False；词法/语法错误照常抛出。
    """
    step = LIMIT_CONFIG["step"]
    tolerance = LIMIT_CONFIG["tolerance"]
    point = float(point)

    f = compile_function(expression, variable, symbols)
    try:
        value = f(point)
    except DivisionByZero:
        logger.debug(f"{expression} is undefined at {point}")
        return False

    try:
        limit_value = _limit(f, point, 'both', step, tolerance, LIMIT_CONFIG["extrapolate"], expression)
    except (LimitDoesNotExist, DivisionByZero):
        return False

    return bool(abs(value - limit_value) < tolerance)
