"""微积分模块 - 建立在表达式引擎之上的求导、积分、极限"""
from .derivative import derivative, differentiate, numeric_derivative
from .integration import integrate
from .limits import limit, is_continuous_at

__all__ = [
    'derivative', 'differentiate', 'numeric_derivative',
    'integrate', 'limit', 'is_continuous_at'
]
