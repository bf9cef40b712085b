"""核心模块 - Token系统、词法分析、调度场解析、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, FUNCTION_NAMES,
    number_token, variable_token
)
from .errors import (
    EngineError, InvalidCharacter, UnknownIdentifier, UnbalancedParentheses,
    DivisionByZero, MalformedExpression, InvalidAssignment, LimitDoesNotExist,
    InvalidFormat
)
from .symbol_table import SymbolTable
from .tokenizer import tokenize
from .parser import to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate_postfix
from .operators import Operators
from .engine import evaluate, evaluate_at, compile_function, CompiledExpression

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'FUNCTION_NAMES',
    'number_token', 'variable_token',
    'EngineError', 'InvalidCharacter', 'UnknownIdentifier', 'UnbalancedParentheses',
    'DivisionByZero', 'MalformedExpression', 'InvalidAssignment', 'LimitDoesNotExist',
    'InvalidFormat',
    'SymbolTable', 'tokenize', 'to_postfix', 'RPNEvaluator', 'evaluate_postfix',
    'Operators', 'evaluate', 'evaluate_at', 'compile_function', 'CompiledExpression'
]
