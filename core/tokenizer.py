"""词法分析 - 将原始字符串扫描为Token序列"""
import logging

from config.config import ENGINE_CONFIG
from core.errors import InvalidCharacter, UnknownIdentifier
from core.token_system import TOKEN_DEFINITIONS, TokenType, number_token, variable_token

logger = logging.getLogger(__name__)


def _is_number_char(ch):
    return ch in '0123456789.'


def tokenize(text, symbols=None, variables=()):
    """
    单遍扫描表达式
    Args:
        text: 原始表达式字符串
        symbols: 变量表（Mapping），标识符在其中查找后替换为数值Token
        variables: 自由变量名集合，对应标识符保留为VARIABLE Token
    Returns:
        Token列表（源顺序）
    """
    constants = ENGINE_CONFIG["constants"]
    symbols = symbols if symbols is not None else {}
    tokens = []
    index = 0
    length = len(text)

    while index < length:
        current = text[index]

        if current.isspace():
            index += 1
            continue

        if _is_number_char(current):
            start = index
            while index < length and _is_number_char(text[index]):
                index += 1
            # 多个小数点不在此处校验，交给求值器
            tokens.append(number_token(text[start:index]))

        elif current in TOKEN_DEFINITIONS:
            tokens.append(TOKEN_DEFINITIONS[current])
            index += 1

        elif current.isalpha():
            start = index
            while index < length and text[index].isalpha():
                index += 1
            word = text[start:index]
            tokens.append(_resolve_identifier(word, symbols, variables, constants, text))

        else:
            raise InvalidCharacter(current, text)

    logger.debug(f"Tokenized '{text}' into {len(tokens)} tokens")
    return tokens


def _resolve_identifier(word, symbols, variables, constants, text):
    """函数表 -> 自由变量 -> 常数 -> 变量表"""
    token = TOKEN_DEFINITIONS.get(word)
    if token is not None and token.type == TokenType.FUNCTION:
        return token
    if word in variables:
        return variable_token(word)
    if word in constants:
        return number_token(word, value=constants[word])
    if word in symbols:
        return number_token(word, value=float(symbols[word]))
    raise UnknownIdentifier(word, text)
