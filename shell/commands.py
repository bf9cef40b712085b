"""命令解析 - 把 shell 输入的文本命令映射为引擎调用参数"""
import re
from typing import NamedTuple, Optional

from core.errors import InvalidFormat

_NUMBER = r"(-?[\d.]+)"

DERIVATIVE_PATTERN = re.compile(r"derivative\((.+),\s*'(\w+)'(?:,\s*(\d+))?\)$")
INTEGRATE_PATTERN = re.compile(rf"integrate\((.+),\s*{_NUMBER},\s*{_NUMBER}\)$")
LIMIT_PATTERN = re.compile(rf"limit\((.+),\s*{_NUMBER}(?:,\s*'(left|right)')?\)$")
CONTINUITY_PATTERN = re.compile(rf"continuity\((.+),\s*{_NUMBER}\)$")

USAGE = {
    'derivative': "derivative(function, 'variable', [order])",
    'integrate': "integrate(function, start, end)",
    'limit': "limit(function, point, 'left' or 'right')",
    'continuity': "continuity(function, point)",
}


class Command(NamedTuple):
    kind: str  # derivative / integrate / limit / continuity / evaluate
    expression: str
    variable: Optional[str] = None
    order: int = 1
    lower: float = 0.0
    upper: float = 0.0
    point: float = 0.0
    side: str = 'both'


def _number(text, kind):
    try:
        return float(text)
    except ValueError:
        raise InvalidFormat(f"Invalid number '{text}'. Use: {USAGE[kind]}")


def _match(pattern, line, kind):
    match = pattern.match(line)
    if not match:
        raise InvalidFormat(f"Invalid {kind} format. Use: {USAGE[kind]}")
    return match


def parse_command(line, default_variable='x'):
    """
    按前缀分派
    Args:
        line: 去掉首尾空白的输入
        default_variable: integrate/limit/continuity 中的自变量
    Returns:
        Command
    """
    if line.startswith('derivative'):
        match = _match(DERIVATIVE_PATTERN, line, 'derivative')
        order = int(match.group(3)) if match.group(3) else 1
        return Command('derivative', match.group(1).strip(), variable=match.group(2), order=order)

    if line.startswith('integrate'):
        match = _match(INTEGRATE_PATTERN, line, 'integrate')
        return Command(
            'integrate', match.group(1).strip(), variable=default_variable,
            lower=_number(match.group(2), 'integrate'),
            upper=_number(match.group(3), 'integrate'),
        )

    if line.startswith('limit'):
        match = _match(LIMIT_PATTERN, line, 'limit')
        return Command(
            'limit', match.group(1).strip(), variable=default_variable,
            point=_number(match.group(2), 'limit'),
            side=match.group(3) or 'both',
        )

    if line.startswith('continuity'):
        match = _match(CONTINUITY_PATTERN, line, 'continuity')
        return Command(
            'continuity', match.group(1).strip(), variable=default_variable,
            point=_number(match.group(2), 'continuity'),
        )

    return Command('evaluate', line)
