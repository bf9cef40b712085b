"""交互会话 - 持有变量表和历史记录，逐行执行命令"""
import logging
from collections import deque

from calculus import derivative, integrate, is_continuous_at, limit
from config.config import INTEGRATION_CONFIG, SHELL_CONFIG
from core.engine import evaluate
from core.errors import EngineError
from core.symbol_table import SymbolTable
from shell.commands import parse_command

logger = logging.getLogger(__name__)


def format_value(value):
    """15 位有效数字，整数不带小数点"""
    return f"{value:.15g}"


class Session:
    """一个 REPL 会话；变量表的生命周期与会话相同"""

    def __init__(self, symbols=None, history_size=None, slices=None):
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.history = deque(maxlen=history_size or SHELL_CONFIG["history_size"])
        self.slices = slices if slices is not None else INTEGRATION_CONFIG["slices"]
        self.default_variable = SHELL_CONFIG["default_variable"]

    def execute(self, line):
        """
        执行一行命令
        Returns:
            供显示的结果字符串；失败时抛出 EngineError，历史不记录
        """
        line = line.strip()
        command = parse_command(line, self.default_variable)
        logger.debug(f"Dispatching {command.kind}: {command.expression}")

        if command.kind == 'derivative':
            result = derivative(command.expression, command.variable, command.order, self.symbols)
            message = f"Derivative Result: {result}"
        elif command.kind == 'integrate':
            value = integrate(command.expression, command.variable, command.lower, command.upper,
                              slices=self.slices, symbols=self.symbols)
            result = format_value(value)
            message = f"Result (Integration): {result}"
        elif command.kind == 'limit':
            value = limit(command.expression, command.variable, command.point,
                          side=command.side, symbols=self.symbols)
            result = format_value(value)
            message = f"Limit Result: {result}"
        elif command.kind == 'continuity':
            result = is_continuous_at(command.expression, command.variable, command.point, self.symbols)
            message = f"Is the function continuous at the point? {result}"
        else:
            result = format_value(evaluate(command.expression, self.symbols))
            message = f"Result: {result}"

        self.history.append(f"{line} = {result}")
        return message

    def show_history(self):
        if not self.history:
            return "No history yet."
        return "\n".join(["History of calculations:", *self.history])


def run_repl(session, read=input, write=print):
    """读取-求值-输出循环；'exit' 退出，'history' 显示历史，错误报告后继续"""
    while True:
        try:
            line = read(SHELL_CONFIG["prompt"])
        except EOFError:
            break

        if line.strip().lower() == 'exit':
            write("Exiting... Goodbye!")
            break
        if line.strip().lower() == 'history':
            write(session.show_history())
            continue
        if not line.strip():
            continue

        try:
            write(session.execute(line))
        except EngineError as e:
            logger.debug(f"Command failed: {e}")
            write(f"Error: {e.message}")
