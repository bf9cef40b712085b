"""交互式 shell - 命令解析、会话与历史"""
from .commands import Command, parse_command
from .session import Session, run_repl, format_value

__all__ = ['Command', 'parse_command', 'Session', 'run_repl', 'format_value']
