"""符号表 - 变量名到数值的映射，由调用方持有并显式传入"""
from collections.abc import MutableMapping


class SymbolTable(MutableMapping):
    """
    会话级变量表

    引擎本身不持有任何全局状态；shell 为每个会话创建一个 SymbolTable，
    并在每次 evaluate 调用时传入。名称区分大小写，值统一存为 float。
    """

    def __init__(self, initial=None):
        self._values = {name: float(value) for name, value in (initial or {}).items()}

    def __getitem__(self, name):
        return self._values[name]

    def __setitem__(self, name, value):
        self._values[name] = float(value)

    def __delitem__(self, name):
        del self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"SymbolTable({self._values!r})"
