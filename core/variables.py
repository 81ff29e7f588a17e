"""变量表 - 单字母变量到数值的映射，归属于一个求值器实例"""
import logging

from core.token_system import Tokenizer
from core.errors import UnassignedVariable, InvalidVariableTarget

logger = logging.getLogger(__name__)


class VariableTable:
    """A-Z 单字母变量表，跨多次 evaluate 保留，只由 '=' 修改"""

    def __init__(self):
        self._values = {}

    def assign(self, name, value):
        """写入变量；名字必须是单个大写字母。inf / nan 等非有限值照常保存"""
        if not Tokenizer.is_variable(name):
            raise InvalidVariableTarget(name)
        self._values[name] = float(value)
        logger.debug(f"{name} <- {value}")

    def lookup(self, name):
        try:
            return self._values[name]
        except KeyError:
            raise UnassignedVariable(name) from None

    def clear(self):
        """清空所有变量（求值器本身从不调用）"""
        self._values.clear()

    def names(self):
        return sorted(self._values)

    def snapshot(self):
        """返回当前变量的副本"""
        return dict(self._values)

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"VariableTable({self.snapshot()})"
