"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from typing import NamedTuple, Optional, Union

from core.token_system import TokenType, Tokenizer
from core.operators import apply_operator
from core.variables import VariableTable
from core.errors import (
    EvaluationError, StackUnderflow, InvalidOperand,
    InvalidVariableTarget, UnknownToken
)

logger = logging.getLogger(__name__)


class NumberCell(NamedTuple):
    """已解析的数值"""
    value: float


class VariableRef(NamedTuple):
    """未解析的变量名（延迟绑定）"""
    name: str


StackCell = Union[NumberCell, VariableRef]


class RPNEvaluator:
    """
    逐行评估后缀表达式。
    栈在每次 evaluate 开始时清空；变量表属于实例，跨行保留。
    """

    def __init__(self, variables=None):
        self._stack = []
        self.variables = variables if variables is not None else VariableTable()

    @property
    def stack(self):
        """当前栈内容的副本（栈底在前）"""
        return list(self._stack)

    def reset_stack(self):
        """清空栈，保证下一次求值从干净状态开始"""
        self._stack.clear()

    def resolve(self, cell: StackCell) -> float:
        """把栈元素解析成数值；变量从变量表中查找"""
        if isinstance(cell, NumberCell):
            return cell.value
        if isinstance(cell, VariableRef):
            return self.variables.lookup(cell.name)
        raise InvalidOperand(cell)

    def handle_token(self, token):
        """处理单个 token：入栈、计算或赋值"""
        token_type = Tokenizer.classify(token)

        if token_type == TokenType.EMPTY:
            return

        if token_type == TokenType.NUMBER:
            self._stack.append(NumberCell(float(token)))

        elif token_type == TokenType.OPERATOR:
            self._require_operands(token)
            # 先弹出的是右操作数
            rhs = self.resolve(self._stack.pop())
            lhs = self.resolve(self._stack.pop())
            self._stack.append(NumberCell(apply_operator(token, lhs, rhs)))

        elif token_type == TokenType.ASSIGN:
            self._require_operands(token)
            raw = self._stack.pop()
            target = self._stack.pop()
            # 目标只按形状校验，不解析；先校验目标再解析值
            if not isinstance(target, VariableRef) or not Tokenizer.is_variable(target.name):
                raise InvalidVariableTarget(target)
            self.variables.assign(target.name, self.resolve(raw))

        elif token_type == TokenType.VARIABLE:
            self._stack.append(VariableRef(token))

        else:
            raise UnknownToken(token)

    def _require_operands(self, token, count=2):
        if len(self._stack) < count:
            raise StackUnderflow(token, len(self._stack))

    def evaluate(self, line) -> Optional[float]:
        """
        评估一行表达式
        Args:
            line: 输入行
        Returns:
            栈顶的数值；栈为空（例如纯赋值）时返回 None
        """
        self.reset_stack()
        tokens = Tokenizer.tokenize(line)
        logger.debug(f"Tokens: {tokens}")

        try:
            for token in tokens:
                self.handle_token(token)
            if not self._stack:
                return None
            return float(self.resolve(self._stack[-1]))
        except EvaluationError as e:
            logger.debug(f"Failed to evaluate '{line}': {e}")
            raise
