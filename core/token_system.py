"""core/token_system.py"""
import re
from enum import Enum

from config.config import EVALUATOR_CONFIG


class TokenType(Enum):
    EMPTY = "empty"  # 空字符串，不做任何事
    NUMBER = "number"  # 数字字面量
    VARIABLE = "variable"  # 单字母变量
    OPERATOR = "operator"  # 二元操作符
    ASSIGN = "assign"  # '='
    UNKNOWN = "unknown"  # 无法识别


ASSIGN_MARKER = EVALUATOR_CONFIG["assign_marker"]

# Token定义字典：固定符号 -> TokenType
TOKEN_DEFINITIONS = {symbol: TokenType.OPERATOR for symbol in EVALUATOR_CONFIG["operator_symbols"]}
TOKEN_DEFINITIONS[ASSIGN_MARKER] = TokenType.ASSIGN

_NUMBER_RE = re.compile(EVALUATOR_CONFIG["number_pattern"])
_VARIABLE_RE = re.compile(EVALUATOR_CONFIG["variable_pattern"])
_WHITESPACE_RE = re.compile(r"\s+")


class Tokenizer:
    """分词与 Token 分类，全部是纯函数"""

    @staticmethod
    def tokenize(line):
        """去掉首尾空白后按一个或多个空白切分；空行返回空列表"""
        if line is None:
            return []
        line = line.strip()
        if not line:
            return []
        return _WHITESPACE_RE.split(line)

    @staticmethod
    def is_number(token):
        """可选负号 + 数字，可选小数部分（不支持 '+'、指数、单独的 '.'）"""
        return isinstance(token, str) and _NUMBER_RE.fullmatch(token) is not None

    @staticmethod
    def is_variable(token):
        """恰好一个大写 ASCII 字母"""
        return isinstance(token, str) and _VARIABLE_RE.fullmatch(token) is not None

    @staticmethod
    def is_operator(token):
        return TOKEN_DEFINITIONS.get(token) == TokenType.OPERATOR

    @staticmethod
    def is_assign(token):
        return token == ASSIGN_MARKER

    @staticmethod
    def classify(token):
        """返回 TokenType；数字优先，所以 '-5' 是数字而 '-' 是操作符"""
        if not token:
            return TokenType.EMPTY
        if Tokenizer.is_number(token):
            return TokenType.NUMBER
        if Tokenizer.is_operator(token):
            return TokenType.OPERATOR
        if Tokenizer.is_assign(token):
            return TokenType.ASSIGN
        if Tokenizer.is_variable(token):
            return TokenType.VARIABLE
        return TokenType.UNKNOWN
