"""core/operators.py"""
import numpy as np
import logging
from types import MappingProxyType

from config.config import EVALUATOR_CONFIG
from core.errors import DivisionByZero

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合（IEEE-754 双精度）"""

    @staticmethod
    def _as_float(operand):
        """统一转换成 numpy.float64"""
        return np.float64(operand)

    @staticmethod
    def add(lhs, rhs):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return float(np.add(Operators._as_float(lhs), Operators._as_float(rhs)))

    @staticmethod
    def sub(lhs, rhs):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return float(np.subtract(Operators._as_float(lhs), Operators._as_float(rhs)))

    @staticmethod
    def mul(lhs, rhs):
        """乘法操作符（溢出时得到 inf）"""
        with np.errstate(all='ignore'):
            return float(np.multiply(Operators._as_float(lhs), Operators._as_float(rhs)))

    @staticmethod
    def div(lhs, rhs):
        """除法操作符，除数为0（包括 -0.0）时报错"""
        rhs = Operators._as_float(rhs)
        if rhs == 0:
            raise DivisionByZero()
        with np.errstate(all='ignore'):
            return float(np.divide(Operators._as_float(lhs), rhs))

    @staticmethod
    def mod(lhs, rhs):
        """
        取余操作符，沿用 Python 本身的语义（结果符号与除数一致）。
        除数为0时不报错，结果为 nan。
        """
        with np.errstate(all='ignore'):
            return float(np.mod(Operators._as_float(lhs), Operators._as_float(rhs)))

    @staticmethod
    def pow(lhs, rhs):
        """乘方：lhs ** rhs（负数的非整数次方为 nan，0 的负次方为 inf）"""
        with np.errstate(all='ignore'):
            return float(np.power(Operators._as_float(lhs), Operators._as_float(rhs)))


# 符号 -> 函数（只读）
_SYMBOL_TO_METHOD = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '%': Operators.mod,
    '^': Operators.pow,
}

OPERATOR_TABLE = MappingProxyType({
    symbol: _SYMBOL_TO_METHOD[symbol] for symbol in EVALUATOR_CONFIG["operator_symbols"]
})


def apply_operator(symbol, lhs, rhs):
    """按符号查表并计算"""
    result = OPERATOR_TABLE[symbol](lhs, rhs)
    logger.debug(f"{lhs} {symbol} {rhs} -> {result}")
    return result
