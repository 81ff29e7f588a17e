"""核心模块 - Token系统、RPN评估器和操作符"""
from .token_system import TokenType, TOKEN_DEFINITIONS, Tokenizer
from .operators import Operators, OPERATOR_TABLE, apply_operator
from .variables import VariableTable
from .rpn_evaluator import RPNEvaluator, NumberCell, VariableRef
from .errors import (
    EvaluationError, StackUnderflow, DivisionByZero, UnassignedVariable,
    InvalidOperand, InvalidVariableTarget, UnknownToken
)

__all__ = [
    'TokenType', 'TOKEN_DEFINITIONS', 'Tokenizer',
    'Operators', 'OPERATOR_TABLE', 'apply_operator',
    'VariableTable', 'RPNEvaluator', 'NumberCell', 'VariableRef',
    'EvaluationError', 'StackUnderflow', 'DivisionByZero', 'UnassignedVariable',
    'InvalidOperand', 'InvalidVariableTarget', 'UnknownToken'
]
