"""工具模块"""
from .formatting import format_number, format_result, format_error

__all__ = ['format_number', 'format_result', 'format_error']
