"""utils/formatting.py"""
import math

from config.config import REPL_CONFIG


def format_number(value):
    """整数值不带小数部分；inf/nan 用 Infinity / NaN 表示"""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # 1e21 及以上改用指数形式，例如 1e+21
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_result(value):
    """控制台结果，例如 [7]"""
    left, right = REPL_CONFIG["result_brackets"]
    return f"{left}{format_number(value)}{right}"


def format_error(exc):
    return f"{REPL_CONFIG['error_prefix']} {exc}"
