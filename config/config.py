"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "number_pattern": r"^-?[0-9]+(?:\.[0-9]+)?$",  # 可选负号 + 整数/小数，不支持指数
    "variable_pattern": r"^[A-Z]$",  # 单个大写字母
    "assign_marker": "=",
    "operator_symbols": ("+", "-", "*", "/", "%", "^"),
}

# 交互循环参数
REPL_CONFIG = {
    "prompt": "> ",
    "farewell": "\nBye!",
    "result_brackets": ("[", "]"),
    "error_prefix": "Error:",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    symbols = EVALUATOR_CONFIG["operator_symbols"]
    assert set(symbols) == {"+", "-", "*", "/", "%", "^"}, "只支持 + - * / % ^ 六个操作符"
    assert len(symbols) == len(set(symbols)), "操作符不能重复"
    assert EVALUATOR_CONFIG["assign_marker"] not in symbols, "赋值符号不能同时是操作符"
    assert len(REPL_CONFIG["result_brackets"]) == 2, "结果括号必须成对"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
