"""core/errors.py - 求值错误分类，每种失败对应一个异常类型"""


class EvaluationError(Exception):
    """单行求值失败的基类，只影响当前行"""
    message = "Evaluation error"

    def __init__(self, message=None):
        super().__init__(message or self.message)

    @property
    def description(self):
        return self.args[0]


class StackUnderflow(EvaluationError):
    """操作符或赋值需要至少两个栈元素"""
    message = "Stack underflow"

    def __init__(self, token=None, depth=0):
        super().__init__()
        self.token = token
        self.depth = depth


class DivisionByZero(EvaluationError, ZeroDivisionError):
    message = "Division by zero"


class UnassignedVariable(EvaluationError):
    """变量尚未赋值"""
    message = "Unassigned variable"

    def __init__(self, name):
        super().__init__(f"{self.message}: {name}")
        self.name = name


class InvalidOperand(EvaluationError):
    """栈元素既不是数字也不是变量引用"""
    message = "Invalid operation or operand"

    def __init__(self, operand=None):
        super().__init__()
        self.operand = operand


class InvalidVariableTarget(EvaluationError):
    """'=' 的目标（第二个出栈的元素）不是未解析的单字母变量"""
    message = "Invalid variable"

    def __init__(self, target=None):
        super().__init__()
        self.target = target


class UnknownToken(EvaluationError):
    message = "Unknown token"

    def __init__(self, token):
        super().__init__(f"{self.message}: {token}")
        self.token = token
