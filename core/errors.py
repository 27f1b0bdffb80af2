"""core/errors.py - 表达式解析与求值的异常类型"""


class RPNError(Exception):
    """所有表达式错误的基类"""


class UnrecognizedExpression(RPNError, ValueError):
    """无法识别的表达式：未知Token、括号不匹配、栈下溢等"""


class ZeroDivision(RPNError, ZeroDivisionError):
    """除数恰好为零"""


class InvalidNumberError(UnrecognizedExpression):
    """操作数字面量无法解析为有理数"""


class NonFiniteResultError(UnrecognizedExpression):
    """浮点回退运算得到 NaN 或 inf"""
