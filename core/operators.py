"""core/operators.py"""
import logging
import math
from fractions import Fraction

import numpy as np

from core.errors import ZeroDivision, NonFiniteResultError

logger = logging.getLogger(__name__)


def to_float(value):
    """有理数 -> 双精度；超出范围时饱和为 ±inf"""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def from_float(value, op_name):
    """双精度 -> 精确等值的有理数；NaN/inf 直接报错"""
    value = float(value)
    if not math.isfinite(value):
        raise NonFiniteResultError(f"{op_name} produced a non-finite result ({value})")
    return Fraction(value)


def _apply_float(kernel, op_name, *operands):
    """在双精度下执行一次运算，再转换回有理数"""
    args = [to_float(x) for x in operands]
    with np.errstate(all='ignore'):
        result = kernel(*args)
    logger.debug(f"{op_name}{tuple(args)} = {result!r} (float fallback)")
    return from_float(result, op_name)


class Operators:
    """所有操作符与函数的静态方法集合"""

    # 精确有理数运算=================================

    @staticmethod
    def add(left, right):
        return left + right

    @staticmethod
    def sub(left, right):
        return left - right

    @staticmethod
    def mul(left, right):
        return left * right

    @staticmethod
    def div(left, right):
        if right == 0:
            raise ZeroDivision(f"division by zero: {left} / 0")
        return left / right

    @staticmethod
    def neg(operand):
        return -operand

    # 浮点回退（有理数对这些运算不封闭）=================

    @staticmethod
    def mod(left, right):
        """C fmod 语义：结果与被除数同号"""
        if right == 0:
            raise ZeroDivision(f"modulo by zero: {left} % 0")
        return _apply_float(np.fmod, 'mod', left, right)

    @staticmethod
    def pow(left, right):
        return _apply_float(np.power, 'pow', left, right)

    # 函数========================================

    @staticmethod
    def abs(operand):
        return _apply_float(np.abs, 'abs', operand)

    @staticmethod
    def sin(operand):
        return _apply_float(np.sin, 'sin', operand)

    @staticmethod
    def cos(operand):
        return _apply_float(np.cos, 'cos', operand)

    @staticmethod
    def tan(operand):
        return _apply_float(np.tan, 'tan', operand)

    @staticmethod
    def ln(operand):
        """自然对数"""
        return _apply_float(np.log, 'ln', operand)

    @staticmethod
    def arcsin(operand):
        return _apply_float(np.arcsin, 'arcsin', operand)

    @staticmethod
    def arccos(operand):
        return _apply_float(np.arccos, 'arccos', operand)

    @staticmethod
    def arctan(operand):
        return _apply_float(np.arctan, 'arctan', operand)

    @staticmethod
    def sqrt(operand):
        return _apply_float(np.sqrt, 'sqrt', operand)


# 操作符文本 -> 二元运算
BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '×': Operators.mul,
    '/': Operators.div,
    '÷': Operators.div,
    '%': Operators.mod,
    '**': Operators.pow,
    '^': Operators.pow,
}

# 函数名（小写） -> 一元运算
FUNCTIONS = {
    'abs': Operators.abs,
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
    'ln': Operators.ln,
    'arcsin': Operators.arcsin,
    'arccos': Operators.arccos,
    'arctan': Operators.arctan,
    'sqrt': Operators.sqrt,
}
