"""utils/formatting.py"""
from fractions import Fraction

from core.operators import to_float


def format_rational(value, mode='fraction', precision=15):
    """
    有理数的文本表示
        fraction: '87/4'，整数直接输出 '9'
        decimal:  按有效位数输出浮点 '21.75'
        both:     '87/4 (21.75)'
    """
    value = Fraction(value)
    if mode == 'fraction':
        return str(value)
    if mode == 'decimal':
        return f"{to_float(value):.{precision}g}"
    if mode == 'both':
        if value.denominator == 1:
            return str(value)
        return f"{value} ({to_float(value):.{precision}g})"
    raise ValueError(f"unknown output format: {mode}")
