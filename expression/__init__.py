"""表达式模块 - RPN句柄与带缓存的批量求值"""
from .rpn import RPN, evaluate
from .evaluator import ExpressionEvaluator

__all__ = ['RPN', 'evaluate', 'ExpressionEvaluator']
