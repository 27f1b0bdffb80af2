"""核心模块 - Token系统、词法扫描、调度场转换、RPN求值器和操作符"""
from .errors import (
    RPNError, UnrecognizedExpression, ZeroDivision,
    InvalidNumberError, NonFiniteResultError
)
from .token_system import (
    TokenType, Token, Associativity, OPERATOR_DEFINITIONS,
    FUNCTION_NAMES, UNARY_MINUS, classify_token
)
from .tokenizer import Tokenizer, tokenize
from .shunting_yard import ShuntingYard, to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'RPNError', 'UnrecognizedExpression', 'ZeroDivision',
    'InvalidNumberError', 'NonFiniteResultError',
    'TokenType', 'Token', 'Associativity', 'OPERATOR_DEFINITIONS',
    'FUNCTION_NAMES', 'UNARY_MINUS', 'classify_token',
    'Tokenizer', 'tokenize', 'ShuntingYard', 'to_postfix',
    'RPNEvaluator', 'Operators'
]
