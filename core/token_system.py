"""core/token_system.py"""
import re
from collections import namedtuple
from enum import Enum


class TokenType(Enum):
    OPERAND = "operand"          # 数字字面量
    OPERATOR = "operator"        # 二元操作符 与 一元负号
    PARENTHESIS = "parenthesis"  # ( )
    FUNCTION = "function"        # sin / sqrt ...
    UNKNOWN = "unknown"          # 无法识别，由转换阶段报错


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token:
    __slots__ = ('type', 'text')

    def __init__(self, token_type, text):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'text', text)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"

    @property
    def is_open_paren(self):
        return self.type == TokenType.PARENTHESIS and self.text == '('

    @property
    def is_close_paren(self):
        return self.type == TokenType.PARENTHESIS and self.text == ')'


OperatorInfo = namedtuple('OperatorInfo', ['precedence', 'associativity', 'arity'])

# 合成的一元负号
UNARY_MINUS = '@'

# 操作符优先级表：数值越大结合越紧
OPERATOR_DEFINITIONS = {
    # 幂
    '**': OperatorInfo(4, Associativity.LEFT, 2),
    '^': OperatorInfo(4, Associativity.LEFT, 2),

    # 一元负号（前缀）
    UNARY_MINUS: OperatorInfo(3, Associativity.RIGHT, 1),

    # 乘除模
    '*': OperatorInfo(2, Associativity.LEFT, 2),
    '×': OperatorInfo(2, Associativity.LEFT, 2),
    '/': OperatorInfo(2, Associativity.LEFT, 2),
    '÷': OperatorInfo(2, Associativity.LEFT, 2),
    '%': OperatorInfo(2, Associativity.LEFT, 2),

    # 加减
    '+': OperatorInfo(1, Associativity.LEFT, 2),
    '-': OperatorInfo(1, Associativity.LEFT, 2),
}

# 函数视为最高优先级的一元右结合操作符
FUNCTION_PRECEDENCE = max(info.precedence for info in OPERATOR_DEFINITIONS.values()) + 1

# 顺序即匹配顺序
FUNCTION_NAMES = ('abs', 'sin', 'cos', 'tan', 'ln', 'arcsin', 'arccos', 'arctan', 'sqrt')

PARENTHESES = ('(', ')')

OPERAND_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]+)?')
FUNCTION_PATTERN = re.compile('|'.join(FUNCTION_NAMES), re.IGNORECASE)


def classify_token(text):
    """按固定顺序判断Token类型：操作数 → 函数名 → 括号 → 操作符 → 未知"""
    if OPERAND_PATTERN.fullmatch(text):
        return TokenType.OPERAND
    if FUNCTION_PATTERN.fullmatch(text):
        return TokenType.FUNCTION
    if text in PARENTHESES:
        return TokenType.PARENTHESIS
    if text in OPERATOR_DEFINITIONS:
        return TokenType.OPERATOR
    return TokenType.UNKNOWN


def make_token(text):
    return Token(classify_token(text), text)


def precedence_of(token):
    """操作符/函数的优先级；括号等返回 None"""
    if token.type == TokenType.FUNCTION:
        return FUNCTION_PRECEDENCE
    if token.type == TokenType.OPERATOR:
        return OPERATOR_DEFINITIONS[token.text].precedence
    return None
