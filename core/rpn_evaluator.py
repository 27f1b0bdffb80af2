"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from fractions import Fraction

from core.errors import UnrecognizedExpression, InvalidNumberError
from core.operators import Operators, BINARY_OPERATORS, FUNCTIONS
from core.token_system import TokenType, UNARY_MINUS, OPERAND_PATTERN

logger = logging.getLogger(__name__)


def parse_operand(text):
    """精确解析十进制字面量，如 '1.33' -> 133/100"""
    if not OPERAND_PATTERN.fullmatch(text):
        raise InvalidNumberError(f"invalid numeric literal {text!r}")
    return Fraction(text)


class RPNEvaluator:
    """评估后缀Token序列的值"""

    @staticmethod
    def evaluate(postfix, allow_partial=True):
        """
        Args:
            postfix: 后缀顺序的Token序列
            allow_partial: 栈中剩余多个值时是否返回栈顶（否则报错）
        Returns:
            Fraction
        Raises:
            UnrecognizedExpression: 非法Token、栈下溢、未知函数、空栈
            ZeroDivision: '/'、'÷' 或 '%' 的右操作数为零
        """
        stack = []

        for token in postfix:
            if token.type in (TokenType.UNKNOWN, TokenType.PARENTHESIS):
                raise UnrecognizedExpression(f"unexpected token {token.text!r} in postfix")

            if token.type == TokenType.OPERAND:
                stack.append(parse_operand(token.text))

            elif token.type == TokenType.OPERATOR:
                if token.text == UNARY_MINUS:
                    operand = RPNEvaluator._pop(stack, token)
                    stack.append(Operators.neg(operand))
                    continue

                op_method = BINARY_OPERATORS.get(token.text)
                if op_method is None:
                    raise UnrecognizedExpression(f"unknown operator {token.text!r}")
                right = RPNEvaluator._pop(stack, token)
                left = RPNEvaluator._pop(stack, token)
                stack.append(op_method(left, right))

            elif token.type == TokenType.FUNCTION:
                op_method = FUNCTIONS.get(token.text.lower())
                if op_method is None:
                    raise UnrecognizedExpression(f"unknown function {token.text!r}")
                operand = RPNEvaluator._pop(stack, token)
                stack.append(op_method(operand))

        if not stack:
            raise UnrecognizedExpression("empty stack after evaluation")

        if len(stack) > 1:
            if not allow_partial:
                raise UnrecognizedExpression(
                    f"stack has {len(stack)} elements after evaluation, expected 1"
                )
            logger.warning(f"Partial expression with {len(stack)} stack elements, using top of stack")

        return stack[-1]

    @staticmethod
    def _pop(stack, token):
        if not stack:
            raise UnrecognizedExpression(f"insufficient operands for {token.text!r}")
        return stack.pop()
