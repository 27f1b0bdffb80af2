"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> 后缀(RPN)Token序列"""
import logging

from core.errors import UnrecognizedExpression
from core.token_system import (
    TokenType, Associativity, OPERATOR_DEFINITIONS, UNARY_MINUS, precedence_of
)

logger = logging.getLogger(__name__)


class ShuntingYard:
    """把中缀Token序列转换为后缀序列"""

    @staticmethod
    def convert(tokens):
        """
        Args:
            tokens: tokenize() 产生的中缀Token序列
        Returns:
            后缀顺序的Token列表
        Raises:
            UnrecognizedExpression: 未知Token、括号不匹配、空表达式
        """
        if not tokens:
            raise UnrecognizedExpression("empty expression")

        output = []
        stack = []  # 操作符、函数、左括号
        open_parens = 0
        close_parens = 0

        for token in tokens:
            if token.type == TokenType.UNKNOWN:
                raise UnrecognizedExpression(f"unrecognized token {token.text!r}")

            if token.type == TokenType.OPERAND:
                output.append(token)

            elif token.type == TokenType.FUNCTION:
                stack.append(token)

            elif token.type == TokenType.OPERATOR:
                ShuntingYard._push_operator(token, stack, output)

            elif token.is_open_paren:
                stack.append(token)
                open_parens += 1

            elif token.is_close_paren:
                close_parens += 1
                while stack and not stack[-1].is_open_paren:
                    output.append(stack.pop())
                if not stack:
                    raise UnrecognizedExpression("mismatched parenthesis ')'")
                stack.pop()  # 丢弃 '('

        if open_parens != close_parens:
            raise UnrecognizedExpression(
                f"unbalanced parentheses: {open_parens} '(' vs {close_parens} ')'"
            )
        if any(tk.type == TokenType.PARENTHESIS for tk in stack):
            raise UnrecognizedExpression("stray parenthesis left on operator stack")

        while stack:
            output.append(stack.pop())

        logger.debug(f"Postfix: {' '.join(tk.text for tk in output)}")
        return output

    @staticmethod
    def _push_operator(token, stack, output):
        # 前缀一元负号没有左操作数，入栈时不弹出任何元素
        if token.text == UNARY_MINUS:
            stack.append(token)
            return

        info = OPERATOR_DEFINITIONS[token.text]
        while stack:
            top_precedence = precedence_of(stack[-1])
            if top_precedence is None:  # '('
                break
            if top_precedence > info.precedence or (
                    top_precedence == info.precedence and info.associativity == Associativity.LEFT):
                output.append(stack.pop())
                continue
            break
        stack.append(token)


def to_postfix(tokens):
    return ShuntingYard.convert(tokens)
