"""expression/rpn.py - 逆波兰表达式句柄"""
import logging
import threading

from config.config import EVALUATOR_CONFIG
from core.tokenizer import tokenize
from core.shunting_yard import ShuntingYard
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


class RPN:
    """
    构造时完成 词法扫描 -> 调度场转换，保存后缀序列；
    result() 第一次调用时求值并缓存，之后直接返回缓存值。
    """

    def __init__(self, expr, allow_partial=None):
        """
        Args:
            expr: 中缀表达式字符串
            allow_partial: 覆盖 EVALUATOR_CONFIG['allow_partial']
        Raises:
            UnrecognizedExpression: 未知Token或括号不匹配
        """
        self.expr = expr
        self.allow_partial = EVALUATOR_CONFIG["allow_partial"] if allow_partial is None else allow_partial
        self._infix = tuple(tokenize(expr))
        self._postfix = tuple(ShuntingYard.convert(self._infix))
        self._result = None
        self._lock = threading.Lock()

    @classmethod
    def new(cls, expr, allow_partial=None):
        return cls(expr, allow_partial=allow_partial)

    def result(self):
        """求值（只计算一次）；失败时不写缓存"""
        if self._result is not None:
            return self._result
        with self._lock:
            if self._result is None:
                self._result = RPNEvaluator.evaluate(self._postfix, allow_partial=self.allow_partial)
                logger.debug(f"{self.expr!r} = {self._result}")
        return self._result

    def postfix(self):
        return [tk.text for tk in self._postfix]

    def infix(self):
        return [tk.text for tk in self._infix]

    def __repr__(self):
        return f"RPN({self.expr!r})"


def evaluate(expr):
    """一次性求值中缀表达式"""
    return RPN(expr).result()
