import logging
from collections import OrderedDict

from config.config import EVALUATOR_CONFIG
from expression.rpn import RPN

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size=None, allow_partial=None):
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = EVALUATOR_CONFIG["cache_size"] if cache_size is None else cache_size
        self.allow_partial = allow_partial
        self._handle_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._handle_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._handle_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._handle_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self):
        return {
            "hits": self._cache_hits,
            "misses": self._cache_misses,
            "size": len(self._handle_cache),
        }

    def handle(self, expr):
        """
        返回表达式对应的RPN句柄；构造失败的表达式不进入缓存
        """
        if expr in self._handle_cache:
            # 移到末尾（最近使用）
            self._handle_cache.move_to_end(expr)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expr[:50]}")
            return self._handle_cache[expr]

        self._cache_misses += 1
        rpn = RPN(expr, allow_partial=self.allow_partial)
        self._handle_cache[expr] = rpn
        self._manage_cache()
        return rpn

    def evaluate(self, expr):
        return self.handle(expr).result()

    def postfix(self, expr):
        return self.handle(expr).postfix()
