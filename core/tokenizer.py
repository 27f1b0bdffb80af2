"""core/tokenizer.py - 单遍字符扫描器，把中缀表达式切分为Token序列"""
import logging

from core.token_system import UNARY_MINUS, FUNCTION_NAMES, PARENTHESES, make_token

logger = logging.getLogger(__name__)

# '-' 出现在表达式开头或这些字符之后时视为一元负号
UNARY_PREFIX_CHARS = frozenset('-+^%*/!~=(×÷')

_DIGITS = frozenset('0123456789')


def _is_digit(ch):
    # 只接受ASCII数字，其他Unicode数字按未知符号处理
    return ch in _DIGITS


def split_function_names(word):
    """
    将一段字母切分为函数名与其余片段（大小写不敏感，保留原文大小写）
    例如 'AbS' -> ['AbS']，'xsin' -> ['x', 'sin']
    """
    fragments = []
    pending = ''
    i = 0
    while i < len(word):
        for name in FUNCTION_NAMES:
            candidate = word[i:i + len(name)]
            if candidate.lower() == name:
                if pending:
                    fragments.append(pending)
                    pending = ''
                fragments.append(candidate)
                i += len(name)
                break
        else:
            pending += word[i]
            i += 1
    if pending:
        fragments.append(pending)
    return fragments


class Tokenizer:
    """
    扫描状态：
        _prev_char: 上一个非空白字符（判断一元负号）
        _symbols:   正在累积的符号串（'**'、'+*' 等）
    """

    def __init__(self, expr):
        self.expr = expr
        self.tokens = []
        self._symbols = ''
        self._prev_char = None

    def tokenize(self):
        expr = self.expr
        n = len(expr)
        i = 0
        while i < n:
            ch = expr[i]

            if ch.isspace():
                self._flush_symbols()
                i += 1
                continue

            if ch == '-' and (self._prev_char is None or self._prev_char in UNARY_PREFIX_CHARS):
                self._flush_symbols()
                self._emit(UNARY_MINUS)
                self._prev_char = ch
                i += 1
                continue

            if ch in PARENTHESES:
                self._flush_symbols()
                self._emit(ch)
                self._prev_char = ch
                i += 1
                continue

            if _is_digit(ch):
                self._flush_symbols()
                j = self._scan_number(i)
                self._emit(expr[i:j])
                self._prev_char = expr[j - 1]
                i = j
                continue

            if ch.isalpha():
                self._flush_symbols()
                j = i
                while j < n and expr[j].isalpha():
                    j += 1
                for fragment in split_function_names(expr[i:j]):
                    self._emit(fragment)
                self._prev_char = expr[j - 1]
                i = j
                continue

            # 其他字符累积成符号串，整体作为一个Token
            self._symbols += ch
            self._prev_char = ch
            i += 1

        self._flush_symbols()
        logger.debug(f"Tokenized {self.expr!r} -> {[t.text for t in self.tokens]}")
        return self.tokens

    def _scan_number(self, start):
        """返回数字字面量的结束位置：[0-9]+(.[0-9]+)?"""
        expr = self.expr
        n = len(expr)
        j = start
        while j < n and _is_digit(expr[j]):
            j += 1
        if j + 1 < n and expr[j] == '.' and _is_digit(expr[j + 1]):
            j += 1
            while j < n and _is_digit(expr[j]):
                j += 1
        return j

    def _flush_symbols(self):
        if self._symbols:
            self._emit(self._symbols)
            self._symbols = ''

    def _emit(self, text):
        self.tokens.append(make_token(text))


def tokenize(expr):
    """中缀表达式字符串 -> Token列表（不会失败，非法内容标记为UNKNOWN）"""
    return Tokenizer(expr).tokenize()
