"""
Tests for the RPN expression handle and the cached evaluator.

Run with: pytest tests/test_rpn.py -v
"""

import math
import sys
import threading
from fractions import Fraction
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.errors import UnrecognizedExpression, ZeroDivision, NonFiniteResultError
from core.rpn_evaluator import RPNEvaluator
from expression import RPN, ExpressionEvaluator, evaluate


class TestRPN:
    """Tests for construction, postfix view and memoized result."""

    @pytest.mark.parametrize("expr,postfix,expected", [
        ("(1 + 2) * 3", ["1", "2", "+", "3", "*"], Fraction(9)),
        ("5 + ((1 + 2) * 4) - 3", ["5", "1", "2", "+", "4", "*", "+", "3", "-"], Fraction(14)),
        ("-1.33", ["1.33", "@"], Fraction(-133, 100)),
        ("1 / 2 + ( 2 + 3 ) * ( 9 - 2 * 2 - 3 / 4)",
         ["1", "2", "/", "2", "3", "+", "9", "2", "2", "*", "-", "3", "4", "/", "-", "*", "+"],
         Fraction(87, 4)),
        ("-1.5+2-2.5+3", ["1.5", "@", "2", "+", "2.5", "-", "3", "+"], Fraction(1)),
        ("AbS(-1.5)", ["1.5", "@", "AbS"], Fraction(3, 2)),
    ])
    def test_scenarios(self, expr, postfix, expected):
        rpn = RPN(expr)
        assert rpn.postfix() == postfix
        assert rpn.result() == expected

    @pytest.mark.parametrize("expr,expected", [
        ("sin(3**3)", math.sin(27)),
        ("sin(2^3)", math.sin(8)),
        ("tan(4÷-2×(8%6)+1.5)", math.tan(-2.5)),
        ("2 ** 0.5", math.sqrt(2)),
        ("cos(0) + arccos(1)", 1.0),
    ])
    def test_float_fallback_results(self, expr, expected):
        assert float(RPN(expr).result()) == pytest.approx(expected)

    @pytest.mark.parametrize("expr,expected", [
        ("0.1 + 0.2", Fraction(3, 10)),
        ("2 × 3 ÷ 4", Fraction(3, 2)),
        ("-2**2", Fraction(-4)),
        ("2**-2", Fraction(1, 4)),
        ("2^3^2", Fraction(64)),
        ("3 - -2", Fraction(5)),
        ("--3", Fraction(3)),
        ("-7 % 3", Fraction(-1)),
        ("sqrt(16) * 2", Fraction(8)),
    ])
    def test_exact_results(self, expr, expected):
        assert RPN(expr).result() == expected

    def test_unbalanced_parentheses_fail_at_construction(self):
        with pytest.raises(UnrecognizedExpression):
            RPN("(1 + 2 / 4")

    def test_unknown_token_fails_at_construction(self):
        with pytest.raises(UnrecognizedExpression):
            RPN("1 + x")

    def test_new_alias(self):
        assert RPN.new("1 + 1").result() == 2

    @pytest.mark.parametrize("expr", ["(1 + 2) / 0", "1 / (2 - 2)", "3 * (4 ÷ (1 - 1))", "5 % 0"])
    def test_zero_division(self, expr):
        rpn = RPN(expr)
        with pytest.raises(ZeroDivision):
            rpn.result()

    def test_non_finite_is_rejected(self):
        with pytest.raises(NonFiniteResultError):
            RPN("sqrt(0 - 1)").result()

    def test_result_is_memoized(self):
        rpn = RPN("1 + 2")
        with patch.object(RPNEvaluator, "evaluate", wraps=RPNEvaluator.evaluate) as mock_eval:
            first = rpn.result()
            second = rpn.result()
        assert first == second == 3
        assert first is second
        assert mock_eval.call_count == 1

    def test_failed_result_is_not_cached(self):
        """Should evaluate again after a failure instead of caching it."""
        rpn = RPN("1 / 0")
        with patch.object(RPNEvaluator, "evaluate", wraps=RPNEvaluator.evaluate) as mock_eval:
            with pytest.raises(ZeroDivision):
                rpn.result()
            with pytest.raises(ZeroDivision):
                rpn.result()
        assert mock_eval.call_count == 2

    def test_concurrent_result_calls_agree(self):
        rpn = RPN("1 / 3 + 1 / 6")
        results = []
        threads = [threading.Thread(target=lambda: results.append(rpn.result())) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_postfix_is_stable(self):
        rpn = RPN("(1 + 2) * 3")
        assert rpn.postfix() == rpn.postfix()
        rpn.postfix().append("junk")
        assert rpn.postfix() == ["1", "2", "+", "3", "*"]

    def test_infix_view(self):
        assert RPN("2*-3").infix() == ["2", "*", "@", "3"]

    def test_partial_stack(self):
        assert RPN("1 2", allow_partial=True).result() == 2
        with pytest.raises(UnrecognizedExpression):
            RPN("1 2", allow_partial=False).result()

    def test_repr(self):
        assert repr(RPN("1+1")) == "RPN('1+1')"

    def test_evaluate_helper(self):
        assert evaluate("(1 + 2) * 3") == 9


class TestExpressionEvaluator:
    """Tests for the LRU cache of expression handles."""

    def test_cache_hits_and_misses(self):
        evaluator = ExpressionEvaluator(cache_size=4)
        assert evaluator.evaluate("1 + 1") == 2
        assert evaluator.evaluate("1 + 1") == 2
        assert evaluator.cache_info() == {"hits": 1, "misses": 1, "size": 1}

    def test_evicts_least_recently_used(self):
        evaluator = ExpressionEvaluator(cache_size=2)
        first = evaluator.handle("1")
        evaluator.handle("2")
        evaluator.handle("1")
        evaluator.handle("3")  # 淘汰 "2"
        assert evaluator.cache_info()["size"] == 2
        assert evaluator.handle("1") is first
        assert evaluator.cache_info()["misses"] == 3

    def test_construction_failures_are_not_cached(self):
        evaluator = ExpressionEvaluator()
        with pytest.raises(UnrecognizedExpression):
            evaluator.evaluate("(1")
        assert evaluator.cache_info()["size"] == 0

    def test_postfix(self):
        assert ExpressionEvaluator().postfix("-1.33") == ["1.33", "@"]

    def test_clear_cache(self):
        evaluator = ExpressionEvaluator()
        evaluator.evaluate("2 * 2")
        evaluator.clear_cache()
        assert evaluator.cache_info() == {"hits": 0, "misses": 0, "size": 0}

    def test_strict_mode(self):
        with pytest.raises(UnrecognizedExpression):
            ExpressionEvaluator(allow_partial=False).evaluate("1 2")
