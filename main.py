"""主程序入口 - 命令行计算中缀表达式"""
import argparse
import logging
import sys

from config.config import CLI_CONFIG, EVALUATOR_CONFIG, LOGGING_CONFIG, OUTPUT_FORMATS, validate_config
from core.errors import RPNError
from expression.evaluator import ExpressionEvaluator
from utils.formatting import format_rational

logger = logging.getLogger(__name__)


def _read_expressions(args, stdin):
    if args.expressions:
        return args.expressions
    return [line.strip() for line in stdin if line.strip()]


def main(args, stdin=None, stdout=None):
    """
    逐个求值表达式并输出结果；任一表达式失败时返回1
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    evaluator = ExpressionEvaluator(allow_partial=not args.strict)
    exit_code = 0

    for expr in _read_expressions(args, stdin):
        try:
            rpn = evaluator.handle(expr)
            if args.show_postfix:
                print(f"{expr} => {' '.join(rpn.postfix())}", file=stdout)
            value = rpn.result()
        except RPNError as e:
            logger.error(f"Failed to evaluate {expr!r}: {type(e).__name__}: {e}")
            print(f"{expr} = error: {e}", file=stdout)
            exit_code = 1
            continue

        print(f"{expr} = {format_rational(value, args.output_format, args.precision)}", file=stdout)

    logger.debug(f"Cache info: {evaluator.cache_info()}")
    return exit_code


def build_parser():
    parser = argparse.ArgumentParser(description="Infix expression calculator (exact rational arithmetic)")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; read from stdin (one per line) when omitted"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--output_format",
        choices=OUTPUT_FORMATS,
        default=CLI_CONFIG["output_format"],
        help="How to print results (default: %(default)s)"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=CLI_CONFIG["precision"],
        help="Significant digits for decimal output (default: %(default)s)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=not EVALUATOR_CONFIG["allow_partial"],
        help="Fail when evaluation leaves more than one value on the stack"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: %(default)s)"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()
    sys.exit(main(args))
