"""主程序入口 - 交互式 / 批量后缀表达式求值"""
import argparse
import logging
import sys

from config.config import REPL_CONFIG, LOGGING_CONFIG, validate_config
from core import RPNEvaluator, EvaluationError
from utils import format_result, format_error

logger = logging.getLogger(__name__)


def run_line(evaluator, line, out=None, err=None):
    """
    评估一行并输出结果
    Returns:
        成功返回 True，求值出错返回 False
    """
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        result = evaluator.evaluate(line)
    except EvaluationError as e:
        print(format_error(e), file=err)
        evaluator.reset_stack()  # 出错后清栈
        return False

    if result is not None:
        print(format_result(result), file=out)
    return True


def run_expressions(evaluator, expressions, out=None, err=None):
    """依次评估多个表达式（共享变量表），任一失败则返回 1"""
    failed = 0
    for expression in expressions:
        if not run_line(evaluator, expression, out, err):
            failed += 1
    if failed:
        logger.info(f"{failed} of {len(expressions)} expressions failed")
    return 1 if failed else 0


def repl(evaluator, stdin=None, out=None, err=None, prompt=None):
    """逐行读取输入直到 EOF"""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr

    while True:
        if prompt:
            out.write(prompt)
            out.flush()
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            break
        if not line:
            break
        run_line(evaluator, line, out, err)

    if prompt:
        print(REPL_CONFIG["farewell"], file=out)
    return 0


def main(args):
    validate_config()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )

    evaluator = RPNEvaluator()

    if args.expression:
        logger.info(f"Evaluating {len(args.expression)} expressions")
        return run_expressions(evaluator, args.expression)

    interactive = sys.stdin.isatty()
    prompt = REPL_CONFIG["prompt"] if interactive and not args.no_prompt else None
    logger.info(f"Starting line loop (interactive={interactive})")
    return repl(evaluator, prompt=prompt)


def build_parser():
    parser = argparse.ArgumentParser(description="Postfix expression evaluator with single-letter variables")

    parser.add_argument(
        "-e", "--expression",
        type=str,
        action="append",
        default=[],
        help="Expression to evaluate (can be repeated; variables carry over)"
    )
    parser.add_argument(
        "--no_prompt",
        action="store_true",
        help="Do not print a prompt in interactive mode"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
