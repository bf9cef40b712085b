"""主程序入口 - 表达式与微积分计算器"""
import argparse
import logging
import sys

from config.config import INTEGRATION_CONFIG, validate_config
from core.errors import EngineError
from shell import Session, run_repl

logger = logging.getLogger(__name__)

BANNER = """Welcome to the Advanced Math Solver!
Supported operations: +, -, *, /, ^ (power), sqrt(), sin(), cos(), tan(), log(), exp()
Supported constants: pi, e
Usage examples:
  x = 5                                 -> assign a variable
  derivative(sin(x) + x^3, 'x', 2)      -> second derivative with respect to x
  integrate(2*x, 0, 10)                 -> definite integral over [0, 10]
  limit(1/x, 0, 'left')                 -> left-hand limit as x -> 0
  continuity(x^2, 3)                    -> check continuity at x = 3
Type 'exit' to quit or 'history' to see previous calculations."""


def main(args):
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    validate_config()

    session = Session(slices=args.slices)

    if args.expression:
        status = 0
        for line in args.expression:
            try:
                print(session.execute(line))
            except EngineError as e:
                logger.error(f"Command failed: {e}")
                print(f"Error: {e.message}")
                status = 1
        return status

    print(BANNER)
    run_repl(session)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Expression evaluator with numeric calculus")

    parser.add_argument(
        "-e", "--expression",
        action="append",
        help="Run a command non-interactively (may be repeated; variables persist between them)"
    )
    parser.add_argument(
        "--slices",
        type=int,
        default=INTEGRATION_CONFIG["slices"],
        help="Number of trapezoidal slices used by integrate"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
