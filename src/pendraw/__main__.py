"""
Command line entry point.

Usage:
python -m pendraw run drawing.txt
python -m pendraw run drawing.txt --headless
python -m pendraw check drawing.txt --all
"""
import argparse
import logging
import sys
from pathlib import Path

from .config import AppConfig
from .core import check_script, load_program, run_script
from .runtime.canvas import RecordingCanvas, TurtleCanvas
from .utils import logger


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pendraw", description="Run or check line-oriented drawing scripts.")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Execute a script")
    run.add_argument("script", type=Path, help="Path to the script file")
    run.add_argument("--headless", action="store_true",
                     help="Record drawing operations and print them instead of opening a window.")
    run.add_argument("--strict-endif", action="store_true", default=AppConfig.STRICT_ENDIF,
                     help="Treat an endif without an open if-block as an error.")
    run.add_argument("-v", "--verbose", action="store_true", help="Log every executed line.")

    check = sub.add_parser("check", help="Check the syntax of a script without running it")
    check.add_argument("script", type=Path, help="Path to the script file")
    check.add_argument("--all", action="store_true", help="Report every failing line, not only the first.")
    return parser


def _run(args) -> int:
    program = load_program(str(args.script))
    canvas = RecordingCanvas() if args.headless else TurtleCanvas()
    result = run_script(program, canvas=canvas, strict_endif=args.strict_endif)

    if args.headless:
        for op in canvas.operations:
            print(op.name, *op.args)

    if result["status"] != "success":
        print(f"{result['kind']} at line {result['line_number']}: {result['message']}", file=sys.stderr)
        print(f"  {result['line']}", file=sys.stderr)
        return 1

    if not args.headless:
        print(canvas.hold())
    return 0


def _check(args) -> int:
    result = check_script(load_program(str(args.script)), collect_all=args.all)
    if result["status"] == "success":
        print(result["message"])
        return 0
    for issue in result["issues"]:
        print(f"line {issue['line_number']}: {issue['kind']}: {issue['reason']}", file=sys.stderr)
        print(f"  {issue['line']}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    args = _build_arg_parser().parse_args(argv)
    if getattr(args, "verbose", False):
        logger.setLevel(logging.DEBUG)

    try:
        if args.command == "run":
            return _run(args)
        return _check(args)
    except OSError as e:
        print(f"Cannot read {args.script}: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
