#!/usr/bin/env python3
"""
jsonmonkey CLI

A line-oriented front end for running JIR programs. Each line is one
complete program; all lines share one session, so bindings persist.

Usage:
    python -m jsonmonkey.cli [path] [options]
    jsonmonkey [path] [options]

Examples:
    jsonmonkey
    jsonmonkey programs/bindings.jir --verbose
    jsonmonkey programs/bindings.jir --trace --max-depth 64
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from jsonmonkey.errors import JIRError
from jsonmonkey.evaluator import EvalOptions
from jsonmonkey.parser import ParseOptions
from jsonmonkey.session import Session
from jsonmonkey.types import Value, to_string

logger = logging.getLogger(__name__)

PROMPT = ">> "


#==============================================================================
# CLI Output Formatting
#==============================================================================

class Colors:
    """ANSI color codes for terminal output"""
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"


def paint(text: str, color: str, use_color: bool = True) -> str:
    """Wrap text in a color code when color output is enabled"""
    if not use_color:
        return text
    return f"{color}{text}{Colors.RESET}"


def format_value(value: Value, use_color: bool = True) -> str:
    """Format a value for display"""
    if value.kind == "number":
        return paint(to_string(value), Colors.CYAN, use_color)
    if value.kind == "bool":
        return paint(to_string(value), Colors.MAGENTA, use_color)
    if value.kind == "string":
        return paint(json.dumps(value.value, ensure_ascii=False), Colors.GREEN, use_color)
    return paint(to_string(value), Colors.DIM, use_color)


def format_error(error: JIRError, use_color: bool = True) -> str:
    """Format a parse or evaluation error for display"""
    return paint(f"Error: {error.code.value}: {error.message}", Colors.RED, use_color)


#==============================================================================
# Program Execution
#==============================================================================

def run_line(session: Session, line: str, out: TextIO, use_color: bool = True) -> bool:
    """
    Run one program and print its result or error.

    Returns:
        True if the program succeeded, False otherwise
    """
    try:
        value = session.run(line)
    except JIRError as e:
        logger.debug("Program failed with %s", e.code.value)
        print(format_error(e, use_color), file=out)
        return False
    print(format_value(value, use_color), file=out)
    return True


def run_lines(session: Session, lines: Iterable[str], out: TextIO, use_color: bool = True) -> int:
    """
    Run every non-blank line as a program in one session.

    Returns:
        Exit code (0 if every program succeeded, 1 otherwise)
    """
    failed = 0
    for line in lines:
        if not line.strip():
            continue
        if not run_line(session, line, out, use_color):
            failed += 1
    if failed:
        logger.info("%d program(s) failed", failed)
    return 1 if failed else 0


def run_file(path: str, session: Session, use_color: bool = True) -> int:
    """
    Run a file of programs, one per line.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    path_obj = Path(path)
    try:
        content = path_obj.read_text(encoding="utf-8")
    except OSError as e:
        print(paint(f"Error: Could not read {path}: {e}", Colors.RED, use_color), file=sys.stderr)
        return 1
    return run_lines(session, content.splitlines(), sys.stdout, use_color)


def repl(session: Session, use_color: bool = True) -> int:
    """Read programs from the terminal until EOF or interrupt"""
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if not line.strip():
            continue
        run_line(session, line, sys.stdout, use_color)


#==============================================================================
# Main CLI
#==============================================================================

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonmonkey",
        description="jsonmonkey - Run JIR programs, one JSON document per line",
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="File of JIR programs (omit for an interactive prompt)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every evaluated node",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        dest="max_depth",
        default=ParseOptions.max_depth,
        help="Maximum nesting depth accepted by the parser",
    )

    parser.add_argument(
        "--no-color",
        action="store_false",
        dest="color",
        help="Disable colored output",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or args.trace) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = Session(
        parse_options=ParseOptions(max_depth=args.max_depth),
        eval_options=EvalOptions(max_depth=args.max_depth + 1, trace=args.trace),
    )

    if args.path:
        return run_file(args.path, session, use_color=args.color)
    return repl(session, use_color=args.color)


if __name__ == "__main__":
    sys.exit(main())
