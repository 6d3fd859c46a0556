"""Command-line entry point: lispreter [-i FILE] [-o FILE] [-d]."""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from typing import Optional, Sequence, TextIO

from lispreter import __version__
from lispreter.config import get_debug_default
from lispreter.interpreter import Interpreter
from lispreter.reader.parser import read

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lispreter", description="A small Lisp interpreter")
    parser.add_argument("-i", "--input", dest="input_file", help="read the program from FILE (default: stdin)")
    parser.add_argument("-o", "--output", dest="output_file", help="write results to FILE (default: stdout)")
    parser.add_argument("-d", "--debug", action="store_true", default=get_debug_default(),
                        help="print error details and stack traces")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def report_error(exc: BaseException, debug: bool, out: TextIO) -> None:
    out.write("Error occurred!\n")
    if debug:
        out.write(f"{exc}\n")
        out.write(traceback.format_exc())
    else:
        out.write("Specify '-d' to debug the error!\n")


def run_source(source: str, interp: Interpreter, debug: bool, out: TextIO) -> int:
    """Evaluate each top-level form; a failing form is reported and skipped.

    A syntax error stops reading. Returns the process exit status.
    """
    status = 0
    forms = read(source)
    while True:
        try:
            expr = next(forms)
        except StopIteration:
            break
        except Exception as ex:
            logger.debug("reader failed: %s", ex)
            report_error(ex, debug, out)
            return 1
        try:
            result = interp.eval_form(expr)
        except Exception as ex:
            logger.debug("evaluation of %s failed: %s", expr, ex)
            report_error(ex, debug, out)
            status = 1
            continue
        interp.print_result(result)
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.input_file:
            with open(args.input_file, encoding="utf-8") as f:
                source = f.read()
        else:
            source = sys.stdin.read()
    except OSError as ex:
        report_error(ex, args.debug, sys.stdout)
        return 1

    if args.output_file:
        with open(args.output_file, "w", encoding="utf-8") as out:
            return run_source(source, Interpreter(output=out), args.debug, out)
    return run_source(source, Interpreter(output=sys.stdout), args.debug, sys.stdout)
