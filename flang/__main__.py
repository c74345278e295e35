"""Command-line front end for F programs.

Usage:
  python -m flang [tokens|ast|print] PATH [PATH ...] [--debug]

Every PATH may be a source file or a directory, of which all `*.fl` files are used.
Each file is handled on its own: a broken or too deeply nested file is reported,
and the next one is processed.
"""

from __future__ import annotations

import argparse
import re
import sys
from glob import glob
from os.path import basename, isdir, join, splitext
from pprint import pprint
from typing import List, Tuple

from icecream import ic

from flang.error.communicator import Communicator
from flang.error.error import CompilerException
from flang.parser.parser import Parser
from flang.scanner.scanner import Scanner

NUMBERED_FILE = re.compile(r"test(\d+)")


def sort_key(path: str) -> Tuple[int, int, str]:
    # testN.fl files come first, in numeric order
    name = splitext(basename(path))[0]
    match = NUMBERED_FILE.fullmatch(name)
    if match:
        return (0, int(match[1]), path)
    return (1, 0, path)


def files(paths: List[str]) -> List[str]:
    found = []
    for path in paths:
        if isdir(path):
            found.extend(sorted(glob(join(path, "*.fl")), key=sort_key))
        else:
            found.append(path)
    return found


def trace(message: str) -> None:
    print(message, file=sys.stderr)


def open_file(filename: str) -> str:
    with open(filename, "r", encoding="utf8") as f:
        return f.read()


def process(command: str, program: str) -> None:
    scanner = Scanner(program)
    try:
        if command == "tokens":
            for token in scanner.scan():
                ic(token)
                print(f"{token.span.lines_str:<10} {token.type.name:<10} {token.text!r}")
            return

        tree = Parser(scanner).parse()
        ic(len(tree.expressions))
        if command == "ast":
            pprint(tree)
        else:
            print(tree)
    finally:
        Communicator.report(scanner.warnings)


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="flang", description="Scan and parse F programs.")
    parser.add_argument(
        "command",
        choices=("tokens", "ast", "print"),
        help="Dump the tokens, the syntax tree, or the formatted program",
    )
    parser.add_argument("paths", nargs="+", help="F source files or directories of them")
    parser.add_argument("--debug", action="store_true", help="Trace processing with icecream")
    args = parser.parse_args(argv)

    if args.debug:
        ic.enable()
        ic.configureOutput(prefix="flang| ", outputFunction=trace)
    else:
        ic.disable()

    failures = 0
    for path in files(args.paths):
        ic(path)
        print(f"=== Processing: {basename(path)} ===")
        try:
            program = open_file(path)
        except OSError as e:
            print(f"Could not read {path!r}: {e.strerror}", file=sys.stderr)
            failures += 1
            continue

        try:
            process(args.command, program)
        except CompilerException as e:
            print(e, file=sys.stderr)
            failures += 1
        except RecursionError:
            print(f"Could not process {path!r}: nesting too deep", file=sys.stderr)
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
