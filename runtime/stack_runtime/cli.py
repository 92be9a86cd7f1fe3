"""
Command-line entry point.

    stackrun             interactive: read stdin, print the stack after each line
    stackrun prog.stk    batch: run every line of the file, no per-line output
    stackrun --trace     log every word and the resulting stack to stderr

Any runtime error ends the run with status 1.
"""

import argparse
import logging
import sys
from typing import Iterable, TextIO

from .errors import StackError, UnterminatedBlock
from .evaluator import process_line
from .machine import Machine
from .values import format_stack


def run_interactive(machine: Machine, lines: Iterable[str], out: TextIO = None):
    """Process lines one at a time, rendering the stack after each"""
    out = out or sys.stdout
    for line in lines:
        process_line(line.rstrip('\n'), machine)
        print(format_stack(machine.stack), file=out)


def run_batch(machine: Machine, lines: Iterable[str]):
    """Process all lines without per-line rendering"""
    for line in lines:
        process_line(line.rstrip('\n'), machine)
    if machine.building:
        raise UnterminatedBlock(f"{machine.depth} block(s) still open at end of input")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run a stack language program.")
    parser.add_argument("file", nargs="?", help="Source file to run in batch mode (default: interactive stdin).")
    parser.add_argument("--trace", action="store_true", help="Log each word and the resulting stack to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    machine = Machine()
    try:
        if args.file is None:
            run_interactive(machine, sys.stdin)
        else:
            with open(args.file, 'r', encoding='utf-8') as f:
                run_batch(machine, f)
    except FileNotFoundError:
        print(f"Error: File '{args.file}' not found.", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Could not read '{args.file or '<stdin>'}': {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: '{args.file or '<stdin>'}' is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except StackError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
