#!/usr/bin/env python3

import sys
import argparse
import traceback

from . import common
from .common import ExprError
from .parser import parse
from .expr import evaluate
from .tree import format_tree


PROMPT = '> '


def format_error(line, error):
    start, end = error.span
    return f"Error: {error.reason} '{line[start:end]}' at {start}...{end}"


def run_line(line, args):
    try:
        tree = parse(line)
        if args.tree:
            print(format_tree(tree, line))
        print(evaluate(tree, line))
        return True
    except ExprError as e:
        print(format_error(line, e))
    except Exception:
        if common.TRACE:
            traceback.print_exc()
        print('Error: unknown')

    return False


def repl(args):
    print(PROMPT, end='', flush=True)
    for line in sys.stdin:
        run_line(line.rstrip('\r\n'), args)
        print(PROMPT, end='', flush=True)


def _main(args):
    if args.file is not None:
        with open(args.file) as f:
            lines = [line.rstrip('\r\n') for line in f]
        lines = [line for line in lines if line]
    elif len(args.input) > 0:
        lines = args.input
    else:
        repl(args)
        return 0

    ok = True
    for line in lines:
        ok = run_line(line, args) and ok

    return 0 if ok else 1


def main(argv=None):
    argp = argparse.ArgumentParser(prog='treecalc')
    argp.add_argument('input', nargs='*')
    argp.add_argument('-f', '--file', type=str)
    argp.add_argument('--tree', action='store_true')
    argp.add_argument('--trace', action='store_true')
    args = argp.parse_args(argv)

    common.TRACE = args.trace

    return _main(args)


if __name__ == "__main__":
    sys.exit(main())
