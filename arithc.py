#!/usr/bin/env python3

import argparse as arg
import sys
from pathlib import Path
from arith.calculator import calculate
from arith.errors import CalcError
from arith.lexer import scan
from arith.limits import Limits, DEFAULT_LIMITS, MAX_SAFE_DEPTH
from arith.parser import parse

def report(err: CalcError):
    print(f'Error, {err}', file=sys.stderr)

def read_source(args) -> str:
    if args.expr is not None:
        return args.expr
    if args.source is None or str(args.source) == '-':
        return sys.stdin.read()
    with open(args.source, 'r') as src:
        return src.read()

def run(src: str, limits: Limits, args) -> int:
    if args.tokens:
        for tok in scan(src):
            print(tok)
        return 0

    if args.ast:
        try:
            print(parse(src, limits), end='')
        except CalcError as err:
            report(err)
            return 1
        return 0

    outcome = calculate(src, limits)
    if not outcome.ok:
        report(outcome.error)
        return 1
    print(outcome.value)
    return 0

def interactive(limits: Limits):
    import readline
    try:
        while (src := input("expr: ")):
            outcome = calculate(src, limits)
            if outcome.ok:
                print(outcome.value)
            else:
                report(outcome.error)
    except EOFError:
        pass

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='arithc',
        description='Evaluates integer arithmetic expressions',
        epilog='Version 0.1.0')

    parser.add_argument('source', type=Path, nargs='?',
                        help='file holding the expression, standard input if omitted or -')
    parser.add_argument('-e', '--expr', dest='expr', default=None)
    parser.add_argument('-t', '--tokens', dest='tokens', action='store_true', default=False)
    parser.add_argument('-a', '--ast', dest='ast', action='store_true', default=False)
    parser.add_argument('-i', '--interactive', dest='interactive', action='store_true', default=False)
    parser.add_argument('--max-depth', dest='max_depth', type=int, default=DEFAULT_LIMITS.max_depth)
    parser.add_argument('--bits', dest='bits', type=int, default=DEFAULT_LIMITS.int_bits)
    parser.add_argument('--allow-trailing', dest='allow_trailing', action='store_true', default=False)
    args = parser.parse_args(argv)

    if args.max_depth < 1:
        parser.error('--max-depth must be at least 1')
    if args.max_depth > MAX_SAFE_DEPTH:
        parser.error(f'--max-depth must be at most {MAX_SAFE_DEPTH}')
    if args.bits < 2:
        parser.error('--bits must be at least 2')

    limits = Limits(args.max_depth, args.bits, args.allow_trailing)

    if args.interactive:
        interactive(limits)
        return 0

    return run(read_source(args), limits, args)

if __name__ == '__main__':
    sys.exit(main())
