#!python3 -X utf8

from typing import List, Optional
import sys
import os
import argparse
import logging

##################################################################################################
# Main
##################################################################################################

type ArgParser = argparse.ArgumentParser


def add_operation_arguments(parser: ArgParser) -> None:
    # --add and --remove share one destination so their relative order survives
    parser.add_argument('--add', dest='ops', action='append', metavar='RANGE',
                        type=lambda text: ('add', text),
                        help='Range to add, e.g. "[1..3]" or "(4..+inf)".')
    parser.add_argument('--remove', dest='ops', action='append', metavar='RANGE',
                        type=lambda text: ('remove', text),
                        help='Range to remove, e.g. "(2..4)".')


def make_parser() -> ArgParser:
    parser = argparse.ArgumentParser(description='Build disjoint range sets and query them.')
    parser.add_argument('--verbose', action='store_true', help='Enable DEBUG logging.')
    parser.add_argument('--check', action='store_true', help='Verify range set invariants after every change.')
    subparsers = parser.add_subparsers(dest='command')

    cmd = subparsers.add_parser('eval', help='Apply operations and print the resulting set.')
    cmd.add_argument('--complement', action='store_true', help='Also print the complement.')
    add_operation_arguments(cmd)

    cmd = subparsers.add_parser('contains', help='Check whether a value is covered.')
    cmd.add_argument('value', type=str, nargs=1)
    add_operation_arguments(cmd)

    cmd = subparsers.add_parser('encloses', help='Check whether a range is enclosed by one member.')
    cmd.add_argument('range', type=str, nargs=1)
    add_operation_arguments(cmd)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        os.system('chcp 65001 > nul')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    from rangeset.config import configure, get_settings
    from rangeset.errors import RangeSetError
    from rangeset.messages import error

    parser = make_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        configure(log_level='DEBUG')
    if args.check:
        configure(check_invariants=True)
    logging.basicConfig(level=get_settings().logging_level, format='%(message)s')

    try:
        from rangeset.tasks.build import parse_operations
        operations = parse_operations(args.ops)

        match args.command:
            case 'eval':
                from rangeset.tasks.evaluate import evaluate
                evaluate(operations, show_complement=args.complement)
                return 0

            case 'contains':
                from rangeset.tasks.query import contains
                return 0 if contains(args.value[0], operations) else 1

            case 'encloses':
                from rangeset.tasks.query import encloses
                return 0 if encloses(args.range[0], operations) else 1

            case _:
                raise ValueError(f"Unknown command: {args.command}")

    except (RangeSetError, TypeError) as e:
        error(f"{e}")
        return 2

if __name__ == '__main__':
    sys.exit(main())
