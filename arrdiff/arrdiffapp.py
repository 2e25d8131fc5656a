# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

import arrdiff.log
from .args import (
    add_generic_args, add_diff_args, add_filename_args, ConfigBackedParser,
    )
from .diff_format import to_json
from .diffing.comparing import get_compare
from .diffing.sequences import diff_sequence
from .utils import EXPLICIT_MISSING_FILE, read_sequence, setup_std_streams


_description = ("Compute the edit script between two files, "
                "each read as a sequence of values.")


def main_diff(args):
    """Main handler of diff CLI"""
    source = args.source
    target = args.target
    output = getattr(args, 'out', None)

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (source, target):
        if (isinstance(fn, str) and not os.path.exists(fn) and
                fn != EXPLICIT_MISSING_FILE):
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_sequence(source, args.input_format)
        b = read_sequence(target, args.input_format)
    except ValueError as e:
        arrdiff.log.error("Could not read input: %s", e)
        return 1

    d = diff_sequence(a, b, compare=get_compare(args.compare))
    text = to_json(d, indent=args.indent)

    # Output as JSON to file, or print to stdout:
    if output:
        with open(output, "w") as df:
            df.write(text)
            df.write("\n")
        arrdiff.log.info("Wrote edit script with %d entries to %s", len(d), output)
    else:
        print(text)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'arrdiff diff',
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_filename_args(parser, ["source", "target"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the edit script is written to this file. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
