# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["diff"]
HELP_MESSAGE_VERBOSE = ("Usage: arrdiff [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: arrdiff --version\n"
                       "          arrdiff diff -h\n"
                       "          arrdiff diff old.txt new.txt\n"
                       "          arrdiff diff --input-format=json a.json b.json\n"
                       % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "diff":
        from arrdiff.arrdiffapp import main
    else:
        if cmd == '--version':
            sys.exit(__version__)
        if cmd == '-h' or cmd == '--help':
            sys.exit(HELP_MESSAGE_VERBOSE)
        if cmd == '--config':
            # List all possible config options:
            from .args import print_config
            from .config import entrypoint_configurables
            print('All available config options, and their current values:\n',
                  file=sys.stderr)
            for entrypoint in entrypoint_configurables:
                print_config(entrypoint)
                print('', file=sys.stderr)
            sys.exit(1)
        else:
            sys.exit("Unrecognized command '%s'\n\n%s." %
                     (cmd, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m arrdiff <args>"
    sys.exit(main_dispatch())
