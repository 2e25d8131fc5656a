# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_arrdiff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_arrdiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_arrdiff_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


def print_config(entrypoint, out=None):
    "Print the effective config of an entrypoint, one key per line."
    out = out or sys.stderr
    header = entrypoint_configurables[entrypoint].__name__
    config = modify_config_for_print(build_config(entrypoint, True))
    print('%s:' % header, file=out)
    for k, v in sorted(config.items()):
        print('  %s: %s' % (k, v), file=out)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config(parser.prog.split(' ')[0])
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all arrdiff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that compute diffs.
    """
    parser.add_argument(
        '--compare',
        default='loose',
        choices=('loose', 'strict'),
        help="how values are compared: 'loose' lets numbers match numeric "
             "strings (1 == '1'), 'strict' uses plain equality.")
    parser.add_argument(
        '--input-format',
        dest='input_format',
        default='lines',
        choices=('lines', 'json'),
        help="read each input file as one value per line, "
             "or as a json array of values.")
    parser.add_argument(
        '--indent',
        default=2,
        type=int,
        help="indentation of the json edit script, 0 for a single line.")


def add_filename_args(parser, names):
    """Add the base files with help text.
    """
    helps = {
        "source": "the original file.",
        "target": "the modified file.",
        }
    for name in names:
        parser.add_argument(name, help=helps[name])
