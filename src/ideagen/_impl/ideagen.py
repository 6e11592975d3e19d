#
# ----------------------------------------------------------------------------------------------------
#
# Copyright (c) 2026, 2026, Oracle and/or its affiliates. All rights reserved.
# DO NOT ALTER OR REMOVE COPYRIGHT NOTICES OR THIS FILE HEADER.
#
# This code is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License version 2 only, as
# published by the Free Software Foundation.
#
# This code is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# version 2 for more details (a copy is included in the LICENSE file that
# accompanied this code).
#
# You should have received a copy of the GNU General Public License version
# 2 along with this work; if not, write to the Free Software Foundation,
# Inc., 51 Franklin St, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Please contact Oracle, 500 Oracle Parkway, Redwood Shores, CA 94065 USA
# or visit www.oracle.com if you need additional information or have any
# questions.
#
# ----------------------------------------------------------------------------------------------------
"""
The ideagen command line: global options, the command table and the entry point.
"""

from __future__ import annotations

__all__ = ["ArgParser", "help_", "main", "version"]

import sys
from argparse import ArgumentParser, REMAINDER
from typing import List, Optional

from .commands import _commands, command
from .support.errors import IdeaGenError
from .support.logging import abort, log_error
from .support.options import _opts, set_defaults

# registers the idea7x commands
from .ide import idea7x as _idea7x  # pylint: disable=unused-import

version = "1.0.0"


class ArgParser(ArgumentParser):
    # Override parent to append the list of available commands
    def format_help(self):
        return ArgumentParser.format_help(self) + """
environment variables:
  IDEAGEN_LOCAL_REPOSITORY  Root of the local artifact repository. Used when neither the build graph
                            nor the --local-repository option names one (default: ~/.m2/repository).
  IDEAGEN_IDEA7X_DEFAULTS   Extra arguments prepended to the arguments of the idea7x command.
  CI                        Print a stack trace when a command aborts.
""" + _format_commands()

    def __init__(self):
        ArgumentParser.__init__(self, prog='ideagen')
        self.add_argument('-v', '--verbose', action='store_true', dest='verbose', help='enable verbose output')
        self.add_argument('-V', '--very-verbose', action='store_true', dest='very_verbose', help='enable very verbose output')
        self.add_argument('--no-warning', action='store_false', dest='warn', help='disable warning messages')
        self.add_argument('--quiet', action='store_true', help='disable log messages')
        self.add_argument('-g', '--graph', help='build graph document (default: buildgraph.json)', metavar='<path>')
        self.add_argument('--local-repository', dest='local_repository', help='root of the local artifact repository', metavar='<path>')
        self.add_argument('--version', action='store_true', help='print version and exit')
        self.add_argument('commandAndArgs', nargs=REMAINDER, metavar='command args...')


def _format_commands():
    msg = '\navailable commands:\n'
    commands = _commands.commands()
    msg += _commands.list_commands(sorted(commands.keys()))
    return msg + '\n'


_argParser = ArgParser()


@command('help', '[command]')
def help_(args):
    """show detailed help for ideagen or a given command

With no arguments, print a list of commands and short help for each command.

Given a command name, print help for that command."""
    if len(args) == 0:
        _argParser.print_help()
        return

    name = args[0]
    if name not in _commands.commands():
        abort(f'ideagen: unknown command \'{name}\'\n{_format_commands()}use "ideagen help" for more options')

    print(_commands.commands()[name].get_doc())


def main(args: Optional[List[str]] = None) -> int:
    if args is None:
        args = sys.argv[1:]
    set_defaults()
    # make sure logv, logvv and warn work as early as possible
    _opts.verbose = '-v' in args or '-V' in args
    _opts.very_verbose = '-V' in args
    _opts.warn = '--no-warning' not in args
    _opts.quiet = '--quiet' in args

    opts = _argParser.parse_args(args)
    commandAndArgs = opts.__dict__.pop('commandAndArgs')
    if opts.version:
        print('ideagen version ' + version)
        return 0
    _opts.__dict__.update(opts.__dict__)
    _opts.verbose = _opts.verbose or _opts.very_verbose

    if len(commandAndArgs) == 0:
        _argParser.print_help()
        return 0

    command_name = commandAndArgs[0]
    c = _commands.command_function(command_name, fatal_if_missing=False)
    if c is None:
        abort(f'ideagen: unknown command \'{command_name}\'\n{_format_commands()}use "ideagen help" for more options')

    try:
        retcode = c(commandAndArgs[1:])
    except IdeaGenError as e:
        log_error(str(e))
        raise SystemExit(1)
    except KeyboardInterrupt:
        # no need to show the stack trace when the user presses CTRL-C
        abort(1)
    if retcode is not None and retcode != 0:
        abort(retcode)
    return 0


def _main_wrapper():
    sys.exit(main())
