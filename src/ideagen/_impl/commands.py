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
The command table behind the ideagen command line.
"""

__all__ = ["Commands", "Command", "command"]

from .support.logging import abort


class Command(object):
    """A function callable from the command line as `ideagen <name> args...`."""

    def __init__(self, command_function, command, usage_msg=''):
        self.command_function = command_function
        self.command = command
        self.usage_msg = usage_msg

    def summary(self):
        """The first line of the command's documentation."""
        return (self.command_function.__doc__ or '').split('\n', 1)[0]

    def get_doc(self):
        parts = [p for p in (self.usage_msg, self.command_function.__doc__) if p]
        return f'ideagen {self.command} ' + ('\n\n'.join(parts) if parts else '<no documentation>')

    def __call__(self, *args, **kwargs):
        return self.command_function(*args, **kwargs)


class Commands(object):
    def __init__(self):
        self._commands = {}

    def commands(self):
        return dict(self._commands)

    def list_commands(self, names):
        return ''.join(f' {name:<20} {self._commands[name].summary()}\n' for name in names)

    def command_function(self, name, fatal_if_missing=True):
        """
        Gets the command called `name`. A missing command aborts if
        `fatal_if_missing` is True and yields None otherwise.
        """
        c = self._commands.get(name)
        if c is None and fatal_if_missing:
            abort(f'command {name} does not exist')
        return c

    def add_commands(self, new_commands):
        for c in new_commands:
            assert c.command not in self._commands, f'command {c.command} is already defined'
            self._commands[c.command] = c


_commands = Commands()


def command(command_name, usage_msg=''):
    """
    Decorator registering a function as the ideagen command `command_name`.
    The function receives the command line arguments following the command
    name as a list of strings.
    """
    def command_decorator_factory(command_func):
        c = Command(command_func, command_name, usage_msg)
        _commands.add_commands([c])
        return c

    return command_decorator_factory
