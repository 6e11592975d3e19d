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
Console output of ideagen. Everything printed goes through these functions so
that verbosity options apply uniformly and a running task can receive the
output produced on its behalf.
"""

from __future__ import annotations

__all__ = [
    "abort",
    "colorize",
    "getLogTask",
    "log",
    "log_error",
    "logv",
    "logvv",
    "nyi",
    "setLogTask",
    "warn",
]

import sys
import threading
import traceback
from typing import Any, NoReturn, Optional

from .options import _opts

_colors = {
    "red": "31",
    "green": "32",
    "yellow": "33",
    "magenta": "35",
}

_current = threading.local()


def setLogTask(task):
    _current.task = task


def getLogTask():
    return getattr(_current, "task", None)


def _emit(msg: Optional[str], end: str, file) -> None:
    print("" if msg is None else msg, end=end, file=file or sys.stdout)


def log(msg: Optional[str] = None, end: str = "\n", file=None) -> None:
    """
    Prints `msg` unless --quiet was given. While a task is running, the
    message is handed to the task instead.
    """
    task = getLogTask()
    if task is not None:
        task.log(msg)
    elif not _opts.quiet:
        _emit(None if msg is None else str(msg), end, file)


def logv(msg: Optional[str] = None, end: str = "\n") -> None:
    if _opts.verbose or _opts.very_verbose:
        log(msg, end=end)


def logvv(msg: Optional[str] = None, end: str = "\n") -> None:
    if _opts.very_verbose:
        log(msg, end=end)


def log_error(msg: Optional[str] = None, end: str = "\n") -> None:
    """Prints `msg` to stderr in red. Errors are printed even with --quiet."""
    _emit(colorize(None if msg is None else str(msg), stream=sys.stderr), end, sys.stderr)


def colorize(msg: Optional[str], color: str = "red", bright: bool = True, stream=None) -> Optional[str]:
    """
    Wraps `msg` in the ANSI escape sequences for `color` if `stream` is a
    terminal on a platform known to interpret them. Otherwise, or if `msg` is
    already colored, `msg` is returned unchanged.
    """
    if msg is None:
        return None
    stream = stream or sys.stderr
    if color not in _colors:
        abort(f"Unsupported color: {color}. Supported colors are: {', '.join(_colors)}")
    on = "\033[" + _colors[color] + (";1" if bright else "") + "m"
    if msg.startswith(on):
        return msg
    ansi_platform = sys.platform.startswith("linux") or sys.platform in ("darwin", "freebsd")
    if ansi_platform and getattr(stream, "isatty", lambda: False)():
        return on + msg + "\033[0m"
    return msg


def _context_message(context) -> str:
    if context is None:
        return ""
    if callable(context):
        return context()
    if hasattr(context, "__abort_context__"):
        return context.__abort_context__()
    return str(context)


def warn(msg: str, context=None) -> None:
    """Prints a warning to stderr unless --no-warning or --quiet was given."""
    if not _opts.warn or _opts.quiet:
        return
    prefix = _context_message(context)
    if prefix:
        msg = prefix + ":\n" + msg
    msg = colorize("WARNING: " + msg, color="magenta", stream=sys.stderr)
    task = getLogTask()
    if task is not None:
        task.log(msg)
    else:
        _emit(msg, "\n", sys.stderr)


def abort(codeOrMessage: str | int, context=None) -> NoReturn:
    """
    Stops the current command. An int is used as exit status, anything else
    is printed and exits with status 1. `context` is printed in front of the
    message: a callable is called, an object with an `__abort_context__`
    method provides its own text, anything else is converted with str().

    Inside a running task only that task is aborted.
    """
    from .system import is_continuous_integration

    sys.stdout.flush()
    if is_continuous_integration() or _opts.verbose:
        traceback.print_stack()

    prefix = _context_message(context)
    if isinstance(codeOrMessage, int):
        message, code = prefix, codeOrMessage
    else:
        message, code = (prefix + ":\n" + codeOrMessage) if prefix else codeOrMessage, 1

    task = getLogTask()
    if task is not None:
        if message:
            task.log(message)
        task.abort(code)
    if message:
        log_error(message)
    raise SystemExit(code)


def nyi(name: str, obj: Any) -> NoReturn:
    """Aborts because `name` is not implemented by the class of `obj`."""
    abort(f"{name} is not implemented for {type(obj).__name__}")
