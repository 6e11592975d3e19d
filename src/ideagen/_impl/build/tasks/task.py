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

from __future__ import annotations
from abc import ABCMeta, abstractmethod
from argparse import Namespace
from typing import List

from ..module import Module
from ...support.errors import IdeaGenError
from ...support.logging import log_error, nyi, setLogTask
from ...support.options import _opts

__all__ = ["Task", "TaskAbortException", "run_tasks"]

Args = Namespace


class TaskAbortException(Exception):
    pass


class Task(object, metaclass=ABCMeta):
    """A unit of descriptor generation for one module."""

    subject: Module
    args: Args

    def __init__(self, subject: Module, args: Args):
        """
        :param subject: the module for which this task is executed
        :param args: arguments of the command running the task
        """
        self.subject = subject
        self.args = args

    def __str__(self) -> str:
        return nyi('__str__', self)

    def __repr__(self) -> str:
        return str(self)

    @property
    def name(self) -> str:
        return self.subject.name

    def enter(self):
        setLogTask(self)

    def leave(self):
        setLogTask(None)

    def log(self, msg):
        """Receives the console output produced while this task is the current log task."""
        if msg is not None and not _opts.quiet:
            print(msg)

    def abort(self, code):
        raise TaskAbortException(code)

    @abstractmethod
    def execute(self) -> None:
        """Executes this task."""


def run_tasks(tasks: List[Task]) -> List[Task]:
    """
    Executes `tasks` in order. A failing task does not prevent the following
    tasks from running.
    Returns the tasks that failed.
    """
    failed = []
    for t in tasks:
        t.enter()
        try:
            t.execute()
        except TaskAbortException:
            failed.append(t)
        except IdeaGenError as e:
            failed.append(t)
            log_error(f'{t.name}: {e}')
        finally:
            t.leave()
    return failed
