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

__all__ = ["TimeStampFile", "file_mtime", "needs_update"]

from typing import Callable, Iterable, Optional
import time
import os.path as ospath

from .path import Path

MTime = Callable[[Path], Optional[float]]


def file_mtime(path: Path) -> Optional[float]:
    """Gets the modification time of `path` or None if it does not exist."""
    try:
        return ospath.getmtime(path)
    except OSError:
        return None


class TimeStampFile:
    """
    Represents a file and its modification time stamp at the time the TimeStampFile is created.
    The `mtime` function supplies the time stamps, tests pass a synthetic clock.
    """

    path: Path
    timestamp: Optional[float]

    def __init__(self, path: Path, mtime: MTime = file_mtime):
        assert isinstance(path, str), path + ' # type=' + str(type(path))
        self.path = path
        self.timestamp = mtime(path)

    @staticmethod
    def newest(paths: Iterable[Path], mtime: MTime = file_mtime) -> Optional[TimeStampFile]:
        """
        Creates a TimeStampFile for the file in `paths` with the most recent modification time.
        Entries in `paths` that do not correspond to an existing file are ignored.
        """
        ts = None
        for path in paths:
            candidate = TimeStampFile(path, mtime)
            if candidate.timestamp is None:
                continue
            if ts is None or ts.isOlderThan(candidate):
                ts = candidate
        return ts

    def isOlderThan(self, arg: TimeStampFile) -> bool:
        if self.timestamp is None:
            return True
        if arg.timestamp is None:
            return False
        return arg.timestamp > self.timestamp

    def exists(self) -> bool:
        return self.timestamp is not None

    def __str__(self) -> str:
        if self.timestamp is not None:
            ts = time.strftime('[%Y-%m-%d %H:%M:%S]', time.localtime(self.timestamp))
        else:
            ts = '[does not exist]'
        return self.path + ts


def needs_update(path: Path, inputs: Iterable[Path], mtime: MTime = file_mtime) -> Optional[str]:
    """
    Determines if the file denoted by `path` does not exist or is older than the
    newest existing file in `inputs`. A time stamp equal to the newest input does
    not require an update.
    Returns a string describing why `path` needs updating or None if it does not need updating.
    """
    ts = TimeStampFile(path, mtime)
    if not ts.exists():
        return path + ' does not exist'
    newestInput = TimeStampFile.newest(inputs, mtime)
    if newestInput and ts.isOlderThan(newestInput):
        return f'{ts} is older than {newestInput}'
    return None
