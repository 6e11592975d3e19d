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

__all__ = ["ensure_dir_exists", "write_file", "remove_file"]

import errno
import os
from os.path import dirname, isdir

from .support.errors import DescriptorWriteError
from .support.logging import logv


def ensure_dir_exists(path):
    """
    Ensures all directories on 'path' exists, creating them first if necessary with os.makedirs().
    """
    if not isdir(path):
        try:
            os.makedirs(path)
        except OSError as e:
            if e.errno == errno.EEXIST and isdir(path):
                # be happy if another thread already created the path
                pass
            else:
                raise e
    return path


def write_file(path, content):
    """
    Writes `content` to `path`, replacing any existing file. The write is not
    atomic, an interrupted write can leave a truncated file behind.
    """
    try:
        parent = dirname(path)
        if parent:
            ensure_dir_exists(parent)
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
    except OSError as e:
        raise DescriptorWriteError(path, e) from e


def remove_file(path):
    """Removes `path` if it exists. Returns True if a file was removed."""
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise DescriptorWriteError(path, e) from e
    logv('removed ' + path)
    return True
