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
r"""
helper functions for expressing paths the way IDE descriptors refer to them

None of these functions access the file system, they only compute strings.
"""

import os
import os.path as ospath

from .errors import InvalidRelativePathError
from .system import is_windows

Path = str

FILE_PATH_PREFIX = 'file://'
MODULE_DIR = '$MODULE_DIR$'
MODULE_DIR_URL = FILE_PATH_PREFIX + MODULE_DIR
PROJECT_DIR = '$PROJECT_DIR$'
REPOSITORY_DIR = '$M2_REPO$'


def normalize_path(path: Path, *dirs: Path) -> Path:
    """
    Expands `path` to an absolute, normalized path. Relative paths are resolved
    against the last entry of `dirs` (itself resolved against the entries before
    it) or the working directory if `dirs` is empty. On Windows the drive letter
    is upper-cased so that equal paths compare equal as strings.
    """
    base = None
    for d in dirs:
        base = ospath.join(base, ospath.expanduser(d)) if base else ospath.expanduser(d)
    path = ospath.expanduser(path)
    if base and not ospath.isabs(path):
        path = ospath.join(base, path)
    path = ospath.normpath(ospath.abspath(path))
    if is_windows():
        drive, rest = ospath.splitdrive(path)
        path = drive.upper() + rest
    return path


def _portable(path: Path) -> Path:
    return path.replace(os.sep, '/') if os.sep != '/' else path


def relative_path(path: Path, base: Path) -> Path:
    """
    Gets `path` expressed relative to `base`, using '/' as separator.
    Raises InvalidRelativePathError if the two paths share no common base.
    """
    if ospath.isabs(path) != ospath.isabs(base):
        raise InvalidRelativePathError(path, base, 'different prefix')
    if ospath.normcase(ospath.splitdrive(path)[0]) != ospath.normcase(ospath.splitdrive(base)[0]):
        raise InvalidRelativePathError(path, base, 'different drive')
    try:
        return _portable(ospath.relpath(path, base))
    except ValueError as e:
        raise InvalidRelativePathError(path, base, str(e)) from e


def is_under(path: Path, root: Path) -> bool:
    """
    Determines if `path` is `root` or lies below it. The test is a path prefix
    test on whole path components, the file system is not consulted.
    """
    path = ospath.normcase(path)
    root = ospath.normcase(root).rstrip('/\\')
    if not root:
        return ospath.isabs(path)
    return path == root or path.startswith(root + os.sep) or path.startswith(root + '/')


def repository_path(path: Path, repository_root: Path) -> Path:
    """
    Replaces the `repository_root` prefix of `path` with the repository token.
    Paths outside the repository are returned unchanged.
    """
    if not is_under(path, repository_root):
        return path
    rest = path[len(repository_root.rstrip('/\\')):]
    return REPOSITORY_DIR + _portable(rest)


def module_path(path: Path, module_dir: Path) -> Path:
    """Gets `path` as a location relative to the module directory token."""
    return MODULE_DIR + '/' + relative_path(path, module_dir)


def module_url(path: Path, module_dir: Path) -> Path:
    return MODULE_DIR_URL + '/' + relative_path(path, module_dir)


def project_path(path: Path, project_dir: Path) -> Path:
    """Gets `path` as a location relative to the project directory token."""
    return PROJECT_DIR + '/' + relative_path(path, project_dir)


def file_url(path: Path) -> Path:
    return FILE_PATH_PREFIX + _portable(path)
