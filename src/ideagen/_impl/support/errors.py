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

__all__ = [
    "IdeaGenError",
    "InvalidRelativePathError",
    "MissingTemplateAssetError",
    "DescriptorWriteError",
    "BuildGraphError",
]


class IdeaGenError(Exception):
    pass


class InvalidRelativePathError(IdeaGenError):
    """Two paths share no common base, so one cannot be expressed relative to the other."""

    def __init__(self, path: str, base: str, reason: str = "no common base"):
        IdeaGenError.__init__(self, f"cannot express {path} relative to {base}: {reason}")
        self.path = path
        self.base = base


class MissingTemplateAssetError(IdeaGenError):
    pass


class DescriptorWriteError(IdeaGenError):
    def __init__(self, path: str, cause: OSError):
        IdeaGenError.__init__(self, f"Error while writing to {path}: {cause}")
        self.path = path
        self.cause = cause


class BuildGraphError(IdeaGenError):
    pass
