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

__all__ = ["_opts", "set_defaults"]

from argparse import Namespace

_defaults = {
    "verbose": False,
    "very_verbose": False,
    "warn": True,
    "quiet": False,
    "graph": None,
    "local_repository": None,
}

_opts = Namespace(**_defaults)
"""
The parsed global command line options. Holds the defaults until the
command line has been parsed so that logging works when the package is
used as a library.
"""


def set_defaults() -> None:
    """Resets the global options to their default values."""
    for key, value in _defaults.items():
        setattr(_opts, key, value)
