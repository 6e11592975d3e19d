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

__all__ = ["get_env", "env_var_to_bool", "str_to_bool", "local_repository_default"]

import os
from typing import Optional

from .logging import abort

_true_values = ("true", "1", "yes")
_false_values = ("false", "0", "no")


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Gets the value of the environment variable `key`, or `default` if it is not set."""
    return os.environ.get(key, default)


def str_to_bool(val: str) -> bool:
    if val.lower() in _true_values:
        return True
    if val.lower() in _false_values:
        return False
    abort(f"Cannot interpret '{val}' as a boolean, expected one of: " + ", ".join(_true_values + _false_values))


def env_var_to_bool(name: str, default: str = "false") -> bool:
    """Interprets the environment variable `name` as a boolean. An empty value counts as unset."""
    return str_to_bool(get_env(name) or default)


def local_repository_default() -> str:
    """
    Gets the local repository root used when neither the build graph nor the
    command line names one.
    """
    return get_env("IDEAGEN_LOCAL_REPOSITORY", os.path.join("~", ".m2", "repository"))
