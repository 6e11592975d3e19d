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

__all__ = ["Module", "ResourceRoot"]

import os.path
from typing import Iterator, List, NamedTuple, Optional, Sequence

from ..support.path import Path


class ResourceRoot(NamedTuple):
    path: Path
    test: bool


class Module(object):
    """
    One node of the build tree, as handed over by the build graph. The
    descriptor generators only read modules, they never modify them.
    """

    name: str
    base_dir: Path
    parent: Optional[Module]
    modules: List[Module]
    sources: Sequence[Path]
    test_sources: Sequence[Sequence[Path]]
    """Test source roots, one group per declaring source set."""
    resources: Sequence[Path]
    test_resources: Sequence[Path]
    target: Path
    """Compile output directory, empty if the module has no main sources."""
    test_target: Path
    classpath: Sequence[Path]
    """Resolved test-compile classpath, in classpath order."""
    packages: Sequence[Path]
    build_file: Optional[Path]

    def __init__(self, name: str, base_dir: Path, parent: Optional[Module] = None,
                 sources=(), test_sources=(), resources=(), test_resources=(),
                 target: Path = '', test_target: Path = '', classpath=(), packages=(),
                 build_file: Optional[Path] = None):
        self.name = name
        self.base_dir = base_dir
        self.parent = parent
        self.modules = []
        self.sources = list(sources)
        self.test_sources = [list(group) for group in test_sources]
        self.resources = list(resources)
        self.test_resources = list(test_resources)
        self.target = target
        self.test_target = test_target
        self.classpath = list(classpath)
        self.packages = list(packages)
        self.build_file = build_file
        if parent is not None:
            parent.modules.append(self)

    @property
    def id(self) -> str:
        """The module name usable as a file name."""
        return self.name.replace(':', '-')

    def path_to(self, *names: str) -> Path:
        return os.path.join(self.base_dir, *names)

    def is_packageable(self) -> bool:
        return len(self.packages) != 0

    def has_compile_sources(self) -> bool:
        return len(self.target) > 0

    def has_test_sources(self) -> bool:
        return len(self.test_target) > 0

    def resource_roots(self) -> Iterator[ResourceRoot]:
        for path in self.resources:
            yield ResourceRoot(path, False)
        for path in self.test_resources:
            yield ResourceRoot(path, True)

    def descendants(self) -> Iterator[Module]:
        """All modules below this one, each child followed by its own descendants."""
        for child in self.modules:
            yield child
            yield from child.descendants()

    def walk(self) -> Iterator[Module]:
        yield self
        yield from self.descendants()

    def __abort_context__(self) -> str:
        return f'  in definition of module {self.name} ({self.base_dir})'

    def __eq__(self, other):
        if not isinstance(other, Module):
            return NotImplemented
        return self.name == other.name

    def __ne__(self, other):
        if not isinstance(other, Module):
            return NotImplemented
        return self.name != other.name

    def __lt__(self, other):
        if not isinstance(other, Module):
            return NotImplemented
        return self.name < other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'Module({self.name})'
