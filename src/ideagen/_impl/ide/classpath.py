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
Partitioning of a module's classpath into the kinds of entries an IDE module
distinguishes: references to other modules, libraries from the local
repository, outputs generated inside the module and other external libraries.
"""

from __future__ import annotations

__all__ = [
    "DependencyReference",
    "ProjectReference",
    "RepositoryArtifactPath",
    "GeneratedOutputPath",
    "ExternalFilePath",
    "TreeIndex",
    "Classification",
    "classify",
]

from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional

from ..build.module import Module
from ..support.logging import logvv
from ..support.path import Path, is_under


@dataclass(frozen=True)
class DependencyReference:
    path: Path

    def __str__(self):
        return self.path


@dataclass(frozen=True)
class ProjectReference(DependencyReference):
    module: Module


@dataclass(frozen=True)
class RepositoryArtifactPath(DependencyReference):
    pass


@dataclass(frozen=True)
class GeneratedOutputPath(DependencyReference):
    pass


@dataclass(frozen=True)
class ExternalFilePath(DependencyReference):
    pass


class TreeIndex:
    """
    Read-only snapshot of every module in a build tree, built once per
    generation run before any module is classified.

    Package paths map to the first packageable module declaring them, in
    traversal order.
    """

    def __init__(self, modules: Iterable[Module]):
        self._by_package: Dict[Path, Module] = {}
        for m in modules:
            if not m.is_packageable():
                continue
            for package in m.packages:
                owner = self._by_package.setdefault(package, m)
                if owner is not m:
                    logvv(f'{package} is packaged by both {owner} and {m}, using {owner}')

    @staticmethod
    def of(*roots: Module) -> TreeIndex:
        return TreeIndex(m for root in roots for m in root.walk())

    def module_for_package(self, path: Path) -> Optional[Module]:
        return self._by_package.get(path)


class Classification(NamedTuple):
    project_refs: List[ProjectReference]
    repository_libs: List[RepositoryArtifactPath]
    generated: List[GeneratedOutputPath]
    external_libs: List[ExternalFilePath]


def classify(module: Module, index: TreeIndex, repository_root: Path) -> Classification:
    """
    Partitions the test-compile classpath of `module`. The test classpath is
    used for all source sets because the IDE compiles main and test sources
    with one effective classpath. The module's own compile output is dropped
    so that a module never depends on itself. Each partition keeps classpath
    order and duplicates.
    """
    result = Classification([], [], [], [])
    for path in module.classpath:
        if path == module.target:
            continue
        owner = index.module_for_package(path)
        if owner is not None:
            result.project_refs.append(ProjectReference(path, owner))
        elif is_under(path, repository_root):
            result.repository_libs.append(RepositoryArtifactPath(path))
        elif is_under(path, module.base_dir):
            result.generated.append(GeneratedOutputPath(path))
        else:
            result.external_libs.append(ExternalFilePath(path))
    return result
