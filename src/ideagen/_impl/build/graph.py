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
Loading of a resolved build graph handed over by the build tool as a JSON
document. A minimal document looks like::

    {
        "localRepository": "~/.m2/repository",
        "buildFiles": ["build.yaml"],
        "buildfile": "Buildfile",
        "modules": [{
            "name": "core",
            "packages": ["target/core-1.0.jar"],
            "modules": [{
                "name": "util",
                "sources": ["src/main/java"],
                "testSources": ["src/test/java"],
                "target": "target/classes",
                "testTarget": "target/test-classes",
                "classpath": [{"project": "core"}, "~/.m2/repository/org/x/x-1.0.jar"],
                "packages": ["target/core-util-1.0.jar"]
            }]
        }]
    }

Paths are resolved against the directory of the document, module paths
against the module's base directory. A child module's base directory defaults
to a directory named after it in its parent's base directory.
"""

from __future__ import annotations

__all__ = ["BuildGraph", "load_graph", "parse_graph"]

import json
import os.path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..support.envvars import local_repository_default
from ..support.errors import BuildGraphError
from ..support.logging import logv, warn
from ..support.path import Path, normalize_path
from .module import Module

_module_keys = frozenset([
    'name',
    'baseDir',
    'sources',
    'testSources',
    'resources',
    'testResources',
    'target',
    'testTarget',
    'classpath',
    'packages',
    'buildFile',
    'modules',
])


class BuildGraph:
    """
    The module trees of a build together with the build-wide settings the
    descriptor generators depend on.
    """

    roots: List[Module]
    local_repository: Path
    build_files: List[Path]
    """Files whose modification makes every generated descriptor stale."""
    buildfile: Optional[Path]
    """The top-level build definition file."""

    def __init__(self, roots: List[Module], local_repository: Path, build_files: List[Path], buildfile: Optional[Path] = None):
        self.roots = roots
        self.local_repository = local_repository
        self.build_files = build_files
        self.buildfile = buildfile

    def modules(self) -> Iterator[Module]:
        for root in self.roots:
            yield from root.walk()

    def module(self, name: str) -> Module:
        for m in self.modules():
            if m.name == name:
                return m
        raise BuildGraphError(f'no module named {name} in the build graph')

    def module_sources(self, module: Module) -> List[Path]:
        """Gets the build input files that make the module file of `module` stale."""
        sources = list(self.build_files)
        if self.buildfile:
            sources.append(self.buildfile)
        if module.build_file:
            sources.append(module.build_file)
        return sources

    def tree_sources(self, root: Module) -> List[Path]:
        """Gets the build input files of every module in the tree of `root`."""
        sources = []
        for m in root.walk():
            for source in self.module_sources(m):
                if source not in sources:
                    sources.append(source)
        return sources


def _paths(d: Dict[str, Any], key: str, base_dir: Path, context: str) -> List[Path]:
    value = d.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise BuildGraphError(f'{context}: "{key}" must be a list of paths')
    return [normalize_path(v, base_dir) for v in value]


def _path(d: Dict[str, Any], key: str, base_dir: Path, context: str) -> Path:
    value = d.get(key, '')
    if not isinstance(value, str):
        raise BuildGraphError(f'{context}: "{key}" must be a path')
    return normalize_path(value, base_dir) if value else ''


def _test_source_groups(d: Dict[str, Any], base_dir: Path, context: str) -> List[List[Path]]:
    value = d.get('testSources', [])
    if not isinstance(value, list):
        raise BuildGraphError(f'{context}: "testSources" must be a list')
    if all(isinstance(v, str) for v in value):
        return [[normalize_path(v, base_dir) for v in value]] if value else []
    groups = []
    for group in value:
        if not isinstance(group, list) or not all(isinstance(v, str) for v in group):
            raise BuildGraphError(f'{context}: "testSources" must be a list of paths or a list of path lists')
        groups.append([normalize_path(v, base_dir) for v in group])
    return groups


class _Parser:
    def __init__(self, doc_dir: Path):
        self.doc_dir = doc_dir
        self.by_name: Dict[str, Module] = {}
        # (module, position in classpath, referenced module name)
        self.project_refs: List[Tuple[Module, int, str]] = []

    def parse_module(self, d: Any, parent: Optional[Module]) -> Module:
        if not isinstance(d, dict) or not isinstance(d.get('name'), str) or not d['name']:
            raise BuildGraphError(f'module definitions need a "name" (in {parent or "the top level"})')
        short_name = d['name']
        name = short_name if parent is None or short_name.startswith(parent.name + ':') else parent.name + ':' + short_name
        context = f'module {name}'
        if name in self.by_name:
            raise BuildGraphError(f'{context} is defined more than once')
        if 'baseDir' in d:
            base_dir = normalize_path(d['baseDir'], parent.base_dir if parent else self.doc_dir)
        elif parent is None:
            base_dir = self.doc_dir
        else:
            base_dir = os.path.join(parent.base_dir, name.split(':')[-1])

        classpath = []
        refs = []
        for i, entry in enumerate(d.get('classpath', [])):
            if isinstance(entry, str):
                classpath.append(normalize_path(entry, base_dir))
            elif isinstance(entry, dict) and isinstance(entry.get('project'), str):
                classpath.append(None)
                refs.append((i, entry['project']))
            else:
                raise BuildGraphError(f'{context}: unsupported classpath entry {entry!r}')

        build_file = d.get('buildFile')
        module = Module(
            name,
            base_dir,
            parent=parent,
            sources=_paths(d, 'sources', base_dir, context),
            test_sources=_test_source_groups(d, base_dir, context),
            resources=_paths(d, 'resources', base_dir, context),
            test_resources=_paths(d, 'testResources', base_dir, context),
            target=_path(d, 'target', base_dir, context),
            test_target=_path(d, 'testTarget', base_dir, context),
            classpath=classpath,
            packages=_paths(d, 'packages', base_dir, context),
            build_file=normalize_path(build_file, base_dir) if build_file else None,
        )
        unknown = sorted(set(d.keys()) - _module_keys)
        if unknown:
            warn("unsupported attributes: " + ", ".join(unknown), context=module)
        self.by_name[name] = module
        self.project_refs += [(module, i, ref) for i, ref in refs]
        children = d.get('modules', [])
        if not isinstance(children, list):
            raise BuildGraphError(f'{context}: "modules" must be a list')
        for child in children:
            self.parse_module(child, module)
        return module

    def resolve_project_refs(self):
        for module, i, ref in self.project_refs:
            target = self.by_name.get(ref)
            if target is None:
                raise BuildGraphError(f'module {module.name}: classpath refers to unknown module {ref}')
            if not target.is_packageable():
                raise BuildGraphError(f'module {module.name}: classpath refers to {ref} which declares no packages')
            module.classpath[i] = target.packages[0]


def parse_graph(doc: Any, doc_dir: Path, local_repository: Optional[Path] = None) -> BuildGraph:
    """
    Creates a BuildGraph from a decoded graph document. `local_repository`
    overrides the repository root named in the document.
    """
    if not isinstance(doc, dict):
        raise BuildGraphError('the build graph must be a JSON object')
    parser = _Parser(doc_dir)
    modules = doc.get('modules', [])
    if not isinstance(modules, list) or not modules:
        raise BuildGraphError('the build graph must define at least one module in "modules"')
    roots = [parser.parse_module(d, None) for d in modules]
    parser.resolve_project_refs()

    repository = local_repository or doc.get('localRepository') or local_repository_default()
    build_files = _paths(doc, 'buildFiles', doc_dir, 'build graph')
    buildfile = doc.get('buildfile')
    return BuildGraph(
        roots,
        normalize_path(repository, doc_dir),
        build_files,
        normalize_path(buildfile, doc_dir) if buildfile else None,
    )


def load_graph(path: Path, local_repository: Optional[Path] = None) -> BuildGraph:
    path = normalize_path(path)
    try:
        with open(path, 'r', encoding='utf-8') as fp:
            doc = json.load(fp)
    except OSError as e:
        raise BuildGraphError(f'Cannot read build graph {path}: {e}') from e
    except ValueError as e:
        raise BuildGraphError(f'{path} is not a valid build graph document: {e}') from e
    logv(f'Loaded build graph from {path}')
    return parse_graph(doc, os.path.dirname(path), local_repository)
