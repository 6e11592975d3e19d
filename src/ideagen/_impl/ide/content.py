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

__all__ = [
    "ContentRoot",
    "MAIN_SOURCE",
    "TEST_SOURCE",
    "RESOURCE",
    "EXCLUDED",
    "content_roots",
    "compile_outputs",
]

from typing import List, NamedTuple, Sequence, Tuple

from ..build.module import Module
from ..support.path import MODULE_DIR_URL, file_url, module_url, relative_path
from .classpath import GeneratedOutputPath

MAIN_SOURCE = 'main-source'
TEST_SOURCE = 'test-source'
RESOURCE = 'resource'
EXCLUDED = 'excluded'


class ContentRoot(NamedTuple):
    url: str
    role: str
    test: bool = False


def _module_urls(paths: Sequence[str], module_dir: str) -> List[str]:
    relative = sorted(set(relative_path(p, module_dir) for p in paths))
    return [MODULE_DIR_URL + '/' + p for p in relative]


def content_roots(module: Module, generated: Sequence[GeneratedOutputPath]) -> List[ContentRoot]:
    """
    Gets the content roots of `module` in the order they are declared in the
    module descriptor: main sources (including `generated`), test sources,
    resources and finally the excluded compile output.

    Resources are referenced by absolute file URL since they may lie outside
    the module directory.
    """
    roots = []
    module_dir = module.base_dir
    if module.has_compile_sources():
        main = list(module.sources) + [g.path for g in generated]
        roots += [ContentRoot(url, MAIN_SOURCE) for url in _module_urls(main, module_dir)]
    if module.has_test_sources():
        for group in module.test_sources:
            roots += [ContentRoot(url, TEST_SOURCE, True) for url in _module_urls(group, module_dir)]
    for resource in module.resource_roots():
        roots.append(ContentRoot(file_url(resource.path), RESOURCE, resource.test))
    if module.has_compile_sources():
        roots.append(ContentRoot(module_url(module.target, module_dir), EXCLUDED))
    return roots


def compile_outputs(module: Module) -> List[Tuple[str, str]]:
    """Gets (element name, url) pairs for the compile output directories of `module`."""
    outputs = []
    if module.has_compile_sources():
        outputs.append(('output', module_url(module.target, module.base_dir)))
    if module.has_test_sources():
        outputs.append(('output-test', module_url(module.test_target, module.base_dir)))
    return outputs
