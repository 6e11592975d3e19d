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
The ideagen package.

Proxy for the public surface of the implementation in `_impl`.

DO NOT WRITE IMPLEMENTATION CODE HERE.
"""

from ._impl.build.graph import BuildGraph, load_graph, parse_graph
from ._impl.build.module import Module, ResourceRoot
from ._impl.ide.classpath import (
    Classification,
    ExternalFilePath,
    GeneratedOutputPath,
    ProjectReference,
    RepositoryArtifactPath,
    TreeIndex,
    classify,
)
from ._impl.ide.content import content_roots
from ._impl.ide.idea7x import Idea7xConfig, idea7x, idea7x_clean
from ._impl.ide.module_descriptor import ModuleDescriptorWriter, render_module
from ._impl.ide.project_descriptor import ProjectDescriptorWriter, ProjectTemplate
from ._impl.ideagen import main, version
from ._impl.support.errors import (
    BuildGraphError,
    DescriptorWriteError,
    IdeaGenError,
    InvalidRelativePathError,
    MissingTemplateAssetError,
)
from ._impl.support.path import module_path, normalize_path, project_path, relative_path, repository_path
