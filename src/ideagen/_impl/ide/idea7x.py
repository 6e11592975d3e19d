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
The `idea7x` commands: generation and removal of the IntelliJ IDEA 7.x
descriptors of a build.
"""

from __future__ import annotations

__all__ = [
    "Idea7xConfig",
    "DescriptorTask",
    "ModuleDescriptorTask",
    "ProjectDescriptorTask",
    "idea7x",
    "idea7x_clean",
    "idea7x_tasks",
]

import os
from abc import abstractmethod
from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from typing import List, Optional

from ..build.graph import BuildGraph, load_graph
from ..build.module import Module
from ..build.tasks.task import Task, run_tasks
from ..commands import command
from ..ideagen_util import remove_file
from ..support.envvars import get_env
from ..support.logging import abort, log, logv
from ..support.options import _opts
from ..support.timestampfile import MTime, file_mtime
from .classpath import TreeIndex
from .module_descriptor import ModuleDescriptorWriter
from .project_descriptor import ProjectDescriptorWriter

_default_graph = 'buildgraph.json'


@dataclass
class Idea7xConfig:
    project: Optional[str] = None
    force: bool = False
    graph: Optional[str] = None
    local_repository: Optional[str] = None


class DescriptorTask(Task):
    """Writes one descriptor file of a module if it is missing or stale."""

    def __init__(self, subject: Module, args: Namespace, writer, graph: BuildGraph):
        super(DescriptorTask, self).__init__(subject, args)
        self.writer = writer
        self.graph = graph
        self.written = False

    def __str__(self) -> str:
        return f'Generating {self.writer.descriptor_file(self.subject)}'

    @abstractmethod
    def sources(self) -> List[str]:
        """The build input files the descriptor is checked against."""

    def execute(self) -> None:
        self.written = self.writer.write_if_stale(self.subject, self.sources())


class ModuleDescriptorTask(DescriptorTask):
    def sources(self) -> List[str]:
        return self.graph.module_sources(self.subject)


class ProjectDescriptorTask(DescriptorTask):
    """
    Writes the project file of a tree root. It only depends on the module tree,
    not on the module files, so it runs whether or not they could be written.
    """

    def sources(self) -> List[str]:
        return self.graph.tree_sources(self.subject)


def idea7x_tasks(graph: BuildGraph, config: Idea7xConfig, mtime: MTime = file_mtime, template: Optional[str] = None) -> List[DescriptorTask]:
    """
    Creates the tasks generating the descriptors of every module of `graph`,
    or of the single module named by `config.project`. The project file task
    of a root follows the module file tasks of its tree.
    """
    index = TreeIndex.of(*graph.roots)
    module_writer = ModuleDescriptorWriter(index, graph.local_repository, mtime=mtime, force=config.force)
    project_writer = ProjectDescriptorWriter(template=template, mtime=mtime, force=config.force)
    args = Namespace(**vars(config))
    if config.project:
        trees = [[graph.module(config.project)]]
    else:
        trees = [list(root.walk()) for root in graph.roots]
    tasks = []
    for modules in trees:
        tasks += [ModuleDescriptorTask(m, args, module_writer, graph) for m in modules]
        if modules[0].parent is None:
            tasks.append(ProjectDescriptorTask(modules[0], args, project_writer, graph))
    return tasks


def idea7x(graph: BuildGraph, config: Idea7xConfig, mtime: MTime = file_mtime, template: Optional[str] = None) -> List[Task]:
    """
    Generates the descriptors of `graph` that are missing or stale.
    Returns the tasks that failed.
    """
    tasks = idea7x_tasks(graph, config, mtime=mtime, template=template)
    failed = run_tasks(tasks)
    written = sum(1 for t in tasks if t.written)
    logv(f'{written} of {len(tasks)} descriptor(s) written')
    return failed


def idea7x_clean(graph: BuildGraph, config: Idea7xConfig) -> int:
    """
    Removes the descriptors `idea7x` would generate for `graph`.
    Returns the number of files removed.
    """
    module_writer = ModuleDescriptorWriter(TreeIndex.of(*graph.roots), graph.local_repository)
    project_writer = ProjectDescriptorWriter()
    modules = [graph.module(config.project)] if config.project else list(graph.modules())
    removed = 0
    for m in modules:
        if remove_file(module_writer.descriptor_file(m)):
            removed += 1
        if m.parent is None and remove_file(project_writer.descriptor_file(m)):
            removed += 1
    return removed


def _parse_config(prog: str, args: List[str], defaults_var: Optional[str] = None) -> Idea7xConfig:
    parser = ArgumentParser(prog=prog)
    parser.add_argument('--project', action='store', metavar='<name>', help='only process the module with the given name')
    parser.add_argument('--force', action='store_true', help='regenerate descriptors even if they are up to date')
    extra_args = []
    if defaults_var:
        extra_args = get_env(defaults_var, '').split()
        if extra_args:
            log(f"Applying extra arguments from {defaults_var} environment variable")
    config = parser.parse_args(extra_args + args, namespace=Idea7xConfig())
    config.graph = _opts.graph or _default_graph
    config.local_repository = _opts.local_repository
    return config


@command('idea7x', '[options]')
def idea7x_cli(args):
    """(re)generate IntelliJ IDEA 7.x module and project files

The build graph is read from the file given with the global -g option
(default: buildgraph.json). Only files that are missing or older than
one of the build input files are written, unless --force is given."""
    config = _parse_config('ideagen idea7x', args, 'IDEAGEN_IDEA7X_DEFAULTS')
    graph = load_graph(config.graph, config.local_repository)
    failed = idea7x(graph, config)
    if failed:
        abort(f'{len(failed)} descriptor(s) could not be written:' + os.linesep + os.linesep.join(f'  {t}' for t in failed))


@command('idea7x-clean', '[options]')
def idea7x_clean_cli(args):
    """remove the IntelliJ IDEA 7.x files generated by idea7x"""
    config = _parse_config('ideagen idea7x-clean', args)
    graph = load_graph(config.graph, config.local_repository)
    removed = idea7x_clean(graph, config)
    log(f'Removed {removed} file(s)')
