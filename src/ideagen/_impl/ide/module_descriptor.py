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
Generation of IntelliJ IDEA 7.x module files (.iml), one per packageable module.
"""

from __future__ import annotations

__all__ = [
    "IML_CLASSIFIER",
    "IML_SUFFIX",
    "OrderEntry",
    "ModuleDescriptorWriter",
    "module_file_name",
    "order_entries",
    "render_module",
]

from typing import Iterable, List, NamedTuple, Optional

from ..build.module import Module
from ..ideagen_util import write_file
from ..support.logging import logv, logvv
from ..support.path import MODULE_DIR_URL, Path, module_path, normalize_path, repository_path
from ..support.timestampfile import MTime, file_mtime, needs_update
from ..support.xmldoc import XMLDoc
from .classpath import Classification, TreeIndex, classify
from .content import EXCLUDED, compile_outputs, content_roots

IML_CLASSIFIER = '-7x'
IML_SUFFIX = IML_CLASSIFIER + '.iml'

SOURCE_FOLDER = 'sourceFolder'
INHERITED_JDK = 'inheritedJdk'
MODULE = 'module'
MODULE_LIBRARY = 'module-library'


class OrderEntry(NamedTuple):
    kind: str
    target: str = ''


def module_file_name(module: Module) -> str:
    return module.id + IML_SUFFIX


def library_paths(module: Module, classification: Classification, repository_root: Path) -> List[str]:
    """
    Gets the locations of the module libraries: external libraries relative to
    the module directory token, followed by repository libraries relative to
    the repository token.
    """
    external = [module_path(normalize_path(lib.path, module.base_dir), module.base_dir) for lib in classification.external_libs]
    repository = [repository_path(lib.path, repository_root) for lib in classification.repository_libs]
    return external + repository


def order_entries(module: Module, classification: Classification, repository_root: Path) -> List[OrderEntry]:
    entries = [OrderEntry(SOURCE_FOLDER), OrderEntry(INHERITED_JDK)]
    for module_id in sorted(set(ref.module.id for ref in classification.project_refs)):
        entries.append(OrderEntry(MODULE, module_id + IML_CLASSIFIER))
    for path in library_paths(module, classification, repository_root):
        entries.append(OrderEntry(MODULE_LIBRARY, path))
    return entries


def _write_order_entry(xml: XMLDoc, entry: OrderEntry):
    if entry.kind == SOURCE_FOLDER:
        xml.element('orderEntry', attributes={'type': SOURCE_FOLDER, 'forTests': 'false'})
    elif entry.kind == INHERITED_JDK:
        xml.element('orderEntry', attributes={'type': INHERITED_JDK})
    elif entry.kind == MODULE:
        xml.element('orderEntry', attributes={'type': MODULE, 'module-name': entry.target})
    else:
        assert entry.kind == MODULE_LIBRARY, entry
        xml.open('orderEntry', attributes={'type': MODULE_LIBRARY})
        xml.open('library')
        xml.open('CLASSES')
        xml.element('root', attributes={'url': 'jar://' + entry.target + '!/'})
        xml.close('CLASSES')
        xml.element('JAVADOC')
        xml.element('SOURCES')
        xml.close('library')
        xml.close('orderEntry')


def render_module(module: Module, classification: Classification, repository_root: Path) -> str:
    """Renders the module file of `module` for an already classified classpath."""
    xml = XMLDoc()
    xml.open('module', attributes={'version': '4', 'relativePaths': 'true', 'type': 'JAVA_MODULE'})
    xml.open('component', attributes={'name': 'NewModuleRootManager', 'inherit-compiler-output': 'false'})

    for tag, url in compile_outputs(module):
        xml.element(tag, attributes={'url': url})

    xml.open('content', attributes={'url': MODULE_DIR_URL})
    for root in content_roots(module, classification.generated):
        if root.role == EXCLUDED:
            xml.element('excludeFolder', attributes={'url': root.url})
        else:
            xml.element('sourceFolder', attributes={'url': root.url, 'isTestSource': str(root.test).lower()})
    xml.close('content')

    for entry in order_entries(module, classification, repository_root):
        _write_order_entry(xml, entry)
    xml.element('orderEntryProperties')

    xml.close('component')
    xml.close('module')
    return xml.xml(indent='  ', newl='\n')


class ModuleDescriptorWriter:
    """
    Writes the module file of a module when it is missing or older than one of
    the build input files. Any change to an input regenerates every module file,
    individual dependencies and source roots are not tracked.
    """

    def __init__(self, index: TreeIndex, repository_root: Path, mtime: MTime = file_mtime, force: bool = False):
        self.index = index
        self.repository_root = repository_root
        self.mtime = mtime
        self.force = force

    def descriptor_file(self, module: Module) -> Path:
        return module.path_to(module_file_name(module))

    def render(self, module: Module) -> str:
        return render_module(module, classify(module, self.index, self.repository_root), self.repository_root)

    def stale_reason(self, module: Module, sources: Iterable[Path]) -> Optional[str]:
        path = self.descriptor_file(module)
        if self.force:
            return 'regeneration forced'
        return needs_update(path, sources, self.mtime)

    def write_if_stale(self, module: Module, sources: Iterable[Path]) -> bool:
        """
        Writes the module file of `module` if it is stale with respect to `sources`.
        Modules without packages have no module file.
        Returns True if the file was written.
        """
        if not module.is_packageable():
            logvv(f'Skipping {module}: it declares no packages')
            return False
        path = self.descriptor_file(module)
        reason = self.stale_reason(module, sources)
        if reason is None:
            logvv(f'{path} is up to date')
            return False
        logvv(reason)
        content = self.render(module)
        logv(f'Writing {path}')
        write_file(path, content)
        return True
