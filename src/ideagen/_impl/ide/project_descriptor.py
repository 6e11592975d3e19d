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
Generation of the IntelliJ IDEA 7.x project file (.ipr) of a build tree.

Only the module list differs from one tree to another. It is rendered on its
own and appended to a fixed template as the last child of the template's root
element, leaving the rest of the template untouched.
"""

from __future__ import annotations

__all__ = [
    "IPR_SUFFIX",
    "IPR_TEMPLATE",
    "ProjectTemplate",
    "ProjectDescriptorWriter",
    "module_entries",
    "render_modules_fragment",
]

import re
from os.path import dirname, join
from typing import Iterable, List, Optional, Tuple
from xml.etree.ElementTree import ParseError

import defusedxml
from defusedxml.ElementTree import fromstring as etreeFromString

from ..build.module import Module
from ..ideagen_util import write_file
from ..support.errors import MissingTemplateAssetError
from ..support.logging import logv, logvv
from ..support.path import FILE_PATH_PREFIX, Path, project_path
from ..support.timestampfile import MTime, file_mtime, needs_update
from ..support.xmldoc import XMLDoc
from .module_descriptor import IML_CLASSIFIER, module_file_name

IPR_SUFFIX = IML_CLASSIFIER + '.ipr'
IPR_TEMPLATE = 'idea7x.ipr.template'

_default_template = join(dirname(__file__), 'templates', IPR_TEMPLATE)


class ProjectTemplate:
    """
    The static project file skeleton. The module list is inserted as the last
    child of the root element. A self-closing root is expanded, and comments or
    processing instructions following the root element are kept as they are.
    """

    text: str
    root_tag: str

    def __init__(self, text: str, source: str = '<template>'):
        try:
            root = etreeFromString(text)
        except (ParseError, defusedxml.DefusedXmlException) as e:
            raise MissingTemplateAssetError(f'{source} is not a usable project template: {e}') from e
        self.text = text
        self.root_tag = root.tag.rsplit("}", 1)[-1]
        self.source = source
        end = _root_end(text)
        body = text[:end]
        closing = re.search(r"</([\w.-]+:)?" + re.escape(self.root_tag) + r"\s*>$", body)
        if closing:
            self._head = body[:closing.start()]
            self._tail = text[closing.start():]
        elif body.endswith('/>') and len(root) == 0:
            self._head = body[:-2].rstrip() + '>'
            self._tail = _closing_tag(body) + text[end:]
        else:
            raise MissingTemplateAssetError(f'{source} has no insertion point: cannot find the end of the {self.root_tag} element')

    @staticmethod
    def load(path: Optional[Path] = None) -> ProjectTemplate:
        path = path or _default_template
        try:
            with open(path, 'r', encoding='utf-8') as fp:
                text = fp.read()
        except OSError as e:
            raise MissingTemplateAssetError(f'Cannot read project template {path}: {e}') from e
        return ProjectTemplate(text, source=path)

    def merge(self, fragment: str) -> str:
        """Gets the template text with `fragment` inserted as the last child of the root element."""
        head = self._head
        if not head.endswith('\n'):
            head += '\n'
        if not fragment.endswith('\n'):
            fragment += '\n'
        return head + fragment + self._tail


def _root_end(text: str) -> int:
    """Gets the index just behind the root element, skipping trailing comments and processing instructions."""
    end = len(text.rstrip())
    while True:
        if text.endswith('-->', 0, end):
            end = len(text[:text.rfind('<!--', 0, end)].rstrip())
        elif text.endswith('?>', 0, end):
            end = len(text[:text.rfind('<?', 0, end)].rstrip())
        else:
            return end


def _closing_tag(body: str) -> str:
    """Gets the end tag matching the self-closing element at the end of `body`."""
    name = re.match(r"<([^\s/>]+)", body[body.rfind("<"):]).group(1)
    return "</" + name + ">"


def module_entries(root: Module) -> List[Tuple[str, str]]:
    """
    Gets (fileurl, filepath) pairs of the module files in the tree of `root`,
    in traversal order with the root module last. Modules without packages
    have no module file and are left out.
    """
    entries = []

    def _add(module):
        path = project_path(module.path_to(module_file_name(module)), root.base_dir)
        entries.append((FILE_PATH_PREFIX + path, path))

    for module in root.descendants():
        if module.is_packageable():
            _add(module)
    if root.is_packageable():
        _add(root)
    return entries


def render_modules_fragment(root: Module, indent: str = '  ') -> str:
    xml = XMLDoc()
    xml.open('component', attributes={'name': 'ProjectModuleManager'})
    xml.open('modules')
    for fileurl, filepath in module_entries(root):
        xml.element('module', attributes={'fileurl': fileurl, 'filepath': filepath})
    xml.close('modules')
    xml.close('component')
    return xml.fragment(indent=indent, newl='\n', level=1)


class ProjectDescriptorWriter:
    def __init__(self, template: Optional[Path] = None, mtime: MTime = file_mtime, force: bool = False):
        self.template = template
        self.mtime = mtime
        self.force = force

    def descriptor_file(self, root: Module) -> Path:
        return root.path_to(root.id + IPR_SUFFIX)

    def render(self, root: Module) -> str:
        return ProjectTemplate.load(self.template).merge(render_modules_fragment(root))

    def write_if_stale(self, root: Module, sources: Iterable[Path]) -> bool:
        """
        Writes the project file of the tree rooted at `root` if it is missing or
        older than any of `sources`, the build input files of the whole tree.
        Returns True if the file was written.
        """
        assert root.parent is None, f'{root} is not the root of its build tree'
        path = self.descriptor_file(root)
        reason = 'regeneration forced' if self.force else needs_update(path, sources, self.mtime)
        if reason is None:
            logvv(f'{path} is up to date')
            return False
        logvv(reason)
        content = self.render(root)
        logv(f'Writing {path}')
        write_file(path, content)
        return True
