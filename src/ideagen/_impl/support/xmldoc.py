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
Minimal XML writer for descriptor files built on `xml.dom.minidom`.

Documents are assembled with a cursor: `open` descends into a new element,
`close` returns to its parent and `element` adds a leaf. Attributes are
written in sorted order so the output depends only on the content.
"""

__all__ = ["XMLDoc", "XMLElement"]

from io import StringIO
from xml.dom import minidom


class XMLElement(minidom.Element):
    def writexml(self, writer, indent="", addindent="", newl=""):
        writer.write(f"{indent}<{self.tagName}")
        attrs = self._get_attributes()
        for name in sorted(attrs.keys()):
            writer.write(f' {name}="')
            minidom._write_data(writer, attrs[name].value)
            writer.write('"')
        children = self.childNodes
        if not children:
            writer.write(f"/>{newl}")
        elif len(children) == 1 and children[0].nodeType == minidom.Node.TEXT_NODE:
            # text content stays on the line of its element
            writer.write(">")
            children[0].writexml(writer)
            writer.write(f"</{self.tagName}>{newl}")
        else:
            writer.write(f">{newl}")
            for child in children:
                child.writexml(writer, indent + addindent, addindent, newl)
            writer.write(f"{indent}</{self.tagName}>{newl}")


class XMLDoc(minidom.Document):
    def __init__(self):
        minidom.Document.__init__(self)
        self.current = self

    def createElement(self, tagName):
        e = XMLElement(tagName)
        e.ownerDocument = self
        return e

    def open(self, tag, attributes=None, data=None):
        e = self.createElement(tag)
        for name, value in (attributes or {}).items():
            e.setAttribute(name, value)
        if data is not None:
            e.appendChild(self.createTextNode(data))
        self.current.appendChild(e)
        self.current = e
        return self

    def close(self, tag):
        assert self.current is not self, f'no element open to close with {tag}'
        assert tag == self.current.tagName, f'{tag} != {self.current.tagName}'
        self.current = self.current.parentNode
        return self

    def element(self, tag, attributes=None, data=None):
        return self.open(tag, attributes, data).close(tag)

    def xml(self, indent='', newl=''):
        """Gets the document with a UTF-8 XML declaration."""
        assert self.current is self, f'{self.current.tagName} is still open'
        return self.toprettyxml(indent, newl, encoding='UTF-8').decode('utf-8')

    def fragment(self, indent='', newl='', level=0):
        """
        Gets the document element without an XML declaration, indented as if
        it was nested `level` elements deep.
        """
        assert self.current is self, f'{self.current.tagName} is still open'
        out = StringIO()
        self.documentElement.writexml(out, indent * level, indent, newl)
        return out.getvalue()
