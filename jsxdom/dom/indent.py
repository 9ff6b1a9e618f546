# -*- coding: utf-8 -*-
#
# This file is part of `jsxdom`, a library for editing JSX markup via a DOM
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Functionality to compute the whitespace around inserted nodes.

In JSX, whitespace between elements is content, so it lives in the tree as
:class:`~.jsx.Text` nodes. When a node is inserted, the :class:`Indenter`
synthesizes the whitespace text to put around it, based on the indentation
of the lines in the document as it would be written.

The policy:

* a node inserted as a sibling gets a newline plus the indentation of the
  line the target node is on, or no whitespace if the target does not start
  its line;
* a node inserted as a child gets the indentation of the existing children
  (if they are on their own lines), otherwise the indentation of the parent
  plus ``indent_width`` spaces;
* when an element gets its first child, the closing tag is put on a new line
  with the indentation of the parent.

"""

from . import jsx


class Indenter:
    """Computes the whitespace to insert around new nodes.

    Indentation preferences can be given on instantiation or by setting the
    attributes of the same name.

    """
    def __init__(self,
            indent_width = 2,
        ):

        #: the default indent width
        self.indent_width = indent_width

    def indentation(self, tree, node):
        """Return the leading whitespace of the line the node starts on.

        The line is taken from the text the tree would write. Returns the empty
        string if the node is not found.

        """
        text = preceding_text(tree, node)
        if text is None:
            return ''
        line = text[text.rfind('\n')+1:]
        return line[:len(line) - len(line.lstrip())]

    def starts_line(self, tree, node):
        """Return True if only whitespace precedes the node on its line."""
        text = preceding_text(tree, node)
        return text is not None and not text[text.rfind('\n')+1:].strip()

    def sibling_whitespace(self, tree, node):
        """Return the whitespace to put between node and a new sibling.

        This is the empty string if the node does not start a line.

        """
        if self.starts_line(tree, node):
            return '\n' + self.indentation(tree, node)
        return ''

    def child_whitespace(self, tree, parent):
        """Return the whitespace to put before a new child of parent."""
        for index, child in enumerate(parent):
            if not is_whitespace(child):
                if index and '\n' in parent[index-1].head:
                    return '\n' + self.indentation(tree, child)
                break
        return '\n' + self.indentation(tree, parent) + ' ' * self.indent_width

    def closing_whitespace(self, tree, parent):
        """Return the whitespace to put before the closing tag of parent."""
        return '\n' + self.indentation(tree, parent)

    def reindent(self, node, indentation):
        """Add the indentation after every newline in the whitespace text
        in the node, so that a multi-line node fits in at a place that is
        indented.

        """
        if indentation:
            for n in node // jsx.Text:
                if n.is_whitespace and '\n' in n.head:
                    n.head = n.head.replace('\n', '\n' + indentation)


def is_whitespace(node):
    """Return True if the node is a Text node with only whitespace."""
    return isinstance(node, jsx.Text) and node.is_whitespace


def preceding_text(root, node):
    """Return the text that root writes before node, or None if node is not
    found in root.

    Nodes inside attributes are not searched.

    """
    output = []

    def visit(n):
        if n is node:
            return True
        if isinstance(n, jsx.ObjectExpression):
            output.append(n.write())
            return False
        output.append(n.write_head())
        for child in n:
            if visit(child):
                return True
        output.append(n.write_tail())
        return False

    if visit(root):
        return ''.join(output)
