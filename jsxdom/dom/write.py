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
Write a DOM document back to source text, checking its structure.

Whitespace is never added or removed: the output is exactly what the nodes
write, so an unmodified document is written back as it was read.

"""

from ..node import Node
from . import jsx


class GenerationError(Exception):
    """Raised when a tree can't be written because it is structurally invalid.

    The ``node`` attribute is the offending node.

    """
    def __init__(self, message, node=None):
        super().__init__(message)
        self.node = node


class Generator:
    """Writes the text of a node and its descendants.

    If ``validate`` is True (the default), the tree is checked while writing,
    and :class:`GenerationError` is raised on the first problem found.

    Call :meth:`write` to get the text output of a node.

    """
    def __init__(self,
            validate = True,
        ):

        #: whether to check the tree while writing
        self.validate = validate

        # initialize working variables
        self._output = []

    def write(self, node):
        """Get the text output of the node."""
        self._output.clear()
        self.output_node(node)
        return ''.join(self._output)

    def output_node(self, node):
        """*(Internal.)* Output one node and its descendants."""
        if self.validate:
            self.check_node(node)
        if isinstance(node, jsx.ObjectExpression):
            self._output.append('{')
            for i, n in enumerate(node):
                if i:
                    self._output.append(',')
                self.output_node(n)
            self._output.append(node.trailing + '}')
            return
        if isinstance(node, jsx.Element):
            self._output.append('<' + node.head)
            for attr in node.attributes:
                self.output_node(attr)
            self._output.append(node.space_end + ('/>' if node.self_closing else '>'))
        else:
            self._output.append(node.write_head())
        for n in node:
            self.output_node(n)
        self._output.append(node.write_tail())

    def check_node(self, node):
        """*(Internal.)* Raise GenerationError if the node is invalid."""
        for branch in node.branches():
            for n in branch:
                if not isinstance(n, Node):
                    raise GenerationError("Not a node: {}".format(repr(n)), node)
        if isinstance(node, jsx.Invalid):
            raise GenerationError("Invalid markup: {}".format(node.head), node)
        elif isinstance(node, jsx.Element):
            if not jsx.is_valid_tag_name(node.head):
                raise GenerationError("Invalid tag name: {}".format(repr(node.head)), node)
            elif node.closing_name is not None and node.closing_name != node.head:
                raise GenerationError("Closing tag </{}> does not match <{}>".format(
                    node.closing_name, node.head), node)
            elif node.self_closing and len(node):
                raise GenerationError("Self-closing element <{}> has children".format(node.head), node)
        elif isinstance(node, jsx.Attribute):
            if not jsx.is_valid_attribute_name(node.head):
                raise GenerationError("Invalid attribute name: {}".format(repr(node.head)), node)
            elif len(node) > 1:
                raise GenerationError("Attribute {} has more than one value".format(node.head), node)
        elif isinstance(node, jsx.ExpressionSlot):
            if len(node) > 1:
                raise GenerationError("Expression slot has more than one expression", node)


def generate(tree, validate=True):
    """Return the source text of the tree.

    Raises :class:`GenerationError` if ``validate`` is True and the tree is
    structurally invalid.

    """
    return Generator(validate).write(tree)
