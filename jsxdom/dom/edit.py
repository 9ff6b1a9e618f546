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
The result type and shared helpers of the operations that edit a DOM
document.

Every operation (see :mod:`jsxdom.insert`, :mod:`jsxdom.remove`,
:mod:`jsxdom.update`, :mod:`jsxdom.move` and :mod:`jsxdom.style`) returns a
:class:`MutationResult`. Ordinary failures (the target is not found, the
operation is impossible) are not exceptions but a result with ``success``
False. A failed operation never changes the tree: all checks are done before
the first modification.

"""

import collections
import itertools
import logging

from . import find, indent, jsx, util


logger = logging.getLogger(__name__)


#: error kind when a target element can't be found
NOT_FOUND = "not_found"

#: error kind when an operation is impossible with the current tree
INVALID_OPERATION = "invalid_operation"

#: error kind when a new element could not be built
TEMPLATE = "template"

#: error kind when the tree could not be written
GENERATION = "generation"


class MutationResult:
    """The result of an operation.

    ``success`` is True if the tree was modified (or, for operations that do
    not modify, if the operation succeeded). ``tree`` is the tree that was
    operated on, ``message`` a human-readable description of what happened
    and ``error`` one of the error kinds (None on success).

    Extra keyword arguments are operation-specific values like ``removed``
    or ``old_text``; they are accessible as attributes and in the ``extra``
    dictionary.

    A MutationResult evaluates to True in a boolean context if the operation
    succeeded.

    """
    def __init__(self, success, tree, message, error=None, **extra):
        self.success = success
        self.tree = tree
        self.message = message
        self.error = error
        self.extra = extra

    def __bool__(self):
        return self.success

    def __getattr__(self, name):
        try:
            return self.__dict__['extra'][name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self):
        return "<{} {} {}>".format(type(self).__name__,
            "success" if self.success else self.error, repr(self.message))


def succeeded(tree, message, **extra):
    """Return a successful MutationResult."""
    logger.debug(message)
    return MutationResult(True, tree, message, **extra)


def failed(tree, error, message, **extra):
    """Return a failed MutationResult."""
    logger.warning(message)
    return MutationResult(False, tree, message, error, **extra)


def not_found(tree, identity, **extra):
    """Return the result for an identity that is not found."""
    return failed(tree, NOT_FOUND,
        'Element with {}="{}" not found'.format(jsx.IDENTITY_ATTRIBUTE, identity), **extra)


def missing(tree, message, **extra):
    """Return a not found result with a custom message."""
    return failed(tree, NOT_FOUND, message, **extra)


def invalid(tree, message, **extra):
    """Return the result for an impossible operation."""
    return failed(tree, INVALID_OPERATION, message, **extra)


def is_children(nodes):
    """Return True if the list is the children of an element or fragment.

    Only then can siblings be inserted, removed or moved; markup that is
    part of the script (e.g. the root element of a component) can't get
    siblings.

    """
    return isinstance(nodes, jsx.MARKUP)


def whitespace_before(nodes, index):
    """Return True if the node before index in nodes is whitespace text."""
    return index > 0 and indent.is_whitespace(nodes[index-1])


def significant(nodes):
    """Return the list of indices of the nodes that are not whitespace text."""
    return [i for i, n in enumerate(nodes) if not indent.is_whitespace(n)]


def detach(nodes, index):
    """Remove the node at index from nodes, with the whitespace before it.

    Returns the index where the whitespace started, i.e. where the node was.

    """
    if whitespace_before(nodes, index):
        del nodes[index-1:index+1]
        return index - 1
    del nodes[index]
    return index


def append_child(tree, parent, node, indenter=None):
    """Add node as the last child of the parent element or fragment, with
    whitespace around it.

    Opens a self-closing element.

    """
    indenter = indenter or indent.Indenter()
    space = indenter.child_whitespace(tree, parent)
    if isinstance(parent, jsx.Element):
        parent.open()
    last = len(parent) - 1
    if last >= 0 and indent.is_whitespace(parent[last]) and '\n' in parent[last].head:
        parent[last:last] = [jsx.Text(space), node]
    else:
        closing = indenter.closing_whitespace(tree, parent)
        parent.extend((jsx.Text(space), node, jsx.Text(closing)))
    util.merge_whitespace(parent)


def prepend_child(tree, parent, node, indenter=None):
    """Add node as the first child of the parent element or fragment, with
    whitespace before it.

    Opens a self-closing element.

    """
    indenter = indenter or indent.Indenter()
    if not len(parent):
        return append_child(tree, parent, node, indenter)
    space = indenter.child_whitespace(tree, parent)
    if isinstance(parent, jsx.Element):
        parent.open()
    parent[0:0] = [jsx.Text(space), node]
    util.merge_whitespace(parent)


def locate(tree, identity):
    """Return the SearchResult for the element with the identity, or None."""
    return find.find_by_id(tree, identity)


def identity_conflicts(tree, nodes, replaced=()):
    """Return the sorted list of identities in the new nodes that would not be
    unique in the tree.

    The identities in the ``replaced`` nodes (and their descendants) are not
    counted, because those nodes leave the tree.

    """
    gone = set()
    for node in replaced:
        gone.update(id(n) for n in itertools.chain((node,), node.descendants()))
    seen = collections.Counter(n.identity for n in find.editable_elements(tree)
                               if id(n) not in gone)
    conflicts = set()
    for node in nodes:
        for n in itertools.chain((node,), node.descendants()):
            if isinstance(n, jsx.Element) and n.identity is not None:
                if seen[n.identity]:
                    conflicts.add(n.identity)
                seen[n.identity] += 1
    return sorted(conflicts)


def duplicate(tree, conflicts, **extra):
    """Return the result for new nodes with identities that are already in use."""
    return invalid(tree, "Duplicate {} values: {}".format(
        jsx.IDENTITY_ATTRIBUTE, ", ".join(conflicts)), **extra)
