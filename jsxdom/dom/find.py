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
Find elements in a jsx document.

All functions that find one node return a :class:`SearchResult`, bundling
the node with the list it is in and its index in that list, or None if
nothing is found. Not finding something is a normal outcome.

Elements are identified by the string value of their ``data-editable``
attribute (see :data:`~.jsx.IDENTITY_ATTRIBUTE`). If more than one element
has the same identity, the first one in document order wins.

"""

import collections
import logging
import re

from . import jsx, util


logger = logging.getLogger(__name__)


#: The result of a search; ``parent[index] is node``
SearchResult = collections.namedtuple("SearchResult", "node parent index")
SearchResult.node.__doc__ = "The node that was found."
SearchResult.parent.__doc__ = "The list (a node) the found node is in."
SearchResult.index.__doc__ = "The index of the node in the parent."

#: A range in the source text, lines count from 1, columns from 0
Location = collections.namedtuple("Location", "line column end_line end_column")

#: An element carrying an identity, as returned by :func:`find_all_editable`
EditableElement = collections.namedtuple("EditableElement", "id node tag_name location")


_component_re = r'''(?x)
    \bfunction\s*\*?\s*{name}\s*\(
  | \bclass\s+{name}\b
  | \b(?:const|let|var)\s+{name}\s*(?::[^=]*)?=\s*
      (?:[\w$.]+\s*\(\s*)?           # memo(, forwardRef(, React.memo(
      (?:async\s+)?
      (?:function\b|\([^()]*\)\s*(?::[^=]*)?=>|[A-Za-z_$][\w$]*\s*=>)
'''

_returns_markup_re = re.compile(r'(?:\breturn|=>)\s*\(?\s*$')


def find(tree, predicate):
    """Return the SearchResult for the first node the predicate returns True for.

    The search is depth-first, in document order, and stops at the first
    match.

    """
    for node, parent, index in tree.walk():
        if predicate(node):
            return SearchResult(node, parent, index)


def find_all(tree, predicate):
    """Return a list of SearchResults for all nodes the predicate returns True for."""
    return [SearchResult(node, parent, index)
        for node, parent, index in tree.walk() if predicate(node)]


def find_by_id(tree, identity):
    """Return the SearchResult for the first element with the given identity."""
    return find(tree, lambda n: isinstance(n, jsx.Element) and n.identity == identity)


def find_by_tag_name(tree, tag_name):
    """Return the SearchResult for the first element with the given tag name."""
    return find(tree, lambda n: isinstance(n, jsx.Element) and n.head == tag_name)


def locate(tree, node):
    """Return the SearchResult for the node object in the tree, or None."""
    return find(tree, lambda n: n is node)


def is_descendant(ancestor, node):
    """Return True if node is a descendant of ancestor."""
    return ancestor.contains(node)


def location(tree, node):
    """Return the :class:`Location` of the node in the source text of the tree.

    Returns None if the tree has no source text, or the node has no origin
    (e.g. because it was inserted after parsing).

    """
    text = tree.source
    pos, end = node.pos, node.end
    if text is None or pos is None or end is None:
        return None
    return Location(*util.line_column(text, pos), *util.line_column(text, end))


def editable_elements(tree):
    """Yield all elements that have an identity, in document order."""
    for node in tree // jsx.Element:
        if node.identity is not None:
            yield node


def find_all_editable(tree):
    """Return a list of :class:`EditableElement` tuples for all elements that
    have an identity, in document order.

    Logs a warning if an identity is used more than once.

    """
    result = [EditableElement(node.identity, node, node.head, location(tree, node))
        for node in editable_elements(tree)]
    duplicates = _duplicates(e.id for e in result)
    if duplicates:
        logger.warning("duplicate %s values: %s", jsx.IDENTITY_ATTRIBUTE, ", ".join(duplicates))
    return result


def duplicate_ids(tree):
    """Return the list of identities that occur more than once, in document order."""
    return _duplicates(node.identity for node in editable_elements(tree))


def _duplicates(ids):
    counter = collections.Counter()
    order = []
    for i in ids:
        counter[i] += 1
        if counter[i] == 2:
            order.append(i)
    return order


def source_map(tree):
    """Return a dictionary mapping identities to their :class:`Location`.

    Elements without location are left out. The first element with an
    identity wins.

    """
    result = {}
    for e in find_all_editable(tree):
        if e.location is not None:
            result.setdefault(e.id, e.location)
    return result


def element_at(tree, line, column):
    """Return the :class:`EditableElement` of the innermost element with an
    identity that contains the position (line from 1, column from 0).

    Returns None if there is no such element.

    """
    if tree.source is None:
        return None
    pos = util.position(tree.source, line, column)
    if pos is None:
        return None
    found = None
    for node in editable_elements(tree):
        start, end = node.pos, node.end
        if start is not None and end is not None and start <= pos < end:
            # document order: a later match is contained in an earlier one
            found = node
    if found is not None:
        return EditableElement(found.identity, found, found.head, location(tree, found))


def find_component_root(tree, component_name=None):
    """Return the SearchResult for the markup a component returns.

    If ``component_name`` is given, the component is a function, an arrow
    function or a class with that name, and the markup is the first markup
    after its declaration that is returned (follows ``return`` or ``=>``).

    Without a name, the first markup in the document that is returned by a
    function is used, or the markup at the start of the document.

    Returns None if no such markup is found.

    """
    start = 0
    if component_name is not None:
        regex = re.compile(_component_re.format(name=re.escape(component_name)))
        for start, node in enumerate(tree):
            if isinstance(node, jsx.Code) and regex.search(node.head):
                break
        else:
            return None
    for index in range(start, len(tree)):
        node = tree[index]
        if isinstance(node, jsx.MARKUP):
            before = tree[index - 1].head if index else ''
            if _returns_markup_re.search(before) or \
                    (component_name is None and index < 2 and not before.strip()):
                return SearchResult(node, tree, index)
