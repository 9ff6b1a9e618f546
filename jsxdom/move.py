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
Move elements within a document.

Whitespace text between elements is not a position: elements are moved
between the places of the other elements, and the whitespace stays where it
is. So moving an element keeps the layout of the lines.

"""

from .dom import edit, find


def _sibling_check(tree, r, target_id):
    """Return a failed result if the element can't be moved among its siblings."""
    if not edit.is_children(r.parent):
        return edit.invalid(tree,
            "Can't move the element {}: it is not inside markup".format(target_id))


def up(tree, target_id):
    """Swap the element with the previous sibling that is not whitespace."""
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    error = _sibling_check(tree, r, target_id)
    if error is not None:
        return error
    positions = edit.significant(r.parent)
    i = positions.index(r.index)
    if i == 0:
        return edit.invalid(tree, "Element is already at the top")
    other = positions[i-1]
    r.parent[other], r.parent[r.index] = r.parent[r.index], r.parent[other]
    return edit.succeeded(tree, 'Element "{}" moved up'.format(target_id))


def down(tree, target_id):
    """Swap the element with the next sibling that is not whitespace."""
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    error = _sibling_check(tree, r, target_id)
    if error is not None:
        return error
    positions = edit.significant(r.parent)
    i = positions.index(r.index)
    if i == len(positions) - 1:
        return edit.invalid(tree, "Element is already at the bottom")
    other = positions[i+1]
    r.parent[other], r.parent[r.index] = r.parent[r.index], r.parent[other]
    return edit.succeeded(tree, 'Element "{}" moved down'.format(target_id))


def to_index(tree, target_id, index):
    """Move the element to the index among its siblings that are not whitespace.

    The other siblings shift up or down to make place.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    error = _sibling_check(tree, r, target_id)
    if error is not None:
        return error
    positions = edit.significant(r.parent)
    if not isinstance(index, int) or not 0 <= index < len(positions):
        return edit.invalid(tree, "Invalid index: {}. Must be between 0 and {}".format(
            index, len(positions) - 1))
    nodes = [r.parent[p] for p in positions]
    nodes.remove(r.node)
    nodes.insert(index, r.node)
    for p, node in zip(positions, nodes):
        r.parent[p] = node
    return edit.succeeded(tree, 'Element "{}" moved to index {}'.format(target_id, index))


def into(tree, source_id, destination_id, indenter=None):
    """Move the element with ``source_id`` to the end of the children of the
    element with ``destination_id``.

    The destination may not be the source element or one of its descendants.

    """
    source = edit.locate(tree, source_id)
    if source is None:
        return edit.missing(tree, 'Source element with data-editable="{}" not found'.format(source_id))
    destination = edit.locate(tree, destination_id)
    if destination is None:
        return edit.missing(tree,
            'Destination element with data-editable="{}" not found'.format(destination_id))
    if destination.node is source.node or find.is_descendant(source.node, destination.node):
        return edit.invalid(tree, "Cannot move element into its own descendant")
    error = _sibling_check(tree, source, source_id)
    if error is not None:
        return error
    edit.detach(source.parent, source.index)
    edit.append_child(tree, destination.node, source.node, indenter)
    return edit.succeeded(tree, 'Element "{}" moved into "{}"'.format(source_id, destination_id))


def swap(tree, id1, id2):
    """Exchange the positions of two elements.

    The elements can have the same parent or different parents, but one may
    not be inside the other.

    """
    r1 = edit.locate(tree, id1)
    if r1 is None:
        return edit.not_found(tree, id1)
    r2 = edit.locate(tree, id2)
    if r2 is None:
        return edit.not_found(tree, id2)
    for r, i in ((r1, id1), (r2, id2)):
        error = _sibling_check(tree, r, i)
        if error is not None:
            return error
    if r1.node is r2.node:
        return edit.succeeded(tree, 'Element "{}" swapped with itself'.format(id1))
    if find.is_descendant(r1.node, r2.node) or find.is_descendant(r2.node, r1.node):
        return edit.invalid(tree, "Cannot swap an element with its own descendant")
    r1.parent[r1.index] = r2.node
    r2.parent[r2.index] = r1.node
    return edit.succeeded(tree, 'Elements "{}" and "{}" swapped'.format(id1, id2))
