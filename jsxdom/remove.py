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
Remove elements from a document.
"""

from .dom import edit, find, jsx, util


def element(tree, target_id, preserve_children=False):
    """Remove the element with ``target_id``, with the whitespace before it.

    If ``preserve_children`` is True, the element is replaced with its
    children (it is unwrapped). The result has the removed element in
    ``removed``.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id, removed=None)
    if not edit.is_children(r.parent):
        return edit.invalid(tree,
            "Can't remove the element {}: it is not inside markup".format(target_id), removed=None)
    node = r.node
    if preserve_children:
        children = list(node)
        r.parent[r.index:r.index+1] = children
        del node[:]
        util.merge_whitespace(r.parent)
    else:
        edit.detach(r.parent, r.index)
    return edit.succeeded(tree, 'Element "{}" removed'.format(target_id), removed=node)


def remove_multiple(tree, target_ids):
    """Remove all elements with the ids in ``target_ids``.

    Either all elements are removed, or, if one of them can't be found or
    removed, none. The result has the number of removed elements in
    ``removed_count`` and a list of ``(id, message)`` tuples in ``errors``.

    """
    nodes = []
    errors = []
    kind = edit.INVALID_OPERATION
    for target_id in target_ids:
        r = edit.locate(tree, target_id)
        if r is None:
            kind = edit.NOT_FOUND
            errors.append((target_id, 'Element with {}="{}" not found'.format(
                jsx.IDENTITY_ATTRIBUTE, target_id)))
        elif not edit.is_children(r.parent):
            errors.append((target_id, "Element is not inside markup"))
        elif not any(r.node is n for n in nodes):
            nodes.append(r.node)
    if errors:
        return edit.failed(tree, kind,
            "Could not remove: {}".format(", ".join(i for i, msg in errors)),
            removed_count=0, errors=errors)
    # remove in reverse order; elements inside another removed element go with it
    for node in reversed(nodes):
        r = find.locate(tree, node)
        if r is not None:
            edit.detach(r.parent, r.index)
    return edit.succeeded(tree, "Removed {} elements".format(len(nodes)),
        removed_count=len(nodes), errors=[])


def clear_children(tree, target_id):
    """Remove all children of the element with ``target_id``.

    Void elements (like ``img`` and ``br``) become self-closing, other
    elements keep their closing tag.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    node = r.node
    del node[:]
    if node.head.lower() in jsx.VOID_ELEMENTS:
        node.close()
    return edit.succeeded(tree, 'Children of element "{}" cleared'.format(target_id))
