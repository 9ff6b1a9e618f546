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
Insert new elements in a document.

The new element is given as an element specification, see
:func:`~jsxdom.dom.templates.resolve`: a node, a template name or a markup
snippet. Options are given to the template.

Whitespace is added around the new element, see :mod:`jsxdom.dom.indent`.

"""

from .dom import edit, find, indent, jsx, templates, util


#: The positions for :func:`insert`
POSITIONS = ('after', 'before', 'first_child', 'last_child')

_descriptions = {
    'after': 'after',
    'before': 'before',
    'first_child': 'as first child of',
    'last_child': 'as last child of',
}


def _new_node(tree, spec, options):
    """Return a two-tuple(node, None) or (None, failed result)."""
    try:
        node = templates.resolve(spec, options)
    except templates.TemplateError as e:
        return None, edit.failed(tree, edit.TEMPLATE, str(e))
    conflicts = edit.identity_conflicts(tree, [node])
    if conflicts:
        return None, edit.duplicate(tree, conflicts)
    # a node can't be in two places
    if find.locate(tree, node) is not None:
        node = node.copy()
    return node, None


def insert(tree, target_id, spec, position='after', options=None, indenter=None):
    """Insert a new element relative to the element with ``target_id``.

    ``position`` is one of ``"after"``, ``"before"``, ``"first_child"`` or
    ``"last_child"`` (camel case ``"asFirstChild"`` and ``"asLastChild"`` are
    also accepted). On success, the result has the new node in ``node``.
    The insert fails if the new element has an identity that is already
    used in the tree.

    """
    position = {'asFirstChild': 'first_child', 'asLastChild': 'last_child'}.get(position, position)
    if position not in POSITIONS:
        return edit.invalid(tree, "Invalid position: {}".format(position))
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    if position in ('after', 'before') and not edit.is_children(r.parent):
        return edit.invalid(tree, "Can't insert {} the element {}: it is not inside markup".format(
            position, target_id))
    node, error = _new_node(tree, spec, options)
    if error is not None:
        return error
    indenter = indenter or indent.Indenter()
    if position in ('after', 'before'):
        space = indenter.sibling_whitespace(tree, r.node)
        indenter.reindent(node, space[1:])
        nodes = [jsx.Text(space), node] if position == 'after' else [node, jsx.Text(space)]
        if not space:
            nodes = [node]
        index = r.index + 1 if position == 'after' else r.index
        r.parent[index:index] = nodes
        util.merge_whitespace(r.parent)
    else:
        indenter.reindent(node, indenter.child_whitespace(tree, r.node)[1:])
        if position == 'first_child':
            edit.prepend_child(tree, r.node, node, indenter)
        else:
            edit.append_child(tree, r.node, node, indenter)
    return edit.succeeded(tree, "Inserted <{}> {} element {}".format(
        node.head or '', _descriptions[position], target_id), node=node)


def after(tree, target_id, spec, options=None, indenter=None):
    """Insert a new element after the element with ``target_id``."""
    return insert(tree, target_id, spec, 'after', options, indenter)


def before(tree, target_id, spec, options=None, indenter=None):
    """Insert a new element before the element with ``target_id``."""
    return insert(tree, target_id, spec, 'before', options, indenter)


def as_first_child(tree, target_id, spec, options=None, indenter=None):
    """Insert a new element as the first child of the element with ``target_id``."""
    return insert(tree, target_id, spec, 'first_child', options, indenter)


def as_last_child(tree, target_id, spec, options=None, indenter=None):
    """Insert a new element as the last child of the element with ``target_id``."""
    return insert(tree, target_id, spec, 'last_child', options, indenter)


def at_root(tree, spec, position='last', component_name=None, options=None, indenter=None):
    """Insert a new element in the markup a component returns.

    ``position`` is ``"first"`` or ``"last"``. The component is found with
    :func:`~jsxdom.dom.find.find_component_root`.

    """
    if position not in ('first', 'last'):
        return edit.invalid(tree, "Invalid position: {}".format(position))
    r = find.find_component_root(tree, component_name)
    if r is None:
        if component_name:
            return edit.missing(tree, "Component {} not found".format(component_name))
        return edit.missing(tree, "No component found")
    node, error = _new_node(tree, spec, options)
    if error is not None:
        return error
    indenter = indenter or indent.Indenter()
    indenter.reindent(node, indenter.child_whitespace(tree, r.node)[1:])
    if position == 'first':
        edit.prepend_child(tree, r.node, node, indenter)
    else:
        edit.append_child(tree, r.node, node, indenter)
    return edit.succeeded(tree, "Inserted <{}> as {} child of the component root".format(
        node.head or '', position), node=node)
