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
Update the text, attributes, tag name or children of elements.

Attribute values are given as Python values:

* ``True``: an attribute without value, like ``disabled``
* ``False`` or None: the attribute is removed
* a string: a string value, ``title="Hi"``
* an int or float: a number in an expression, ``tabIndex={2}``
* a dict ``{"expression": "content.title"}``: an expression,
  ``alt={content.title}``

The old value of an attribute is returned in the same form (see
:func:`~jsxdom.dom.jsx.attribute_value`).

"""

from .dom import edit, find, indent, jsx


def _text_nodes(text, lead='', trail=''):
    """Return a list of nodes for the text, with the whitespace around it."""
    node = jsx.text_node(text)
    if isinstance(node, jsx.Text):
        return [jsx.Text(lead + text + trail)]
    return [n for n in (jsx.Text(lead) if lead else None, node, jsx.Text(trail) if trail else None) if n]


def text(tree, target_id, new_text):
    """Set the text of the element with ``target_id``.

    The first text in the element is replaced: a text child, or an expression
    child with a string, a template literal, a variable or a member access
    (which is replaced with the text). The whitespace around a text child is
    kept. If there is no text, the text is added after the other children,
    on its own line if the children are on separate lines.

    The result has the replaced text in ``old_text``; for a replaced variable
    or member access this is the expression in braces, like
    ``{content.title}``.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id, old_text=None)
    node = r.node
    old_text = ''
    for index, child in enumerate(node):
        if isinstance(child, jsx.Text):
            if child.is_whitespace:
                continue
            value = child.head
            stripped = value.strip()
            lead = value[:len(value) - len(value.lstrip())]
            trail = value[len(value.rstrip()):]
            node[index:index+1] = _text_nodes(new_text, lead, trail)
            old_text = stripped
            break
        elif isinstance(child, jsx.ExpressionSlot):
            expr = child.expression
            if isinstance(expr, (jsx.Identifier, jsx.MemberExpression)):
                old_text = '{' + expr.write() + '}'
                node[index:index+1] = _text_nodes(new_text)
                break
            elif isinstance(expr, jsx.StringLiteral):
                old_text = expr.value
                expr.head = type(expr).from_value(new_text, expr.quote).head
                break
            elif isinstance(expr, jsx.TemplateLiteral):
                old_text = expr.value
                expr.head = jsx.TemplateLiteral.from_value(new_text).head
                break
    else:
        new = jsx.text_node(new_text)
        if any(indent.is_whitespace(n) and '\n' in n.head for n in node):
            edit.append_child(tree, node, new)
        else:
            node.append(new)
            node.open()
    return edit.succeeded(tree, 'Text updated for "{}"'.format(target_id), old_text=old_text)


def _check_value(value):
    """Return None if the value can be used for an attribute, otherwise an error message."""
    if value is None or value is False:
        return
    try:
        jsx.value_node(value)
    except TypeError as e:
        return str(e)


def _check_identity(tree, node, name, value):
    """Return an error message if the value would make the identity of node not unique."""
    if name == jsx.IDENTITY_ATTRIBUTE and isinstance(value, str):
        r = edit.locate(tree, value)
        if r is not None and r.node is not node:
            return "Duplicate {} value: {}".format(name, value)


def _set_attribute(node, name, value):
    """Set, add or remove the attribute; return the old value (None if absent)."""
    attrs = node.attributes
    index = attrs.index_of(name)
    old_value = jsx.attribute_value(attrs[index]) if index != -1 else None
    if value is None or value is False:
        if index != -1:
            del attrs[index]
    else:
        new = jsx.value_node(value)
        if index != -1:
            attrs[index].value = new
        else:
            attrs.append(jsx.Attribute(name) if new is None else jsx.Attribute(name, new))
    return old_value


def attribute(tree, target_id, name, value):
    """Set the attribute ``name`` of the element with ``target_id`` to
    ``value``, add it if it is not present, or remove it if value is False or
    None.

    The result has the previous value in ``old_value`` (None if the attribute
    was not present).

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id, old_value=None)
    if not jsx.is_valid_attribute_name(name):
        return edit.invalid(tree, "Invalid attribute name: {}".format(repr(name)), old_value=None)
    error = _check_value(value) or _check_identity(tree, r.node, name, value)
    if error:
        return edit.invalid(tree, error, old_value=None)
    old_value = _set_attribute(r.node, name, value)
    if value is None or value is False:
        message = 'Attribute "{}" removed from "{}"'.format(name, target_id)
    else:
        message = 'Attribute "{}" updated on "{}"'.format(name, target_id)
    return edit.succeeded(tree, message, old_value=old_value)


def attributes(tree, target_id, values):
    """Update multiple attributes at once.

    ``values`` is a dictionary mapping attribute names to values, as for
    :func:`attribute`. Either all attributes are updated or none. The result
    has a dictionary with the previous values in ``old_values``.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id, old_values={})
    for name, value in values.items():
        if not jsx.is_valid_attribute_name(name):
            return edit.invalid(tree, "Invalid attribute name: {}".format(repr(name)), old_values={})
        error = _check_value(value) or _check_identity(tree, r.node, name, value)
        if error:
            return edit.invalid(tree, error, old_values={})
    old_values = {name: _set_attribute(r.node, name, value) for name, value in values.items()}
    return edit.succeeded(tree, 'Updated {} attributes on "{}"'.format(len(values), target_id),
        old_values=old_values)


def tag_name(tree, target_id, new_tag_name):
    """Change the tag name of the element with ``target_id``.

    The result has the previous name in ``old_tag_name``.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id, old_tag_name=None)
    if not jsx.is_valid_tag_name(new_tag_name):
        return edit.invalid(tree, "Invalid tag name: {}".format(repr(new_tag_name)), old_tag_name=None)
    old_tag_name = r.node.tag_name
    r.node.tag_name = new_tag_name
    return edit.succeeded(tree, 'Tag name changed from "{}" to "{}" on "{}"'.format(
        old_tag_name, new_tag_name, target_id), old_tag_name=old_tag_name)


def replace_children(tree, target_id, children):
    """Replace the children of the element with ``target_id``.

    The children are strings (which become text) and nodes. Nodes that are
    already in the tree are copied. The new children may not bring
    identities that are already used elsewhere in the tree.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    nodes = []
    for child in children:
        if isinstance(child, str):
            nodes.append(jsx.text_node(child))
        elif isinstance(child, jsx.MARKUP + (jsx.Text, jsx.ExpressionSlot)):
            nodes.append(child.copy() if find.locate(tree, child) else child)
        else:
            return edit.invalid(tree, "Can't use {} as child".format(repr(child)))
    conflicts = edit.identity_conflicts(tree, nodes, replaced=list(r.node))
    if conflicts:
        return edit.duplicate(tree, conflicts)
    r.node[:] = nodes
    if nodes:
        r.node.open()
    return edit.succeeded(tree, 'Children replaced for "{}"'.format(target_id))


## class names

def _class_names(node):
    """Return a two-tuple(names, error) with the list of class names of the node.

    The error is a message if the className attribute is not a string.

    """
    attr = node.attributes.get('className')
    if attr is None:
        return [], None
    elif not isinstance(attr.value, jsx.StringLiteral):
        return None, "The className attribute is not a string"
    return attr.value.value.split(), None


def _set_class_names(node, names):
    attrs = node.attributes
    if names:
        value = jsx.AttributeString.from_value(' '.join(names))
        attr = attrs.get('className')
        if attr is None:
            attrs.append(jsx.Attribute('className', value))
        else:
            attr.value = value
    else:
        index = attrs.index_of('className')
        if index != -1:
            del attrs[index]


def add_class_name(tree, target_id, class_name):
    """Add a class name to the ``className`` attribute of the element.

    Adding a class name that is already present does nothing.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    names, error = _class_names(r.node)
    if error:
        return edit.invalid(tree, error)
    new = [n for n in class_name.split() if n not in names]
    if new:
        _set_class_names(r.node, names + new)
    return edit.succeeded(tree, 'Class "{}" added to "{}"'.format(class_name, target_id))


def remove_class_name(tree, target_id, class_name):
    """Remove a class name from the ``className`` attribute of the element.

    Removing a class name that is not present does nothing. If no class names
    remain, the attribute is removed.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    names, error = _class_names(r.node)
    if error:
        return edit.invalid(tree, error)
    remove = class_name.split()
    if any(n in names for n in remove):
        _set_class_names(r.node, [n for n in names if n not in remove])
    return edit.succeeded(tree, 'Class "{}" removed from "{}"'.format(class_name, target_id))
