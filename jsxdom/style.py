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
Manage the inline styles of elements.

Inline styles are the object literal in the ``style`` attribute::

    <div style={{ marginTop: '10px', color: 'red' }}>

Style values are given as Python values: a string becomes a string literal,
a number a number, and a dict ``{"expression": "theme.color"}`` an
expression. A value of None or the empty string removes the property.

The class name helpers of :mod:`jsxdom.update` are also available here.

"""

import re

from .dom import edit, jsx
from .update import add_class_name, remove_class_name


#: The properties :func:`set_spacing` handles
SPACING_PROPERTIES = (
    'marginTop', 'marginBottom', 'marginLeft', 'marginRight', 'margin',
    'paddingTop', 'paddingBottom', 'paddingLeft', 'paddingRight', 'padding',
)

_sides = ('top', 'bottom', 'left', 'right')


def camel_case(name):
    """Return the CSS property name in camel case, e.g. ``margin-top`` becomes ``marginTop``."""
    return re.sub(r'-([a-z])', lambda m: m.group(1).upper(), name)


def pixels(value):
    """Return the value with ``px`` appended if it is a number."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return "{}px".format(value)
    return value


def style_value(value):
    """Return the expression node for a Python style value."""
    if isinstance(value, str):
        return jsx.StringLiteral.from_value(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return jsx.NumericLiteral.from_value(value)
    elif isinstance(value, dict) and 'expression' in value:
        return jsx.expression(value['expression'])
    raise TypeError("can't use {} as style value".format(repr(value)))


def style_object(node):
    """Return a two-tuple(obj, error) for the element node.

    ``obj`` is the ObjectExpression of the style attribute, or None if there
    is no style attribute. ``error`` is a message if the style attribute is
    not an object literal.

    """
    attr = node.attributes.get('style')
    if attr is None:
        return None, None
    slot = attr.value
    if isinstance(slot, jsx.ExpressionSlot) and isinstance(slot.expression, jsx.ObjectExpression):
        return slot.expression, None
    return None, "The style attribute of <{}> is not an object literal".format(node.head)


def _removed(value):
    return value is None or value == ''


def update_styles(tree, target_id, styles):
    """Merge the styles (a dictionary) in the inline style of the element.

    Properties with a value of None or ``''`` are removed. The result has the
    new styles in ``styles``.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id, styles=None)
    obj, error = style_object(r.node)
    if error:
        return edit.invalid(tree, error, styles=None)
    styles = {camel_case(name): value for name, value in styles.items()}
    try:
        values = {name: style_value(value)
            for name, value in styles.items() if not _removed(value)}
    except TypeError as e:
        return edit.invalid(tree, str(e), styles=None)
    if obj is None:
        obj = jsx.ObjectExpression()
        r.node.attributes.append(jsx.Attribute('style', jsx.ExpressionSlot(obj)))
    for name, value in styles.items():
        prop = obj.get(name)
        if _removed(value):
            if prop is not None:
                obj.remove(prop)
        elif prop is not None:
            prop.value = values[name]
        else:
            space = obj[-1].space_before if len(obj) else ' '
            if not len(obj) and not obj.trailing:
                obj.trailing = ' '
            obj.append(jsx.Property.for_key(name, values[name], space))
    return edit.succeeded(tree, 'Styles updated on "{}"'.format(target_id), styles=obj.to_dict())


def set_spacing(tree, target_id, spacing):
    """Set margin and padding properties.

    Only the keys in :data:`SPACING_PROPERTIES` are used, numbers get ``px``.

    """
    styles = {name: pixels(spacing[name]) for name in SPACING_PROPERTIES if name in spacing}
    return update_styles(tree, target_id, styles)


def _sides_styles(prop, value):
    if isinstance(value, dict):
        return {prop + side.capitalize(): pixels(value[side]) for side in _sides if side in value}
    return {prop: pixels(value)}


def set_margin(tree, target_id, margin):
    """Set the margin: a single value, or a dictionary with the keys
    ``top``, ``bottom``, ``left`` and/or ``right``.

    """
    return update_styles(tree, target_id, _sides_styles('margin', margin))


def set_padding(tree, target_id, padding):
    """Set the padding: a single value, or a dictionary with the keys
    ``top``, ``bottom``, ``left`` and/or ``right``.

    """
    return update_styles(tree, target_id, _sides_styles('padding', padding))


def clear_styles(tree, target_id):
    """Remove the style attribute of the element."""
    r = edit.locate(tree, target_id)
    if r is None:
        return edit.not_found(tree, target_id)
    index = r.node.attributes.index_of('style')
    if index != -1:
        del r.node.attributes[index]
    return edit.succeeded(tree, 'Styles cleared from "{}"'.format(target_id))


def get_styles(tree, target_id):
    """Return the inline styles of the element as a dictionary.

    Returns None if the element is not found, and an empty dictionary if it
    has no inline style, or a style that is not an object literal.

    """
    r = edit.locate(tree, target_id)
    if r is None:
        return None
    obj = style_object(r.node)[0]
    return obj.to_dict() if obj is not None else {}


__all__ = [
    'SPACING_PROPERTIES', 'update_styles', 'set_spacing', 'set_margin',
    'set_padding', 'clear_styles', 'get_styles',
    'add_class_name', 'remove_class_name',
]
