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
Some utility functions.
"""


def whitespace_key(text):
    r"""Return a key to determine the importance of the whitespace.

    This is used by e.g. the :func:`collapse_whitespace` function. A two-tuple
    is returned: ``(newlines spaces)``, where the first value is the number of
    newlines in the text, and the second value the number of spaces.

    """
    return text.count('\n'), text.count(' ')


def collapse_whitespace(whitespaces):
    r"""Return the "most important" whitespace of the specified strings.

    This is used to combine whitespace requirements. For example, newlines
    are preferred over single spaces, and a single space is preferred over
    an empty string. For example::

        >>> collapse_whitespace(['\n', ' '])
        '\n'
        >>> collapse_whitespace([' ', ''])
        ' '

    """
    return max(whitespaces, key=whitespace_key, default='')


def line_column(text, pos):
    """Return a two-tuple (line, column) for the position in the text.

    Lines are counted from 1, columns from 0.

    """
    line = text.count('\n', 0, pos) + 1
    column = pos - (text.rfind('\n', 0, pos) + 1)
    return line, column


def position(text, line, column):
    """Return the position in the text for the line (from 1) and column (from 0).

    Returns None if the line does not exist.

    """
    pos = 0
    for _ in range(line - 1):
        pos = text.find('\n', pos) + 1
        if not pos:
            return None
    end = text.find('\n', pos)
    if end == -1:
        end = len(text)
    return min(pos + column, end)


def merge_whitespace(nodes):
    """Merge adjacent whitespace Text nodes in the list ``nodes``, in place.

    Of two adjacent whitespace nodes, the most important whitespace is kept.

    """
    from . import jsx
    i = len(nodes) - 1
    while i > 0:
        a, b = nodes[i-1], nodes[i]
        if isinstance(a, jsx.Text) and isinstance(b, jsx.Text) \
                and a.is_whitespace and b.is_whitespace:
            keep = collapse_whitespace((a.head, b.head))
            del nodes[i]
            a.head = keep
        i -= 1
