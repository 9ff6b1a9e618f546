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
Simple helper functions to easily build DOM elements reading from text.

By default the generated DOM nodes do not know their position in the
originating text, because the origin tokens are not preserved. This is the best
when building DOM snippets using this module and inserting them in existing
documents.

If you set the ``with_origin`` argument in the reader functions to True, the
origin tokens are preserved, so the DOM nodes know their position in the
originating text. :func:`parse` always does this, because the locator needs
the positions to report source locations.

The reader functions do not check the markup. :func:`parse` and
:func:`parse_snippet` do, they raise :class:`ParseError` for invalid markup.

"""


from parce.transform import Transformer

from ..lang import jsx as lang
from . import jsx, util


# init two transformers, accessible by 0 (False) and 1 (True) :-)
_transformer = [Transformer(), Transformer()]
_transformer[0].transform_name_template = "{}AdHocTransform"


class ParseError(Exception):
    """Raised when the source text contains invalid markup.

    The ``message`` attribute is the description of the problem, ``pos`` the
    position in the text, and ``line`` (from 1) and ``column`` (from 0) the
    same position in lines and columns. The position attributes are None if
    unknown.

    """
    def __init__(self, message, pos=None, line=None, column=None):
        self.message = message
        self.pos = pos
        self.line = line
        self.column = column
        if line is not None:
            message = "Line {}, column {}: {}".format(line, column, message)
        super().__init__(message)


def jsx_document(text, with_origin=False):
    """Return a :class:`.jsx.Document` from the text.

    Example::

        >>> from jsxdom.dom import read
        >>> node = read.jsx_document('const A = () => <h1 className="big">Title</h1>;')
        >>> node.dump()
        <jsx.Document (3 children)>
         ├╴<jsx.Code 'const A = () => '>
         ├╴<jsx.Element 'h1' (2 children)>
         │  ├╴<jsx.Attribute 'className' (1 child)>
         │  │  ╰╴<jsx.AttributeString 'big'>
         │  ╰╴<jsx.Text 'Title'>
         ╰╴<jsx.Code ';'>
        >>> node.write()
        'const A = () => <h1 className="big">Title</h1>;'

    Invalid markup is not checked, but results in
    :class:`~.jsx.Invalid` nodes.

    """
    return _transformer[with_origin].transform_text(lang.Jsx.root, text)


def markup(text, with_origin=False):
    """Return the first markup node from the text, read in Jsx.root."""
    for node in jsx_document(text, with_origin) // (jsx.Element, jsx.Fragment):
        return node


def check(tree, text, offset=0):
    """Raise ParseError for the first Invalid node in the tree.

    The ``text`` is used to compute line and column; ``offset`` is subtracted
    from the positions stored in the Invalid nodes.

    """
    for node in tree // jsx.Invalid:
        pos = line = column = None
        if node.position is not None:
            pos = max(0, node.position - offset)
            line, column = util.line_column(text, pos)
        raise ParseError(node.head, pos, line, column)


def parse(text):
    """Return a :class:`.jsx.Document` from the source text.

    The nodes keep their origin, so they know their position in the text. The
    text is stored in the ``source`` attribute of the document.

    Raises :class:`ParseError` if the text contains invalid markup.

    """
    tree = jsx_document(text, True)
    check(tree, text)
    tree.source = text
    return tree


def parse_snippet(text):
    """Return the single root element or fragment of a markup snippet.

    The snippet is read as the contents of a fragment. Whitespace around the
    root is allowed; raises :class:`ParseError` if the snippet is invalid,
    contains no markup, or contains more than one root node (e.g. two elements
    or text next to an element).

    """
    prefix = "(<>"
    tree = jsx_document(prefix + text + "</>)")
    check(tree, text, len(prefix))
    fragments = list(tree / jsx.Fragment)
    if len(fragments) != 1 or len(tree) != 3:
        raise ParseError("Snippet is not valid markup")
    roots = [n for n in fragments[0] if not (isinstance(n, jsx.Text) and n.is_whitespace)]
    if not roots:
        raise ParseError("Snippet contains no markup")
    elif len(roots) > 1:
        raise ParseError("Snippet must have a single root element, found {}".format(len(roots)))
    elif not isinstance(roots[0], jsx.MARKUP):
        raise ParseError("Snippet root must be an element or fragment")
    return roots[0]
