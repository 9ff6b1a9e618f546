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
The jsxdom module.

On first import, our own language definition is added to the parce registry.

Typical use::

    >>> import jsxdom
    >>> from jsxdom import update
    >>> tree = jsxdom.parse('export default () => <h1 data-editable="title">Hi</h1>;')
    >>> update.text(tree, 'title', 'Welcome').success
    True
    >>> jsxdom.generate(tree)
    'export default () => <h1 data-editable="title">Welcome</h1>;'

"""

import os.path

from parce import Document

from .pkginfo import version, version_string
from .dom.read import parse, parse_snippet, ParseError
from .dom.write import generate, GenerationError


__all__ = (
    'load', 'parse', 'parse_snippet', 'generate',
    'ParseError', 'GenerationError', 'version', 'version_string',
)


def load(filename, encoding=None, errors=None, newline=None):
    """Convenience function to read text from ``filename`` and return a
    :class:`parce.Document` with the JSX language.

    The ``encoding``, if specified, is used to read the file; otherwise the
    encoding is autodetected. The ``errors`` and ``newline`` arguments will be
    passed to Python's :func:`open` function. Raises :class:`OSError` if the
    file can't be read.

    The DOM tree is available via ``get_transform(True)``.

    """
    from .lang.jsx import Jsx
    return Document.load(os.path.abspath(filename), Jsx.root, encoding, errors, newline, transformer=True)


## register bundled languages in jsxdom here
from parce.registry import register
register("jsxdom.lang.jsx.Jsx.root",
    name = "JSX",
    desc = "JavaScript component source with JSX markup",
    aliases = ["jsx", "tsx"],
    filenames = [("*.jsx", 1), ("*.tsx", 1)],
)

del register
