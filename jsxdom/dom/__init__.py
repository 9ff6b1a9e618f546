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
This module defines a DOM (Document Object Model) for JSX markup in component
source files.

The JSX DOM is a simple tree structure where an element is represented by a
node with child nodes: text, embedded expressions and other elements. The
script text around the markup is kept as opaque code nodes, so a document is
written back exactly as it was read.

This DOM is used in two ways:

1. Building markup from scratch, using the :data:`~.jsx.m` element
   constructor or the templates in :mod:`.templates`.

2. Transform a *parce* tree of an existing component source file. The nodes
   know their position in the source text, so the elements can be located by
   line and column, and edited by the operations in :mod:`jsxdom.insert`,
   :mod:`jsxdom.remove`, :mod:`jsxdom.update`, :mod:`jsxdom.move` and
   :mod:`jsxdom.style`.

"""

