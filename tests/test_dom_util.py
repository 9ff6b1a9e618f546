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
Test the utility and indentation functions of the dom package.
"""

### find jsxdom
import sys
sys.path.insert(0, '.')

from jsxdom.dom import indent, jsx, read, util


SRC = """\
function A() {
  return (
    <div data-editable="box">
      <p data-editable="first">one</p>
      <p data-editable="second">two</p>
    </div>
  );
}
"""


def test_main():
    assert util.collapse_whitespace(['\n', ' ']) == '\n'
    assert util.collapse_whitespace([' ', '']) == ' '
    assert util.collapse_whitespace([]) == ''

    text = "ab\ncde\nf"
    assert util.line_column(text, 0) == (1, 0)
    assert util.line_column(text, 4) == (2, 1)
    assert util.position(text, 2, 1) == 4
    assert util.position(text, 2, 100) == 6     # clipped to the end of the line
    assert util.position(text, 5, 0) is None


def test_merge_whitespace():
    nodes = [jsx.Text('\n  '), jsx.Text(' '), jsx.Element('b'), jsx.Text(''), jsx.Text('\n')]
    util.merge_whitespace(nodes)
    assert [n.head for n in nodes] == ['\n  ', 'b', '\n']


def test_indent():
    tree = read.parse(SRC)
    div = tree[1]
    first = div[1]
    i = indent.Indenter()
    assert i.indentation(tree, div) == '    '
    assert i.indentation(tree, first) == '      '
    assert i.starts_line(tree, first)
    assert i.sibling_whitespace(tree, first) == '\n      '
    assert i.child_whitespace(tree, div) == '\n      '
    assert i.closing_whitespace(tree, div) == '\n    '

    # an element without children: the indentation of the parent plus indent_width
    assert i.child_whitespace(tree, first) == '\n        '
    assert indent.Indenter(indent_width=4).child_whitespace(tree, first) == '\n          '

    assert indent.preceding_text(tree, jsx.Text('x')) is None


def test_inline():
    tree = read.parse('<div><h1>T</h1><p>Next</p></div>')
    i = indent.Indenter()
    h1 = tree[0][0]
    assert not i.starts_line(tree, h1)
    assert i.sibling_whitespace(tree, h1) == ''
    assert i.child_whitespace(tree, tree[0]) == '\n  '


def test_reindent():
    node = read.parse_snippet('<ul>\n  <li>a</li>\n</ul>')
    indent.Indenter().reindent(node, '    ')
    assert node.write() == '<ul>\n      <li>a</li>\n    </ul>'


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
