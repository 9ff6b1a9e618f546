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
Test moving elements.
"""

import re

### find jsxdom
import sys
sys.path.insert(0, '.')

from jsxdom import move
from jsxdom.dom import edit, read, write


SRC = """\
<>
  <ul data-editable="list">
    <li data-editable="a">A</li>
    <li data-editable="b">B</li>
    <li data-editable="c">C</li>
  </ul>
  <div data-editable="box"></div>
</>
"""


def ids(text):
    return re.findall(r'data-editable="(\w+)"', text)


def test_main():
    """Move an element down."""
    tree = read.parse('<section><p data-editable="a">A</p><p data-editable="b">B</p></section>')
    assert move.down(tree, "a")
    assert ids(write.generate(tree)) == ["b", "a"]


def test_up_down():
    tree = read.parse(SRC)
    assert move.up(tree, "b")
    text = write.generate(tree)
    assert ids(text) == ["list", "b", "a", "c", "box"]
    # whitespace stays in place
    assert text == SRC.replace('"a">A', '"x">X').replace('"b">B', '"a">A').replace('"x">X', '"b">B')

    r = move.up(tree, "b")
    assert not r and r.message == "Element is already at the top"
    r = move.down(tree, "c")
    assert not r and r.message == "Element is already at the bottom"
    assert write.generate(tree) == text

    r = move.up(tree, "nope")
    assert not r and r.error == edit.NOT_FOUND


def test_to_index():
    tree = read.parse(SRC)
    assert move.to_index(tree, "a", 2)
    assert ids(write.generate(tree)) == ["list", "b", "c", "a", "box"]
    assert move.to_index(tree, "a", 0)
    assert ids(write.generate(tree)) == ["list", "a", "b", "c", "box"]
    assert move.to_index(tree, "c", 1)
    assert ids(write.generate(tree)) == ["list", "a", "c", "b", "box"]

    r = move.to_index(tree, "a", 3)
    assert not r and r.message == "Invalid index: 3. Must be between 0 and 2"
    assert not move.to_index(tree, "a", -1)


def test_into():
    tree = read.parse(SRC)
    assert move.into(tree, "b", "box")
    assert write.generate(tree) == (
        '<>\n'
        '  <ul data-editable="list">\n'
        '    <li data-editable="a">A</li>\n'
        '    <li data-editable="c">C</li>\n'
        '  </ul>\n'
        '  <div data-editable="box">\n'
        '    <li data-editable="b">B</li>\n'
        '  </div>\n'
        '</>\n')

    # cycles are rejected
    tree = read.parse('<div><section data-editable="s"><p data-editable="p">x</p></section></div>')
    before = write.generate(tree)
    r = move.into(tree, "s", "p")
    assert not r and r.message == "Cannot move element into its own descendant"
    assert not move.into(tree, "s", "s")
    assert write.generate(tree) == before

    r = move.into(tree, "x", "s")
    assert r.message == 'Source element with data-editable="x" not found'
    r = move.into(tree, "p", "x")
    assert r.message == 'Destination element with data-editable="x" not found'


def test_swap():
    tree = read.parse(SRC)
    assert move.swap(tree, "a", "c")
    assert ids(write.generate(tree)) == ["list", "c", "b", "a", "box"]
    assert move.swap(tree, "b", "b")

    tree = read.parse('<div><ul data-editable="u"><li data-editable="i">x</li></ul><p data-editable="p">y</p></div>')
    assert move.swap(tree, "i", "p")
    assert write.generate(tree) == \
        '<div><ul data-editable="u"><p data-editable="p">y</p></ul><li data-editable="i">x</li></div>'
    r = move.swap(tree, "u", "p")
    assert not r and r.error == edit.INVALID_OPERATION


COMPONENTS = """\
export default function Hero() {
  return (
    <section data-editable="hero">
      <h1 data-editable="title">Welcome</h1>
    </section>
  );
}

const B = () => <p data-editable="b">B</p>;
"""


def test_component_roots():
    """The root element of a component can't be moved."""
    tree = read.parse(COMPONENTS)
    results = [
        move.up(tree, "hero"),
        move.down(tree, "hero"),
        move.to_index(tree, "b", 0),
        move.into(tree, "b", "hero"),
        move.swap(tree, "title", "b"),
    ]
    for r in results:
        assert not r and r.error == edit.INVALID_OPERATION
        assert r.message.endswith("it is not inside markup")
    assert write.generate(tree) == COMPONENTS

    # moving something into a component root is fine
    assert move.into(tree, "title", "b")
    assert ids(write.generate(tree)) == ["hero", "b", "title"]


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
