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
Test removing elements.
"""

### find jsxdom
import sys
sys.path.insert(0, '.')

from jsxdom import remove
from jsxdom.dom import edit, read, write


SRC = """\
const Page = () => (
  <main data-editable="main">
    <h1 data-editable="title">Title</h1>
    <div data-editable="wrapper">
      <p data-editable="text">Text</p>
    </div>
    <img data-editable="image" src="/a.png"></img>
  </main>
);
"""


def test_main():
    """Removing a missing element does not change anything."""
    tree = read.parse(SRC)
    before = write.generate(tree)
    r = remove.element(tree, "missing-id")
    assert not r
    assert r.success is False
    assert r.error == edit.NOT_FOUND
    assert r.removed is None
    assert write.generate(tree) == before


def test_element():
    tree = read.parse(SRC)
    r = remove.element(tree, "title")
    assert r
    assert r.removed.head == 'h1'
    assert write.generate(tree) == SRC.replace('\n    <h1 data-editable="title">Title</h1>', '')
    assert edit.locate(tree, "title") is None

    # the root element of a component is not inside markup
    r = remove.element(tree, "main")
    assert not r and r.error == edit.INVALID_OPERATION


def test_preserve_children():
    tree = read.parse(SRC)
    assert remove.element(tree, "wrapper", preserve_children=True)
    text = write.generate(tree)
    assert 'wrapper' not in text
    assert '<p data-editable="text">Text</p>' in text
    assert edit.locate(tree, "text").parent is edit.locate(tree, "title").parent


def test_remove_multiple():
    tree = read.parse(SRC)
    r = remove.remove_multiple(tree, ["title", "wrapper", "text"])
    assert r
    assert r.removed_count == 3
    assert r.errors == []
    assert write.generate(tree) == (
        "const Page = () => (\n"
        "  <main data-editable=\"main\">\n"
        "    <img data-editable=\"image\" src=\"/a.png\"></img>\n"
        "  </main>\n"
        ");\n")

    # all or nothing
    tree = read.parse(SRC)
    r = remove.remove_multiple(tree, ["title", "missing"])
    assert not r
    assert r.error == edit.NOT_FOUND
    assert r.removed_count == 0
    assert r.errors[0][0] == "missing"
    assert write.generate(tree) == SRC


def test_clear_children():
    tree = read.parse(SRC)
    assert remove.clear_children(tree, "wrapper")
    assert '<div data-editable="wrapper"></div>' in write.generate(tree)

    # void elements become self-closing
    assert remove.clear_children(tree, "image")
    assert '<img data-editable="image" src="/a.png" />' in write.generate(tree)

    assert not remove.clear_children(tree, "missing")


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
