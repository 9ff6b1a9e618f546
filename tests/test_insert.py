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
Test inserting elements.
"""

### find jsxdom
import sys
sys.path.insert(0, '.')

from jsxdom import insert
from jsxdom.dom import edit, find, indent, read, write
from jsxdom.dom.jsx import m


SRC = """\
export default function Hero() {
  return (
    <section data-editable="hero">
      <h1 data-editable="title">Welcome</h1>
      <img data-editable="image" src="/hero.png" />
    </section>
  );
}
"""

SNIPPET = '<h2 data-editable="sub">Sub</h2>'


def test_main():
    """A paragraph inserted after an inline element."""
    tree = read.parse('<div><h1 data-editable="hero">T</h1><p>Next</p></div>')
    r = insert.after(tree, "hero", "paragraph", {"text": "Hi"})
    assert r
    assert r.node.head == 'p'
    assert write.generate(tree) == '<div><h1 data-editable="hero">T</h1><p>Hi</p><p>Next</p></div>'


def test_siblings():
    tree = read.parse(SRC)
    assert insert.after(tree, "title", SNIPPET)
    assert write.generate(tree) == SRC.replace(
        '</h1>\n', '</h1>\n      <h2 data-editable="sub">Sub</h2>\n')

    tree = read.parse(SRC)
    assert insert.before(tree, "title", SNIPPET)
    assert write.generate(tree) == SRC.replace(
        '      <h1', '      <h2 data-editable="sub">Sub</h2>\n      <h1')


def test_children():
    tree = read.parse(SRC)
    assert insert.as_last_child(tree, "hero", SNIPPET)
    assert write.generate(tree) == SRC.replace(
        '/>\n    </section>', '/>\n      <h2 data-editable="sub">Sub</h2>\n    </section>')

    tree = read.parse(SRC)
    assert insert.insert(tree, "hero", SNIPPET, "asFirstChild")
    assert write.generate(tree) == SRC.replace(
        '"hero">\n', '"hero">\n      <h2 data-editable="sub">Sub</h2>\n')

    # a self-closing element is opened
    tree = read.parse(SRC)
    r = insert.as_last_child(tree, "image", "span", {"text": "x"})
    assert r
    assert write.generate(tree) == SRC.replace(
        '<img data-editable="image" src="/hero.png" />',
        '<img data-editable="image" src="/hero.png">\n'
        '        <span>x</span>\n'
        '      </img>')


def test_multiline():
    """A multi-line node is indented at the place it is inserted."""
    tree = read.parse(SRC)
    assert insert.after(tree, "title", "card", {"editablePrefix": "c"})
    text = write.generate(tree)
    assert (
        '      <div className="card" data-editable="c">\n'
        '        <h3 data-editable="cTitle">Card Title</h3>\n'
        '        <p data-editable="cDescription">Card description</p>\n'
        '      </div>\n'
        '      <img') in text

    tree = read.parse(SRC)
    assert insert.after(tree, "title", "card", indenter=indent.Indenter(indent_width=4))


def test_at_root():
    tree = read.parse(SRC)
    r = insert.at_root(tree, SNIPPET, "first")
    assert r
    assert write.generate(tree) == SRC.replace(
        '"hero">\n', '"hero">\n      <h2 data-editable="sub">Sub</h2>\n')

    tree = read.parse(SRC)
    assert insert.at_root(tree, SNIPPET, component_name="Hero")
    assert write.generate(tree).count('<h2') == 1

    r = insert.at_root(tree, SNIPPET, component_name="Footer")
    assert not r and r.error == edit.NOT_FOUND
    assert r.message == "Component Footer not found"
    r = insert.at_root(read.parse("const a = 1;"), SNIPPET)
    assert r.message == "No component found"


def test_failures():
    tree = read.parse(SRC)
    before = write.generate(tree)

    r = insert.after(tree, "missing", SNIPPET)
    assert not r and r.error == edit.NOT_FOUND
    assert r.message == 'Element with data-editable="missing" not found'

    r = insert.after(tree, "title", "nonexistent")
    assert not r and r.error == edit.TEMPLATE

    r = insert.insert(tree, "title", SNIPPET, "around")
    assert not r and r.error == edit.INVALID_OPERATION

    # the root element of a component can't get siblings
    r = insert.after(tree, "hero", SNIPPET)
    assert not r and r.error == edit.INVALID_OPERATION

    assert write.generate(tree) == before


def test_node_copied():
    """A node that is already in the tree is copied."""
    tree = read.parse(SRC)
    p = m.p("x")
    assert insert.after(tree, "title", p).node is p
    r = insert.after(tree, "image", p)
    assert r and r.node is not p
    assert write.generate(tree).count('<p>x</p>') == 2

    # but not when it has an identity
    before = write.generate(tree)
    h1 = edit.locate(tree, "title").node
    r = insert.after(tree, "image", h1)
    assert not r and r.error == edit.INVALID_OPERATION
    assert r.message == "Duplicate data-editable values: title"
    assert write.generate(tree) == before


def test_unique_identities():
    """Inserting never duplicates an identity."""
    tree = read.parse(SRC)
    assert insert.as_last_child(tree, "hero", "heroSection")
    before = write.generate(tree)
    r = insert.as_last_child(tree, "hero", "heroSection")
    assert not r and r.error == edit.INVALID_OPERATION
    assert r.message == "Duplicate data-editable values: heroCTA, heroSection, heroSubtitle, heroTitle"
    r = insert.at_root(tree, "paragraph", options={"editableId": "image"})
    assert not r and r.error == edit.INVALID_OPERATION
    assert write.generate(tree) == before
    assert not find.duplicate_ids(tree)

    # a prefix gives fresh identities
    assert insert.as_last_child(tree, "hero", "heroSection", {"editablePrefix": "second"})
    assert not find.duplicate_ids(tree)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
