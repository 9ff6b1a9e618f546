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
Test finding elements.
"""

import logging

### find jsxdom
import sys
sys.path.insert(0, '.')

from jsxdom.dom import find, jsx, read
from jsxdom.dom.jsx import m


SRC = """\
import React from 'react';

export default function Hero() {
  return (
    <section data-editable="hero" className="hero">
      <h1 data-editable="title">Welcome</h1>
      <p data-editable="subtitle" style={{ marginTop: '10px', color: 'red' }}>Hello world</p>
      <img data-editable="image" src="/hero.png" alt="Hero" />
    </section>
  );
}
"""


def test_main():
    tree = read.parse(SRC)
    r = find.find_by_id(tree, "title")
    assert r.node.head == 'h1'
    assert r.parent[r.index] is r.node
    assert r.parent is tree[1]
    assert find.find_by_id(tree, "missing") is None

    r = find.find_by_tag_name(tree, "img")
    assert r.node.identity == "image"
    assert find.find_by_tag_name(tree, "video") is None

    assert find.locate(tree, r.node).index == 5
    assert find.is_descendant(tree[1], r.node)
    assert not find.is_descendant(r.node, tree[1])


def test_find_all_editable():
    tree = read.parse(SRC)
    elements = find.find_all_editable(tree)
    assert [e.id for e in elements] == ["hero", "title", "subtitle", "image"]
    assert [e.tag_name for e in elements] == ["section", "h1", "p", "img"]
    assert elements[0].location == find.Location(5, 4, 9, 14)
    assert elements[1].location == find.Location(6, 6, 6, 44)

    assert find.source_map(tree)["image"].line == 8

    # inserted nodes have no location
    tree[1].append(m.span("new", **{"data-editable": "new"}))
    assert find.find_all_editable(tree)[-1].location is None
    assert "new" not in find.source_map(tree)


def test_element_at():
    tree = read.parse(SRC)
    assert find.element_at(tree, 6, 20).id == "title"
    assert find.element_at(tree, 5, 10).id == "hero"
    assert find.element_at(tree, 7, 0).id == "hero"   # indent of a child line
    assert find.element_at(tree, 1, 0) is None
    assert find.element_at(tree, 100, 0) is None


def test_duplicates(caplog):
    tree = read.parse('<div><p data-editable="a">1</p><p data-editable="a">2</p></div>')
    assert find.duplicate_ids(tree) == ["a"]
    # the first one wins
    assert find.find_by_id(tree, "a").node[0].head == '1'
    with caplog.at_level(logging.WARNING, logger="jsxdom.dom.find"):
        find.find_all_editable(tree)
    assert "duplicate" in caplog.text


def test_find_component_root():
    tree = read.parse(SRC)
    r = find.find_component_root(tree)
    assert r.node.identity == "hero"
    assert find.find_component_root(tree, "Hero").node is r.node
    assert find.find_component_root(tree, "Other") is None

    text = (
        "const Icon = () => <svg />;\n"
        "const Card = ({ title }) => (\n"
        "  <div className=\"card\">{title}</div>\n"
        ");\n"
        "class Page extends React.Component {\n"
        "  render() {\n"
        "    return <main />;\n"
        "  }\n"
        "}\n"
        "export const Box = memo(function Box() {\n"
        "  return <><b /></>;\n"
        "});\n"
    )
    tree = read.parse(text)
    assert find.find_component_root(tree).node.head == 'svg'
    assert find.find_component_root(tree, "Card").node.head == 'div'
    assert find.find_component_root(tree, "Page").node.head == 'main'
    assert isinstance(find.find_component_root(tree, "Box").node, jsx.Fragment)

    # markup at the start of the text
    tree = read.parse('<div><h1 data-editable="t">Old</h1></div>')
    assert find.find_component_root(tree).node.head == 'div'
    assert find.find_component_root(read.parse("const a = 1;")) is None


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
