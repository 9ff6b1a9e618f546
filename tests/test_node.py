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
Test the node module.
"""

### find jsxdom
import sys
sys.path.insert(0, '.')

from jsxdom.node import Node
from jsxdom.dom import jsx


class N1(Node):
    pass


class N2(Node):
    pass


class M1(N1):
    pass


tree = \
N1(
    N2(
        M1(),
        N2(),
    ),
    N1(
        N2(),
    ),
)


def test_main():
    assert next(tree//M1) is tree[0][0]
    assert len(list(tree/N2)) == 1
    assert sum(1 for _ in tree//N2) == 3
    tree2 = tree.copy()
    assert tree.equals(tree2)
    tree2[0][1] = N1()
    assert not tree.equals(tree2)
    assert tree.contains(tree[1][0])
    assert not tree.contains(tree2[1][0])


def test_identity():
    a, b = N1(), N1()
    n = N2(a, b)
    assert a != b
    assert n.index(b) == 1
    n.remove(b)
    assert len(n) == 1 and n[0] is a


def test_walk():
    """Every node comes with its parent list and index."""
    for node, parent, index in tree.walk():
        assert parent[index] is node
    assert len(list(tree.walk())) == 5

    # send False to skip descendants
    gen = tree.walk()
    nodes = []
    for node, parent, index in gen:
        nodes.append(node)
        if isinstance(node, N2) and parent is tree:
            gen.send(False)
    assert tree[0][0] not in nodes


def test_branches():
    """Attributes of elements are traversed before the children."""
    h1 = jsx.Element('h1', jsx.Text('Hi'), attributes=[
        jsx.Attribute('title', jsx.AttributeString('x'))])
    nodes = [node for node, parent, index in h1.walk()]
    assert isinstance(nodes[0], jsx.Attribute)
    assert isinstance(nodes[1], jsx.AttributeString)
    assert isinstance(nodes[2], jsx.Text)
    assert list(h1 // jsx.Text)[0].head == 'Hi'


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
