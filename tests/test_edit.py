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
Test the operation result type and loading documents.
"""

import pytest

### find jsxdom
import sys
sys.path.insert(0, '.')

import jsxdom
from jsxdom.dom import edit, jsx


def test_main():
    tree = jsx.Document()
    r = edit.succeeded(tree, "done", removed=None, index=3)
    assert r
    assert r.tree is tree
    assert r.error is None
    assert r.index == 3
    assert r.removed is None
    assert r.extra == {"removed": None, "index": 3}
    with pytest.raises(AttributeError):
        r.old_text

    r = edit.not_found(tree, "x")
    assert not r
    assert r.error == edit.NOT_FOUND
    assert 'data-editable="x"' in r.message
    assert 'not_found' in repr(r)


def test_load(tmp_path):
    """Documents can be loaded as a parce Document."""
    text = 'export const A = () => <p data-editable="a">Hi</p>;\n'
    path = tmp_path / "A.jsx"
    path.write_text(text, encoding="utf-8")
    d = jsxdom.load(str(path), encoding="utf-8")
    assert d.text() == text
    tree = d.get_transform(True)
    assert isinstance(tree, jsx.Document)
    assert tree.write() == text
    assert jsxdom.generate(jsxdom.parse(text)) == text


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
