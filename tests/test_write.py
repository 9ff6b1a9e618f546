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
Test writing a DOM tree back to text.
"""

import pytest

### find jsxdom
import sys
sys.path.insert(0, '.')

from jsxdom import insert, move, update
from jsxdom.dom import edit, jsx, read, write
from jsxdom.dom.jsx import m


def test_main():
    text = 'const A = () => <div style={{ color: "red" }}><br />{title}</div>;'
    tree = read.parse(text)
    assert write.generate(tree) == text
    assert write.Generator().write(tree) == tree.write()

    # deterministic
    assert write.generate(tree) == write.generate(tree)


def test_constructed():
    n = m.div(m.h1('title', className="big"), m.img(src="bla.png"))
    assert write.generate(n) == '<div><h1 className="big">title</h1><img src="bla.png" /></div>'
    assert m.p('a < b').write() == "<p>{'a < b'}</p>"
    assert m.input(disabled=True, tabIndex=2, hidden=False).write() == '<input disabled tabIndex={2} />'
    assert m.a('x', href={"expression": "content.url"}).write() == '<a href={content.url}>x</a>'


def test_errors():
    def error(node):
        with pytest.raises(write.GenerationError) as e:
            write.generate(node)
        return e.value

    n = jsx.Element('div', jsx.Text('x'), closing_name='span')
    assert error(n).node is n
    assert 'does not match' in str(error(n))

    n = jsx.Element('my tag')
    assert 'Invalid tag name' in str(error(n))
    # without validation the tree is written anyway
    assert write.generate(n, validate=False) == '<my tag />'

    n = jsx.Element('br', jsx.Text('x'), self_closing=True)
    assert 'Self-closing' in str(error(m.div(n)))

    assert 'Invalid markup' in str(error(m.div(jsx.Invalid("oops"))))

    n = m.div()
    n.attributes.append(jsx.Attribute('bad name', jsx.AttributeString('x')))
    assert 'Invalid attribute name' in str(error(n))

    n = m.div()
    n.append("not a node")
    assert 'Not a node' in str(error(n))


def test_tag_name_change():
    """Renaming an element renames its closing tag."""
    tree = read.parse('<div><span>x</span></div>')
    span = tree[0][0]
    assert span.closing_name == 'span'
    span.tag_name = 'strong'
    assert write.generate(tree) == '<div><strong>x</strong></div>'
    span.closing_name = 'em'
    with pytest.raises(write.GenerationError):
        write.generate(tree)


def test_reparse_after_edits():
    """Edited trees read back as the same tree."""
    text = (
        'export default function Hero() {\n'
        '  return (\n'
        '    <section data-editable="hero">\n'
        '      <h1 data-editable="title">Welcome</h1>\n'
        '      <img data-editable="image" src="/hero.png" />\n'
        '    </section>\n'
        '  );\n'
        '}\n')
    tree = read.parse(text)
    assert insert.after(tree, "title", "paragraph", {"text": "a < b", "editableId": "intro"})
    assert update.text(tree, "title", "x {y} z")
    assert move.down(tree, "title")
    assert update.attribute(tree, "image", "alt", 'say "hi" and \'bye\'')
    output = write.generate(tree)
    assert "<p data-editable=\"intro\">{'a < b'}</p>" in output
    assert "<h1 data-editable=\"title\">{'x {y} z'}</h1>" in output

    tree2 = read.parse(output)
    assert tree2.equals(tree)
    assert write.generate(tree2) == output
    attr = edit.locate(tree2, "image").node.attributes.get('alt')
    assert jsx.attribute_value(attr) == 'say "hi" and \'bye\''


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
