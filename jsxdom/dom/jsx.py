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
Elements needed for JSX markup in component source files.

A :class:`Document` contains :class:`Code` nodes (the script text around the
markup, which is kept verbatim) and the markup itself: :class:`Element` and
:class:`Fragment` nodes. The children of markup nodes are :class:`Text`,
:class:`ExpressionSlot`, :class:`Element` and :class:`Fragment` nodes.

The attributes of an Element are not children; they live in the
:attr:`Element.attributes` node, which is returned by
:meth:`Element.branches`, so traversal finds markup inside attribute values.

Simple expressions are represented structurally (:class:`Identifier`,
:class:`MemberExpression`, literals and :class:`ObjectExpression`), all other
expressions are a :class:`Script` containing :class:`Code` and markup.

"""

import html
import re

from . import element


#: The attribute that gives an element a stable identity
IDENTITY_ATTRIBUTE = "data-editable"

#: Tags that are written self-closing when they have no children
VOID_ELEMENTS = frozenset(('img', 'br', 'hr', 'input', 'meta', 'link'))

_IDENTIFIER_RE = r'[A-Za-z_$][\w$]*'

_tag_name_re = re.compile(r'[A-Za-z_$][\w$]*(?:[-:.][\w$]+)*$')
_attribute_name_re = re.compile(r'[A-Za-z_$][\w$]*(?:[-:][\w$]+)*$')

_expression_re = [(re.compile(pattern + "$", re.DOTALL), name) for pattern, name in (
    (r'true|false', 'BooleanLiteral'),
    (r'null', 'NullLiteral'),
    (_IDENTIFIER_RE, 'Identifier'),
    (_IDENTIFIER_RE + r'(?:\??\.' + _IDENTIFIER_RE + r')+', 'MemberExpression'),
    (r'-?(?:0[xXoObB][\da-fA-F_]+|(?:\d[\d_]*(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)', 'NumericLiteral'),
    (r'"(?:[^"\\\n]|\\.)*"|' r"'(?:[^'\\\n]|\\.)*'", 'StringLiteral'),
    (r'`(?:[^`\\$]|\\.|\$(?!\{))*`', 'TemplateLiteral'),
)]

_escapes = {'n': '\n', 't': '\t', 'r': '\r', 'b': '\b', 'f': '\f', 'v': '\v', '0': '\0'}


def is_valid_tag_name(name):
    """Return True if ``name`` can be used as a JSX tag name."""
    return isinstance(name, str) and bool(_tag_name_re.match(name))


def is_valid_attribute_name(name):
    """Return True if ``name`` can be used as a JSX attribute name."""
    return isinstance(name, str) and bool(_attribute_name_re.match(name))


## Document level

class Document(element.Element):
    """A full component source file.

    The ``source`` attribute holds the text the document was read from (if
    any), it is used to compute line and column numbers.

    """
    __slots__ = ('source',)

    def __init__(self, *children, source=None):
        super().__init__(*children)
        self.source = source


class Code(element.TextElement):
    """Script text that is not markup, written out unmodified."""


class Invalid(element.TextElement):
    """Marks a piece of input that could not be read as markup.

    The head is the error message. Only occurs in trees that the reader
    rejects, so a document returned by :func:`.read.parse` never contains it.

    """
    __slots__ = ('position',)

    def __init__(self, head, *children, position=None):
        super().__init__(head, *children)
        self.position = position


## Markup

class Text(element.TextElement):
    """Literal text between tags, including whitespace used for formatting."""

    @property
    def is_whitespace(self):
        """True if this text consists of whitespace only."""
        return not self.head.strip()


class Element(element.TextElement):
    """A JSX element, ``<tag attrs>children</tag>`` or ``<tag attrs />``.

    The head value is the tag name. Attributes are in the :attr:`attributes`
    node. If ``self_closing`` is not given, an element without children is
    self-closing. The ``space_end`` is the whitespace before the closing ``>``
    or ``/>`` of the opening tag.

    """
    __slots__ = ('attributes', 'self_closing', 'closing_name', 'space_end', 'tail_origin')

    def __init__(self, head, *children, attributes=(), self_closing=None, space_end=None, closing_name=None):
        super().__init__(head, *children)
        self.attributes = attributes if isinstance(attributes, Attributes) else Attributes(*attributes)
        if self_closing is None:
            self_closing = not children
        self.self_closing = self_closing
        if space_end is None:
            space_end = ' ' if self_closing else ''
        self.space_end = space_end
        self.closing_name = closing_name

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    @classmethod
    def read_head(cls, head_origin):
        """The head origin is the ``<`` and the tag name tokens."""
        return ''.join(t.text for t in head_origin[1:])

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        node = cls.from_origin(head_origin, tail_origin, *children, **attrs)
        node.head_origin = head_origin
        node.tail_origin = tail_origin
        return node

    def branches(self):
        """Attributes are traversed before the children."""
        return self.attributes, self

    def body_equals(self, other):
        return self.head == other.head and \
            self.self_closing == other.self_closing and \
            self.attributes.equals(other.attributes)

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return self._factory(self.head, *children,
            attributes=self.attributes.copy(),
            self_closing=self.self_closing and not (with_children and len(self)),
            space_end=self.space_end)

    @property
    def tag_name(self):
        """The tag name; setting it also renames the closing tag."""
        return self.head

    @tag_name.setter
    def tag_name(self, name):
        self.head = name
        self.closing_name = None

    @property
    def identity(self):
        """The string value of the identity attribute, or None."""
        attr = self.attributes.get(IDENTITY_ATTRIBUTE)
        if attr is not None and isinstance(attr.value, StringLiteral):
            return attr.value.value

    def open(self):
        """Convert a self-closing element to the open/close form."""
        if self.self_closing:
            self.self_closing = False
            if '\n' not in self.space_end:
                self.space_end = ''

    def close(self):
        """Convert an element without children to the self-closing form."""
        if not self.self_closing and not len(self):
            self.self_closing = True
            if not self.space_end:
                self.space_end = ' '

    def write_head(self):
        return '<{}{}{}{}'.format(self.head, self.attributes.write(),
            self.space_end, '/>' if self.self_closing else '>')

    def write_tail(self):
        if not self.self_closing:
            return '</{}>'.format(self.closing_name or self.head)
        return ''


class Fragment(element.BlockElement):
    """A JSX fragment, ``<>children</>``."""
    _head = '<>'
    _tail = '</>'


class ExpressionSlot(element.BlockElement):
    """An embedded expression, ``{expression}``, as child or attribute value.

    Has one child, the expression, or none for an empty slot. The ``lead``
    and ``trail`` attributes are the whitespace inside the braces.

    """
    __slots__ = ('lead', 'trail')
    _head = '{'
    _tail = '}'

    def __init__(self, *children, lead='', trail=''):
        super().__init__(*children)
        self.lead = lead
        self.trail = trail

    @property
    def expression(self):
        """The expression node, or None."""
        return self[0] if len(self) else None

    def write_head(self):
        return '{' + self.lead

    def write_tail(self):
        return self.trail + '}'

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children, lead=self.lead, trail=self.trail)


## Attributes

class Attributes(element.Element):
    """Holds the attributes of an Element, in source order."""

    def get(self, name):
        """Return the Attribute with the given name, or None."""
        for attr in self / Attribute:
            if attr.head == name:
                return attr

    def index_of(self, name):
        """Return the index of the Attribute with the given name, or -1."""
        for i, attr in enumerate(self):
            if isinstance(attr, Attribute) and attr.head == name:
                return i
        return -1


class Attribute(element.TextElement):
    """An attribute. The head is the name.

    An attribute has zero children (a presence-only attribute, meaning
    ``true``) or one child: its value, a :class:`StringLiteral` or an
    :class:`ExpressionSlot`.

    """
    __slots__ = ('space_before',)

    def __init__(self, head, *children, space_before=' '):
        super().__init__(head, *children)
        self.space_before = space_before

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    @property
    def name(self):
        return self.head

    @property
    def value(self):
        """The value node, or None for a presence-only attribute."""
        return self[0] if len(self) else None

    @value.setter
    def value(self, node):
        self[:] = () if node is None else (node,)

    def write_head(self):
        return self.space_before + self.head + ('=' if len(self) else '')

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return self._factory(self.head, *children, space_before=self.space_before)


class SpreadAttribute(element.BlockElement):
    """A spread attribute, ``{...props}``. Has one Script child."""
    __slots__ = ('space_before',)
    _head = '{'
    _tail = '}'

    def __init__(self, *children, space_before=' '):
        super().__init__(*children)
        self.space_before = space_before

    def write_head(self):
        return self.space_before + '{'

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children, space_before=self.space_before)


## Expressions

class Script(element.Element):
    """An expression that is kept as text.

    Contains :class:`Code` nodes and the markup nodes that occur inside the
    expression, for example in ``items.map(item => <li>{item}</li>)``.

    """
    def text(self):
        """Return the expression text, as it will be written."""
        return self.write()


class Identifier(element.TextElement):
    """A variable reference, like ``title``."""
    @classmethod
    def from_text(cls, text):
        return cls(text)


class MemberExpression(element.TextElement):
    """A member access, like ``content.hero.title``. The head is the text."""
    @classmethod
    def from_text(cls, text):
        return cls(text)


class StringLiteral(element.TextElement):
    """A string literal in an expression. The head is the raw text between
    the quotes, escape sequences are kept. The :attr:`value` property reads
    the actual string.

    """
    __slots__ = ('quote',)

    def __init__(self, head, *children, quote="'"):
        super().__init__(head, *children)
        self.quote = quote

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    @classmethod
    def from_text(cls, text):
        return cls._factory(text[1:-1], quote=text[0])

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        text = ''.join(t.text for t in head_origin)
        return cls._factory(text[1:-1], *children, quote=text[0], **attrs)

    @classmethod
    def from_value(cls, value, quote="'"):
        """Create a string literal with escaped value."""
        raw = value.replace('\\', '\\\\').replace(quote, '\\' + quote).replace('\n', '\\n')
        return cls._factory(raw, quote=quote)

    @property
    def value(self):
        return re.sub(r'\\(.)', lambda m: _escapes.get(m.group(1), m.group(1)), self.head, flags=re.DOTALL)

    def body_equals(self, other):
        return self.value == other.value

    def write_head(self):
        return self.quote + self.head + self.quote

    def copy(self, with_children=True):
        return self._factory(self.head, quote=self.quote)


class AttributeString(StringLiteral):
    """A string attribute value. There are no escape sequences in these, but
    HTML entities like ``&quot;`` are read as the character they stand for.

    """

    def __init__(self, head, *children, quote='"'):
        super().__init__(head, *children, quote=quote)

    @classmethod
    def from_value(cls, value, quote='"'):
        """Create an attribute string, choosing a quote character that fits."""
        if html.unescape(value) != value:
            value = value.replace('&', '&amp;')
        if quote in value:
            other = "'" if quote == '"' else '"'
            if other not in value:
                quote = other
            else:
                value = value.replace('"', '&quot;')
                quote = '"'
        return cls._factory(value, quote=quote)

    @property
    def value(self):
        return html.unescape(self.head)


class TemplateLiteral(element.TextElement):
    """A template literal without substitutions. The head is the raw text
    between the backticks.

    """
    @classmethod
    def from_text(cls, text):
        return cls(text[1:-1])

    @classmethod
    def from_value(cls, value):
        return cls(value.replace('\\', '\\\\').replace('`', '\\`').replace('${', '\\${'))

    @property
    def value(self):
        return re.sub(r'\\(.)', lambda m: _escapes.get(m.group(1), m.group(1)), self.head, flags=re.DOTALL)

    def write_head(self):
        return '`' + self.head + '`'


class NumericLiteral(element.TextElement):
    """A number. The head is the text as written."""
    @classmethod
    def from_text(cls, text):
        return cls(text)

    @classmethod
    def from_value(cls, value):
        return cls(repr(value) if isinstance(value, float) else str(value))

    @property
    def value(self):
        text = self.head.replace('_', '')
        try:
            return int(text, 0)
        except ValueError:
            return float(text)

    def body_equals(self, other):
        return self.value == other.value


class BooleanLiteral(element.TextElement):
    """``true`` or ``false``; the head is a Python bool."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, bool)

    @classmethod
    def from_text(cls, text):
        return cls(text == 'true')

    @property
    def value(self):
        return self.head

    def repr_head(self):
        return repr(self.head)

    def write_head(self):
        return 'true' if self.head else 'false'


class NullLiteral(element.HeadElement):
    """``null``."""
    _head = 'null'

    @classmethod
    def from_text(cls, text):
        return cls()

    @property
    def value(self):
        return None


class ObjectExpression(element.BlockElement):
    """An object literal with only ``key: value`` properties.

    The children are :class:`Property` nodes. The ``trailing`` attribute holds
    the text between the last property and the closing brace (whitespace and
    maybe a trailing comma).

    """
    __slots__ = ('trailing',)
    _head = '{'
    _tail = '}'

    def __init__(self, *children, trailing=None):
        super().__init__(*children)
        self.trailing = (' ' if children else '') if trailing is None else trailing

    def _write(self):
        yield '{'
        for i, n in enumerate(self):
            if i:
                yield ','
            yield from n._write()
        yield self.trailing + '}'

    def get(self, name):
        """Return the Property with the given name, or None."""
        for prop in self:
            if prop.name == name:
                return prop

    def to_dict(self):
        """Return a dictionary with the property names and their values.

        Values of literal expressions are Python values, other expressions
        are returned as text.

        """
        return {prop.name: prop.python_value() for prop in self}

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children, trailing=self.trailing)


class Property(element.TextElement):
    """A ``key: value`` property of an ObjectExpression.

    The head is the key as written (maybe quoted). The ``space_before`` is the
    whitespace before the key and ``colon`` the text between key and value.
    The single child is the value expression.

    """
    __slots__ = ('space_before', 'colon')

    def __init__(self, head, *children, space_before=' ', colon=': '):
        super().__init__(head, *children)
        self.space_before = space_before
        self.colon = colon

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    @classmethod
    def for_key(cls, name, value, space_before=' '):
        """Create a property, quoting the key if needed."""
        key = name if re.match(_IDENTIFIER_RE + '$', name) else "'{}'".format(name)
        return cls._factory(key, value, space_before=space_before, colon=': ')

    @property
    def name(self):
        """The key, without quotes."""
        key = self.head
        if key[:1] in ('"', "'"):
            return key[1:-1]
        return key

    @property
    def value(self):
        return self[0] if len(self) else None

    @value.setter
    def value(self, node):
        self[:] = (node,)

    def python_value(self):
        """Return the value of a literal, or the written text of another expression."""
        v = self.value
        if v is None:
            return None
        return literal_value(v, v.write())

    def body_equals(self, other):
        return self.name == other.name

    def write_head(self):
        return self.space_before + self.head + self.colon

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return self._factory(self.head, *children, space_before=self.space_before, colon=self.colon)


_expression_types = {cls.__name__: cls for cls in (
    BooleanLiteral, NullLiteral, Identifier, MemberExpression,
    NumericLiteral, StringLiteral, TemplateLiteral)}

LITERALS = (StringLiteral, TemplateLiteral, NumericLiteral, BooleanLiteral, NullLiteral)
MARKUP = (Element, Fragment)


def literal_value(node, default=None):
    """Return the Python value of a literal expression node, or ``default``."""
    if isinstance(node, LITERALS):
        return node.value
    return default


def expression(text):
    """Return an expression node for the text of a JavaScript expression.

    Simple expressions become their structural node type, all others a
    :class:`Script` containing a single :class:`Code` node. Leading and
    trailing whitespace is ignored.

    """
    text = text.strip()
    for regex, name in _expression_re:
        if regex.match(text):
            return _expression_types[name].from_text(text)
    return Script(Code(text))


def text_node(text):
    """Return a Text node for the text, or an ExpressionSlot with a string
    literal if the text contains characters that are not allowed in JSX text.

    """
    if re.search(r'[<>{}]', text):
        return ExpressionSlot(StringLiteral.from_value(text))
    return Text(text)


def value_node(value):
    """Return the node to use as the value of an attribute for a Python value.

    * ``True`` returns None, meaning a presence-only attribute
    * a string returns an :class:`AttributeString`
    * an int or float returns a number in an :class:`ExpressionSlot`
    * a dict with an ``"expression"`` key returns that expression in a slot
    * a node returns the node; an expression node is wrapped in a slot

    Raises TypeError for other values. (``False`` and None mean "remove the
    attribute" and are handled by the caller.)

    """
    if value is True:
        return None
    elif isinstance(value, str):
        return AttributeString.from_value(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return ExpressionSlot(NumericLiteral.from_value(value))
    elif isinstance(value, dict) and 'expression' in value:
        return ExpressionSlot(expression(value['expression']))
    elif isinstance(value, (AttributeString, ExpressionSlot)):
        return value
    elif isinstance(value, element.Element):
        return ExpressionSlot(value)
    raise TypeError("can't use {} as attribute value".format(repr(value)))


def attribute_value(attr):
    """Return the value of an Attribute node as a Python value.

    This is the inverse of :func:`value_node`: True for a presence-only
    attribute, a string for a string literal, the literal value for a literal
    in an expression slot, and a dict ``{"expression": text}`` for other
    expressions.

    """
    value = attr.value
    if value is None:
        return True
    elif isinstance(value, StringLiteral):
        return value.value
    expr = value.expression if isinstance(value, ExpressionSlot) else value
    if expr is None:
        return {"expression": ""}
    elif isinstance(expr, LITERALS):
        return expr.value
    return {"expression": expr.write()}


class _ElementConstructor:
    """The ``m`` "element constructor" object can be used to manually make
    :class:`Element` nodes easily. You call any method on it; the name will
    become the tag name. Arguments can be either strings or other jsxdom.dom
    nodes, they become the children. Keyword arguments become attributes of
    the created element, with values converted by :func:`value_node`.

    For example::

        >>> from jsxdom.dom.jsx import m
        >>> n = m.div(m.h1('title', className="big"), m.img(src="bla.png"))
        >>> n.write()
        '<div><h1 className="big">title</h1><img src="bla.png" /></div>'

    If an element has no children, it is self-closing.

    If you need an attribute name that is not a valid Python identifier name,
    use a dictionary to specify the attributes::

        >>> m.p('Hi', **{"data-editable": "intro"}).write()
        '<p data-editable="intro">Hi</p>'

    If you need a tag name that is not a valid Python member name, call ``m``
    directly, with the tag name as the first argument::

        >>> m('Card.Header', 'title').write()
        '<Card.Header>title</Card.Header>'

    Attributes with a value of None or False are left out.

    """
    def __getattr__(self, name):
        def func(*children, **attrs):
            attributes = []
            for key, value in attrs.items():
                if value is not None and value is not False:
                    node = value_node(value)
                    attributes.append(Attribute(key) if node is None else Attribute(key, node))
            nodes = [text_node(c) if isinstance(c, str) else c for c in children]
            return Element(name, *nodes, attributes=attributes)
        return func

    def __call__(self, name, *children, **attrs):
        return self.__getattr__(name)(*children, **attrs)


m = _ElementConstructor()
m.__globals__ = {}  # avoid Sphinx error: see e.g. https://github.com/sphinx-doc/sphinx/issues/8917
