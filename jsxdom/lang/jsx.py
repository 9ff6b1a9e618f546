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
Jsx language and transformation definition.

The language only looks closely at the markup in a component source file. The
script text around it is only lexed as far as needed to find out where markup
starts: strings, comments and template literals are skipped, and markup is
recognized at the start of the text and where an expression can start, i.e.
after ``return``, ``yield``, ``=>`` and some punctuation characters.

Inside expression slots the same rules apply, and braces, parentheses and
brackets are tracked, so that the transform can recognize simple expressions
and object literals.

"""

import re

import parce.action as a
from parce import Language, lexicon, default_action, default_target
from parce.rule import bygroup

from jsxdom.dom import base, element, jsx


TAG_NAME = r'[A-Za-z_$][\w$]*(?:[-:.][\w$]+)*'
ATTRIBUTE_NAME = r'[A-Za-z_$][\w$]*(?:[-:][\w$]+)*'

#: where markup may start: after one of these, followed by ``<tag`` or ``<>``
MARKUP_LEAD = r'(?:\breturn\b|\byield\b|=>|[(\[,;:?=&|!])(?=\s*<(?:[A-Za-z_$]|>))'

_close_tag_re = re.compile(r'<\s*/\s*(.*?)\s*>$', re.DOTALL)


class Jsx(Language):
    """Language definition for JavaScript component source with JSX markup."""

    @lexicon
    def root(cls):
        # markup at the start of the text
        yield r'\A\s+(?=<(?:[A-Za-z_$]|>))', a.Whitespace, cls.markup_start
        yield r'\A<>', a.Delimiter, cls.fragment
        yield r'\A(<)(' + TAG_NAME + ')', bygroup(a.Delimiter, a.Name.Tag), cls.element
        yield from cls.script()

    @classmethod
    def script(cls):
        """Script text, in which markup may appear."""
        yield MARKUP_LEAD, a.Delimiter, cls.markup_start
        yield r'"(?:[^"\\\n]|\\.)*"', a.String.Double
        yield r"'(?:[^'\\\n]|\\.)*'", a.String.Single
        yield r'`', a.String.Template, cls.template
        yield r'//[^\n]*', a.Comment
        yield r'/\*[\s\S]*?\*/', a.Comment
        yield default_action, a.Text

    @lexicon
    def markup_start(cls):
        """Whitespace and markup after a markup lead, never creates a context
        without markup.

        """
        yield r'\s+', a.Whitespace
        yield r'<>', a.Delimiter, cls.fragment
        yield r'(<)(' + TAG_NAME + ')', bygroup(a.Delimiter, a.Name.Tag), cls.element
        yield default_target, -1

    @lexicon(consume=True)
    def element(cls):
        """The opening tag of an element, with the attributes."""
        yield r'\s+', a.Whitespace
        yield r'/>', a.Delimiter, -1
        yield r'>', a.Delimiter, cls.children
        yield ATTRIBUTE_NAME, a.Name.Attribute
        yield r'=', a.Operator
        yield r'"[^"]*"', a.String.Double
        yield r"'[^']*'", a.String.Single
        yield r'\{', a.Delimiter, cls.expression
        yield r'//[^\n]*', a.Comment
        yield r'/\*[\s\S]*?\*/', a.Comment
        yield default_action, a.Invalid

    @lexicon
    def children(cls):
        """The children of an element, up to and including the closing tag."""
        yield from cls.content(-2)

    @lexicon(consume=True)
    def fragment(cls):
        """A fragment, up to and including the closing ``</>``."""
        yield from cls.content(-1)

    @classmethod
    def content(cls, pop):
        yield r'<\s*/\s*(?:' + TAG_NAME + r')?\s*>', a.Delimiter, pop
        yield r'<>', a.Delimiter, cls.fragment
        yield r'(<)(' + TAG_NAME + ')', bygroup(a.Delimiter, a.Name.Tag), cls.element
        yield r'\{', a.Delimiter, cls.expression
        yield r'[^<{]+', a.Text
        yield r'<', a.Invalid

    @lexicon(consume=True)
    def expression(cls):
        """An expression between braces."""
        yield r'\}', a.Delimiter, -1
        yield from cls.expression_common()

    @lexicon(consume=True)
    def group(cls):
        """An expression between parentheses or brackets."""
        yield r'[)\]]', a.Delimiter, -1
        yield from cls.expression_common()

    @classmethod
    def expression_common(cls):
        yield MARKUP_LEAD, a.Delimiter, cls.markup_start
        yield r'\{', a.Delimiter, cls.expression
        yield r'[(\[]', a.Delimiter, cls.group
        yield r'[,:]', a.Separator
        yield r'"(?:[^"\\\n]|\\.)*"', a.String.Double
        yield r"'(?:[^'\\\n]|\\.)*'", a.String.Single
        yield r'`', a.String.Template, cls.template
        yield r'//[^\n]*', a.Comment
        yield r'/\*[\s\S]*?\*/', a.Comment
        yield default_action, a.Text

    @lexicon(consume=True)
    def template(cls):
        """A template literal, with ``${...}`` substitutions."""
        yield r'`', a.String.Template, -1
        yield r'\$\{', a.Delimiter, cls.expression
        yield r'\\[\s\S]|[^`\\$]+|\$', a.String.Template


class Group:
    """The result of transforming an expression, group or template context.

    The ``items`` are tokens, markup nodes and other Group instances, ``head``
    and ``tail`` are the delimiting tokens; ``tail`` is None if the closing
    delimiter was missing.

    """
    __slots__ = ('head', 'items', 'tail')

    def __init__(self, head, items, tail):
        self.head = head
        self.items = items
        self.tail = tail

    def flatten(self):
        """Yield all tokens and markup nodes, including our delimiters."""
        yield self.head
        yield from flatten(self.items)
        if self.tail is not None:
            yield self.tail


def flatten(items):
    """Yield tokens and markup nodes from items that may contain Groups."""
    for i in items:
        if isinstance(i, Group):
            yield from i.flatten()
        else:
            yield i


def is_token(item):
    """Return True if the item is a parce token and not a node or Group."""
    return not isinstance(item, (element.Element, Group))


class JsxTransform(base.Transform):
    """Transform Jsx to :mod:`jsxdom.dom.jsx` elements.

    Errors in the markup are not raised, but :class:`~jsxdom.dom.jsx.Invalid`
    nodes are put in the tree. The reader functions in :mod:`jsxdom.dom.read`
    raise an exception for them.

    """

    ## helper methods
    def invalid(self, message, token=None):
        """Return an Invalid node for the message at the token's position."""
        return jsx.Invalid(message, position=token.pos if token is not None else None)

    def splice(self, items):
        """Yield the tokens and objects of the items, with the nodes from a
        ``markup_start`` context inserted in place.

        """
        for i in items:
            if i.is_token:
                yield i
            elif i.name == "markup_start":
                yield from i.obj
            else:
                yield i.obj

    def code(self, pieces):
        """Yield Code and markup nodes from tokens and nodes.

        Adjacent tokens are combined in one Code node.

        """
        tokens = []
        for p in flatten(pieces):
            if is_token(p):
                tokens.append(p)
            else:
                if tokens:
                    yield self.factory(jsx.Code, tokens)
                    tokens = []
                yield p
        if tokens:
            yield self.factory(jsx.Code, tokens)

    def expression_node(self, items):
        """Return a three-tuple(lead, node, trail) for the expression items.

        The ``lead`` and ``trail`` are the whitespace around the expression.
        The node is None if there is no expression at all.

        """
        pieces = list(flatten(items))
        if not all(map(is_token, pieces)):
            return '', jsx.Script(*self.code(items)), ''
        text = ''.join(t.text for t in pieces)
        stripped = text.strip()
        if not stripped:
            return text, None, ''
        lead = text[:len(text) - len(text.lstrip())]
        trail = text[len(text.rstrip()):]
        significant = [i for i in items if not is_token(i) or i.text.strip()]
        if len(significant) == 1 and isinstance(significant[0], Group) \
                and significant[0].head == '{' and significant[0].tail is not None:
            obj = self.object_expression(significant[0])
            if obj is not None:
                return lead, obj, trail
        return lead, jsx.expression(stripped), trail

    def object_expression(self, group):
        """Return an ObjectExpression for the braced group, or None if the
        object literal can't be represented structurally.

        """
        parts = [[]]
        for i in group.items:
            if is_token(i) and i.action is a.Separator and i.text == ',':
                parts.append([])
            else:
                parts[-1].append(i)
        trailing = ''
        last = ''.join(t.text for t in flatten(parts[-1])) if all(map(is_token, flatten(parts[-1]))) else None
        if last is not None and not last.strip():
            parts.pop()
            trailing = (',' if parts else '') + last
        properties = []
        for part in parts:
            for colon_index, i in enumerate(part):
                if is_token(i) and i.action is a.Separator and i.text == ':':
                    break
            else:
                return None     # shorthand, spread or method
            key_items = part[:colon_index]
            if not all(map(is_token, key_items)):
                return None     # computed key
            key_text = ''.join(t.text for t in key_items)
            key = key_text.strip()
            if not re.match(r'[\w$]+$|"[^"]*"$|' r"'[^']*'$", key):
                return None
            lead, value, trail = self.expression_node(part[colon_index+1:])
            if value is None:
                return None
            space_before = key_text[:len(key_text) - len(key_text.lstrip())]
            colon = key_text[len(key_text.rstrip()):] + ':' + lead
            properties.append(jsx.Property(key, value, space_before=space_before, colon=colon))
            if part is parts[-1] and not trailing:
                trailing = trail
        return jsx.ObjectExpression(*properties, trailing=trailing)

    def slot(self, group):
        """Return an ExpressionSlot for the braced Group."""
        if group.tail is None:
            return self.invalid("Unterminated expression", group.head)
        lead, node, trail = self.expression_node(group.items)
        children = (node,) if node is not None else ()
        return self.factory(jsx.ExpressionSlot, (group.head,), (group.tail,), *children, lead=lead, trail=trail)

    def group_items(self, items, closers):
        """Return a Group from the items of an expression, group or template context."""
        tail = None
        if len(items) > 1 and items[-1].is_token and items[-1].text in closers:
            tail = items.pop()
        return Group(items[0], list(self.splice(items[1:])), tail)

    ## transform methods
    def root(self, items):
        """Process the ``root`` context."""
        return jsx.Document(*self.code(self.splice(items)))

    def markup_start(self, items):
        """Process the ``markup_start`` context; returns a list of whitespace
        tokens and markup nodes.

        """
        return [i if i.is_token else i.obj for i in items]

    def element(self, items):
        """Process the ``element`` context."""
        head_origin = items[:2]
        tag_name = items[1].text
        attributes = []
        space = ''
        attr = None         # the attribute waiting for a value after '='
        for i in items[2:]:
            if not i.is_token:
                if i.name == "expression":
                    if attr is not None:
                        attr.append(self.slot(i.obj))
                        attr = None
                    else:
                        spread = self.slot(i.obj)
                        if not isinstance(spread, jsx.ExpressionSlot):
                            return spread
                        expr = spread.expression
                        text = expr.write() if expr is not None else ''
                        if not text.startswith('...'):
                            return self.invalid("Expected '...' in spread attribute", i.obj.head)
                        script = expr if isinstance(expr, jsx.Script) else jsx.Script(jsx.Code(text))
                        attributes.append(self.factory(jsx.SpreadAttribute,
                            (i.obj.head,), (i.obj.tail,), script, space_before=space))
                        space = ''
                elif i.name == "children":
                    children, close = i.obj
                    if close is None:
                        return self.invalid("Unclosed element <{}>".format(tag_name), items[0])
                    closing_name = _close_tag_re.match(close.text).group(1)
                    if closing_name != tag_name:
                        return self.invalid("Expected closing tag </{}>, found {}".format(
                            tag_name, close.text), close)
                    return self.factory(jsx.Element, head_origin, (close,), *children,
                        attributes=attributes, self_closing=False, space_end=space,
                        closing_name=closing_name)
            elif i.action in (a.Whitespace, a.Comment):
                space += i.text
            elif i.action is a.Name.Attribute:
                if attr is not None:
                    return self.invalid("Expected attribute value", i)
                node = self.factory(jsx.Attribute, (i,), space_before=space)
                attributes.append(node)
                space = ''
            elif i.action is a.Operator:
                if not attributes or not isinstance(attributes[-1], jsx.Attribute) \
                        or len(attributes[-1]) or space:
                    return self.invalid("Unexpected '='", i)
                attr = attributes[-1]
            elif i.action in (a.String.Double, a.String.Single):
                if attr is None:
                    return self.invalid("Unexpected string", i)
                attr.append(self.factory(jsx.AttributeString, (i,)))
                attr = None
            elif i.text == '/>':
                if attr is not None:
                    return self.invalid("Expected attribute value", i)
                return self.factory(jsx.Element, head_origin, (i,),
                    attributes=attributes, self_closing=True, space_end=space)
            elif i.text == '>':
                if attr is not None:
                    return self.invalid("Expected attribute value", i)
            else:
                return self.invalid("Invalid character in tag: {}".format(repr(i.text)), i)
        return self.invalid("Unterminated tag <{}>".format(tag_name), items[0])

    def children(self, items):
        """Process the ``children`` context.

        Returns a two-tuple (nodes, closing_token), the closing token is None
        if the closing tag is missing.

        """
        close = None
        if items and items[-1].is_token and items[-1].action is a.Delimiter:
            close = items.pop()
        return list(self.content(items)), close

    def fragment(self, items):
        """Process the ``fragment`` context."""
        head_origin = items[:1]
        nodes, close = self.children(items[1:])
        if close is None:
            return self.invalid("Unclosed fragment", items[0])
        elif _close_tag_re.match(close.text).group(1):
            return self.invalid("Expected closing tag </>, found {}".format(close.text), close)
        return self.factory(jsx.Fragment, head_origin, (close,), *nodes)

    def content(self, items):
        """Yield the child nodes of an element or fragment."""
        for i in items:
            if i.is_token:
                if i.action is a.Text:
                    yield self.factory(jsx.Text, (i,))
                else:
                    yield self.invalid("Unexpected {}".format(repr(i.text)), i)
            elif i.name == "expression":
                yield self.slot(i.obj)
            else:
                yield i.obj

    def expression(self, items):
        """Process the ``expression`` context; returns a Group."""
        return self.group_items(items, ('}',))

    def group(self, items):
        """Process the ``group`` context; returns a Group."""
        return self.group_items(items, (')', ']'))

    def template(self, items):
        """Process the ``template`` context; returns a Group."""
        return self.group_items(items, ('`',))


class JsxAdHocTransform(base.AdHocTransform, JsxTransform):
    """Jsx Transform that does not keep the originating tokens."""
    pass
