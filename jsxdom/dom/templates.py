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
Build new elements from templates, markup snippets or nodes.

The :func:`resolve` function is used by the insert and update operations to
turn an element specification into a node. A specification can be:

* a node, which is used as is;
* the name of a template, which is called with the options;
* a markup snippet, which is parsed.

For example::

    >>> from jsxdom.dom import templates
    >>> templates.resolve("heading", text="Welcome", level=2, editableId="welcome").write()
    '<h2 data-editable="welcome">Welcome</h2>'
    >>> templates.resolve('<p className="note">Note</p>').write()
    '<p className="note">Note</p>'

Template and option names may be given in camel case, ``heroSection`` is the
same as ``hero_section`` and ``editableId`` the same as ``editable_id``.

You can add your own templates using the :func:`register` decorator.

"""

import inspect
import logging
import re

from .element import Element
from . import jsx, read
from .jsx import m, IDENTITY_ATTRIBUTE


logger = logging.getLogger(__name__)


class TemplateError(ValueError):
    """Raised when an element specification can't be turned into a node."""
    pass


_templates = {}


def snake_case(name):
    """Return the name with camel case converted to underscores.

    For example ``heroSection`` becomes ``hero_section``.

    """
    return re.sub(r'(?<=[a-z0-9])([A-Z])', r'_\1', name).lower()


def register(name=None):
    """Decorator registering a function as a template.

    The name defaults to the function's name. The function must accept
    keyword arguments only and return a node.

    """
    def decorator(func):
        _templates[snake_case(name or func.__name__)] = func
        return func
    return decorator


def list_templates():
    """Return the sorted list of template names."""
    return sorted(_templates)


def get_template(name):
    """Return the template function for the name, or None."""
    return _templates.get(snake_case(name))


def resolve(spec, options=None, **kwargs):
    """Return a node for the element specification.

    ``options`` (a dictionary) and keyword arguments are given to the
    template. Raises :class:`TemplateError` if the spec is an unknown template
    name, if the options don't fit the template or if a markup snippet can't
    be parsed or has more than one root element.

    """
    if isinstance(spec, Element):
        return spec
    elif not isinstance(spec, str):
        raise TemplateError("Can't create an element from {}".format(repr(spec)))
    template = get_template(spec)
    if template is not None:
        opts = dict(options or (), **kwargs)
        return call_template(spec, template, opts)
    elif spec.lstrip().startswith('<'):
        try:
            return read.parse_snippet(spec)
        except read.ParseError as e:
            raise TemplateError("Invalid markup snippet: {}".format(e)) from e
    raise TemplateError("Unknown template: {}".format(spec))


def call_template(name, template, options):
    """Call the template with the options, converting camel case option names."""
    kwargs = {snake_case(key): value for key, value in options.items()}
    try:
        inspect.signature(template).bind(**kwargs)
    except TypeError as e:
        raise TemplateError("Invalid options for template {}: {}".format(name, e)) from e
    node = template(**kwargs)
    logger.debug("created <%s> from template %s", node.head, name)
    return node


def create_element(tag_name, *children, **attrs):
    """Create an element using the :data:`~.jsx.m` constructor.

    Raises :class:`TemplateError` if the tag name is invalid.

    """
    if not jsx.is_valid_tag_name(tag_name):
        raise TemplateError("Invalid tag name: {}".format(repr(tag_name)))
    return m(tag_name, *children, **attrs)


def identity(editable_id):
    """Return a dictionary with the identity attribute, empty if editable_id is not set."""
    return {IDENTITY_ATTRIBUTE: editable_id} if editable_id else {}


def block(tag_name, *children, **attrs):
    """Return an element with every child on its own line, indented."""
    nodes = []
    for child in children:
        nodes.append(jsx.Text('\n  '))
        nodes.append(child)
    if nodes:
        nodes.append(jsx.Text('\n'))
    return m(tag_name, *nodes, **attrs)


## Text elements

@register()
def heading(*, text="Heading", level=1, editable_id=None):
    if level not in range(1, 7):
        raise TemplateError("Heading level must be between 1 and 6, not {}".format(level))
    return m("h{}".format(level), text, **identity(editable_id))


@register()
def paragraph(*, text="Paragraph text", editable_id=None):
    return m.p(text, **identity(editable_id))


@register()
def span(*, text="Span text", editable_id=None):
    return m.span(text, **identity(editable_id))


## Interactive elements

@register()
def button(*, text="Click me", editable_id=None, class_name=None):
    return m.button(text, className=class_name or None, **identity(editable_id))


@register()
def link(*, text="Link text", href="#", editable_id=None):
    return m.a(text, href=href, **identity(editable_id))


## Media elements

@register()
def image(*, src="/placeholder.jpg", alt="Image", editable_id=None):
    return m.img(src=src, alt=alt, **identity(editable_id))


## Containers

def _container(tag_name, children, class_name, editable_id):
    nodes = [resolve(c) if isinstance(c, str) and c.lstrip().startswith('<')
             else jsx.text_node(c) if isinstance(c, str) else c for c in children]
    return block(tag_name, *nodes, className=class_name or None, **identity(editable_id))


@register()
def div(*, children=(), class_name=None, editable_id=None):
    return _container('div', children, class_name, editable_id)


@register()
def section(*, children=(), class_name=None, editable_id=None):
    return _container('section', children, class_name, editable_id)


## Composite templates

@register()
def hero_section(*, title="Hero Title", subtitle="Hero subtitle", cta_text="Get Started", editable_prefix="hero"):
    """A section with a title, a subtitle and a call-to-action button."""
    p = editable_prefix
    return block('section',
        m.h1(title, **identity(p + "Title")),
        m.p(subtitle, **identity(p + "Subtitle")),
        m.button(cta_text, **identity(p + "CTA")),
        className="hero", **identity(p + "Section"))


@register()
def card(*, title="Card Title", description="Card description", editable_prefix="card"):
    p = editable_prefix
    return block('div',
        m.h3(title, **identity(p + "Title")),
        m.p(description, **identity(p + "Description")),
        className="card", **identity(p))


@register()
def feature_item(*, title="Feature", description="Feature description", icon=None, editable_prefix="feature"):
    p = editable_prefix
    children = [
        m.h4(title, **identity(p + "Title")),
        m.p(description, **identity(p + "Description")),
    ]
    if icon:
        children.insert(0, m.span(icon, className="feature-icon", **identity(p + "Icon")))
    return block('div', *children, className="feature-item", **identity(p))
