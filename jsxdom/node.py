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
This module defines a :class:`Node` class, to build simple tree structures
based on Python lists.

A Node does not know its parent. Every tree has exactly one owner for each
node: the list it is in. Code that needs to know the parent of a node finds it
while traversing the tree, using :meth:`Node.walk`, which yields the node
together with the list that holds it and its index in that list.

"""

import itertools


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


class Node(list):
    """Node implements a simple tree type, based on Python :class:`list`.

    You can inherit of Node and add your own attributes and methods.

    Iterating over a node yields the child nodes, just like the underlying
    Python list. Unlike Python's list, a node always evaluates to True, even if
    there are no children.

    Some node types carry nodes that are not children, for example an element
    with attributes. Such nodes reimplement :meth:`branches` to return more
    than one list. All traversal methods descend in all branches, in the order
    :meth:`branches` returns them.

    Besides the usual methods, Node defines three special query operators:
    ``/``, ``//`` and ``^``. All these expect a Node (sub)class (or instance)
    as argument, and iterate in different ways over selected Nodes:

    * The ``/`` operator iterates over the children that are instances of the
      specified class::

        for n in node / MyClass:
            # do_something with n, which is a child of node and
            # an instance of MyClass

    * The ``//`` operator iterates over all descendants in document order::

        for n in node // MyClass:
            # n is a descendant of node and an instance of MyClass

    * The ``^`` operator iterates over the children that are *not* an instance
      of the specified class(es)::

        node[:] = (node ^ MyClass)
        # deletes all children that are an instance of MyClass

    Instead of a subclass, a class instance or a tuple of more than one class
    may also be given. If a class instance is given, :meth:`body_equals` must
    return true for the compared nodes. (Child nodes are not compared when using
    a class instance to compare with.)

    """

    __slots__ = ()

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        """Always True."""
        return True

    def __init__(self, *children):
        """Constructor.

        If children are given they are appended to the list.

        """
        if children:
            list.extend(self, children)

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is other

    def __ne__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is not other

    def _get_predicate_iterator(self, other, source_iterator, invert=False):
        """Return an iterator or NotImplemented.

        This is used by the ``/``, ``//`` and ``^`` operators.

        If the argument ``other`` is a :class:`Node` instance, the type must
        match and :meth:`body_equals` must return True. The argument may also
        be a :class:`type` or a :class:`tuple`, in which case it is used as
        argument for the :func:`isinstance` builtin function.

        For other types of argument, NotImplemented is returned.

        """
        if isinstance(other, Node):
            predicate = lambda node: type(node) is type(other) and node.body_equals(other)
        elif isinstance(other, (tuple, type)):
            predicate = lambda node: isinstance(node, other)
        else:
            return NotImplemented
        return (itertools.filterfalse if invert else filter)(predicate, source_iterator)

    def __truediv__(self, cls):
        """Iterate over children that inherit the specified class(es)."""
        return self._get_predicate_iterator(cls, self)

    def __floordiv__(self, cls):
        """Iterate over descendants inheriting the specified class(es), in document order."""
        return self._get_predicate_iterator(cls, self.descendants())

    def __xor__(self, cls):
        """Iterate over children that do not inherit the specified class(es)."""
        return self._get_predicate_iterator(cls, self, True)

    def copy(self, with_children=True):
        """Return a copy of this Node.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children)

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class, the same
        amount of children, :meth:`body_equals` returns True, and finally for
        all the children this method returns True.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def branches(self):
        """Return a tuple of the lists of nodes the traversal methods descend in.

        The default implementation returns a tuple with only this node.

        """
        return self,

    def _enumerate_branches(self):
        """Yield (node, parent, index) tuples for the nodes in all branches."""
        for branch in self.branches():
            for index, node in enumerate(branch):
                yield node, branch, index

    def walk(self):
        """Iterate over all the descendants of this node, in document order.

        Yields three-tuples ``(node, parent, index)``, where ``parent`` is the
        list the node is in, so that ``parent[index] is node``.

        When you :meth:`~generator.send` False to this generator, the
        descendants of the just yielded node will not be yielded.

        """
        stack = []
        gen = self._enumerate_branches()
        while True:
            for node, parent, index in gen:
                if (yield node, parent, index) is not False:
                    stack.append(gen)
                    gen = node._enumerate_branches()
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def descendants(self):
        """Iterate over all the descendants of this node, in document order."""
        for node, parent, index in self.walk():
            yield node

    def contains(self, node):
        """Return True if ``node`` is a descendant of this node."""
        return any(n is node for n in self.descendants())

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        def dump(node, prefix, last):
            print(prefix + (d[2 + last] if node is not self else '') + repr(node), file=file)
            if node is not self:
                prefix += d[last]
            children = [n for branch in node.branches() for n in branch]
            for i, n in enumerate(children, 1):
                dump(n, prefix, int(i == len(children)))
        dump(self, '', 1)
