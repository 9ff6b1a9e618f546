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
Run operations on source text and on files.

An operation is one of the functions of :mod:`jsxdom.insert`,
:mod:`jsxdom.remove`, :mod:`jsxdom.update`, :mod:`jsxdom.move` or
:mod:`jsxdom.style`, or any callable that gets a tree as first argument and
returns a :class:`~jsxdom.dom.edit.MutationResult`.

For example::

    >>> from jsxdom import editor, update
    >>> r = editor.apply('const A = () => <h1 data-editable="t">Hi</h1>;', update.text, 't', 'Hello')
    >>> r.code
    'const A = () => <h1 data-editable="t">Hello</h1>;'

The :class:`Editor` does the same for files, and makes sure only one
operation at a time runs on the same file.

"""

import collections
import logging
import os
import threading
import weakref

from .dom import edit, read, write


logger = logging.getLogger(__name__)


#: The result of :func:`apply` and the :class:`Editor` methods
EditResult = collections.namedtuple("EditResult", "success code message result")
EditResult.success.__doc__ = "True if the operation succeeded."
EditResult.code.__doc__ = "The new source text (None if the operation failed)."
EditResult.message.__doc__ = "A description of what happened."
EditResult.result.__doc__ = "The MutationResult of the operation (None if parsing failed)."


def apply(text, operation, *args, **kwargs):
    """Parse the text, call the operation and write the tree back to text.

    The operation is called with the tree and the other arguments. Returns
    an :class:`EditResult`. A parse error or a tree that can't be written
    results in a failed EditResult with the error message.

    """
    try:
        tree = read.parse(text)
    except read.ParseError as e:
        logger.warning("parse error: %s", e)
        return EditResult(False, None, "Parse error: {}".format(e), None)
    result = operation(tree, *args, **kwargs)
    if not result:
        return EditResult(False, None, result.message, result)
    try:
        code = write.generate(tree)
    except write.GenerationError as e:
        result = edit.failed(tree, edit.GENERATION, "Generation error: {}".format(e))
        return EditResult(False, None, result.message, result)
    return EditResult(True, code, result.message, result)


class Editor:
    """Runs operations on files.

    If ``backup`` is True (the default), the original file is saved with
    ``backup_suffix`` appended to the file name before it is overwritten.
    Files are read and written with ``encoding``.

    Operations on the same file (by absolute path) are serialized: one
    operation reads, modifies and writes the file before the next one reads
    it.

    """
    def __init__(self,
            backup = True,
            backup_suffix = '.bak',
            encoding = 'utf-8',
        ):

        #: whether to save a backup of the original file
        self.backup = backup

        #: the suffix of the backup file name
        self.backup_suffix = backup_suffix

        #: the encoding of the files
        self.encoding = encoding

        self._locks = weakref.WeakValueDictionary()
        self._locks_lock = threading.Lock()

    def lock(self, filename):
        """Return the lock for the file.

        The lock is a :class:`threading.BoundedSemaphore`, that can be
        weakly referenced, so it is kept only as long as somebody uses it.

        """
        path = os.path.abspath(filename)
        with self._locks_lock:
            lock = self._locks.get(path)
            if lock is None:
                lock = self._locks[path] = threading.BoundedSemaphore()
            return lock

    def read(self, filename):
        """Return the text of the file. Raises OSError if the file can't be read."""
        with open(filename, encoding=self.encoding) as f:
            return f.read()

    def write(self, filename, text):
        """Write the text to the file. Raises OSError if the file can't be written."""
        with open(filename, 'w', encoding=self.encoding) as f:
            f.write(text)

    def process(self, filename, operation, *args, **kwargs):
        """Apply the operation to the file contents, without writing the file.

        Returns an :class:`EditResult`.

        """
        with self.lock(filename):
            return self._process(filename, operation, args, kwargs)[0]

    def _process(self, filename, operation, args, kwargs):
        """Return a two-tuple(EditResult, text), text is None if the file can't be read."""
        try:
            text = self.read(filename)
        except OSError as e:
            logger.warning("can't read %s: %s", filename, e)
            return EditResult(False, None, "Error reading file: {}".format(e), None), None
        return apply(text, operation, *args, **kwargs), text

    def process_and_write(self, filename, operation, *args, **kwargs):
        """Apply the operation to the file and write the result back.

        Returns an :class:`EditResult`. The file is only written if the
        operation succeeded.

        """
        with self.lock(filename):
            result, text = self._process(filename, operation, args, kwargs)
            if not result.success:
                return result
            try:
                if self.backup:
                    self.write(filename + self.backup_suffix, text)
                self.write(filename, result.code)
            except OSError as e:
                logger.warning("can't write %s: %s", filename, e)
                return EditResult(False, None, "Error writing file: {}".format(e), result.result)
            logger.info("wrote %s: %s", filename, result.message)
            return result
