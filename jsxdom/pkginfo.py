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
Meta-information about the jsxdom package.

The build configuration reads the version from here.

"""

#: name of the package
name = "jsxdom"

#: the version as a string
version_string = "0.1.0"

#: the current version
version = tuple(map(int, version_string.split(".")))

#: short description
description = "Edit JSX markup in component source files via a DOM"

#: long description
long_description = \
    "The jsxdom package reads JSX component source files into a DOM, " \
    "locates elements by their data-editable attribute, edits them " \
    "structurally and writes the source back."

#: maintainer name
maintainer = "Wilbert Berendsen"

#: maintainer email
maintainer_email = "info@wilbertberendsen.nl"

#: license
license = "GPL v3"

