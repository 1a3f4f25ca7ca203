#!/usr/bin/env python
#
# Copyright (c) 2026, Oracle and/or its affiliates. All rights reserved.
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; version 2 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA 02110-1301 USA
#
"""Setup script for mysqldbstate"""

import sys

from setuptools import setup

from info import META_INFO, INSTALL

# Check required Python version
if sys.version_info[0:2] < (3, 7):
    sys.stderr.write("mysqldbstate requires Python v3.7 or later\n")
    sys.exit(1)

ARGS = {
}

ARGS.update(META_INFO)
ARGS.update(INSTALL)

setup(**ARGS)
