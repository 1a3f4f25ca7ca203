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

"""dbstate"""

# Major, Minor, Patch, Status
VERSION = (1, 0, 0, 'GA', 0)

VERSION_STRING = "%s.%s.%s" % VERSION[0:3]

COPYRIGHT = "2026 Oracle and/or its affiliates. All rights reserved."

COPYRIGHT_FULL = "Copyright (c) " + COPYRIGHT + """
This is a release of mysqldbstate. This particular copy of the software is
released under the version 2 of the GNU General Public License.
"""

LICENSE = "GPLv2"

VERSION_FRM = ("mysqldbstate {program} version %s \n"
               "License type: %s" % (VERSION_STRING, LICENSE))

LICENSE_FRM = (VERSION_FRM + "\n" + COPYRIGHT_FULL)
PYTHON_MIN_VERSION = (3, 7, 0)
PYTHON_MAX_VERSION = None
CONNECTOR_MIN_VERSION = (8, 0, 0)
