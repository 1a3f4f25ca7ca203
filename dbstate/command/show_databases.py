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

"""
This file contains the report of the databases of a server with their
character set and collation.
"""

import sys

from dbstate.common.format import print_list
from dbstate.common.inventory import InventoryReader

_COLUMNS = ["name", "charset", "collate"]


def show_databases(client, names=None, options=None):
    """Print the databases of the server.

    client[in]      MySQLClient
    names[in]       list of database names to show, all if empty
    options[in]     dictionary of options (format, no_headers, verbosity,
                    quiet)

    Returns list of DatabaseRecord shown
    """
    if options is None:
        options = {}
    inventory = InventoryReader(client, options=options)
    snapshot = inventory.list_databases()
    if names:
        snapshot = [record for record in snapshot if record.name in names]

    if not options.get("quiet", False):
        print("# Databases:")
    print_list(sys.stdout, options.get("format", "grid"), _COLUMNS, snapshot,
               options.get("no_headers", False))
    if not options.get("quiet", False):
        print("# {0} database(s) found.".format(len(snapshot)))
    return snapshot
