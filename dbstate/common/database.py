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
This module contains the records describing observed and desired databases.
"""

from collections import namedtuple

from dbstate.common.charsets import check_charset_collation, \
    get_default_collation
from dbstate.exception import UtilError

DEFAULT_CHARSET = "utf8"
DEFAULT_COLLATE = "utf8_general_ci"

# Observed database, as read by the inventory.
DatabaseRecord = namedtuple("DatabaseRecord", "name charset collate")

# Target configuration of one database.
DesiredState = namedtuple("DesiredState", "name charset collate present")


def make_desired_state(name, charset=None, collate=None, present=True):
    """Build a DesiredState filling in the attributes not specified.

    name[in]        database name
    charset[in]     character set, default is utf8
    collate[in]     collation, default is the default collation of charset
                    (utf8_general_ci when charset is not given either)
    present[in]     True if the database must exist, False if it must not

    Returns DesiredState
    """
    if not name or not name.strip():
        raise UtilError("A database name is required.")
    if charset is None:
        charset = DEFAULT_CHARSET
        if collate is None:
            collate = DEFAULT_COLLATE
        else:
            check_charset_collation(charset, collate)
    elif collate is None:
        collate = get_default_collation(charset)
    else:
        check_charset_collation(charset, collate)
    return DesiredState(name, charset, collate, bool(present))


def find_record(snapshot, name):
    """Find the record with the given name in a snapshot.

    Returns DatabaseRecord or None
    """
    for record in snapshot:
        if record.name == name:
            return record
    return None
