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
This module contains the character set lookups used to complete a desired
database state, based on the character set table shipped with
Connector/Python. It also holds the name normalization used to compare the
values reported by the server with the requested ones.
"""

import logging

from mysql.connector.constants import CharacterSet
from mysql.connector.errors import ProgrammingError

from dbstate.exception import UtilError

log = logging.getLogger('charsets')

# Names the server reports in place of an alias (utf8 is utf8mb3 since
# MySQL 8.0.30).
_CHARSET_ALIASES = {
    "utf8": "utf8mb3",
}

_CHARSETS = CharacterSet()


def normalize_charset(charset):
    """Return the name a server reports for the given character set.

    Character set names are case insensitive and utf8 is an alias of utf8mb3.

    charset[in]     character set name

    Returns string - lower case canonical name
    """
    charset = charset.lower()
    return _CHARSET_ALIASES.get(charset, charset)


def normalize_collation(collation):
    """Return the name a server reports for the given collation.

    The character set prefix of the collation is normalized the same way as
    a character set name (utf8_bin is utf8mb3_bin).

    collation[in]   collation name

    Returns string - lower case canonical name
    """
    charset, sep, rest = collation.lower().partition("_")
    return normalize_charset(charset) + sep + rest


def _lookup_names(name, normalize):
    """Names to look up in the table, canonical name first."""
    names = [normalize(name)]
    if name.lower() not in names:
        names.append(name.lower())
    return names


def get_default_collation(charset):
    """Get the default collation name for a character set.

    charset[in]     character set name

    Returns string - collation name
    """
    for name in _lookup_names(charset, normalize_charset):
        try:
            collation, cs_name = _CHARSETS.get_default_collation(name)[:2]
        except ProgrammingError:
            continue
        if normalize_charset(cs_name) != normalize_charset(charset):
            log.warning("Character set %s is an alias of %s, using "
                        "collation %s", charset, cs_name, collation)
        return collation
    raise UtilError("Unknown character set '%s'. Please specify the "
                    "collation to use." % charset)


def get_charset_of_collation(collation):
    """Get the character set a collation belongs to.

    collation[in]   collation name

    Returns string - character set name or None if the collation is unknown
    """
    for name in _lookup_names(collation, normalize_collation):
        try:
            return _CHARSETS.get_charset_info(collation=name)[1]
        except ProgrammingError:
            continue
    return None


def check_charset_collation(charset, collation):
    """Check that a collation belongs to the given character set.

    A mismatch or an unknown name is only reported as a warning, the server
    has the final word.

    Returns bool - True if the pair is known to be valid
    """
    cs_name = get_charset_of_collation(collation)
    if cs_name is None:
        log.warning("Collation %s is unknown to the client library",
                    collation)
        return False
    if normalize_charset(cs_name) != normalize_charset(charset):
        log.warning("Collation %s belongs to character set %s, not %s",
                    collation, cs_name, charset)
        return False
    return True
