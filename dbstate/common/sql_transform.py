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
This file contains the methods for building the database statements sent to
the mysql client.
"""

from dbstate.exception import UtilError

_CREATE_DATABASE = ("create database if not exists {db} "
                    "character set {charset} collate {collate}")
_DROP_DATABASE = "drop database if exists {db}"
_ALTER_CHARSET = "alter database {db} CHARACTER SET {charset}"
_ALTER_COLLATE = "alter database {db} COLLATE {collate}"

SHOW_DATABASES = "show databases"
SHOW_DATABASE_VARIABLES = "show variables like '%_database'"


def quote_with_backticks(identifier):
    """Quote the given identifier with backticks.

    Backticks inside the identifier are doubled, which is how MySQL reads a
    literal backtick in a quoted identifier.

    identifier[in]  identifier to quote.

    Returns string with the identifier quoted with backticks.
    """
    if not identifier:
        raise UtilError("Cannot quote an empty identifier.")
    return "`{0}`".format(identifier.replace("`", "``"))


def create_database_statement(name, charset, collate):
    """Return the statement that creates a database if it is missing.
    """
    return _CREATE_DATABASE.format(db=quote_with_backticks(name),
                                   charset=quote_with_backticks(charset),
                                   collate=quote_with_backticks(collate))


def drop_database_statement(name):
    """Return the statement that drops a database if it exists.
    """
    return _DROP_DATABASE.format(db=quote_with_backticks(name))


def alter_charset_statement(name, charset):
    """Return the statement that changes the default character set.
    """
    return _ALTER_CHARSET.format(db=quote_with_backticks(name),
                                 charset=charset)


def alter_collate_statement(name, collate):
    """Return the statement that changes the default collation.
    """
    return _ALTER_COLLATE.format(db=quote_with_backticks(name),
                                 collate=collate)
