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
This module reads the databases of a server and their character set and
collation through the mysql client.

Methods:
  parse_database_names()     Parse the output of show databases
  parse_database_variables() Parse the output of the database variables query
"""

import logging
from collections import OrderedDict

from dbstate.common.database import DatabaseRecord
from dbstate.common.sql_transform import (SHOW_DATABASES,
                                          SHOW_DATABASE_VARIABLES)
from dbstate.exception import ParseError

CHARSET_VARIABLE = "character_set_database"
COLLATION_VARIABLE = "collation_database"
SKIP_SHOW_VARIABLE = "skip_show_database"
_DATABASE_VARIABLES = (CHARSET_VARIABLE, COLLATION_VARIABLE,
                       SKIP_SHOW_VARIABLE)

log = logging.getLogger('inventory')


def parse_database_names(output):
    """Parse the output of show databases.

    output[in]      client output, one database name per line

    Returns list of names, in the order listed
    """
    return [line.strip() for line in output.splitlines() if line.strip()]


def parse_database_variables(output):
    """Parse the key/value lines of the database variables query.

    Each line is split on whitespace and the first two tokens are taken as
    key and value. Lines that do not have both, or whose key is not one of
    the database variables, are skipped.

    output[in]      client output

    Returns dictionary of variable name to value
    """
    variables = {}
    for line in output.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < 2 or tokens[0] not in _DATABASE_VARIABLES:
            log.debug("Skipping line: %r", line)
            continue
        variables[tokens[0]] = tokens[1]
    return variables


def make_record(name, variables):
    """Build a DatabaseRecord from the parsed variables of a database.

    Raises ParseError if the character set or collation is missing.
    """
    try:
        return DatabaseRecord(name, variables[CHARSET_VARIABLE],
                              variables[COLLATION_VARIABLE])
    except KeyError as err:
        raise ParseError("Variable %s not found for database '%s'."
                         % (err.args[0], name), output=variables)


class MetadataSource(object):
    """Source of the database variables for a list of databases.

    Subclasses implement fetch() returning a dictionary of database name to
    the dictionary of its variables. Databases with no usable output may be
    left out.
    """

    def fetch(self, names):
        raise NotImplementedError


class PerDatabaseMetadata(MetadataSource):
    """Run the database variables query once per database."""

    def __init__(self, client):
        self.client = client

    def fetch(self, names):
        result = OrderedDict()
        for name in names:
            output = self.client.execute(SHOW_DATABASE_VARIABLES, name)
            result[name] = parse_database_variables(output)
        return result


class InventoryReader(object):
    """The InventoryReader class lists the databases of the server with their
    character set and collation. Every call queries the server again; results
    are never cached.
    """

    def __init__(self, client, metadata_source=None, options=None):
        """Constructor

        client[in]            object with execute(sql, database=None)
                              returning the client output (MySQLClient)
        metadata_source[in]   MetadataSource, default runs one query per
                              database
        options[in]           dictionary of options (verbosity)
        """
        if options is None:
            options = {}
        self.client = client
        if metadata_source is None:
            metadata_source = PerDatabaseMetadata(client)
        self.metadata_source = metadata_source
        self.verbosity = options.get("verbosity", 0) or 0

    def list_database_names(self):
        """Return the names reported by show databases."""
        return parse_database_names(self.client.execute(SHOW_DATABASES))

    def list_databases(self):
        """Read a fresh snapshot of the databases.

        Returns list of DatabaseRecord
        """
        names = self.list_database_names()
        metadata = self.metadata_source.fetch(names)

        records = OrderedDict()
        for name in names:
            if name in records:
                log.warning("Database '%s' listed more than once, keeping "
                            "the last record", name)
            try:
                records[name] = make_record(name, metadata.get(name, {}))
            except ParseError as err:
                log.warning("%s Database skipped.", err.errmsg)
                records.pop(name, None)
                continue
            if self.verbosity > 1:
                print("# Found database %s (%s, %s)" % records[name])

        log.debug("Inventory: %d database(s)", len(records))
        return list(records.values())

    def get_database(self, name, strict=False):
        """Read the current record of a single database.

        name[in]        database name
        strict[in]      if True, raise ParseError when the metadata of the
                        database cannot be parsed instead of skipping it

        Returns DatabaseRecord or None if the database does not exist
        """
        if name not in self.list_database_names():
            return None
        metadata = self.metadata_source.fetch([name])
        try:
            return make_record(name, metadata.get(name, {}))
        except ParseError as err:
            if strict:
                raise
            log.warning("%s Database skipped.", err.errmsg)
            return None
