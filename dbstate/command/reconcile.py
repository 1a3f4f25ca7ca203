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
This file contains the operations that bring the databases of a server to a
desired state: create, change character set or collation, and drop.
"""

import logging
from collections import namedtuple

from dbstate.common.charsets import normalize_charset, normalize_collation
from dbstate.common.database import find_record
from dbstate.common.inventory import InventoryReader
from dbstate.common.sql_transform import (alter_charset_statement,
                                          alter_collate_statement,
                                          create_database_statement,
                                          drop_database_statement)
from dbstate.exception import ParseError, ReconciliationError, UtilError

CREATE = "CREATE"
ALTER_CHARSET = "ALTER_CHARSET"
ALTER_COLLATE = "ALTER_COLLATE"
DROP = "DROP"

Action = namedtuple("Action", "kind name statement")

log = logging.getLogger('reconcile')


def plan(desired, snapshot):
    """Compute the actions needed to move a database to its desired state.

    desired[in]     DesiredState
    snapshot[in]    list of DatabaseRecord

    Returns list of Action, empty if nothing needs to change
    """
    current = find_record(snapshot, desired.name)
    actions = []
    if desired.present:
        if current is None:
            actions.append(Action(CREATE, desired.name,
                                  create_database_statement(desired.name,
                                                            desired.charset,
                                                            desired.collate)))
        else:
            if (normalize_charset(current.charset) !=
                    normalize_charset(desired.charset)):
                actions.append(Action(ALTER_CHARSET, desired.name,
                                      alter_charset_statement(
                                          desired.name, desired.charset)))
            if (normalize_collation(current.collate) !=
                    normalize_collation(desired.collate)):
                actions.append(Action(ALTER_COLLATE, desired.name,
                                      alter_collate_statement(
                                          desired.name, desired.collate)))
    elif current is not None:
        actions.append(Action(DROP, desired.name,
                              drop_database_statement(desired.name)))
    return actions


class Reconciler(object):
    """The Reconciler class applies the planned actions for a desired state
    and reads the database back after each change to confirm it landed.
    """

    def __init__(self, client, inventory, options=None):
        """Constructor

        client[in]      object with execute(sql, database=None)
        inventory[in]   InventoryReader used for the verification reads
        options[in]     dictionary of options (verbosity, quiet, dry_run)
        """
        if options is None:
            options = {}
        self.client = client
        self.inventory = inventory
        self.verbosity = options.get("verbosity", 0) or 0
        self.quiet = options.get("quiet", False)
        self.dry_run = options.get("dry_run", False)

    def _verify(self, action, desired):
        """Read the database back and compare it with the applied action."""
        try:
            record = self.inventory.get_database(desired.name, strict=True)
        except ParseError as err:
            raise ReconciliationError(
                "Database '%s' metadata could not be parsed after %s: %s"
                % (desired.name, action.kind, err.errmsg),
                name=desired.name, attribute="metadata")
        if action.kind == CREATE:
            attribute, expected = "exists", True
            actual = record is not None
            matches = actual == expected
        elif action.kind == DROP:
            attribute, expected = "exists", False
            actual = record is not None
            matches = actual == expected
        elif action.kind == ALTER_CHARSET:
            attribute, expected = "charset", desired.charset
            actual = record.charset if record else None
            matches = (actual is not None and
                       normalize_charset(actual) ==
                       normalize_charset(expected))
        else:
            attribute, expected = "collate", desired.collate
            actual = record.collate if record else None
            matches = (actual is not None and
                       normalize_collation(actual) ==
                       normalize_collation(expected))

        if not matches:
            raise ReconciliationError(
                "Database '%s' %s is '%s' after %s, expected '%s'."
                % (desired.name, attribute, actual, action.kind, expected),
                name=desired.name, attribute=attribute, expected=expected,
                actual=actual)

    def reconcile(self, desired, snapshot):
        """Bring one database to its desired state.

        desired[in]     DesiredState
        snapshot[in]    list of DatabaseRecord read before this call

        Returns list of Action applied (planned only, on a dry run)
        """
        actions = plan(desired, snapshot)
        if not actions:
            log.info("Database '%s' is up to date", desired.name)
            return actions

        for action in actions:
            if not self.quiet:
                print("# {0}{1}".format("(dry run) " if self.dry_run else "",
                                        action.statement))
            if self.dry_run:
                continue
            log.info("%s database '%s': %s", action.kind, action.name,
                     action.statement)
            self.client.execute(action.statement)
            self._verify(action, desired)
        return actions

    def reconcile_all(self, desired_list, snapshot):
        """Reconcile several databases against the same snapshot.

        A failure on one database is recorded and the others are still
        processed.

        Returns tuple (dictionary of name to actions applied,
                       dictionary of name to UtilError)
        """
        applied = {}
        failed = {}
        for desired in desired_list:
            try:
                applied[desired.name] = self.reconcile(desired, snapshot)
            except UtilError as err:
                log.error("Database '%s': %s", desired.name, err.errmsg)
                failed[desired.name] = err
        return applied, failed


def ensure_databases(client, desired_list, options=None):
    """Read the inventory once and reconcile every desired database.

    client[in]        MySQLClient
    desired_list[in]  list of DesiredState
    options[in]       dictionary of options (verbosity, quiet, dry_run)

    Returns dictionary of name to UtilError for the databases that failed
    """
    if options is None:
        options = {}
    inventory = InventoryReader(client, options=options)
    snapshot = inventory.list_databases()
    reconciler = Reconciler(client, inventory, options)
    applied, failed = reconciler.reconcile_all(desired_list, snapshot)

    if not options.get("quiet", False):
        for name in applied:
            if not applied[name]:
                print("# Database {0} is up to date.".format(name))
        for name in failed:
            print("ERROR: {0}".format(failed[name].errmsg))
    return failed
