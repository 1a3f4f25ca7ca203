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
Mock of the mysql client used by the unit tests. It answers the statements
sent by the inventory and the reconciler from an in-memory list of databases.
"""

import re

from dbstate.exception import ExecutionError

_CREATE = re.compile(r"create database if not exists `(.+)` "
                     r"character set `(.+)` collate `(.+)`$")
_DROP = re.compile(r"drop database if exists `(.+)`$")
_ALTER_CHARSET = re.compile(r"alter database `(.+)` CHARACTER SET (\S+)$")
_ALTER_COLLATE = re.compile(r"alter database `(.+)` COLLATE (\S+)$")

_VARIABLES = ("character_set_database {0}\ncollation_database {1}\n"
              "skip_show_database OFF\n")

# Collation a server switches to when only the character set is changed.
_DEFAULT_COLLATIONS = {
    'ascii': 'ascii_general_ci',
    'latin1': 'latin1_swedish_ci',
    'utf8': 'utf8_general_ci',
    'utf8mb3': 'utf8mb3_general_ci',
    'utf8mb4': 'utf8mb4_0900_ai_ci',
}


class MockClient(object):
    """Answer client statements from a dictionary of databases.

    databases[in]   dictionary of name to (charset, collate)
    """

    def __init__(self, databases=None):
        self.databases = dict(databases or {})
        self.calls = []
        # Statements listed here are accepted but change nothing.
        self.ignored = set()
        # Statements listed here fail with the given stderr text.
        self.failures = {}
        # Raw output per (sql, database), used instead of the databases.
        self.outputs = {}
        # Character set names reported under another name, for example
        # {'utf8': 'utf8mb3'} as done by MySQL 8.0.30 and later.
        self.charset_aliases = {}

    def execute(self, sql, database=None):
        self.calls.append((sql, database))
        if sql in self.failures:
            raise ExecutionError("Statement '%s' failed (exit code 1): %s"
                                 % (sql, self.failures[sql]), errno=1,
                                 stderr=self.failures[sql], returncode=1)
        if (sql, database) in self.outputs:
            return self.outputs[(sql, database)]
        if sql == "show databases":
            return "".join(["%s\n" % name for name in sorted(self.databases)])
        if sql == "show variables like '%_database'":
            charset, collate = self.databases[database]
            return _VARIABLES.format(charset, collate)
        if sql in self.ignored:
            return ""
        return self._change(sql)

    def _change(self, sql):
        match = _CREATE.match(sql)
        if match:
            name, charset, collate = match.groups()
            self.databases.setdefault(name, self._stored(charset, collate))
            return ""
        match = _DROP.match(sql)
        if match:
            self.databases.pop(match.group(1), None)
            return ""
        match = _ALTER_CHARSET.match(sql)
        if match:
            name, charset = match.groups()
            default = _DEFAULT_COLLATIONS.get(charset.lower(),
                                              "%s_general_ci" % charset)
            self.databases[name] = self._stored(charset, default)
            return ""
        match = _ALTER_COLLATE.match(sql)
        if match:
            name, collate = match.groups()
            self.databases[name] = self._stored(self.databases[name][0],
                                                collate)
            return ""
        raise ExecutionError("Unexpected statement: %s" % sql, errno=1,
                             returncode=1)

    def _stored(self, charset, collate):
        """Names as a server reports them: lower case, aliases renamed."""
        charset, collate = charset.lower(), collate.lower()
        prefix, sep, rest = collate.partition("_")
        return (self.charset_aliases.get(charset, charset),
                self.charset_aliases.get(prefix, prefix) + sep + rest)

    def statements(self):
        """Statements executed, without the inventory queries."""
        return [sql for sql, _ in self.calls
                if not sql.startswith("show ")]
