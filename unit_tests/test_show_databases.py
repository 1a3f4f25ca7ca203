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
This files contains unit tests for the database list report.
"""
import io
import unittest
from contextlib import redirect_stdout

from dbstate.command.show_databases import show_databases
from dbstate.common.format import print_list

from mock_client import MockClient

_COLUMNS = ["name", "charset", "collate"]
_ROWS = [("mydb", "latin1", "latin1_swedish_ci"),
         ("test", "utf8", "utf8_bin")]

_GRID = """+------+---------+-------------------+
| name | charset | collate           |
+------+---------+-------------------+
| mydb | latin1  | latin1_swedish_ci |
| test | utf8    | utf8_bin          |
+------+---------+-------------------+
"""

_VERTICAL = """*************************       1. row *************************
    name: mydb
 charset: latin1
 collate: latin1_swedish_ci
*************************       2. row *************************
    name: test
 charset: utf8
 collate: utf8_bin
2 rows.
"""


class TestFormat(unittest.TestCase):

    def _print(self, fmt, no_headers=False):
        f_out = io.StringIO()
        print_list(f_out, fmt, _COLUMNS, _ROWS, no_headers)
        return f_out.getvalue()

    def test_grid(self):
        self.assertEqual(_GRID, self._print("grid"))

    def test_csv(self):
        self.assertEqual("name,charset,collate\n"
                         "mydb,latin1,latin1_swedish_ci\n"
                         "test,utf8,utf8_bin\n", self._print("csv"))

    def test_tab_no_headers(self):
        self.assertEqual("mydb\tlatin1\tlatin1_swedish_ci\n"
                         "test\tutf8\tutf8_bin\n",
                         self._print("tab", no_headers=True))

    def test_vertical(self):
        self.assertEqual(_VERTICAL, self._print("vertical"))

    def test_empty(self):
        f_out = io.StringIO()
        print_list(f_out, "grid", _COLUMNS, [])
        self.assertEqual("", f_out.getvalue())


class TestShowDatabases(unittest.TestCase):

    def setUp(self):
        self.client = MockClient({'mydb': ('latin1', 'latin1_swedish_ci'),
                                  'test': ('utf8', 'utf8_bin')})

    def test_show_all(self):
        out = io.StringIO()
        with redirect_stdout(out):
            shown = show_databases(self.client, [], {'format': 'csv'})
        self.assertEqual(['mydb', 'test'], [db.name for db in shown])
        self.assertEqual("# Databases:\n"
                         "name,charset,collate\n"
                         "mydb,latin1,latin1_swedish_ci\n"
                         "test,utf8,utf8_bin\n"
                         "# 2 database(s) found.\n", out.getvalue())

    def test_show_some(self):
        out = io.StringIO()
        with redirect_stdout(out):
            shown = show_databases(self.client, ['test', 'missing'],
                                   {'format': 'tab', 'quiet': True,
                                    'no_headers': True})
        self.assertEqual(['test'], [db.name for db in shown])
        self.assertEqual("test\tutf8\tutf8_bin\n", out.getvalue())


if __name__ == "__main__":
    unittest.main()
