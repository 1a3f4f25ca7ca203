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
This files contains unit tests for building the database statements.
"""
import unittest

from dbstate.common.sql_transform import (alter_charset_statement,
                                          alter_collate_statement,
                                          create_database_statement,
                                          drop_database_statement,
                                          quote_with_backticks)
from dbstate.exception import UtilError

quote_list = [
    ('new_database', '`new_database`'),
    ('my db', '`my db`'),
    ('odd`name', '`odd``name`'),
    ('`', '````'),
]


class TestSqlTransform(unittest.TestCase):

    def test_quote_with_backticks(self):
        for identifier, expected in quote_list:
            self.assertEqual(expected, quote_with_backticks(identifier))
        self.assertRaises(UtilError, quote_with_backticks, '')

    def test_statements(self):
        self.assertEqual("create database if not exists `new_database` "
                         "character set `latin1` collate "
                         "`latin1_swedish_ci`",
                         create_database_statement('new_database', 'latin1',
                                                   'latin1_swedish_ci'))
        self.assertEqual("drop database if exists `new_database`",
                         drop_database_statement('new_database'))
        self.assertEqual("alter database `new_database` CHARACTER SET blah",
                         alter_charset_statement('new_database', 'blah'))
        self.assertEqual("alter database `new_database` COLLATE blah",
                         alter_collate_statement('new_database', 'blah'))


if __name__ == "__main__":
    unittest.main()
