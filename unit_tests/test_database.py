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
This files contains unit tests for the desired state of a database and the
character set lookups used to complete it.
"""
import unittest

from dbstate.common.charsets import (check_charset_collation,
                                     get_charset_of_collation,
                                     get_default_collation,
                                     normalize_charset,
                                     normalize_collation)
from dbstate.common.database import (DEFAULT_CHARSET, DEFAULT_COLLATE,
                                     DatabaseRecord, DesiredState,
                                     find_record, make_desired_state)
from dbstate.exception import UtilError


class TestCharsets(unittest.TestCase):

    def test_get_default_collation(self):
        self.assertEqual('latin1_swedish_ci', get_default_collation('latin1'))
        self.assertEqual('ascii_general_ci', get_default_collation('ascii'))
        self.assertRaises(UtilError, get_default_collation, 'blah')

    def test_get_charset_of_collation(self):
        self.assertEqual('latin1',
                         get_charset_of_collation('latin1_swedish_ci'))
        self.assertIsNone(get_charset_of_collation('blah'))

    def test_lookup_case_insensitive(self):
        self.assertEqual('latin1_swedish_ci', get_default_collation('LATIN1'))
        self.assertEqual('latin1',
                         get_charset_of_collation('Latin1_Swedish_CI'))
        self.assertTrue(check_charset_collation('LATIN1', 'latin1_bin'))
        self.assertTrue(check_charset_collation('utf8', 'utf8_bin'))

    def test_normalize(self):
        self.assertEqual('latin1', normalize_charset('LATIN1'))
        self.assertEqual('utf8mb3', normalize_charset('utf8'))
        self.assertEqual('utf8mb3', normalize_charset('UTF8MB3'))
        self.assertEqual('utf8mb4', normalize_charset('utf8mb4'))
        self.assertEqual('utf8mb3_general_ci',
                         normalize_collation('UTF8_General_CI'))
        self.assertEqual('utf8mb4_bin', normalize_collation('utf8mb4_bin'))
        self.assertEqual('latin1_swedish_ci',
                         normalize_collation('latin1_swedish_ci'))
        self.assertEqual('binary', normalize_collation('binary'))

    def test_check_charset_collation(self):
        self.assertTrue(check_charset_collation('latin1',
                                                'latin1_swedish_ci'))
        with self.assertLogs('charsets', level='WARNING'):
            self.assertFalse(check_charset_collation('latin1',
                                                     'ascii_general_ci'))
        with self.assertLogs('charsets', level='WARNING'):
            self.assertFalse(check_charset_collation('latin1', 'blah'))


class TestDesiredState(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(DesiredState('mydb', DEFAULT_CHARSET,
                                      DEFAULT_COLLATE, True),
                         make_desired_state('mydb'))

    def test_default_collation(self):
        self.assertEqual(DesiredState('mydb', 'latin1', 'latin1_swedish_ci',
                                      False),
                         make_desired_state('mydb', 'latin1', present=False))

    def test_explicit(self):
        desired = make_desired_state('new_database', 'latin1',
                                     'latin1_german1_ci')
        self.assertEqual('latin1_german1_ci', desired.collate)
        self.assertTrue(desired.present)

    def test_unknown_charset(self):
        self.assertRaises(UtilError, make_desired_state, 'mydb', 'blah')
        # An explicit collation is passed through to the server.
        with self.assertLogs('charsets', level='WARNING'):
            desired = make_desired_state('mydb', 'blah', 'blah_bin')
        self.assertEqual(('blah', 'blah_bin'),
                         (desired.charset, desired.collate))

    def test_collate_only(self):
        desired = make_desired_state('mydb', collate='utf8_bin')
        self.assertEqual(DesiredState('mydb', DEFAULT_CHARSET, 'utf8_bin',
                                      True), desired)
        # The collation does not belong to the default character set.
        with self.assertLogs('charsets', level='WARNING') as logs:
            desired = make_desired_state('mydb', collate='latin1_swedish_ci')
        self.assertEqual(('utf8', 'latin1_swedish_ci'),
                         (desired.charset, desired.collate))
        self.assertIn("latin1_swedish_ci", logs.output[0])

    def test_empty_name(self):
        self.assertRaises(UtilError, make_desired_state, '')
        self.assertRaises(UtilError, make_desired_state, '   ')

    def test_find_record(self):
        snapshot = [DatabaseRecord('a', 'latin1', 'latin1_swedish_ci'),
                    DatabaseRecord('b', 'utf8', 'utf8_bin')]
        self.assertEqual(snapshot[1], find_record(snapshot, 'b'))
        self.assertIsNone(find_record(snapshot, 'c'))
        self.assertIsNone(find_record([], 'a'))


if __name__ == "__main__":
    unittest.main()
