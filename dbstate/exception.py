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
This file contains the exceptions used by mysqldbstate and its libraries.
"""


class UtilError(Exception):
    """General errors raised by command modules to user scripts.

    This exception class is used to report errors from the command modules
    and are used to communicate known errors to the user.
    """

    def __init__(self, message, errno=0):
        super(UtilError, self).__init__(message, errno)
        self.errmsg = message
        self.errno = errno

    def __str__(self):
        return self.errmsg


class ExecutionError(UtilError):
    """Errors raised when the mysql client cannot be run or exits with a
    non-zero status.
    """

    def __init__(self, message, errno=0, command=None, stderr=None,
                 returncode=None):
        UtilError.__init__(self, message, errno)
        self.command = command
        self.stderr = stderr
        self.returncode = returncode


class ParseError(UtilError):
    """The mysql client output does not have the expected shape."""

    def __init__(self, message, errno=0, output=None):
        UtilError.__init__(self, message, errno)
        self.output = output


class ReconciliationError(UtilError):
    """The state read back after a change does not match what was applied.
    """

    def __init__(self, message, errno=0, name=None, attribute=None,
                 expected=None, actual=None):
        UtilError.__init__(self, message, errno)
        self.name = name
        self.attribute = attribute
        self.expected = expected
        self.actual = actual
