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
This module provides features to run SQL statements through the mysql
command-line client, wrapping the tool mysql.
"""

import logging
import optparse
import os.path
import subprocess

from dbstate.common.tools import get_tool_path
from dbstate.exception import ExecutionError, UtilError


_MYSQL_TOOL = "mysql"
DEFAULTS_FILE = ".my.cnf"

log = logging.getLogger('mysql_client')


def defaults_file_path(home_dir=None):
    """Return the default path of the credentials file (.my.cnf).

    home_dir[in]    home directory of the user running the utility.
                    Default is the home of the current user.
    """
    if home_dir is None:
        home_dir = os.path.expanduser('~')
    return os.path.normpath(os.path.join(home_dir, DEFAULTS_FILE))


def find_defaults_file(home_dir=None, path=None):
    """Resolve the credentials file to pass to the mysql client.

    The file is only used if it exists and is a regular file. Its absence is
    not an error, the client then falls back to its own option files.

    home_dir[in]    home directory to look for .my.cnf
    path[in]        explicit path, overrides the home directory lookup

    Returns string - path to the file or None
    """
    if path is None:
        path = defaults_file_path(home_dir)
    if os.path.isfile(path):
        log.debug("Using credentials file %s", path)
        return path
    log.debug("Credentials file %s not found, not used", path)
    return None


class MySQLClient(object):
    """The MySQLClient class runs SQL text through the mysql client tool and
    returns what it prints. Output is requested without column names and in
    batch mode (-NBe) so every row is a single tab separated line.
    """

    def __init__(self, options=None, find_mysql_tool=True):
        """Constructor

        options[in]          dictionary of options (tool_path, basedir,
                             defaults_file, verbosity). optparse values are
                             also accepted.
        find_mysql_tool[in]  if True, locate the mysql tool now, unless
                             tool_path was given.
        """
        if options is None:
            options = {}
        if isinstance(options, optparse.Values):
            options = vars(options)

        self._basedir = options.get("basedir", None)
        self._verbosity = options.get("verbosity", 0) or 0
        self._defaults_file = options.get("defaults_file", None)
        self._tool_path = options.get("tool_path", None)

        if self._tool_path is None and find_mysql_tool:
            self.search_mysql_tool()

    @property
    def tool_path(self):
        """Path of the mysql client tool
        """
        return self._tool_path

    @property
    def defaults_file(self):
        """Credentials file passed with --defaults-extra-file, or None
        """
        return self._defaults_file

    def search_mysql_tool(self, search_paths=None):
        """Search for the mysql client tool.

        search_paths[in]    additional paths to search before PATH
        """
        try:
            self._tool_path = get_tool_path(self._basedir, _MYSQL_TOOL,
                                            defaults_paths=search_paths,
                                            search_PATH=True)
        except UtilError as err:
            raise ExecutionError("Unable to locate the mysql client tool. "
                                 "Please confirm that the path to the MySQL "
                                 "client tools is included in the PATH. "
                                 "Error: %s" % err.errmsg)

    def build_command(self, sql, database=None):
        """Build the command line for the given statement.

        sql[in]         verbatim SQL text
        database[in]    default database for the statement (optional)

        Returns list - the command and its arguments
        """
        if not self._tool_path:
            raise ExecutionError("The mysql client tool has not been found. "
                                 "E.g., use method search_mysql_tool.")
        cmd = [self._tool_path]
        if self._defaults_file:
            cmd.append("--defaults-extra-file={0}".format(self._defaults_file))
        cmd.extend(["-NBe", sql])
        if database:
            cmd.append(database)
        return cmd

    def execute(self, sql, database=None):
        """Execute a statement and return the standard output.

        sql[in]         verbatim SQL text
        database[in]    default database for the statement (optional)

        Returns string - output of the client
        """
        cmd = self.build_command(sql, database)
        if self._verbosity > 2:
            print("# EXECUTING: {0}".format(" ".join(cmd)))
        log.debug("Executing: %s (database: %s)", sql, database)

        try:
            proc = subprocess.Popen(cmd, stdout=subprocess.PIPE,
                                    stderr=subprocess.PIPE,
                                    universal_newlines=True)
        except OSError as err:
            raise ExecutionError("Cannot execute %s: %s"
                                 % (self._tool_path, err), command=cmd)
        out, err = proc.communicate()

        if proc.returncode != 0:
            stderr = err.strip()
            raise ExecutionError("Statement '%s' failed (exit code %s): %s"
                                 % (sql, proc.returncode, stderr),
                                 errno=proc.returncode, command=cmd,
                                 stderr=stderr, returncode=proc.returncode)
        return out
