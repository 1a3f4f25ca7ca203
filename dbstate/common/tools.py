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
This module contains methods for locating the mysql client tools and checking
the runtime environment of the utility.
"""

import os
import sys

from dbstate import PYTHON_MIN_VERSION, PYTHON_MAX_VERSION, \
    CONNECTOR_MIN_VERSION
from dbstate.exception import UtilError


def _add_basedir(search_paths, path_str):
    """Add a basedir and the sub directories where client tools live

    search_paths[inout] List of paths to append
    path_str[in]        The basedir path to append
    """
    search_paths.append(path_str)
    search_paths.append(os.path.join(path_str, "client"))    # for source trees
    search_paths.append(os.path.join(path_str, "bin"))
    search_paths.append(os.path.join(path_str, "scripts"))


def get_tool_path(basedir, tool, fix_ext=True, required=True,
                  defaults_paths=None, search_PATH=False):
    """Search for a MySQL tool and return the full path

    basedir[in]         The initial basedir to search
    tool[in]            The name of the tool to find
    fix_ext[in]         If True (default is True), add .exe if running on
                        Windows.
    required[in]        If True (default is True), and error will be
                        generated if the tool is not found.
    defaults_paths[in]  Default list of paths to search for the tool.
                        By default the standard install locations are used.
    search_PATH[in]     If True, the paths in the PATH environment variable
                        are searched last (default is False).

    Returns (string) full path to tool or None if not found and not required
    """
    search_paths = []
    if basedir:
        _add_basedir(search_paths, basedir)
    if defaults_paths:
        search_paths.extend(defaults_paths)
    else:
        _add_basedir(search_paths, "/usr/local/mysql/")
        _add_basedir(search_paths, "/usr/")

    if search_PATH:
        search_paths.extend(os.environ.get('PATH', '').split(os.pathsep))

    if os.name == "nt" and fix_ext:
        tool = tool + ".exe"

    for path in search_paths:
        if not path:
            continue
        norm_path = os.path.normpath(path)
        if os.path.isdir(norm_path):
            toolpath = os.path.join(norm_path, tool)
            if os.path.isfile(toolpath):
                return toolpath
    if required:
        raise UtilError("Cannot find location of %s." % tool)

    return None


def check_python_version(min_version=PYTHON_MIN_VERSION,
                         max_version=PYTHON_MAX_VERSION,
                         raise_exception_on_fail=False,
                         name="mysqldbstate",
                         exit_on_fail=True):
    """Check the Python version compatibility.

    min_version[in]               Tuple with the minimum Python version
                                  required (inclusive).
    max_version[in]               Tuple with the maximum Python version
                                  required (exclusive), None for no limit.
    raise_exception_on_fail[in]   If True, raise a UtilError instead of
                                  printing the error.
    name[in]                      Name of the utility for the message.
    exit_on_fail[in]              If True, issue exit() on failure.

    Returns bool - True if the running Python is compatible
    """
    sys_version = sys.version_info[:3]

    is_compat = min_version <= sys_version
    if is_compat and max_version:
        is_compat = sys_version < max_version

    if is_compat:
        return True

    if max_version:
        max_msg = 'or higher and lower than %s' % \
            '.'.join([str(el) for el in max_version])
    else:
        max_msg = 'or higher'
    error_msg = ('The %s requires Python version %s %s. The version of '
                 'Python detected was %s. You may need to install or '
                 'redirect the execution of this utility to an environment '
                 'that includes a compatible Python version.'
                 % (name, '.'.join([str(el) for el in min_version]),
                    max_msg, '.'.join([str(el) for el in sys_version])))

    if raise_exception_on_fail:
        raise UtilError(error_msg)

    print("ERROR: %s" % error_msg)
    if exit_on_fail:
        sys.exit(1)
    return False


def check_connector_python(print_error=True,
                           min_version=CONNECTOR_MIN_VERSION):
    """Check to see if Connector/Python is installed and meets the minimum
    required version.

    The character set table of the connector is used to resolve default
    collations.

    print_error[in]     If True, print error on failure.
    min_version[in]     Tuple with the minimum version required (inclusive).

    Returns bool - True if a compatible connector was found
    """
    try:
        import mysql.connector
    except ImportError:
        if print_error:
            print("ERROR: The MySQL Connector/Python module was not found. "
                  "mysqldbstate requires the connector to be installed. "
                  "Please check your paths or install the "
                  "mysql-connector-python package.")
        return False

    try:
        sys_version = tuple(mysql.connector.version.VERSION[:3])
    except AttributeError:
        sys_version = None

    if sys_version is not None and sys_version >= tuple(min_version):
        return True

    if print_error:
        print("ERROR: The MySQL Connector/Python module was found but it is "
              "either not properly installed or it is an old version. "
              "mysqldbstate requires Connector/Python version >= '{0}'."
              "".format('.'.join([str(el) for el in min_version])))
    return False
