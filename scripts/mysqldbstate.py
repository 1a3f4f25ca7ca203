#!/usr/bin/env python
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
This file contains the database state utility. It makes sure databases exist
(or not) with the given character set and collation, using the mysql client.
"""

import logging
import os
import sys

from dbstate.common.tools import check_python_version

# Check Python version compatibility
check_python_version()

from dbstate.exception import UtilError
from dbstate.command.reconcile import ensure_databases
from dbstate.command.show_databases import show_databases
from dbstate.common.database import make_desired_state
from dbstate.common.mysql_client import MySQLClient, find_defaults_file
from dbstate.common.options import (add_ensure_option, add_format_option,
                                    add_log_option, add_no_headers_option,
                                    add_verbosity, check_verbosity,
                                    setup_common_options, setup_logging)
from dbstate.common.tools import check_connector_python
from dbstate import VERSION_STRING

# Constants
NAME = "mysqldbstate "
DESCRIPTION = "mysqldbstate - ensure databases exist with a given character " \
              "set and collation"
USAGE = "%prog --ensure=present --charset=latin1 db1 db2 | %prog --list"

# Check for connector/python
if not check_connector_python():
    sys.exit(1)

if __name__ == '__main__':
    # Setup the command parser
    parser = setup_common_options(os.path.basename(sys.argv[0]),
                                  DESCRIPTION, USAGE)

    # Setup utility-specific options:
    add_ensure_option(parser)

    parser.add_option("--charset", action="store", dest="charset",
                      type="string", default=None,
                      help="default character set of the databases "
                      "(default is utf8)")

    parser.add_option("--collate", action="store", dest="collate",
                      type="string", default=None,
                      help="default collation of the databases (default is "
                      "the default collation of the character set)")

    parser.add_option("--list", action="store_true", dest="list_dbs",
                      default=False, help="list the databases with their "
                      "character set and collation and exit")

    parser.add_option("--dry-run", action="store_true", dest="dry_run",
                      default=False, help="show the statements that would "
                      "be executed without executing them")

    # Output format
    add_format_option(parser, "display the list in either grid (default), "
                      "tab, csv, or vertical format", "grid")

    # No header option
    add_no_headers_option(parser, restricted_formats=['grid', 'tab', 'csv'])

    # Add verbosity and log options
    add_verbosity(parser, True)
    add_log_option(parser)

    # Now we process the rest of the arguments.
    opt, args = parser.parse_args()

    check_verbosity(opt)

    if not opt.list_dbs and not args:
        parser.error("You must specify at least one database or use --list.")

    setup_logging(opt.log_file, opt.verbosity)
    logging.info("mysqldbstate version %s started", VERSION_STRING)

    # The credentials file is resolved once and passed to the client.
    if opt.defaults_file:
        defaults_file = find_defaults_file(path=opt.defaults_file)
    else:
        defaults_file = find_defaults_file()

    options = {
        "basedir": opt.basedir,
        "defaults_file": defaults_file,
        "verbosity": opt.verbosity,
        "quiet": opt.quiet,
        "dry_run": opt.dry_run,
        "format": opt.format,
        "no_headers": opt.no_headers,
    }

    try:
        client = MySQLClient(options)
        if opt.list_dbs:
            show_databases(client, args, options)
            sys.exit(0)

        present = (opt.ensure == "present")
        desired_list = [make_desired_state(name, opt.charset, opt.collate,
                                           present) for name in args]
        failed = ensure_databases(client, desired_list, options)
    except UtilError:
        _, e, _ = sys.exc_info()
        logging.error(e.errmsg)
        print("ERROR: %s" % e.errmsg)
        sys.exit(1)

    if failed:
        sys.exit(1)

    if not opt.quiet:
        print("#...done.")

    sys.exit()
