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
This module contains the methods that set up and check the command line
options of the utility.

Methods:
  setup_common_options()     Setup standard options for the utility
"""

import copy
import logging
import optparse
import os.path
from optparse import Option as CustomOption, OptionValueError

from dbstate import LICENSE_FRM, VERSION_FRM


_PERMITTED_FORMATS = ["grid", "tab", "csv", "vertical"]
_PERMITTED_ENSURE = ["present", "absent"]
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S %p'


class UtilitiesParser(optparse.OptionParser):
    """Special subclass of parser that allows showing of version information
       when --help is used.
    """

    def print_help(self, file=None):
        """Show version information before help
        """
        print(self.version)
        optparse.OptionParser.print_help(self, file)

    def format_epilog(self, formatter):
        return self.epilog if self.epilog is not None else ''


def prefix_check_choice(option, opt, value):
    """Check option values using case insensitive prefix compare

    option[in]             Option class instance
    opt[in]                option name
    value[in]              the value provided by the user

    Returns string - valid option chosen
    """
    choices = ", ".join([repr(choice) for choice in option.choices])

    alts = [alt for alt in option.choices if alt.startswith(value.lower())]
    if len(alts) == 1:
        return alts[0]
    elif len(alts) > 1:
        raise OptionValueError(
            ("option %s: there are multiple prefixes "
             "matching: %r (choose from %s)") % (opt, value, choices))

    raise OptionValueError("option %s: invalid choice: %r (choose from %s)"
                           % (opt, value, choices))


def license_callback(self, opt, value, parser, *args, **kwargs):
    """Show license information and exit.
    """
    print(LICENSE_FRM.format(program=parser.prog))
    parser.exit()


def path_callback(option, opt, value, parser):
    """Verify that the given path is an existing file. If it is then add it
    to the parser values.
    """
    if not os.path.exists(value):
        parser.error("the given path '{0}' in option {1} does not"
                     " exist or can not be accessed".format(value, opt))

    if not os.path.isfile(value):
        parser.error("the given path '{0}' in option {1} does not"
                     " correspond to a file".format(value, opt))

    setattr(parser.values, option.dest, value)


class CaseInsensitiveChoicesOption(CustomOption):
    """Case insensitive choices option class

    Replaces the check_choice method with prefix_check_choice() to provide
    shortcut aware, case insensitive choice selection.
    """
    TYPE_CHECKER = copy.copy(CustomOption.TYPE_CHECKER)
    TYPE_CHECKER["choice"] = prefix_check_choice

    def __init__(self, *opts, **attrs):
        if 'choices' in attrs:
            attrs['choices'] = [attr.lower() for attr in attrs['choices']]
        CustomOption.__init__(self, *opts, **attrs)


def setup_common_options(program_name, desc_str, usage_str,
                         extended_help=None):
    """Setup option parser and options common to the utility.

    This method creates an option parser and adds the options that control
    how the mysql client is found and authenticated.

    program_name[in]   The program name
    desc_str[in]       The description of the utility
    usage_str[in]      A brief usage example
    extended_help[in]  Extended help (by default: None).

    Returns parser object
    """
    program_name = program_name.replace(".py", "")
    parser = UtilitiesParser(
        version=VERSION_FRM.format(program=program_name),
        description=desc_str,
        usage=usage_str,
        add_help_option=False,
        option_class=CaseInsensitiveChoicesOption,
        epilog=extended_help,
        prog=program_name)
    parser.add_option("--help", action="help", help="display a help message "
                      "and exit")
    parser.add_option("--license", action='callback',
                      callback=license_callback,
                      help="display program's license and exit")
    parser.add_option("--defaults-file", action="callback", type="string",
                      dest="defaults_file", callback=path_callback,
                      default=None, help="credentials file passed to the "
                      "mysql client with --defaults-extra-file (default is "
                      "~/.my.cnf when it exists)")
    add_basedir_option(parser)
    return parser


def add_basedir_option(parser):
    """ Add the --basedir option.
    """
    parser.add_option("--basedir", action="store", dest="basedir",
                      default=None, type="string",
                      help="the base directory of the MySQL client tools")


def add_ensure_option(parser):
    """Add the --ensure option.
    """
    parser.add_option("--ensure", action="store", dest="ensure",
                      default="present", type="choice",
                      choices=_PERMITTED_ENSURE,
                      help="state of the databases, either present "
                      "(default) or absent")


def add_format_option(parser, help_text, default_val):
    """Add the format option.

    parser[in]        the parser instance
    help_text[in]     help text
    default_val[in]   default value
    """
    parser.add_option("-f", "--format", action="store", dest="format",
                      default=default_val, help=help_text, type="choice",
                      choices=list(_PERMITTED_FORMATS))


def add_no_headers_option(parser, restricted_formats=None):
    """Add the --no-headers option.

    parser[in]              The parser instance.
    restricted_formats[in]  List of formats supported by this option.
    """
    if restricted_formats:
        plural = "s" if len(restricted_formats) > 1 else ""
        formats_msg = (" (only applies to format{0}: "
                       "{1})").format(plural, ", ".join(restricted_formats))
    else:
        formats_msg = ""
    parser.add_option("-h", "--no-headers", action="store_true",
                      dest="no_headers", default=False,
                      help="do not show column headers{0}.".format(
                          formats_msg))


def add_verbosity(parser, quiet=True):
    """Add the verbosity and quiet options.

    parser[in]        the parser instance
    quiet[in]         if True, include the --quiet option
                      (default is True)
    """
    parser.add_option("-v", "--verbose", action="count", dest="verbosity",
                      default=0, help="control how much information is "
                      "displayed. e.g., -v = verbose, -vv = more verbose, "
                      "-vvv = debug")
    if quiet:
        parser.add_option("-q", "--quiet", action="store_true", dest="quiet",
                          help="turn off all messages for quiet execution.",
                          default=False)


def check_verbosity(options):
    """Check to see if both verbosity and quiet are being used.
    """
    if options.quiet and options.verbosity:
        print("WARNING: --verbosity is ignored when --quiet is specified.")
        options.verbosity = 0


def add_log_option(parser):
    """Add the --log option.

    parser[in]      the parser instance.
    """
    parser.add_option("--log", action="store", dest="log_file", default=None,
                      type="string", help="specify a log file to use for "
                      "logging messages")


def setup_logging(log_file=None, verbosity=0):
    """Configure logging for the utility.

    log_file[in]    file to write to, None for stderr
    verbosity[in]   level of verbosity, 3 or more selects debug messages
    """
    level = logging.DEBUG if verbosity and verbosity >= 3 else logging.INFO
    if log_file is None and not verbosity:
        level = logging.WARNING
    logging.basicConfig(filename=log_file, level=level,
                        format='%(asctime)s %(levelname)s %(message)s',
                        datefmt=_DATE_FORMAT)
