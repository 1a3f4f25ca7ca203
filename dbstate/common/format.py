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
This module contains helper methods for formatting output.

METHODS
    print_list - Write rows as a grid like mysql client query results, as a
                 separated-value list or in vertical format
"""

import csv
import os


def _format_col_separator(f_out, columns, col_widths):
    """Format a row of the header with column separators
    """
    for i in range(0, len(columns)):
        f_out.write('{0}{1:{1}<{2}}'.format("+", "-", col_widths[i] + 2))
    f_out.write("+\n")


def _format_row_separator(f_out, columns, col_widths, row):
    """Format a row of data with column separators.
    """
    for i, _ in enumerate(columns):
        f_out.write("| ")
        f_out.write("{0:<{1}} ".format("%s" % row[i], col_widths[i]))
    f_out.write("|\n")


def get_col_widths(columns, rows):
    """Get the maximum column width for a list of rows

    Returns: list - max column widths
    """
    col_widths = [len(col) for col in columns]
    for row in rows:
        for i in range(0, len(columns)):
            col_size = len(str(row[i]))
            if col_size > col_widths[i]:
                col_widths[i] = col_size
    return col_widths


def format_tabular_list(f_out, columns, rows, options=None):
    """Format a list in a pretty grid format.

    f_out[in]          file to print to (e.g. sys.stdout)
    columns[in]        list of column names
    rows[in]           list of rows to print
    options[in]        options controlling list:
        print_header   if False, do not print header
        separator      if set, use the char specified for a CSV output
    """
    if options is None:
        options = {}
    print_header = options.get("print_header", True)
    separator = options.get("separator", None)

    if len(rows) == 0:
        return
    if separator is not None:
        if os.name == "posix":
            csv_writer = csv.writer(f_out, delimiter=separator,
                                    lineterminator='\n')
        else:
            csv_writer = csv.writer(f_out, delimiter=separator)
        if print_header:
            csv_writer.writerow(columns)
        for row in rows:
            csv_writer.writerow(row)
    else:
        col_widths = get_col_widths(columns, rows)
        if print_header:
            _format_col_separator(f_out, columns, col_widths)
            _format_row_separator(f_out, columns, col_widths, columns)
        _format_col_separator(f_out, columns, col_widths)
        for row in rows:
            _format_row_separator(f_out, columns, col_widths, row)
        _format_col_separator(f_out, columns, col_widths)


def format_vertical_list(f_out, columns, rows):
    r"""Format a list in a vertical format similar to the \G format in the
    mysql monitor.
    """
    if len(rows) == 0:
        return

    max_colwidth = max([len(col) + 1 for col in columns])
    row_num = 0
    for row in rows:
        row_num += 1
        f_out.write('{0:{0}<{1}}{2:{3}>{4}}. row {0:{0}<{1}}\n'.format(
            "*", 25, row_num, ' ', 8))
        for i, col in enumerate(columns):
            f_out.write(u"{0:>{1}}: {2}\n".format(col, max_colwidth, row[i]))

    row_str = 'rows' if row_num > 1 else 'row'
    f_out.write("{0} {1}.\n".format(row_num, row_str))


def print_list(f_out, fmt, columns, rows, no_headers=False, sort=False):
    """Print a list based on format.

    f_out[in]         file to print to (e.g. sys.stdout)
    fmt[in]           Format (grid, csv, tab, vertical)
    columns[in]       Column headings
    rows[in]          Rows to print
    no_headers[in]    If True, do not print headings (column names)
    sort[in]          If True, sort list before printing
    """
    rows = list(rows)
    if sort:
        rows.sort()
    list_options = {
        'print_header': not no_headers,
    }
    if fmt == "vertical":
        format_vertical_list(f_out, columns, rows)
    elif fmt == "tab":
        list_options['separator'] = '\t'
        format_tabular_list(f_out, columns, rows, list_options)
    elif fmt == "csv":
        list_options['separator'] = ','
        format_tabular_list(f_out, columns, rows, list_options)
    else:
        format_tabular_list(f_out, columns, rows, list_options)
