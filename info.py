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

import glob

import dbstate


META_INFO = {
    'name': 'mysql-dbstate',
    'description': 'mysqldbstate - ensure MySQL databases exist with a given '
                   'character set and collation',
    'maintainer': 'Oracle',
    'maintainer_email': '',
    'version': dbstate.VERSION_STRING,
    'url': 'http://dev.mysql.com',
    'license': 'GNU GPLv2',
    'keywords': "mysql db",
    'classifiers': [
        'Development Status :: 5 - Production/Stable',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License v2 (GPLv2)',
        'Intended Audience :: System Administrators',
        'Intended Audience :: Database Administrators',
        'Operating System :: POSIX',
        'Topic :: Utilities',
        ],
    }

INSTALL = {
    'packages': [
        'dbstate',
        'dbstate.command',
        'dbstate.common',
        ],
    'scripts': glob.glob('scripts/*.py'),
    'python_requires': '>=3.7',
    'install_requires': [
        'mysql-connector-python>=8.0',
        ],
    }

if __name__ == "__main__":
    for key, item in INSTALL.items():
        print("--> {0}".format(key))
        print("      {0}".format(item))
