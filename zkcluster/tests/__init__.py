# __init__.py -- The tests for zkcluster
# Copyright (C) 2026 The zkcluster developers
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; version 3
# of the License or (at your option) any later version of
# the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,
# MA  02110-1301, USA.

"""Tests for zkcluster."""

import shutil
import tempfile
import unittest

import testtools


class TestCase(testtools.TestCase):
    """A zkcluster test case."""


class TestCaseInTempDir(TestCase):

    def setUp(self):
        super(TestCaseInTempDir, self).setUp()
        self.tempdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tempdir)


def test_suite():
    result = unittest.TestSuite()
    names = ['config', 'options', 'introspect', 'node', 'zookeeper',
             'waiter', 'cluster', 'logger']
    module_names = ['zkcluster.tests.test_' + name for name in names]
    loader = unittest.TestLoader()
    result.addTests(loader.loadTestsFromNames(module_names))
    return result
