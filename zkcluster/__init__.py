# __init__.py -- Local ZooKeeper clusters for high-availability tests
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

"""Boot a ZooKeeper ensemble on localhost for testing.

Each node runs in its own child process with its own configuration and
data directory. The cluster is usable once every node sees the full quorum.

Typical use::

    from zkcluster.cluster import LocalhostCluster

    with LocalhostCluster(target_dir, [2181, 2182, 2183]) as cluster:
        connect(cluster.get_connection_string())
"""

__all__ = [
    'ClusterError',
    'ConfigWriteError',
    'ProcessStartError',
    'ClusterStartupTimeout',
    'ClusterStartupTimeoutError',
    ]

__version__ = "0.1.0"


class ClusterError(Exception):
    """Base class for errors raised while bringing up a cluster."""


class ConfigWriteError(ClusterError):
    """Indicates a node's configuration or identity file could not be written."""

    def __init__(self, path, cause):
        super(ConfigWriteError, self).__init__(
            "Could not write ZooKeeper configuration %s: %s" % (path, cause))
        self.path = path
        self.cause = cause


class ProcessStartError(ClusterError):
    """Indicates a node process could not be launched."""

    def __init__(self, name, cause):
        super(ProcessStartError, self).__init__(
            "Could not start ZooKeeper node %s: %s" % (name, cause))
        self.name = name
        self.cause = cause


class ClusterStartupTimeout(ClusterError):
    """Indicates the cluster did not reach full quorum in time.

    Also raised when waiting for the cluster was interrupted.
    """

    def __init__(self, timeout, msg="waiting for ZooKeeper cluster to start"):
        super(ClusterStartupTimeout, self).__init__(
            "%s (timeout %ss)" % (msg, timeout))
        self.timeout = timeout


ClusterStartupTimeoutError = ClusterStartupTimeout
