# options.py -- Tunables for local ZooKeeper clusters
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

"""Cluster options and their environment overrides."""

__all__ = ['ClusterOptions']

import os

DEFAULT_TICK_TIME = 2000
DEFAULT_INIT_LIMIT = 10
DEFAULT_SYNC_LIMIT = 5
DEFAULT_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.01
DEFAULT_STOP_TIMEOUT = 5.0


class ClusterOptions(object):
    """Options for bringing up a local cluster.

    :param tick_time: ZooKeeper tick length in milliseconds
    :param init_limit: Ticks a follower may take to connect to the leader
    :param sync_limit: Ticks a follower may lag behind the leader
    :param timeout: Seconds to wait for the cluster to reach quorum
    :param poll_interval: Seconds between two quorum polls
    :param stop_timeout: Seconds to wait for a node to exit before killing it
    """

    def __init__(self, tick_time=DEFAULT_TICK_TIME,
                 init_limit=DEFAULT_INIT_LIMIT,
                 sync_limit=DEFAULT_SYNC_LIMIT,
                 timeout=DEFAULT_TIMEOUT,
                 poll_interval=DEFAULT_POLL_INTERVAL,
                 stop_timeout=DEFAULT_STOP_TIMEOUT):
        if timeout < 0:
            raise ValueError("timeout must not be negative: %r" % (timeout,))
        if poll_interval <= 0:
            raise ValueError(
                "poll interval must be positive: %r" % (poll_interval,))
        self.tick_time = tick_time
        self.init_limit = init_limit
        self.sync_limit = sync_limit
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.stop_timeout = stop_timeout

    @classmethod
    def from_environ(cls, environ=None, **overrides):
        """Build options, taking defaults from the environment.

        ZKCLUSTER_MAXTIME sets the startup timeout in seconds and
        ZKCLUSTER_POLL_INTERVAL_MS the poll interval in milliseconds.
        Explicit keyword arguments win over the environment.

        :param environ: Mapping to read from (defaults to os.environ)
        """
        if environ is None:
            environ = os.environ
        kwargs = {}
        if environ.get("ZKCLUSTER_MAXTIME", ""):
            kwargs["timeout"] = float(environ["ZKCLUSTER_MAXTIME"])
        if environ.get("ZKCLUSTER_POLL_INTERVAL_MS", ""):
            kwargs["poll_interval"] = (
                int(environ["ZKCLUSTER_POLL_INTERVAL_MS"]) / 1000.0)
        kwargs.update(overrides)
        return cls(**kwargs)

    def __repr__(self):
        return ("%s(tick_time=%r, init_limit=%r, sync_limit=%r, timeout=%r, "
                "poll_interval=%r, stop_timeout=%r)" % (
                    type(self).__name__, self.tick_time, self.init_limit,
                    self.sync_limit, self.timeout, self.poll_interval,
                    self.stop_timeout))
