# cluster.py -- ZooKeeper ensembles on localhost
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

"""Local cluster management."""

__all__ = ['LocalhostCluster']

import logging
import threading

from zkcluster.config import write_node_config
from zkcluster.options import ClusterOptions
from zkcluster.waiter import await_quorum

logger = logging.getLogger(__name__)


class LocalhostCluster(object):
    """A ZooKeeper ensemble with all of its nodes on this host.

    The constructor only returns once every node sees the full quorum. If
    any node fails to start, or the quorum is not reached in time, the
    nodes that did start are stopped again and the error propagates.

    A stopped cluster can not be restarted; create a new one instead.

    :param target: Directory to create configuration and data in
    :param ports: Client ports, one per node
    :param launcher: Launcher to start nodes with (defaults to a
        ZooKeeperLauncher)
    :param options: ClusterOptions (defaults to ones from the environment)
    :param host: Host the nodes listen on
    """

    def __init__(self, target, ports, launcher=None, options=None,
                 host="localhost"):
        ports = list(ports)
        if not ports:
            raise ValueError("a cluster needs at least one port")
        if len(set(ports)) != len(ports):
            raise ValueError("duplicate client ports: %r" % (ports,))
        if options is None:
            options = ClusterOptions.from_environ()
        if launcher is None:
            from zkcluster.node.zookeeper import ZooKeeperLauncher
            launcher = ZooKeeperLauncher(host=host,
                                         stop_timeout=options.stop_timeout)
        self.target = target
        self.host = host
        self.options = options
        self._lock = threading.RLock()
        self._nodes = [None] * len(ports)
        self._connection = ",".join("%s:%d" % (host, port) for port in ports)
        self._start(launcher, ports)

    def _start(self, launcher, ports):
        success = False
        try:
            with self._lock:
                for i, port in enumerate(ports):
                    server_id = i + 1
                    config = write_node_config(
                        self.target, server_id, port, len(ports),
                        self.host, self.options)
                    self._nodes[i] = launcher.start(
                        "zk%d" % server_id, config)
                await_quorum(self._nodes, self.options.timeout,
                             self.options.poll_interval)
            success = True
            logger.info("cluster %s is up", self._connection)
        finally:
            if not success:
                logger.error("cluster %s failed to start, shutting down",
                             self._connection)
                self.shutdown()

    def get_connection_string(self):
        """Return the client connection string for the cluster."""
        with self._lock:
            return self._connection

    def get_status(self):
        """Describe the quorum state of every node."""
        with self._lock:
            return ", ".join("%s: %s" % (node, node.get_status())
                             for node in self._nodes if node is not None)

    @property
    def nodes(self):
        with self._lock:
            return tuple(self._nodes)

    def shutdown(self):
        """Stop every node in the cluster.

        Calling this more than once is harmless.
        """
        with self._lock:
            # Nodes start in order, so an empty first slot means none run.
            if self._nodes[0] is None:
                return
            for i, node in enumerate(self._nodes):
                if node is None:
                    continue
                try:
                    node.stop()
                except Exception as e:
                    logger.warning("failed to stop %s: %s", node, e)
                self._nodes[i] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.shutdown()

    def __repr__(self):
        return "%s[%s]" % (type(self).__name__, self.get_connection_string())
