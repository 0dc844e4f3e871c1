# __init__.py -- Cluster nodes
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

"""Cluster node management."""

__all__ = ['Node', 'Launcher', 'FakeNode', 'FakeLauncher', 'DOWN']

import logging

from zkcluster import ProcessStartError
from zkcluster.introspect import (
    QUORUM_PATTERN,
    QuorumBean,
    StaticRegistry,
    bean_name,
    )

logger = logging.getLogger(__name__)

DOWN = "-down-"


class IntrospectionFailure(LookupError):
    """Indicates no quorum bean could be found for a node."""


class Node(object):
    """A single member of a local cluster.

    Quorum state is read through a registry rather than from the node
    directly, since the node runs in a separate process. An unreachable
    registry is expected while the cluster is still forming, so it reads
    as an empty quorum instead of an error.
    """

    def __init__(self, name, registry):
        self.name = name
        self.registry = registry

    def quorum_bean(self, timeout=None):
        bean = self.registry.find(QUORUM_PATTERN, timeout)
        if bean is None:
            raise IntrospectionFailure(
                "no bean matching %s for %s" % (QUORUM_PATTERN, self.name))
        return bean

    def get_quorum_size(self, timeout=None):
        """Return the number of members visible to this node's quorum.

        :param timeout: Optional number of seconds the lookup may take
        :return: Quorum size, or 0 if the node can not be introspected
        """
        try:
            return self.quorum_bean(timeout).quorum_size
        except Exception as e:
            logger.debug("introspection of %s failed: %s", self, e)
            return 0

    def get_status(self):
        """Return a summary of the node's quorum state.

        :return: String with name and quorum size, or DOWN
        """
        try:
            bean = self.quorum_bean()
        except Exception as e:
            logger.debug("introspection of %s failed: %s", self, e)
            return DOWN
        return "name=%s, size=%s" % (bean.name, bean.quorum_size)

    def stop(self):
        """Stop the node.

        Stopping a node that is not running does nothing.
        """
        raise NotImplementedError(self.stop)

    def __str__(self):
        return self.name


class Launcher(object):
    """Starts cluster nodes."""

    def start(self, name, config_path):
        """Start a node.

        :param name: Name of the node
        :param config_path: Path of the node's configuration file
        :return: A running Node
        """
        raise NotImplementedError(self.start)


class FakeNode(Node):
    """In-memory node with a quorum size set by hand."""

    def __init__(self, name, config_path=None, quorum_size=None, server_id=1):
        super(FakeNode, self).__init__(name, StaticRegistry())
        self.config_path = config_path
        self.server_id = server_id
        self.stop_calls = 0
        self.running = True
        if quorum_size is not None:
            self.set_quorum_size(quorum_size)

    def set_quorum_size(self, quorum_size):
        self.registry.register(
            QuorumBean(bean_name(self.server_id), quorum_size))

    def fail_introspection(self):
        self.registry.beans.clear()

    def stop(self):
        self.stop_calls += 1
        self.running = False


class FakeLauncher(Launcher):
    """Launcher handing out FakeNodes.

    :param quorum_size: Quorum size new nodes report (None for unreachable)
    :param fail_on: Names of nodes that fail to start
    """

    def __init__(self, quorum_size=None, fail_on=()):
        self.quorum_size = quorum_size
        self.fail_on = set(fail_on)
        self.started = []

    def start(self, name, config_path):
        if name in self.fail_on:
            raise ProcessStartError(name, "refusing to start %s" % name)
        node = FakeNode(name, config_path, self.quorum_size,
                        server_id=len(self.started) + 1)
        self.started.append(node)
        return node
