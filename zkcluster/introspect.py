# introspect.py -- Query the quorum state of running ZooKeeper nodes
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

"""Out-of-band introspection of ZooKeeper nodes.

A registry maps name patterns to the quorum bean of a live node. The real
registry asks the node itself through the ``mntr`` four letter word on its
client port; the static registry is filled in by tests.
"""

__all__ = ['QuorumBean', 'Registry', 'StaticRegistry', 'MonitorRegistry',
           'parse_mntr', 'QUORUM_PATTERN']

import collections
import fnmatch
import socket

QUORUM_PATTERN = "ReplicatedServer_id*"

MNTR_TIMEOUT = 1.0

QuorumBean = collections.namedtuple('QuorumBean', ['name', 'quorum_size'])


def bean_name(server_id):
    return "ReplicatedServer_id%d" % server_id


def parse_mntr(text):
    """Parse the reply to a ``mntr`` command.

    :param text: Reply text, one tab separated key/value pair per line
    :return: Dictionary with string -> string values
    """
    ret = {}
    for l in text.splitlines():
        l = l.strip()
        if not l:
            continue
        try:
            (key, value) = l.split("\t", 1)
        except ValueError:
            continue
        ret[key.strip()] = value.strip()
    return ret


class Registry(object):
    """Lookup of the quorum bean of a live node."""

    def find(self, pattern, timeout=None):
        """Find the quorum bean matching a name pattern.

        :param pattern: Shell-style pattern for the bean name
        :param timeout: Optional number of seconds the lookup may take
        :return: A QuorumBean, or None if nothing matches
        """
        raise NotImplementedError(self.find)


class StaticRegistry(Registry):
    """Registry with beans registered by hand."""

    def __init__(self, beans=()):
        self.beans = collections.OrderedDict()
        for bean in beans:
            self.register(bean)

    def register(self, bean):
        self.beans[bean.name] = bean

    def unregister(self, name):
        del self.beans[name]

    def find(self, pattern, timeout=None):
        for name, bean in self.beans.items():
            if fnmatch.fnmatchcase(name, pattern):
                return bean
        return None


class MonitorRegistry(Registry):
    """Registry backed by the ``mntr`` command of one ZooKeeper node.

    Socket errors are not caught; callers decide what an unreachable node
    means.

    :param host: Host the node serves clients on
    :param port: Client port of the node
    :param server_id: Identity of the node
    :param timeout: Longest socket timeout in seconds; a lookup may ask
        for less
    """

    def __init__(self, host, port, server_id, timeout=MNTR_TIMEOUT):
        self.host = host
        self.port = port
        self.server_id = server_id
        self.timeout = timeout

    def command(self, cmd, timeout=None):
        """Send a four letter word and return the full reply.

        :param cmd: Four letter word
        :param timeout: Socket timeout, capped at the registry's own
        """
        if timeout is None or timeout > self.timeout:
            timeout = self.timeout
        s = socket.create_connection((self.host, self.port), timeout)
        try:
            s.settimeout(timeout)
            s.sendall(cmd.encode('ascii'))
            chunks = []
            while True:
                data = s.recv(4096)
                if not data:
                    break
                chunks.append(data)
        finally:
            s.close()
        return b"".join(chunks).decode('utf-8', 'replace')

    def find(self, pattern, timeout=None):
        name = bean_name(self.server_id)
        if not fnmatch.fnmatchcase(name, pattern):
            return None
        stats = parse_mntr(self.command("mntr", timeout))
        try:
            quorum_size = int(stats["zk_quorum_size"])
        except (KeyError, ValueError):
            return None
        return QuorumBean(name, quorum_size)
