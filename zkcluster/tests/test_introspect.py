# test_introspect.py -- The tests for node introspection
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

"""Tests for zkcluster.introspect."""

import socket
import socketserver
import threading
import time

from zkcluster.introspect import (
    QUORUM_PATTERN,
    MonitorRegistry,
    QuorumBean,
    Registry,
    StaticRegistry,
    parse_mntr,
    )

from zkcluster.tests import TestCase

MNTR_REPLY = """\
zk_version\t3.8.4-9316c2a7a97e1666d8f4593f34dd6fc36ecc436c
zk_server_state\tfollower
zk_quorum_size\t3
zk_znode_count\t5
"""


class MntrHandler(socketserver.BaseRequestHandler):

    def handle(self):
        cmd = self.request.recv(4)
        self.server.commands.append(cmd)
        self.request.sendall(self.server.reply.encode('utf-8'))


class MntrServer(socketserver.ThreadingTCPServer):

    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, reply):
        socketserver.ThreadingTCPServer.__init__(
            self, ("127.0.0.1", 0), MntrHandler)
        self.reply = reply
        self.commands = []


class ParseMntrTests(TestCase):

    def test_basic(self):
        stats = parse_mntr(MNTR_REPLY)
        self.assertEqual("3", stats["zk_quorum_size"])
        self.assertEqual("follower", stats["zk_server_state"])

    def test_skips_malformed(self):
        self.assertEqual({"a": "1"}, parse_mntr("\nnonsense\na\t1\n"))


class RegistryTests(TestCase):

    def test_abstract(self):
        self.assertRaises(NotImplementedError, Registry().find, "*")


class StaticRegistryTests(TestCase):

    def test_empty(self):
        self.assertIs(None, StaticRegistry().find(QUORUM_PATTERN))

    def test_match(self):
        bean = QuorumBean("ReplicatedServer_id2", 3)
        registry = StaticRegistry([QuorumBean("other", 1), bean])
        self.assertIs(bean, registry.find(QUORUM_PATTERN))

    def test_unregister(self):
        registry = StaticRegistry([QuorumBean("ReplicatedServer_id1", 1)])
        registry.unregister("ReplicatedServer_id1")
        self.assertIs(None, registry.find(QUORUM_PATTERN))


class MonitorRegistryTests(TestCase):

    def start_server(self, reply):
        server = MntrServer(reply)
        thread = threading.Thread(target=server.serve_forever)
        thread.daemon = True
        thread.start()
        self.addCleanup(server.server_close)
        self.addCleanup(server.shutdown)
        return server

    def test_find(self):
        server = self.start_server(MNTR_REPLY)
        registry = MonitorRegistry("127.0.0.1", server.server_address[1], 2)
        self.assertEqual(QuorumBean("ReplicatedServer_id2", 3),
            registry.find(QUORUM_PATTERN))
        self.assertEqual([b"mntr"], server.commands)

    def test_no_quorum_size(self):
        server = self.start_server("zk_server_state\tstandalone\n")
        registry = MonitorRegistry("127.0.0.1", server.server_address[1], 1)
        self.assertIs(None, registry.find(QUORUM_PATTERN))

    def test_pattern_mismatch(self):
        registry = MonitorRegistry("127.0.0.1", 1, 1)
        self.assertIs(None, registry.find("StandaloneServer*"))

    def test_unreachable(self):
        s = socket.socket()
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
        s.close()
        registry = MonitorRegistry("127.0.0.1", port, 1, timeout=0.5)
        self.assertRaises(OSError, registry.find, QUORUM_PATTERN)

    def silent_port(self):
        # Connections are queued by the kernel but never answered.
        s = socket.socket()
        self.addCleanup(s.close)
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        return s.getsockname()[1]

    def test_lookup_timeout(self):
        registry = MonitorRegistry("127.0.0.1", self.silent_port(), 1,
            timeout=10)
        start = time.monotonic()
        self.assertRaises(OSError, registry.find, QUORUM_PATTERN, 0.2)
        self.assertTrue(time.monotonic() - start < 5)

    def test_lookup_timeout_capped(self):
        registry = MonitorRegistry("127.0.0.1", self.silent_port(), 1,
            timeout=0.2)
        start = time.monotonic()
        self.assertRaises(OSError, registry.find, QUORUM_PATTERN, 10)
        self.assertTrue(time.monotonic() - start < 5)
