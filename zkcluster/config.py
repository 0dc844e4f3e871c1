# config.py -- ZooKeeper configuration for local cluster nodes
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

"""Per-node configuration files for a local ZooKeeper ensemble."""

__all__ = ['mk_server_lines', 'peer_ports', 'read_zoo_cfg', 'write_zoo_cfg',
           'write_node_config']

import logging
import os

from zkcluster import ConfigWriteError
from zkcluster.options import ClusterOptions

logger = logging.getLogger(__name__)

PEER_PORT_BASE = 2888
ELECTION_PORT_BASE = 3888


def peer_ports(index):
    """Return the quorum and election ports of a cluster member.

    Both are fixed offsets from the member's zero-based index, so every
    node derives the same ports for the same member.

    :param index: Zero-based index of the member
    :return: Tuple with peer port and election port
    """
    return (PEER_PORT_BASE + index, ELECTION_PORT_BASE + index)


def mk_server_lines(cluster_size, host="localhost"):
    """Create the membership stanza for a zoo.cfg file.

    :param cluster_size: Number of members in the cluster
    :param host: Host all members listen on
    :return: String with one server.N line per member
    """
    lines = []
    for j in range(cluster_size):
        (peer_port, election_port) = peer_ports(j)
        lines.append("server.%d=%s:%d:%d\n" % (
            j + 1, host, peer_port, election_port))
    return "".join(lines)


def write_zoo_cfg(f, data_dir, client_port, cluster_size, host="localhost",
                  options=None):
    """Write a zoo.cfg file.

    :param f: File-like object to write to
    :param data_dir: Absolute path of the node's data directory
    :param client_port: Port the node serves clients on
    :param cluster_size: Number of members in the cluster
    :param host: Host all members listen on
    :param options: ClusterOptions with the timing parameters
    """
    if options is None:
        options = ClusterOptions()
    f.write("""\
tickTime=%(tick_time)d
initLimit=%(init_limit)d
syncLimit=%(sync_limit)d
dataDir=%(data_dir)s
clientPort=%(client_port)d
admin.enableServer=false
4lw.commands.whitelist=mntr,srvr,ruok
""" % {
        "tick_time": options.tick_time,
        "init_limit": options.init_limit,
        "sync_limit": options.sync_limit,
        "data_dir": data_dir,
        "client_port": client_port})
    f.write(mk_server_lines(cluster_size, host))


def read_zoo_cfg(f):
    """Read the settings from a zoo.cfg file.

    :param f: File-like object to read from
    :return: Dictionary with string -> string values
    """
    ret = {}
    for l in f.readlines():
        l = l.strip()
        if not l or l[0] == "#":
            continue
        try:
            (key, value) = l.split("=", 1)
        except ValueError:
            continue
        ret[key.strip()] = value.strip()
    return ret


def write_node_config(target, server_id, client_port, cluster_size,
                      host="localhost", options=None):
    """Write the configuration and identity files for one node.

    :param target: Directory to create the files in
    :param server_id: 1-based identity of the node
    :param client_port: Port the node serves clients on
    :param cluster_size: Number of members in the cluster
    :param host: Host all members listen on
    :param options: ClusterOptions with the timing parameters
    :return: Absolute path of the configuration file
    """
    config = os.path.abspath(
        os.path.join(target, "zookeeper%d.cfg" % server_id))
    data_dir = os.path.abspath(os.path.join(target, "zk%ddata" % server_id))
    try:
        os.makedirs(data_dir, exist_ok=True)
    except OSError as e:
        raise ConfigWriteError(data_dir, e) from e

    try:
        with open(config, 'w') as f:
            write_zoo_cfg(f, data_dir, client_port, cluster_size, host,
                          options)
    except OSError as e:
        raise ConfigWriteError(config, e) from e

    myid = os.path.join(data_dir, "myid")
    try:
        with open(myid, 'w') as f:
            f.write("%d\n" % server_id)
    except OSError as e:
        raise ConfigWriteError(myid, e) from e

    logger.debug("wrote configuration for node %d to %s", server_id, config)
    return config
