# zookeeper.py -- ZooKeeper nodes running as child processes
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

"""ZooKeeper nodes running QuorumPeerMain in a child process."""

__all__ = ['ZooKeeperProcess', 'ZooKeeperLauncher', 'bindir_path',
           'describe_exit', 'QUORUM_PEER_MAIN']

import logging
import os
import subprocess

from zkcluster import ProcessStartError
from zkcluster.config import read_zoo_cfg
from zkcluster.introspect import MonitorRegistry
from zkcluster.node import Launcher, Node
from zkcluster.options import DEFAULT_STOP_TIMEOUT

logger = logging.getLogger(__name__)

QUORUM_PEER_MAIN = "org.apache.zookeeper.server.quorum.QuorumPeerMain"


def bindir_path(binary_mapping, bindir, path):
    """Find the executable to use.

    :param binary_mapping: Dictionary mapping binary names
    :param bindir: Directory with binaries (None to search PATH)
    :param path: Name of the executable to run
    :return: Full path to the executable to run
    """
    path = binary_mapping.get(path, path)
    if bindir is None:
        return path
    valpath = os.path.join(bindir, path)
    if os.path.isfile(valpath):
        return valpath
    return path


def describe_exit(name, pid, returncode):
    """Describe how a child process went away.

    :param name: Name to use when referring to process
    :param pid: Process id of the child
    :param returncode: Return code as reported by subprocess
    :return: String describing the exit
    """
    if returncode is None:
        return "%s child process %d is still running" % (name, pid)
    elif returncode < 0:
        return "%s child process %d died with signal %d" % (
            name, pid, -returncode)
    else:
        return "%s child process %d exited with value %d" % (
            name, pid, returncode)


class ZooKeeperProcess(Node):
    """A ZooKeeper node running in a child process.

    :param name: Name of the node
    :param process: subprocess.Popen instance running the node
    :param registry: Registry to introspect the node with
    :param stop_timeout: Seconds to wait after SIGTERM before sending SIGKILL
    """

    def __init__(self, name, process, registry,
                 stop_timeout=DEFAULT_STOP_TIMEOUT):
        super(ZooKeeperProcess, self).__init__(name, registry)
        self.process = process
        self.stop_timeout = stop_timeout

    @property
    def pid(self):
        if self.process is None:
            return None
        return self.process.pid

    def is_running(self):
        return self.process is not None and self.process.poll() is None

    def stop(self):
        process = self.process
        if process is None:
            return
        self.process = None
        if process.poll() is None:
            try:
                process.terminate()
                process.wait(self.stop_timeout)
            except subprocess.TimeoutExpired:
                logger.warning("%s did not terminate, killing", self.name)
                process.kill()
                process.wait()
            except ProcessLookupError:
                # Already reaped
                pass
        logger.info(describe_exit(self.name, process.pid, process.returncode))

    def __str__(self):
        if self.process is None:
            return self.name
        return "%s[pid=%d]" % (self.name, self.process.pid)


class ZooKeeperLauncher(Launcher):
    """Launch ZooKeeper nodes with QuorumPeerMain.

    The node is run as ``<java> -cp <classpath> QuorumPeerMain <config>``,
    unless an explicit command is given, in which case the configuration
    path is appended to it.

    :param classpath: ZooKeeper class path (defaults to $ZOOKEEPER_CLASSPATH)
    :param command: Command to run instead of java, as a list of arguments
    :param bindir: Directory to look for the java binary in
    :param binary_mapping: Dictionary mapping binary names
    :param log_dir: Directory for per-node output (None to inherit stdout)
    :param host: Host the nodes serve clients on
    :param stop_timeout: Seconds to wait for a node to exit before killing it
    """

    def __init__(self, classpath=None, command=None, bindir=None,
                 binary_mapping=None, log_dir=None, host="localhost",
                 stop_timeout=DEFAULT_STOP_TIMEOUT):
        if classpath is None:
            classpath = os.environ.get("ZOOKEEPER_CLASSPATH")
        if binary_mapping is None:
            binary_mapping = {}
        self.classpath = classpath
        self.command = command
        self.bindir = bindir
        self.binary_mapping = binary_mapping
        self.log_dir = log_dir
        self.host = host
        self.stop_timeout = stop_timeout

    def get_command(self, config_path):
        if self.command is not None:
            return list(self.command) + [config_path]
        if not self.classpath:
            return None
        java = bindir_path(self.binary_mapping, self.bindir,
                           os.environ.get("JAVA", "java"))
        return [java, "-cp", self.classpath, QUORUM_PEER_MAIN, config_path]

    def get_registry(self, config_path):
        """Build the introspection registry for the node using a config."""
        with open(config_path, 'r') as f:
            settings = read_zoo_cfg(f)
        with open(os.path.join(settings["dataDir"], "myid"), 'r') as f:
            server_id = int(f.read().strip())
        return MonitorRegistry(self.host, int(settings["clientPort"]),
                               server_id)

    def start(self, name, config_path):
        cmd = self.get_command(config_path)
        if cmd is None:
            raise ProcessStartError(
                name, "ZOOKEEPER_CLASSPATH not set and no command given")
        try:
            registry = self.get_registry(config_path)
        except (OSError, KeyError, ValueError) as e:
            raise ProcessStartError(name, e) from e

        logger.info("starting %s: %s", name, " ".join(cmd))
        outf = None
        try:
            if self.log_dir is not None:
                outf = open(os.path.join(self.log_dir, "%s.log" % name), 'ab')
            process = subprocess.Popen(cmd, stdout=outf,
                                       stderr=subprocess.STDOUT if outf else None)
        except OSError as e:
            raise ProcessStartError(name, e) from e
        finally:
            if outf is not None:
                outf.close()

        if process.poll() is not None:
            raise ProcessStartError(
                name, describe_exit(name, process.pid, process.returncode))
        return ZooKeeperProcess(name, process, registry, self.stop_timeout)
