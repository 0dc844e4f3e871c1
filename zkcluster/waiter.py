# waiter.py -- Wait for a local cluster to reach quorum
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

"""Convergence wait for cluster startup."""

__all__ = ['await_quorum']

import logging
import time

from zkcluster import ClusterStartupTimeout
from zkcluster.options import DEFAULT_POLL_INTERVAL

logger = logging.getLogger(__name__)


def await_quorum(nodes, timeout, poll_interval=DEFAULT_POLL_INTERVAL,
                 clock=time.monotonic, sleep=time.sleep):
    """Block until all nodes report a full quorum.

    There is no notification when a node joins the quorum, so this polls.
    A round queries the nodes in order and ends at the first one that has
    not converged. Each query may take the time left before the deadline,
    but never less than one poll interval, and no further node is queried
    once the deadline has passed. The wait therefore gives up no later than
    ``timeout + poll_interval`` after it started, provided the nodes honour
    the time they are given.

    :param nodes: Sequence of nodes
    :param timeout: Seconds to wait before giving up
    :param poll_interval: Seconds to sleep between polls
    :param clock: Function returning a monotonic time in seconds
    :param sleep: Function to sleep with
    :raise ClusterStartupTimeout: if the deadline passes, or the wait is
        interrupted
    """
    deadline = clock() + timeout
    polls = 0
    try:
        while True:
            polls += 1
            done = True
            for i, node in enumerate(nodes):
                remaining = deadline - clock()
                if i > 0 and remaining <= 0:
                    raise ClusterStartupTimeout(timeout)
                size = node.get_quorum_size(max(remaining, poll_interval))
                if size != len(nodes):
                    done = False
                    break
            if done:
                logger.debug("cluster of %d converged after %d polls",
                             len(nodes), polls)
                return
            remaining = deadline - clock()
            if remaining <= 0:
                raise ClusterStartupTimeout(timeout)
            sleep(min(poll_interval, remaining))
    except (InterruptedError, KeyboardInterrupt) as e:
        raise ClusterStartupTimeout(
            timeout, "interrupted waiting for ZooKeeper cluster to start"
            ) from e
