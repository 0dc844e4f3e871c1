# logger.py -- Logging setup for local clusters
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

import sys
import logging

from zkcluster import colour


def level_colour(levelno):
    return {
        logging.CRITICAL: colour.DARK_RED,
        logging.ERROR: colour.RED,
        logging.WARNING: colour.YELLOW,
        logging.INFO: colour.GREEN,
        logging.DEBUG: colour.GREY,
    }.get(levelno, colour.GREY)


class ColoredFormatter(logging.Formatter):
    """Add color to log according to level"""

    def format(self, record):
        log = super(ColoredFormatter, self).format(record)
        return colour.colourise(log, level_colour(record.levelno))


def get_logger(
        name='zkcluster', stream=sys.stderr,
        level=None, verbose=False, quiet=False,
        fmt=('%(levelname)s %(asctime)s pid:%(process)d '
             '%(name)s: %(message)s'),
        datefmt=None):
    """
    Get a logger instance and config it.

    Calling this again for the same name replaces the handler rather than
    adding a second one.
    """
    logger = logging.getLogger(name)

    if not level:
        # if level not specified, map options to level
        level = ((verbose and logging.DEBUG) or
                 (quiet and logging.WARNING) or logging.INFO)

    logger.setLevel(level)

    if (hasattr(stream, 'isatty') and stream.isatty()):
        Formatter = ColoredFormatter
    else:
        Formatter = logging.Formatter
    formatter = Formatter(fmt=fmt, datefmt=datefmt)

    for handler in list(logger.handlers):
        if getattr(handler, '_zkcluster', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream)
    handler.setFormatter(formatter)
    handler._zkcluster = True
    logger.addHandler(handler)

    return logger
