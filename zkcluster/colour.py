# colour.py -- ANSI colour codes for terminal output
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
#
# The colours are module globals with names like RED and DARK_RED. After
# switch_colour_off() they are all empty strings; switch_colour_on()
# brings them back.

COLOUR_NAMES = ('BLACK', 'RED', 'GREEN', 'YELLOW', 'BLUE', 'MAGENTA',
                'CYAN', 'WHITE')


def _gen_ansi_colours():
    g = globals()
    for i, name in enumerate(COLOUR_NAMES):
        g[name] = "\033[1;3%dm" % i
        g['DARK_' + name] = "\033[3%dm" % i

    g['GREY'] = g['DARK_WHITE']
    g['C_NORMAL'] = "\033[0m"


_gen_ansi_colours()


def colourise(s, colour):
    """Wrap a string in a colour code, resetting the colour afterwards."""
    if not colour:
        return str(s)
    return "%s%s%s" % (colour, s, C_NORMAL)


def switch_colour_off():
    """Convert all the ANSI colour codes into empty strings."""
    g = globals()
    for k, v in list(g.items()):
        if k.isupper() and isinstance(v, str) and v.startswith('\033'):
            g[k] = ''


def switch_colour_on():
    """Regenerate all the ANSI colour codes."""
    _gen_ansi_colours()
