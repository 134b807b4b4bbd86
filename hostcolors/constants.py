"""Global constants for hostcolors.

This module contains the protocol bytes, timing budgets and fallback colors
shared by the query engine, the color cache and the theme-change bridge.
"""

from enum import IntEnum

ESC = 0x1B
"""Escape byte that introduces every control sequence."""

BEL = 0x07
"""Bell byte, accepted by most terminals as an alternate OSC terminator."""

OSC_INTRODUCER = 0x5D
"""Byte following ESC that opens an Operating System Command (``]``)."""

STRING_TERMINATOR = b"\x1b\\"
"""Two-byte String Terminator (ESC ``\\``) ending an OSC reply."""

QUERY_TIMEOUT_SECONDS = 0.1
"""Wall-clock budget for reading one OSC reply.

Terminals that do not implement OSC 10/11 never answer, so each color
query gives up after this long and reports the color as unknown.
"""

READ_RETRY_DELAY_SECONDS = 0.005
"""Delay between polls of the terminal input while waiting for a reply."""

DEFAULT_FOREGROUND = (255, 255, 255)
"""Fallback foreground color (white) when the terminal did not report one."""

DEFAULT_BACKGROUND = (53, 55, 49)
"""Fallback background color (dark gray) when the terminal did not report one."""

THEME_CHANGE_SIGNAL = "SIGUSR1"
"""Name of the signal that announces a theme change of the outer terminal."""

DEFAULT_CONFIG_FILE = "hostcolors.yaml"
"""Configuration file looked up when HOSTCOLORS_CONFIG is not set."""


class OscCode(IntEnum):
    """Dynamic color slots queried through OSC."""

    FOREGROUND = 10
    BACKGROUND = 11
