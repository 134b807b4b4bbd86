"""Exceptions raised inside hostcolors.

None of these escape the public query or listener functions; they mark the
internal failure points that degrade to "color unknown".
"""


class HostColorsError(Exception):
    """Base exception for hostcolors failures."""


class RawModeError(HostColorsError):
    """Raised when the terminal input cannot be switched to raw mode."""


class ChannelClosedError(HostColorsError):
    """Raised when sending on a theme event channel whose receiver is gone."""
