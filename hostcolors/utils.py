"""Utility functions for hostcolors."""

import re
import signal

RGB = tuple[int, int, int]

_HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def format_hex_color(rgb: RGB) -> str:
    """Format an RGB triple as ``#rrggbb``.

    Parameters
    ----------
    rgb : RGB
        Red, green and blue components in the 0-255 range

    Returns
    -------
    str
        Lowercase hex color string
    """
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_hex_color(value: str) -> RGB:
    """Parse a ``#rrggbb`` (or ``rrggbb``) string into an RGB triple.

    Parameters
    ----------
    value : str
        Hex color string

    Returns
    -------
    RGB
        Parsed red, green and blue components

    Raises
    ------
    ValueError
        If the value is not a six digit hex color
    """
    if not isinstance(value, str):
        raise ValueError(f"Color must be a string like '#rrggbb', got {value!r}")

    match = _HEX_COLOR_PATTERN.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"Invalid color '{value}', expected '#rrggbb'")

    return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def relative_luminance(rgb: RGB) -> float:
    """Approximate perceived brightness of a color in the 0-1 range."""
    r, g, b = (component / 255 for component in rgb)
    return 0.299 * r + 0.587 * g + 0.114 * b


def resolve_signal(name: str) -> int | None:
    """Look up a signal number by name.

    Returns None when the platform does not define the signal (e.g. SIGUSR1
    on Windows).
    """
    try:
        return int(signal.Signals[name])
    except KeyError:
        return None
