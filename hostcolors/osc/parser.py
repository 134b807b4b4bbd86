"""Parsing of OSC 10/11 color replies."""

import re

from hostcolors.utils import RGB

_HEX_COMPONENT_PATTERN = re.compile(r"[0-9a-fA-F]{1,4}")
_RGB_PREFIX = "rgb:"
_COLOR_TERMINATORS = ("\x1b", "\x07")


def parse_hex_component(text: str) -> int | None:
    """Decode one channel of an ``rgb:`` color spec to 8 bits.

    Terminals answer with 1 to 4 hex digits per channel. Up to two digits
    are taken as the 8-bit value itself; longer values are 16-bit and only
    the high byte is kept.

    Parameters
    ----------
    text : str
        Hex digits of a single channel

    Returns
    -------
    int | None
        Channel value in the 0-255 range, or None if the text is not 1-4
        hex digits
    """
    if not _HEX_COMPONENT_PATTERN.fullmatch(text):
        return None

    value = int(text, 16)
    if len(text) <= 2:
        return value
    return value >> 8


def parse_osc_color_response(response: bytes) -> RGB | None:
    """Extract the color from a terminal's OSC color reply.

    Expected format is ``ESC ] code ; rgb:RRRR/GGGG/BBBB ST`` or the
    two-digit ``rgb:RR/GG/BB`` variant, terminated by ESC ``\\`` or BEL.
    Partial buffers from a timed out read are accepted as input.

    Parameters
    ----------
    response : bytes
        Raw bytes read from the terminal

    Returns
    -------
    RGB | None
        Decoded color, or None if the reply is missing, malformed or only
        partially decodable
    """
    try:
        text = response.decode("utf-8")
    except UnicodeDecodeError:
        return None

    start = text.find(_RGB_PREFIX)
    if start == -1:
        return None

    spec = text[start + len(_RGB_PREFIX) :]
    for terminator in _COLOR_TERMINATORS:
        end = spec.find(terminator)
        if end != -1:
            spec = spec[:end]

    parts = spec.split("/")
    if len(parts) != 3:
        return None

    components = [parse_hex_component(part) for part in parts]
    if any(component is None for component in components):
        return None

    r, g, b = components
    return (r, g, b)
