"""OSC 10/11 color query protocol."""

from hostcolors.osc.parser import parse_hex_component, parse_osc_color_response
from hostcolors.osc.query import OscQueryEngine
from hostcolors.osc.terminal import (
    OscResponse,
    build_query,
    raw_mode,
    read_osc_response,
    send_query,
)

__all__ = [
    "OscQueryEngine",
    "OscResponse",
    "build_query",
    "parse_hex_component",
    "parse_osc_color_response",
    "raw_mode",
    "read_osc_response",
    "send_query",
]
