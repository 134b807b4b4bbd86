"""Logging helpers for hostcolors."""

from hostcolors.logging.filters import StreamRoutingFilter, route_diagnostics_to_stderr
from hostcolors.logging.formatters import ChannelFormatter

__all__ = ["ChannelFormatter", "StreamRoutingFilter", "route_diagnostics_to_stderr"]
