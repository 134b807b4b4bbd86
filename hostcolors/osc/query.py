"""Query the outer terminal's colors via OSC 10/11."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from hostcolors.constants import QUERY_TIMEOUT_SECONDS, READ_RETRY_DELAY_SECONDS, OscCode
from hostcolors.core.cache import ColorCache
from hostcolors.core.models import TerminalColors
from hostcolors.exceptions import RawModeError
from hostcolors.osc.parser import parse_osc_color_response
from hostcolors.osc.terminal import OscResponse, raw_mode, read_osc_response, send_query
from hostcolors.utils import RGB

logger = logging.getLogger(__name__)

_CHANNEL_NAMES = {
    OscCode.FOREGROUND: "foreground",
    OscCode.BACKGROUND: "background",
}


class OscQueryEngine:
    """Round-trips OSC color queries over the process's own terminal.

    Querying is blocking: each color waits up to ``timeout`` seconds for a
    reply, so a full query takes at most about twice that. It must run while
    the terminal is on the normal screen and nothing else is changing the
    terminal mode.

    Parameters
    ----------
    cache : ColorCache
        Cache updated after every completed query
    input_fd : int | None
        Terminal input descriptor; defaults to stdin at query time
    output : BinaryIO | None
        Binary terminal output; defaults to stdout at query time
    timeout : float
        Per-color reply deadline in seconds
    retry_delay : float
        Pause between input polls in seconds
    """

    def __init__(
        self,
        cache: ColorCache,
        input_fd: int | None = None,
        output: BinaryIO | None = None,
        timeout: float = QUERY_TIMEOUT_SECONDS,
        retry_delay: float = READ_RETRY_DELAY_SECONDS,
    ) -> None:
        self.cache = cache
        self._input_fd = input_fd
        self._output = output
        self.timeout = timeout
        self.retry_delay = retry_delay

    def _resolve_input_fd(self) -> int:
        if self._input_fd is not None:
            return self._input_fd
        try:
            return sys.stdin.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise RawModeError(f"stdin has no usable file descriptor: {e}") from e

    def _resolve_output(self) -> BinaryIO:
        if self._output is not None:
            return self._output
        output = getattr(sys.stdout, "buffer", None)
        if output is None:
            raise RawModeError("stdout has no binary buffer to write queries to")
        return output

    def query_outer_terminal_colors(self) -> TerminalColors:
        """Query foreground and background colors from the outer terminal.

        Returns
        -------
        TerminalColors
            Queried colors; a channel is None when the terminal did not
            answer in time or answered with something unparseable. When raw
            mode cannot be entered, both channels are None and the cache is
            left as it was.
        """
        try:
            fd = self._resolve_input_fd()
            output = self._resolve_output()
            with raw_mode(fd):
                replies = {
                    code: self._exchange(fd, output, code)
                    for code in (OscCode.FOREGROUND, OscCode.BACKGROUND)
                }
        except RawModeError as e:
            logger.warning("Cannot query terminal colors: %s", e)
            return TerminalColors()

        colors = TerminalColors(
            foreground=self._decode(OscCode.FOREGROUND, replies[OscCode.FOREGROUND]),
            background=self._decode(OscCode.BACKGROUND, replies[OscCode.BACKGROUND]),
        )
        self.cache.set(colors)
        return colors

    def refresh_outer_colors(self) -> TerminalColors:
        """Query the terminal again after a theme change notification.

        The caller must have left the alternate screen first.

        Returns
        -------
        TerminalColors
            Freshly queried colors, also stored in the cache
        """
        return self.query_outer_terminal_colors()

    def _exchange(
        self, fd: int, output: BinaryIO, code: OscCode
    ) -> OscResponse | OSError | ValueError:
        try:
            send_query(output, code)
        except (OSError, ValueError) as e:
            return e
        return read_osc_response(fd, timeout=self.timeout, retry_delay=self.retry_delay)

    def _decode(
        self, code: OscCode, reply: OscResponse | OSError | ValueError
    ) -> RGB | None:
        extra = {"channel": _CHANNEL_NAMES[code]}

        if isinstance(reply, Exception):
            logger.debug("Failed to send OSC %d query: %s", code, reply, extra=extra)
            return None

        color = parse_osc_color_response(reply.data)
        if color is not None:
            logger.debug("OSC %d reported %s in %.3fs", code, color, reply.elapsed, extra=extra)
        elif reply.timed_out:
            logger.debug("No reply to OSC %d within %.3fs", code, self.timeout, extra=extra)
        else:
            logger.debug("Unparseable reply to OSC %d: %r", code, reply.data, extra=extra)
        return color
