"""Low-level terminal I/O for OSC color queries."""

from __future__ import annotations

import logging
import os
import select
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO

from hostcolors.constants import (
    BEL,
    ESC,
    OSC_INTRODUCER,
    QUERY_TIMEOUT_SECONDS,
    READ_RETRY_DELAY_SECONDS,
    STRING_TERMINATOR,
)
from hostcolors.exceptions import RawModeError

logger = logging.getLogger(__name__)

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None


@dataclass(frozen=True)
class OscResponse:
    """Bytes collected while waiting for an OSC reply.

    Attributes
    ----------
    data : bytes
        Reply bytes, starting at the OSC introducer when one was seen
    terminated : bool
        Whether ESC ``\\`` or BEL ended the read
    eof : bool
        Whether the input reached end of file
    elapsed : float
        Seconds spent reading
    """

    data: bytes
    terminated: bool
    eof: bool
    elapsed: float

    @property
    def timed_out(self) -> bool:
        """True when the read ended by running out of time."""
        return not (self.terminated or self.eof)


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Put a terminal into raw mode and restore the saved mode afterwards.

    Parameters
    ----------
    fd : int
        File descriptor of the terminal input

    Raises
    ------
    RawModeError
        If the platform has no termios or the descriptor is not a terminal
    """
    if termios is None or tty is None:
        raise RawModeError("raw mode is not supported on this platform")

    try:
        saved_mode = termios.tcgetattr(fd)
    except (termios.error, OSError) as e:
        raise RawModeError(f"cannot read terminal attributes: {e}") from e

    try:
        tty.setraw(fd)
    except (termios.error, OSError) as e:
        _restore_mode(fd, saved_mode)
        raise RawModeError(f"cannot enable raw mode: {e}") from e

    try:
        yield
    finally:
        _restore_mode(fd, saved_mode)


def _restore_mode(fd: int, saved_mode: list) -> None:
    try:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved_mode)
    except (termios.error, OSError) as e:
        logger.warning("Failed to restore terminal mode: %s", e)


def build_query(code: int) -> bytes:
    """Build the ``ESC ] code ; ? ESC \\`` query for a dynamic color."""
    return f"\x1b]{code};?\x1b\\".encode("ascii")


def send_query(output: BinaryIO, code: int) -> None:
    """Write a color query to the terminal and flush it.

    Parameters
    ----------
    output : BinaryIO
        Binary stream connected to the terminal
    code : int
        OSC code to query (10 foreground, 11 background)

    Raises
    ------
    OSError
        If writing or flushing fails
    ValueError
        If the stream has been closed
    """
    output.write(build_query(code))
    output.flush()


class _ReplyAccumulator:
    """Collects reply bytes, skipping input that is not part of an OSC reply.

    Keys typed while the query is pending arrive in the same raw stream.
    Anything before an ESC, and an ESC not followed by ``]`` (such as an
    arrow key sequence), is dropped.
    """

    def __init__(self) -> None:
        self.data = bytearray()

    def feed(self, byte: int) -> bool:
        """Add one byte and report whether it completed the reply."""
        if not self.data:
            if byte == ESC:
                self.data.append(byte)
            return False

        if len(self.data) == 1 and byte != OSC_INTRODUCER:
            self.data.clear()
            if byte == ESC:
                self.data.append(byte)
            return False

        self.data.append(byte)
        return byte == BEL or self.data.endswith(STRING_TERMINATOR)


def read_osc_response(
    fd: int,
    timeout: float = QUERY_TIMEOUT_SECONDS,
    retry_delay: float = READ_RETRY_DELAY_SECONDS,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> OscResponse:
    """Read a single OSC reply from the terminal with a deadline.

    Bytes are read one at a time so that nothing beyond the terminator is
    consumed. The read stops at ESC ``\\`` or BEL, at end of file, or when
    ``timeout`` seconds have passed, whichever comes first.

    Parameters
    ----------
    fd : int
        File descriptor of the terminal input (already in raw mode)
    timeout : float
        Deadline for the whole reply in seconds
    retry_delay : float
        Pause between polls while no input is available
    clock : Callable[[], float]
        Monotonic clock, injectable for tests
    sleep : Callable[[float], None]
        Sleep function, injectable for tests

    Returns
    -------
    OscResponse
        Collected bytes and how the read ended
    """
    accumulator = _ReplyAccumulator()
    start = clock()
    deadline = start + timeout
    terminated = False
    eof = False

    while clock() < deadline:
        try:
            ready, _, _ = select.select([fd], [], [], 0)
            chunk = os.read(fd, 1) if ready else None
        except (BlockingIOError, InterruptedError):
            chunk = None
        except OSError as e:
            logger.debug("Terminal read failed, retrying: %s", e)
            chunk = None

        if chunk is None:
            sleep(retry_delay)
            continue

        if not chunk:
            eof = True
            break

        if accumulator.feed(chunk[0]):
            terminated = True
            break

    return OscResponse(
        data=bytes(accumulator.data),
        terminated=terminated,
        eof=eof,
        elapsed=clock() - start,
    )
