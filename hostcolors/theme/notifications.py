"""Sources of operating system theme change notifications."""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import Protocol

from hostcolors.constants import THEME_CHANGE_SIGNAL
from hostcolors.utils import resolve_signal

logger = logging.getLogger(__name__)


class NotificationSource(Protocol):
    """Protocol for something that wakes the theme change listener."""

    supported: bool

    def install(self, loop: asyncio.AbstractEventLoop) -> None:
        """Start listening on the given event loop."""
        ...

    async def wait(self) -> None:
        """Suspend until the next notification arrives."""
        ...

    def close(self) -> None:
        """Stop listening and release the underlying handle."""
        ...


class SignalNotificationSource:
    """Notification source backed by a Unix signal (SIGUSR1 by default).

    Signals arriving before the listener wakes up are coalesced into a
    single notification. Closing the source puts back the handler that was
    in place before install, or ignores the signal when that was the
    default action, so a late signal never terminates the process.

    Parameters
    ----------
    signum : int
        Signal number to listen for
    """

    supported = True

    def __init__(self, signum: int) -> None:
        self.signum = signum
        self._loop: asyncio.AbstractEventLoop | None = None
        self._event: asyncio.Event | None = None
        self._previous_handler = None

    def install(self, loop: asyncio.AbstractEventLoop) -> None:
        """Register the signal handler on the event loop.

        Raises
        ------
        ValueError, RuntimeError, NotImplementedError, OSError
            If the loop cannot handle the signal
        """
        previous = signal.getsignal(self.signum)
        self._event = asyncio.Event()
        loop.add_signal_handler(self.signum, self._event.set)
        self._previous_handler = previous
        self._loop = loop

    async def wait(self) -> None:
        """Suspend until the signal is delivered."""
        if self._event is None:
            raise RuntimeError("notification source is not installed")
        await self._event.wait()
        self._event.clear()

    def close(self) -> None:
        """Remove the signal handler and restore the earlier disposition."""
        if self._loop is None:
            return
        try:
            self._loop.remove_signal_handler(self.signum)
        except (ValueError, RuntimeError) as e:
            logger.debug("Failed to remove handler for signal %d: %s", self.signum, e)

        previous = self._previous_handler
        if previous is None or previous == signal.SIG_DFL:
            previous = signal.SIG_IGN
        try:
            signal.signal(self.signum, previous)
        except (ValueError, OSError, TypeError) as e:
            logger.warning("Failed to restore handler for signal %d: %s", self.signum, e)

        self._previous_handler = None
        self._loop = None


class NullNotificationSource:
    """Source for platforms without theme change notifications."""

    supported = False

    def install(self, loop: asyncio.AbstractEventLoop) -> None:
        pass

    async def wait(self) -> None:
        raise RuntimeError("theme change notifications are not supported here")

    def close(self) -> None:
        pass


def default_notification_source(
    signal_name: str = THEME_CHANGE_SIGNAL,
) -> SignalNotificationSource | NullNotificationSource:
    """Pick the notification source for the current platform.

    Parameters
    ----------
    signal_name : str
        Name of the signal announcing theme changes

    Returns
    -------
    SignalNotificationSource | NullNotificationSource
        Signal-backed source, or the no-op source when the signal does not
        exist on this platform
    """
    signum = resolve_signal(signal_name)
    if signum is None:
        return NullNotificationSource()
    return SignalNotificationSource(signum)
