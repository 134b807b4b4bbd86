"""Bridge from theme change notifications to ThemeChangeEvent messages."""

from __future__ import annotations

import asyncio
import logging

from hostcolors.core.cache import ColorCache
from hostcolors.core.models import ThemeChangeEvent
from hostcolors.exceptions import ChannelClosedError
from hostcolors.theme.channel import ThemeEventChannel
from hostcolors.theme.notifications import NotificationSource, default_notification_source

logger = logging.getLogger(__name__)


async def listen_for_theme_changes(
    channel: ThemeEventChannel,
    cache: ColorCache,
    source: NotificationSource,
) -> None:
    """Forward every notification as a ThemeChangeEvent until the channel closes.

    Each event carries the cache contents at the moment the notification
    was observed. Re-querying the terminal is left to the consumer, which
    has to leave the alternate screen before calling refresh.

    Parameters
    ----------
    channel : ThemeEventChannel
        Channel the events are sent on
    cache : ColorCache
        Cache snapshotted into each event
    source : NotificationSource
        Where notifications come from
    """
    loop = asyncio.get_running_loop()

    try:
        source.install(loop)
    except (ValueError, RuntimeError, NotImplementedError, OSError) as e:
        logger.warning("Failed to register theme change listener: %s", e)
        return

    try:
        while True:
            await source.wait()
            event = ThemeChangeEvent(colors=cache.get())
            try:
                channel.send(event)
            except ChannelClosedError:
                logger.debug("Theme event channel closed, stopping listener")
                break
    finally:
        source.close()


def spawn_theme_change_listener(
    channel: ThemeEventChannel,
    cache: ColorCache,
    source: NotificationSource | None = None,
) -> asyncio.Task | None:
    """Start the theme change listener as a background task.

    Must be called from inside a running event loop. The task ends on its
    own once the consumer closes the channel.

    Parameters
    ----------
    channel : ThemeEventChannel
        Channel the events are sent on
    cache : ColorCache
        Cache snapshotted into each event
    source : NotificationSource | None
        Notification source; defaults to SIGUSR1 where available

    Returns
    -------
    asyncio.Task | None
        The listener task, or None on platforms without notifications
    """
    if source is None:
        source = default_notification_source()

    if not source.supported:
        logger.debug("Theme change notifications are not supported on this platform")
        return None

    return asyncio.get_running_loop().create_task(
        listen_for_theme_changes(channel, cache, source),
        name="hostcolors-theme-listener",
    )
