"""Process-level access to the outer terminal's colors.

These functions operate on the default OuterColors context. Applications
that need a configured or isolated context can install one with
set_default_context, or use an OuterColors instance directly.
"""

from __future__ import annotations

import asyncio

from hostcolors.core.context import get_default_context
from hostcolors.core.models import TerminalColors
from hostcolors.theme.channel import ThemeEventChannel
from hostcolors.utils import RGB


def get_outer_colors() -> TerminalColors:
    """Get the current outer terminal colors; unknown channels are None."""
    return get_default_context().get_outer_colors()


def get_outer_fg() -> RGB:
    """Get the outer terminal's foreground, falling back to white."""
    return get_default_context().get_outer_fg()


def get_outer_bg() -> RGB:
    """Get the outer terminal's background, falling back to dark gray."""
    return get_default_context().get_outer_bg()


def set_outer_colors(colors: TerminalColors) -> None:
    """Update the stored outer terminal colors."""
    get_default_context().set_outer_colors(colors)


def colors_initialized() -> bool:
    """Check whether the colors have been stored at least once."""
    return get_default_context().colors_initialized()


def query_outer_terminal_colors() -> TerminalColors:
    """Query the outer terminal's colors via OSC 10/11.

    Must be called before entering the alternate screen. Blocks for up to
    two reply deadlines (about 200 ms with the defaults).

    Returns
    -------
    TerminalColors
        Queried colors, None for channels the terminal did not report
    """
    return get_default_context().query_outer_terminal_colors()


def refresh_outer_colors() -> TerminalColors:
    """Re-query terminal colors after a ThemeChangeEvent.

    Call from the main thread after temporarily leaving the alternate screen.

    Returns
    -------
    TerminalColors
        The new colors, also stored in the cache
    """
    return get_default_context().refresh_outer_colors()


def spawn_theme_change_listener(channel: ThemeEventChannel) -> asyncio.Task | None:
    """Spawn a background task turning SIGUSR1 into ThemeChangeEvents.

    Parameters
    ----------
    channel : ThemeEventChannel
        Channel receiving the events; closing it stops the task

    Returns
    -------
    asyncio.Task | None
        The listener task, or None where the signal is not supported
    """
    return get_default_context().spawn_theme_change_listener(channel)
