"""Application context tying the cache, query engine and listener together."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from typing import Any, BinaryIO

from hostcolors.constants import THEME_CHANGE_SIGNAL
from hostcolors.core.cache import ColorCache
from hostcolors.core.models import TerminalColors
from hostcolors.osc.query import OscQueryEngine
from hostcolors.theme.bridge import spawn_theme_change_listener
from hostcolors.theme.channel import ThemeEventChannel
from hostcolors.theme.notifications import NotificationSource, default_notification_source
from hostcolors.utils import RGB, parse_hex_color


class OuterColors:
    """Everything needed to know and track the outer terminal's colors.

    Parameters
    ----------
    cache : ColorCache | None
        Shared color cache; a fresh one is created when omitted
    engine : OscQueryEngine | None
        Query engine writing into ``cache``; created when omitted
    source_factory : Callable[[], NotificationSource] | None
        Builds the notification source for each spawned listener
    """

    def __init__(
        self,
        cache: ColorCache | None = None,
        engine: OscQueryEngine | None = None,
        source_factory: Callable[[], NotificationSource] | None = None,
    ) -> None:
        self.cache = cache if cache is not None else ColorCache()
        self.engine = engine if engine is not None else OscQueryEngine(self.cache)
        self._source_factory = source_factory or default_notification_source

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any],
        input_fd: int | None = None,
        output: BinaryIO | None = None,
    ) -> OuterColors:
        """Build a context from a validated configuration dictionary.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration as returned by ConfigLoader.load_config
        input_fd : int | None
            Terminal input descriptor (defaults to stdin)
        output : BinaryIO | None
            Binary terminal output (defaults to stdout)

        Returns
        -------
        OuterColors
            Context with configured timing, fallbacks and signal
        """
        cache = ColorCache(
            default_foreground=parse_hex_color(config["default_foreground"]),
            default_background=parse_hex_color(config["default_background"]),
        )
        engine = OscQueryEngine(
            cache,
            input_fd=input_fd,
            output=output,
            timeout=config["query_timeout_ms"] / 1000,
            retry_delay=config["retry_delay_ms"] / 1000,
        )
        signal_name = config.get("theme_change_signal", THEME_CHANGE_SIGNAL)
        return cls(
            cache=cache,
            engine=engine,
            source_factory=lambda: default_notification_source(signal_name),
        )

    def get_outer_colors(self) -> TerminalColors:
        """Return the cached colors."""
        return self.cache.get()

    def get_outer_fg(self) -> RGB:
        """Return the cached foreground or its fallback."""
        return self.cache.get_foreground_or_default()

    def get_outer_bg(self) -> RGB:
        """Return the cached background or its fallback."""
        return self.cache.get_background_or_default()

    def set_outer_colors(self, colors: TerminalColors) -> None:
        """Store colors in the cache."""
        self.cache.set(colors)

    def colors_initialized(self) -> bool:
        """Return whether any query (or set) has completed."""
        return self.cache.is_initialized()

    def query_outer_terminal_colors(self) -> TerminalColors:
        """Query the terminal (blocking) and update the cache."""
        return self.engine.query_outer_terminal_colors()

    def refresh_outer_colors(self) -> TerminalColors:
        """Re-query after a ThemeChangeEvent, once off the alternate screen."""
        return self.engine.refresh_outer_colors()

    def spawn_theme_change_listener(
        self, channel: ThemeEventChannel
    ) -> asyncio.Task | None:
        """Start forwarding theme change notifications onto ``channel``."""
        return spawn_theme_change_listener(channel, self.cache, self._source_factory())


_default_lock = threading.Lock()
_default_context: OuterColors | None = None


def get_default_context() -> OuterColors:
    """Return the process-wide context, creating it on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = OuterColors()
        return _default_context


def set_default_context(context: OuterColors | None) -> None:
    """Replace the process-wide context; None resets to a fresh one on next use."""
    global _default_context
    with _default_lock:
        _default_context = context
