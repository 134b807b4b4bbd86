"""Discover and track the host terminal's foreground and background colors."""

from hostcolors.colors import (
    colors_initialized,
    get_outer_bg,
    get_outer_colors,
    get_outer_fg,
    query_outer_terminal_colors,
    refresh_outer_colors,
    set_outer_colors,
    spawn_theme_change_listener,
)
from hostcolors.core.cache import ColorCache
from hostcolors.core.context import OuterColors, get_default_context, set_default_context
from hostcolors.core.models import TerminalColors, ThemeChangeEvent
from hostcolors.theme.channel import ThemeEventChannel

__version__ = "0.1.0"

__all__ = [
    "ColorCache",
    "OuterColors",
    "TerminalColors",
    "ThemeChangeEvent",
    "ThemeEventChannel",
    "colors_initialized",
    "get_default_context",
    "get_outer_bg",
    "get_outer_colors",
    "get_outer_fg",
    "query_outer_terminal_colors",
    "refresh_outer_colors",
    "set_default_context",
    "set_outer_colors",
    "spawn_theme_change_listener",
]
