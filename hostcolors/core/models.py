"""Value types describing the outer terminal's colors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hostcolors.utils import RGB, format_hex_color, relative_luminance


@dataclass(frozen=True)
class TerminalColors:
    """Colors reported by the outer terminal.

    Attributes
    ----------
    foreground : RGB | None
        Foreground color, or None if the terminal did not report it
    background : RGB | None
        Background color, or None if the terminal did not report it
    """

    foreground: RGB | None = None
    background: RGB | None = None

    @property
    def foreground_hex(self) -> str | None:
        """Foreground as ``#rrggbb``, or None when unknown."""
        return format_hex_color(self.foreground) if self.foreground is not None else None

    @property
    def background_hex(self) -> str | None:
        """Background as ``#rrggbb``, or None when unknown."""
        return format_hex_color(self.background) if self.background is not None else None

    @property
    def is_light(self) -> bool | None:
        """Whether the background reads as a light theme, None when unknown."""
        if self.background is None:
            return None
        return relative_luminance(self.background) > 0.5

    def to_dict(self) -> dict[str, Any]:
        """Serialize colors for JSON output.

        Returns
        -------
        dict[str, Any]
            Hex strings (or None) for both channels plus the light/dark guess
        """
        return {
            "foreground": self.foreground_hex,
            "background": self.background_hex,
            "is_light": self.is_light,
        }


@dataclass(frozen=True)
class ThemeChangeEvent:
    """Notification that the outer terminal's theme may have changed.

    Attributes
    ----------
    colors : TerminalColors
        Cache contents when the notification arrived, before any refresh
    """

    colors: TerminalColors
