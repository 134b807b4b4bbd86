"""Shared cache of the outer terminal's last known colors."""

from __future__ import annotations

import threading

from hostcolors.constants import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND
from hostcolors.core.locks import ReadWriteLock
from hostcolors.core.models import TerminalColors
from hostcolors.utils import RGB


class ColorCache:
    """Thread-safe store for the most recently queried terminal colors.

    Each channel has its own reader-writer lock. An update replaces the whole
    RGB tuple while holding that channel's write lock, so readers observe
    either the previous or the new triple and never a mix of both.

    Parameters
    ----------
    default_foreground : RGB
        Color returned by get_foreground_or_default before one is known
    default_background : RGB
        Color returned by get_background_or_default before one is known
    """

    def __init__(
        self,
        default_foreground: RGB = DEFAULT_FOREGROUND,
        default_background: RGB = DEFAULT_BACKGROUND,
    ) -> None:
        self.default_foreground = tuple(default_foreground)
        self.default_background = tuple(default_background)
        self._foreground: RGB | None = None
        self._background: RGB | None = None
        self._foreground_lock = ReadWriteLock()
        self._background_lock = ReadWriteLock()
        self._initialized = threading.Event()

    @property
    def foreground(self) -> RGB | None:
        """Stored foreground color, or None if unknown."""
        with self._foreground_lock.read_locked():
            return self._foreground

    @property
    def background(self) -> RGB | None:
        """Stored background color, or None if unknown."""
        with self._background_lock.read_locked():
            return self._background

    def get(self) -> TerminalColors:
        """Return the stored colors.

        Returns
        -------
        TerminalColors
            Snapshot of both channels; unknown channels are None
        """
        return TerminalColors(foreground=self.foreground, background=self.background)

    def get_foreground_or_default(self) -> RGB:
        """Return the stored foreground or the fallback (white by default)."""
        foreground = self.foreground
        return foreground if foreground is not None else self.default_foreground

    def get_background_or_default(self) -> RGB:
        """Return the stored background or the fallback (dark gray by default)."""
        background = self.background
        return background if background is not None else self.default_background

    def set(self, colors: TerminalColors) -> None:
        """Overwrite both channels and mark the cache initialized.

        Parameters
        ----------
        colors : TerminalColors
            Colors to store; None entries clear the channel
        """
        foreground = tuple(colors.foreground) if colors.foreground is not None else None
        background = tuple(colors.background) if colors.background is not None else None

        with self._foreground_lock.write_locked():
            self._foreground = foreground
        with self._background_lock.write_locked():
            self._background = background

        self._initialized.set()

    def is_initialized(self) -> bool:
        """Return True once set has been called at least once."""
        return self._initialized.is_set()
