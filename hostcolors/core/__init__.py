"""Core state for hostcolors: color values, the shared cache and configuration."""

from hostcolors.core.cache import ColorCache
from hostcolors.core.models import TerminalColors, ThemeChangeEvent

__all__ = ["ColorCache", "TerminalColors", "ThemeChangeEvent"]
