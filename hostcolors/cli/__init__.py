"""Command line interface for hostcolors."""

from hostcolors.cli.main import HostColorsCLI, format_colors, main

__all__ = ["HostColorsCLI", "format_colors", "main"]
