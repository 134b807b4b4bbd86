"""CLI entry point for hostcolors."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

import fire

from hostcolors.core.config import CONFIG_ENV_VAR, ConfigLoader
from hostcolors.core.context import OuterColors
from hostcolors.core.models import TerminalColors
from hostcolors.logging import (
    ChannelFormatter,
    StreamRoutingFilter,
    route_diagnostics_to_stderr,
)
from hostcolors.templates import CONFIG_TEMPLATE
from hostcolors.theme.channel import ThemeEventChannel

logger = logging.getLogger(__name__)


def format_colors(colors: TerminalColors) -> str:
    """Render colors as two human readable lines.

    Parameters
    ----------
    colors : TerminalColors
        Colors to render

    Returns
    -------
    str
        Foreground and background lines, ``unknown`` for missing channels
    """
    foreground = colors.foreground_hex or "unknown"
    background = colors.background_hex or "unknown"

    if colors.is_light is None:
        theme = ""
    else:
        theme = " (light)" if colors.is_light else " (dark)"

    return f"foreground: {foreground}\nbackground: {background}{theme}"


class HostColorsCLI:
    """Query and watch the colors of the terminal hosting this process."""

    def __init__(self, config_loader: ConfigLoader | None = None) -> None:
        self._config_loader = config_loader or ConfigLoader()

    def _build_context(self, config: str | None) -> OuterColors:
        loaded = self._config_loader.load_config(config)
        self._config_loader.validate_config(loaded)
        return OuterColors.from_config(loaded)

    def query(
        self,
        config: str | None = None,
        json_output: bool = False,
        verbose: bool = False,
    ) -> str:
        """Query the terminal's foreground and background colors once.

        Parameters
        ----------
        config : str | None
            Path to a YAML config file
        json_output : bool
            Print the result as JSON
        verbose : bool
            Log per-channel query diagnostics

        Returns
        -------
        str
            Rendered colors
        """
        if json_output:
            route_diagnostics_to_stderr()
        if verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        context = self._build_context(config)
        colors = context.query_outer_terminal_colors()

        if json_output:
            return json.dumps(colors.to_dict())
        return format_colors(colors)

    def watch(self, config: str | None = None, verbose: bool = False) -> None:
        """Print the colors again whenever a theme change signal arrives.

        Parameters
        ----------
        config : str | None
            Path to a YAML config file
        verbose : bool
            Log per-channel query diagnostics
        """
        if verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        context = self._build_context(config)
        print(format_colors(context.query_outer_terminal_colors()), flush=True)

        try:
            asyncio.run(self._watch(context))
        except KeyboardInterrupt:
            pass

    async def _watch(self, context: OuterColors) -> None:
        channel = ThemeEventChannel()
        task = context.spawn_theme_change_listener(channel)

        if task is None:
            logger.warning("Theme change notifications are not available on this platform")
            return

        task.add_done_callback(lambda _: channel.close())

        logger.info("Waiting for theme changes (kill -USR1 %d), Ctrl-C to stop", os.getpid())
        loop = asyncio.get_running_loop()

        try:
            async for event in channel:
                logger.debug("Theme change signalled, previous colors %s", event.colors)
                colors = await loop.run_in_executor(None, context.refresh_outer_colors)
                print(format_colors(colors), flush=True)
        finally:
            channel.close()
            task.cancel()

    def init(self, force: bool = False) -> None:
        """Create a default hostcolors.yaml configuration file."""
        config_path = os.environ.get(CONFIG_ENV_VAR, "hostcolors.yaml")
        config_file = Path(config_path)

        if config_file.exists() and not force:
            logger.error("%s already exists. Use --force to overwrite.", config_path)
            sys.exit(1)

        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, "w") as f:
            f.write(CONFIG_TEMPLATE)

        print(f"Created {config_path} configuration file.")


def handle_value_error(error: ValueError, debug_mode: bool) -> None:
    """Handle configuration errors.

    Parameters
    ----------
    error : ValueError
        The value error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ValueError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Configuration error: {error}", file=sys.stderr)
    sys.exit(2)


def handle_runtime_error(error: RuntimeError, debug_mode: bool) -> None:
    """Handle unexpected runtime error.

    Parameters
    ----------
    error : RuntimeError
        The runtime error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    RuntimeError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Unexpected error: {error}", file=sys.stderr)
    sys.exit(1)


def configure_logging() -> None:
    """Route INFO to stdout and warnings/errors to stderr."""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(ChannelFormatter("%(message)s"))
    stdout_handler.addFilter(StreamRoutingFilter("stdout"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(ChannelFormatter("%(message)s"))
    stderr_handler.addFilter(StreamRoutingFilter("stderr"))

    logging.basicConfig(
        level=logging.INFO,
        handlers=[stdout_handler, stderr_handler],
    )


def main(argv: Any = None) -> None:
    """Entry point for the Fire CLI with graceful error handling.

    Parameters
    ----------
    argv : Any
        Command line arguments, defaults to sys.argv[1:]
    """
    configure_logging()
    debug_mode = os.environ.get("HOSTCOLORS_DEBUG") == "1"

    try:
        fire.Fire(HostColorsCLI(), command=argv)
    except ValueError as e:
        handle_value_error(e, debug_mode)
    except RuntimeError as e:
        handle_runtime_error(e, debug_mode)
