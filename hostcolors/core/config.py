"""Configuration loading for hostcolors."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import InterpolationResolutionError

from hostcolors.constants import (
    DEFAULT_CONFIG_FILE,
    QUERY_TIMEOUT_SECONDS,
    READ_RETRY_DELAY_SECONDS,
    THEME_CHANGE_SIGNAL,
)
from hostcolors.utils import parse_hex_color, resolve_signal

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HOSTCOLORS_CONFIG"


class ConfigLoader:
    """Load YAML configuration and merge it over built-in defaults."""

    def __init__(self) -> None:
        """Initialize ConfigLoader with built-in defaults."""
        self.BUILT_IN_DEFAULTS = {
            "query_timeout_ms": int(QUERY_TIMEOUT_SECONDS * 1000),
            "retry_delay_ms": READ_RETRY_DELAY_SECONDS * 1000,
            "default_foreground": "#ffffff",
            "default_background": "#353731",
            "theme_change_signal": THEME_CHANGE_SIGNAL,
        }

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Load configuration from a YAML file.

        Parameters
        ----------
        config_path : str | None
            Path to YAML config file. If None, checks HOSTCOLORS_CONFIG env
            var, then falls back to hostcolors.yaml

        Returns
        -------
        dict[str, Any]
            Built-in defaults overlaid with the file's values, with variable
            interpolations resolved

        Raises
        ------
        ValueError
            If the file is not valid YAML or variables cannot be resolved
        RuntimeError
            If the file exists but cannot be read
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)

        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)
        config_file = Path(config_path)

        if not config_file.exists():
            logger.debug("No config file at %s, using defaults", config_file)
            return merged

        try:
            cfg = OmegaConf.load(config_file)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML config file %s: %s", config_file, e)
            raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            logger.error("Failed to read config file %s: %s", config_file, e)
            raise RuntimeError(f"Failed to read config file {config_file}: {e}") from e

        if cfg is None or not OmegaConf.is_dict(cfg):
            return merged

        var_keys: list[str] = []
        if "vars" in cfg:
            vars_dict = OmegaConf.to_container(cfg.vars, resolve=False)
            for key, value in vars_dict.items():
                if key not in cfg:
                    cfg[key] = value
                    var_keys.append(key)

        try:
            loaded = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
        except InterpolationResolutionError as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise ValueError(f"Configuration variable resolution error: {e}") from e
        except (ValueError, KeyError, AttributeError) as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise ValueError(f"Configuration variable resolution error: {e}") from e

        for key in ["vars", *var_keys]:
            loaded.pop(key, None)
        merged.update(loaded)
        return merged

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate configuration values.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration to validate

        Raises
        ------
        ValueError
            If configuration is invalid
        """
        unknown = sorted(set(config) - set(self.BUILT_IN_DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown configuration keys: {unknown}")

        self._validate_timing(config)
        self._validate_colors(config)
        self._validate_signal(config)

    def _validate_timing(self, config: dict[str, Any]) -> None:
        timeout = config.get("query_timeout_ms")
        if isinstance(timeout, bool) or not isinstance(timeout, int):
            raise ValueError("query_timeout_ms must be an integer")
        if timeout <= 0:
            raise ValueError("query_timeout_ms must be positive")

        delay = config.get("retry_delay_ms")
        if isinstance(delay, bool) or not isinstance(delay, (int, float)):
            raise ValueError("retry_delay_ms must be a number")
        if delay <= 0:
            raise ValueError("retry_delay_ms must be positive")
        if delay >= timeout:
            raise ValueError("retry_delay_ms must be smaller than query_timeout_ms")

    def _validate_colors(self, config: dict[str, Any]) -> None:
        for field in ("default_foreground", "default_background"):
            try:
                parse_hex_color(config.get(field))
            except ValueError as e:
                raise ValueError(f"{field}: {e}") from e

    def _validate_signal(self, config: dict[str, Any]) -> None:
        name = config.get("theme_change_signal")
        if not isinstance(name, str) or not name.startswith("SIG"):
            raise ValueError("theme_change_signal must be a signal name such as SIGUSR1")
        if resolve_signal(name) is None:
            logger.warning(
                "Signal %s is not available on this platform; "
                "theme change detection is disabled",
                name,
            )
