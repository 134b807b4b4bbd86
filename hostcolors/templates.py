"""Templates written by the hostcolors CLI."""

CONFIG_TEMPLATE = """\
# hostcolors configuration
#
# Values shown are the built-in defaults. Shared values can be declared
# under `vars` and referenced with ${name}.

# Time to wait for the terminal to answer each OSC 10/11 query.
query_timeout_ms: 100

# Pause between polls of the terminal input while waiting.
retry_delay_ms: 5

# Colors used when the terminal does not report its own.
default_foreground: "#ffffff"
default_background: "#353731"

# Signal that tells a running application the terminal theme changed.
theme_change_signal: SIGUSR1
"""
