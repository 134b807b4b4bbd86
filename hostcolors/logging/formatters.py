"""Logging formatters for color query diagnostics."""

import logging


class ChannelFormatter(logging.Formatter):
    """Logging formatter that prepends the color channel from the extra parameter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with channel prefix if present.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message with optional ``[channel]`` prefix
        """
        msg = super().format(record)
        channel = getattr(record, "channel", None)

        if channel:
            return f"[{channel}] {msg}"

        return msg
