"""Logging filters routing records to stdout or stderr."""

import logging

STREAMS = ("stdout", "stderr")


class StreamRoutingFilter(logging.Filter):
    """Pass only records destined for one output stream.

    Records may pick a stream with ``extra={"stream": "stdout"}``; otherwise
    warnings and errors go to stderr and everything else to ``info_stream``.

    Parameters
    ----------
    stream : str
        Either "stdout" or "stderr"
    info_stream : str
        Stream for records below WARNING without an explicit stream
    """

    def __init__(self, stream: str, info_stream: str = "stdout") -> None:
        if stream not in STREAMS:
            raise ValueError(f"Unknown stream: {stream}")
        if info_stream not in STREAMS:
            raise ValueError(f"Unknown stream: {info_stream}")
        super().__init__()
        self.stream = stream
        self.info_stream = info_stream

    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "stream", None)
        if target is None:
            target = "stderr" if record.levelno >= logging.WARNING else self.info_stream
        return target == self.stream


def route_diagnostics_to_stderr(logger: logging.Logger | None = None) -> None:
    """Send records without an explicit stream to stderr.

    Applies to every StreamRoutingFilter on the handlers of ``logger`` (the
    root logger by default), keeping stdout free for machine-readable output.
    """
    target = logger or logging.getLogger()
    for handler in target.handlers:
        for log_filter in handler.filters:
            if isinstance(log_filter, StreamRoutingFilter):
                log_filter.info_stream = "stderr"
