"""Tests for hostcolors logging helpers."""

import logging

import pytest

from hostcolors.logging import ChannelFormatter, StreamRoutingFilter, route_diagnostics_to_stderr


def make_record(level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="hostcolors.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg="Reply received",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestChannelFormatter:
    """Tests for ChannelFormatter."""

    def test_prefixes_channel(self) -> None:
        """Test records with a channel get a bracketed prefix."""
        formatter = ChannelFormatter("%(message)s")

        assert formatter.format(make_record(channel="background")) == "[background] Reply received"

    def test_without_channel(self) -> None:
        """Test records without a channel are formatted unchanged."""
        formatter = ChannelFormatter("%(levelname)s %(message)s")

        assert formatter.format(make_record()) == "INFO Reply received"

    def test_empty_channel_is_ignored(self) -> None:
        """Test an empty channel does not produce an empty prefix."""
        formatter = ChannelFormatter("%(message)s")

        assert formatter.format(make_record(channel="")) == "Reply received"


class TestStreamRoutingFilter:
    """Tests for StreamRoutingFilter."""

    def test_info_goes_to_stdout(self) -> None:
        """Test informational records pass the stdout filter only."""
        record = make_record(logging.INFO)

        assert StreamRoutingFilter("stdout").filter(record) is True
        assert StreamRoutingFilter("stderr").filter(record) is False

    def test_warning_goes_to_stderr(self) -> None:
        """Test warnings pass the stderr filter only."""
        record = make_record(logging.WARNING)

        assert StreamRoutingFilter("stdout").filter(record) is False
        assert StreamRoutingFilter("stderr").filter(record) is True

    def test_explicit_stream_wins(self) -> None:
        """Test the stream extra overrides the level based choice."""
        record = make_record(logging.ERROR, stream="stdout")

        assert StreamRoutingFilter("stdout").filter(record) is True
        assert StreamRoutingFilter("stderr").filter(record) is False

    def test_rejects_unknown_stream(self) -> None:
        """Test only stdout and stderr are valid targets."""
        with pytest.raises(ValueError, match="Unknown stream"):
            StreamRoutingFilter("stdlog")

    def test_info_stream_redirects_quiet_records(self) -> None:
        """Test records below WARNING follow info_stream when no stream is given."""
        record = make_record(logging.DEBUG, channel="foreground")

        assert StreamRoutingFilter("stdout", info_stream="stderr").filter(record) is False
        assert StreamRoutingFilter("stderr", info_stream="stderr").filter(record) is True

    def test_rejects_unknown_info_stream(self) -> None:
        """Test info_stream is validated like stream."""
        with pytest.raises(ValueError, match="Unknown stream"):
            StreamRoutingFilter("stdout", info_stream="null")


class TestRouteDiagnosticsToStderr:
    """Tests for route_diagnostics_to_stderr."""

    def test_updates_routing_filters_on_handlers(self) -> None:
        """Test every routing filter on the logger's handlers sends diagnostics to stderr."""
        target = logging.getLogger("hostcolors.test.routing")
        stdout_handler = logging.StreamHandler()
        stdout_filter = StreamRoutingFilter("stdout")
        stdout_handler.addFilter(stdout_filter)
        other_handler = logging.StreamHandler()
        other_filter = logging.Filter("hostcolors")
        other_handler.addFilter(other_filter)
        target.addHandler(stdout_handler)
        target.addHandler(other_handler)

        try:
            route_diagnostics_to_stderr(target)
        finally:
            target.removeHandler(stdout_handler)
            target.removeHandler(other_handler)

        assert stdout_filter.info_stream == "stderr"
        assert stdout_filter.filter(make_record(logging.INFO)) is False
        assert stdout_filter.filter(make_record(logging.INFO, stream="stdout")) is True
