"""Pytest configuration and fixtures for hostcolors tests."""

import os
import sys
from collections.abc import Generator

import pytest

from hostcolors.core.context import set_default_context


@pytest.fixture(autouse=True)
def reset_default_context() -> Generator[None, None, None]:
    """Give every test a fresh process-wide color context.

    Yields
    ------
    None
        Control back to test
    """
    set_default_context(None)
    yield
    set_default_context(None)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure HOSTCOLORS_CONFIG and HOSTCOLORS_DEBUG from the environment do not leak in."""
    monkeypatch.delenv("HOSTCOLORS_CONFIG", raising=False)
    monkeypatch.delenv("HOSTCOLORS_DEBUG", raising=False)


@pytest.fixture
def pty_pair() -> Generator[tuple[int, int], None, None]:
    """Open a pseudo-terminal.

    Yields
    ------
    tuple[int, int]
        (master_fd, slave_fd); the slave plays the application's tty and the
        master plays the terminal emulator
    """
    if sys.platform == "win32":
        pytest.skip("pseudo-terminals are not available on Windows")

    import pty

    master_fd, slave_fd = pty.openpty()
    try:
        yield master_fd, slave_fd
    finally:
        os.close(slave_fd)
        os.close(master_fd)


class PipeEnds:
    """Both ends of an OS pipe, standing in for a non-tty stdin.

    Attributes
    ----------
    read_fd : int
        Descriptor the code under test reads from
    write_fd : int | None
        Descriptor the test feeds, None once closed
    """

    def __init__(self) -> None:
        self.read_fd, self.write_fd = os.pipe()

    def feed(self, data: bytes) -> None:
        """Write bytes for the reader to pick up."""
        os.write(self.write_fd, data)

    def close_writer(self) -> None:
        """Close the write end so the reader sees end of file."""
        if self.write_fd is not None:
            os.close(self.write_fd)
            self.write_fd = None

    def close(self) -> None:
        self.close_writer()
        os.close(self.read_fd)


@pytest.fixture
def pipe_ends() -> Generator[PipeEnds, None, None]:
    """Open an OS pipe for the duration of a test.

    Yields
    ------
    PipeEnds
        Pipe wrapper; closed after the test
    """
    ends = PipeEnds()
    try:
        yield ends
    finally:
        ends.close()
