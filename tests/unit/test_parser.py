"""Tests for OSC color reply parsing."""

import pytest

from hostcolors.osc.parser import parse_hex_component, parse_osc_color_response


class TestParseHexComponent:
    """Tests for single channel decoding."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ff", 255),
            ("00", 0),
            ("35", 0x35),
            ("f", 15),
            ("ffff", 255),
            ("0000", 0),
            ("3535", 0x35),
            ("8080", 0x80),
            ("80ff", 0x80),
            ("FFFF", 255),
            ("fff", 15),
        ],
    )
    def test_decodes_valid_components(self, text: str, expected: int) -> None:
        """Test two-digit values pass through and longer values keep the high byte."""
        assert parse_hex_component(text) == expected

    @pytest.mark.parametrize(
        "text", ["", "zz", "12g4", "+ff", " ff", "ff ", "-1", "12345", "0x12"]
    )
    def test_rejects_invalid_components(self, text: str) -> None:
        """Test non-hex, signed, padded and oversized components are rejected."""
        assert parse_hex_component(text) is None


class TestParseOscColorResponse:
    """Tests for full reply parsing."""

    def test_parses_16bit_reply(self) -> None:
        """Test typical 4-digit-per-channel reply."""
        result = parse_osc_color_response(b"\x1b]11;rgb:3535/3737/3131\x1b\\")
        assert result == (0x35, 0x37, 0x31)

    def test_parses_8bit_reply(self) -> None:
        """Test 2-digit-per-channel reply."""
        result = parse_osc_color_response(b"\x1b]11;rgb:35/37/31\x1b\\")
        assert result == (0x35, 0x37, 0x31)

    def test_parses_black(self) -> None:
        """Test all-zero reply."""
        assert parse_osc_color_response(b"\x1b]11;rgb:0000/0000/0000\x1b\\") == (0, 0, 0)

    def test_parses_white(self) -> None:
        """Test all-ones reply."""
        assert parse_osc_color_response(b"\x1b]10;rgb:ffff/ffff/ffff\x1b\\") == (255, 255, 255)

    def test_parses_bel_terminated_reply(self) -> None:
        """Test replies terminated with BEL instead of ST."""
        assert parse_osc_color_response(b"\x1b]10;rgb:c5c5/c8c8/c6c6\x07") == (0xC5, 0xC8, 0xC6)

    def test_parses_unterminated_buffer(self) -> None:
        """Test a complete color without terminator still parses."""
        assert parse_osc_color_response(b"\x1b]11;rgb:1e1e/1e1e/2e2e") == (0x1E, 0x1E, 0x2E)

    def test_parses_mixed_case_hex(self) -> None:
        """Test upper and lower case digits are both accepted."""
        assert parse_osc_color_response(b"\x1b]11;rgb:AbCd/00fF/1234\x1b\\") == (0xAB, 0x00, 0x12)

    def test_returns_none_for_empty_buffer(self) -> None:
        """Test an empty read (timeout without data)."""
        assert parse_osc_color_response(b"") is None

    def test_returns_none_without_rgb_prefix(self) -> None:
        """Test replies in other color formats are rejected."""
        assert parse_osc_color_response(b"\x1b]11;#353731\x1b\\") is None

    @pytest.mark.parametrize(
        "response",
        [
            b"\x1b]11;rgb:3535/3737\x1b\\",
            b"\x1b]11;rgb:3535/3737/3131/0000\x1b\\",
            b"\x1b]11;rgb:\x1b\\",
            b"\x1b]11;rgb:3535/3737/",
        ],
    )
    def test_returns_none_for_wrong_part_count(self, response: bytes) -> None:
        """Test anything other than three complete channels is rejected."""
        assert parse_osc_color_response(response) is None

    def test_returns_none_when_any_component_invalid(self) -> None:
        """Test a partially decodable triple is rejected entirely."""
        assert parse_osc_color_response(b"\x1b]11;rgb:3535/zzzz/3131\x1b\\") is None

    def test_returns_none_for_invalid_utf8(self) -> None:
        """Test undecodable bytes are rejected without raising."""
        assert parse_osc_color_response(b"\xff\xfe\x1b]11;rgb:35/37/31\x1b\\") is None

    def test_returns_none_for_truncated_reply(self) -> None:
        """Test a reply cut off mid-channel by the deadline."""
        assert parse_osc_color_response(b"\x1b]11;rgb:35") is None
