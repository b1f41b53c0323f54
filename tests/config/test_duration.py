"""Tests for duration literal parsing and formatting."""

from datetime import timedelta

import pytest

from oidcdp.config.duration import DurationError, format_duration, parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", timedelta(0)),
            ("10s", timedelta(seconds=10)),
            ("1h", timedelta(hours=1)),
            ("2m30s", timedelta(minutes=2, seconds=30)),
            ("1.5s", timedelta(milliseconds=1500)),
            (".5m", timedelta(seconds=30)),
            ("250ms", timedelta(milliseconds=250)),
            ("100us", timedelta(microseconds=100)),
            ("100µs", timedelta(microseconds=100)),
            ("1h15m30.25s", timedelta(hours=1, minutes=15, seconds=30.25)),
            ("+5m", timedelta(minutes=5)),
            ("-5m", timedelta(minutes=-5)),
            ("1500ns", timedelta(microseconds=1)),
        ],
    )
    def test_valid(self, text: str, expected: timedelta) -> None:
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["huh", "", "-", ".", "s", "h1"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(DurationError, match="invalid duration"):
            parse_duration(text)

    def test_invalid_quotes_input(self) -> None:
        with pytest.raises(DurationError) as exc_info:
            parse_duration("huh")
        assert str(exc_info.value) == 'invalid duration "huh"'

    def test_missing_unit(self) -> None:
        with pytest.raises(DurationError, match='missing unit in duration "10"'):
            parse_duration("10")

    def test_unknown_unit(self) -> None:
        with pytest.raises(DurationError, match='unknown unit "d" in duration "1d"'):
            parse_duration("1d")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_duration("nope")

    @pytest.mark.parametrize(
        "text",
        ["99999999999999999999h", "9999999999999999999999999ns", "2562048h"],
    )
    def test_out_of_range(self, text: str) -> None:
        with pytest.raises(DurationError, match="invalid duration"):
            parse_duration(text)

    def test_largest_value_accepted(self) -> None:
        assert parse_duration("2562047h") == timedelta(hours=2562047)

    @pytest.mark.parametrize("text", ["²s", "١s", "1٠s"])
    def test_non_ascii_digits_rejected(self, text: str) -> None:
        with pytest.raises(DurationError):
            parse_duration(text)


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (timedelta(0), "0s"),
            (timedelta(seconds=10), "10s"),
            (timedelta(hours=1), "1h0m0s"),
            (timedelta(minutes=2, seconds=30), "2m30s"),
            (timedelta(milliseconds=1500), "1.5s"),
            (timedelta(milliseconds=250), "250ms"),
            (timedelta(microseconds=1500), "1.5ms"),
            (timedelta(microseconds=7), "7µs"),
            (timedelta(minutes=-1), "-1m0s"),
        ],
    )
    def test_format(self, value: timedelta, expected: str) -> None:
        assert format_duration(value) == expected

    def test_output_parses_back(self) -> None:
        value = timedelta(hours=3, minutes=4, seconds=5, milliseconds=6)
        assert parse_duration(format_duration(value)) == value
