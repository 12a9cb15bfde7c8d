"""Tests for novafetch.fmt."""

import pytest

from novafetch.ansi import gradient
from novafetch.fmt import display_width, format_age, format_bytes, format_freq, format_uptime


# ── format_bytes ────────────────────────────────────────────────────────────


class TestFormatBytes:
    @pytest.mark.parametrize("unit_type", ["iec", "si", "standard"])
    def test_zero(self, unit_type: str) -> None:
        assert format_bytes(0, unit_type) == "0 B"

    def test_negative_is_zero(self) -> None:
        assert format_bytes(-5) == "0 B"

    def test_iec_kib(self) -> None:
        assert format_bytes(1024, "iec") == "1.00 KiB"

    def test_standard_kb(self) -> None:
        assert format_bytes(1024, "standard") == "1.00 KB"

    def test_si_kb(self) -> None:
        assert format_bytes(1000, "si") == "1.00 KB"

    def test_si_mb(self) -> None:
        assert format_bytes(1_000_000, "si") == "1.00 MB"

    def test_below_first_step(self) -> None:
        assert format_bytes(512) == "512.00 B"

    def test_unknown_unit_type_is_standard(self) -> None:
        assert format_bytes(1024, "weird") == "1.00 KB"

    def test_case_insensitive(self) -> None:
        assert format_bytes(1024, "IEC") == "1.00 KiB"

    def test_caps_at_largest_unit(self) -> None:
        assert format_bytes(1024**5, "iec") == "1024.00 TiB"

    def test_gib(self) -> None:
        assert format_bytes(8 * 1024**3, "iec") == "8.00 GiB"


# ── format_freq / format_uptime ─────────────────────────────────────────────


class TestFormatFreq:
    def test_ghz(self) -> None:
        assert format_freq(3600.0) == "3.60GHz"

    def test_mhz(self) -> None:
        assert format_freq(987.4) == "987MHz"


class TestFormatUptime:
    def test_days(self) -> None:
        assert format_uptime(2 * 86400 + 3 * 3600 + 14 * 60 + 30) == "2d 3h 14m"

    def test_hours(self) -> None:
        assert format_uptime(3 * 3600 + 14 * 60) == "3h 14m"

    def test_minutes(self) -> None:
        assert format_uptime(14 * 60 + 59) == "14m"

    def test_whole_day(self) -> None:
        assert format_uptime(86400) == "1d 0h 0m"

    def test_negative(self) -> None:
        assert format_uptime(-10) == "0m"


# ── format_age ──────────────────────────────────────────────────────────────


class TestFormatAge:
    def test_year_month_days(self) -> None:
        assert format_age(0, now=400 * 86400) == "1 year, 1 month, 5 days"

    def test_plural(self) -> None:
        assert format_age(0, now=(2 * 365 + 2 * 30) * 86400) == "2 years, 2 months"

    def test_days_only(self) -> None:
        assert format_age(0, now=3 * 86400 + 100) == "3 days"

    def test_less_than_a_day(self) -> None:
        assert format_age(1000, now=1000 + 3600) == "Less than a day"

    def test_future_creation(self) -> None:
        assert format_age(5000, now=1000) == "Less than a day"


# ── display_width ───────────────────────────────────────────────────────────


class TestDisplayWidth:
    def test_plain(self) -> None:
        assert display_width("hello") == 5

    def test_empty(self) -> None:
        assert display_width("") == 0

    def test_skips_sgr(self) -> None:
        assert display_width("\x1b[38;2;1;2;3mab\x1b[0m") == 2

    def test_non_ascii_counts_one(self) -> None:
        assert display_width("π") == 1
        assert display_width("█░") == 2

    def test_gradient_is_invisible(self) -> None:
        assert display_width(gradient("novafetch", (0, 0, 0), (255, 0, 0))) == 9

    def test_unterminated_escape(self) -> None:
        assert display_width("ab\x1b[38;2") == 2
