"""
Tests for calendar dates, parsing and date ranges.
"""

import itertools

import pytest

from potd.core.dates import (
    CalendarDate,
    DateRange,
    date_range,
    days_in_month,
    format_date,
    is_leap_year,
    parse_date,
)
from potd.utils.exceptions import (
    InvalidCalendarDateError,
    InvalidDateError,
    InvalidDateFormatError,
    InvalidRangeError,
)


class TestCalendarArithmetic:
    @pytest.mark.parametrize("year,expected", [
        (2024, True), (2023, False), (2000, True), (1900, False), (2100, False),
    ])
    def test_leap_years(self, year, expected) -> None:
        assert is_leap_year(year) is expected

    def test_days_in_february(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28

    def test_days_in_other_months(self) -> None:
        assert days_in_month(2023, 1) == 31
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31


class TestCalendarDate:
    def test_valid_construction(self) -> None:
        date = CalendarDate(2024, 2, 29)
        assert (date.year, date.month, date.day) == (2024, 2, 29)

    @pytest.mark.parametrize("year,month,day", [
        (2023, 2, 29), (2023, 2, 30), (2023, 13, 1), (2023, 0, 1),
        (2023, 4, 31), (2023, 1, 0), (0, 1, 1), (10000, 1, 1),
    ])
    def test_rejects_impossible_dates(self, year, month, day) -> None:
        with pytest.raises(InvalidCalendarDateError):
            CalendarDate(year, month, day)

    def test_rejects_non_integers(self) -> None:
        with pytest.raises(InvalidCalendarDateError):
            CalendarDate(2023, "1", 30)
        with pytest.raises(InvalidCalendarDateError):
            CalendarDate(2023, True, 30)

    def test_ordering_is_chronological(self) -> None:
        assert CalendarDate(2023, 1, 31) < CalendarDate(2023, 2, 1)
        assert CalendarDate(2022, 12, 31) < CalendarDate(2023, 1, 1)
        assert CalendarDate(2023, 2, 10) > CalendarDate(2023, 2, 9)
        assert CalendarDate(2023, 2, 10) == CalendarDate(2023, 2, 10)

    @pytest.mark.parametrize("date,expected", [
        (CalendarDate(2023, 1, 30), CalendarDate(2023, 1, 31)),
        (CalendarDate(2023, 1, 31), CalendarDate(2023, 2, 1)),
        (CalendarDate(2023, 2, 28), CalendarDate(2023, 3, 1)),
        (CalendarDate(2024, 2, 28), CalendarDate(2024, 2, 29)),
        (CalendarDate(2024, 2, 29), CalendarDate(2024, 3, 1)),
        (CalendarDate(2023, 12, 31), CalendarDate(2024, 1, 1)),
    ])
    def test_next_day(self, date, expected) -> None:
        assert date.next_day() == expected

    def test_next_day_after_last_supported_date(self) -> None:
        assert CalendarDate(9999, 12, 31).next_day() is None

    def test_isoformat(self) -> None:
        assert str(CalendarDate(987, 3, 4)) == "0987-03-04"

    def test_today_is_valid(self) -> None:
        assert isinstance(CalendarDate.today(), CalendarDate)


class TestParseDate:
    def test_default_format(self) -> None:
        assert parse_date("2023-01-30") == CalendarDate(2023, 1, 30)

    def test_single_digit_fields(self) -> None:
        assert parse_date("2023-1-3") == CalendarDate(2023, 1, 3)

    def test_accepts_leap_day(self) -> None:
        assert parse_date("2024-02-29") == CalendarDate(2024, 2, 29)

    @pytest.mark.parametrize("raw", ["2023-02-29", "2023-02-30", "2023-13-01", "2023-00-10"])
    def test_rejects_impossible_dates(self, raw) -> None:
        with pytest.raises(InvalidCalendarDateError):
            parse_date(raw)

    @pytest.mark.parametrize("raw", ["", "2023/01/30", "30-01-2023", "yesterday", "2023-01-30T00:00"])
    def test_rejects_malformed_strings(self, raw) -> None:
        with pytest.raises(InvalidDateFormatError):
            parse_date(raw)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidDateFormatError):
            parse_date(20230130)

    def test_custom_format(self) -> None:
        assert parse_date("30/01/2023", "%d/%m/%Y") == CalendarDate(2023, 1, 30)

    def test_custom_format_impossible_date(self) -> None:
        with pytest.raises(InvalidCalendarDateError):
            parse_date("30/02/2023", "%d/%m/%Y")

    @pytest.mark.parametrize("raw,date_format", [
        ("01/13/2023", "%d/%m/%Y"),
        ("13/01/2023", "%m/%d/%Y"),
        ("00.01.2023", "%d.%m.%Y"),
        ("29022023", "%d%m%Y"),
    ])
    def test_custom_format_impossible_fields(self, raw, date_format) -> None:
        with pytest.raises(InvalidCalendarDateError):
            parse_date(raw, date_format)

    def test_custom_format_mismatch(self) -> None:
        with pytest.raises(InvalidDateFormatError):
            parse_date("2023-01-30", "%d/%m/%Y")

    def test_two_digit_year(self) -> None:
        assert parse_date("30/01/23", "%d/%m/%y") == CalendarDate(2023, 1, 30)
        assert parse_date("30/01/99", "%d/%m/%y") == CalendarDate(1999, 1, 30)

    def test_literal_percent(self) -> None:
        assert parse_date("2023-01-30%", "%Y-%m-%d%%") == CalendarDate(2023, 1, 30)

    def test_textual_format_uses_strptime(self) -> None:
        assert parse_date("30 Jan 2023", "%d %b %Y") == CalendarDate(2023, 1, 30)
        with pytest.raises(InvalidDateFormatError):
            parse_date("30 Foo 2023", "%d %b %Y")

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(InvalidDateError):
            parse_date("2023-02-30")
        with pytest.raises(InvalidDateError):
            parse_date("nonsense")


class TestFormatDate:
    def test_default_format(self) -> None:
        assert format_date(CalendarDate(2023, 1, 30)) == "2023-01-30"

    def test_custom_format(self) -> None:
        assert format_date(CalendarDate(2023, 1, 30), "%d.%m.%Y") == "30.01.2023"

    def test_parse_of_formatted_date(self) -> None:
        date = CalendarDate(2024, 2, 29)
        assert parse_date(format_date(date, "%m/%d/%Y"), "%m/%d/%Y") == date


class TestDateRange:
    def test_month_boundary(self, sample_dates) -> None:
        dates = list(date_range(CalendarDate(2023, 1, 30), CalendarDate(2023, 2, 2)))
        assert dates == sample_dates

    def test_single_day(self) -> None:
        day = CalendarDate(2023, 6, 15)
        assert list(date_range(day, day)) == [day]

    def test_leap_year_february(self) -> None:
        dates = list(date_range(CalendarDate(2024, 2, 28), CalendarDate(2024, 3, 1)))
        assert dates == [
            CalendarDate(2024, 2, 28),
            CalendarDate(2024, 2, 29),
            CalendarDate(2024, 3, 1),
        ]

    def test_year_boundary(self) -> None:
        dates = list(date_range(CalendarDate(2023, 12, 30), CalendarDate(2024, 1, 2)))
        assert [str(date) for date in dates] == [
            "2023-12-30", "2023-12-31", "2024-01-01", "2024-01-02",
        ]

    def test_whole_year_is_gap_free(self) -> None:
        dates = list(date_range(CalendarDate(2024, 1, 1), CalendarDate(2024, 12, 31)))
        assert len(dates) == 366
        assert all(a.next_day() == b for a, b in zip(dates, dates[1:]))
        assert dates == sorted(set(dates))

    def test_len_matches_iteration(self) -> None:
        dates = date_range(CalendarDate(2023, 1, 1), CalendarDate(2023, 3, 1))
        assert len(dates) == len(list(dates)) == 60

    def test_restartable(self) -> None:
        dates = date_range(CalendarDate(2023, 1, 30), CalendarDate(2023, 2, 2))
        assert list(dates) == list(dates)

    def test_lazy_over_huge_range(self) -> None:
        dates = date_range(CalendarDate(1, 1, 1), CalendarDate(9999, 12, 31))
        assert len(dates) == 3652059
        first = list(itertools.islice(dates, 3))
        assert first == [CalendarDate(1, 1, 1), CalendarDate(1, 1, 2), CalendarDate(1, 1, 3)]

    def test_range_ending_on_last_supported_date(self) -> None:
        dates = list(date_range(CalendarDate(9999, 12, 30), CalendarDate(9999, 12, 31)))
        assert dates == [CalendarDate(9999, 12, 30), CalendarDate(9999, 12, 31)]

    def test_rejects_reversed_range(self) -> None:
        with pytest.raises(InvalidRangeError):
            date_range(CalendarDate(2023, 2, 2), CalendarDate(2023, 1, 30))

    def test_contains(self) -> None:
        dates = DateRange(CalendarDate(2023, 1, 30), CalendarDate(2023, 2, 2))
        assert CalendarDate(2023, 2, 1) in dates
        assert CalendarDate(2023, 2, 3) not in dates
