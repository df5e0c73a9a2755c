"""Tests for date, name, and person formatting helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from zxclib.output.formatters import (
    NO_DATA,
    capitalize_each_word,
    estimate_person_age,
    format_date,
    format_datetime,
    format_name_and_dob,
    parse_date,
    parse_name_and_dob,
    reformat_name_and_dob,
)


class TestFormatDate:
    def test_valid_date(self) -> None:
        assert format_date(date(2023, 10, 5)) == "05 Oct 2023"

    def test_datetime_accepted(self) -> None:
        assert format_date(datetime(2023, 10, 5, 14, 30)) == "05 Oct 2023"

    def test_none(self) -> None:
        assert format_date(None) == "No data"
        assert NO_DATA == "No data"


class TestFormatDatetime:
    def test_valid(self) -> None:
        assert format_datetime(datetime(2023, 10, 5, 14, 30, 0)) == "October 05, 2023 14:30:00"

    def test_none(self) -> None:
        assert format_datetime(None) == "No data"


class TestCapitalizeEachWord:
    def test_full_name(self) -> None:
        assert capitalize_each_word("john doe") == "John Doe"

    def test_single_name(self) -> None:
        assert capitalize_each_word("john") == "John"

    def test_empty(self) -> None:
        assert capitalize_each_word("") == ""

    def test_lowercases_rest(self) -> None:
        assert capitalize_each_word("mcDONALD  o'neil") == "Mcdonald O'neil"


class TestParseDate:
    @pytest.mark.parametrize(
        "token",
        ["05.10.2023", "05/10/2023", "05-10-2023", "2023-10-05", "2023.10.05", "20231005"],
    )
    def test_accepted_formats(self, token: str) -> None:
        assert parse_date(token) == date(2023, 10, 5)

    @pytest.mark.parametrize("token", ["", "invalid_date", "John", "31.02.2020"])
    def test_unparseable(self, token: str) -> None:
        assert parse_date(token) is None

    def test_month_name(self) -> None:
        assert parse_date("5 March 2021") == date(2021, 3, 5)

    def test_missing_parts_default_to_current_month(self) -> None:
        assert parse_date("March") == date(date.today().year, 3, 1)

    def test_year_first_is_not_day_first(self) -> None:
        assert parse_date("2023-05-10") == date(2023, 5, 10)
        assert parse_date("10-05-2023") == date(2023, 5, 10)


class TestEstimatePersonAge:
    def test_age_from_trailing_date(self) -> None:
        year = datetime.now().year - 23
        assert estimate_person_age(f"John Doe 01.01.{year}") == "23 y.o."

    def test_fixed_now(self) -> None:
        now = datetime(2024, 6, 1, 12, 0)
        assert estimate_person_age("Doe John 01.06.2000", now=now) == "24 y.o."

    def test_timezone_aware_now(self) -> None:
        now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        assert estimate_person_age("Doe John 01.06.2000", now=now) == "24 y.o."

    def test_non_utc_now(self) -> None:
        now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert estimate_person_age("Doe John 01.06.2000", now=now) == "24 y.o."

    def test_flat_year_approximation(self) -> None:
        # Six leap days since 2000 push the flat-year count past the birthday.
        now = datetime(2024, 5, 27)
        assert estimate_person_age("Doe John 01.06.2000", now=now) == "24 y.o."

    def test_invalid_date(self) -> None:
        assert estimate_person_age("John Doe invalid_date") is None

    def test_empty_string(self) -> None:
        assert estimate_person_age("") is None

    def test_non_string(self) -> None:
        assert estimate_person_age(None) is None
        assert estimate_person_age(12) is None


class TestParseNameAndDob:
    def test_without_middle_name(self) -> None:
        assert parse_name_and_dob("Doe John 01.01.2000") == {
            "last_name": "Doe",
            "first_name": "John",
            "middle_name": None,
            "dob": date(2000, 1, 1),
        }

    def test_with_middle_name(self) -> None:
        assert parse_name_and_dob("Doe John Michael 01.01.2000") == {
            "last_name": "Doe",
            "first_name": "John",
            "middle_name": "Michael",
            "dob": date(2000, 1, 1),
        }

    def test_capitalizes(self) -> None:
        result = parse_name_and_dob("doe JOHN michael")
        assert result == {"last_name": "Doe", "first_name": "John", "middle_name": "Michael"}

    def test_invalid_dob_omitted(self) -> None:
        assert parse_name_and_dob("Doe John Michael invalid_date") == {
            "last_name": "Doe",
            "first_name": "John",
            "middle_name": "Michael",
        }

    def test_empty_string(self) -> None:
        assert parse_name_and_dob("") == {"last_name": None, "first_name": None, "middle_name": None}

    def test_none(self) -> None:
        assert parse_name_and_dob(None) == {"last_name": None, "first_name": None, "middle_name": None}


class TestFormatNameAndDob:
    def test_all_fields(self) -> None:
        record = {"last_name": "Doe", "first_name": "John", "middle_name": "Michael", "dob": date(2000, 1, 1)}
        assert format_name_and_dob(record) == "Doe John Michael 01.01.2000"

    def test_missing_dob(self) -> None:
        record = {"last_name": "Doe", "first_name": "John", "middle_name": "Michael"}
        assert format_name_and_dob(record) == "Doe John Michael"

    def test_missing_middle_name(self) -> None:
        record = {"last_name": "Doe", "first_name": "John", "dob": date(2000, 1, 1)}
        assert format_name_and_dob(record) == "Doe John 01.01.2000"

    def test_empty_mapping(self) -> None:
        assert format_name_and_dob({}) == ""

    def test_non_mapping(self) -> None:
        assert format_name_and_dob("invalid input") == ""
        assert format_name_and_dob(None) == ""

    def test_round_trip(self) -> None:
        parsed = parse_name_and_dob("Doe John Michael 01.01.2000")
        assert parse_name_and_dob(format_name_and_dob(parsed)) == parsed


class TestReformatNameAndDob:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Doe John Michael 01.01.2000", "Doe John Michael 01.01.2000"),
            ("Doe John 01.01.2000", "Doe John 01.01.2000"),
            ("Doe John Michael", "Doe John Michael"),
            ("doe john 2000-01-01", "Doe John 01.01.2000"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_reformat(self, raw: str | None, expected: str) -> None:
        assert reformat_name_and_dob(raw) == expected
