from datetime import date, datetime

import pytest

from jalaali_calendar import (
    GregorianDate,
    InvalidDateError,
    InvalidJalaaliYearError,
    JalaaliDate,
    MissingArgumentError,
    coerce_gregorian,
    coerce_jalaali,
    date_to_jalaali,
    gregorian_to_jalaali,
    is_leap_jalaali_year,
    is_valid_jalaali_date,
    jalaali_month_length,
    jalaali_to_datetime,
    jalaali_to_gregorian,
    jalaali_week,
    to_gregorian,
    to_jalaali,
)


@pytest.mark.parametrize(
    "gregorian,jalaali",
    [
        ((2025, 11, 15), (1404, 8, 24)),
        ((1981, 8, 17), (1360, 5, 26)),
        ((2013, 1, 10), (1391, 10, 21)),
        ((2014, 8, 4), (1393, 5, 13)),
        ((2024, 3, 20), (1403, 1, 1)),
        ((2024, 3, 19), (1402, 12, 29)),
        ((2025, 3, 20), (1403, 12, 30)),
        ((2017, 1, 1), (1395, 10, 12)),
    ],
)
def test_known_conversions(gregorian, jalaali):
    assert to_jalaali(*gregorian) == JalaaliDate(*jalaali)
    assert to_gregorian(*jalaali) == GregorianDate(*gregorian)


def test_to_jalaali_requires_month_and_day():
    with pytest.raises(MissingArgumentError):
        to_jalaali(2025)
    with pytest.raises(TypeError):
        to_jalaali(2025, 11)


@pytest.mark.parametrize("gm,gd", [(0, 5), (11, 0)])
def test_to_jalaali_rejects_zero_month_or_day(gm, gd):
    with pytest.raises(MissingArgumentError):
        to_jalaali(2025, gm, gd)


def test_date_to_jalaali_accepts_date_and_datetime():
    assert date_to_jalaali(date(2025, 11, 15)) == JalaaliDate(1404, 8, 24)
    assert date_to_jalaali(datetime(2024, 3, 20, 23, 59)) == JalaaliDate(1403, 1, 1)


@pytest.mark.parametrize(
    "jy,jm,jd,expected",
    [
        (1404, 8, 24, True),
        (1404, 13, 1, False),
        (5000, 1, 1, False),
        (-62, 12, 29, False),
        (-61, 1, 1, True),
        (3178, 1, 1, False),
        (3177, 12, 29, True),
        (1393, 0, 1, False),
        (1393, 1, 0, False),
        (1393, 1, 31, True),
        (1393, 1, 32, False),
        (1393, 11, 30, True),
        (1393, 11, 31, False),
        (1393, 12, 29, True),
        (1393, 12, 30, False),
        (1395, 12, 30, True),
    ],
)
def test_is_valid_jalaali_date(jy, jm, jd, expected):
    assert is_valid_jalaali_date(jy, jm, jd) is expected


@pytest.mark.parametrize(
    "jy,expected",
    [(1393, False), (1394, False), (1395, True), (1396, False), (1399, True), (1400, False), (1403, True), (1404, False)],
)
def test_is_leap_jalaali_year(jy, expected):
    assert is_leap_jalaali_year(jy) is expected


def test_month_lengths():
    assert jalaali_month_length(1404, 1) == 31
    assert jalaali_month_length(1404, 6) == 31
    assert jalaali_month_length(1404, 7) == 30
    assert jalaali_month_length(1404, 11) == 30
    assert jalaali_month_length(1404, 12) == 29
    assert jalaali_month_length(1403, 12) == 30


def test_leap_years_have_thirty_day_esfand():
    for jy in range(-61, 3178):
        assert is_leap_jalaali_year(jy) is (jalaali_month_length(jy, 12) == 30)


def test_leap_lookup_rejects_unsupported_year():
    with pytest.raises(InvalidJalaaliYearError):
        is_leap_jalaali_year(4000)


def test_jalaali_gregorian_round_trip():
    for jy in (-61, 0, 1, 621, 1300, 1403, 1404, 2500, 3177):
        for jm in range(1, 13):
            for jd in range(1, jalaali_month_length(jy, jm) + 1):
                if jy == 3177 and jm > 9:
                    continue
                g = to_gregorian(jy, jm, jd)
                assert to_jalaali(g.gy, g.gm, g.gd) == JalaaliDate(jy, jm, jd)


def test_jalaali_to_datetime_sets_time_of_day():
    value = jalaali_to_datetime(1404, 8, 24, 12, 30, 15, 250)
    assert value == datetime(2025, 11, 15, 12, 30, 15, 250000)
    assert value.tzinfo is None
    assert jalaali_to_datetime(1403, 1, 1) == datetime(2024, 3, 20)


@pytest.mark.parametrize(
    "jalaali,saturday,friday",
    [
        ((1404, 8, 24), (1404, 8, 24), (1404, 8, 30)),
        ((1404, 8, 27), (1404, 8, 24), (1404, 8, 30)),
        ((1404, 8, 30), (1404, 8, 24), (1404, 8, 30)),
        ((1404, 1, 1), (1403, 12, 25), (1404, 1, 1)),
    ],
)
def test_jalaali_week(jalaali, saturday, friday):
    week = jalaali_week(*jalaali)
    assert week.saturday == JalaaliDate(*saturday)
    assert week.friday == JalaaliDate(*friday)
    assert jalaali_to_datetime(*week.saturday.astuple()).weekday() == 5
    assert jalaali_to_datetime(*week.friday.astuple()).weekday() == 4


def test_jalaali_week_fails_past_the_lower_year_edge():
    assert is_valid_jalaali_date(-61, 1, 1)
    with pytest.raises(InvalidJalaaliYearError) as exc_info:
        jalaali_week(-61, 1, 1)
    assert exc_info.value.year == -62


def test_value_types_validate_bounds():
    with pytest.raises(InvalidDateError):
        JalaaliDate(1404, 12, 30)
    with pytest.raises(InvalidDateError):
        JalaaliDate(1404, 13, 1)
    with pytest.raises(InvalidJalaaliYearError):
        JalaaliDate(4000, 1, 1)
    with pytest.raises(InvalidDateError):
        GregorianDate(2023, 2, 29)
    with pytest.raises(InvalidDateError):
        GregorianDate(1900, 2, 29)
    assert GregorianDate(2024, 2, 29).to_date() == date(2024, 2, 29)
    assert isinstance(JalaaliDate(1403, 12, 30), JalaaliDate)


def test_value_type_helpers():
    j = JalaaliDate(1403, 1, 1)
    assert j.isoformat() == "1403-01-01"
    assert j.isoformat("/") == "1403/01/01"
    assert j.to_gregorian() == GregorianDate(2024, 3, 20)
    assert GregorianDate(2024, 3, 20).to_jalaali() == j
    assert GregorianDate(2024, 3, 20).isoformat() == "2024-03-20"


def test_coerce_helpers_accept_various_inputs():
    assert coerce_gregorian("2024/03/20") == (2024, 3, 20)
    assert coerce_gregorian(datetime(2024, 3, 20, 8)) == (2024, 3, 20)
    assert coerce_gregorian(GregorianDate(2022, 11, 5)) == (2022, 11, 5)
    assert coerce_gregorian((2022, 11, 5)) == (2022, 11, 5)
    assert coerce_jalaali("1403/01/01") == (1403, 1, 1)
    assert coerce_jalaali(JalaaliDate(1402, 12, 29)) == (1402, 12, 29)


def test_coerce_helpers_accept_negative_years():
    assert coerce_gregorian(GregorianDate(-5, 1, 1).isoformat()) == (-5, 1, 1)
    assert coerce_gregorian("-5/02/28") == (-5, 2, 28)
    assert coerce_jalaali(JalaaliDate(-61, 1, 1).isoformat()) == (-61, 1, 1)


def test_coerce_helpers_reject_malformed_input():
    with pytest.raises(ValueError):
        coerce_gregorian("2024-03")
    with pytest.raises(TypeError):
        coerce_jalaali(1403)
    with pytest.raises(TypeError):
        coerce_jalaali((1403, 1))


@pytest.mark.parametrize(
    "value,expected",
    [
        (date(2024, 3, 20), "1403-01-01"),
        ("2023-03-21", "1402-01-01"),
        ((2017, 1, 1), "1395-10-12"),
    ],
)
def test_gregorian_to_jalaali_known_values(value, expected):
    assert gregorian_to_jalaali(value).isoformat() == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (JalaaliDate(1403, 1, 1), date(2024, 3, 20)),
        ("1402-01-01", date(2023, 3, 21)),
        ((1395, 10, 12), date(2017, 1, 1)),
    ],
)
def test_jalaali_to_gregorian_known_values(value, expected):
    assert jalaali_to_gregorian(value) == expected
