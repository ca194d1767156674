"""Gregorian ↔ Jalaali conversion through Julian Day Numbers.

Every conversion pivots on a Julian Day Number (JDN): Gregorian dates go through
:func:`g2d` / :func:`d2g`, Jalaali dates through :func:`j2d` / :func:`d2j`.
Leap years of the Jalaali calendar follow the break-point algorithm described at
http://www.astro.uni.torun.pl/~kb/Papers/EMP/PersianC-EMP.htm and are supported
for Jalaali years -61..3177.
"""
from __future__ import annotations

import logging
from dataclasses import astuple, dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Sequence, Tuple, Union

from .errors import (
    BreaksTableError,
    InvalidDateError,
    InvalidJalaaliYearError,
    MissingArgumentError,
)

__all__ = [
    "BREAKS",
    "MAX_JALAALI_YEAR",
    "MIN_JALAALI_YEAR",
    "GregorianDate",
    "JalCalResult",
    "JalaaliDate",
    "JalaaliWeek",
    "coerce_gregorian",
    "coerce_jalaali",
    "d2g",
    "d2j",
    "date_to_jalaali",
    "div",
    "g2d",
    "gregorian_to_jalaali",
    "is_leap_jalaali_year",
    "is_valid_jalaali_date",
    "j2d",
    "jal_cal",
    "jal_cal_leap",
    "jalaali_month_length",
    "jalaali_to_datetime",
    "jalaali_to_gregorian",
    "jalaali_week",
    "mod",
    "to_gregorian",
    "to_jalaali",
]

logger = logging.getLogger(__name__)

# Jalaali years at which the 33-year leap cycle is adjusted.
BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)
MIN_JALAALI_YEAR = BREAKS[0]
MAX_JALAALI_YEAR = BREAKS[-1] - 1

_GREGORIAN_MONTH_LENGTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


@dataclass(frozen=True)
class JalaaliDate:
    """Immutable representation of a Jalaali (Persian) calendar date."""

    jy: int
    jm: int
    jd: int

    def __post_init__(self) -> None:
        if not (MIN_JALAALI_YEAR <= self.jy <= MAX_JALAALI_YEAR):
            raise InvalidJalaaliYearError(self.jy)
        if not (1 <= self.jm <= 12):
            raise InvalidDateError("month must be in 1..12 for Jalaali calendar")
        max_day = jalaali_month_length(self.jy, self.jm)
        if not (1 <= self.jd <= max_day):
            raise InvalidDateError(f"day must be in 1..{max_day} for month {self.jm}")

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.jy:04d}{sep}{self.jm:02d}{sep}{self.jd:02d}"

    def astuple(self) -> Tuple[int, int, int]:
        return astuple(self)  # type: ignore[return-value]

    def to_gregorian(self) -> "GregorianDate":
        return to_gregorian(self.jy, self.jm, self.jd)


@dataclass(frozen=True)
class GregorianDate:
    """Immutable proleptic Gregorian date; years BC are numbered 0, -1, -2, ..."""

    gy: int
    gm: int
    gd: int

    def __post_init__(self) -> None:
        if not (1 <= self.gm <= 12):
            raise InvalidDateError("month must be in 1..12 for Gregorian calendar")
        max_day = _gregorian_month_length(self.gy, self.gm)
        if not (1 <= self.gd <= max_day):
            raise InvalidDateError(f"day must be in 1..{max_day} for month {self.gm}")

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.gy:04d}{sep}{self.gm:02d}{sep}{self.gd:02d}"

    def astuple(self) -> Tuple[int, int, int]:
        return astuple(self)  # type: ignore[return-value]

    def to_jalaali(self) -> JalaaliDate:
        return to_jalaali(self.gy, self.gm, self.gd)

    def to_date(self) -> date:
        return date(self.gy, self.gm, self.gd)


@dataclass(frozen=True)
class JalCalResult:
    """Where a Jalaali year sits relative to the Gregorian calendar.

    ``leap`` counts the years since the last leap year (0 means ``jy`` itself is
    leap) and is ``None`` when the leap computation was skipped. ``gy`` is the
    Gregorian year in which the Jalaali year begins and ``march`` the day of
    March holding Farvardin 1.
    """

    leap: Optional[int]
    gy: int
    march: int


@dataclass(frozen=True)
class JalaaliWeek:
    """Saturday and Friday bounding a Jalaali week."""

    saturday: JalaaliDate
    friday: JalaaliDate


def div(a: int, b: int) -> int:
    """Integer division truncated toward zero (``div(-7, 2) == -3``)."""

    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def mod(a: int, b: int) -> int:
    """Remainder matching :func:`div`; carries the sign of ``a``."""

    return a - div(a, b) * b


def _is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _gregorian_month_length(year: int, month: int) -> int:
    if month == 2 and _is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_LENGTHS[month - 1]


def _locate(jy: int, breaks: Sequence[int]) -> Tuple[int, int, int]:
    """Return ``(jp, jump, leap_j)`` for the break interval holding ``jy``.

    ``leap_j`` is the running leap-day count over all fully passed intervals.
    """

    if not breaks:
        raise BreaksTableError("breaks table cannot be empty")
    jp = breaks[0]
    if jy < jp or jy >= breaks[-1]:
        logger.debug("Rejecting Jalaali year %s outside [%s, %s)", jy, jp, breaks[-1])
        raise InvalidJalaaliYearError(jy)

    leap_j = -14
    jump = 0
    for jm in breaks[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += div(jump, 33) * 8 + div(mod(jump, 33), 4)
        jp = jm
    return jp, jump, leap_j


def _leap_position(n: int, jump: int) -> int:
    # Years close to the next break belong to its cycle.
    if jump - n < 6:
        n = n - jump + div(jump + 4, 33) * 33
    leap = mod(mod(n + 1, 33) - 1, 4)
    if leap == -1:
        leap = 4
    return leap


def jal_cal(jy: int, without_leap: bool = False, breaks: Sequence[int] = BREAKS) -> JalCalResult:
    """Locate Jalaali year ``jy`` in the Gregorian calendar.

    Finds the Gregorian year and the day of March on which Farvardin 1 falls
    and, unless ``without_leap`` is set, how many years have passed since the
    last leap year.

    >>> jal_cal(1404)
    JalCalResult(leap=1, gy=2025, march=21)
    """

    jp, jump, leap_j = _locate(jy, breaks)
    gy = jy + 621
    n = jy - jp

    # Leap years from AD 621 to the beginning of jy, in both calendars.
    leap_j += div(n, 33) * 8 + div(mod(n, 33) + 3, 4)
    if mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1
    leap_g = div(gy, 4) - div((div(gy, 100) + 1) * 3, 4) - 150

    march = 20 + leap_j - leap_g
    if without_leap:
        return JalCalResult(None, gy, march)
    return JalCalResult(_leap_position(n, jump), gy, march)


def jal_cal_leap(jy: int, breaks: Sequence[int] = BREAKS) -> int:
    """Return only the leap position (0..4) of ``jy``; 0 marks a leap year."""

    jp, jump, _ = _locate(jy, breaks)
    return _leap_position(jy - jp, jump)


def g2d(gy: int, gm: int, gd: int) -> int:
    """Julian Day Number of a proleptic Gregorian date.

    Valid from 1 March -100100 up to a few million years ahead.
    """

    d = (
        div((gy + div(gm - 8, 6) + 100100) * 1461, 4)
        + div(153 * mod(gm + 9, 12) + 2, 5)
        + gd
        - 34840408
    )
    return d - div(div(gy + 100100 + div(gm - 8, 6), 100) * 3, 4) + 752


def d2g(jdn: int) -> GregorianDate:
    """Proleptic Gregorian date of a Julian Day Number (inverse of :func:`g2d`)."""

    j = 4 * jdn + 139361631
    j = j + div(div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = div(mod(j, 1461), 4) * 5 + 308
    gd = div(mod(i, 153), 5) + 1
    gm = mod(div(i, 153), 12) + 1
    gy = div(j, 1461) - 100100 + div(8 - gm, 6)
    return GregorianDate(gy, gm, gd)


def j2d(jy: int, jm: int, jd: int) -> int:
    """Julian Day Number of a Jalaali date.

    Out-of-range days are not rejected, so ``jd`` may be used as an offset
    that rolls over into neighbouring months.
    """

    r = jal_cal(jy, without_leap=True)
    return g2d(r.gy, 3, r.march) + (jm - 1) * 31 - div(jm, 7) * (jm - 7) + jd - 1


def d2j(jdn: int) -> JalaaliDate:
    """Jalaali date of a Julian Day Number (inverse of :func:`j2d`)."""

    gy = d2g(jdn).gy
    jy = gy - 621
    r = jal_cal(jy)
    jdn1f = g2d(gy, 3, r.march)

    # Days passed since 1 Farvardin.
    k = jdn - jdn1f
    if k >= 0:
        if k <= 185:
            return JalaaliDate(jy, 1 + div(k, 31), mod(k, 31) + 1)
        k -= 186
    else:
        # Still in the previous Jalaali year.
        jy -= 1
        k += 179
        if r.leap == 1:
            k += 1
    return JalaaliDate(jy, 7 + div(k, 30), mod(k, 30) + 1)


def to_jalaali(gy: int, gm: Optional[int] = None, gd: Optional[int] = None) -> JalaaliDate:
    """Convert a Gregorian date given as fields to a Jalaali date.

    >>> to_jalaali(2025, 11, 15)
    JalaaliDate(jy=1404, jm=8, jd=24)
    """

    if not gm or not gd:
        raise MissingArgumentError("Gregorian month and Gregorian day are required")
    return d2j(g2d(gy, gm, gd))


def date_to_jalaali(value: Union[date, datetime]) -> JalaaliDate:
    """Convert a :class:`~datetime.date` or :class:`~datetime.datetime` to a Jalaali date."""

    return to_jalaali(value.year, value.month, value.day)


def to_gregorian(jy: int, jm: int, jd: int) -> GregorianDate:
    return d2g(j2d(jy, jm, jd))


def is_valid_jalaali_date(jy: int, jm: int, jd: int) -> bool:
    return (
        MIN_JALAALI_YEAR <= jy <= MAX_JALAALI_YEAR
        and 1 <= jm <= 12
        and 1 <= jd <= jalaali_month_length(jy, jm)
    )


def is_leap_jalaali_year(jy: int) -> bool:
    return jal_cal_leap(jy) == 0


def jalaali_month_length(jy: int, jm: int) -> int:
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_leap_jalaali_year(jy) else 29


def jalaali_to_datetime(
    jy: int,
    jm: int,
    jd: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Return a naive local :class:`~datetime.datetime` for a Jalaali date and time."""

    g = to_gregorian(jy, jm, jd)
    return datetime(g.gy, g.gm, g.gd, hour, minute, second, millisecond * 1000)


def jalaali_week(jy: int, jm: int, jd: int) -> JalaaliWeek:
    """Return the Saturday and Friday of the week holding the given date.

    Both ends must fall in Jalaali years -61..3177; a week reaching past either
    edge raises :class:`InvalidJalaaliYearError`.
    """

    # Saturday is weekday 5 and starts the week.
    since_saturday = (jalaali_to_datetime(jy, jm, jd).weekday() - 5) % 7
    return JalaaliWeek(
        saturday=d2j(j2d(jy, jm, jd - since_saturday)),
        friday=d2j(j2d(jy, jm, jd + 6 - since_saturday)),
    )


def _split_date_string(value: str, calendar: str) -> Tuple[int, int, int]:
    # A leading "-" belongs to the year, as produced by isoformat() for years before 0.
    text = value.strip()
    sign = 1
    if text.startswith("-"):
        sign, text = -1, text[1:]
    tokens = text.replace("/", "-").split("-")
    if len(tokens) != 3:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}")
    year, month, day = (int(part) for part in tokens)
    return sign * year, month, day


def coerce_gregorian(value: Union[str, date, datetime, GregorianDate, Iterable[int]]) -> Tuple[int, int, int]:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, GregorianDate):
        return value.astuple()
    if isinstance(value, str):
        return _split_date_string(value, "Gregorian")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a date, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_jalaali(value: Union[str, JalaaliDate, Iterable[int]]) -> Tuple[int, int, int]:
    if isinstance(value, JalaaliDate):
        return value.astuple()
    if isinstance(value, str):
        return _split_date_string(value, "Jalaali")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a JalaaliDate, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def gregorian_to_jalaali(value: Union[str, date, datetime, GregorianDate, Iterable[int]]) -> JalaaliDate:
    return to_jalaali(*coerce_gregorian(value))


def jalaali_to_gregorian(value: Union[str, JalaaliDate, Iterable[int]]) -> date:
    return to_gregorian(*coerce_jalaali(value)).to_date()
