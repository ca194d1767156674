"""Jalaali (Persian) ↔ Gregorian calendar conversion.

Only the names re-exported here are public; the arithmetic lives in
:mod:`jalaali_calendar.api.converter`.
"""
import logging

from .api.converter import (
    BREAKS,
    MAX_JALAALI_YEAR,
    MIN_JALAALI_YEAR,
    GregorianDate,
    JalCalResult,
    JalaaliDate,
    JalaaliWeek,
    coerce_gregorian,
    coerce_jalaali,
    d2g,
    d2j,
    date_to_jalaali,
    g2d,
    gregorian_to_jalaali,
    is_leap_jalaali_year,
    is_valid_jalaali_date,
    j2d,
    jal_cal,
    jalaali_month_length,
    jalaali_to_datetime,
    jalaali_to_gregorian,
    jalaali_week,
    to_gregorian,
    to_jalaali,
)
from .api.errors import (
    BreaksTableError,
    InvalidDateError,
    InvalidJalaaliYearError,
    JalaaliError,
    MissingArgumentError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BREAKS",
    "MAX_JALAALI_YEAR",
    "MIN_JALAALI_YEAR",
    "BreaksTableError",
    "GregorianDate",
    "InvalidDateError",
    "InvalidJalaaliYearError",
    "JalCalResult",
    "JalaaliDate",
    "JalaaliError",
    "JalaaliWeek",
    "MissingArgumentError",
    "coerce_gregorian",
    "coerce_jalaali",
    "d2g",
    "d2j",
    "date_to_jalaali",
    "g2d",
    "gregorian_to_jalaali",
    "is_leap_jalaali_year",
    "is_valid_jalaali_date",
    "j2d",
    "jal_cal",
    "jalaali_month_length",
    "jalaali_to_datetime",
    "jalaali_to_gregorian",
    "jalaali_week",
    "to_gregorian",
    "to_jalaali",
]
