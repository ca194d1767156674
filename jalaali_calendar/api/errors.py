"""Exceptions raised by the Jalaali conversion helpers."""
from __future__ import annotations

__all__ = [
    "BreaksTableError",
    "InvalidDateError",
    "InvalidJalaaliYearError",
    "JalaaliError",
    "MissingArgumentError",
]


class JalaaliError(Exception):
    """Base error."""


class InvalidJalaaliYearError(JalaaliError, ValueError):
    """Raised when a Jalaali year falls outside the break-point table."""

    def __init__(self, year: int) -> None:
        super().__init__(f"Invalid Jalaali year {year}")
        self.year = year


class MissingArgumentError(JalaaliError, TypeError):
    """Raised when a conversion is called without all calendar fields."""


class BreaksTableError(JalaaliError, RuntimeError):
    """Raised when the break-point table is empty."""


class InvalidDateError(JalaaliError, ValueError):
    """Raised when a month or day is outside its calendar bounds."""
