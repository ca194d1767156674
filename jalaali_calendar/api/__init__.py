"""Conversion helpers exposed by the Jalaali calendar package."""

from . import converter, errors

__all__ = [
    "converter",
    "errors",
]
