"""Core catalog operations."""

from .catalog import XCStringsCatalog
from .reader import XCStringsReader
from .stats import XCStringsStatsCalculator
from .writer import XCStringsWriter

__all__ = [
    "XCStringsCatalog",
    "XCStringsReader",
    "XCStringsStatsCalculator",
    "XCStringsWriter",
]
