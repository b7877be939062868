"""Reading, validating and writing .xcstrings files."""

from .parser import XCStringsParser
from .serializer import XCStringsSerializer
from .file_handler import XCStringsFileHandler

__all__ = ["XCStringsParser", "XCStringsSerializer", "XCStringsFileHandler"]
