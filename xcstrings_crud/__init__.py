"""CRUD operations on Xcode .xcstrings localization catalogs."""

from .core import XCStringsCatalog
from .errors import XCStringsError

__version__ = "0.1.0"

__all__ = ["XCStringsCatalog", "XCStringsError", "__version__"]
