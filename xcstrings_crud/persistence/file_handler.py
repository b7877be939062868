"""File I/O for .xcstrings catalogs: load, atomic save, create."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..config import config
from ..errors import FileAlreadyExists, WriteError
from ..models.string_entry import XCStringsFile
from .parser import XCStringsParser
from .serializer import XCStringsSerializer

logger = logging.getLogger(__name__)


class XCStringsFileHandler:
    """Loads and saves one catalog path.

    Saves go through a temporary file in the target directory that is then
    renamed over the target, so readers see either the old or the new file.
    """

    def __init__(
        self,
        path: str,
        parser: Optional[XCStringsParser] = None,
        serializer: Optional[XCStringsSerializer] = None,
    ):
        self.path = str(path)
        self.parser = parser or XCStringsParser()
        self.serializer = serializer or XCStringsSerializer()

    def load(self) -> XCStringsFile:
        """Load the catalog, raising FileNotFound or InvalidFileFormat."""
        logger.debug("Loading %s", self.path)
        return self.parser.parse(self.path)

    def save(self, xcstrings: XCStringsFile) -> None:
        """Serialize and atomically replace the file on disk."""
        try:
            content = self.serializer.to_string(xcstrings)
        except (TypeError, ValueError) as e:
            raise WriteError(self.path, str(e)) from e

        self._atomic_write(content)
        logger.debug("Saved %s (%d keys)", self.path, len(xcstrings.strings))

    def create(self, source_language: str, overwrite: bool = False) -> XCStringsFile:
        """Write a fresh catalog with no strings and return it."""
        if not overwrite and Path(self.path).exists():
            raise FileAlreadyExists(self.path)

        xcstrings = XCStringsFile(
            source_language=source_language,
            strings={},
            version=config.version,
        )
        self.save(xcstrings)
        logger.info("Created %s with source language '%s'", self.path, source_language)
        return xcstrings

    def _atomic_write(self, content: str) -> None:
        path = Path(self.path)
        tmp_name = None
        try:
            # Keep permission bits of the file being replaced
            orig_mode = path.stat().st_mode & 0o777 if path.exists() else None
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tf:
                tmp_name = tf.name
                tf.write(content)
                tf.flush()
                os.fsync(tf.fileno())
            if orig_mode is not None:
                os.chmod(tmp_name, orig_mode)
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, ValueError) as e:
            raise WriteError(self.path, str(e)) from e
        finally:
            # Cleanup if temp file still exists
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
