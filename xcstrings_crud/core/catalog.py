"""Facade tying persistence, queries, mutations and stats together.

Each public method is one self-contained unit: load the file, compute, and
save when the operation mutates. No document is kept between calls, so
every call sees what is on disk right now. Two concurrent writers to the
same path can still overwrite each other's changes; there is no locking.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..config import config
from ..errors import XCStringsError
from ..models.string_entry import XCStringsFile
from ..models.results import (
    BatchCheckKeysResult,
    BatchCoverageSummary,
    BatchFailure,
    BatchStaleKeysResult,
    BatchTranslationEntry,
    BatchWriteResult,
    CompactBatchCoverageSummary,
    CompactStatsInfo,
    CoverageInfo,
    FileStaleKeys,
    KeyInfo,
    LanguageStats,
    StaleKeysResult,
    StatsInfo,
    TranslationInfo,
)
from ..persistence.file_handler import XCStringsFileHandler
from .reader import XCStringsReader
from .stats import (
    XCStringsStatsCalculator,
    aggregate_coverage,
    aggregate_stale_keys,
    compact_batch_coverage,
)
from .writer import XCStringsWriter

logger = logging.getLogger(__name__)


class XCStringsCatalog:
    """All operations on one .xcstrings path."""

    def __init__(self, path: str):
        self.path = str(path)
        self.file_handler = XCStringsFileHandler(self.path)

    # File operations

    def load(self) -> XCStringsFile:
        return self.file_handler.load()

    def save(self, xcstrings: XCStringsFile) -> None:
        self.file_handler.save(xcstrings)

    def _reader(self) -> XCStringsReader:
        return XCStringsReader(self.load())

    def _stats(self) -> XCStringsStatsCalculator:
        return XCStringsStatsCalculator(self.load())

    def _apply(self, mutation: Callable[[XCStringsFile], XCStringsFile]) -> None:
        self.save(mutation(self.load()))

    @classmethod
    def create_file(
        cls,
        path: str,
        source_language: Optional[str] = None,
        overwrite: bool = False,
    ) -> "XCStringsCatalog":
        """Create an empty catalog on disk and return a facade for it."""
        catalog = cls(path)
        catalog.file_handler.create(source_language or config.source_language, overwrite=overwrite)
        return catalog

    # Read operations

    def list_keys(self) -> List[str]:
        return self._reader().list_keys()

    def list_languages(self) -> List[str]:
        return self._reader().list_languages()

    def list_untranslated(self, language: str) -> List[str]:
        return self._reader().list_untranslated(language)

    def list_stale_keys(self) -> StaleKeysResult:
        return self._stats().list_stale_keys()

    def get_source_language(self) -> str:
        return self._reader().get_source_language()

    def get_key(self, key: str) -> KeyInfo:
        return self._reader().get_key(key)

    def get_translation(
        self, key: str, language: Optional[str] = None
    ) -> Dict[str, TranslationInfo]:
        return self._reader().get_translation(key, language)

    def check_key(self, key: str, language: Optional[str] = None) -> bool:
        return self._reader().check_key(key, language)

    def check_keys(self, keys: List[str], language: Optional[str] = None) -> BatchCheckKeysResult:
        return self._reader().check_keys(keys, language)

    def check_coverage(self, key: str) -> CoverageInfo:
        return self._reader().check_coverage(key)

    # Stats operations

    def get_stats(self) -> StatsInfo:
        return self._stats().get_stats()

    def get_compact_stats(self) -> CompactStatsInfo:
        return self._stats().get_compact_stats()

    def get_progress(self, language: str) -> LanguageStats:
        return self._stats().get_progress(language)

    @classmethod
    def get_batch_coverage(cls, paths: Iterable[str]) -> BatchCoverageSummary:
        """Coverage of several files; the first file that fails to load aborts the call."""
        summaries = [
            XCStringsStatsCalculator(cls(path).load()).get_file_coverage_summary(str(path))
            for path in paths
        ]
        return aggregate_coverage(summaries)

    @classmethod
    def get_compact_batch_coverage(cls, paths: Iterable[str]) -> CompactBatchCoverageSummary:
        return compact_batch_coverage(cls.get_batch_coverage(paths))

    @classmethod
    def get_batch_stale_keys(cls, paths: Iterable[str]) -> BatchStaleKeysResult:
        per_file = []
        for path in paths:
            stale = XCStringsReader(cls(path).load()).list_stale_keys()
            per_file.append(FileStaleKeys(file=str(path), stale_keys=stale, count=len(stale)))
        return aggregate_stale_keys(per_file)

    # Write operations

    def add_translation(
        self, key: str, language: str, value: str, allow_overwrite: bool = False
    ) -> None:
        self._apply(
            lambda doc: XCStringsWriter.add_translation(doc, key, language, value, allow_overwrite)
        )
        logger.info("Added '%s' [%s] in %s", key, language, self.path)

    def add_translations(
        self, key: str, translations: Dict[str, str], allow_overwrite: bool = False
    ) -> None:
        self._apply(
            lambda doc: XCStringsWriter.add_translations(doc, key, translations, allow_overwrite)
        )
        logger.info("Added '%s' [%s] in %s", key, ", ".join(sorted(translations)), self.path)

    def update_translation(self, key: str, language: str, value: str) -> None:
        self._apply(lambda doc: XCStringsWriter.update_translation(doc, key, language, value))
        logger.info("Updated '%s' [%s] in %s", key, language, self.path)

    def update_translations(self, key: str, translations: Dict[str, str]) -> None:
        self._apply(lambda doc: XCStringsWriter.update_translations(doc, key, translations))
        logger.info("Updated '%s' [%s] in %s", key, ", ".join(sorted(translations)), self.path)

    def upsert_translation(self, key: str, language: str, value: str) -> None:
        self._apply(lambda doc: XCStringsWriter.upsert_translation(doc, key, language, value))
        logger.info("Upserted '%s' [%s] in %s", key, language, self.path)

    def rename_key(self, old_key: str, new_key: str) -> None:
        self._apply(lambda doc: XCStringsWriter.rename_key(doc, old_key, new_key))
        logger.info("Renamed '%s' to '%s' in %s", old_key, new_key, self.path)

    # Delete operations

    def delete_key(self, key: str) -> None:
        self._apply(lambda doc: XCStringsWriter.delete_key(doc, key))
        logger.info("Deleted key '%s' from %s", key, self.path)

    def delete_translation(self, key: str, language: str) -> None:
        self._apply(lambda doc: XCStringsWriter.delete_translation(doc, key, language))
        logger.info("Deleted '%s' [%s] from %s", key, language, self.path)

    def delete_translations(self, key: str, languages: List[str]) -> None:
        self._apply(lambda doc: XCStringsWriter.delete_translations(doc, key, languages))
        logger.info("Deleted '%s' [%s] from %s", key, ", ".join(sorted(languages)), self.path)

    # Batch operations

    def add_translations_batch(
        self, entries: List[BatchTranslationEntry], allow_overwrite: bool = False
    ) -> BatchWriteResult:
        """Add translations for many keys; a failing entry is recorded and skipped."""
        return self._apply_batch(
            entries,
            lambda doc, entry: XCStringsWriter.add_translations(
                doc, entry.key, entry.translations, allow_overwrite
            ),
        )

    def update_translations_batch(self, entries: List[BatchTranslationEntry]) -> BatchWriteResult:
        """Update translations for many keys; a failing entry is recorded and skipped."""
        return self._apply_batch(
            entries,
            lambda doc, entry: XCStringsWriter.update_translations(
                doc, entry.key, entry.translations
            ),
        )

    def _apply_batch(
        self,
        entries: List[BatchTranslationEntry],
        mutation: Callable[[XCStringsFile, BatchTranslationEntry], XCStringsFile],
    ) -> BatchWriteResult:
        xcstrings = self.load()
        result = BatchWriteResult()

        for entry in entries:
            try:
                xcstrings = mutation(xcstrings, entry)
            except XCStringsError as e:
                logger.info("Batch entry '%s' failed: %s", entry.key, e)
                result.failed.append(BatchFailure(key=entry.key, error=str(e)))
            else:
                result.succeeded.append(entry.key)

        if result.succeeded:
            self.save(xcstrings)
        logger.info(
            "Batch on %s: %d succeeded, %d failed",
            self.path, result.success_count, result.failed_count,
        )
        return result
