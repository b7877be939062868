"""Data models for xcstrings catalogs and operation results."""

from .string_entry import StringUnit, Variations, Localization, StringEntry, XCStringsFile
from .results import (
    AggregatedCoverage,
    BatchCheckKeysResult,
    BatchCoverageSummary,
    BatchFailure,
    BatchStaleKeysResult,
    BatchTranslationEntry,
    BatchWriteResult,
    CompactAggregatedCoverage,
    CompactBatchCoverageSummary,
    CompactFileCoverage,
    CompactStatsInfo,
    CoverageInfo,
    FileCoverageSummary,
    FileStaleKeys,
    KeyInfo,
    LanguageStats,
    StaleKeysResult,
    StatsInfo,
    TranslationInfo,
)

__all__ = [
    "StringUnit",
    "Variations",
    "Localization",
    "StringEntry",
    "XCStringsFile",
    "AggregatedCoverage",
    "BatchCheckKeysResult",
    "BatchCoverageSummary",
    "BatchFailure",
    "BatchStaleKeysResult",
    "BatchTranslationEntry",
    "BatchWriteResult",
    "CompactAggregatedCoverage",
    "CompactBatchCoverageSummary",
    "CompactFileCoverage",
    "CompactStatsInfo",
    "CoverageInfo",
    "FileCoverageSummary",
    "FileStaleKeys",
    "KeyInfo",
    "LanguageStats",
    "StaleKeysResult",
    "StatsInfo",
    "TranslationInfo",
]
