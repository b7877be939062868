"""Coverage and progress statistics for one or many catalogs."""

from typing import Dict, List

from ..errors import LanguageNotFound
from ..models.string_entry import XCStringsFile
from ..models.results import (
    AggregatedCoverage,
    BatchCoverageSummary,
    BatchStaleKeysResult,
    CompactAggregatedCoverage,
    CompactBatchCoverageSummary,
    CompactFileCoverage,
    CompactStatsInfo,
    FileCoverageSummary,
    FileStaleKeys,
    LanguageStats,
    StaleKeysResult,
    StatsInfo,
)
from .reader import XCStringsReader

STALE_KEYS_NOTE = (
    "These keys are marked as 'stale' by Xcode, indicating they may no longer be "
    "used in source code. Please verify by searching for these keys in the module "
    "or project source code before deleting them."
)


class XCStringsStatsCalculator:
    """Per-language statistics for a single loaded catalog."""

    def __init__(self, xcstrings: XCStringsFile):
        self.xcstrings = xcstrings
        self.reader = XCStringsReader(xcstrings)

    def get_stats(self) -> StatsInfo:
        """Get overall statistics."""
        total = len(self.xcstrings.strings)
        languages = self.reader.list_languages()

        coverage: Dict[str, LanguageStats] = {}
        for lang in languages:
            translated = sum(
                1 for entry in self.xcstrings.strings.values()
                if entry.has_translation(lang)
            )
            coverage[lang] = LanguageStats(
                translated=translated,
                untranslated=total - translated,
                total=total,
                coverage_percent=translated / total * 100 if total else 0.0,
            )

        return StatsInfo(
            total_keys=total,
            source_language=self.xcstrings.source_language,
            languages=languages,
            coverage_by_language=coverage,
        )

    def get_progress(self, language: str) -> LanguageStats:
        """Get progress for a language present in the catalog."""
        stats = self.get_stats()
        if language not in stats.coverage_by_language:
            raise LanguageNotFound(language, "")
        return stats.coverage_by_language[language]

    def get_compact_stats(self) -> CompactStatsInfo:
        """Stats reduced to the languages below 100%."""
        stats = self.get_stats()
        incomplete = {
            lang: lang_stats
            for lang, lang_stats in stats.coverage_by_language.items()
            if not lang_stats.is_complete
        }
        return CompactStatsInfo(
            total_keys=stats.total_keys,
            source_language=stats.source_language,
            language_count=len(stats.languages),
            complete_count=len(stats.languages) - len(incomplete),
            all_complete=not incomplete,
            incomplete_languages=incomplete,
        )

    def get_file_coverage_summary(self, file: str) -> FileCoverageSummary:
        stats = self.get_stats()
        return FileCoverageSummary(
            file=file,
            total_keys=stats.total_keys,
            languages={
                lang: lang_stats.coverage_percent
                for lang, lang_stats in stats.coverage_by_language.items()
            },
        )

    def list_stale_keys(self) -> StaleKeysResult:
        stale = self.reader.list_stale_keys()
        return StaleKeysResult(stale_keys=stale, count=len(stale), note=STALE_KEYS_NOTE)


def aggregate_coverage(summaries: List[FileCoverageSummary]) -> BatchCoverageSummary:
    """Combine per-file summaries.

    A language's average is the plain mean over the files that contain it;
    files without the language do not count as zero.
    """
    per_language: Dict[str, List[float]] = {}
    for summary in summaries:
        for lang, percent in summary.languages.items():
            per_language.setdefault(lang, []).append(percent)

    averages = {
        lang: sum(values) / len(values)
        for lang, values in sorted(per_language.items())
    }

    return BatchCoverageSummary(
        files=summaries,
        aggregated=AggregatedCoverage(
            total_files=len(summaries),
            total_keys=sum(s.total_keys for s in summaries),
            average_coverage_by_language=averages,
        ),
    )


def compact_batch_coverage(summary: BatchCoverageSummary) -> CompactBatchCoverageSummary:
    """Drop every language at 100% from a batch summary."""
    files = []
    for file_summary in summary.files:
        incomplete = {
            lang: percent for lang, percent in file_summary.languages.items() if percent < 100
        }
        files.append(
            CompactFileCoverage(
                file=file_summary.file,
                total_keys=file_summary.total_keys,
                complete_count=len(file_summary.languages) - len(incomplete),
                all_complete=not incomplete,
                incomplete_languages=incomplete,
            )
        )

    averages = summary.aggregated.average_coverage_by_language
    incomplete_avg = {lang: percent for lang, percent in averages.items() if percent < 100}
    return CompactBatchCoverageSummary(
        files=files,
        aggregated=CompactAggregatedCoverage(
            total_files=summary.aggregated.total_files,
            total_keys=summary.aggregated.total_keys,
            complete_count=len(averages) - len(incomplete_avg),
            all_complete=not incomplete_avg,
            incomplete_languages=incomplete_avg,
        ),
    )


def aggregate_stale_keys(per_file: List[FileStaleKeys]) -> BatchStaleKeysResult:
    return BatchStaleKeysResult(
        files=per_file,
        total_stale_keys=sum(f.count for f in per_file),
        note=STALE_KEYS_NOTE,
    )
