"""Data models for query, statistics and batch results.

Every result serializes to the camelCase JSON shape both front ends print.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_jsonable(value: Any) -> Any:
    if isinstance(value, ResultModel):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


class ResultModel:
    """Mixin giving dataclass results a JSON-ready ``to_dict``."""

    def to_dict(self) -> Dict[str, Any]:
        return {_camel(f.name): to_jsonable(getattr(self, f.name)) for f in fields(self)}


@dataclass
class KeyInfo(ResultModel):
    key: str
    comment: Optional[str]
    extraction_state: Optional[str]
    languages: List[str]


@dataclass
class TranslationInfo(ResultModel):
    key: str
    language: str
    value: Optional[str]
    state: Optional[str]
    has_variations: bool


@dataclass
class CoverageInfo(ResultModel):
    key: str
    translated_languages: List[str]
    missing_languages: List[str]
    coverage_percent: float


@dataclass
class LanguageStats(ResultModel):
    translated: int
    untranslated: int
    total: int
    coverage_percent: float

    @property
    def is_complete(self) -> bool:
        return self.coverage_percent >= 100


@dataclass
class StatsInfo(ResultModel):
    total_keys: int
    source_language: str
    languages: List[str]
    coverage_by_language: Dict[str, LanguageStats]


@dataclass
class CompactStatsInfo(ResultModel):
    """Stats trimmed to the languages that still need work."""

    total_keys: int
    source_language: str
    language_count: int
    complete_count: int
    all_complete: bool
    incomplete_languages: Dict[str, LanguageStats]


@dataclass
class FileCoverageSummary(ResultModel):
    file: str
    total_keys: int
    languages: Dict[str, float]  # lang -> coveragePercent


@dataclass
class AggregatedCoverage(ResultModel):
    total_files: int
    total_keys: int
    average_coverage_by_language: Dict[str, float]


@dataclass
class BatchCoverageSummary(ResultModel):
    files: List[FileCoverageSummary]
    aggregated: AggregatedCoverage


@dataclass
class CompactFileCoverage(ResultModel):
    file: str
    total_keys: int
    complete_count: int
    all_complete: bool
    incomplete_languages: Dict[str, float]


@dataclass
class CompactAggregatedCoverage(ResultModel):
    total_files: int
    total_keys: int
    complete_count: int
    all_complete: bool
    incomplete_languages: Dict[str, float]


@dataclass
class CompactBatchCoverageSummary(ResultModel):
    files: List[CompactFileCoverage]
    aggregated: CompactAggregatedCoverage


@dataclass
class BatchCheckKeysResult(ResultModel):
    results: Dict[str, bool]
    existing_keys: List[str]
    missing_keys: List[str]

    @classmethod
    def from_results(cls, results: Dict[str, bool]) -> "BatchCheckKeysResult":
        return cls(
            results=results,
            existing_keys=sorted(k for k, exists in results.items() if exists),
            missing_keys=sorted(k for k, exists in results.items() if not exists),
        )


@dataclass
class BatchTranslationEntry(ResultModel):
    """One key and its language -> value pairs in a batch write."""

    key: str
    translations: Dict[str, str]


@dataclass
class BatchFailure(ResultModel):
    key: str
    error: str


@dataclass
class BatchWriteResult(ResultModel):
    succeeded: List[str] = field(default_factory=list)
    failed: List[BatchFailure] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["successCount"] = self.success_count
        data["failedCount"] = self.failed_count
        return data


@dataclass
class StaleKeysResult(ResultModel):
    stale_keys: List[str]
    count: int
    note: str


@dataclass
class FileStaleKeys(ResultModel):
    file: str
    stale_keys: List[str]
    count: int


@dataclass
class BatchStaleKeysResult(ResultModel):
    files: List[FileStaleKeys]
    total_stale_keys: int
    note: str
