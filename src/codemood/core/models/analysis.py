"""Per-file and aggregate analysis results."""

from pydantic import BaseModel, ConfigDict, Field

from codemood.core.models.metrics import MetricsRecord
from codemood.core.models.mood import Mood, MoodVerdict


class FileAnalysisResult(BaseModel):
    """Everything known about one analyzed file."""

    model_config = ConfigDict(frozen=True)

    path: str
    metrics: MetricsRecord
    verdict: MoodVerdict
    suggestions: list[str] = Field(default_factory=list)


class MetricTotals(BaseModel):
    """Field-wise sums of the metrics that are meaningful across files."""

    model_config = ConfigDict(frozen=True)

    total_lines: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    positive_words: int = 0
    negative_words: int = 0
    stress_words: int = 0
    todo_count: int = 0
    fixme_count: int = 0
    hack_count: int = 0
    function_count: int = 0


class AggregateMood(BaseModel):
    """Reduction of many file results into a codebase-level mood."""

    model_config = ConfigDict(frozen=True)

    file_count: int = Field(ge=1)
    totals: MetricTotals
    average_score: int = Field(ge=0, le=100)
    dominant_mood: Mood
    mood_counts: dict[Mood, int] = Field(description="Tally in first-seen order")

    def distribution(self) -> list[tuple[Mood, int]]:
        """Moods by descending count, ties kept in first-seen order."""
        return sorted(self.mood_counts.items(), key=lambda item: item[1], reverse=True)


class DirectoryAnalysis(BaseModel):
    """Results of scanning one directory tree."""

    root: str
    results: list[FileAnalysisResult] = Field(default_factory=list)
    aggregate: AggregateMood | None = None
