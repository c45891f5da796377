"""Shared test fixtures and helpers."""

from pathlib import Path

import pytest

from codemood.core.models import FileAnalysisResult, MetricsRecord, Mood, MoodVerdict


def make_metrics(**overrides) -> MetricsRecord:
    """Create a MetricsRecord with zero defaults for every count.

    Args:
        **overrides: Any fields to override from defaults.

    Returns:
        MetricsRecord built from the defaults plus overrides.
    """
    defaults = {
        "filename": "test.js",
        "total_lines": 1,
        "code_lines": 0,
        "comment_lines": 0,
        "blank_lines": 0,
        "avg_line_length": 0,
        "longest_line": 0,
        "shortest_non_empty_line": 0,
        "exclamation_marks": 0,
        "question_marks": 0,
        "positive_words": 0,
        "negative_words": 0,
        "stress_words": 0,
        "todo_count": 0,
        "fixme_count": 0,
        "hack_count": 0,
        "function_count": 0,
        "variable_declarations": 0,
        "nesting_depth": 0,
        "has_tests": False,
    }
    defaults.update(overrides)
    return MetricsRecord(**defaults)


def make_verdict(mood: Mood, score: int = 50) -> MoodVerdict:
    """Create a MoodVerdict whose raw score equals its reported score."""
    return MoodVerdict(mood=mood, score=score, raw_score=score)


def make_result(mood: Mood, score: int, **metric_overrides) -> FileAnalysisResult:
    """Create a FileAnalysisResult with the given mood, score and metrics."""
    metrics = make_metrics(**metric_overrides)
    return FileAnalysisResult(path=metrics.filename, metrics=metrics, verdict=make_verdict(mood, score))


ZEN_SOURCE = """/**
 * Adds two numbers.
 */
function add(a, b) {
  return a + b;
}"""

CHAOTIC_SOURCE = """// HACK: urgent fix before the deadline!!
var data = load();
// TODO: FIXME
"""


@pytest.fixture
def zen_file(tmp_path: Path) -> Path:
    """A small, documented JavaScript file that classifies as zen."""
    path = tmp_path / "zen.js"
    path.write_text(ZEN_SOURCE)
    return path


@pytest.fixture
def chaotic_file(tmp_path: Path) -> Path:
    """A stressed, hack-ridden JavaScript file that classifies as chaotic."""
    path = tmp_path / "chaotic.js"
    path.write_text(CHAOTIC_SOURCE)
    return path
