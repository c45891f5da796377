"""Codebase-level reduction over per-file mood results."""

from collections import Counter
from collections.abc import Sequence

from codemood.core.metrics_collector import round_half_up
from codemood.core.models import AggregateMood, FileAnalysisResult, MetricTotals

TOTALLED_FIELDS = set(MetricTotals.model_fields)


def aggregate(results: Sequence[FileAnalysisResult]) -> AggregateMood:
    """Combine file results into totals, an average score and a dominant mood.

    The dominant mood is the most frequent one; when counts tie, the mood that was
    seen first in ``results`` wins.

    Args:
        results: Per-file results in discovery order

    Returns:
        AggregateMood for the whole set

    Raises:
        ValueError: If results is empty.
    """
    if not results:
        raise ValueError("Cannot aggregate an empty set of results")

    totals: Counter[str] = Counter()
    for result in results:
        totals.update(result.metrics.model_dump(include=TOTALLED_FIELDS))

    total_score = sum(result.verdict.score for result in results)
    mood_counts = Counter(result.verdict.mood for result in results)

    # max() keeps the first of equal counts, and Counter keeps first-seen order.
    dominant_mood = max(mood_counts, key=lambda mood: mood_counts[mood])

    return AggregateMood(
        file_count=len(results),
        totals=MetricTotals(**totals),
        average_score=round_half_up(total_score / len(results)),
        dominant_mood=dominant_mood,
        mood_counts=dict(mood_counts),
    )
