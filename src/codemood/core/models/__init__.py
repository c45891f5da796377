"""Models package for codemood.

Re-exports all model types from submodules for convenience.
"""

from codemood.core.models.analysis import (
    AggregateMood,
    DirectoryAnalysis,
    FileAnalysisResult,
    MetricTotals,
)
from codemood.core.models.metrics import MetricsRecord
from codemood.core.models.mood import (
    MOOD_REGISTRY,
    Mood,
    MoodProfile,
    MoodVerdict,
    get_mood_profile,
)

__all__ = [
    "AggregateMood",
    "DirectoryAnalysis",
    "FileAnalysisResult",
    "MetricTotals",
    "MetricsRecord",
    "MOOD_REGISTRY",
    "Mood",
    "MoodProfile",
    "MoodVerdict",
    "get_mood_profile",
]
