"""Advice derived from metrics and the resulting mood."""

from codemood.core.models import MetricsRecord, Mood, MoodVerdict

ADD_COMMENTS = "💡 Consider adding more comments to explain your code's intent"
REDUCE_NESTING = "🔄 Deep nesting detected! Consider extracting some logic into separate functions"
FIX_HACKS = "🔧 You have {count} hack(s) in your code. Time for some cleanup?"
TACKLE_TODOS = "📝 Lots of TODOs piling up! Maybe tackle a few today?"
SHORTEN_LINES = "📏 Some lines are quite long. Consider breaking them up for readability"
PRAISE_ZEN = "✨ Your code is in a great state! Keep up the good work"
DEMYSTIFY = "🔮 Your code is shrouded in mystery. Future you will thank present you for comments!"
ADD_TESTS = "🧪 No tests detected! Consider adding some to ensure reliability"


def suggest(metrics: MetricsRecord, verdict: MoodVerdict) -> list[str]:
    """Build the suggestion list for an analyzed file.

    Each check is independent, and the output keeps the order of the checks below.
    """
    suggestions = []

    if metrics.comment_ratio < 0.1:
        suggestions.append(ADD_COMMENTS)

    if metrics.nesting_depth > 4:
        suggestions.append(REDUCE_NESTING)

    if metrics.hack_count > 0:
        suggestions.append(FIX_HACKS.format(count=metrics.hack_count))

    if metrics.todo_count > 3:
        suggestions.append(TACKLE_TODOS)

    if metrics.longest_line > 120:
        suggestions.append(SHORTEN_LINES)

    if verdict.mood == Mood.ZEN:
        suggestions.append(PRAISE_ZEN)

    if verdict.mood == Mood.MYSTERIOUS:
        suggestions.append(DEMYSTIFY)

    if not metrics.has_tests and metrics.function_count > 3:
        suggestions.append(ADD_TESTS)

    return suggestions
