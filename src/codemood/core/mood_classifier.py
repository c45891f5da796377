"""Score-based mood classification of collected metrics."""

from codemood.core.models import MetricsRecord, Mood, MoodVerdict

BASE_SCORE = 50

POSITIVE_WORD_WEIGHT = 5
NEGATIVE_WORD_WEIGHT = 8
STRESS_WORD_WEIGHT = 10
TODO_WEIGHT = 3
FIXME_WEIGHT = 5
HACK_WEIGHT = 7
TESTS_BONUS = 10

ZEN_MIN_COMMENT_RATIO = 0.15
ZEN_MAX_NESTING = 3
ZEN_MIN_SCORE = 60
CHAOTIC_MIN_NESTING = 5
CHAOTIC_MIN_PUNCTUATION = 0.3
CHAOTIC_MAX_SCORE = 40
MYSTERIOUS_MAX_COMMENT_RATIO = 0.02
MYSTERIOUS_MIN_LINES = 50

# Checked top to bottom after the special moods; the first floor reached wins.
SCORE_BANDS: tuple[tuple[int, Mood], ...] = (
    (80, Mood.ECSTATIC),
    (65, Mood.HAPPY),
    (55, Mood.CONTENT),
    (45, Mood.NEUTRAL),
    (35, Mood.STRESSED),
    (25, Mood.FRUSTRATED),
)


def _comment_adjustment(comment_ratio: float) -> int:
    if comment_ratio >= 0.2:
        return 15
    if comment_ratio >= 0.1:
        return 5
    if comment_ratio < 0.05:
        return -10
    return 0


def _nesting_adjustment(nesting_depth: int) -> int:
    if nesting_depth > 5:
        return -15
    if nesting_depth > 3:
        return -5
    return 0


def _line_length_adjustment(longest_line: int) -> int:
    if longest_line > 150:
        return -10
    if longest_line > 100:
        return -5
    return 0


def calculate_score(metrics: MetricsRecord) -> int:
    """Accumulate the unclamped mood score for a metrics record.

    The score starts at 50 and moves with comment density, vocabulary, work markers,
    nesting, line length, punctuation and the presence of tests.
    """
    score = BASE_SCORE
    score += _comment_adjustment(metrics.comment_ratio)

    score += metrics.positive_words * POSITIVE_WORD_WEIGHT
    score -= metrics.negative_words * NEGATIVE_WORD_WEIGHT
    score -= metrics.stress_words * STRESS_WORD_WEIGHT

    score -= metrics.todo_count * TODO_WEIGHT
    score -= metrics.fixme_count * FIXME_WEIGHT
    score -= metrics.hack_count * HACK_WEIGHT

    score += _nesting_adjustment(metrics.nesting_depth)
    score += _line_length_adjustment(metrics.longest_line)

    if metrics.punctuation_density > 0.5:
        score -= 15

    if metrics.has_tests:
        score += TESTS_BONUS

    return score


def _mood_for_score(score: int) -> Mood:
    for floor, mood in SCORE_BANDS:
        if score >= floor:
            return mood
    return Mood.SAD


def classify(metrics: MetricsRecord) -> MoodVerdict:
    """Classify a metrics record into a mood.

    Special moods take priority over the score bands: zen needs a well-commented,
    shallow, hack-free file scoring at least 60; chaotic needs deep nesting or heavy
    punctuation with a score under 40; mysterious is any long, nearly uncommented file.
    All comparisons use the unclamped score.

    Args:
        metrics: Metrics produced by the collector

    Returns:
        MoodVerdict with the mood, clamped score and special-mood flags
    """
    raw_score = calculate_score(metrics)
    comment_ratio = metrics.comment_ratio
    punctuation_density = metrics.punctuation_density

    is_zen = (
        comment_ratio >= ZEN_MIN_COMMENT_RATIO
        and metrics.nesting_depth <= ZEN_MAX_NESTING
        and metrics.hack_count == 0
    )
    is_chaotic = metrics.nesting_depth > CHAOTIC_MIN_NESTING or punctuation_density > CHAOTIC_MIN_PUNCTUATION
    is_mysterious = comment_ratio < MYSTERIOUS_MAX_COMMENT_RATIO and metrics.total_lines > MYSTERIOUS_MIN_LINES

    if is_zen and raw_score >= ZEN_MIN_SCORE:
        mood = Mood.ZEN
    elif is_chaotic and raw_score < CHAOTIC_MAX_SCORE:
        mood = Mood.CHAOTIC
    elif is_mysterious:
        mood = Mood.MYSTERIOUS
    else:
        mood = _mood_for_score(raw_score)

    return MoodVerdict(
        mood=mood,
        score=max(0, min(100, raw_score)),
        raw_score=raw_score,
        is_zen=is_zen,
        is_chaotic=is_chaotic,
        is_mysterious=is_mysterious,
    )
