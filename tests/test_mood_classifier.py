"""Tests for mood scoring and classification."""

import pytest
from conftest import make_metrics

from codemood.core.models import MOOD_REGISTRY, Mood
from codemood.core.mood_classifier import calculate_score, classify


def neutral_metrics(**overrides):
    """Metrics whose comment ratio (0.05) adds nothing, so the score starts at exactly 50."""
    defaults = {"total_lines": 105, "code_lines": 100, "comment_lines": 5}
    defaults.update(overrides)
    return make_metrics(**defaults)


class TestCalculateScore:
    """Tests for the unclamped score accumulation."""

    def test_calculate_score__starts_at_fifty(self) -> None:
        """Should return the base score when nothing adjusts it."""
        assert calculate_score(neutral_metrics()) == 50

    @pytest.mark.parametrize(
        ("comment_lines", "expected"),
        [(20, 65), (15, 55), (10, 55), (8, 50), (5, 50), (4, 40), (0, 40)],
    )
    def test_calculate_score__comment_ratio_bands(self, comment_lines: int, expected: int) -> None:
        """Should add 15 at 0.2, 5 at 0.1, nothing from 0.05 and subtract 10 below."""
        metrics = neutral_metrics(comment_lines=comment_lines)
        assert calculate_score(metrics) == expected

    def test_calculate_score__no_code_lines_uses_guard(self) -> None:
        """Should divide by one when there are no code lines."""
        metrics = make_metrics(total_lines=3, code_lines=0, comment_lines=3)
        assert calculate_score(metrics) == 65

    def test_calculate_score__weights_words_and_markers(self) -> None:
        """Should apply each vocabulary and marker weight."""
        metrics = neutral_metrics(
            positive_words=4,
            negative_words=1,
            stress_words=1,
            todo_count=1,
            fixme_count=1,
            hack_count=1,
        )
        assert calculate_score(metrics) == 50 + 20 - 8 - 10 - 3 - 5 - 7

    @pytest.mark.parametrize(("depth", "expected"), [(3, 50), (4, 45), (5, 45), (6, 35)])
    def test_calculate_score__nesting_penalty(self, depth: int, expected: int) -> None:
        """Should subtract 5 above depth 3 and 15 above depth 5."""
        assert calculate_score(neutral_metrics(nesting_depth=depth)) == expected

    @pytest.mark.parametrize(("length", "expected"), [(100, 50), (101, 45), (150, 45), (151, 40)])
    def test_calculate_score__long_line_penalty(self, length: int, expected: int) -> None:
        """Should subtract 5 above 100 characters and 10 above 150."""
        assert calculate_score(neutral_metrics(longest_line=length)) == expected

    def test_calculate_score__punctuation_penalty_is_strict(self) -> None:
        """Should only penalise densities above 0.5."""
        at_limit = make_metrics(total_lines=10, code_lines=10, comment_lines=1, exclamation_marks=5)
        above_limit = make_metrics(total_lines=10, code_lines=10, comment_lines=1, exclamation_marks=3, question_marks=3)

        assert calculate_score(at_limit) == 55
        assert calculate_score(above_limit) == 40

    def test_calculate_score__rewards_tests(self) -> None:
        """Should add 10 when test code is present."""
        assert calculate_score(neutral_metrics(has_tests=True)) == 60


class TestClassifyScoreBands:
    """Tests for score-based moods when no special mood applies."""

    @pytest.mark.parametrize(
        ("overrides", "expected_score", "expected_mood"),
        [
            ({"positive_words": 6}, 80, Mood.ECSTATIC),
            ({"positive_words": 5}, 75, Mood.HAPPY),
            ({"positive_words": 3}, 65, Mood.HAPPY),
            ({"positive_words": 2}, 60, Mood.CONTENT),
            ({"positive_words": 1}, 55, Mood.CONTENT),
            ({}, 50, Mood.NEUTRAL),
            ({"fixme_count": 1}, 45, Mood.NEUTRAL),
            ({"todo_count": 2}, 44, Mood.STRESSED),
            ({"todo_count": 5}, 35, Mood.STRESSED),
            ({"negative_words": 2}, 34, Mood.FRUSTRATED),
            ({"fixme_count": 5}, 25, Mood.FRUSTRATED),
            ({"negative_words": 2, "stress_words": 1}, 24, Mood.SAD),
        ],
    )
    def test_classify__maps_score_to_band(self, overrides: dict, expected_score: int, expected_mood: Mood) -> None:
        """Should pick the first band whose floor the score reaches."""
        verdict = classify(neutral_metrics(**overrides))

        assert verdict.score == expected_score
        assert verdict.mood == expected_mood
        assert not (verdict.is_zen or verdict.is_chaotic or verdict.is_mysterious)


class TestClassifySpecialMoods:
    """Tests for zen, chaotic and mysterious overrides."""

    def test_classify__positive_tested_code_is_cheerful(self) -> None:
        """Should score well-commented, tested, positive code above 50."""
        metrics = make_metrics(
            total_lines=50, code_lines=40, comment_lines=10, positive_words=5, nesting_depth=2, longest_line=80, has_tests=True
        )
        verdict = classify(metrics)

        assert verdict.mood in {Mood.HAPPY, Mood.ECSTATIC, Mood.CONTENT, Mood.ZEN}
        assert verdict.score > 50

    def test_classify__negative_code_is_unhappy(self) -> None:
        """Should score negative, stressed, deeply nested code below 50."""
        metrics = make_metrics(
            total_lines=50,
            code_lines=48,
            comment_lines=2,
            negative_words=10,
            stress_words=5,
            todo_count=5,
            fixme_count=3,
            hack_count=3,
            nesting_depth=6,
            longest_line=200,
            exclamation_marks=20,
            question_marks=10,
        )
        verdict = classify(metrics)

        assert verdict.mood == Mood.CHAOTIC
        assert verdict.raw_score == -181
        assert verdict.score == 0

    def test_classify__well_balanced_code_is_zen(self) -> None:
        """Should return zen for documented, shallow, hack-free code scoring at least 60."""
        metrics = make_metrics(
            total_lines=100, code_lines=70, comment_lines=20, positive_words=2, nesting_depth=2, longest_line=80, has_tests=True
        )
        verdict = classify(metrics)

        assert verdict.mood == Mood.ZEN
        assert verdict.is_zen is True
        assert verdict.score == 85

    def test_classify__zen_needs_score_of_sixty(self) -> None:
        """Should fall back to the score band when zen conditions hold but the score is low."""
        metrics = neutral_metrics(comment_lines=20, negative_words=1)
        verdict = classify(metrics)

        assert verdict.is_zen is True
        assert verdict.score == 57
        assert verdict.mood == Mood.CONTENT

    def test_classify__hacks_rule_out_zen(self) -> None:
        """Should not flag zen when any hack is present."""
        verdict = classify(neutral_metrics(comment_lines=20, hack_count=1, positive_words=4))

        assert verdict.is_zen is False
        assert verdict.mood == Mood.HAPPY

    def test_classify__uncommented_long_file_is_mysterious(self) -> None:
        """Should return mysterious for long, uncommented code."""
        metrics = make_metrics(total_lines=100, code_lines=99, nesting_depth=3, longest_line=100)
        verdict = classify(metrics)

        assert verdict.mood == Mood.MYSTERIOUS
        assert verdict.is_mysterious is True
        assert verdict.score == 40

    def test_classify__mysterious_ignores_score(self) -> None:
        """Should return mysterious even for a high score."""
        verdict = classify(make_metrics(total_lines=60, code_lines=60, positive_words=10))

        assert verdict.score == 90
        assert verdict.mood == Mood.MYSTERIOUS

    def test_classify__fifty_lines_is_not_mysterious(self) -> None:
        """Should require more than 50 lines for mysterious."""
        verdict = classify(make_metrics(total_lines=50, code_lines=50))

        assert verdict.is_mysterious is False
        assert verdict.mood == Mood.STRESSED

    def test_classify__chaotic_takes_priority_over_mysterious(self) -> None:
        """Should check chaotic before mysterious."""
        verdict = classify(make_metrics(total_lines=100, code_lines=100, nesting_depth=6))

        assert verdict.is_mysterious is True
        assert verdict.mood == Mood.CHAOTIC
        assert verdict.score == 25

    def test_classify__chaotic_needs_low_score(self) -> None:
        """Should keep the score band when chaotic conditions hold at 40 or more."""
        verdict = classify(neutral_metrics(exclamation_marks=42))

        assert verdict.is_chaotic is True
        assert verdict.mood == Mood.NEUTRAL


class TestClassifyClamping:
    """Tests for score clamping."""

    def test_classify__clamps_to_zero(self) -> None:
        """Should never report a negative score."""
        metrics = make_metrics(
            total_lines=50,
            code_lines=50,
            negative_words=100,
            stress_words=50,
            todo_count=20,
            fixme_count=20,
            hack_count=20,
            nesting_depth=10,
            longest_line=300,
            exclamation_marks=100,
            question_marks=100,
        )
        verdict = classify(metrics)

        assert verdict.score == 0
        assert verdict.raw_score < 0

    def test_classify__clamps_to_hundred(self) -> None:
        """Should cap the score at 100 while choosing the mood from the raw score."""
        verdict = classify(make_metrics(total_lines=10, code_lines=10, positive_words=20))

        assert verdict.raw_score == 140
        assert verdict.score == 100
        assert verdict.mood == Mood.ECSTATIC


class TestVerdictPresentation:
    """Tests for emoji and description lookups."""

    @pytest.mark.parametrize("mood", list(Mood))
    def test_verdict__uses_registry_entries(self, mood: Mood) -> None:
        """Should expose the registry emoji and description for every mood."""
        verdict = classify(neutral_metrics()).model_copy(update={"mood": mood})

        assert verdict.emoji == MOOD_REGISTRY[mood].emoji
        assert verdict.description == MOOD_REGISTRY[mood].description
