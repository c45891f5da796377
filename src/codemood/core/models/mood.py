"""Mood definitions, registry, and verdict model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Mood(str, Enum):
    """The ten moods a source file can be in."""

    ECSTATIC = "ecstatic"
    HAPPY = "happy"
    CONTENT = "content"
    NEUTRAL = "neutral"
    STRESSED = "stressed"
    FRUSTRATED = "frustrated"
    SAD = "sad"
    ZEN = "zen"
    CHAOTIC = "chaotic"
    MYSTERIOUS = "mysterious"


class MoodProfile(BaseModel):
    """Static presentation data for a mood."""

    model_config = ConfigDict(frozen=True)

    mood: Mood
    emoji: str
    description: str
    summary: str


MOOD_REGISTRY: dict[Mood, MoodProfile] = {
    Mood.ECSTATIC: MoodProfile(
        mood=Mood.ECSTATIC,
        emoji="🎉",
        description="This code is absolutely thriving! The developer was clearly in a great mood.",
        summary="Code is absolutely thriving!",
    ),
    Mood.HAPPY: MoodProfile(
        mood=Mood.HAPPY,
        emoji="😊",
        description="Pleasant vibes here! The code seems well-maintained and loved.",
        summary="Pleasant vibes, well-maintained",
    ),
    Mood.CONTENT: MoodProfile(
        mood=Mood.CONTENT,
        emoji="🙂",
        description="Steady and stable. This code is doing its job without complaints.",
        summary="Steady and stable",
    ),
    Mood.NEUTRAL: MoodProfile(
        mood=Mood.NEUTRAL,
        emoji="😐",
        description="Neither happy nor sad. Just code being code.",
        summary="Neither happy nor sad",
    ),
    Mood.STRESSED: MoodProfile(
        mood=Mood.STRESSED,
        emoji="😰",
        description="Uh oh! This code might be under some pressure. Watch out for deadlines!",
        summary="Under pressure!",
    ),
    Mood.FRUSTRATED: MoodProfile(
        mood=Mood.FRUSTRATED,
        emoji="😤",
        description="Someone was having a rough day. Consider some code therapy.",
        summary="Someone had a rough day",
    ),
    Mood.SAD: MoodProfile(
        mood=Mood.SAD,
        emoji="😢",
        description="This code needs a hug. Maybe some refactoring would help?",
        summary="Needs some love",
    ),
    Mood.ZEN: MoodProfile(
        mood=Mood.ZEN,
        emoji="🧘",
        description="Perfectly balanced, as all code should be. Clean, documented, harmonious.",
        summary="Perfectly balanced",
    ),
    Mood.CHAOTIC: MoodProfile(
        mood=Mood.CHAOTIC,
        emoji="🌪️",
        description="Wild and unpredictable! This code lives life on the edge.",
        summary="Wild and unpredictable",
    ),
    Mood.MYSTERIOUS: MoodProfile(
        mood=Mood.MYSTERIOUS,
        emoji="🔮",
        description="Enigmatic code that keeps its secrets close. What does it really do?",
        summary="Keeps its secrets",
    ),
}


def get_mood_profile(mood: Mood) -> MoodProfile:
    """Get the registry entry for a mood.

    Args:
        mood: The mood to look up

    Returns:
        MoodProfile with emoji and descriptions
    """
    return MOOD_REGISTRY[mood]


class MoodVerdict(BaseModel):
    """Classification of a file's metrics into a mood."""

    model_config = ConfigDict(frozen=True)

    mood: Mood
    score: int = Field(ge=0, le=100, description="Accumulated score clamped to 0-100")
    raw_score: int = Field(description="Accumulated score before clamping, used for mood selection")
    is_zen: bool = False
    is_chaotic: bool = False
    is_mysterious: bool = False

    @property
    def emoji(self) -> str:
        """Emoji for the mood."""
        return MOOD_REGISTRY[self.mood].emoji

    @property
    def description(self) -> str:
        """One-sentence description for the mood."""
        return MOOD_REGISTRY[self.mood].description
