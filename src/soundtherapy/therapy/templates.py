"""Base soundscape templates per mood."""

from dataclasses import dataclass

from soundtherapy.schemas.recommendation import BinauralBeatType


@dataclass(frozen=True)
class SoundTemplate:
    frequency_range: tuple[float, float] | None = None
    binaural_beat_type: BinauralBeatType | None = None
    noise_profile: tuple[str, ...] | None = None


DEFAULT_MOOD = "relaxation"

# Bands follow the canonical brainwave ranges: delta <4 Hz, theta 4-8 Hz, beta 12+ Hz.
MOOD_TEMPLATES: dict[str, SoundTemplate] = {
    "relaxation": SoundTemplate(
        frequency_range=(4.0, 8.0),
        binaural_beat_type="theta",
        noise_profile=("brown", "ocean"),
    ),
    "focus": SoundTemplate(
        frequency_range=(12.0, 20.0),
        binaural_beat_type="beta",
        noise_profile=("white", "stream"),
    ),
    "sleep": SoundTemplate(
        frequency_range=(0.5, 4.0),
        binaural_beat_type="delta",
        noise_profile=("pink", "rain"),
    ),
}


# Premium has no soundscape of its own yet.
MOOD_ALIASES: dict[str, str] = {"premium": "relaxation"}


def resolve_template(mood: str) -> tuple[SoundTemplate, bool]:
    """Return the template for `mood` and whether the mood was recognized.

    Unrecognized moods fall back to the relaxation template.
    """
    key = MOOD_ALIASES.get(mood, mood)
    if key in MOOD_TEMPLATES:
        return MOOD_TEMPLATES[key], True
    return MOOD_TEMPLATES[DEFAULT_MOOD], False
