"""Recommendation mapper: mood + biometrics -> soundscape descriptor.

The mapper is a pure function. Callers own the "current recommendation" and
pass it back in as `prior` on the next trigger.
"""

import logging
import math
from typing import TypeVar

from soundtherapy.schemas.biometrics import BiometricSnapshot
from soundtherapy.schemas.recommendation import IntensityMap, SoundRecommendation
from soundtherapy.therapy.predictor import ModelUnavailable, PredictiveModel
from soundtherapy.therapy.templates import DEFAULT_MOOD, resolve_template

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BLEND_WEIGHT = 0.25

# Binaural entrainment range; refined bands are kept inside it.
MIN_BEAT_HZ = 0.5
MAX_BEAT_HZ = 40.0


def clamp(value: float, low: float, high: float) -> float:
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def compute_intensity(biometrics: BiometricSnapshot) -> IntensityMap:
    """Rescale biometric readings to the three mix gains, clamped to [0, 1]."""
    return IntensityMap(
        bass=clamp(biometrics.stress_level / 100, 0.0, 1.0),
        treble=clamp(biometrics.activity_level / 100, 0.0, 1.0),
        nature=clamp(1 - biometrics.sleep_quality / 100, 0.0, 1.0),
    )


def blend_band(
    band: tuple[float, float],
    predicted: tuple[float, float],
    weight: float,
) -> tuple[float, float]:
    """Linearly blend each bound of `band` towards `predicted`.

    The result is ordered and kept within [MIN_BEAT_HZ, MAX_BEAT_HZ].
    """
    w = clamp(weight, 0.0, 1.0)
    low = (1 - w) * band[0] + w * predicted[0]
    high = (1 - w) * band[1] + w * predicted[1]
    if low > high:
        low, high = high, low
    return clamp(low, MIN_BEAT_HZ, MAX_BEAT_HZ), clamp(high, MIN_BEAT_HZ, MAX_BEAT_HZ)


def _override(value: T | None, base: T) -> T:
    return base if value is None else value


def recommend(
    mood: str,
    biometrics: BiometricSnapshot,
    prior: SoundRecommendation,
    model: PredictiveModel | None = None,
    *,
    blend_weight: float = DEFAULT_BLEND_WEIGHT,
) -> SoundRecommendation:
    """Build the next soundscape recommendation.

    Precedence, lowest first: `prior`, then the mood template's
    frequency_range / binaural_beat_type / noise_profile, then an
    intensity_map computed fresh from `biometrics`. When `model` is given,
    its predicted band is blended into frequency_range; any model failure
    is logged and the template-based result is returned unchanged.

    Never raises for unknown moods or model problems.
    """
    template, recognized = resolve_template(mood)
    if not recognized:
        logger.info("Unknown mood %r, using %s template", mood, DEFAULT_MOOD)

    frequency_range = _override(template.frequency_range, prior.frequency_range)
    binaural_beat_type = _override(template.binaural_beat_type, prior.binaural_beat_type)
    noise_profile = list(_override(template.noise_profile, prior.noise_profile))

    intensity_map = compute_intensity(biometrics)

    if model is not None:
        try:
            predicted = model.predict(biometrics.features())
            if len(predicted) != 2 or not all(math.isfinite(v) for v in predicted):
                raise ModelUnavailable(f"Invalid prediction: {predicted!r}")
            frequency_range = blend_band(
                frequency_range, (predicted[0], predicted[1]), blend_weight
            )
        except Exception as e:
            logger.warning("Model refinement skipped: %s", e)

    return SoundRecommendation(
        frequency_range=frequency_range,
        binaural_beat_type=binaural_beat_type,
        noise_profile=noise_profile,
        intensity_map=intensity_map,
    )
