"""Map raw Garmin daily summaries to a biometric snapshot."""

from typing import Any

from soundtherapy.schemas.biometrics import NEUTRAL_SNAPSHOT, BiometricSnapshot

# Steps that count as a fully active day (activity_level 100).
STEPS_FOR_FULL_ACTIVITY = 15_000


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def _first(*values: float | None) -> float | None:
    return next((v for v in values if v is not None), None)


def _positive(value: float | None) -> float | None:
    # Garmin reports -1 / -2 for "not enough data" in stress fields
    return value if value is not None and value >= 0 else None


def map_biometrics(
    stats: dict[str, Any],
    sleep: dict[str, Any] | None = None,
    stress: dict[str, Any] | None = None,
) -> BiometricSnapshot:
    """Build a BiometricSnapshot from raw Garmin API responses.

    Missing fields fall back to the neutral reading.
    """
    heart_rate = _first(
        _safe_float(stats.get("averageHeartRate")),
        _safe_float(stats.get("restingHeartRate")),
    )

    stress_level = _positive(_safe_float(stats.get("averageStressLevel")))
    if stress_level is None and stress:
        stress_level = _positive(
            _first(
                _safe_float(stress.get("avgStressLevel")),
                _safe_float(stress.get("overallStressLevel")),
            )
        )

    sleep_quality = None
    if sleep:
        daily_sleep = sleep.get("dailySleepDTO") or sleep
        sleep_quality = _safe_float(
            (daily_sleep.get("sleepScores") or {}).get("overall", {}).get("value")
        )

    activity_level = None
    steps = _safe_float(stats.get("totalSteps"))
    if steps is not None:
        activity_level = min(100.0, steps / STEPS_FOR_FULL_ACTIVITY * 100)

    return BiometricSnapshot(
        heart_rate=_first(heart_rate, NEUTRAL_SNAPSHOT.heart_rate),
        stress_level=_first(stress_level, NEUTRAL_SNAPSHOT.stress_level),
        sleep_quality=_first(sleep_quality, NEUTRAL_SNAPSHOT.sleep_quality),
        activity_level=_first(activity_level, NEUTRAL_SNAPSHOT.activity_level),
    )
