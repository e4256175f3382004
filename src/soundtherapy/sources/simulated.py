"""Simulated wearable producing a bounded random walk of readings."""

import logging
import random

from soundtherapy.schemas.biometrics import BiometricSnapshot
from soundtherapy.sources.base import BiometricSource

logger = logging.getLogger(__name__)

# field -> (low, high, max step per reading)
WALK_BOUNDS: dict[str, tuple[float, float, float]] = {
    "heart_rate": (50.0, 120.0, 4.0),
    "stress_level": (0.0, 100.0, 5.0),
    "sleep_quality": (0.0, 100.0, 2.0),
    "activity_level": (0.0, 100.0, 6.0),
}

RESTING_BASELINE = BiometricSnapshot(
    heart_rate=68.0, stress_level=40.0, sleep_quality=75.0, activity_level=20.0
)


class SimulatedSource(BiometricSource):
    """Stand-in wearable for demos and tests."""

    def __init__(
        self,
        seed: int | None = None,
        baseline: BiometricSnapshot = RESTING_BASELINE,
        fail_connect: bool = False,
    ) -> None:
        super().__init__()
        self._rng = random.Random(seed)
        self._current = baseline.model_dump()
        self._fail_connect = fail_connect

    @property
    def source_type(self) -> str:
        return "simulated"

    async def _open(self) -> bool:
        if self._fail_connect:
            logger.warning("Simulated wearable refused connection")
            return False
        logger.info("Simulated wearable connected")
        return True

    async def _read(self) -> BiometricSnapshot:
        for field, (low, high, step) in WALK_BOUNDS.items():
            value = self._current[field] + self._rng.uniform(-step, step)
            self._current[field] = round(max(low, min(high, value)), 1)
        return BiometricSnapshot(**self._current)
