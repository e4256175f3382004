"""Garmin BiometricSource: connects the client and reads today's summaries."""

import asyncio
import logging
from datetime import date
from typing import Any

from soundtherapy.schemas.biometrics import BiometricSnapshot
from soundtherapy.sources.base import BiometricSource
from soundtherapy.sources.garmin.client import GarminClient
from soundtherapy.sources.garmin.mappers import map_biometrics

logger = logging.getLogger(__name__)


class GarminSource(BiometricSource):
    """Reads biometrics from Garmin Connect daily summaries."""

    def __init__(self, client: GarminClient | None = None) -> None:
        super().__init__()
        self._client = client or GarminClient()

    @property
    def source_type(self) -> str:
        return "garmin"

    async def _open(self) -> bool:
        return await asyncio.to_thread(self._client.connect)

    async def _read(self) -> BiometricSnapshot:
        return await asyncio.to_thread(self._fetch_for_day, date.today())

    def _fetch_for_day(self, day: date) -> BiometricSnapshot:
        """Fetch the day's summaries and map them.

        Each API call is wrapped individually so partial data is still used.
        """
        stats = self._safe_call(self._client.get_stats, day) or {}
        sleep = self._safe_call(self._client.get_sleep_data, day)
        stress = None
        if stats.get("averageStressLevel") is None:
            stress = self._safe_call(self._client.get_stress_data, day)
        return map_biometrics(stats, sleep=sleep, stress=stress)

    @staticmethod
    def _safe_call(func: Any, *args: Any) -> Any:
        """Call a Garmin API method, returning None on failure."""
        try:
            return func(*args)
        except Exception:
            logger.debug(
                "Garmin API call %s failed", getattr(func, "__name__", func), exc_info=True
            )
            return None
