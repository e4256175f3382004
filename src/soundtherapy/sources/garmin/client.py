"""Thin wrapper over garminconnect for the daily summaries a reading needs."""

import logging
from datetime import date
from typing import Any

from garminconnect import Garmin  # type: ignore[import-untyped]

from soundtherapy.sources.garmin.auth import GarminAuth

logger = logging.getLogger(__name__)


class GarminClient:
    def __init__(self, auth: GarminAuth | None = None) -> None:
        self.auth = auth or GarminAuth()
        self._api: Garmin | None = None

    def connect(self) -> bool:
        """Authenticate and initialize the Garmin API client."""
        if not self.auth.login():
            return False

        try:
            self._api = Garmin()
            self._api.login()
        except Exception:
            logger.exception("Failed to initialize Garmin API client")
            self._api = None
            return False
        logger.info("Garmin API client connected")
        return True

    @property
    def api(self) -> Garmin:
        if self._api is None:
            raise RuntimeError("GarminClient not connected. Call connect() first.")
        return self._api

    def get_stats(self, day: date) -> dict[str, Any]:
        """Daily summary: steps, heart rate, average stress."""
        return self.api.get_stats(day.isoformat())  # type: ignore[no-any-return]

    def get_sleep_data(self, day: date) -> dict[str, Any]:
        return self.api.get_sleep_data(day.isoformat())  # type: ignore[no-any-return]

    def get_stress_data(self, day: date) -> dict[str, Any]:
        return self.api.get_stress_data(day.isoformat())  # type: ignore[no-any-return]
